"""Greedy pallet selection by profit-to-weight ratio."""

from __future__ import annotations

import time
from collections.abc import Sequence

from .models import Pallet, Solution, Truck


def solve_greedy(pallets: Sequence[Pallet], truck: Truck) -> Solution:
    """Select pallets best ratio first, taking each one that still fits.

    Fast, but the result is not guaranteed to be optimal.
    """
    start = time.perf_counter_ns()
    solution = Solution(algorithm_name="Greedy", truck=truck)

    ranked = sorted(pallets, key=lambda pallet: pallet.weight_profit_ratio, reverse=True)

    current_weight = 0.0
    for pallet in ranked:
        if current_weight + pallet.weight <= truck.capacity:
            solution.selected_pallets.append(pallet)
            current_weight += pallet.weight
            solution.total_profit += pallet.profit

    solution.execution_time = float((time.perf_counter_ns() - start) // 1000)
    return solution