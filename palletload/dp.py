"""Dynamic-programming pallet selection (0-1 knapsack table)."""

from __future__ import annotations

import time
from collections.abc import Sequence

import numpy as np

from .models import Pallet, Solution, Truck


def solve_dp(pallets: Sequence[Pallet], truck: Truck) -> Solution:
    """Select the most profitable set of pallets that fits the truck.

    The capacity is truncated to a whole number of weight units; the table has
    one row per pallet and one column per unit of capacity.
    """
    start = time.perf_counter_ns()
    if truck.capacity < 0:
        raise ValueError(f"truck capacity must not be negative, got {truck.capacity}")

    solution = Solution(algorithm_name="Dynamic Programming", truck=truck)
    capacity = int(truck.capacity)
    columns = np.arange(capacity + 1)
    table = np.zeros((len(pallets) + 1, capacity + 1))

    for row, pallet in enumerate(pallets, start=1):
        previous = table[row - 1]
        table[row] = previous
        fits = columns >= pallet.weight
        sources = (columns[fits] - pallet.weight).astype(np.int64)
        table[row, fits] = np.maximum(previous[fits], previous[sources] + pallet.profit)

    remaining = capacity
    total_profit = 0.0
    for row, pallet in reversed(list(enumerate(pallets, start=1))):
        if table[row - 1, remaining] != table[row, remaining]:
            solution.selected_pallets.append(pallet)
            remaining = int(remaining - pallet.weight)
            total_profit += pallet.profit

    solution.total_profit = total_profit
    solution.execution_time = float((time.perf_counter_ns() - start) // 1000)
    return solution