"""Exact pallet selection by depth-first search with profit-bound pruning."""

from __future__ import annotations

import time
from collections.abc import Sequence
from itertools import accumulate

from .models import Pallet, Solution, Truck


def solve_backtracking(pallets: Sequence[Pallet], truck: Truck) -> Solution:
    """Find the most profitable set of pallets that fits the truck.

    Every pallet is either skipped or taken, skipping first; a branch is
    abandoned when even taking every remaining pallet could not beat the best
    profit found so far. The reported total profit is truncated to a whole
    number. Selected pallets keep their input order.
    """
    start = time.perf_counter_ns()
    solution = Solution(algorithm_name="Backtracking", truck=truck)

    items = list(pallets)
    count = len(items)
    # remaining_profit[i] is the combined profit of pallets i..end.
    remaining_profit = list(accumulate(reversed([p.profit for p in items]), initial=0.0))
    remaining_profit.reverse()

    best_profit = 0.0
    best_selection: list[Pallet] = []
    current: list[Pallet] = []

    def search(index: int, weight: float, profit: float) -> None:
        nonlocal best_profit, best_selection
        if index == count:
            if profit > best_profit:
                best_profit = profit
                best_selection = list(current)
            return

        if profit + remaining_profit[index] <= best_profit:
            return

        search(index + 1, weight, profit)

        pallet = items[index]
        if weight + pallet.weight <= truck.capacity:
            current.append(pallet)
            search(index + 1, weight + pallet.weight, profit + pallet.profit)
            current.pop()

    search(0, 0.0, 0.0)

    solution.selected_pallets = best_selection
    solution.total_profit = float(int(best_profit))
    solution.execution_time = float((time.perf_counter_ns() - start) // 1000)
    return solution