"""Exhaustive pallet selection over every subset, bounded by a time limit."""

from __future__ import annotations

import time
from collections.abc import Sequence

from .models import Pallet, Solution, Truck

DEFAULT_TIME_LIMIT = 30.0
"""Seconds after which the exhaustive search gives up."""

_SECONDS_PER_COMBINATION = 1000.0 / 1e9


def solve_brute_force(
    pallets: Sequence[Pallet], truck: Truck, time_limit: float = DEFAULT_TIME_LIMIT
) -> Solution:
    """Try every subset of pallets and keep the most profitable one that fits.

    Weights and capacity are truncated to whole numbers for the fit check.
    Subsets are visited in binary-counting order and only a strictly better
    profit replaces the current best, so among equal profits the first subset
    visited wins.

    If the search runs longer than ``time_limit`` seconds it stops: the result
    is then marked ``terminated``, carries an estimate of the full run time in
    ``estimated_total_time`` and reports ``execution_time`` in seconds; the
    best selection found before stopping is not kept. A completed run reports
    ``execution_time`` in microseconds.
    """
    start = time.perf_counter()
    solution = Solution(algorithm_name="Brute Force", truck=truck)

    items = list(pallets)
    max_weight = int(truck.capacity)
    combinations = 1 << len(items)
    estimated_seconds = combinations * _SECONDS_PER_COMBINATION

    for mask in range(combinations):
        elapsed = time.perf_counter() - start
        if elapsed > time_limit:
            solution.terminated = True
            solution.estimated_total_time = estimated_seconds
            solution.execution_time = elapsed
            solution.selected_pallets = []
            solution.total_profit = 0.0
            return solution

        chosen = [pallet for bit, pallet in enumerate(items) if mask >> bit & 1]
        total_weight = sum(int(pallet.weight) for pallet in chosen)
        total_profit = sum(pallet.profit for pallet in chosen)

        if total_weight <= max_weight and total_profit > solution.total_profit:
            solution.total_profit = total_profit
            solution.selected_pallets = chosen

    solution.execution_time = float(int((time.perf_counter() - start) * 1_000_000))
    return solution