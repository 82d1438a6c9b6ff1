"""Exact pallet selection as a 0-1 integer linear program."""

from __future__ import annotations

import time
from collections.abc import Sequence

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp

from .models import Pallet, Solution, Truck

_OPTIMAL = 0


def solve_ilp(pallets: Sequence[Pallet], truck: Truck) -> Solution:
    """Select pallets by solving the 0-1 knapsack model with a MILP solver.

    One binary variable per pallet; maximise total profit subject to the total
    weight lying between 0 and the truck capacity. If the solver does not
    reach a proven optimum, the solution is left empty with zero profit. The
    reported total profit is truncated to a whole number.
    """
    start = time.perf_counter_ns()
    solution = Solution(algorithm_name="Integer Linear Programming", truck=truck)

    items = list(pallets)
    if not items:
        if truck.capacity >= 0:
            solution.total_profit = 0.0
        solution.execution_time = float((time.perf_counter_ns() - start) // 1000)
        return solution

    weights = np.array([pallet.weight for pallet in items], dtype=float)
    profits = np.array([pallet.profit for pallet in items], dtype=float)

    result = milp(
        c=-profits,
        integrality=np.ones(len(items)),
        bounds=Bounds(0, 1),
        constraints=LinearConstraint(weights.reshape(1, -1), lb=0.0, ub=truck.capacity),
    )

    if result.status == _OPTIMAL and result.x is not None:
        # Rounding to a few decimals first absorbs solver noise before truncation.
        solution.total_profit = float(int(round(-result.fun, 6)))
        solution.selected_pallets = [
            pallet for pallet, value in zip(items, result.x) if value > 0.5
        ]

    solution.execution_time = float((time.perf_counter_ns() - start) // 1000)
    return solution