import random

import pytest

from palletload.backtracking import solve_backtracking
from palletload.brute_force import DEFAULT_TIME_LIMIT, solve_brute_force
from palletload.dp import solve_dp
from palletload.models import Pallet, Truck


def _pallets(rows):
    return [Pallet.from_values(i, w, p) for i, (w, p) in enumerate(rows, start=1)]


def _random_instance(seed):
    rng = random.Random(seed)
    rows = [(rng.randint(1, 20), rng.randint(0, 50)) for _ in range(rng.randint(1, 10))]
    return _pallets(rows), Truck(capacity=rng.randint(1, 60))


def test_classic_instance_agrees_with_other_solvers():
    pallets = _pallets([(10, 60), (20, 100), (30, 120)])
    truck = Truck(capacity=50)
    solution = solve_brute_force(pallets, truck)
    assert solution.total_profit == solve_dp(pallets, truck).total_profit
    assert solution.total_profit == solve_backtracking(pallets, truck).total_profit
    assert solution.terminated is False


def test_algorithm_name_and_truck():
    truck = Truck(capacity=10)
    solution = solve_brute_force(_pallets([(3, 4)]), truck)
    assert solution.algorithm_name == "Brute Force"
    assert solution.truck is truck


def test_default_time_limit_lets_small_search_finish():
    pallets = _pallets([(1, 1), (2, 2), (3, 3)])
    truck = Truck(capacity=4)
    default = solve_brute_force(pallets, truck)
    explicit = solve_brute_force(pallets, truck, time_limit=DEFAULT_TIME_LIMIT)
    assert default.terminated is False
    assert explicit.terminated is False
    assert default.total_profit == 4
    assert explicit.selected_pallets == default.selected_pallets


@pytest.mark.parametrize("seed", range(15))
def test_matches_dynamic_programming(seed):
    pallets, truck = _random_instance(seed)
    solution = solve_brute_force(pallets, truck)
    assert solution.total_profit == solve_dp(pallets, truck).total_profit
    assert solution.total_weight() <= truck.capacity
    assert sum(p.profit for p in solution.selected_pallets) == solution.total_profit


def test_first_subset_wins_ties():
    pallets = _pallets([(5, 10), (5, 10)])
    solution = solve_brute_force(pallets, Truck(capacity=5))
    assert solution.selected_pallets == [pallets[0]]


def test_weights_are_truncated_for_fit_check():
    pallets = _pallets([(5.9, 7)])
    solution = solve_brute_force(pallets, Truck(capacity=5))
    assert solution.selected_pallets == pallets


def test_time_limit_terminates_search():
    pallets = _pallets([(1, 1), (2, 2), (3, 3)])
    solution = solve_brute_force(pallets, Truck(capacity=10), time_limit=-1.0)
    assert solution.terminated is True
    assert solution.estimated_total_time == pytest.approx(8e-6)
    assert solution.selected_pallets == []
    assert solution.total_profit == 0


def test_estimate_doubles_with_each_pallet():
    truck = Truck(capacity=10)
    small = solve_brute_force(_pallets([(1, 1)] * 4), truck, time_limit=-1.0)
    large = solve_brute_force(_pallets([(1, 1)] * 5), truck, time_limit=-1.0)
    assert large.estimated_total_time == pytest.approx(2 * small.estimated_total_time)


def test_empty_input():
    solution = solve_brute_force([], Truck(capacity=10))
    assert solution.selected_pallets == []
    assert solution.total_profit == 0
    assert solution.terminated is False