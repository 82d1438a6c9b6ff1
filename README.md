# palletload

Choose which pallets to load onto a delivery truck so that the total profit is
as large as possible without going over the truck's weight capacity. This is the
0/1 knapsack problem. Several solvers are included so you can compare their
results and running times:

- `palletload.greedy.solve_greedy`: takes pallets in order of profit-to-weight
  ratio, best first, and keeps each one that still fits. It is fast, but the
  result may not be optimal.
- `palletload.brute_force.solve_brute_force(pallets, truck, time_limit=30.0)`:
  tries every subset and keeps the most profitable one that fits. Weights and
  capacity are truncated to whole numbers for the fit check. If the search runs
  longer than `time_limit` seconds, the result has these properties:
  - it is marked `terminated`
  - `estimated_total_time` holds an estimate, in seconds, of a full run
  - `execution_time` is given in seconds
  - the selection is empty
- `palletload.dp.solve_dp`: dynamic programming over whole units of capacity.
  The capacity is truncated to an integer. A negative capacity raises
  `ValueError`.
- `palletload.backtracking.solve_backtracking`: an exact depth-first search
  that prunes branches which cannot beat the best profit found so far. The
  total profit it reports is truncated to a whole number.
- `palletload.ilp.solve_ilp`: a 0/1 integer linear program solved with SciPy's
  `milp`. The total profit it reports is truncated to a whole number. If the
  solver does not prove an optimum, the selection is left empty.

Each solver returns a `palletload.models.Solution` with these fields:

- `algorithm_name`
- `truck`
- `selected_pallets`
- `total_profit`
- `execution_time` (in microseconds, except for a terminated brute-force run)
- `terminated`
- `estimated_total_time`

`Solution.total_weight()` sums the weights of the selected pallets.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Interactive use

```
palletload
palletload --datasets-dir path/to/datasets
```

This opens a text menu with these options:

1. Select and load a dataset (1–10).
2. Select an algorithm: Greedy, Brute Force, Dynamic Programming or Integer
   Linear Programming.
3. Run the selected algorithm.
4. Run all four algorithms.
5. Display a comparison of the results, with an optional detailed view of one
   algorithm's result.
6. Clear the loaded data and results.
7. Help.
8. Exit.

Datasets are read from the `datasets` directory by default. Dataset *N* is made
of two files:

- `TruckAndPallets_NN.csv`: a header line, then a line whose first field is the
  capacity.
- `Pallets_NN.csv`: a header line, then lines of the form `id,weight,profit`.
  Lines that cannot be parsed are skipped.

A loaded dataset is checked before use. The check rejects the dataset in these
cases:

- there are no pallets
- a weight is not positive
- a profit is negative
- a pallet ID appears more than once
- the truck capacity is not positive

## Library use

```python
from palletload.models import Pallet, Truck
from palletload.dp import solve_dp
from palletload.greedy import solve_greedy
from palletload.report import format_single_result

pallets = [
    Pallet.from_values(1, 10, 60),
    Pallet.from_values(2, 20, 100),
    Pallet.from_values(3, 30, 120),
]
truck = Truck(capacity=50)

best = solve_dp(pallets, truck)
print(best.total_profit, best.total_weight())
print(format_single_result(solve_greedy(pallets, truck)))
```

Other helpers:

- `palletload.loader`: `load_truck`, `load_pallets`, `parse_truck_line` and
  `parse_pallet_line`. They raise `DataLoadError` when a file cannot be read or
  holds no usable data.
- `palletload.report`: these functions:
  - `validate_data`, which raises `ValidationError`
  - `algorithm_name`
  - `dataset_paths`
  - `format_single_result`
  - `format_comparison`, for a mapping of algorithm number to `Solution`
- `palletload.timer.Timer`: a stopwatch with `elapsed()`, `reset()` and
  `formatted()`. `formatted()` returns the time as `HH:MM:SS.sss`.

## What it does not do

- Results are only printed. They are not saved to a file.
- The backtracking solver can be called from Python but is not offered in the
  interactive menu.