"""Dataset validation, naming and text formatting of algorithm results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from os import PathLike
from pathlib import Path

from .models import Pallet, Solution, Truck

MAX_DATASETS = 10
MAX_ALGORITHMS = 4

ALGORITHM_NAMES = {
    1: "Greedy",
    2: "Brute Force",
    3: "Dynamic Programming",
    4: "Integer Linear Programming",
}

_SINGLE_TOP = "╔════════════════════════════════════════════════════╗"
_SINGLE_SEP = "╠════════════════════════════════════════════════════╣"
_SINGLE_BOTTOM = "╚════════════════════════════════════════════════════╝"

_WIDE_TOP = "╔═════════════════════════════════════════════════════════════════════════════════╗"
_WIDE_SEP = "╠═════════════════════════════════════════════════════════════════════════════════╣"
_WIDE_BOTTOM = "╚═════════════════════════════════════════════════════════════════════════════════╝"


class ValidationError(Exception):
    """Raised when loaded truck or pallet data is inconsistent."""


def validate_data(truck: Truck, pallets: Iterable[Pallet]) -> None:
    """Check that pallets exist, are sane and unique, and the truck has capacity."""
    pallets = list(pallets)
    if not pallets:
        raise ValidationError("No pallets loaded.")

    seen: set[int] = set()
    for pallet in pallets:
        if pallet.weight <= 0:
            raise ValidationError(f"Pallet {pallet.id} has invalid weight.")
        if pallet.profit < 0:
            raise ValidationError(f"Pallet {pallet.id} has negative profit.")
        if pallet.id in seen:
            raise ValidationError(f"Duplicate pallet ID {pallet.id} found.")
        seen.add(pallet.id)

    if truck.capacity <= 0:
        raise ValidationError("Invalid truck capacity.")


def algorithm_name(number: int) -> str:
    """Return the display name of an algorithm number, or ``Unknown``."""
    return ALGORITHM_NAMES.get(number, "Unknown")


def dataset_paths(datasets_dir: str | PathLike[str], number: int) -> tuple[Path, Path]:
    """Return the truck file and pallet file paths of a numbered dataset."""
    base = Path(datasets_dir)
    suffix = f"{number:02d}.csv"
    return base / f"TruckAndPallets_{suffix}", base / f"Pallets_{suffix}"


def _render(lines: list[str]) -> str:
    return "\n" + "".join(f"{line}\n" for line in lines) + "\n"


def format_single_result(solution: Solution) -> str:
    """Render one solution as a detailed box, listing its selected pallets."""
    lines = [
        _SINGLE_TOP,
        "║              Detailed Results                      ║",
        _SINGLE_SEP,
        f"║ Algorithm: {solution.algorithm_name:<40}║",
        f"║ Truck Capacity: {solution.truck.capacity:<32.2f}kg ║",
        f"║ Total Profit: ${solution.total_profit:<36.2f}║",
        f"║ Execution Time: {solution.execution_time:<32.2f}ms ║",
    ]
    if solution.terminated:
        estimate = solution.estimated_total_time
        lines += [
            _SINGLE_SEP,
            "║ !!!Algorithm terminated at 30s limit!!!            ║",
            f"║ Estimated total time: {estimate:<27.2f}s ║",
            f"║ (approximately {estimate / 3600.0:<33.2f}h) ║",
            "║ Results shown are best found so far                ║",
        ]
    lines += [
        _SINGLE_SEP,
        "║ Selected Pallets:                                  ║",
        "║ ID    Weight          Profit                       ║",
        _SINGLE_SEP,
    ]
    lines += [
        f"║ {pallet.id:<6}{pallet.weight:<19.2f}{pallet.profit:<8.2f}{' ' * 18}║"
        for pallet in solution.selected_pallets
    ]
    lines.append(_SINGLE_BOTTOM)
    return _render(lines)


def format_comparison(results: Mapping[int, Solution]) -> str:
    """Render a comparison table of results keyed by algorithm number, in key order."""
    lines = [
        _WIDE_TOP,
        "║                               Comparison Results                                ║",
        _WIDE_SEP,
        "║ Algorithm                           Profit                           Time (ms)  ║",
        _WIDE_SEP,
    ]
    for number, solution in sorted(results.items()):
        lines.append(
            f"║ {algorithm_name(number):<26}"
            f"{solution.total_profit:>17.2f}"
            f"{solution.execution_time:>34.2f}   ║"
        )
        if solution.terminated:
            lines.append(
                "║ ⚠ Terminated at 30s -               Estimated Time: "
                f"{solution.estimated_total_time:>26.2f}s ║"
            )
    lines.append(_WIDE_BOTTOM)
    return _render(lines)