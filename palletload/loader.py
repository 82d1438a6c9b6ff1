"""Reading trucks and pallets from CSV dataset files."""

from __future__ import annotations

import logging
import re
from os import PathLike

from .models import Pallet, Truck

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class DataLoadError(Exception):
    """Raised when a dataset file cannot be read or parsed."""


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise DataLoadError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise DataLoadError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise DataLoadError(f"invalid number: {text!r}")
    return float(match.group(1))


def _fields(line: str, count: int) -> list[str]:
    parts = line.split(",")
    if len(parts) < count:
        raise DataLoadError(f"expected {count} fields in line {line!r}")
    return parts[:count]


def parse_pallet_line(line: str) -> Pallet:
    """Parse an ``id,weight,profit`` line into a pallet."""
    id_text, weight_text, profit_text = _fields(line, 3)
    return Pallet.from_values(
        _parse_int(id_text), _parse_float(weight_text), _parse_float(profit_text)
    )


def parse_truck_line(line: str) -> Truck:
    """Parse a truck line whose first field is the capacity."""
    (capacity_text,) = _fields(line, 1)
    return Truck(capacity=_parse_float(capacity_text))


def _read_lines(path: str | PathLike[str]) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return [line.rstrip("\n") for line in handle]
    except OSError as exc:
        raise DataLoadError(f"could not open file {path}") from exc


def load_truck(path: str | PathLike[str]) -> Truck:
    """Load the truck described on the first data line after the header."""
    lines = _read_lines(path)
    if len(lines) < 2:
        raise DataLoadError(f"no truck data in {path}")
    return parse_truck_line(lines[1])


def load_pallets(path: str | PathLike[str]) -> list[Pallet]:
    """Load every well-formed pallet line after the header; bad lines are skipped."""
    pallets = []
    for line in _read_lines(path)[1:]:
        try:
            pallets.append(parse_pallet_line(line))
        except DataLoadError as exc:
            logger.warning("skipping pallet line: %s", exc)
    if not pallets:
        raise DataLoadError(f"no pallets in {path}")
    return pallets