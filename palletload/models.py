"""Core data types: pallets, trucks and the solutions the algorithms produce."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pallet:
    """A pallet with its weight, profit and profit-to-weight ratio."""

    id: int
    weight: float
    profit: float
    weight_profit_ratio: float = 0.0

    @classmethod
    def from_values(cls, pallet_id: int, weight: float, profit: float) -> Pallet:
        """Build a pallet, computing its profit-to-weight ratio (0 for non-positive weight)."""
        ratio = profit / weight if weight > 0 else 0.0
        return cls(id=pallet_id, weight=weight, profit=profit, weight_profit_ratio=ratio)


@dataclass
class Truck:
    """A truck with a load capacity and the pallets currently loaded on it."""

    capacity: float = 0.0
    loaded_pallets: list[Pallet] = field(default_factory=list)


@dataclass
class Solution:
    """The outcome of running one pallet-selection algorithm.

    ``execution_time`` is measured in microseconds. ``terminated`` tells whether
    the run was cut short by a time limit, in which case ``estimated_total_time``
    holds an estimate, in seconds, of how long a full run would take.
    """

    algorithm_name: str
    truck: Truck
    selected_pallets: list[Pallet] = field(default_factory=list)
    total_profit: float = 0.0
    execution_time: float = 0.0
    terminated: bool = False
    estimated_total_time: float = 0.0

    def total_weight(self) -> float:
        """Return the combined weight of the selected pallets."""
        return sum(pallet.weight for pallet in self.selected_pallets)