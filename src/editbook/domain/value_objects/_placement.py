"""Placement value objects produced by the placement engine."""

from __future__ import annotations

from dataclasses import dataclass

from ._equipment import SHELF_COUNT


@dataclass(frozen=True)
class Placement:
    """Assignment of one address to a run of cells.

    Attributes:
        address_id: Id of the placed address.
        wing_index: Index of the wing in the occupied-wing list (left to right).
        wing_position: Slot position (0-3) of that wing.
        shelf_number: Shelf the address was placed on (1-6).
        start_cell: 1-based cell number of the first cell used.
        cell_size: Number of cells used.
    """

    address_id: str
    wing_index: int
    wing_position: int
    shelf_number: int
    start_cell: int
    cell_size: int

    def __post_init__(self) -> None:
        if self.wing_index < 0:
            raise ValueError("Wing index must be non-negative")
        if not 1 <= self.shelf_number <= SHELF_COUNT:
            raise ValueError(f"Shelf number must be between 1 and {SHELF_COUNT}")
        if self.start_cell < 1:
            raise ValueError("Start cell must be at least 1")
        if self.cell_size < 1:
            raise ValueError("Placed cell size must be at least 1")

    @property
    def end_cell(self) -> int:
        """Last cell number used by this placement."""
        return self.start_cell + self.cell_size - 1


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of one placement run.

    Placements are regenerated wholesale on every run; a result never
    patches a previous one.

    Attributes:
        placements: Every placed address, in placement order.
        displaced_address_ids: Eligible addresses that did not fit anywhere,
            in input order.
        placed_count: Number of placed addresses.
        total_count: Number of eligible addresses (cell_size > 0).
    """

    placements: tuple[Placement, ...] = ()
    displaced_address_ids: tuple[str, ...] = ()
    placed_count: int = 0
    total_count: int = 0

    @property
    def displaced_count(self) -> int:
        """Number of eligible addresses left without a cell."""
        return self.total_count - self.placed_count

    @property
    def summary(self) -> str:
        """One-line placement summary."""
        if self.displaced_count > 0:
            return (
                f"PLACED {self.placed_count} OF {self.total_count} ADDRESSES. "
                f"{self.displaced_count} DISPLACED."
            )
        return f"PLACED {self.placed_count} OF {self.total_count} ADDRESSES."

    def placement_for(self, address_id: str) -> Placement | None:
        """Find the placement for an address id, if it was placed."""
        for placement in self.placements:
            if placement.address_id == address_id:
                return placement
        return None

    def placements_on(self, wing_index: int, shelf_number: int) -> list[Placement]:
        """Placements on one wing/shelf, ordered by start cell."""
        return sorted(
            (
                p
                for p in self.placements
                if p.wing_index == wing_index and p.shelf_number == shelf_number
            ),
            key=lambda p: p.start_cell,
        )
