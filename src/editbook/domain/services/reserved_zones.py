"""Reserved-zone calculation for carrier case wings.

The leftmost occupied wing gives up cell 1 of every shelf to Form 3982.
The rightmost occupied wing gives up the end of shelf 1 to the status-code
bins, packed contiguously in declared order and ending at the last cell of
the shelf. A single wing is both leftmost and rightmost.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..entities import OccupiedWing
from ..value_objects import (
    EQUIPMENT_SPECS,
    FORM_3982_PER_SHELF,
    MAX_WINGS,
    RESERVED_STATUS_CODES,
    SHELF_COUNT,
    EquipmentType,
    ShelfZone,
    StatusCode,
    StatusCodePlacement,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CaseStats",
    "ZoneTable",
    "compute_case_stats",
    "compute_reserved_zones",
]


@dataclass(frozen=True)
class ZoneTable:
    """Usable cell ranges per (wing index, shelf number).

    Wing indexes refer to the occupied-wing list passed to
    ``compute_reserved_zones``, not to slot positions.

    Attributes:
        wings: The occupied wings the table was computed from.
        zones: Mapping of (wing_index, shelf_number) to its usable range.
        status_codes: Status codes positioned on shelf 1 of the rightmost wing.
    """

    wings: tuple[OccupiedWing, ...] = ()
    zones: dict[tuple[int, int], ShelfZone] = field(default_factory=dict)
    status_codes: tuple[StatusCodePlacement, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no wing is occupied, so there is no usable capacity."""
        return not self.wings

    @property
    def leftmost_index(self) -> int | None:
        """Index of the wing that carries the Form 3982 cells."""
        return 0 if self.wings else None

    @property
    def rightmost_index(self) -> int | None:
        """Index of the wing that carries the status-code cells."""
        return len(self.wings) - 1 if self.wings else None

    @property
    def total_status_width(self) -> int:
        """Inches reserved for status codes on the rightmost wing."""
        return sum(sc.code.width for sc in self.status_codes)

    def zone(self, wing_index: int, shelf_number: int) -> ShelfZone:
        """Usable range for one wing/shelf.

        Raises:
            KeyError: If the wing index or shelf number is not in the table.
        """
        return self.zones[(wing_index, shelf_number)]

    def status_code_at(self, cell_number: int) -> StatusCodePlacement | None:
        """Status code covering an absolute cell number on shelf 1 of the
        rightmost wing, or None if the cell is not a status cell."""
        for placement in self.status_codes:
            if placement.covers(cell_number):
                return placement
        return None

    def is_reserved_cell(
        self, wing_index: int, shelf_number: int, cell_number: int
    ) -> bool:
        """Check whether a cell number falls outside the usable range."""
        zone = self.zones.get((wing_index, shelf_number))
        if zone is None:
            return False
        return cell_number < zone.first_free or cell_number > zone.last_usable


def _status_code_layout(
    cells_per_shelf: int, codes: Sequence[StatusCode]
) -> tuple[StatusCodePlacement, ...]:
    total = sum(code.width for code in codes)
    position = cells_per_shelf - total + 1
    layout: list[StatusCodePlacement] = []
    for code in codes:
        layout.append(StatusCodePlacement(code=code, start_cell=position))
        position += code.width
    return tuple(layout)


def compute_reserved_zones(
    occupied_wings: Sequence[OccupiedWing],
    status_codes: Sequence[StatusCode] = RESERVED_STATUS_CODES,
    form_3982_per_shelf: int = FORM_3982_PER_SHELF,
) -> ZoneTable:
    """Compute usable cell ranges for every occupied wing and shelf.

    Args:
        occupied_wings: Occupied wings in left-to-right position order.
        status_codes: Status-code definitions in packing order.
        form_3982_per_shelf: Cells reserved at the start of every shelf of
            the leftmost wing.

    Returns:
        A ZoneTable. Empty when ``occupied_wings`` is empty.
    """
    wings = tuple(sorted(occupied_wings, key=lambda w: w.position))
    if not wings:
        return ZoneTable()

    total_status_width = sum(code.width for code in status_codes)
    last = len(wings) - 1
    zones: dict[tuple[int, int], ShelfZone] = {}

    for wing_index, wing in enumerate(wings):
        for shelf_number in range(1, SHELF_COUNT + 1):
            first_free = 1
            last_usable = wing.cells_per_shelf
            if wing_index == 0:
                first_free += form_3982_per_shelf
            if wing_index == last and shelf_number == 1:
                last_usable -= total_status_width
            zones[(wing_index, shelf_number)] = ShelfZone(first_free, last_usable)

    layout = _status_code_layout(wings[last].cells_per_shelf, status_codes)
    logger.debug(
        f"Computed reserved zones for {len(wings)} wing(s); "
        f"status run starts at cell {layout[0].start_cell if layout else '-'}"
    )
    return ZoneTable(wings=wings, zones=zones, status_codes=layout)


@dataclass(frozen=True)
class CaseStats:
    """Capacity summary for a set of slot selections."""

    slot_labels: tuple[str, ...]
    total_cells: int
    reserved_cells: int
    form_3982_cells: int
    status_cells: int

    @property
    def usable_cells(self) -> int:
        """Cells available for addresses."""
        return self.total_cells - self.reserved_cells


def compute_case_stats(slots: Sequence[EquipmentType | str | None]) -> CaseStats:
    """Summarize capacity for up to four slot selections.

    Args:
        slots: Equipment type (or None) per slot position, left to right.

    Raises:
        ValueError: If more than four slots are given or a type is unknown.
    """
    if len(slots) > MAX_WINGS:
        raise ValueError(f"At most {MAX_WINGS} slots are supported")

    total_cells = 0
    labels: list[str] = []
    occupied = 0
    for slot in slots:
        if slot is None:
            labels.append("None")
            continue
        spec = EQUIPMENT_SPECS[EquipmentType(slot)]
        total_cells += spec.total_cells
        labels.append(spec.label)
        occupied += 1

    form_cells = SHELF_COUNT * FORM_3982_PER_SHELF if occupied else 0
    status_cells = sum(code.width for code in RESERVED_STATUS_CODES) if occupied else 0
    labels.extend(["None"] * (MAX_WINGS - len(labels)))
    return CaseStats(
        slot_labels=tuple(labels),
        total_cells=total_cells,
        reserved_cells=form_cells + status_cells,
        form_3982_cells=form_cells,
        status_cells=status_cells,
    )
