"""Equipment builder: construct wings and keep reserved cells consistent.

Reserved cells depend on which wings are leftmost and rightmost, so adding,
removing or swapping equipment can change the reserved layout of wings
that were not edited directly. Any wing whose role changed is rebuilt with
fresh one-inch address cells; addresses it held are reported as
unassigned so the caller can re-run placement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..entities import CaseConfiguration, Cell, Shelf, Wing
from ..value_objects import (
    FORM_3982_PER_SHELF,
    MAX_WINGS,
    RESERVED_STATUS_CODES,
    SHELF_COUNT,
    CellType,
    EquipmentType,
    equipment_spec,
)

logger = logging.getLogger(__name__)

WING_LABELS = ("Left Wing", "Middle Wing", "Right Wing", "Extra Wing")

__all__ = [
    "EquipmentChange",
    "EquipmentError",
    "WING_LABELS",
    "add_wing",
    "build_wing",
    "change_equipment",
    "create_case",
    "remove_wing",
]


class EquipmentError(Exception):
    """Raised when an equipment edit would produce an illegal case."""

    pass


@dataclass(frozen=True)
class EquipmentChange:
    """Outcome of an equipment edit.

    Attributes:
        wing_id: Wing that was added, removed or changed.
        rebuilt_wing_ids: Wings whose shelves were rebuilt.
        unassigned_address_ids: Addresses that lost their cell.
    """

    wing_id: str
    rebuilt_wing_ids: tuple[str, ...] = ()
    unassigned_address_ids: tuple[str, ...] = field(default_factory=tuple)


def _build_shelf(
    wing_id: str,
    shelf_number: int,
    cells_per_shelf: int,
    leftmost: bool,
    rightmost: bool,
) -> Shelf:
    cells: list[Cell] = []
    first = 1
    last = cells_per_shelf

    if leftmost:
        for n in range(1, FORM_3982_PER_SHELF + 1):
            cells.append(
                Cell(
                    id=f"{wing_id}-s{shelf_number}-form3982-{n}",
                    width_inches=1,
                    position_in_shelf=n,
                    cell_type=CellType.FORM_3982,
                    reserved_label="FORM 3982",
                )
            )
        first += FORM_3982_PER_SHELF

    status_cells: list[Cell] = []
    if rightmost and shelf_number == 1:
        last -= sum(code.width for code in RESERVED_STATUS_CODES)
        position = last + 1
        for code in RESERVED_STATUS_CODES:
            status_cells.append(
                Cell(
                    id=f"{wing_id}-s1-{code.cell_type.value}",
                    width_inches=code.width,
                    position_in_shelf=position,
                    cell_type=code.cell_type,
                    reserved_label=code.label,
                )
            )
            position += code.width

    for position in range(first, last + 1):
        cells.append(
            Cell(
                id=f"{wing_id}-s{shelf_number}-c{position}",
                width_inches=1,
                position_in_shelf=position,
            )
        )
    cells.extend(status_cells)
    return Shelf(shelf_number=shelf_number, cells=cells)


def build_wing(
    position: int,
    equipment_type: EquipmentType | str,
    leftmost: bool,
    rightmost: bool,
    label: str | None = None,
    wing_id: str | None = None,
) -> Wing:
    """Build a wing with one-inch address cells and its reserved cells.

    Args:
        position: Slot position 0-3.
        equipment_type: Equipment item for the wing.
        leftmost: Lay down Form 3982 cells at the start of every shelf.
        rightmost: Lay down the status-code run at the end of shelf 1.
        label: Display label; defaults to the slot's standard label.
        wing_id: Wing id; defaults to ``wing-<position>``.
    """
    spec = equipment_spec(equipment_type)
    if not 0 <= position < MAX_WINGS:
        raise EquipmentError(f"Wing position must be between 0 and {MAX_WINGS - 1}")
    wid = wing_id or f"wing-{position}"
    shelves = [
        _build_shelf(wid, n, spec.cells_per_shelf, leftmost, rightmost)
        for n in range(1, SHELF_COUNT + 1)
    ]
    return Wing(
        id=wid,
        equipment_type=EquipmentType(equipment_type),
        position=position,
        label=label or WING_LABELS[position],
        shelves=shelves,
    )


def create_case(
    slots: Sequence[EquipmentType | str | None], route_id: str = "default"
) -> CaseConfiguration:
    """Create a case from up to four slot selections (None = empty slot)."""
    if len(slots) > MAX_WINGS:
        raise EquipmentError(f"At most {MAX_WINGS} slots are supported")
    occupied = [(pos, slot) for pos, slot in enumerate(slots) if slot is not None]
    wings: list[Wing] = []
    for index, (pos, slot) in enumerate(occupied):
        wings.append(
            build_wing(
                position=pos,
                equipment_type=slot,
                leftmost=index == 0,
                rightmost=index == len(occupied) - 1,
            )
        )
    return CaseConfiguration(wings=wings, route_id=route_id)


def _has_role_cells(wing: Wing) -> tuple[bool, bool]:
    shelf_one = wing.shelf(1).cells
    has_form = any(c.cell_type is CellType.FORM_3982 for c in shelf_one)
    has_status = any(
        c.is_reserved and c.cell_type is not CellType.FORM_3982 for c in shelf_one
    )
    return has_form, has_status


def _rebuild(config: CaseConfiguration, wing: Wing) -> list[str]:
    """Rebuild a wing in place for its current role; returns lost address ids."""
    lost = wing.address_ids()
    first, last = config.wings[0], config.wings[-1]
    fresh = build_wing(
        position=wing.position,
        equipment_type=wing.equipment_type,
        leftmost=wing is first,
        rightmost=wing is last,
        label=wing.label,
        wing_id=wing.id,
    )
    wing.shelves = fresh.shelves
    return lost


def _sync_reserved_roles(
    config: CaseConfiguration, force: Wing | None = None
) -> EquipmentChange:
    rebuilt: list[str] = []
    lost: list[str] = []
    if config.wings:
        first, last = config.wings[0], config.wings[-1]
        for wing in config.wings:
            expected = (wing is first, wing is last)
            if wing is force or _has_role_cells(wing) != expected:
                lost.extend(_rebuild(config, wing))
                rebuilt.append(wing.id)
    if lost:
        logger.warning(
            f"Equipment change unassigned {len(lost)} address(es) "
            f"from wing(s) {', '.join(rebuilt)}"
        )
    return EquipmentChange(
        wing_id=force.id if force is not None else "",
        rebuilt_wing_ids=tuple(rebuilt),
        unassigned_address_ids=tuple(lost),
    )


def add_wing(
    config: CaseConfiguration,
    equipment_type: EquipmentType | str,
    position: int | None = None,
    label: str | None = None,
) -> EquipmentChange:
    """Add a wing to a free slot (the leftmost free slot by default).

    Raises:
        EquipmentError: If the case is full or the slot is taken.
    """
    taken = {wing.position for wing in config.wings}
    if position is None:
        free = [pos for pos in range(MAX_WINGS) if pos not in taken]
        if not free:
            raise EquipmentError(f"A case holds at most {MAX_WINGS} wings")
        position = free[0]
    if not 0 <= position < MAX_WINGS:
        raise EquipmentError(f"Wing position must be between 0 and {MAX_WINGS - 1}")
    if config.wing_at(position) is not None:
        raise EquipmentError(f"Slot {position} is already occupied")

    wing = build_wing(position, equipment_type, leftmost=False, rightmost=False, label=label)
    config.wings.append(wing)
    config.wings.sort(key=lambda w: w.position)
    change = _sync_reserved_roles(config, force=wing)
    logger.debug(f"Added {wing.equipment_type.value} wing at slot {position}")
    return change


def remove_wing(config: CaseConfiguration, wing_id: str) -> EquipmentChange:
    """Remove a wing; its addresses become unassigned.

    Raises:
        EquipmentError: If no wing has that id.
    """
    wing = config.get_wing(wing_id)
    if wing is None:
        raise EquipmentError(f"Wing '{wing_id}' not found")
    removed = wing.address_ids()
    config.wings.remove(wing)
    change = _sync_reserved_roles(config)
    logger.debug(f"Removed wing '{wing_id}' from slot {wing.position}")
    return EquipmentChange(
        wing_id=wing_id,
        rebuilt_wing_ids=change.rebuilt_wing_ids,
        unassigned_address_ids=tuple(removed) + change.unassigned_address_ids,
    )


def change_equipment(
    config: CaseConfiguration, wing_id: str, equipment_type: EquipmentType | str
) -> EquipmentChange:
    """Swap a wing's equipment item; the wing is rebuilt.

    Raises:
        EquipmentError: If no wing has that id.
        ValueError: If the equipment type is unknown.
    """
    wing = config.get_wing(wing_id)
    if wing is None:
        raise EquipmentError(f"Wing '{wing_id}' not found")
    wing.equipment_type = EquipmentType(equipment_type)
    change = _sync_reserved_roles(config, force=wing)
    logger.debug(f"Changed wing '{wing_id}' to {wing.equipment_type.value}")
    return change
