"""Equipment, reserved-cell and cell-type value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SHELF_COUNT = 6
MAX_WINGS = 4

# Form 3982 reserves one cell per shelf on the leftmost occupied wing
FORM_3982_PER_SHELF = 1


class EquipmentType(str, Enum):
    """Carrier case equipment items that can occupy a wing slot."""

    ITEM_124D = "124-D"
    ITEM_143D = "143-D"
    ITEM_144D = "144-D"


class CellType(str, Enum):
    """Type tag for a cell.

    ADDRESS cells hold at most one address. Every other tag marks a
    reserved cell that user edits may not touch.
    """

    ADDRESS = "address"
    FORM_3982 = "form-3982"
    RESERVED_MACH = "reserved-mach"
    RESERVED_NONMACH = "reserved-nonmach"
    RESERVED_UTF = "reserved-utf"
    RESERVED_IA = "reserved-ia"
    RESERVED_NSN = "reserved-nsn"
    RESERVED_ANK = "reserved-ank"
    RESERVED_OTHER = "reserved-other"

    @property
    def is_reserved(self) -> bool:
        """Check whether this tag marks a reserved cell."""
        return self is not CellType.ADDRESS


@dataclass(frozen=True)
class EquipmentSpec:
    """Physical dimensions of one equipment item.

    Attributes:
        cells_per_shelf: Width of every shelf in inches (one inch per cell).
        total_cells: Cells across all six shelves.
        has_desk: Whether the item carries a desk surface.
        label: Display label.
        description: Short human-readable description.
    """

    cells_per_shelf: int
    total_cells: int
    has_desk: bool
    label: str
    description: str

    def __post_init__(self) -> None:
        if self.cells_per_shelf < 1:
            raise ValueError("cells_per_shelf must be at least 1")
        if self.total_cells != self.cells_per_shelf * SHELF_COUNT:
            raise ValueError("total_cells must equal cells_per_shelf * SHELF_COUNT")


EQUIPMENT_SPECS: dict[EquipmentType, EquipmentSpec] = {
    EquipmentType.ITEM_124D: EquipmentSpec(
        cells_per_shelf=40,
        total_cells=240,
        has_desk=False,
        label="Item 124-D",
        description="6-shelf carrier case, 40 cells/shelf",
    ),
    EquipmentType.ITEM_143D: EquipmentSpec(
        cells_per_shelf=20,
        total_cells=120,
        has_desk=False,
        label="Item 143-D",
        description="6-shelf half-width case, 20 cells/shelf",
    ),
    EquipmentType.ITEM_144D: EquipmentSpec(
        cells_per_shelf=40,
        total_cells=240,
        has_desk=True,
        label="Item 144-D",
        description="6-shelf carrier case with desk, 40 cells/shelf",
    ),
}


@dataclass(frozen=True)
class StatusCode:
    """A status-code sorting bin reserved at the end of shelf 1.

    Attributes:
        label: Short label printed on the cell (e.g. "UTF").
        full_name: Long description of the status.
        width: Width of the reserved run in inches.
        cell_type: Cell type tag used for the reserved cell.
    """

    label: str
    full_name: str
    width: int
    cell_type: CellType

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("Status code width must be at least 1")
        if not self.cell_type.is_reserved or self.cell_type is CellType.FORM_3982:
            raise ValueError("Status code cell_type must be a reserved status tag")


# Declared order is packing order: the run ends at cells_per_shelf
RESERVED_STATUS_CODES: tuple[StatusCode, ...] = (
    StatusCode("MACH", "Machineable", 1, CellType.RESERVED_MACH),
    StatusCode("NON-MACH", "Non-Machineable", 2, CellType.RESERVED_NONMACH),
    StatusCode("UTF", "Unable to Forward", 1, CellType.RESERVED_UTF),
    StatusCode("IA", "Insufficient Address", 1, CellType.RESERVED_IA),
    StatusCode("NSN", "No Such Number", 1, CellType.RESERVED_NSN),
    StatusCode("ANK", "Attempted Not Known", 1, CellType.RESERVED_ANK),
    StatusCode("OTHER", "Other", 1, CellType.RESERVED_OTHER),
)

TOTAL_STATUS_WIDTH = sum(code.width for code in RESERVED_STATUS_CODES)


def equipment_spec(equipment_type: EquipmentType | str) -> EquipmentSpec:
    """Look up the spec for an equipment type.

    Raises:
        ValueError: If the equipment type is unknown.
    """
    try:
        return EQUIPMENT_SPECS[EquipmentType(equipment_type)]
    except ValueError:
        valid = ", ".join(t.value for t in EquipmentType)
        raise ValueError(
            f"Unknown equipment type '{equipment_type}'. Valid types: {valid}"
        ) from None
