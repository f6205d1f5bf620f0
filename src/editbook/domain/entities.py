"""Domain entities for carrier case layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .value_objects import (
    MAX_WINGS,
    SHELF_COUNT,
    CellType,
    EquipmentType,
    equipment_spec,
)


@dataclass
class Address:
    """A delivery address to be placed into the case.

    Attributes:
        id: Unique address identifier.
        cell_size: Number of cells the address needs. 0 means "do not place".
        address_number: House or building number.
        street_name: Street name.
        unit: Optional unit/apartment designator.
        sequence: Delivery point sequence from the caller's address list.
        street_color: Optional street color used when rendering.
    """

    id: str
    cell_size: int
    address_number: str = ""
    street_name: str = ""
    unit: str = ""
    sequence: int | None = None
    street_color: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Address id is required")
        if self.cell_size < 0:
            raise ValueError("Address cell_size cannot be negative")

    @property
    def is_placeable(self) -> bool:
        """Check whether the placement engine should try to place this address."""
        return self.cell_size > 0

    @property
    def display_name(self) -> str:
        """Short display form such as '123 Main St #4'."""
        text = " ".join(part for part in (self.address_number, self.street_name) if part)
        if self.unit:
            text = f"{text} #{self.unit}"
        return text or self.id


@dataclass
class Sticker:
    """An annotation attached to a cell (hold, vacant, note...)."""

    id: str
    sticker_type: str
    text: str = ""


@dataclass
class Cell:
    """The atomic allocatable unit of a shelf.

    Attributes:
        id: Unique cell identifier.
        width_inches: Cell width in inches.
        position_in_shelf: 1-based number of the first inch the cell covers.
        cell_type: ADDRESS, or one of the reserved tags.
        address: Address held by an ADDRESS cell, if any.
        street_color: Optional street color for ADDRESS cells.
        stickers: Annotations attached to the cell.
        reserved_label: Display label for reserved cells.
    """

    id: str
    width_inches: int
    position_in_shelf: int
    cell_type: CellType = CellType.ADDRESS
    address: Address | None = None
    street_color: str | None = None
    stickers: list[Sticker] = field(default_factory=list)
    reserved_label: str | None = None

    def __post_init__(self) -> None:
        self.cell_type = CellType(self.cell_type)
        if self.position_in_shelf < 1:
            raise ValueError("Cell position_in_shelf is 1-based and must be at least 1")
        if self.cell_type.is_reserved and self.address is not None:
            raise ValueError("Reserved cells cannot hold an address")

    @property
    def is_reserved(self) -> bool:
        """Check whether this cell is protected from user edits."""
        return self.cell_type.is_reserved

    @property
    def end_position(self) -> int:
        """Last inch covered by this cell (1-based, inclusive)."""
        return self.position_in_shelf + self.width_inches - 1

    @property
    def is_empty(self) -> bool:
        """Check whether an address cell holds no address and no stickers."""
        return self.address is None and not self.stickers


@dataclass
class Shelf:
    """One row of cells within a wing."""

    shelf_number: int
    cells: list[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 1 <= self.shelf_number <= SHELF_COUNT:
            raise ValueError(f"Shelf number must be between 1 and {SHELF_COUNT}")

    @property
    def total_width(self) -> int:
        """Sum of all cell widths on this shelf."""
        return sum(cell.width_inches for cell in self.cells)

    def index_of(self, cell_id: str) -> int:
        """Index of a cell on this shelf, or -1 if absent."""
        for index, cell in enumerate(self.cells):
            if cell.id == cell_id:
                return index
        return -1

    def reflow(self, start_index: int = 0, stop_index: int | None = None) -> None:
        """Recompute contiguous positions for cells after ``start_index``.

        Cells from ``start_index + 1`` up to and including ``stop_index``
        are moved to sit directly after their left neighbor.
        """
        last = len(self.cells) - 1 if stop_index is None else stop_index
        for index in range(start_index + 1, last + 1):
            previous = self.cells[index - 1]
            self.cells[index].position_in_shelf = (
                previous.position_in_shelf + previous.width_inches
            )


@dataclass
class Wing:
    """One equipment unit occupying a slot position, with six shelves.

    Attributes:
        id: Unique wing identifier.
        equipment_type: Equipment item, which fixes the shelf width.
        position: Slot position 0-3, left to right.
        label: Display label.
        shelves: Exactly six shelves numbered 1-6. Empty shelves are
            created when none are given.
    """

    id: str
    equipment_type: EquipmentType
    position: int
    label: str = ""
    shelves: list[Shelf] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.equipment_type = EquipmentType(self.equipment_type)
        if not 0 <= self.position < MAX_WINGS:
            raise ValueError(f"Wing position must be between 0 and {MAX_WINGS - 1}")
        if not self.shelves:
            self.shelves = [Shelf(shelf_number=n) for n in range(1, SHELF_COUNT + 1)]
        numbers = [shelf.shelf_number for shelf in self.shelves]
        if numbers != list(range(1, SHELF_COUNT + 1)):
            raise ValueError(
                f"Wing must have exactly {SHELF_COUNT} shelves numbered 1-{SHELF_COUNT}"
            )

    @property
    def cells_per_shelf(self) -> int:
        """Shelf width in inches for this equipment item."""
        return equipment_spec(self.equipment_type).cells_per_shelf

    @property
    def total_cells(self) -> int:
        """Total cell inches across all six shelves."""
        return equipment_spec(self.equipment_type).total_cells

    def shelf(self, shelf_number: int) -> Shelf:
        """Get a shelf by its number (1-6)."""
        if not 1 <= shelf_number <= SHELF_COUNT:
            raise ValueError(f"Shelf number must be between 1 and {SHELF_COUNT}")
        return self.shelves[shelf_number - 1]

    def address_ids(self) -> list[str]:
        """Ids of every address held by a cell on this wing."""
        return [
            cell.address.id
            for shelf in self.shelves
            for cell in shelf.cells
            if cell.address is not None
        ]


@dataclass(frozen=True)
class OccupiedWing:
    """Occupancy input for zone calculation and placement.

    Built by callers from whatever equipment structure they own.
    """

    position: int
    equipment_type: EquipmentType
    cells_per_shelf: int

    @classmethod
    def from_type(
        cls, position: int, equipment_type: EquipmentType | str
    ) -> "OccupiedWing":
        """Build an occupied wing from a slot position and equipment type."""
        etype = EquipmentType(equipment_type)
        return cls(
            position=position,
            equipment_type=etype,
            cells_per_shelf=equipment_spec(etype).cells_per_shelf,
        )


@dataclass(frozen=True)
class CellLocation:
    """Where a cell lives inside a case configuration."""

    wing: Wing
    shelf: Shelf
    index: int

    @property
    def cell(self) -> Cell:
        """The located cell."""
        return self.shelf.cells[self.index]


@dataclass
class CaseConfiguration:
    """A complete carrier case: up to four wings ordered by slot position.

    Attributes:
        wings: Occupied wings. Kept sorted by position; positions are unique.
        route_id: Identifier of the route this case belongs to.
    """

    wings: list[Wing] = field(default_factory=list)
    route_id: str = "default"

    def __post_init__(self) -> None:
        if len(self.wings) > MAX_WINGS:
            raise ValueError(f"A case holds at most {MAX_WINGS} wings")
        positions = [wing.position for wing in self.wings]
        if len(set(positions)) != len(positions):
            raise ValueError("Wing positions must be unique")
        self.wings.sort(key=lambda wing: wing.position)

    def occupied_wings(self) -> list[OccupiedWing]:
        """Occupied wings in left-to-right position order."""
        return [
            OccupiedWing(
                position=wing.position,
                equipment_type=wing.equipment_type,
                cells_per_shelf=wing.cells_per_shelf,
            )
            for wing in self.wings
        ]

    def slots(self) -> list[EquipmentType | None]:
        """Equipment type per slot position, None for empty slots."""
        slots: list[EquipmentType | None] = [None] * MAX_WINGS
        for wing in self.wings:
            slots[wing.position] = wing.equipment_type
        return slots

    def get_wing(self, wing_id: str) -> Wing | None:
        """Find a wing by id."""
        for wing in self.wings:
            if wing.id == wing_id:
                return wing
        return None

    def wing_at(self, position: int) -> Wing | None:
        """Find the wing occupying a slot position."""
        for wing in self.wings:
            if wing.position == position:
                return wing
        return None

    def iter_cells(self) -> Iterator[CellLocation]:
        """Iterate over every cell with its location, left to right, bottom up."""
        for wing in self.wings:
            for shelf in wing.shelves:
                for index in range(len(shelf.cells)):
                    yield CellLocation(wing=wing, shelf=shelf, index=index)

    def locate_cell(self, cell_id: str) -> CellLocation | None:
        """Find the wing, shelf and index holding a cell."""
        for wing in self.wings:
            for shelf in wing.shelves:
                index = shelf.index_of(cell_id)
                if index != -1:
                    return CellLocation(wing=wing, shelf=shelf, index=index)
        return None

    def get_cell_by_id(self, cell_id: str) -> Cell | None:
        """Find a cell by id."""
        location = self.locate_cell(cell_id)
        return location.cell if location is not None else None
