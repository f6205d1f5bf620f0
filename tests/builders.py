"""Builders for hand-laid case layouts used across tests."""

from __future__ import annotations

from editbook.domain.entities import CaseConfiguration, Cell, Shelf, Wing
from editbook.domain.value_objects import SHELF_COUNT, CellType, EquipmentType


def make_cells(widths: list[int], prefix: str = "c", start: int = 1) -> list[Cell]:
    """Contiguous address cells with the given widths, ids c1, c2, ..."""
    cells: list[Cell] = []
    position = start
    for n, width in enumerate(widths, start=1):
        cells.append(
            Cell(id=f"{prefix}{n}", width_inches=width, position_in_shelf=position)
        )
        position += max(width, 0)
    return cells


def make_wing(
    shelf_one: list[Cell],
    equipment_type: EquipmentType | str = EquipmentType.ITEM_124D,
    position: int = 0,
    wing_id: str = "w0",
) -> Wing:
    """A wing whose shelf 1 holds the given cells and whose other shelves are empty."""
    shelves = [Shelf(shelf_number=1, cells=shelf_one)] + [
        Shelf(shelf_number=n) for n in range(2, SHELF_COUNT + 1)
    ]
    return Wing(
        id=wing_id,
        equipment_type=EquipmentType(equipment_type),
        position=position,
        shelves=shelves,
    )


def make_case(
    shelf_one: list[Cell],
    equipment_type: EquipmentType | str = EquipmentType.ITEM_124D,
) -> CaseConfiguration:
    """A single-wing case with the given cells on shelf 1."""
    return CaseConfiguration(wings=[make_wing(shelf_one, equipment_type)])


def reserved_cell(cell_id: str, position: int, width: int = 1) -> Cell:
    """A reserved status cell."""
    return Cell(
        id=cell_id,
        width_inches=width,
        position_in_shelf=position,
        cell_type=CellType.RESERVED_UTF,
        reserved_label="UTF",
    )


def explicit_shelves(shelf_one_cells: list[dict]) -> list[dict]:
    """Case file shelves: the given cells on shelf 1, shelves 2-6 empty."""
    return [{"shelf_number": 1, "cells": shelf_one_cells}] + [
        {"shelf_number": n, "cells": []} for n in range(2, SHELF_COUNT + 1)
    ]
