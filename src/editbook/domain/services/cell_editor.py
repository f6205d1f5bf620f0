"""Content edits for address cells, gated by the constraint engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import ConstraintResult, MutationType
from .constraints import CellMutation, validate_mutation

if TYPE_CHECKING:
    from ..entities import Address, CaseConfiguration, Cell, Sticker

logger = logging.getLogger(__name__)

__all__ = [
    "add_sticker",
    "clear_cell",
    "edit_cell",
    "remove_sticker",
]


def _gate(
    config: "CaseConfiguration", cell_id: str, mutation_type: MutationType
) -> tuple["Cell", ConstraintResult]:
    cell = config.get_cell_by_id(cell_id)
    if cell is None:
        raise ValueError(f"Cell '{cell_id}' not found")
    violations = validate_mutation(config, CellMutation(mutation_type, cell))
    if violations:
        logger.warning(
            f"Rejected {mutation_type.value} of cell '{cell_id}': {violations[0].message}"
        )
        return cell, ConstraintResult.reject(violations[0])
    return cell, ConstraintResult.ok()


def edit_cell(
    config: "CaseConfiguration",
    cell_id: str,
    address: "Address | None" = None,
    street_color: str | None = None,
) -> ConstraintResult:
    """Assign an address and/or street color to an address cell.

    Arguments left as None keep the cell's current value.

    Raises:
        ValueError: If the cell does not exist.
    """
    cell, result = _gate(config, cell_id, MutationType.EDIT_CELL)
    if result.valid:
        if address is not None:
            cell.address = address
        if street_color is not None:
            cell.street_color = street_color
    return result


def clear_cell(config: "CaseConfiguration", cell_id: str) -> ConstraintResult:
    """Remove the address, street color and stickers from an address cell.

    Raises:
        ValueError: If the cell does not exist.
    """
    cell, result = _gate(config, cell_id, MutationType.CLEAR_CELL)
    if result.valid:
        cell.address = None
        cell.street_color = None
        cell.stickers = []
    return result


def add_sticker(
    config: "CaseConfiguration", cell_id: str, sticker: "Sticker"
) -> ConstraintResult:
    """Attach a sticker to an address cell.

    Raises:
        ValueError: If the cell does not exist.
    """
    cell, result = _gate(config, cell_id, MutationType.EDIT_CELL)
    if result.valid:
        cell.stickers.append(sticker)
    return result


def remove_sticker(
    config: "CaseConfiguration", cell_id: str, sticker_id: str
) -> ConstraintResult:
    """Detach a sticker from an address cell; unknown sticker ids are ignored.

    Raises:
        ValueError: If the cell does not exist.
    """
    cell, result = _gate(config, cell_id, MutationType.EDIT_CELL)
    if result.valid:
        cell.stickers = [s for s in cell.stickers if s.id != sticker_id]
    return result
