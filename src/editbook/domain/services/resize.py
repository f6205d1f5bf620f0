"""Neighbor-displacement resize resolution.

A resize is zero-sum within one shelf: growing a cell takes width from the
non-reserved cells to its right (each may shrink to one inch), shrinking a
cell hands the freed width to the first non-reserved cell to its right.
Reserved cells are skipped and never change width.

Shrinking a cell that has no eligible right neighbor still succeeds. The
freed width stays as an unallocated gap directly after the cell and is
reported on the result, so the shelf total drops below capacity instead of
being silently reconciled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import (
    MutationType,
    ResizeResult,
    ViolationKind,
    WidthAdjustment,
)
from .constraints import (
    MIN_CELL_WIDTH,
    CellMutation,
    validate_min_width,
    validate_reserved_protection,
)

if TYPE_CHECKING:
    from ..entities import CaseConfiguration

logger = logging.getLogger(__name__)

__all__ = [
    "apply_resize",
    "resolve_resize",
]


def resolve_resize(
    config: "CaseConfiguration", cell_id: str, new_width: int
) -> ResizeResult:
    """Compute the neighbor adjustments needed to resize one cell.

    Args:
        config: Case configuration; not modified.
        cell_id: Cell being resized.
        new_width: Proposed width in inches.

    Returns:
        ResizeResult. For a clamped expansion ``max_width`` is the width
        that can actually be granted and ``violation`` is
        INFEASIBLE_RESIZE.
    """
    location = config.locate_cell(cell_id)
    if location is None:
        return ResizeResult(valid=False, max_width=0, message=f"Cell '{cell_id}' not found")

    cell = location.cell
    current = cell.width_inches

    reserved = validate_reserved_protection(
        CellMutation(MutationType.RESIZE_CELL, cell, new_width)
    )
    if reserved.violation is not None:
        return ResizeResult(
            valid=False,
            max_width=current,
            message="Cannot resize reserved cell",
            violation=ViolationKind.RESERVED_CELL,
        )

    minimum = validate_min_width(cell, new_width)
    if minimum.violation is not None:
        return ResizeResult(
            valid=False,
            max_width=current,
            message=minimum.violation.message,
            violation=ViolationKind.MIN_WIDTH,
        )

    delta = new_width - current
    if delta == 0:
        return ResizeResult(valid=True, max_width=new_width)

    neighbors = location.shelf.cells[location.index + 1 :]
    adjustments: list[WidthAdjustment] = []

    if delta > 0:
        remaining = delta
        for neighbor in neighbors:
            if remaining <= 0:
                break
            if neighbor.is_reserved:
                continue
            can_shrink = neighbor.width_inches - MIN_CELL_WIDTH
            if can_shrink <= 0:
                continue
            amount = min(remaining, can_shrink)
            adjustments.append(
                WidthAdjustment(neighbor.id, neighbor.width_inches, neighbor.width_inches - amount)
            )
            remaining -= amount

        if remaining > 0:
            granted = delta - remaining
            logger.debug(
                f"Resize of cell '{cell_id}' clamped: requested +{delta}, granted +{granted}"
            )
            return ResizeResult(
                valid=granted > 0,
                adjustments=tuple(adjustments),
                max_width=current + granted,
                message=f'Can only expand by {granted}" (neighbors at minimum width)',
                violation=ViolationKind.INFEASIBLE_RESIZE,
            )
        return ResizeResult(valid=True, adjustments=tuple(adjustments), max_width=new_width)

    freed = -delta
    for neighbor in neighbors:
        if neighbor.is_reserved:
            continue
        adjustments.append(
            WidthAdjustment(neighbor.id, neighbor.width_inches, neighbor.width_inches + freed)
        )
        return ResizeResult(valid=True, adjustments=tuple(adjustments), max_width=new_width)

    logger.debug(f"Shrink of cell '{cell_id}' left {freed}\" unallocated")
    return ResizeResult(
        valid=True,
        max_width=new_width,
        message=f'No neighbor can absorb the freed width; {freed}" left unallocated',
        unallocated_width=freed,
    )


def apply_resize(config: "CaseConfiguration", cell_id: str, result: ResizeResult) -> None:
    """Commit a resize result to the configuration in one step.

    Sets the target to ``result.max_width``, applies every adjustment and
    re-flows positions from the target through the last adjusted neighbor.
    Cells further right keep their positions, so an unallocated gap stays
    directly after the shrunk cell.

    Raises:
        ValueError: If the result is invalid or refers to cells that are
            not on the target's shelf.
    """
    if not result.valid:
        raise ValueError(f"Cannot apply invalid resize of cell '{cell_id}'")

    location = config.locate_cell(cell_id)
    if location is None:
        raise ValueError(f"Cell '{cell_id}' not found")

    shelf = location.shelf
    indexes = {adj.cell_id: shelf.index_of(adj.cell_id) for adj in result.adjustments}
    missing = [cid for cid, index in indexes.items() if index <= location.index]
    if missing:
        raise ValueError(
            f"Adjusted cells {missing} are not right of '{cell_id}' on its shelf"
        )

    location.cell.width_inches = result.max_width
    for adj in result.adjustments:
        shelf.cells[indexes[adj.cell_id]].width_inches = adj.new_width

    if indexes:
        shelf.reflow(location.index, max(indexes.values()))
    logger.debug(
        f"Applied resize of cell '{cell_id}' to {result.max_width}\" "
        f"with {len(result.adjustments)} adjustment(s)"
    )
