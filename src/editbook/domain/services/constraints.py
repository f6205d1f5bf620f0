"""Constraint engine for case configurations.

Pure validators for individual rules, a fail-open aggregator for proposed
cell mutations, whole-configuration validation and auto-resolution of
single-cell width violations. Rejections are returned as values, never
raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..value_objects import (
    ConstraintResult,
    FixAction,
    MutationType,
    SuggestedFix,
    Violation,
    ViolationKind,
    WidthAdjustment,
)

if TYPE_CHECKING:
    from ..entities import CaseConfiguration, Cell, Shelf, Wing

logger = logging.getLogger(__name__)

MIN_CELL_WIDTH = 1

__all__ = [
    "MIN_CELL_WIDTH",
    "CellMutation",
    "auto_resolve",
    "validate_all",
    "validate_configuration",
    "validate_min_width",
    "validate_mutation",
    "validate_reserved_protection",
    "validate_shelf_overflow",
    "validate_wing_boundary",
]


@dataclass(frozen=True)
class CellMutation:
    """A proposed change to one cell.

    Attributes:
        mutation_type: Resize, edit or clear.
        cell: The target cell as it currently is.
        proposed_width: New width for resize mutations.
    """

    mutation_type: MutationType
    cell: "Cell"
    proposed_width: int | None = None


def _cell_name(cell: "Cell") -> str:
    if cell.address is not None and cell.address.address_number:
        return cell.address.address_number
    return cell.id


def validate_reserved_protection(mutation: CellMutation) -> ConstraintResult:
    """Reject resize, edit and clear mutations that target a reserved cell."""
    if mutation.mutation_type in (
        MutationType.RESIZE_CELL,
        MutationType.EDIT_CELL,
        MutationType.CLEAR_CELL,
    ) and mutation.cell.is_reserved:
        return ConstraintResult.reject(
            Violation(
                kind=ViolationKind.RESERVED_CELL,
                message=f"Cannot modify reserved cell ({mutation.cell.cell_type.value})",
                cell_id=mutation.cell.id,
            )
        )
    return ConstraintResult.ok()


def validate_min_width(cell: "Cell", proposed_width: int) -> ConstraintResult:
    """Reject widths below one inch; suggests snapping to one inch.

    Reserved cells get no suggested fix.
    """
    if proposed_width < MIN_CELL_WIDTH:
        return ConstraintResult.reject(
            Violation(
                kind=ViolationKind.MIN_WIDTH,
                message=f"Cell width cannot be less than {MIN_CELL_WIDTH} inch",
                cell_id=cell.id,
                suggested_fix=(
                    None if cell.is_reserved else SuggestedFix(FixAction.SNAP, MIN_CELL_WIDTH)
                ),
            )
        )
    return ConstraintResult.ok()


def _shrink_fix(cell: "Cell", limit: int) -> SuggestedFix | None:
    if cell.is_reserved or cell.position_in_shelf > limit:
        return None
    return SuggestedFix(FixAction.SHRINK, limit - cell.position_in_shelf + 1)


def validate_wing_boundary(
    cell: "Cell", wing: "Wing", width: int | None = None
) -> ConstraintResult:
    """Reject cells that extend past the last inch of the wing.

    Positions are 1-based and the end is inclusive, so a cell fits while
    ``position + width - 1 <= cells_per_shelf``. No shrink fix is suggested
    for reserved cells or for cells that start past the last inch.

    Args:
        cell: Cell to check.
        wing: Owning wing.
        width: Width to check instead of the cell's current width.
    """
    effective = cell.width_inches if width is None else width
    end = cell.position_in_shelf + effective - 1
    limit = wing.cells_per_shelf
    if end > limit:
        return ConstraintResult.reject(
            Violation(
                kind=ViolationKind.WING_BOUNDARY,
                message=(
                    f'Cell "{_cell_name(cell)}" would extend {end - limit}" '
                    f"beyond wing boundary"
                ),
                cell_id=cell.id,
                wing_id=wing.id,
                wing_position=wing.position,
                suggested_fix=_shrink_fix(cell, limit),
            )
        )
    return ConstraintResult.ok()


def validate_shelf_overflow(
    shelf: "Shelf", wing: "Wing", total_width: int | None = None
) -> ConstraintResult:
    """Reject shelves whose cells add up to more than the wing width.

    Overflow is a row-level condition, so no single-cell fix is suggested.
    """
    total = shelf.total_width if total_width is None else total_width
    capacity = wing.cells_per_shelf
    if total > capacity:
        return ConstraintResult.reject(
            Violation(
                kind=ViolationKind.SHELF_OVERFLOW,
                message=(
                    f'Shelf {shelf.shelf_number} total width ({total}") '
                    f'exceeds wing capacity ({capacity}")'
                ),
                wing_id=wing.id,
                wing_position=wing.position,
                shelf_number=shelf.shelf_number,
                overflow=total - capacity,
            )
        )
    return ConstraintResult.ok()


def validate_mutation(
    config: "CaseConfiguration", mutation: CellMutation
) -> list[Violation]:
    """Collect every violation a proposed mutation would cause.

    All validators run, even after one fails. Width rules only apply to
    resize mutations.

    Returns:
        Violations with location context; empty when the mutation is legal.
    """
    violations: list[Violation] = []
    location = config.locate_cell(mutation.cell.id)

    results = [validate_reserved_protection(mutation)]
    if (
        mutation.mutation_type is MutationType.RESIZE_CELL
        and mutation.proposed_width is not None
    ):
        width = mutation.proposed_width
        results.append(validate_min_width(mutation.cell, width))
        if location is not None:
            results.append(validate_wing_boundary(mutation.cell, location.wing, width))
            total = location.shelf.total_width - mutation.cell.width_inches + width
            results.append(
                validate_shelf_overflow(location.shelf, location.wing, total)
            )

    for result in results:
        if result.violation is None:
            continue
        if location is None:
            violations.append(result.violation.with_context(cell_id=mutation.cell.id))
        else:
            violations.append(
                result.violation.with_context(
                    cell_id=mutation.cell.id,
                    wing_id=location.wing.id,
                    wing_position=location.wing.position,
                    shelf_number=location.shelf.shelf_number,
                )
            )

    if violations:
        logger.debug(
            f"Mutation {mutation.mutation_type.value} on cell '{mutation.cell.id}' "
            f"rejected: {', '.join(v.kind.value for v in violations)}"
        )
    return violations


def validate_all(config: "CaseConfiguration") -> list[Violation]:
    """Walk every wing, shelf and cell and return all violations.

    Per shelf the overflow check comes first, then min-width and
    wing-boundary checks per cell, left to right.
    """
    violations: list[Violation] = []
    for wing in config.wings:
        for shelf in wing.shelves:
            shelf_result = validate_shelf_overflow(shelf, wing)
            if shelf_result.violation is not None:
                violations.append(shelf_result.violation)

            for cell in shelf.cells:
                for result in (
                    validate_min_width(cell, cell.width_inches),
                    validate_wing_boundary(cell, wing),
                ):
                    if result.violation is not None:
                        violations.append(
                            result.violation.with_context(
                                cell_id=cell.id,
                                wing_id=wing.id,
                                wing_position=wing.position,
                                shelf_number=shelf.shelf_number,
                            )
                        )

    logger.debug(f"Validated case '{config.route_id}': {len(violations)} violation(s)")
    return violations


# Public name used by callers that validate after structural edits
validate_configuration = validate_all


def auto_resolve(
    config: "CaseConfiguration", violations: Sequence[Violation]
) -> list[WidthAdjustment]:
    """Apply snap and shrink fixes directly to cell widths.

    Violations without a cell id or suggested fix are skipped, and reserved
    cells are never touched. Widths never
    go below one inch. Re-running on a fresh ``validate_all`` after a fix
    produces no further violation of the same kind on the same cell.

    Returns:
        The width changes that were applied, in order.
    """
    applied: list[WidthAdjustment] = []
    for violation in violations:
        fix = violation.suggested_fix
        if fix is None or violation.cell_id is None:
            continue
        cell = config.get_cell_by_id(violation.cell_id)
        if cell is None or cell.is_reserved:
            continue

        if fix.action is FixAction.SNAP:
            new_width = fix.width
        elif fix.action is FixAction.SHRINK:
            new_width = max(MIN_CELL_WIDTH, fix.width)
        else:
            continue

        if new_width == cell.width_inches:
            continue
        applied.append(WidthAdjustment(cell.id, cell.width_inches, new_width))
        cell.width_inches = new_width

    if applied:
        logger.debug(f"Auto-resolved {len(applied)} cell width(s)")
    return applied
