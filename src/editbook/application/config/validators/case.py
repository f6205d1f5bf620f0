"""Structural validation of case layouts.

Runs the constraint engine over the case a file describes and reports
each violation against the JSON path of the offending wing, shelf or cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from editbook.application.config.adapter import config_to_case, wing_id_for
from editbook.domain.services import validate_all
from editbook.domain.value_objects import CellType

from .base import ValidationResult

if TYPE_CHECKING:
    from editbook.application.config.schema import CaseFileConfiguration
    from editbook.domain.value_objects import Violation


def _cell_paths(config: CaseFileConfiguration) -> dict[str, str]:
    paths: dict[str, str] = {}
    for w, wing in enumerate(config.wings):
        for s, shelf in enumerate(wing.shelves or []):
            for c, cell in enumerate(shelf.cells):
                paths[cell.id] = f"wings[{w}].shelves[{s}].cells[{c}]"
    return paths


def _violation_path(
    violation: Violation,
    cell_paths: dict[str, str],
    wing_indexes: dict[str, int],
) -> str:
    if violation.cell_id is not None and violation.cell_id in cell_paths:
        return cell_paths[violation.cell_id]
    if violation.wing_id is not None and violation.wing_id in wing_indexes:
        path = f"wings[{wing_indexes[violation.wing_id]}]"
        if violation.shelf_number is not None:
            path = f"{path}.shelves[{violation.shelf_number - 1}]"
        return path
    return "wings"


class CaseStructureValidator:
    """Validator for shelf capacity, cell widths and reserved cell layout.

    Rules:
    - Every cell is at least one inch wide
    - No cell extends past the last inch of its wing
    - No shelf holds more inches than its wing is wide
    - Explicit layouts carry the reserved cells their wing's role calls for
    """

    @property
    def name(self) -> str:
        return "structure"

    def validate(self, config: CaseFileConfiguration) -> ValidationResult:
        result = ValidationResult()
        if not config.wings:
            return result

        try:
            case = config_to_case(config)
        except ValueError as e:
            result.add_error(path="wings", message=f"Case cannot be built: {e}")
            return result

        cell_paths = _cell_paths(config)
        wing_indexes = {
            wing_id_for(wing): index for index, wing in enumerate(config.wings)
        }

        for violation in validate_all(case):
            fix = violation.suggested_fix
            result.add_error(
                path=_violation_path(violation, cell_paths, wing_indexes),
                message=violation.message,
                value=fix.width if fix is not None else violation.overflow or None,
                kind=violation.kind.value,
            )

        self._check_reserved_layout(config, result)
        return result

    def _check_reserved_layout(
        self, config: CaseFileConfiguration, result: ValidationResult
    ) -> None:
        positions = sorted(wing.position for wing in config.wings)
        leftmost, rightmost = positions[0], positions[-1]

        for index, wing in enumerate(config.wings):
            if wing.shelves is None:
                continue
            path = f"wings[{index}]"
            has_form = any(
                cell.type is CellType.FORM_3982
                for shelf in wing.shelves
                for cell in shelf.cells
            )
            has_status = any(
                cell.type.is_reserved and cell.type is not CellType.FORM_3982
                for cell in wing.shelves[0].cells
            )

            if wing.position == leftmost and not has_form:
                result.add_warning(
                    path=path,
                    message="Leftmost wing has no Form 3982 cells",
                    suggestion="Omit 'shelves' to have the wing built with its reserved cells",
                )
            elif wing.position != leftmost and has_form:
                result.add_warning(
                    path=path,
                    message="Form 3982 cells belong on the leftmost wing only",
                )

            if wing.position == rightmost and not has_status:
                result.add_warning(
                    path=path,
                    message="Rightmost wing has no status-code cells on shelf 1",
                    suggestion="Omit 'shelves' to have the wing built with its reserved cells",
                )
            elif wing.position != rightmost and has_status:
                result.add_warning(
                    path=path,
                    message="Status-code cells belong on the rightmost wing only",
                )
