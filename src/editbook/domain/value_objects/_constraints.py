"""Constraint, violation and resize value objects."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class ViolationKind(str, Enum):
    """Categories of structural rule violations.

    RESERVED_CELL is fatal to the request that caused it. MIN_WIDTH,
    WING_BOUNDARY and SHELF_OVERFLOW are recoverable. INFEASIBLE_RESIZE
    accompanies a clamped resize result.
    """

    RESERVED_CELL = "reserved-cell"
    MIN_WIDTH = "min-width"
    WING_BOUNDARY = "wing-boundary"
    SHELF_OVERFLOW = "shelf-overflow"
    INFEASIBLE_RESIZE = "infeasible-resize"


class FixAction(str, Enum):
    """Single-cell corrective actions that auto-resolution can apply."""

    SNAP = "snap"
    SHRINK = "shrink"


class MutationType(str, Enum):
    """Kinds of cell mutations gated by the constraint engine."""

    RESIZE_CELL = "resize"
    EDIT_CELL = "edit"
    CLEAR_CELL = "clear"


@dataclass(frozen=True)
class SuggestedFix:
    """Width to apply to a cell to clear a violation."""

    action: FixAction
    width: int


@dataclass(frozen=True)
class Violation:
    """A single rule violation.

    Attributes:
        kind: Violation category.
        message: Human-readable description.
        cell_id: Offending cell, or None for shelf-level violations.
        wing_id: Owning wing id, when known.
        wing_position: Owning wing slot position, when known.
        shelf_number: Owning shelf number, when known.
        suggested_fix: Width fix for auto-resolution, if any.
        overflow: Inches over capacity for shelf-overflow violations.
    """

    kind: ViolationKind
    message: str
    cell_id: str | None = None
    wing_id: str | None = None
    wing_position: int | None = None
    shelf_number: int | None = None
    suggested_fix: SuggestedFix | None = None
    overflow: int = 0

    def with_context(
        self,
        cell_id: str | None = None,
        wing_id: str | None = None,
        wing_position: int | None = None,
        shelf_number: int | None = None,
    ) -> "Violation":
        """Return a copy carrying location context, keeping existing values."""
        return replace(
            self,
            cell_id=self.cell_id if cell_id is None else cell_id,
            wing_id=self.wing_id if wing_id is None else wing_id,
            wing_position=(
                self.wing_position if wing_position is None else wing_position
            ),
            shelf_number=self.shelf_number if shelf_number is None else shelf_number,
        )


@dataclass(frozen=True)
class ConstraintResult:
    """Outcome of one validator."""

    valid: bool
    violation: Violation | None = None

    @classmethod
    def ok(cls) -> "ConstraintResult":
        """A passing result."""
        return cls(valid=True)

    @classmethod
    def reject(cls, violation: Violation) -> "ConstraintResult":
        """A failing result carrying its violation."""
        return cls(valid=False, violation=violation)


@dataclass(frozen=True)
class WidthAdjustment:
    """Width change applied to one cell."""

    cell_id: str
    old_width: int
    new_width: int

    @property
    def delta(self) -> int:
        """Signed width change in inches."""
        return self.new_width - self.old_width


@dataclass(frozen=True)
class ResizeResult:
    """Outcome of a neighbor-displacement resize request.

    The resolver never mutates the configuration. A caller commits a valid
    result by setting the target to ``max_width`` and applying every
    adjustment in one step.

    Attributes:
        valid: Whether the (possibly clamped) resize may be applied.
        adjustments: Neighbor width changes, left to right.
        max_width: Width the target cell should take.
        message: Explanation for rejections and clamped expansions.
        violation: Violation kind behind a rejection or clamp.
        unallocated_width: Width freed by a shrink that no neighbor absorbed.
    """

    valid: bool
    adjustments: tuple[WidthAdjustment, ...] = field(default_factory=tuple)
    max_width: int = 0
    message: str | None = None
    violation: ViolationKind | None = None
    unallocated_width: int = 0

    @property
    def neighbor_delta(self) -> int:
        """Sum of width changes over all adjustments."""
        return sum(adj.delta for adj in self.adjustments)
