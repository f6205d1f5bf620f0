"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from editbook.domain import (
    Address,
    CaseConfiguration,
    EquipmentType,
    PlacementResult,
    ResizeResult,
    Violation,
)
from editbook.domain.value_objects import MAX_WINGS, WidthAdjustment

if TYPE_CHECKING:
    from editbook.application.config import CaseFileConfiguration


@dataclass
class SlotsInput:
    """Input DTO for slot selections, left to right (None = empty slot)."""

    slots: list[str | None] = field(default_factory=list)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if len(self.slots) > MAX_WINGS:
            errors.append(f"At most {MAX_WINGS} slots are supported")
        valid_types = [t.value for t in EquipmentType]
        for index, slot in enumerate(self.slots):
            if slot is not None and slot not in valid_types:
                errors.append(
                    f"Slot {index}: equipment type must be one of: {', '.join(valid_types)}"
                )
        return errors

    def to_equipment(self) -> list[EquipmentType | None]:
        """Convert to equipment types, padded to four slots."""
        padded = list(self.slots) + [None] * (MAX_WINGS - len(self.slots))
        return [EquipmentType(s) if s is not None else None for s in padded]


@dataclass
class ResizeInput:
    """Input DTO for a cell resize request."""

    cell_id: str
    new_width: int

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not self.cell_id:
            errors.append("Cell id is required")
        return errors


@dataclass
class PlacementOutput:
    """Output DTO from a placement run.

    Attributes:
        case: The domain case the addresses were placed into.
        addresses: The address list, in priority order.
        placement: Placement result from the engine.
        errors: Error messages if the run could not be performed.
    """

    case: CaseConfiguration | None
    addresses: list[Address] = field(default_factory=list)
    placement: PlacementResult = field(default_factory=PlacementResult)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the placement ran successfully."""
        return len(self.errors) == 0


@dataclass
class ResizeOutput:
    """Output DTO from a resize request.

    Attributes:
        result: Resize resolution from the engine.
        applied: Whether the result was committed to the case.
        config: Updated configuration when the resize was applied.
        cell_found: False when the target cell does not exist.
        errors: Error messages if the request could not be resolved.
    """

    result: ResizeResult | None
    applied: bool = False
    config: CaseFileConfiguration | None = None
    cell_found: bool = True
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the resize resolved to an applicable result."""
        return not self.errors and self.result is not None and self.result.valid


@dataclass
class AutoResolveOutput:
    """Output DTO from an auto-resolve pass.

    Attributes:
        violations: Violations found before fixing.
        adjustments: Width fixes that were applied.
        remaining: Violations left after fixing (shelf overflow and others
            without a single-cell fix).
        config: Updated configuration.
        errors: Error messages if the case could not be built.
    """

    violations: list[Violation] = field(default_factory=list)
    adjustments: list[WidthAdjustment] = field(default_factory=list)
    remaining: list[Violation] = field(default_factory=list)
    config: CaseFileConfiguration | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the case is free of violations after fixing."""
        return not self.errors and not self.remaining
