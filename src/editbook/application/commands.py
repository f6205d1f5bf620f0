"""Application commands (use cases) for case layout editing."""

from __future__ import annotations

import logging

from editbook.application.config import (
    CaseFileConfiguration,
    case_to_config,
    config_to_addresses,
    config_to_case,
)
from editbook.domain import (
    PlacementEngine,
    apply_resize,
    auto_resolve,
    resolve_resize,
    validate_configuration,
)

from .dtos import AutoResolveOutput, PlacementOutput, ResizeInput, ResizeOutput

logger = logging.getLogger(__name__)


class PlaceAddressesCommand:
    """Command to place a case file's address list into its wings."""

    def __init__(self, placement_engine: PlacementEngine | None = None) -> None:
        self.placement_engine = placement_engine or PlacementEngine()

    def execute(self, config: CaseFileConfiguration) -> PlacementOutput:
        """Execute the placement command.

        Args:
            config: A validated case configuration.

        Returns:
            PlacementOutput with the case, addresses and placement result.
        """
        try:
            case = config_to_case(config)
            addresses = config_to_addresses(config)
        except ValueError as e:
            return PlacementOutput(case=None, errors=[str(e)])

        placement = self.placement_engine.place(case.occupied_wings(), addresses)
        logger.info(f"Route {case.route_id}: {placement.summary}")
        return PlacementOutput(case=case, addresses=addresses, placement=placement)


class ResizeCellCommand:
    """Command to resize one cell with neighbor displacement.

    The resolution never changes the configuration; ``apply=True`` commits
    a valid result and returns the updated configuration.
    """

    def execute(
        self,
        config: CaseFileConfiguration,
        resize_input: ResizeInput,
        apply: bool = False,
    ) -> ResizeOutput:
        errors = resize_input.validate()
        if errors:
            return ResizeOutput(result=None, errors=errors)

        try:
            case = config_to_case(config)
        except ValueError as e:
            return ResizeOutput(result=None, errors=[str(e)])

        if case.get_cell_by_id(resize_input.cell_id) is None:
            return ResizeOutput(
                result=None,
                cell_found=False,
                errors=[f"Cell '{resize_input.cell_id}' not found"],
            )

        result = resolve_resize(case, resize_input.cell_id, resize_input.new_width)
        if not apply or not result.valid:
            return ResizeOutput(result=result)

        apply_resize(case, resize_input.cell_id, result)
        updated = case_to_config(
            case,
            config_to_addresses(config),
            route=config.route,
            schema_version=config.schema_version,
        )
        logger.info(
            f"Resized cell '{resize_input.cell_id}' to {result.max_width}\" "
            f"({len(result.adjustments)} neighbor adjustment(s))"
        )
        return ResizeOutput(result=result, applied=True, config=updated)


class AutoResolveCommand:
    """Command to validate a case and apply every single-cell width fix."""

    def execute(self, config: CaseFileConfiguration) -> AutoResolveOutput:
        try:
            case = config_to_case(config)
        except ValueError as e:
            return AutoResolveOutput(errors=[str(e)])

        violations = validate_configuration(case)
        adjustments = auto_resolve(case, violations)
        remaining = validate_configuration(case)
        updated = case_to_config(
            case,
            config_to_addresses(config),
            route=config.route,
            schema_version=config.schema_version,
        )
        logger.info(
            f"Auto-resolve fixed {len(adjustments)} cell(s); "
            f"{len(remaining)} violation(s) remain"
        )
        return AutoResolveOutput(
            violations=violations,
            adjustments=adjustments,
            remaining=remaining,
            config=updated,
        )
