"""Address list validation for case files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from editbook.application.config.adapter import config_to_addresses
from editbook.domain.entities import OccupiedWing
from editbook.domain.services import PlacementEngine, compute_reserved_zones

from .base import ValidationResult

if TYPE_CHECKING:
    from editbook.application.config.schema import CaseFileConfiguration


class AddressListValidator:
    """Validator for the address list and cell address references.

    Rules:
    - Address ids are unique (error)
    - Cells reference only listed addresses, each at most once (error)
    - An address wider than every usable zone can never be placed (warning)
    - Addresses with no occupied wing to go to are displaced (warning)
    - Addresses that do not fit the case are displaced (warning)
    """

    @property
    def name(self) -> str:
        return "addresses"

    def validate(self, config: CaseFileConfiguration) -> ValidationResult:
        result = ValidationResult()

        seen: set[str] = set()
        for i, address in enumerate(config.addresses):
            if address.id in seen:
                result.add_error(
                    path=f"addresses[{i}].id",
                    message=f"Duplicate address id '{address.id}'",
                    value=address.id,
                )
            seen.add(address.id)

        referenced: set[str] = set()
        for w, wing in enumerate(config.wings):
            for s, shelf in enumerate(wing.shelves or []):
                for c, cell in enumerate(shelf.cells):
                    if cell.address_id is None:
                        continue
                    path = f"wings[{w}].shelves[{s}].cells[{c}].address_id"
                    if cell.address_id not in seen:
                        result.add_error(
                            path=path,
                            message=f"Cell '{cell.id}' references unknown address '{cell.address_id}'",
                            value=cell.address_id,
                        )
                    elif cell.address_id in referenced:
                        result.add_error(
                            path=path,
                            message=f"Address '{cell.address_id}' is assigned to more than one cell",
                            value=cell.address_id,
                        )
                    referenced.add(cell.address_id)

        placeable = [a for a in config.addresses if a.cell_size > 0]
        if not placeable:
            return result

        if not config.wings:
            result.add_warning(
                path="wings",
                message=f"No occupied wings; all {len(placeable)} address(es) will be displaced",
                suggestion="Add at least one wing",
            )
            return result

        occupied = [
            OccupiedWing.from_type(wing.position, wing.equipment_type)
            for wing in config.wings
        ]
        table = compute_reserved_zones(occupied)
        widest = max(zone.usable_width for zone in table.zones.values())
        for i, address in enumerate(config.addresses):
            if address.cell_size > widest:
                result.add_warning(
                    path=f"addresses[{i}].cell_size",
                    message=(
                        f"Address '{address.id}' needs {address.cell_size} cells but the "
                        f"widest usable shelf holds {widest}; it will always be displaced"
                    ),
                )

        placement = PlacementEngine().place(occupied, config_to_addresses(config))
        if placement.displaced_count > 0:
            result.add_warning(
                path="addresses",
                message=placement.summary,
                suggestion="Add wings or reduce address cell sizes",
            )
        return result
