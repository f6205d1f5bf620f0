"""Adapter between case file configuration and domain objects.

Conversion functions turn a validated CaseFileConfiguration into the
domain CaseConfiguration and Address list the engine works on, and turn
them back into a configuration for persistence collaborators.
"""

from editbook.application.config.schema import (
    AddressConfig,
    CaseFileConfiguration,
    CellConfig,
    RouteConfig,
    ShelfConfig,
    StickerConfig,
    WingConfig,
)
from editbook.domain.entities import (
    Address,
    CaseConfiguration,
    Cell,
    Shelf,
    Sticker,
    Wing,
)
from editbook.domain.services.equipment import WING_LABELS, build_wing


def wing_id_for(wing_config: WingConfig) -> str:
    """Id a configured wing gets in the domain (``wing-<position>`` by default)."""
    return wing_config.id or f"wing-{wing_config.position}"


def config_to_addresses(config: CaseFileConfiguration) -> list[Address]:
    """Convert the configured address list, preserving order."""
    return [
        Address(
            id=addr.id,
            cell_size=addr.cell_size,
            address_number=addr.address_number,
            street_name=addr.street_name,
            unit=addr.unit,
            sequence=addr.sequence,
            street_color=addr.street_color,
        )
        for addr in config.addresses
    ]


def _config_to_shelf(
    shelf_config: ShelfConfig, addresses: dict[str, Address]
) -> Shelf:
    cells: list[Cell] = []
    next_position = 1
    for cell_config in shelf_config.cells:
        position = cell_config.position_in_shelf or next_position
        address = None
        if cell_config.address_id is not None:
            address = addresses.get(cell_config.address_id)
        cells.append(
            Cell(
                id=cell_config.id,
                width_inches=cell_config.width_inches,
                position_in_shelf=position,
                cell_type=cell_config.type,
                address=address,
                street_color=cell_config.street_color,
                stickers=[
                    Sticker(id=s.id, sticker_type=s.type, text=s.text)
                    for s in cell_config.stickers
                ],
                reserved_label=cell_config.reserved_label,
            )
        )
        next_position = position + max(cell_config.width_inches, 0)
    return Shelf(shelf_number=shelf_config.shelf_number, cells=cells)


def config_to_case(config: CaseFileConfiguration) -> CaseConfiguration:
    """Build the domain case configuration.

    Wings without explicit shelves are built with one-inch address cells
    and the reserved cells their leftmost/rightmost role calls for. Cell
    address references resolve against the configured address list;
    unknown references are left empty.
    """
    addresses = {addr.id: addr for addr in config_to_addresses(config)}
    ordered = sorted(config.wings, key=lambda w: w.position)
    wings: list[Wing] = []
    for index, wing_config in enumerate(ordered):
        wing_id = wing_id_for(wing_config)
        label = wing_config.label or WING_LABELS[wing_config.position]
        if wing_config.shelves is None:
            wings.append(
                build_wing(
                    position=wing_config.position,
                    equipment_type=wing_config.equipment_type,
                    leftmost=index == 0,
                    rightmost=index == len(ordered) - 1,
                    label=label,
                    wing_id=wing_id,
                )
            )
        else:
            wings.append(
                Wing(
                    id=wing_id,
                    equipment_type=wing_config.equipment_type,
                    position=wing_config.position,
                    label=label,
                    shelves=[
                        _config_to_shelf(s, addresses) for s in wing_config.shelves
                    ],
                )
            )
    return CaseConfiguration(wings=wings, route_id=config.route.route_id)


def _cell_to_config(cell: Cell) -> CellConfig:
    return CellConfig(
        id=cell.id,
        width_inches=cell.width_inches,
        position_in_shelf=cell.position_in_shelf,
        type=cell.cell_type,
        address_id=cell.address.id if cell.address is not None else None,
        street_color=cell.street_color,
        stickers=[
            StickerConfig(id=s.id, type=s.sticker_type, text=s.text)
            for s in cell.stickers
        ],
        reserved_label=cell.reserved_label,
    )


def case_to_config(
    case: CaseConfiguration,
    addresses: list[Address],
    route: RouteConfig | None = None,
    schema_version: str = "1.0",
) -> CaseFileConfiguration:
    """Serialize a domain case and address list back into a configuration.

    Wings are written with their explicit shelves so that width edits
    survive a round trip.
    """
    route_config = route or RouteConfig(route_id=case.route_id)
    return CaseFileConfiguration(
        schema_version=schema_version,
        route=route_config,
        wings=[
            WingConfig(
                id=wing.id,
                position=wing.position,
                equipment_type=wing.equipment_type,
                label=wing.label,
                shelves=[
                    ShelfConfig(
                        shelf_number=shelf.shelf_number,
                        cells=[_cell_to_config(c) for c in shelf.cells],
                    )
                    for shelf in wing.shelves
                ],
            )
            for wing in case.wings
        ],
        addresses=[
            AddressConfig(
                id=a.id,
                cell_size=a.cell_size,
                address_number=a.address_number,
                street_name=a.street_name,
                unit=a.unit,
                sequence=a.sequence,
                street_color=a.street_color,
            )
            for a in addresses
        ],
    )
