"""Pydantic configuration schema models for case files.

This module defines the schema for JSON case files: route details, the
wing equipment in each slot (optionally with explicit shelf/cell layouts)
and the ordered address list. It uses Pydantic v2 for validation and
serialization.

The EquipmentType and CellType enums are reused from the domain layer to
keep one source of truth for the tag values.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from editbook.domain.value_objects import (
    MAX_WINGS,
    SHELF_COUNT,
    CellType,
    EquipmentType,
    equipment_spec,
)

# Supported schema versions for case files
# Version 1.0: Initial schema with route, wings, cells and addresses
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class RouteConfig(BaseModel):
    """Route identification.

    Attributes:
        route_id: Identifier used to key persisted cases.
        zip: ZIP code of the delivery unit.
        route_number: Three-digit route number.
        route_type: Route type letter (R = rural, C = city, H = highway contract).
    """

    model_config = ConfigDict(extra="forbid")

    route_id: str = Field(default="default", min_length=1)
    zip: str = ""
    route_number: str = "001"
    route_type: str = Field(default="R", pattern=r"^[RCH]$")


class StickerConfig(BaseModel):
    """Sticker attached to an address cell."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    text: str = ""


class AddressConfig(BaseModel):
    """An address in the caller's ordered address list.

    List order is placement priority.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    cell_size: int = Field(..., ge=0, description="Cells needed; 0 = do not place")
    address_number: str = ""
    street_name: str = ""
    unit: str = ""
    sequence: int | None = None
    street_color: str | None = None


class CellConfig(BaseModel):
    """An explicit cell on a shelf.

    Width is not range-checked here so that structural problems surface as
    constraint violations (min-width, wing-boundary) rather than schema
    errors.

    Attributes:
        id: Unique cell id.
        width_inches: Cell width in inches.
        position_in_shelf: 1-based first inch; computed contiguously when omitted.
        type: Cell type tag.
        address_id: Id of an address from the address list held by this cell.
        street_color: Optional street color.
        stickers: Stickers on the cell.
        reserved_label: Label for reserved cells.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    width_inches: int
    position_in_shelf: int | None = Field(default=None, ge=1)
    type: CellType = CellType.ADDRESS
    address_id: str | None = None
    street_color: str | None = None
    stickers: list[StickerConfig] = Field(default_factory=list)
    reserved_label: str | None = None

    @model_validator(mode="after")
    def validate_reserved_content(self) -> "CellConfig":
        """Reserved cells cannot hold addresses or stickers."""
        if self.type.is_reserved and (self.address_id or self.stickers):
            raise ValueError(
                f"Reserved cell '{self.id}' ({self.type.value}) cannot hold an address or stickers"
            )
        return self


class ShelfConfig(BaseModel):
    """One shelf of explicit cells."""

    model_config = ConfigDict(extra="forbid")

    shelf_number: int = Field(..., ge=1, le=SHELF_COUNT)
    cells: list[CellConfig] = Field(default_factory=list)


class WingConfig(BaseModel):
    """A wing occupying one slot.

    When ``shelves`` is omitted the wing is built with one-inch address
    cells and the reserved cells its position calls for.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    position: int = Field(..., ge=0, le=MAX_WINGS - 1)
    equipment_type: EquipmentType
    label: str | None = None
    shelves: list[ShelfConfig] | None = None

    @field_validator("shelves")
    @classmethod
    def validate_shelf_numbers(
        cls, v: list[ShelfConfig] | None
    ) -> list[ShelfConfig] | None:
        """Explicit shelves must be exactly 1..6 in order."""
        if v is None:
            return v
        numbers = [shelf.shelf_number for shelf in v]
        if numbers != list(range(1, SHELF_COUNT + 1)):
            raise ValueError(
                f"Wing must list exactly {SHELF_COUNT} shelves numbered 1-{SHELF_COUNT} "
                f"in order (got {numbers})"
            )
        return v

    @model_validator(mode="after")
    def validate_cell_positions(self) -> "WingConfig":
        """Explicit cell positions must start on an inch of this wing."""
        if self.shelves is None:
            return self
        limit = equipment_spec(self.equipment_type).cells_per_shelf
        for shelf in self.shelves:
            for cell in shelf.cells:
                if cell.position_in_shelf is not None and cell.position_in_shelf > limit:
                    raise ValueError(
                        f"Cell '{cell.id}' starts at {cell.position_in_shelf}, past the "
                        f"last inch of a {self.equipment_type.value} shelf ({limit})"
                    )
        return self


class CaseFileConfiguration(BaseModel):
    """Root configuration model for a case file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        route: Route identification
        wings: Occupied wings, at most four, unique slot positions
        addresses: Address list in placement priority order

    Example:
        >>> config = CaseFileConfiguration(
        ...     schema_version="1.0",
        ...     wings=[WingConfig(position=0, equipment_type="124-D")],
        ...     addresses=[AddressConfig(id="A", cell_size=5)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    route: RouteConfig = Field(default_factory=RouteConfig)
    wings: list[WingConfig] = Field(default_factory=list, max_length=MAX_WINGS)
    addresses: list[AddressConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "CaseFileConfiguration":
        """Wing positions, wing ids and cell ids must be unique."""
        positions = [wing.position for wing in self.wings]
        if len(set(positions)) != len(positions):
            raise ValueError(f"Wing positions must be unique (got {positions})")

        wing_ids = [wing.id for wing in self.wings if wing.id is not None]
        if len(set(wing_ids)) != len(wing_ids):
            raise ValueError("Wing ids must be unique")

        seen: set[str] = set()
        for wing in self.wings:
            for shelf in wing.shelves or []:
                for cell in shelf.cells:
                    if cell.id in seen:
                        raise ValueError(f"Duplicate cell id '{cell.id}'")
                    seen.add(cell.id)
        return self
