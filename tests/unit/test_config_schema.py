"""Unit tests for case file schema and loader.

These tests verify:
- Valid case files are loaded correctly
- Unknown fields are rejected (extra="forbid")
- Schema version pattern and supported-version validation
- Wing, shelf and cell structure rules
- Loader error handling (file not found, JSON parse errors, validation)
"""

from pathlib import Path
from typing import Any, Callable

import pytest
from pydantic import ValidationError as PydanticValidationError

from builders import explicit_shelves
from editbook.application.config import (
    SUPPORTED_VERSIONS,
    AddressConfig,
    CaseFileConfiguration,
    CellConfig,
    ConfigError,
    RouteConfig,
    WingConfig,
    load_config,
    load_config_from_dict,
    write_config,
)
from editbook.domain.value_objects import CellType, EquipmentType


class TestRouteConfig:
    """Tests for RouteConfig model."""

    def test_defaults(self) -> None:
        route = RouteConfig()
        assert route.route_id == "default"
        assert route.route_type == "R"

    def test_route_type_letter(self) -> None:
        for letter in "RCH":
            assert RouteConfig(route_type=letter).route_type == letter
        with pytest.raises(PydanticValidationError):
            RouteConfig(route_type="X")


class TestAddressConfig:
    """Tests for AddressConfig model."""

    def test_negative_cell_size_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            AddressConfig(id="A", cell_size=-1)

    def test_zero_cell_size_allowed(self) -> None:
        assert AddressConfig(id="A", cell_size=0).cell_size == 0

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            AddressConfig(id="A", cell_size=1, colour="red")  # type: ignore[call-arg]


class TestCellConfig:
    """Tests for CellConfig model."""

    def test_width_not_range_checked(self) -> None:
        """Bad widths surface later as constraint violations."""
        assert CellConfig(id="c1", width_inches=0).width_inches == 0

    def test_type_tag_parsed(self) -> None:
        cell = CellConfig(id="r1", width_inches=2, type="reserved-nonmach")
        assert cell.type is CellType.RESERVED_NONMACH

    def test_reserved_cell_cannot_hold_address(self) -> None:
        with pytest.raises(PydanticValidationError, match="cannot hold"):
            CellConfig(id="r1", width_inches=1, type="form-3982", address_id="A")

    def test_position_is_one_based(self) -> None:
        with pytest.raises(PydanticValidationError):
            CellConfig(id="c1", width_inches=1, position_in_shelf=0)


class TestWingConfig:
    """Tests for WingConfig model."""

    def test_equipment_type_parsed(self) -> None:
        wing = WingConfig(position=2, equipment_type="144-D")
        assert wing.equipment_type is EquipmentType.ITEM_144D
        assert wing.shelves is None

    def test_unknown_equipment_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            WingConfig(position=0, equipment_type="999-Z")

    @pytest.mark.parametrize("position", [-1, 4])
    def test_position_range(self, position: int) -> None:
        with pytest.raises(PydanticValidationError):
            WingConfig(position=position, equipment_type="124-D")

    def test_explicit_shelves_must_be_complete(self) -> None:
        with pytest.raises(PydanticValidationError, match="exactly 6 shelves"):
            WingConfig.model_validate(
                {
                    "position": 0,
                    "equipment_type": "124-D",
                    "shelves": [{"shelf_number": 1, "cells": []}],
                }
            )

    def test_explicit_shelves_accepted(self) -> None:
        wing = WingConfig.model_validate(
            {
                "position": 0,
                "equipment_type": "124-D",
                "shelves": explicit_shelves([{"id": "c1", "width_inches": 40}]),
            }
        )
        assert wing.shelves is not None
        assert wing.shelves[0].cells[0].width_inches == 40

    def test_cell_starting_past_wing_end_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="past the last inch"):
            WingConfig.model_validate(
                {
                    "position": 0,
                    "equipment_type": "143-D",
                    "shelves": explicit_shelves(
                        [{"id": "c1", "width_inches": 2, "position_in_shelf": 21}]
                    ),
                }
            )

    def test_cell_starting_on_last_inch_accepted(self) -> None:
        wing = WingConfig.model_validate(
            {
                "position": 0,
                "equipment_type": "143-D",
                "shelves": explicit_shelves(
                    [{"id": "c1", "width_inches": 3, "position_in_shelf": 20}]
                ),
            }
        )
        assert wing.shelves is not None
        assert wing.shelves[0].cells[0].position_in_shelf == 20


class TestCaseFileConfiguration:
    """Tests for the root configuration model."""

    def test_minimal(self) -> None:
        config = CaseFileConfiguration(schema_version="1.0")
        assert config.wings == []
        assert config.addresses == []
        assert config.route.route_id == "default"

    def test_full(self, case_data: dict[str, Any]) -> None:
        config = CaseFileConfiguration.model_validate(case_data)
        assert config.route.route_id == "R001"
        assert [w.equipment_type for w in config.wings] == [
            EquipmentType.ITEM_124D,
            EquipmentType.ITEM_143D,
        ]
        assert [a.id for a in config.addresses] == ["a1", "a2", "a3"]

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS

    def test_newer_minor_version_accepted(self) -> None:
        assert CaseFileConfiguration(schema_version="1.3").schema_version == "1.3"

    @pytest.mark.parametrize("version", ["2.0", "0.9"])
    def test_unsupported_major_rejected(self, version: str) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            CaseFileConfiguration(schema_version=version)

    @pytest.mark.parametrize("version", ["1", "v1.0", "1.0.0", ""])
    def test_version_pattern(self, version: str) -> None:
        with pytest.raises(PydanticValidationError):
            CaseFileConfiguration(schema_version=version)

    def test_duplicate_positions_rejected(self, case_data: dict[str, Any]) -> None:
        case_data["wings"][1]["position"] = 0
        with pytest.raises(PydanticValidationError, match="positions must be unique"):
            CaseFileConfiguration.model_validate(case_data)

    def test_duplicate_wing_ids_rejected(self, case_data: dict[str, Any]) -> None:
        case_data["wings"][0]["id"] = "w"
        case_data["wings"][1]["id"] = "w"
        with pytest.raises(PydanticValidationError, match="Wing ids"):
            CaseFileConfiguration.model_validate(case_data)

    def test_duplicate_cell_ids_rejected(self, case_data: dict[str, Any]) -> None:
        case_data["wings"][0]["shelves"] = explicit_shelves(
            [{"id": "c1", "width_inches": 1}]
        )
        case_data["wings"][1]["shelves"] = explicit_shelves(
            [{"id": "c1", "width_inches": 1}]
        )
        with pytest.raises(PydanticValidationError, match="Duplicate cell id"):
            CaseFileConfiguration.model_validate(case_data)

    def test_at_most_four_wings(self) -> None:
        wings = [{"position": n % 4, "equipment_type": "143-D"} for n in range(5)]
        with pytest.raises(PydanticValidationError):
            CaseFileConfiguration.model_validate({"schema_version": "1.0", "wings": wings})

    def test_unknown_top_level_field(self, case_data: dict[str, Any]) -> None:
        case_data["extra"] = True
        with pytest.raises(PydanticValidationError):
            CaseFileConfiguration.model_validate(case_data)


class TestLoadConfig:
    """Tests for the file loader."""

    def test_load_valid_file(
        self, case_data: dict[str, Any], write_case_file: Callable[..., Path]
    ) -> None:
        config = load_config(write_case_file(case_data))
        assert config.route.route_id == "R001"
        assert len(config.wings) == 2

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert "line" in error.details[0]
        assert "Invalid JSON" in str(error)

    def test_validation_error_paths(
        self, case_data: dict[str, Any], write_case_file: Callable[..., Path]
    ) -> None:
        case_data["wings"][1]["equipment_type"] = "999-Z"
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_case_file(case_data))
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "wings[1].equipment_type"
        assert "Configuration validation failed" in error.message
        assert "999-Z" in error.message

    def test_load_from_dict(self, case_data: dict[str, Any]) -> None:
        assert load_config_from_dict(case_data).schema_version == "1.0"

    def test_load_from_dict_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"wings": []})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "schema_version"


class TestWriteConfig:
    """Tests for writing a configuration back to disk."""

    def test_written_file_loads_back(self, case_data: dict[str, Any], tmp_path: Path) -> None:
        config = load_config_from_dict(case_data)
        path = tmp_path / "out.json"
        write_config(config, path)
        assert load_config(path) == config

    def test_unwritable_path(self, case_data: dict[str, Any], tmp_path: Path) -> None:
        config = load_config_from_dict(case_data)
        with pytest.raises(ConfigError) as exc_info:
            write_config(config, tmp_path / "no-such-dir" / "out.json")
        assert exc_info.value.error_type == "file_write_error"
