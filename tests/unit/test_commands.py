"""Unit tests for application commands and DTOs."""

from typing import Any

import pytest

from builders import explicit_shelves
from editbook.application import (
    AutoResolveCommand,
    PlaceAddressesCommand,
    ResizeCellCommand,
    ResizeInput,
    SlotsInput,
)
from editbook.application.config import CaseFileConfiguration, load_config_from_dict
from editbook.domain import PlacementEngine
from editbook.domain.value_objects import EquipmentType, ViolationKind


@pytest.fixture
def config(case_data: dict[str, Any]) -> CaseFileConfiguration:
    return load_config_from_dict(case_data)


@pytest.fixture
def explicit_config(case_data: dict[str, Any]) -> CaseFileConfiguration:
    """Single 124-D wing with hand-laid cells on shelf 1."""
    case_data["wings"] = [
        {
            "position": 0,
            "equipment_type": "124-D",
            "shelves": explicit_shelves(
                [
                    {"id": "c1", "width_inches": 3},
                    {"id": "c2", "width_inches": 2},
                    {"id": "c3", "width_inches": 6, "position_in_shelf": 37},
                ]
            ),
        }
    ]
    return load_config_from_dict(case_data)


class TestSlotsInput:
    """Tests for SlotsInput DTO."""

    def test_valid(self) -> None:
        slots = SlotsInput(slots=["124-D", None, "143-D"])
        assert slots.validate() == []
        assert slots.to_equipment() == [
            EquipmentType.ITEM_124D,
            None,
            EquipmentType.ITEM_143D,
            None,
        ]

    def test_unknown_type(self) -> None:
        errors = SlotsInput(slots=["124-D", "999"]).validate()
        assert len(errors) == 1
        assert errors[0].startswith("Slot 1")

    def test_too_many_slots(self) -> None:
        assert SlotsInput(slots=[None] * 5).validate() == ["At most 4 slots are supported"]


class TestResizeInput:
    """Tests for ResizeInput DTO."""

    def test_cell_id_required(self) -> None:
        assert ResizeInput(cell_id="", new_width=3).validate() == ["Cell id is required"]


class TestPlaceAddressesCommand:
    """Tests for PlaceAddressesCommand."""

    def test_places_list(self, config: CaseFileConfiguration) -> None:
        output = PlaceAddressesCommand().execute(config)

        assert output.is_valid
        assert output.case is not None
        assert [a.id for a in output.addresses] == ["a1", "a2", "a3"]
        assert output.placement.summary == "PLACED 2 OF 2 ADDRESSES."
        first = output.placement.placements[0]
        assert (first.address_id, first.start_cell, first.end_cell) == ("a1", 2, 3)

    def test_custom_engine(self, config: CaseFileConfiguration) -> None:
        engine = PlacementEngine()
        command = PlaceAddressesCommand(placement_engine=engine)
        assert command.placement_engine is engine
        assert command.execute(config).is_valid

    def test_no_wings(self, case_data: dict[str, Any]) -> None:
        case_data["wings"] = []
        output = PlaceAddressesCommand().execute(load_config_from_dict(case_data))
        assert output.is_valid
        assert output.placement.displaced_address_ids == ("a1", "a2")


class TestResizeCellCommand:
    """Tests for ResizeCellCommand."""

    def test_preview_does_not_apply(self, explicit_config: CaseFileConfiguration) -> None:
        output = ResizeCellCommand().execute(explicit_config, ResizeInput("c1", 4))

        assert output.is_valid
        assert output.result is not None
        assert [(a.cell_id, a.new_width) for a in output.result.adjustments] == [("c2", 1)]
        assert not output.applied
        assert output.config is None

    def test_apply_returns_updated_config(
        self, explicit_config: CaseFileConfiguration
    ) -> None:
        output = ResizeCellCommand().execute(
            explicit_config, ResizeInput("c1", 4), apply=True
        )

        assert output.applied
        assert output.config is not None
        assert output.config.route == explicit_config.route
        assert output.config.addresses == explicit_config.addresses
        shelf = output.config.wings[0].shelves
        assert shelf is not None
        cells = {c.id: (c.width_inches, c.position_in_shelf) for c in shelf[0].cells}
        assert cells == {"c1": (4, 1), "c2": (1, 5), "c3": (6, 37)}
        # Input configuration is left untouched
        assert explicit_config.wings[0].shelves is not None
        assert explicit_config.wings[0].shelves[0].cells[0].width_inches == 3

    def test_invalid_resize_not_applied(
        self, explicit_config: CaseFileConfiguration
    ) -> None:
        output = ResizeCellCommand().execute(
            explicit_config, ResizeInput("c2", 0), apply=True
        )
        assert not output.is_valid
        assert not output.applied
        assert output.result is not None
        assert output.result.violation is ViolationKind.MIN_WIDTH

    def test_unknown_cell(self, explicit_config: CaseFileConfiguration) -> None:
        output = ResizeCellCommand().execute(explicit_config, ResizeInput("zz", 2))
        assert not output.cell_found
        assert output.result is None
        assert output.errors == ["Cell 'zz' not found"]

    def test_bad_input(self, config: CaseFileConfiguration) -> None:
        output = ResizeCellCommand().execute(config, ResizeInput("", 2))
        assert output.errors == ["Cell id is required"]
        assert output.cell_found

    def test_generated_cells_cannot_grow(self, config: CaseFileConfiguration) -> None:
        """Generated cells are all one inch, so no neighbor has width to give."""
        output = ResizeCellCommand().execute(config, ResizeInput("wing-0-s2-c2", 3))
        assert output.cell_found
        assert not output.is_valid
        assert output.result is not None
        assert output.result.violation is ViolationKind.INFEASIBLE_RESIZE
        assert output.result.max_width == 1


class TestAutoResolveCommand:
    """Tests for AutoResolveCommand."""

    def test_fixes_boundary(self, explicit_config: CaseFileConfiguration) -> None:
        output = AutoResolveCommand().execute(explicit_config)

        assert [v.kind for v in output.violations] == [ViolationKind.WING_BOUNDARY]
        assert [(a.cell_id, a.old_width, a.new_width) for a in output.adjustments] == [
            ("c3", 6, 4)
        ]
        assert output.remaining == []
        assert output.is_valid
        assert output.config is not None
        shelves = output.config.wings[0].shelves
        assert shelves is not None
        assert shelves[0].cells[2].width_inches == 4

    def test_clean_case(self, config: CaseFileConfiguration) -> None:
        output = AutoResolveCommand().execute(config)
        assert output.violations == []
        assert output.adjustments == []
        assert output.is_valid

    def test_overflow_remains(self, case_data: dict[str, Any]) -> None:
        case_data["wings"] = [
            {
                "position": 0,
                "equipment_type": "143-D",
                "shelves": explicit_shelves(
                    [
                        {"id": "a", "width_inches": 15},
                        {"id": "b", "width_inches": 10, "position_in_shelf": 8},
                    ]
                ),
            }
        ]
        output = AutoResolveCommand().execute(load_config_from_dict(case_data))
        assert not output.is_valid
        assert [v.kind for v in output.remaining] == [ViolationKind.SHELF_OVERFLOW]
        assert output.adjustments == []
