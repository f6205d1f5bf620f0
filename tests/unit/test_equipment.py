"""Unit tests for the equipment builder."""

import pytest

from editbook.domain.entities import Address, CaseConfiguration
from editbook.domain.services import (
    EquipmentError,
    add_wing,
    build_wing,
    change_equipment,
    create_case,
    remove_wing,
)
from editbook.domain.value_objects import CellType, EquipmentType


def _reserved_types(case: CaseConfiguration, wing_index: int, shelf: int) -> list[CellType]:
    cells = case.wings[wing_index].shelf(shelf).cells
    return [c.cell_type for c in cells if c.is_reserved]


class TestBuildWing:
    """Tests for building a single wing."""

    def test_leftmost_and_rightmost(self) -> None:
        wing = build_wing(0, "124-D", leftmost=True, rightmost=True)
        shelf_one = wing.shelf(1).cells

        assert wing.id == "wing-0"
        assert wing.label == "Left Wing"
        assert shelf_one[0].cell_type is CellType.FORM_3982
        assert shelf_one[0].id == "wing-0-s1-form3982-1"
        assert [c.reserved_label for c in shelf_one if c.position_in_shelf >= 33] == [
            "MACH",
            "NON-MACH",
            "UTF",
            "IA",
            "NSN",
            "ANK",
            "OTHER",
        ]
        assert wing.shelf(1).total_width == 40

    def test_every_shelf_fills_its_width(self) -> None:
        wing = build_wing(2, "143-D", leftmost=False, rightmost=True)
        assert [s.total_width for s in wing.shelves] == [20] * 6
        assert wing.shelf(2).cells[0].id == "wing-2-s2-c1"

    def test_positions_are_contiguous(self) -> None:
        wing = build_wing(0, "124-D", leftmost=True, rightmost=True)
        for shelf in wing.shelves:
            position = 1
            for cell in shelf.cells:
                assert cell.position_in_shelf == position
                position += cell.width_inches

    def test_middle_wing_has_no_reserved_cells(self) -> None:
        wing = build_wing(1, "144-D", leftmost=False, rightmost=False)
        assert all(not c.is_reserved for s in wing.shelves for c in s.cells)
        assert len(wing.shelf(1).cells) == 40

    def test_custom_id_and_label(self) -> None:
        wing = build_wing(3, "143-D", False, False, label="Spare", wing_id="extra")
        assert (wing.id, wing.label) == ("extra", "Spare")

    def test_bad_position(self) -> None:
        with pytest.raises(EquipmentError):
            build_wing(4, "124-D", leftmost=True, rightmost=True)

    def test_unknown_equipment(self) -> None:
        with pytest.raises(ValueError):
            build_wing(0, "999-Z", leftmost=True, rightmost=True)


class TestCreateCase:
    """Tests for creating a case from slot selections."""

    def test_roles_follow_occupied_order(self) -> None:
        case = create_case([None, "124-D", None, "143-D"], route_id="R9")
        assert case.route_id == "R9"
        assert [w.position for w in case.wings] == [1, 3]
        assert _reserved_types(case, 0, 1) == [CellType.FORM_3982]
        assert CellType.FORM_3982 not in _reserved_types(case, 1, 1)
        assert len(_reserved_types(case, 1, 1)) == 7
        assert _reserved_types(case, 1, 2) == []

    def test_single_wing_takes_both_roles(self) -> None:
        case = create_case([None, None, "143-D"])
        assert [w.position for w in case.wings] == [2]
        shelf_one = _reserved_types(case, 0, 1)
        assert shelf_one[0] is CellType.FORM_3982
        assert len(shelf_one) == 8

    def test_empty_case(self) -> None:
        assert create_case([None, None]).wings == []

    def test_too_many_slots(self) -> None:
        with pytest.raises(EquipmentError):
            create_case(["124-D"] * 5)


class TestAddWing:
    """Tests for adding a wing."""

    def test_new_rightmost_takes_status_cells(self, single_wing_case: CaseConfiguration) -> None:
        change = add_wing(single_wing_case, "143-D")

        assert change.wing_id == "wing-1"
        assert set(change.rebuilt_wing_ids) == {"wing-0", "wing-1"}
        assert len(_reserved_types(single_wing_case, 1, 1)) == 7
        assert _reserved_types(single_wing_case, 0, 1) == [CellType.FORM_3982]

    def test_lost_addresses_reported(self, single_wing_case: CaseConfiguration) -> None:
        single_wing_case.wings[0].shelf(1).cells[1].address = Address(id="A", cell_size=1)
        single_wing_case.wings[0].shelf(3).cells[5].address = Address(id="B", cell_size=1)
        change = add_wing(single_wing_case, "124-D", position=2)
        assert change.unassigned_address_ids == ("A", "B")

    def test_middle_insert_keeps_outer_wings(self, two_wing_case: CaseConfiguration) -> None:
        remove_wing(two_wing_case, "wing-1")
        add_wing(two_wing_case, "143-D", position=3)
        two_wing_case.wings[0].shelf(1).cells[3].address = Address(id="A", cell_size=1)

        change = add_wing(two_wing_case, "144-D", position=1)
        assert change.rebuilt_wing_ids == ("wing-1",)
        assert change.unassigned_address_ids == ()
        assert [w.position for w in two_wing_case.wings] == [0, 1, 3]

    def test_slot_taken(self, two_wing_case: CaseConfiguration) -> None:
        with pytest.raises(EquipmentError, match="occupied"):
            add_wing(two_wing_case, "124-D", position=1)

    def test_case_full(self) -> None:
        case = create_case(["124-D", "143-D", "144-D", "143-D"])
        with pytest.raises(EquipmentError):
            add_wing(case, "124-D")


class TestRemoveWing:
    """Tests for removing a wing."""

    def test_remaining_wing_takes_both_roles(self, two_wing_case: CaseConfiguration) -> None:
        two_wing_case.wings[1].shelf(2).cells[0].address = Address(id="gone", cell_size=1)
        change = remove_wing(two_wing_case, "wing-1")

        assert change.wing_id == "wing-1"
        assert change.rebuilt_wing_ids == ("wing-0",)
        assert change.unassigned_address_ids == ("gone",)
        types = _reserved_types(two_wing_case, 0, 1)
        assert types[0] is CellType.FORM_3982
        assert len(types) == 8

    def test_unknown_wing(self, two_wing_case: CaseConfiguration) -> None:
        with pytest.raises(EquipmentError, match="not found"):
            remove_wing(two_wing_case, "nope")

    def test_remove_last_wing(self, single_wing_case: CaseConfiguration) -> None:
        change = remove_wing(single_wing_case, "wing-0")
        assert single_wing_case.wings == []
        assert change.rebuilt_wing_ids == ()


class TestChangeEquipment:
    """Tests for swapping a wing's equipment item."""

    def test_wing_rebuilt_at_new_width(self, two_wing_case: CaseConfiguration) -> None:
        two_wing_case.wings[1].shelf(2).cells[0].address = Address(id="A", cell_size=1)
        change = change_equipment(two_wing_case, "wing-1", EquipmentType.ITEM_124D)

        wing = two_wing_case.wings[1]
        assert wing.cells_per_shelf == 40
        assert [s.total_width for s in wing.shelves] == [40] * 6
        assert change.rebuilt_wing_ids == ("wing-1",)
        assert change.unassigned_address_ids == ("A",)

    def test_unknown_wing(self, two_wing_case: CaseConfiguration) -> None:
        with pytest.raises(EquipmentError):
            change_equipment(two_wing_case, "nope", "124-D")

    def test_unknown_type(self, two_wing_case: CaseConfiguration) -> None:
        with pytest.raises(ValueError):
            change_equipment(two_wing_case, "wing-0", "999-Z")
