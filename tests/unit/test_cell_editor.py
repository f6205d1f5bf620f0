"""Unit tests for cell content edits."""

import pytest

from builders import make_case, make_cells, reserved_cell
from editbook.domain.entities import Address, CaseConfiguration, Sticker
from editbook.domain.services import add_sticker, clear_cell, edit_cell, remove_sticker
from editbook.domain.value_objects import ViolationKind


@pytest.fixture
def case() -> CaseConfiguration:
    return make_case(make_cells([2, 3]) + [reserved_cell("r1", 6)])


class TestEditCell:
    """Tests for edit_cell."""

    def test_assigns_address_and_color(self, case: CaseConfiguration) -> None:
        address = Address(id="A", cell_size=2, address_number="12")
        result = edit_cell(case, "c1", address=address, street_color="#ff0000")

        assert result.valid
        cell = case.get_cell_by_id("c1")
        assert cell is not None
        assert cell.address == address
        assert cell.street_color == "#ff0000"

    def test_none_keeps_current_values(self, case: CaseConfiguration) -> None:
        edit_cell(case, "c1", address=Address(id="A", cell_size=1), street_color="blue")
        edit_cell(case, "c1", street_color="green")
        cell = case.get_cell_by_id("c1")
        assert cell is not None
        assert cell.address is not None and cell.address.id == "A"
        assert cell.street_color == "green"

    def test_reserved_cell_rejected(self, case: CaseConfiguration) -> None:
        result = edit_cell(case, "r1", address=Address(id="A", cell_size=1))
        assert not result.valid
        assert result.violation is not None
        assert result.violation.kind is ViolationKind.RESERVED_CELL
        cell = case.get_cell_by_id("r1")
        assert cell is not None
        assert cell.address is None

    def test_unknown_cell(self, case: CaseConfiguration) -> None:
        with pytest.raises(ValueError, match="not found"):
            edit_cell(case, "nope", street_color="red")


class TestClearCell:
    """Tests for clear_cell."""

    def test_clears_everything(self, case: CaseConfiguration) -> None:
        edit_cell(case, "c2", address=Address(id="A", cell_size=1), street_color="red")
        add_sticker(case, "c2", Sticker(id="s1", sticker_type="hold"))

        assert clear_cell(case, "c2").valid
        cell = case.get_cell_by_id("c2")
        assert cell is not None
        assert cell.is_empty
        assert cell.street_color is None

    def test_width_untouched(self, case: CaseConfiguration) -> None:
        clear_cell(case, "c2")
        cell = case.get_cell_by_id("c2")
        assert cell is not None
        assert cell.width_inches == 3

    def test_reserved_cell_rejected(self, case: CaseConfiguration) -> None:
        assert not clear_cell(case, "r1").valid


class TestStickers:
    """Tests for add_sticker and remove_sticker."""

    def test_add_and_remove(self, case: CaseConfiguration) -> None:
        add_sticker(case, "c1", Sticker(id="s1", sticker_type="hold"))
        add_sticker(case, "c1", Sticker(id="s2", sticker_type="vacant", text="Apt 2"))
        remove_sticker(case, "c1", "s1")

        cell = case.get_cell_by_id("c1")
        assert cell is not None
        assert [s.id for s in cell.stickers] == ["s2"]

    def test_remove_unknown_sticker_is_ignored(self, case: CaseConfiguration) -> None:
        add_sticker(case, "c1", Sticker(id="s1", sticker_type="hold"))
        assert remove_sticker(case, "c1", "zzz").valid
        cell = case.get_cell_by_id("c1")
        assert cell is not None
        assert len(cell.stickers) == 1

    def test_reserved_cell_rejected(self, case: CaseConfiguration) -> None:
        result = add_sticker(case, "r1", Sticker(id="s1", sticker_type="hold"))
        assert not result.valid
        cell = case.get_cell_by_id("r1")
        assert cell is not None
        assert cell.stickers == []
