"""Reserved-zone value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._equipment import StatusCode


@dataclass(frozen=True)
class ShelfZone:
    """Usable cell range on one shelf of one wing.

    Cell numbers are 1-based and inclusive. A zone whose last usable cell
    is before its first free cell has no usable width.
    """

    first_free: int
    last_usable: int

    @property
    def usable_width(self) -> int:
        """Number of usable cells in this zone."""
        return max(0, self.last_usable - self.first_free + 1)


@dataclass(frozen=True)
class StatusCodePlacement:
    """A status code positioned on shelf 1 of the rightmost wing."""

    code: StatusCode
    start_cell: int

    @property
    def end_cell(self) -> int:
        """Last cell number covered by this status code."""
        return self.start_cell + self.code.width - 1

    def covers(self, cell_number: int) -> bool:
        """Check whether an absolute cell number falls inside this code."""
        return self.start_cell <= cell_number <= self.end_cell
