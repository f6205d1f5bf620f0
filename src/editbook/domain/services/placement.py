"""Placement engine: assign addresses to usable cells.

Addresses are placed shelf by shelf (1 to 6). On each shelf every
still-unplaced address is offered, in caller order, to each wing left to
right; the first wing with enough contiguous room after its cursor takes
it. An address never spans wings or shelves. Addresses left over after
shelf 6 are displaced.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from ..entities import Address, OccupiedWing
from ..value_objects import SHELF_COUNT, Placement, PlacementResult
from .reserved_zones import compute_reserved_zones

if TYPE_CHECKING:
    from ..entities import CaseConfiguration

logger = logging.getLogger(__name__)

__all__ = [
    "PlacementEngine",
    "place_addresses",
]


class PlacementEngine:
    """Deterministic sequential placement of an ordered address list.

    The engine holds no state between calls; every run recomputes the full
    placement list from its inputs.
    """

    def place(
        self,
        occupied_wings: Sequence[OccupiedWing],
        addresses: Sequence[Address],
    ) -> PlacementResult:
        """Place addresses into the usable cells of the given wings.

        Args:
            occupied_wings: Occupied wings; ordered by position internally.
            addresses: Addresses in priority order. Entries with
                ``cell_size == 0`` are skipped and not counted.

        Returns:
            PlacementResult with placements, displaced ids and counts.
        """
        eligible = [address for address in addresses if address.is_placeable]
        wings = sorted(occupied_wings, key=lambda w: w.position)

        if not wings:
            logger.debug(f"No occupied wings; {len(eligible)} address(es) displaced")
            return PlacementResult(
                placements=(),
                displaced_address_ids=tuple(a.id for a in eligible),
                placed_count=0,
                total_count=len(eligible),
            )

        table = compute_reserved_zones(wings)
        next_free: dict[tuple[int, int], int] = {}
        max_usable: dict[tuple[int, int], int] = {}
        for key, zone in table.zones.items():
            next_free[key] = zone.first_free
            max_usable[key] = zone.last_usable

        placements: list[Placement] = []
        placed: set[str] = set()

        for shelf_number in range(1, SHELF_COUNT + 1):
            for address in eligible:
                if address.id in placed:
                    continue
                for wing_index, wing in enumerate(wings):
                    key = (wing_index, shelf_number)
                    available = max(0, max_usable[key] - next_free[key] + 1)
                    if available >= address.cell_size:
                        placements.append(
                            Placement(
                                address_id=address.id,
                                wing_index=wing_index,
                                wing_position=wing.position,
                                shelf_number=shelf_number,
                                start_cell=next_free[key],
                                cell_size=address.cell_size,
                            )
                        )
                        next_free[key] += address.cell_size
                        placed.add(address.id)
                        break

        displaced = tuple(a.id for a in eligible if a.id not in placed)
        result = PlacementResult(
            placements=tuple(placements),
            displaced_address_ids=displaced,
            placed_count=len(placements),
            total_count=len(eligible),
        )
        logger.debug(
            f"Placed {result.placed_count} of {result.total_count} address(es) "
            f"across {len(wings)} wing(s); {result.displaced_count} displaced"
        )
        return result


def place_addresses(
    config: "CaseConfiguration", addresses: Sequence[Address]
) -> PlacementResult:
    """Place addresses into a case configuration's occupied wings.

    Args:
        config: Case configuration supplying wing occupancy.
        addresses: Addresses in priority order.

    Returns:
        PlacementResult replacing any previous placement list.
    """
    return PlacementEngine().place(config.occupied_wings(), addresses)
