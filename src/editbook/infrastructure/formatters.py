"""Output formatters and exporters for case layouts."""

from __future__ import annotations

import json
from string import ascii_lowercase
from typing import Any, Sequence

from editbook.application.dtos import AutoResolveOutput, PlacementOutput, ResizeOutput
from editbook.domain import CaseConfiguration, PlacementResult, Violation
from editbook.domain.services import CaseStats, compute_reserved_zones
from editbook.domain.value_objects import SHELF_COUNT, ResizeResult


class PlacementReportFormatter:
    """Formats placement results as a table, one row per placed address."""

    def format(self, output: PlacementOutput) -> str:
        placement = output.placement
        lines = [
            "ADDRESS PLACEMENT",
            "=" * 64,
        ]
        if not placement.placements:
            lines.append("No addresses placed.")
        else:
            names = {a.id: a.display_name for a in output.addresses}
            lines.append(
                f"{'Address':<28} {'Wing':<6} {'Shelf':<6} {'Cells':<10} {'Size'}"
            )
            lines.append("-" * 64)
            for p in placement.placements:
                name = names.get(p.address_id, p.address_id)
                cells = f"{p.start_cell}-{p.end_cell}"
                lines.append(
                    f"{name[:28]:<28} {p.wing_position:<6} {p.shelf_number:<6} "
                    f"{cells:<10} {p.cell_size}"
                )

        if placement.displaced_address_ids:
            lines.append("")
            lines.append("DISPLACED")
            for address_id in placement.displaced_address_ids:
                lines.append(f"  {address_id}")

        lines.append("")
        lines.append(placement.summary)
        return "\n".join(lines)


class ViolationReportFormatter:
    """Formats constraint violations, one line each with their location."""

    def format(self, violations: Sequence[Violation]) -> str:
        if not violations:
            return "No violations."
        lines = [f"{len(violations)} VIOLATION(S)"]
        for v in violations:
            where = []
            if v.wing_id is not None:
                where.append(f"wing {v.wing_id}")
            if v.shelf_number is not None:
                where.append(f"shelf {v.shelf_number}")
            if v.cell_id is not None:
                where.append(f"cell {v.cell_id}")
            location = ", ".join(where) or "case"
            line = f"  [{v.kind.value}] {location}: {v.message}"
            if v.suggested_fix is not None:
                fix = v.suggested_fix
                line += f' (fix: {fix.action.value} to {fix.width}")'
            lines.append(line)
        return "\n".join(lines)

    def format_auto_resolve(self, output: AutoResolveOutput) -> str:
        lines = [self.format(output.violations), ""]
        if output.adjustments:
            lines.append(f"FIXED {len(output.adjustments)} CELL(S)")
            for adj in output.adjustments:
                lines.append(f'  {adj.cell_id}: {adj.old_width}" -> {adj.new_width}"')
        else:
            lines.append("Nothing to fix.")
        if output.remaining:
            lines.append("")
            lines.append("REMAINING")
            lines.append(self.format(output.remaining))
        return "\n".join(lines)


class ResizeReportFormatter:
    """Formats a resize resolution."""

    def format(self, cell_id: str, output: ResizeOutput) -> str:
        result: ResizeResult | None = output.result
        if result is None:
            return "\n".join(f"Error: {e}" for e in output.errors)

        status = "OK" if result.valid else "REJECTED"
        lines = [f'RESIZE {cell_id} -> {result.max_width}": {status}']
        if result.violation is not None:
            lines.append(f"  Violation: {result.violation.value}")
        if result.message:
            lines.append(f"  {result.message}")
        for adj in result.adjustments:
            lines.append(f'  {adj.cell_id}: {adj.old_width}" -> {adj.new_width}"')
        if result.unallocated_width:
            lines.append(f'  Unallocated: {result.unallocated_width}"')
        if output.applied:
            lines.append("Applied.")
        return "\n".join(lines)


class CaseStatsFormatter:
    """Formats capacity statistics for a slot selection."""

    def format(self, stats: CaseStats) -> str:
        lines = [
            "CASE CAPACITY",
            "=" * 40,
        ]
        for index, label in enumerate(stats.slot_labels):
            lines.append(f"  Slot {index}: {label}")
        lines.append("-" * 40)
        lines.append(f"  Total cells:    {stats.total_cells}")
        lines.append(f"  Form 3982:      {stats.form_3982_cells}")
        lines.append(f"  Status codes:   {stats.status_cells}")
        lines.append(f"  Usable cells:   {stats.usable_cells}")
        return "\n".join(lines)


class CaseDiagramFormatter:
    """Formats ASCII diagrams of a case, one character per inch.

    Shelves are drawn top (6) to bottom (1), wings left to right. Reserved
    Form 3982 cells show as ``F``, status-code cells as ``S``, placed
    addresses as cycling letters and free cells as ``.``.
    """

    def format(
        self, case: CaseConfiguration, placement: PlacementResult | None = None
    ) -> str:
        if not case.wings:
            return "No wings to display."

        occupied = case.occupied_wings()
        table = compute_reserved_zones(occupied)

        grids: list[dict[int, list[str]]] = []
        for wing_index, wing in enumerate(occupied):
            rows: dict[int, list[str]] = {}
            for shelf_number in range(1, SHELF_COUNT + 1):
                row = ["."] * wing.cells_per_shelf
                zone = table.zone(wing_index, shelf_number)
                for cell_number in range(1, wing.cells_per_shelf + 1):
                    if cell_number < zone.first_free:
                        row[cell_number - 1] = "F"
                    elif cell_number > zone.last_usable:
                        row[cell_number - 1] = "S"
                rows[shelf_number] = row
            grids.append(rows)

        if placement is not None:
            for n, p in enumerate(placement.placements):
                if p.wing_index >= len(grids):
                    continue
                mark = ascii_lowercase[n % len(ascii_lowercase)]
                row = grids[p.wing_index][p.shelf_number]
                for cell_number in range(p.start_cell, p.end_cell + 1):
                    if 1 <= cell_number <= len(row):
                        row[cell_number - 1] = mark

        lines = ["CASE LAYOUT DIAGRAM", ""]
        labels = []
        for wing, occupied_wing in zip(case.wings, occupied):
            width = occupied_wing.cells_per_shelf + 2
            labels.append(f"{(wing.label or wing.id)[:width]:<{width}}")
        header = "      " + " ".join(labels)
        lines.append(header.rstrip())
        for shelf_number in range(SHELF_COUNT, 0, -1):
            row_text = " ".join(
                f"|{''.join(grid[shelf_number])}|" for grid in grids
            )
            lines.append(f"S{shelf_number}    {row_text}")

        lines.append("")
        lines.append(f"Route: {case.route_id}")
        lines.append(f"Wings: {', '.join(w.equipment_type.value for w in case.wings)}")
        if placement is not None:
            lines.append(placement.summary)
        return "\n".join(lines)


class PlacementJsonExporter:
    """Exports placement results as JSON."""

    def export(self, output: PlacementOutput) -> str:
        """Export placement output as JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": output.errors}, indent=2)
        return json.dumps(self.to_dict(output.placement), indent=2)

    def to_dict(self, placement: PlacementResult) -> dict[str, Any]:
        return {
            "placements": [
                {
                    "address_id": p.address_id,
                    "wing_index": p.wing_index,
                    "wing_position": p.wing_position,
                    "shelf_number": p.shelf_number,
                    "start_cell": p.start_cell,
                    "cell_size": p.cell_size,
                }
                for p in placement.placements
            ],
            "displaced_address_ids": list(placement.displaced_address_ids),
            "placed_count": placement.placed_count,
            "total_count": placement.total_count,
            "summary": placement.summary,
        }

