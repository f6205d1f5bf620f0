"""Infrastructure layer - output formatters and exporters."""

from .formatters import (
    CaseDiagramFormatter,
    CaseStatsFormatter,
    PlacementJsonExporter,
    PlacementReportFormatter,
    ResizeReportFormatter,
    ViolationReportFormatter,
)

__all__ = [
    "CaseDiagramFormatter",
    "CaseStatsFormatter",
    "PlacementJsonExporter",
    "PlacementReportFormatter",
    "ResizeReportFormatter",
    "ViolationReportFormatter",
]
