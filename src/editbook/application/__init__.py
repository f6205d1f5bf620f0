"""Application layer - use cases and DTOs."""

from .commands import AutoResolveCommand, PlaceAddressesCommand, ResizeCellCommand
from .dtos import (
    AutoResolveOutput,
    PlacementOutput,
    ResizeInput,
    ResizeOutput,
    SlotsInput,
)

__all__ = [
    "AutoResolveCommand",
    "AutoResolveOutput",
    "PlaceAddressesCommand",
    "PlacementOutput",
    "ResizeCellCommand",
    "ResizeInput",
    "ResizeOutput",
    "SlotsInput",
]
