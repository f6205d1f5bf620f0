"""FastAPI dependency injection for case commands."""

from typing import Annotated

from fastapi import Depends

from editbook.application.commands import PlaceAddressesCommand, ResizeCellCommand


def get_place_command() -> PlaceAddressesCommand:
    """Dependency for PlaceAddressesCommand."""
    return PlaceAddressesCommand()


def get_resize_command() -> ResizeCellCommand:
    """Dependency for ResizeCellCommand."""
    return ResizeCellCommand()


# Type aliases for cleaner endpoint signatures
PlaceCommandDep = Annotated[PlaceAddressesCommand, Depends(get_place_command)]
ResizeCommandDep = Annotated[ResizeCellCommand, Depends(get_resize_command)]
