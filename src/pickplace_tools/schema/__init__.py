"""Board snapshot and library data models."""

from .board import Board, ComponentInstance, DeviceInstance, FootprintPad, Project
from .library import LibraryDevice, LibraryPackage, LibraryPad, LocalizedNames

__all__ = [
    "Board",
    "ComponentInstance",
    "DeviceInstance",
    "FootprintPad",
    "Project",
    "LibraryDevice",
    "LibraryPackage",
    "LibraryPad",
    "LocalizedNames",
]
