"""
pickplace-tools: Pick-and-place data generation for PCB assembly.

Turns an in-memory board snapshot (devices, footprint pads, package
metadata) into an ordered list of placement items, including fiducials.

Modules:
    core: Enumerations and geometry primitives
    schema: Board snapshot and library models
    export: Pick-and-place generator
    config: TOML configuration files

Quick Start::

    from pickplace_tools import generate_pick_place

    data = generate_pick_place(board)
    for item in data:
        print(item.designator, item.type, item.board_side)
"""

__version__ = "0.1.0"

from pickplace_tools.core.geometry import Angle, Point
from pickplace_tools.core.types import AssemblyType, BoardSide, Layer, PadFunction, PlacementType
from pickplace_tools.export.pnp import (
    BoardPickPlaceGenerator,
    PickPlaceConfig,
    PickPlaceData,
    PlacementItem,
    generate_pick_place,
)
from pickplace_tools.schema import (
    Board,
    ComponentInstance,
    DeviceInstance,
    LibraryDevice,
    LibraryPackage,
    LibraryPad,
    LocalizedNames,
    Project,
)

__all__ = [
    "__version__",
    # Geometry and types
    "Angle",
    "Point",
    "AssemblyType",
    "BoardSide",
    "Layer",
    "PadFunction",
    "PlacementType",
    # Board model
    "Board",
    "ComponentInstance",
    "DeviceInstance",
    "LibraryDevice",
    "LibraryPackage",
    "LibraryPad",
    "LocalizedNames",
    "Project",
    # Pick-and-place
    "BoardPickPlaceGenerator",
    "PickPlaceConfig",
    "PickPlaceData",
    "PlacementItem",
    "generate_pick_place",
]
