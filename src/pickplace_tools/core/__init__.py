"""Core types and geometry primitives."""

from .geometry import Angle, Point, Transform
from .types import (
    AssemblyType,
    BoardSide,
    ComponentSide,
    Layer,
    PadFunction,
    PlacementType,
)

__all__ = [
    "Angle",
    "Point",
    "Transform",
    "AssemblyType",
    "BoardSide",
    "ComponentSide",
    "Layer",
    "PadFunction",
    "PlacementType",
]
