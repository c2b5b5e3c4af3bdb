"""Canonical type definitions for pickplace-tools.

All closed enumerations used by the board model and the pick-and-place
generator live here. Every enum uses string values so items serialize
cleanly to JSON or CSV in downstream exporters.

Types:
- Layer: copper layers a pad can be present on
- ComponentSide: side of a library footprint an SMD pad is defined on
- BoardSide: side of the board a placement is done on
- PadFunction: library pad function (standard, fiducial, ...)
- AssemblyType: how a package is mounted, including NONE and AUTO
- PlacementType: kind of a pick-and-place record
"""

from __future__ import annotations

from enum import Enum

from ..exceptions import BoardModelError


class Layer(str, Enum):
    """Copper layers relevant for assembly.

    Values follow the board file naming convention.
    """

    TOP_COPPER = "top_cu"
    BOT_COPPER = "bot_cu"

    def __str__(self) -> str:
        return self.value

    def mirrored(self) -> "Layer":
        """Get the layer on the opposite side of the board."""
        if self is Layer.TOP_COPPER:
            return Layer.BOT_COPPER
        return Layer.TOP_COPPER


class ComponentSide(str, Enum):
    """Side of a footprint an SMD pad is defined on."""

    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value

    @property
    def layer(self) -> Layer:
        return Layer.TOP_COPPER if self is ComponentSide.TOP else Layer.BOT_COPPER


class BoardSide(str, Enum):
    """Board side of a placement record."""

    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value


class PadFunction(str, Enum):
    """Function of a library footprint pad."""

    UNSPECIFIED = "unspecified"
    STANDARD_PAD = "standard"
    PRESS_FIT_PAD = "pressfit"
    THERMAL_PAD = "thermal"
    BGA_PAD = "bga"
    EDGE_CONNECTOR_PAD = "edge_connector"
    TEST_PAD = "test"
    LOCAL_FIDUCIAL = "local_fiducial"
    GLOBAL_FIDUCIAL = "global_fiducial"

    def __str__(self) -> str:
        return self.value

    @property
    def is_fiducial(self) -> bool:
        return self in (PadFunction.LOCAL_FIDUCIAL, PadFunction.GLOBAL_FIDUCIAL)


class AssemblyType(str, Enum):
    """How a package is physically mounted.

    NONE means there is nothing to mount (e.g. a board outline or a logo).
    AUTO means the type is derived from the package's footprint pads.
    """

    NONE = "none"
    THT = "tht"
    SMT = "smt"
    MIXED = "mixed"
    OTHER = "other"
    AUTO = "auto"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, s: str) -> "AssemblyType":
        """Parse assembly type from string.

        Args:
            s: String to parse (e.g., "smt", "THT")

        Returns:
            Matching AssemblyType enum member.

        Raises:
            BoardModelError: If the string is not a known assembly type.
        """
        s_lower = s.lower().strip()
        for member in cls:
            if member.value == s_lower:
                return member

        raise BoardModelError(
            "Unknown assembly type",
            context={"value": s, "available": [m.value for m in cls]},
            suggestions=["Use one of the available assembly types"],
        )


class PlacementType(str, Enum):
    """Kind of a pick-and-place record."""

    THT = "tht"
    SMT = "smt"
    MIXED = "mixed"
    FIDUCIAL = "fiducial"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


__all__ = [
    "Layer",
    "ComponentSide",
    "BoardSide",
    "PadFunction",
    "AssemblyType",
    "PlacementType",
]
