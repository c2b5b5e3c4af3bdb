"""
Geometry primitives for board snapshots.

- Point: 2D position in mm
- Angle: rotation in degrees
- Transform: placement of a device (position, rotation, mirroring)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .types import Layer


@dataclass(frozen=True)
class Point:
    """2D point in mm."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def rotated(self, angle: Angle, origin: Point | None = None) -> Point:
        """Rotate point counter-clockwise around origin (default: 0,0)."""
        if origin is None:
            origin = Point(0.0, 0.0)

        rad = math.radians(angle.degrees)
        cos_a, sin_a = math.cos(rad), math.sin(rad)

        dx = self.x - origin.x
        dy = self.y - origin.y

        return Point(
            dx * cos_a - dy * sin_a + origin.x,
            dx * sin_a + dy * cos_a + origin.y,
        )

    def mirrored(self) -> Point:
        """Mirror horizontally (negate x)."""
        return Point(-self.x, self.y)

    def tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Angle:
    """Rotation angle in degrees, counter-clockwise."""

    degrees: float = 0.0

    def __neg__(self) -> Angle:
        return Angle(-self.degrees)

    def __add__(self, other: Angle) -> Angle:
        return Angle(self.degrees + other.degrees)

    def __sub__(self, other: Angle) -> Angle:
        return Angle(self.degrees - other.degrees)

    def mapped_to_0_360(self) -> Angle:
        """Normalize to [0, 360)."""
        return Angle(self.degrees % 360.0)

    @classmethod
    def deg0(cls) -> Angle:
        return cls(0.0)

    @classmethod
    def deg180(cls) -> Angle:
        return cls(180.0)


@dataclass(frozen=True)
class Transform:
    """
    Maps footprint-local geometry into board space.

    Mirroring is applied first (horizontal flip), then rotation, then
    translation by the device position.
    """

    position: Point = Point()
    rotation: Angle = Angle()
    mirrored: bool = False

    def map_point(self, point: Point) -> Point:
        if self.mirrored:
            point = point.mirrored()
        return point.rotated(self.rotation) + self.position

    def map_angle(self, angle: Angle) -> Angle:
        # A horizontal flip turns a direction at angle a into 180 - a.
        if self.mirrored:
            return self.rotation + Angle.deg180() - angle
        return self.rotation + angle

    def map_layer(self, layer: Layer) -> Layer:
        return layer.mirrored() if self.mirrored else layer
