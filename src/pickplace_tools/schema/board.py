"""Board snapshot models.

A board owns device instances; each device references one component
instance, one library device and one library package. Footprint pads are
derived from the package pads and transformed into board space.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..core.geometry import Angle, Point, Transform
from ..core.types import Layer
from ..exceptions import ValidationError
from .library import LibraryDevice, LibraryPackage, LibraryPad

# Attribute placeholders in component values, e.g. "{{RESISTANCE}}"
_ATTRIBUTE_PATTERN = re.compile(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}")


@dataclass
class Project:
    """Project metadata."""

    name: str
    version: str = ""
    locale_order: Tuple[str, ...] = ()


@dataclass
class ComponentInstance:
    """Circuit component instance (designator, value, attributes)."""

    name: str
    value: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)

    def get_value(self, replace_attributes: bool = False) -> str:
        """
        Get the component value.

        Args:
            replace_attributes: Substitute {{KEY}} placeholders with the
                matching attribute value (unknown keys become empty).

        Returns:
            The raw or substituted value
        """
        if not replace_attributes:
            return self.value

        lookup = {key.upper(): val for key, val in self.attributes.items()}
        return _ATTRIBUTE_PATTERN.sub(
            lambda m: lookup.get(m.group(1).upper(), ""), self.value
        )


class FootprintPad:
    """Library pad placed on the board through its device's transform."""

    def __init__(self, device: DeviceInstance, lib_pad: LibraryPad):
        self._device = device
        self._lib_pad = lib_pad

    def __repr__(self) -> str:
        return f"FootprintPad({self._device.component.name}.{self._lib_pad.name})"

    @property
    def lib_pad(self) -> LibraryPad:
        return self._lib_pad

    @property
    def position(self) -> Point:
        return self._device.transform.map_point(self._lib_pad.position)

    @property
    def rotation(self) -> Angle:
        return self._device.transform.map_angle(self._lib_pad.rotation)

    @property
    def mirrored(self) -> bool:
        return self._device.mirrored

    def is_on_layer(self, layer: Layer) -> bool:
        """Check copper layer membership (THT pads are on both sides)."""
        if self._lib_pad.has_hole:
            return True
        side_layer = self._device.transform.map_layer(self._lib_pad.component_side.layer)
        return side_layer is layer


@dataclass
class DeviceInstance:
    """Device mounted on a board."""

    component: ComponentInstance
    lib_device: LibraryDevice
    lib_package: LibraryPackage
    position: Point = Point()
    rotation: Angle = Angle()
    mirrored: bool = False

    @property
    def transform(self) -> Transform:
        return Transform(self.position, self.rotation, self.mirrored)

    @property
    def pads(self) -> List[FootprintPad]:
        """Footprint pads in library order."""
        return [FootprintPad(self, lib_pad) for lib_pad in self.lib_package.pads]


@dataclass
class Board:
    """Board snapshot: ordered device instances of a project."""

    name: str
    project: Project
    device_instances: List[DeviceInstance] = field(default_factory=list)

    def validate(self) -> List[str]:
        """
        Check the board for inconsistencies.

        Returns:
            List of problems (empty if the board is well-formed)
        """
        errors: List[str] = []

        for index, device in enumerate(self.device_instances):
            if not device.component.name.strip():
                errors.append(f"Component name must not be empty (device #{index + 1})")

        counts = Counter(d.component.name for d in self.device_instances if d.component.name)
        for name, count in counts.items():
            if count > 1:
                errors.append(f"Duplicate component name: {name} ({count} devices)")

        return errors

    def check(self) -> None:
        """Raise ValidationError if validate() reports any problem."""
        errors = self.validate()
        if errors:
            raise ValidationError(
                errors,
                context={"board": self.name, "project": self.project.name},
                suggestions=["Give every component a unique, non-empty name"],
            )
