"""Library element models (devices, packages, footprint pads).

Library elements are shared, read-only definitions referenced by board
device instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..core.geometry import Angle, Point
from ..core.types import AssemblyType, ComponentSide, PadFunction


@dataclass(frozen=True)
class LocalizedNames:
    """Element name with optional translations keyed by locale (e.g. "de_CH")."""

    default: str
    translations: Dict[str, str] = field(default_factory=dict)

    def value(self, locale_order: Sequence[str]) -> str:
        """Get the name for the first matching locale, else the default."""
        for locale in locale_order:
            if locale in self.translations:
                return self.translations[locale]
        return self.default


@dataclass(frozen=True)
class LibraryPad:
    """Pad of a library footprint, in footprint-local coordinates."""

    name: str
    position: Point = Point()
    rotation: Angle = Angle()
    component_side: ComponentSide = ComponentSide.TOP
    has_hole: bool = False
    function: PadFunction = PadFunction.UNSPECIFIED

    @property
    def function_is_fiducial(self) -> bool:
        return self.function.is_fiducial

    @property
    def is_tht(self) -> bool:
        return self.has_hole


@dataclass
class LibraryDevice:
    """Library device definition."""

    names: LocalizedNames


@dataclass
class LibraryPackage:
    """Library package with its footprint pads."""

    names: LocalizedNames
    assembly_type: AssemblyType = AssemblyType.AUTO
    pads: List[LibraryPad] = field(default_factory=list)

    def get_assembly_type(self, resolve_auto: bool) -> AssemblyType:
        """
        Get the package assembly type.

        Args:
            resolve_auto: If True, AUTO is replaced by the type guessed
                from the footprint pads.

        Returns:
            The stored assembly type, or the guessed one for AUTO
        """
        if resolve_auto and self.assembly_type is AssemblyType.AUTO:
            return self.guess_assembly_type()
        return self.assembly_type

    def guess_assembly_type(self) -> AssemblyType:
        """Guess the assembly type from pad technologies."""
        has_tht = any(pad.is_tht for pad in self.pads)
        has_smt = any(not pad.is_tht for pad in self.pads)

        if has_tht and has_smt:
            return AssemblyType.MIXED
        if has_tht:
            return AssemblyType.THT
        if has_smt:
            return AssemblyType.SMT
        return AssemblyType.NONE
