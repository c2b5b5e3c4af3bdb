"""Pytest fixtures for pickplace-tools tests."""

import pytest

from pickplace_tools.core.geometry import Angle, Point
from pickplace_tools.core.types import AssemblyType, ComponentSide, PadFunction
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


def smd_pad(name="1", x=0.0, y=0.0, rotation=0.0, side=ComponentSide.TOP, fiducial=False):
    """Build an SMD library pad."""
    return LibraryPad(
        name=name,
        position=Point(x, y),
        rotation=Angle(rotation),
        component_side=side,
        has_hole=False,
        function=PadFunction.GLOBAL_FIDUCIAL if fiducial else PadFunction.STANDARD_PAD,
    )


def tht_pad(name="1", x=0.0, y=0.0, rotation=0.0, fiducial=False):
    """Build a through-hole library pad (present on both copper layers)."""
    return LibraryPad(
        name=name,
        position=Point(x, y),
        rotation=Angle(rotation),
        has_hole=True,
        function=PadFunction.LOCAL_FIDUCIAL if fiducial else PadFunction.STANDARD_PAD,
    )


def make_device(
    name,
    assembly_type=AssemblyType.SMT,
    pads=(),
    x=0.0,
    y=0.0,
    rotation=0.0,
    mirrored=False,
    value="",
    attributes=None,
    device_name="Resistor",
    package_name="R0603",
):
    """Build a device instance with its own library device and package."""
    return DeviceInstance(
        component=ComponentInstance(name, value, dict(attributes or {})),
        lib_device=LibraryDevice(LocalizedNames(device_name)),
        lib_package=LibraryPackage(
            LocalizedNames(package_name), assembly_type=assembly_type, pads=list(pads)
        ),
        position=Point(x, y),
        rotation=Angle(rotation),
        mirrored=mirrored,
    )


def make_board(*devices, locale_order=()):
    """Build a board of the given devices."""
    project = Project("Demo", "v1", tuple(locale_order))
    return Board("default", project, list(devices))


@pytest.fixture
def mixed_board():
    """Board with SMT, mirrored THT, fiducial-only and unmountable devices."""
    return make_board(
        make_device("R1", AssemblyType.SMT, pads=[smd_pad("1"), smd_pad("2", x=1.6)],
                    x=10.0, y=20.0, rotation=90.0, value="10k"),
        make_device("J1", AssemblyType.THT, pads=[tht_pad("1"), tht_pad("2", x=2.54)],
                    x=30.0, y=5.0, rotation=45.0, mirrored=True),
        make_device("FID", AssemblyType.NONE,
                    pads=[smd_pad("1", fiducial=True), smd_pad("2", x=50.0, fiducial=True)]),
        make_device("LOGO", AssemblyType.NONE),
    )
