"""
Pick-and-place data generator for assembly services.

Converts a board snapshot into an ordered list of placement items: one
item per mounted device plus one item per fiducial pad side. Writing the
items to a manufacturer file format is left to downstream exporters.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterator, List, Mapping, Optional, Tuple

from ..core.geometry import Angle, Point
from ..core.types import AssemblyType, BoardSide, Layer, PlacementType

if TYPE_CHECKING:
    from ..schema.board import Board, DeviceInstance

logger = logging.getLogger(__name__)

# Packages with any other assembly type (NONE) have nothing to mount.
ASSEMBLY_TYPE_MAP: Mapping[AssemblyType, PlacementType] = MappingProxyType(
    {
        AssemblyType.THT: PlacementType.THT,
        AssemblyType.SMT: PlacementType.SMT,
        AssemblyType.MIXED: PlacementType.MIXED,
        AssemblyType.OTHER: PlacementType.OTHER,
    }
)

# Copper layers checked for fiducials, in output order
FIDUCIAL_SIDES: Tuple[Tuple[Layer, BoardSide], ...] = (
    (Layer.TOP_COPPER, BoardSide.TOP),
    (Layer.BOT_COPPER, BoardSide.BOTTOM),
)


@dataclass(frozen=True)
class PlacementItem:
    """Single placement instruction (component or fiducial)."""

    designator: str
    value: str
    device_name: str
    package_name: str
    position: Point  # mm, board space
    rotation: Angle  # degrees, as seen from the placement side
    board_side: BoardSide
    type: PlacementType

    def with_designator(self, designator: str) -> PlacementItem:
        """Return a copy with another designator."""
        return replace(self, designator=designator)


@dataclass
class PickPlaceData:
    """Pick-and-place items of one board, in generation order."""

    project_name: str
    project_version: str
    board_name: str
    _items: List[PlacementItem] = field(default_factory=list, repr=False)

    @property
    def items(self) -> Tuple[PlacementItem, ...]:
        return tuple(self._items)

    def add_item(self, item: PlacementItem) -> None:
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PlacementItem]:
        return iter(self.items)

    def count_by_type(self) -> Dict[PlacementType, int]:
        """Number of items per placement type."""
        return dict(Counter(item.type for item in self._items))

    def count_by_side(self) -> Dict[BoardSide, int]:
        """Number of items per board side."""
        return dict(Counter(item.board_side for item in self._items))


@dataclass
class PickPlaceConfig:
    """Configuration for pick-and-place generation."""

    # Export fiducial pads as separate items
    include_fiducials: bool = True

    # Joins designator and index when a device has several fiducial items
    designator_separator: str = ":"


class BoardPickPlaceGenerator:
    """
    Generates pick-and-place data from a board.

    The board is only read. Every call to generate() builds a new
    PickPlaceData which keeps no reference to the board.

    Example::

        generator = BoardPickPlaceGenerator(board)
        data = generator.generate()
        for item in data:
            print(item.designator, item.position, item.board_side)
    """

    def __init__(self, board: Board, config: Optional[PickPlaceConfig] = None):
        self.board = board
        self.config = config or PickPlaceConfig()

    def generate(self) -> PickPlaceData:
        project = self.board.project
        data = PickPlaceData(project.name, project.version, self.board.name)
        locale_order = tuple(project.locale_order)

        for device in self.board.device_instances:
            for item in self._device_items(device, locale_order):
                data.add_item(item)

        logger.info(
            f"Generated {len(data)} pick-and-place items for board '{self.board.name}' "
            f"({len(self.board.device_instances)} devices)"
        )
        return data

    def _device_items(
        self, device: DeviceInstance, locale_order: Tuple[str, ...]
    ) -> List[PlacementItem]:
        """Fiducial items (renamed if several) followed by the device item."""
        designator = device.component.name
        value = device.component.get_value(replace_attributes=True).strip()
        dev_name = device.lib_device.names.value(locale_order)
        pkg_name = device.lib_package.names.value(locale_order)

        items: List[PlacementItem] = []

        if self.config.include_fiducials:
            for pad in device.pads:
                if not pad.lib_pad.function_is_fiducial:
                    continue
                rotation = -pad.rotation if pad.mirrored else pad.rotation
                for layer, side in FIDUCIAL_SIDES:
                    if pad.is_on_layer(layer):
                        items.append(
                            PlacementItem(
                                designator,
                                value,
                                dev_name,
                                pkg_name,
                                pad.position,
                                rotation,
                                side,
                                PlacementType.FIDUCIAL,
                            )
                        )

        fiducial_count = len(items)
        if fiducial_count > 1:
            sep = self.config.designator_separator
            items = [
                item.with_designator(f"{item.designator}{sep}{i + 1}")
                for i, item in enumerate(items)
            ]

        assembly_type = device.lib_package.get_assembly_type(True)
        placement_type = ASSEMBLY_TYPE_MAP.get(assembly_type)
        if placement_type is None:
            logger.debug(f"{designator}: package '{pkg_name}' has nothing to mount")
        else:
            rotation = -device.rotation if device.mirrored else device.rotation
            side = BoardSide.BOTTOM if device.mirrored else BoardSide.TOP
            items.append(
                PlacementItem(
                    designator,
                    value,
                    dev_name,
                    pkg_name,
                    device.position,
                    rotation,
                    side,
                    placement_type,
                )
            )
            if fiducial_count == 1:
                logger.warning(
                    f"{designator}: fiducial and device items share the designator "
                    f"'{designator}'"
                )

        logger.debug(
            f"{designator}: {fiducial_count} fiducial item(s), "
            f"{'no' if placement_type is None else placement_type.value} device item"
        )
        return items


def generate_pick_place(board: Board, config: Optional[PickPlaceConfig] = None) -> PickPlaceData:
    """
    Generate pick-and-place data for a board.

    Args:
        board: Board snapshot to read
        config: Generation options (defaults: fiducials included, ':' separator)

    Returns:
        PickPlaceData with items in device order
    """
    return BoardPickPlaceGenerator(board, config).generate()
