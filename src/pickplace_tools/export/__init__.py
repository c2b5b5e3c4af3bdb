"""
Manufacturing data generation.

Example::

    from pickplace_tools.export import generate_pick_place

    data = generate_pick_place(board)
    print(f"{len(data)} items for {data.board_name}")
"""

from .pnp import (
    ASSEMBLY_TYPE_MAP,
    BoardPickPlaceGenerator,
    PickPlaceConfig,
    PickPlaceData,
    PlacementItem,
    generate_pick_place,
)

__all__ = [
    "ASSEMBLY_TYPE_MAP",
    "BoardPickPlaceGenerator",
    "PickPlaceConfig",
    "PickPlaceData",
    "PlacementItem",
    "generate_pick_place",
]
