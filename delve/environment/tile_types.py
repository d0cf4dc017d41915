"""
Tile types for generated levels, using the flyweight pattern.

This module defines:
- `TileTypeID`: the integer IDs stored in a level's tile array.
- `TileTypeData`: the intrinsic properties of a *type* of tile. One instance
  exists per tile type, not per cell.
- Helper functions that turn a whole array of IDs into a property array in one
  vectorized lookup (e.g. a boolean map of every walkable tile). The distance
  analyzer and architects depend on these.

Glyphs are not stored here; they depend on the level's theme
(see `delve.environment.themes`).
"""

from enum import IntEnum

import numpy as np


class TileTypeID(IntEnum):
    """IDs stored in the tile array. WALL is 0 so zeroed arrays are solid rock."""

    WALL = 0
    FLOOR = 1
    EXIT = 2


# Defines the intrinsic data for a *type* of tile (flyweight).
TileTypeData = np.dtype([("walkable", bool)])


def make_tile_type_data(*, walkable: bool) -> np.ndarray:
    """Create a TileTypeData instance."""
    return np.array((walkable,), dtype=TileTypeData)


# Indexed by TileTypeID. Order must follow the enum values.
_tile_type_data: dict[TileTypeID, np.ndarray] = {
    TileTypeID.WALL: make_tile_type_data(walkable=False),
    TileTypeID.FLOOR: make_tile_type_data(walkable=True),
    TileTypeID.EXIT: make_tile_type_data(walkable=True),
}

_registered_tile_type_data_list = [_tile_type_data[tile_id] for tile_id in TileTypeID]

# Indexing this with a tile array maps every cell in a single step.
_tile_type_properties_walkable = np.array(
    [t["walkable"] for t in _registered_tile_type_data_list], dtype=bool
)


def get_walkable_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """
    Converts a map of TileTypeIDs into a boolean map of walkability.
    True means the tile at that position can be walked on.
    """
    return _tile_type_properties_walkable[tile_type_ids_map]


def is_walkable(tile_type_id: int) -> bool:
    return bool(_tile_type_properties_walkable[tile_type_id])
