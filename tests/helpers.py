from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from delve.environment.map import TileGrid
from delve.environment.tile_types import TileTypeID

_CHAR_TO_TILE = {
    "#": TileTypeID.WALL,
    ".": TileTypeID.FLOOR,
    ">": TileTypeID.EXIT,
}


def grid_from_rows(rows: Sequence[str]) -> TileGrid:
    """Build a TileGrid from text rows, top row first.

    ``#`` is wall, ``.`` floor and ``>`` exit.
    """
    height = len(rows)
    width = len(rows[0])
    tiles = np.zeros((width, height), dtype=np.uint8, order="F")
    for y, row in enumerate(rows):
        assert len(row) == width, f"Row {y} has length {len(row)}, expected {width}"
        for x, char in enumerate(row):
            tiles[x, y] = _CHAR_TO_TILE[char]
    return TileGrid.from_array(tiles)
