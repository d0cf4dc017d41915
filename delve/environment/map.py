from __future__ import annotations

import numpy as np

from delve.environment import tile_types
from delve.environment.tile_types import TileTypeID
from delve.types import TileCoord, TileIndex, WorldTilePos


class OutOfBoundsError(IndexError):
    """A coordinate or flat index fell outside the grid.

    Always a programming error: callers are expected to bounds-check first.
    """


class TileGrid:
    """Fixed-size rectangular grid of tile types for one level.

    Tiles live in a numpy array of shape (width, height), indexed
    ``tiles[x, y]``. The array is Fortran-ordered so its flat layout is
    row-major, matching ``index = y * width + x``.
    """

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        fill_tile: TileTypeID = TileTypeID.WALL,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width: TileCoord = width
        self.height: TileCoord = height
        self.tiles = np.full(
            (width, height), fill_value=fill_tile, dtype=np.uint8, order="F"
        )

    @classmethod
    def from_array(cls, tiles: np.ndarray) -> TileGrid:
        """Wrap a copy of an existing (width, height) tile array."""
        width, height = tiles.shape
        grid = cls(width, height)
        grid.tiles[:, :] = tiles
        return grid

    @property
    def shape(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def walkable(self) -> np.ndarray:
        """Boolean array of shape (width, height) where True means walkable."""
        return tile_types.get_walkable_map(self.tiles)

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def in_bounds(self, pos: WorldTilePos) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, pos: WorldTilePos) -> TileIndex:
        """Flat row-major index of a point."""
        if not self.in_bounds(pos):
            raise OutOfBoundsError(
                f"Point {pos} is outside the {self.width}x{self.height} grid"
            )
        x, y = pos
        return y * self.width + x

    def try_index(self, pos: WorldTilePos) -> TileIndex | None:
        """Like index(), but returns None for points outside the grid."""
        if not self.in_bounds(pos):
            return None
        return self.index(pos)

    def point(self, index: TileIndex) -> WorldTilePos:
        """Point for a flat row-major index; the inverse of index()."""
        if not 0 <= index < self.size:
            raise OutOfBoundsError(
                f"Index {index} is outside the {self.width}x{self.height} grid"
            )
        return (index % self.width, index // self.width)

    # ------------------------------------------------------------------
    # Tiles
    # ------------------------------------------------------------------
    def fill(self, tile: TileTypeID) -> None:
        self.tiles[:, :] = tile

    def tile_at(self, pos: WorldTilePos) -> TileTypeID:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(
                f"Point {pos} is outside the {self.width}x{self.height} grid"
            )
        return TileTypeID(int(self.tiles[pos]))

    def set_tile(self, pos: WorldTilePos, tile: TileTypeID) -> None:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(
                f"Point {pos} is outside the {self.width}x{self.height} grid"
            )
        self.tiles[pos] = tile

    def can_enter_tile(self, pos: WorldTilePos) -> bool:
        """True if pos is on the map and the tile there can be walked on."""
        return self.in_bounds(pos) and tile_types.is_walkable(int(self.tiles[pos]))

    def count(self, tile: TileTypeID) -> int:
        return int(np.count_nonzero(self.tiles == tile))

    def floor_fraction(self) -> float:
        return self.count(TileTypeID.FLOOR) / self.size

    def points_of(self, tile: TileTypeID) -> list[WorldTilePos]:
        """Every point holding the given tile type, in scan order."""
        flat = np.flatnonzero(self.tiles.ravel(order="F") == tile)
        return [self.point(int(i)) for i in flat]

    def copy(self) -> TileGrid:
        return TileGrid.from_array(self.tiles)

    def __repr__(self) -> str:
        return f"TileGrid(width={self.width}, height={self.height})"
