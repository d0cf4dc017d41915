"""Cave-like levels from cellular automata.

1. Seed every tile independently with random noise (floor or wall)
2. Smooth the noise a fixed number of times, each pass reading a snapshot
   of the previous one:
   - Count wall neighbours in the 8-directional Moore neighbourhood
   - Zero wall neighbours -> wall (fills the middle of big open pockets)
   - More than four wall neighbours -> wall (erodes thin floor strands)
   - Anything else -> floor
3. Start the player on the floor tile closest to the middle of the map

Border tiles are never smoothed and keep their seeded value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from delve import config
from delve.environment.map import TileGrid
from delve.environment.tile_types import TileTypeID
from delve.util.coordinates import map_center

from .base import ArchitectResult, BaseArchitect, NoValidStartError

if TYPE_CHECKING:
    from delve.types import WorldTilePos
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)

# Offsets of the 8 neighbours around a tile
_MOORE_OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def count_wall_neighbours(tiles: np.ndarray) -> np.ndarray:
    """Wall count around every interior tile.

    Returns:
        An int8 array of shape (width - 2, height - 2); entry [i, j] is the
        count for tile (i + 1, j + 1).
    """
    width, height = tiles.shape
    walls = (tiles == TileTypeID.WALL).astype(np.int8)
    counts = np.zeros((width - 2, height - 2), dtype=np.int8)
    for dx, dy in _MOORE_OFFSETS:
        counts += walls[1 + dx : width - 1 + dx, 1 + dy : height - 1 + dy]
    return counts


def smooth(
    tiles: np.ndarray, wall_limit: int = config.AUTOMATA_WALL_NEIGHBOUR_LIMIT
) -> np.ndarray:
    """Run one automaton step and return the result as a new array."""
    result = tiles.copy(order="F")
    width, height = tiles.shape
    if width < 3 or height < 3:
        return result
    counts = count_wall_neighbours(tiles)
    result[1:-1, 1:-1] = np.where(
        (counts == 0) | (counts > wall_limit), TileTypeID.WALL, TileTypeID.FLOOR
    )
    return result


class CellularAutomataArchitect(BaseArchitect):
    """Generates open caverns by smoothing random noise."""

    name = "automata"
    # Anything smaller has no interior tiles to smooth
    min_width = 3
    min_height = 3

    def __init__(
        self,
        map_width: int,
        map_height: int,
        floor_probability: float = config.AUTOMATA_FLOOR_PROBABILITY,
        iterations: int = config.AUTOMATA_ITERATIONS,
    ) -> None:
        super().__init__(map_width, map_height)
        self.floor_probability = floor_probability
        self.iterations = iterations

    def _random_noise(self, grid: TileGrid, rng: RNG) -> None:
        # One draw per tile in scan order, so the noise depends only on the seed
        rolls = np.array([rng.random() for _ in range(grid.size)])
        floor = rolls.reshape(grid.shape, order="F") < self.floor_probability
        grid.tiles[:, :] = np.where(floor, TileTypeID.FLOOR, TileTypeID.WALL)

    def _find_start(self, grid: TileGrid) -> WorldTilePos:
        """Floor tile nearest the map centre; first in scan order on ties."""
        floor_indices = np.flatnonzero(
            grid.tiles.ravel(order="F") == TileTypeID.FLOOR
        )
        if floor_indices.size == 0:
            raise NoValidStartError("Cellular automata produced no floor tiles")
        cx, cy = map_center(grid.width, grid.height)
        xs = floor_indices % grid.width
        ys = floor_indices // grid.width
        # Squared distances order the same as Euclidean and stay exact
        squared = (xs - cx) ** 2 + (ys - cy) ** 2
        return grid.point(int(floor_indices[int(np.argmin(squared))]))

    def generate(self, rng: RNG) -> ArchitectResult:
        self.check_size()
        grid = TileGrid(self.map_width, self.map_height)
        self._random_noise(grid, rng)
        logger.debug(
            f"Seeded noise: {grid.count(TileTypeID.FLOOR)} floor of {grid.size}"
        )

        for _ in range(self.iterations):
            grid.tiles[:, :] = smooth(grid.tiles)

        start = self._find_start(grid)
        candidates = [pos for pos in grid.points_of(TileTypeID.FLOOR) if pos != start]
        logger.debug(
            f"Caverns smoothed over {self.iterations} iterations: "
            f"{len(candidates) + 1} floor tiles, start {start}"
        )
        return ArchitectResult(
            grid=grid, player_start=start, spawn_candidates=candidates
        )
