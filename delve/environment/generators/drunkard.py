"""Winding cave levels carved by random walkers ("drunkard's walk")."""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import TYPE_CHECKING

from delve import config
from delve.environment.distance import prune_unreachable
from delve.environment.map import TileGrid
from delve.environment.tile_types import TileTypeID
from delve.util.coordinates import map_center

from .base import ArchitectResult, BaseArchitect, MapGenerationError

if TYPE_CHECKING:
    from delve.types import WorldTilePos
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)

# West, east, north, south; indexed by a randrange(4) draw
_CARDINAL_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class DensityUnreachableError(MapGenerationError):
    """Raised when the walkers can't carve enough floor within the drop limit."""


class DrunkardsWalkArchitect(BaseArchitect):
    """Digs floor with random walkers until a target share of the map is open.

    The first walker starts in the middle of the map, later ones at random
    points. After each walker, anything the centre can't reach is walled back
    up, so the level stays in one connected piece around the player start.
    """

    name = "drunkard"

    def __init__(
        self,
        map_width: int,
        map_height: int,
        stagger_distance: int = config.DRUNKARD_STAGGER_DISTANCE,
        floor_density: Fraction = config.DRUNKARD_FLOOR_DENSITY,
        max_drops: int = config.DRUNKARD_MAX_DROPS,
    ) -> None:
        super().__init__(map_width, map_height)
        self.stagger_distance = stagger_distance
        self.floor_density = floor_density
        self.max_drops = max_drops

    @property
    def desired_floor(self) -> int:
        """Floor tiles needed before carving stops."""
        return math.ceil(self.map_width * self.map_height * self.floor_density)

    def _stagger(self, grid: TileGrid, start: WorldTilePos, rng: RNG) -> None:
        """Walk from ``start`` carving floor until off the map or worn out."""
        x, y = start
        staggered = 0
        while True:
            grid.tiles[x, y] = TileTypeID.FLOOR
            dx, dy = _CARDINAL_STEPS[rng.randrange(4)]
            x += dx
            y += dy
            if not grid.in_bounds((x, y)):
                break
            staggered += 1
            if staggered > self.stagger_distance:
                break

    def generate(self, rng: RNG) -> ArchitectResult:
        self.check_size()
        grid = TileGrid(self.map_width, self.map_height, fill_tile=TileTypeID.WALL)
        center = map_center(self.map_width, self.map_height)
        desired = self.desired_floor

        drops = 0
        next_start = center
        while True:
            if drops >= self.max_drops:
                raise DensityUnreachableError(
                    f"Carved {grid.count(TileTypeID.FLOOR)}/{desired} floor tiles "
                    f"after {drops} walkers"
                )
            self._stagger(grid, next_start, rng)
            drops += 1
            prune_unreachable(grid, center)
            if grid.count(TileTypeID.FLOOR) >= desired:
                break
            next_start = (
                rng.randrange(0, self.map_width),
                rng.randrange(0, self.map_height),
            )

        candidates = [
            pos for pos in grid.points_of(TileTypeID.FLOOR) if pos != center
        ]
        logger.debug(
            f"Drunkard's walk finished after {drops} walkers: "
            f"{len(candidates) + 1}/{grid.size} floor tiles"
        )
        return ArchitectResult(
            grid=grid, player_start=center, spawn_candidates=candidates
        )
