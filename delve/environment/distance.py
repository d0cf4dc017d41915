"""Breadth-first distance fields over walkable terrain.

A distance field answers "how many steps from the nearest source is each
tile?" for one grid snapshot. The generators use it three ways:

- pruning: wall off everything the anchor can't reach within a large radius
- goal placement: the reachable tile farthest from the player start
- spawn filtering: drop spawn candidates too close to the player start

Walls are impassable; floor and exit tiles cost one step each. The flood is
delegated to tcod's Dijkstra implementation, which on unit costs is exactly a
breadth-first expansion. A cutoff turns everything farther than it into
UNREACHABLE, the same as stopping each branch once it exceeds the cutoff.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import numpy as np
import tcod.path

from delve import config
from delve.environment.map import OutOfBoundsError
from delve.environment.tile_types import TileTypeID
from delve.types import Connectivity, TileIndex, WorldTilePos

if TYPE_CHECKING:
    from delve.environment.map import TileGrid

logger = logging.getLogger(__name__)

# Distance stored for tiles the flood never reached. Matches the fill value
# of tcod.path.maxarray for int32 arrays.
UNREACHABLE: Final = int(np.iinfo(np.int32).max)


@dataclass(frozen=True)
class DistanceField:
    """Result of one flood fill. Owned by the caller, never mutated.

    Attributes:
        distances: int32 array of shape (width, height); UNREACHABLE where the
            flood did not get to within the cutoff.
        sources: The tiles the flood started from (distance 0).
        max_distance: The cutoff used, or None for an unbounded search.
        connectivity: Neighbourhood used for expansion.
    """

    distances: np.ndarray
    sources: tuple[WorldTilePos, ...]
    max_distance: int | None
    connectivity: Connectivity

    @property
    def width(self) -> int:
        return self.distances.shape[0]

    @property
    def height(self) -> int:
        return self.distances.shape[1]

    @property
    def reachable(self) -> np.ndarray:
        """Boolean (width, height) mask of tiles with a finite distance."""
        return self.distances != UNREACHABLE

    def distance_at(self, pos: WorldTilePos) -> int | None:
        """Steps from the nearest source, or None if unreachable."""
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(f"Point {pos} is outside the distance field")
        value = int(self.distances[x, y])
        return None if value == UNREACHABLE else value

    def distance_at_index(self, index: TileIndex) -> int | None:
        """Distance lookup by flat row-major tile index."""
        if not 0 <= index < self.distances.size:
            raise OutOfBoundsError(f"Index {index} is outside the distance field")
        return self.distance_at((index % self.width, index // self.width))

    def is_reachable(self, pos: WorldTilePos) -> bool:
        return self.distance_at(pos) is not None

    def reachable_count(self) -> int:
        return int(np.count_nonzero(self.reachable))

    def most_distant(self) -> WorldTilePos:
        """Reachable tile with the greatest distance.

        Ties go to the first tile in scan order (lowest row-major index),
        since np.argmax returns the first maximum.
        """
        flat = self.distances.ravel(order="F").astype(np.int64)
        flat[flat == UNREACHABLE] = -1
        index = int(np.argmax(flat))
        return (index % self.width, index // self.width)


def compute_distance_field(
    grid: TileGrid,
    sources: Iterable[WorldTilePos],
    *,
    max_distance: int | None = None,
    connectivity: Connectivity = Connectivity.CARDINAL,
) -> DistanceField:
    """Flood outward from ``sources`` across walkable tiles.

    Args:
        grid: The grid to read. It is not modified.
        sources: One or more starting points, all inside the grid.
        max_distance: Cutoff; tiles farther than this are UNREACHABLE.
            None searches the whole map.
        connectivity: CARDINAL for 4-way steps, OCTILE to also step
            diagonally (a diagonal step also costs 1).

    Returns:
        A fresh DistanceField.

    Raises:
        ValueError: If no sources are given or the cutoff is negative.
        OutOfBoundsError: If a source lies outside the grid.
    """
    source_points = tuple((int(x), int(y)) for x, y in sources)
    if not source_points:
        raise ValueError("At least one source tile is required")
    if max_distance is not None and max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    distances = tcod.path.maxarray(grid.shape, dtype=np.int32, order="F")
    for pos in source_points:
        # index() does the bounds check
        grid.index(pos)
        distances[pos] = 0

    cost = np.array(grid.walkable, dtype=np.int8)
    diagonal = 1 if connectivity == Connectivity.OCTILE else None
    tcod.path.dijkstra2d(distances, cost, 1, diagonal, out=distances)

    if max_distance is not None:
        distances[distances > max_distance] = UNREACHABLE

    return DistanceField(
        distances=distances,
        sources=source_points,
        max_distance=max_distance,
        connectivity=connectivity,
    )


# =============================================================================
# Uses of the distance field during generation
# =============================================================================


def prune_unreachable(
    grid: TileGrid,
    anchor: WorldTilePos,
    max_distance: int = config.PRUNE_MAX_DISTANCE,
) -> int:
    """Turn every walkable tile the anchor can't reach within range into wall.

    This is the one helper here that writes to the grid.

    Returns:
        The number of tiles walled off.
    """
    field = compute_distance_field(grid, [anchor], max_distance=max_distance)
    doomed = ~field.reachable & (grid.tiles != TileTypeID.WALL)
    pruned = int(np.count_nonzero(doomed))
    if pruned:
        grid.tiles[doomed] = TileTypeID.WALL
        logger.debug(f"Pruned {pruned} tiles unreachable from {anchor}")
    return pruned


def find_most_distant(grid: TileGrid, start: WorldTilePos) -> WorldTilePos:
    """The reachable tile farthest (in steps) from ``start``."""
    field = compute_distance_field(grid, [start])
    return field.most_distant()


def filter_spawn_candidates(
    grid: TileGrid,
    start: WorldTilePos,
    candidates: Sequence[WorldTilePos],
    *,
    min_distance: int = config.MIN_SPAWN_DISTANCE,
    search_radius: int = config.SPAWN_FILTER_SEARCH_RADIUS,
) -> list[WorldTilePos]:
    """Drop candidates that are fewer than ``min_distance`` steps from start.

    The flood only searches ``search_radius`` steps out. Candidates it never
    reaches are kept: they are either farther away than the radius or walled
    off from the start entirely. Candidate order is preserved.
    """
    if search_radius < min_distance - 1:
        raise ValueError(
            f"search_radius ({search_radius}) must reach min_distance - 1 "
            f"({min_distance - 1})"
        )
    field = compute_distance_field(grid, [start], max_distance=search_radius)
    kept: list[WorldTilePos] = []
    for pos in candidates:
        distance = field.distance_at(pos)
        if distance is None or distance >= min_distance:
            kept.append(pos)
    return kept
