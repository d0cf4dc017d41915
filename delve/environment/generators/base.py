"""Base classes and errors for map architects."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from delve.environment.map import TileGrid
    from delve.types import TileCoord, WorldTilePos
    from delve.util.coordinates import Rect
    from delve.util.rng import RNG


class MapGenerationError(Exception):
    """Base class for failures that abort generating a level.

    There is no partial result: callers ask for a new level with a new seed.
    """


class NoValidStartError(MapGenerationError):
    """Raised when an architect leaves no floor tile to start the player on."""


class GridTooSmallError(MapGenerationError, ValueError):
    """Raised before generation when the grid is below an architect's minimum."""


@dataclass
class ArchitectResult:
    """Raw output of one architect run, before the builder post-processes it.

    Attributes:
        grid: The carved tile grid.
        player_start: Where the player enters the level.
        spawn_candidates: Points the architect proposes for monsters, in the
            order the architect produced them.
        rooms: Rooms carved into the grid (rooms architect only).
    """

    grid: TileGrid
    player_start: WorldTilePos
    spawn_candidates: list[WorldTilePos] = field(default_factory=list)
    rooms: list[Rect] = field(default_factory=list)


class BaseArchitect(abc.ABC):
    """Abstract base class for level layout algorithms.

    Subclasses set ``name`` and, where the algorithm needs room to work,
    ``min_width``/``min_height``.
    """

    name: ClassVar[str]
    min_width: ClassVar[int] = 1
    min_height: ClassVar[int] = 1

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        self.map_width = map_width
        self.map_height = map_height

    def check_size(self) -> None:
        """Reject grids too small for this architect before touching the RNG."""
        if self.map_width < self.min_width or self.map_height < self.min_height:
            raise GridTooSmallError(
                f"{type(self).__name__} needs at least "
                f"{self.min_width}x{self.min_height} tiles, "
                f"got {self.map_width}x{self.map_height}"
            )

    @abc.abstractmethod
    def generate(self, rng: RNG) -> ArchitectResult:
        """Carve a fresh grid and pick the player start."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.map_width}x{self.map_height})"
