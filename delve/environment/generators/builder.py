"""Level builder: runs an architect and finishes the level around its output.

The builder owns everything a level hands to the rest of the game:

1. Pick an architect (at random unless one is supplied) and let it carve
2. Put the goal on the reachable tile farthest from the player start
3. Mark that tile as the exit, or leave it as floor for the goal item
4. Drop spawn candidates that are too close to the player, then cap the count
5. Pick a cosmetic theme

Every random decision draws from the generator passed to build(), in that
order, so the same seed always yields the same level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from delve import config
from delve.environment.distance import filter_spawn_candidates, find_most_distant
from delve.environment.themes import Theme
from delve.environment.tile_types import TileTypeID

from .automata import CellularAutomataArchitect
from .base import BaseArchitect, NoValidStartError
from .drunkard import DrunkardsWalkArchitect
from .rooms import RoomsArchitect

if TYPE_CHECKING:
    from delve.environment.map import TileGrid
    from delve.types import TileCoord, WorldTilePos
    from delve.util.coordinates import Rect
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)

ARCHITECTS: dict[str, type[BaseArchitect]] = {
    CellularAutomataArchitect.name: CellularAutomataArchitect,
    DrunkardsWalkArchitect.name: DrunkardsWalkArchitect,
    RoomsArchitect.name: RoomsArchitect,
}


class GoalKind(Enum):
    """What waits at the far end of a level."""

    EXIT = "exit"  # an Exit tile leading to the next level
    ITEM = "item"  # a goal item, spawned on a plain floor tile by the caller


def goal_kind_for_level(
    map_level: int, final_level: int = config.FINAL_MAP_LEVEL
) -> GoalKind:
    """The final level holds the goal item; every other level ends in an exit."""
    return GoalKind.ITEM if map_level == final_level else GoalKind.EXIT


def create_architect(name: str, width: TileCoord, height: TileCoord) -> BaseArchitect:
    """Create an architect by its registered name.

    Raises:
        ValueError: If the name is not recognized.
    """
    try:
        architect_cls = ARCHITECTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown architect name: {name!r} (expected one of {sorted(ARCHITECTS)})"
        ) from None
    return architect_cls(width, height)


def select_architect(rng: RNG, width: TileCoord, height: TileCoord) -> BaseArchitect:
    """Choose one of the architects uniformly at random."""
    architect_cls = rng.choice(list(ARCHITECTS.values()))
    return architect_cls(width, height)


@dataclass
class LevelLayout:
    """A finished level, handed to the entity spawner and renderer.

    Attributes:
        grid: Final terrain.
        player_start: Where the player entity goes.
        goal_start: The reachable tile farthest from the player start.
        goal_kind: Whether goal_start holds an Exit tile or awaits the goal item.
        monster_spawns: Points for the entity spawner to fill, in order.
        theme: Cosmetic theme for rendering.
        architect_name: Which architect carved the grid.
        rooms: Rooms carved by the rooms architect; empty otherwise.
    """

    grid: TileGrid
    player_start: WorldTilePos
    goal_start: WorldTilePos
    goal_kind: GoalKind
    monster_spawns: list[WorldTilePos]
    theme: Theme
    architect_name: str
    rooms: list[Rect] = field(default_factory=list)

    @property
    def goal_is_exit(self) -> bool:
        return self.goal_kind is GoalKind.EXIT


class MapBuilder:
    """Generates one level per build() call."""

    def __init__(
        self,
        width: TileCoord = config.MAP_WIDTH,
        height: TileCoord = config.MAP_HEIGHT,
        architect: BaseArchitect | None = None,
        num_monsters: int = config.NUM_MONSTERS,
    ) -> None:
        if architect is not None and (
            architect.map_width != width or architect.map_height != height
        ):
            raise ValueError(
                f"Architect is sized {architect.map_width}x{architect.map_height}, "
                f"builder is {width}x{height}"
            )
        self.width = width
        self.height = height
        self.architect = architect
        self.num_monsters = num_monsters

    def build(self, rng: RNG, *, goal_kind: GoalKind = GoalKind.EXIT) -> LevelLayout:
        """Generate a complete level.

        Args:
            rng: The only source of randomness for this level.
            goal_kind: EXIT to mark the goal tile as the way down, ITEM to
                leave it as floor for the goal item.

        Raises:
            GridTooSmallError: If the grid is too small for the architect.
            NoValidStartError: If the architect left nowhere to start.
            DensityUnreachableError: If the drunkard's walk gave up.
        """
        architect = self.architect or select_architect(rng, self.width, self.height)
        architect.check_size()

        result = architect.generate(rng)
        grid = result.grid
        start = result.player_start
        if not grid.can_enter_tile(start):
            raise NoValidStartError(
                f"{architect.name} architect proposed a blocked start at {start}"
            )

        goal = find_most_distant(grid, start)
        if goal_kind is GoalKind.EXIT:
            grid.set_tile(goal, TileTypeID.EXIT)

        candidates = filter_spawn_candidates(grid, start, result.spawn_candidates)
        candidates = [pos for pos in candidates if pos != goal]
        if len(candidates) > self.num_monsters:
            spawns = rng.sample(candidates, self.num_monsters)
        else:
            spawns = candidates

        theme = rng.choice(list(Theme))

        logger.info(
            f"Built {self.width}x{self.height} level with {architect.name}: "
            f"start={start} goal={goal} ({goal_kind.value}) "
            f"spawns={len(spawns)} theme={theme.label}"
        )
        return LevelLayout(
            grid=grid,
            player_start=start,
            goal_start=goal,
            goal_kind=goal_kind,
            monster_spawns=spawns,
            theme=theme,
            architect_name=architect.name,
            rooms=result.rooms,
        )
