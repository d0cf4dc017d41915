"""Level layout generators.

This package provides three interchangeable architects:
- CellularAutomataArchitect: Open caverns from smoothed random noise
- DrunkardsWalkArchitect: Winding caves dug by random walkers
- RoomsArchitect: Classic dungeon rooms joined by corridors

And the builder that turns an architect's raw grid into a playable level:
- MapBuilder: Picks an architect, places the goal, filters monster spawns
- LevelLayout: The finished level handed to the rest of the game
"""

from .automata import CellularAutomataArchitect
from .base import (
    ArchitectResult,
    BaseArchitect,
    GridTooSmallError,
    MapGenerationError,
    NoValidStartError,
)
from .builder import (
    ARCHITECTS,
    GoalKind,
    LevelLayout,
    MapBuilder,
    create_architect,
    goal_kind_for_level,
    select_architect,
)
from .drunkard import DensityUnreachableError, DrunkardsWalkArchitect
from .rooms import RoomsArchitect

__all__ = [
    "ARCHITECTS",
    "ArchitectResult",
    "BaseArchitect",
    "CellularAutomataArchitect",
    "DensityUnreachableError",
    "DrunkardsWalkArchitect",
    "GoalKind",
    "GridTooSmallError",
    "LevelLayout",
    "MapBuilder",
    "MapGenerationError",
    "NoValidStartError",
    "RoomsArchitect",
    "create_architect",
    "goal_kind_for_level",
    "select_architect",
]
