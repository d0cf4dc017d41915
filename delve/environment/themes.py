"""Cosmetic level themes and a plain-text renderer.

A theme only changes how tiles are drawn. Generation picks one at random per
level and never reads it back.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from delve.environment.tile_types import TileTypeID

if TYPE_CHECKING:
    from delve.environment.generators.builder import LevelLayout

PLAYER_GLYPH = "@"
MONSTER_GLYPH = "M"
GOAL_ITEM_GLYPH = "A"


class Theme(Enum):
    """Tile glyphs for each level theme.

    Options:
    - DUNGEON: stone walls and flagstone floors.
    - FOREST: trees for walls and grass for floors.
    """

    DUNGEON = ("dungeon", "#", ".", ">")
    FOREST = ("forest", '"', ";", ">")

    label: str
    glyphs: dict[TileTypeID, str]

    def __init__(self, label: str, wall: str, floor: str, exit_glyph: str) -> None:
        self.label = label
        self.glyphs = {
            TileTypeID.WALL: wall,
            TileTypeID.FLOOR: floor,
            TileTypeID.EXIT: exit_glyph,
        }

    def glyph(self, tile: TileTypeID) -> str:
        return self.glyphs[TileTypeID(tile)]


def render_ascii(layout: LevelLayout, *, show_entities: bool = True) -> str:
    """Draw a level as lines of text, one per row, top row first.

    With ``show_entities`` the player start, monster spawns and (when the
    goal is an item rather than an exit tile) the goal are drawn on top.
    """
    theme = layout.theme
    lookup = np.array([theme.glyph(tile) for tile in TileTypeID], dtype="U1")
    chars = lookup[layout.grid.tiles]

    if show_entities:
        for x, y in layout.monster_spawns:
            chars[x, y] = MONSTER_GLYPH
        if not layout.goal_is_exit:
            gx, gy = layout.goal_start
            chars[gx, gy] = GOAL_ITEM_GLYPH
        px, py = layout.player_start
        chars[px, py] = PLAYER_GLYPH

    return "\n".join("".join(chars[:, y]) for y in range(layout.grid.height))
