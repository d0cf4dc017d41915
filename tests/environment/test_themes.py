from __future__ import annotations

from delve.environment.generators import GoalKind, LevelLayout
from delve.environment.themes import Theme, render_ascii
from delve.environment.tile_types import TileTypeID
from tests.helpers import grid_from_rows


def make_layout(
    rows: list[str],
    *,
    goal: tuple[int, int],
    goal_kind: GoalKind = GoalKind.EXIT,
    theme: Theme = Theme.DUNGEON,
) -> LevelLayout:
    return LevelLayout(
        grid=grid_from_rows(rows),
        player_start=(1, 1),
        goal_start=goal,
        goal_kind=goal_kind,
        monster_spawns=[(2, 2)],
        theme=theme,
        architect_name="rooms",
    )


def test_theme_glyphs() -> None:
    assert Theme.DUNGEON.glyph(TileTypeID.WALL) == "#"
    assert Theme.DUNGEON.glyph(TileTypeID.FLOOR) == "."
    assert Theme.FOREST.glyph(TileTypeID.WALL) == '"'
    assert Theme.FOREST.glyph(TileTypeID.FLOOR) == ";"
    assert Theme.FOREST.glyph(TileTypeID.EXIT) == ">"
    assert Theme.FOREST.label == "forest"


def test_render_with_exit() -> None:
    layout = make_layout(["#####", "#...#", "#..>#", "#####"], goal=(3, 2))
    assert render_ascii(layout).splitlines() == [
        "#####",
        "#@..#",
        "#.M>#",
        "#####",
    ]


def test_render_goal_item() -> None:
    layout = make_layout(
        ["#####", "#...#", "#...#", "#####"], goal=(3, 2), goal_kind=GoalKind.ITEM
    )
    assert render_ascii(layout).splitlines()[2] == "#.MA#"


def test_render_terrain_only() -> None:
    rows = ["#####", "#...#", "#..>#", "#####"]
    layout = make_layout(rows, goal=(3, 2))
    assert render_ascii(layout, show_entities=False) == "\n".join(rows)


def test_render_forest() -> None:
    layout = make_layout(
        ["####", "#..#", "#..#", "####"], goal=(2, 1), theme=Theme.FOREST
    )
    assert render_ascii(layout, show_entities=False).splitlines() == [
        '""""',
        '";;"',
        '";;"',
        '""""',
    ]
