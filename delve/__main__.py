"""Command line entry point: generate a level and print it as text."""

from __future__ import annotations

import argparse
import logging

from . import config
from .environment.generators import (
    ARCHITECTS,
    MapBuilder,
    create_architect,
    goal_kind_for_level,
)
from .environment.themes import render_ascii
from .types import RandomSeed
from .util import rng


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delve", description="Generate a dungeon level and print it"
    )
    parser.add_argument(
        "--seed",
        type=str,
        default=None,
        help="Master seed; integers and words both work (default: random)",
    )
    parser.add_argument("--width", type=int, default=config.MAP_WIDTH)
    parser.add_argument("--height", type=int, default=config.MAP_HEIGHT)
    parser.add_argument(
        "--architect",
        choices=sorted(ARCHITECTS),
        help="Force a layout algorithm (default: chosen at random)",
    )
    parser.add_argument(
        "--level",
        type=int,
        default=0,
        help="Dungeon depth; decides exit tile vs goal item (default: 0)",
    )
    parser.add_argument(
        "--no-entities",
        action="store_true",
        help="Draw terrain only, without player, monsters or goal",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def _parse_seed(raw: str | None) -> RandomSeed:
    if raw is None:
        return config.RANDOM_SEED
    try:
        return int(raw)
    except ValueError:
        return raw


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng.init(_parse_seed(args.seed))
    architect = (
        create_architect(args.architect, args.width, args.height)
        if args.architect
        else None
    )
    builder = MapBuilder(args.width, args.height, architect=architect)
    layout = builder.build(
        rng.for_level(args.level), goal_kind=goal_kind_for_level(args.level)
    )

    print(render_ascii(layout, show_entities=not args.no_entities))
    print(
        f"architect={layout.architect_name} theme={layout.theme.label} "
        f"start={layout.player_start} goal={layout.goal_start} "
        f"({layout.goal_kind.value}) spawns={len(layout.monster_spawns)}"
    )


if __name__ == "__main__":
    main()
