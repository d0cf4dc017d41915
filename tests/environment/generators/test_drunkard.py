from __future__ import annotations

import random
from fractions import Fraction

import pytest

from delve.environment.distance import compute_distance_field
from delve.environment.generators import (
    DensityUnreachableError,
    DrunkardsWalkArchitect,
)
from delve.environment.tile_types import TileTypeID

SEEDS = [0, 3, 42, 2024]


@pytest.mark.parametrize("seed", SEEDS)
def test_standard_level_reaches_density(seed: int) -> None:
    """An 80x50 level carves at least a third of the map, around the centre."""
    result = DrunkardsWalkArchitect(80, 50).generate(random.Random(seed))
    grid = result.grid

    assert grid.count(TileTypeID.FLOOR) >= 1333
    assert grid.count(TileTypeID.FLOOR) * 3 >= grid.size
    assert result.player_start == (40, 25)
    assert grid.tile_at((40, 25)) is TileTypeID.FLOOR


@pytest.mark.parametrize("seed", SEEDS)
def test_all_floor_is_reachable_from_the_centre(seed: int) -> None:
    result = DrunkardsWalkArchitect(60, 40).generate(random.Random(seed))
    field = compute_distance_field(result.grid, [result.player_start])
    assert (field.reachable == result.grid.walkable).all()


def test_candidates_are_every_floor_tile_but_the_centre() -> None:
    result = DrunkardsWalkArchitect(30, 20).generate(random.Random(5))
    floor = result.grid.points_of(TileTypeID.FLOOR)
    assert result.spawn_candidates == [pos for pos in floor if pos != (15, 10)]


def test_desired_floor_rounds_up() -> None:
    assert DrunkardsWalkArchitect(80, 50).desired_floor == 1334
    assert DrunkardsWalkArchitect(3, 3).desired_floor == 3
    assert DrunkardsWalkArchitect(1, 1).desired_floor == 1
    assert (
        DrunkardsWalkArchitect(10, 10, floor_density=Fraction(1, 2)).desired_floor
        == 50
    )


def test_single_tile_map() -> None:
    result = DrunkardsWalkArchitect(1, 1).generate(random.Random(0))
    assert result.player_start == (0, 0)
    assert result.grid.tile_at((0, 0)) is TileTypeID.FLOOR
    assert result.spawn_candidates == []


def test_gives_up_after_max_drops() -> None:
    # Each walker carves a single tile before running out of steps
    architect = DrunkardsWalkArchitect(20, 20, stagger_distance=0, max_drops=3)
    with pytest.raises(DensityUnreachableError):
        architect.generate(random.Random(0))


def test_same_seed_same_caves() -> None:
    first = DrunkardsWalkArchitect(40, 30).generate(random.Random(11))
    second = DrunkardsWalkArchitect(40, 30).generate(random.Random(11))
    assert (first.grid.tiles == second.grid.tiles).all()
    assert first.spawn_candidates == second.spawn_candidates
