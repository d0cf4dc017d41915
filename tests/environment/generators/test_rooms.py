from __future__ import annotations

import random
from itertools import combinations

import numpy as np
import pytest

from delve.environment.distance import compute_distance_field
from delve.environment.generators import (
    GridTooSmallError,
    NoValidStartError,
    RoomsArchitect,
)
from delve.environment.map import TileGrid
from delve.environment.tile_types import TileTypeID

SEEDS = [0, 1, 42, 777]


@pytest.mark.parametrize("seed", SEEDS)
def test_every_room_centre_is_connected(seed: int) -> None:
    result = RoomsArchitect(80, 50).generate(random.Random(seed))
    grid = result.grid
    field = compute_distance_field(grid, [result.player_start])

    assert len(result.rooms) == 20
    for room in result.rooms:
        assert grid.tile_at(room.center()) is TileTypeID.FLOOR
        assert field.is_reachable(room.center())


@pytest.mark.parametrize("seed", SEEDS)
def test_rooms_leave_a_solid_border(seed: int) -> None:
    result = RoomsArchitect(40, 30).generate(random.Random(seed))
    tiles = result.grid.tiles
    for room in result.rooms:
        assert room.x1 >= 1 and room.y1 >= 1
        assert room.x2 <= 39 and room.y2 <= 29
    assert (tiles[0, :] == TileTypeID.WALL).all()
    assert (tiles[-1, :] == TileTypeID.WALL).all()
    assert (tiles[:, 0] == TileTypeID.WALL).all()
    assert (tiles[:, -1] == TileTypeID.WALL).all()


@pytest.mark.parametrize("seed", SEEDS)
def test_start_and_candidates_come_from_room_centres(seed: int) -> None:
    result = RoomsArchitect(80, 50).generate(random.Random(seed))
    start = result.rooms[0].center()
    assert result.player_start == start
    assert start not in result.spawn_candidates
    assert len(set(result.spawn_candidates)) == len(result.spawn_candidates)
    other_centres = {room.center() for room in result.rooms[1:]}
    assert set(result.spawn_candidates) == other_centres - {start}


@pytest.mark.parametrize("seed", SEEDS)
def test_non_overlapping_mode(seed: int) -> None:
    architect = RoomsArchitect(80, 50, allow_overlap=False)
    result = architect.generate(random.Random(seed))
    assert 1 <= len(result.rooms) <= 20
    for a, b in combinations(result.rooms, 2):
        assert not a.intersects(b)


def test_corridors_join_consecutive_rooms() -> None:
    architect = RoomsArchitect(20, 20)
    tiles = TileGrid(20, 20).tiles
    architect._carve_h_tunnel(tiles, 8, 3, 5)
    architect._carve_v_tunnel(tiles, 2, 6, 3)
    assert (tiles[3:9, 5] == TileTypeID.FLOOR).all()
    assert (tiles[3, 2:7] == TileTypeID.FLOOR).all()
    assert np.count_nonzero(tiles) == 6 + 5 - 1


def test_same_seed_same_dungeon() -> None:
    first = RoomsArchitect(50, 40).generate(random.Random(8))
    second = RoomsArchitect(50, 40).generate(random.Random(8))
    assert (first.grid.tiles == second.grid.tiles).all()
    assert first.rooms == second.rooms


def test_no_rooms_means_no_start() -> None:
    with pytest.raises(NoValidStartError, match="at least one room"):
        RoomsArchitect(30, 30, num_rooms=0).generate(random.Random(0))


@pytest.mark.parametrize("size", [(11, 30), (30, 11), (5, 5)])
def test_rejects_small_grids(size: tuple[int, int]) -> None:
    with pytest.raises(GridTooSmallError):
        RoomsArchitect(*size).generate(random.Random(0))


def test_minimum_size_generates() -> None:
    result = RoomsArchitect(12, 12).generate(random.Random(3))
    assert result.grid.can_enter_tile(result.player_start)


def test_rejects_bad_room_sizes() -> None:
    with pytest.raises(ValueError):
        RoomsArchitect(40, 40, min_room_size=5, max_room_size=4)
