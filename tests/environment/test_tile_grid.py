from __future__ import annotations

import numpy as np
import pytest

from delve.environment.map import OutOfBoundsError, TileGrid
from delve.environment.tile_types import TileTypeID
from tests.helpers import grid_from_rows


class TestCoordinates:
    def test_index_is_row_major(self) -> None:
        grid = TileGrid(80, 50)
        assert grid.index((0, 0)) == 0
        assert grid.index((79, 0)) == 79
        assert grid.index((0, 1)) == 80
        assert grid.index((40, 25)) == 25 * 80 + 40

    def test_index_and_point_are_inverses(self) -> None:
        grid = TileGrid(7, 4)
        for i in range(grid.size):
            assert grid.index(grid.point(i)) == i
        for y in range(grid.height):
            for x in range(grid.width):
                assert grid.point(grid.index((x, y))) == (x, y)

    def test_flat_memory_matches_index(self) -> None:
        """The Fortran-ordered array flattens in the same order as index()."""
        grid = TileGrid(5, 3)
        grid.set_tile((3, 2), TileTypeID.FLOOR)
        flat = grid.tiles.ravel(order="F")
        assert flat[grid.index((3, 2))] == TileTypeID.FLOOR
        assert np.count_nonzero(flat) == 1

    @pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (5, 0), (0, 3), (5, 3)])
    def test_out_of_bounds_points(self, pos: tuple[int, int]) -> None:
        grid = TileGrid(5, 3)
        assert not grid.in_bounds(pos)
        assert grid.try_index(pos) is None
        with pytest.raises(OutOfBoundsError):
            grid.index(pos)
        with pytest.raises(OutOfBoundsError):
            grid.tile_at(pos)
        with pytest.raises(OutOfBoundsError):
            grid.set_tile(pos, TileTypeID.FLOOR)

    @pytest.mark.parametrize("index", [-1, 15, 100])
    def test_out_of_bounds_indices(self, index: int) -> None:
        with pytest.raises(OutOfBoundsError):
            TileGrid(5, 3).point(index)

    def test_out_of_bounds_is_an_index_error(self) -> None:
        with pytest.raises(IndexError):
            TileGrid(2, 2).tile_at((2, 2))

    def test_rejects_empty_grid(self) -> None:
        with pytest.raises(ValueError):
            TileGrid(0, 5)


class TestTiles:
    def test_new_grid_is_solid_wall(self) -> None:
        grid = TileGrid(4, 4)
        assert grid.count(TileTypeID.WALL) == 16
        assert grid.tile_at((2, 2)) is TileTypeID.WALL

    def test_fill(self) -> None:
        grid = TileGrid(4, 3)
        grid.fill(TileTypeID.FLOOR)
        assert grid.count(TileTypeID.FLOOR) == 12
        assert grid.floor_fraction() == 1.0

    def test_set_and_get(self) -> None:
        grid = TileGrid(4, 3)
        grid.set_tile((1, 2), TileTypeID.EXIT)
        assert grid.tile_at((1, 2)) is TileTypeID.EXIT
        assert grid.tiles[1, 2] == TileTypeID.EXIT

    def test_can_enter_tile(self) -> None:
        grid = grid_from_rows(["#.>"])
        assert not grid.can_enter_tile((0, 0))
        assert grid.can_enter_tile((1, 0))
        assert grid.can_enter_tile((2, 0))
        assert not grid.can_enter_tile((3, 0))

    def test_points_of_in_scan_order(self) -> None:
        grid = grid_from_rows(
            [
                "#.#",
                "..#",
            ]
        )
        assert grid.points_of(TileTypeID.FLOOR) == [(1, 0), (0, 1), (1, 1)]

    def test_walkable_tracks_changes(self) -> None:
        grid = TileGrid(3, 3)
        assert not grid.walkable.any()
        grid.set_tile((1, 1), TileTypeID.FLOOR)
        assert grid.walkable[1, 1]

    def test_copy_is_independent(self) -> None:
        grid = TileGrid(3, 3)
        clone = grid.copy()
        clone.set_tile((0, 0), TileTypeID.FLOOR)
        assert grid.tile_at((0, 0)) is TileTypeID.WALL
        assert clone.shape == grid.shape
