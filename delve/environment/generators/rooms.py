"""Dungeon-style levels with rectangular rooms joined by corridors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from delve import config
from delve.environment.map import TileGrid
from delve.environment.tile_types import TileTypeID
from delve.util.coordinates import Rect

from .base import ArchitectResult, BaseArchitect, NoValidStartError

if TYPE_CHECKING:
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)


class RoomsArchitect(BaseArchitect):
    """Generates a map with rooms and connecting corridors.

    Each room is joined to the one placed before it by an L-shaped corridor,
    so every room is connected to the first. Rooms may overlap unless
    ``allow_overlap`` is False; carving the same floor twice is harmless.
    """

    name = "rooms"
    min_width = config.ROOM_EDGE_MARGIN + 2
    min_height = config.ROOM_EDGE_MARGIN + 2

    def __init__(
        self,
        map_width: int,
        map_height: int,
        num_rooms: int = config.NUM_ROOMS,
        min_room_size: int = config.ROOM_MIN_SIZE,
        max_room_size: int = config.ROOM_MAX_SIZE,
        allow_overlap: bool = config.ROOMS_ALLOW_OVERLAP,
        placement_attempts: int = config.ROOM_PLACEMENT_ATTEMPTS,
    ) -> None:
        super().__init__(map_width, map_height)
        if min_room_size < 1 or max_room_size < min_room_size:
            raise ValueError(
                f"Invalid room size range {min_room_size}..{max_room_size}"
            )
        self.num_rooms = num_rooms
        self.min_room_size = min_room_size
        self.max_room_size = max_room_size
        self.allow_overlap = allow_overlap
        self.placement_attempts = placement_attempts

    def _random_room(self, rng: RNG) -> Rect:
        x = rng.randrange(1, self.map_width - config.ROOM_EDGE_MARGIN)
        y = rng.randrange(1, self.map_height - config.ROOM_EDGE_MARGIN)
        w = rng.randint(self.min_room_size, self.max_room_size)
        h = rng.randint(self.min_room_size, self.max_room_size)
        # Keep a solid border on the far edges
        w = min(w, self.map_width - 1 - x)
        h = min(h, self.map_height - 1 - y)
        return Rect(x, y, w, h)

    def _place_rooms(self, rng: RNG) -> list[Rect]:
        rooms: list[Rect] = []
        if self.allow_overlap:
            for _ in range(self.num_rooms):
                rooms.append(self._random_room(rng))
            return rooms

        attempts = 0
        while len(rooms) < self.num_rooms and attempts < self.placement_attempts:
            attempts += 1
            new_room = self._random_room(rng)
            if any(new_room.intersects(other) for other in rooms):
                continue
            rooms.append(new_room)
        if len(rooms) < self.num_rooms:
            logger.debug(
                f"Placed {len(rooms)}/{self.num_rooms} non-overlapping rooms "
                f"in {attempts} attempts"
            )
        return rooms

    def _carve_room(self, tiles: np.ndarray, room: Rect) -> None:
        tiles[room.x1 : room.x2, room.y1 : room.y2] = TileTypeID.FLOOR

    def _carve_h_tunnel(self, tiles: np.ndarray, x1: int, x2: int, y: int) -> None:
        h_slice = slice(min(x1, x2), max(x1, x2) + 1)
        tiles[h_slice, y] = TileTypeID.FLOOR

    def _carve_v_tunnel(self, tiles: np.ndarray, y1: int, y2: int, x: int) -> None:
        v_slice = slice(min(y1, y2), max(y1, y2) + 1)
        tiles[x, v_slice] = TileTypeID.FLOOR

    def _connect(self, tiles: np.ndarray, rooms: list[Rect], rng: RNG) -> None:
        for prev_room, new_room in zip(rooms, rooms[1:], strict=False):
            prev_x, prev_y = prev_room.center()
            new_x, new_y = new_room.center()
            if bool(rng.getrandbits(1)):
                self._carve_h_tunnel(tiles, prev_x, new_x, prev_y)
                self._carve_v_tunnel(tiles, prev_y, new_y, new_x)
            else:
                self._carve_v_tunnel(tiles, prev_y, new_y, prev_x)
                self._carve_h_tunnel(tiles, prev_x, new_x, new_y)

    def generate(self, rng: RNG) -> ArchitectResult:
        self.check_size()
        grid = TileGrid(self.map_width, self.map_height)
        grid.fill(TileTypeID.WALL)

        rooms = self._place_rooms(rng)
        if not rooms:
            raise NoValidStartError("Need to make at least one room.")

        for room in rooms:
            self._carve_room(grid.tiles, room)
        self._connect(grid.tiles, rooms, rng)

        start = rooms[0].center()
        # Overlapping rooms can share a centre; keep the first occurrence
        candidates = [
            center
            for center in dict.fromkeys(room.center() for room in rooms[1:])
            if center != start
        ]
        logger.debug(f"Carved {len(rooms)} rooms, player starts at {start}")
        return ArchitectResult(
            grid=grid,
            player_start=start,
            spawn_candidates=candidates,
            rooms=rooms,
        )
