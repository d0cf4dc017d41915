"""Rectangles and small helpers for tile coordinates."""

from __future__ import annotations

from delve.types import TileCoord, WorldTilePos


class Rect:
    """Rectangle in tile coordinates; the rooms architect uses it for rooms.

    ``x2`` and ``y2`` are exclusive, so a Rect covers ``w * h`` tiles.
    """

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        if w < 1 or h < 1:
            raise ValueError(f"Rect must be at least 1x1, got {w}x{h}")
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    def center(self) -> WorldTilePos:
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: Rect) -> bool:
        # Inclusive, so rooms that merely touch also count.
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


def map_center(map_width: TileCoord, map_height: TileCoord) -> WorldTilePos:
    """Geometric centre of a map, rounded down."""
    return (map_width // 2, map_height // 2)
