from __future__ import annotations

from enum import IntEnum

# =============================================================================
# TILE-BASED COORDINATE SYSTEMS (Always integers)
# =============================================================================


TileCoord = int  # Always integer tile position

# Game world coordinates - absolute positions on the level grid
WorldTileCoord = TileCoord  # Example: x=5, y=3
WorldTilePos = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on map

# Flat position of a tile in row-major order: index = y * width + x
TileIndex = int

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed = int | str | None


class Connectivity(IntEnum):
    """Neighbourhood used when expanding across the grid.

    The value is the number of neighbours considered around each tile.
    """

    CARDINAL = 4  # N, E, S, W
    OCTILE = 8  # cardinal plus diagonals
