"""
Configuration constants.

Centralizes all magic numbers and tuning values used by level generation.
Organized by functional area for easy maintenance.
"""

import sys
from fractions import Fraction

from delve.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# Master seed used by the command line entry point when --seed is not given.
# None means a fresh, non-deterministic level on every run.
RANDOM_SEED: RandomSeed = None

# Test environment detection
IS_TEST_ENVIRONMENT = "pytest" in sys.modules

# =============================================================================
# LEVEL DIMENSIONS
# =============================================================================

MAP_WIDTH = 80
MAP_HEIGHT = 50

# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

# On this level the goal is an item (the amulet) placed by the entity spawner.
# Every other level ends in an Exit tile.
FINAL_MAP_LEVEL = 2

# =============================================================================
# MONSTER SPAWNING
# =============================================================================

# Upper bound on spawn points handed to the entity spawner per level.
NUM_MONSTERS = 50

# Spawn candidates closer than this (in walking steps) to the player start
# are discarded so nothing spawns next to the player.
MIN_SPAWN_DISTANCE = 10

# Flood-fill radius for spawn filtering. Anything beyond it is already far
# enough away, so there is no point searching further.
SPAWN_FILTER_SEARCH_RADIUS = MIN_SPAWN_DISTANCE

# =============================================================================
# DISTANCE ANALYSIS
# =============================================================================

# Tiles farther than this from the anchor (or not reachable at all) are
# walled off by the pruning pass.
PRUNE_MAX_DISTANCE = 1024

# =============================================================================
# CELLULAR AUTOMATA ARCHITECT
# =============================================================================

AUTOMATA_FLOOR_PROBABILITY = 0.45
AUTOMATA_ITERATIONS = 10

# A tile becomes wall when its wall-neighbour count is 0 or above this.
AUTOMATA_WALL_NEIGHBOUR_LIMIT = 4

# =============================================================================
# DRUNKARD'S WALK ARCHITECT
# =============================================================================

# Maximum steps a single walker takes before it is retired.
DRUNKARD_STAGGER_DISTANCE = 400

# Fraction of the map that must be floor before carving stops.
DRUNKARD_FLOOR_DENSITY = Fraction(1, 3)

# Hard ceiling on walker drops; exceeding it aborts generation.
DRUNKARD_MAX_DROPS = 1000

# =============================================================================
# ROOMS AND CORRIDORS ARCHITECT
# =============================================================================

NUM_ROOMS = 20
ROOM_MIN_SIZE = 2
ROOM_MAX_SIZE = 9

# Distance kept between room origins and the far map edges.
ROOM_EDGE_MARGIN = 10

# Overlapping rooms simply carve the same floor twice.
ROOMS_ALLOW_OVERLAP = True

# Only used when ROOMS_ALLOW_OVERLAP is False.
ROOM_PLACEMENT_ATTEMPTS = 500
