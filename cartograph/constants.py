from __future__ import annotations

import math

# ==============================================================================
# Terrain Grids
# ==============================================================================

# Side length of the high-level cluster grid (one dominant tile per cell)
HIGH_LEVEL_SIZE = 5

# Side length of the detailed block each cluster cell expands into
BLOCK_SIZE = 5

# Detailed grid side length: 5 clusters x 5 tiles = 25
DETAILED_SIZE = HIGH_LEVEL_SIZE * BLOCK_SIZE

# Weight added per matching neighbor when sampling a detailed tile.
# Encourages groupings of like tiles.
NEIGHBOR_BIAS = 0.5

# Flat bonus added to the dominant tile of a cluster before renormalizing
CLUSTER_BONUS = 2.0

# Encoded value for an empty cell in `encode_grid`
EMPTY_TILE_CODE = 255

# Tolerance for "weights sum to 1" checks
WEIGHT_SUM_TOLERANCE = 1e-9

# ==============================================================================
# Settlement Layout
# ==============================================================================

# Two positions closer than this (Euclidean) collide
COLLISION_THRESHOLD = 0.5

# Radius step between nudge rings
NUDGE_STEP = 0.6

# Number of concentric nudge rings searched before falling back
NUDGE_RINGS = 3

# Angles (degrees) probed on every nudge ring
NUDGE_ANGLES_DEG: tuple[float, ...] = (0.0, 45.0, 90.0, 135.0, 180.0, 225.0, 270.0, 315.0)

# Unchecked offset used when every nudge candidate collides
FALLBACK_OFFSET: tuple[float, float] = (1.5, 0.5)

# min(range) / max(range) below this ratio is a degenerate (linear) layout
LINEAR_RATIO_THRESHOLD = 0.15

# Radius multiplier for the golden-angle redistribution spiral
SPIRAL_SPACING = 1.0

# ~137.5 degrees
GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))

# Orphans go on a row this far below the lowest placed node...
ORPHAN_ROW_GAP = 2.0

# ...spaced this far apart along x
ORPHAN_SPACING = 1.2

# Direction vector used when a connection names an unknown direction
DEFAULT_DIRECTION_VECTOR: tuple[float, float] = (0.5, 0.5)

# Distance scale used when a connection names an unknown distance
DEFAULT_DISTANCE_SCALE = 1.0

# ==============================================================================
# Spatial Zones (Manhattan distance, grid units)
# ==============================================================================

ZONE_ADJACENT_MAX = 1
ZONE_CLOSE_MAX = 4
ZONE_NEAR_MAX = 8
ZONE_FAR_MAX = 15
