from __future__ import annotations

import logging
from collections import Counter
from typing import Any

import numpy as np

from .. import constants as C
from ..config import DEFAULT_TERRAIN, TerrainConfig
from .ecosystems import Weighting, get_weighting
from .sampler import bias_for_cluster, sample_tile
from .tiles import AdjacencyTable, build_adjacency, is_legal_placement, tile_index

logger = logging.getLogger("cartograph.gen")

Grid = list[list[str | None]]

# 8-neighborhood as (d_row, d_col)
_NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
)


def empty_grid(size: int) -> Grid:
    return [[None] * size for _ in range(size)]


def gather_neighbors(grid: Grid, row: int, col: int) -> list[str | None]:
    """Tiles in the 8 cells around (row, col); out-of-bounds and unfilled cells are None."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    out: list[str | None] = []
    for dr, dc in _NEIGHBOR_OFFSETS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            out.append(grid[r][c])
        else:
            out.append(None)
    return out


def generate_high_level_clusters(
    ecosystem: str, rng: np.random.Generator, *, config: TerrainConfig = DEFAULT_TERRAIN
) -> Grid:
    """
    Draw the dominant tile of every cluster cell from the ecosystem's base distribution.

    Cells are independent: no adjacency rules or neighbor bias apply at this level.
    Unknown ecosystems yield an empty grid ([]).
    """
    weighting = get_weighting(ecosystem, config)
    if not weighting:
        return []

    size = config.high_level_size
    grid = empty_grid(size)
    for i in range(size):
        for j in range(size):
            grid[i][j] = sample_tile(weighting, [], rng, bias=config.neighbor_bias)
    return grid


def _fill_block(
    grid: Grid,
    row0: int,
    col0: int,
    weighting: Weighting,
    adjacency: AdjacencyTable,
    rng: np.random.Generator,
    config: TerrainConfig,
) -> int:
    # Row-major fill: a cell only sees neighbors placed before it (above/left, or
    # in an earlier block). That directional bias is accepted behaviour.
    skipped = 0
    for r in range(row0, row0 + config.block_size):
        for c in range(col0, col0 + config.block_size):
            neighbors = gather_neighbors(grid, r, c)
            valid = {t: w for t, w in weighting.items() if is_legal_placement(t, neighbors, adjacency)}
            if not valid:
                logger.warning(f"No valid tile types for cell ({r}, {c}) based on adjacency constraints.")
                skipped += 1
                continue
            tile = sample_tile(valid, neighbors, rng, bias=config.neighbor_bias)
            if tile is None:
                skipped += 1
                continue
            grid[r][c] = tile
    return skipped


def generate_detailed_map(
    high_level_grid: Grid,
    ecosystem: str,
    rng: np.random.Generator,
    *,
    config: TerrainConfig = DEFAULT_TERRAIN,
    meta: dict[str, Any] | None = None,
) -> Grid:
    """
    Expand every cluster cell into a block of detailed tiles.

    Each block samples from the ecosystem distribution biased toward the cluster's
    dominant tile, restricted to tiles whose adjacency rules admit every neighbor
    already placed. Over-constrained cells are left as None and generation goes on.
    """
    if not high_level_grid:
        logger.error("Invalid high-level grid provided.")
        return []

    size = config.high_level_size
    if len(high_level_grid) != size or any(len(row) != size for row in high_level_grid):
        raise ValueError(f"high-level grid must be {size}x{size}")

    base = get_weighting(ecosystem, config)
    if not base:
        return []

    adjacency = build_adjacency(config.tile_types)
    block = config.block_size
    grid = empty_grid(config.detailed_size)
    skipped = 0
    for i in range(size):
        for j in range(size):
            weighting = bias_for_cluster(base, high_level_grid[i][j], bonus=config.cluster_bonus)
            if not weighting:
                logger.error(f"Invalid cluster weightings for cell ({i}, {j}).")
                skipped += block * block
                continue
            skipped += _fill_block(grid, i * block, j * block, weighting, adjacency, rng, config)

    if meta is not None:
        meta["skipped_cells"] = int(skipped)
    return grid


def encode_grid(grid: Grid, config: TerrainConfig = DEFAULT_TERRAIN) -> np.ndarray:
    """Tile names -> tile-table indices (uint8); empty cells become EMPTY_TILE_CODE."""
    index = tile_index(config.tile_types)
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    out = np.full((rows, cols), C.EMPTY_TILE_CODE, dtype=np.uint8)
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            if tile is None:
                continue
            code = index.get(tile)
            if code is None:
                raise ValueError(f"Unknown tile {tile!r} at ({r}, {c})")
            out[r, c] = code
    return out


def tile_histogram(grid: Grid) -> dict[str, int]:
    counts = Counter(tile for row in grid for tile in row if tile is not None)
    return dict(sorted(counts.items()))
