from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..config import DEFAULT_TERRAIN, TerrainConfig
from .clusters import Grid, generate_detailed_map, generate_high_level_clusters, tile_histogram

GENERATOR_ID = "cluster_detail"
GENERATOR_VERSION = "1"


@dataclass
class RegionMap:
    ecosystem: str
    high_level: Grid
    detailed: Grid
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """False when the ecosystem was unknown and nothing was generated."""
        return bool(self.high_level) and bool(self.detailed)

    def as_dict(self) -> dict[str, Any]:
        return {
            "ecosystem": self.ecosystem,
            "highLevelMap": [list(row) for row in self.high_level],
            "map": [list(row) for row in self.detailed],
        }


def generate_region(
    ecosystem: str, rng: np.random.Generator, *, config: TerrainConfig = DEFAULT_TERRAIN
) -> RegionMap:
    """
    Terrain pipeline for one exploration region:
    1. Draw the high-level cluster grid.
    2. Expand it into the detailed grid (adjacency + neighbor clustering).
    Both steps share `rng`, so one seed reproduces the whole region.
    """
    meta: dict[str, Any] = {"generator": GENERATOR_ID, "generator_version": GENERATOR_VERSION}
    high_level = generate_high_level_clusters(ecosystem, rng, config=config)
    detailed = generate_detailed_map(high_level, ecosystem, rng, config=config, meta=meta) if high_level else []

    meta.setdefault("skipped_cells", 0)
    meta["stats"] = {
        "high_level": tile_histogram(high_level),
        "detailed": tile_histogram(detailed),
    }
    return RegionMap(ecosystem=ecosystem, high_level=high_level, detailed=detailed, meta=meta)
