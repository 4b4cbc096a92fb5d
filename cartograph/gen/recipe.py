from __future__ import annotations

import copy
import hashlib
import json
from typing import Any

import numpy as np

from ..config import DEFAULT_TERRAIN, TerrainConfig
from .clusters import Grid, encode_grid
from .region import GENERATOR_ID, GENERATOR_VERSION, RegionMap


def canonical_json_bytes(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def hash_grid(grid: Grid, config: TerrainConfig = DEFAULT_TERRAIN) -> str:
    encoded = np.ascontiguousarray(encode_grid(grid, config))
    # Shape goes into the digest so a 5x5 and a 25x1 grid never collide.
    header = np.asarray(encoded.shape, dtype=np.int64).tobytes()
    return sha256_hex(header + encoded.tobytes())


def terrain_config_dict(config: TerrainConfig) -> dict[str, Any]:
    return {
        "tile_types": [{"name": t.name, "forbidden": sorted(t.forbidden)} for t in config.tile_types],
        "ecosystems": {eco: dict(w) for eco, w in config.ecosystems.items()},
        "high_level_size": int(config.high_level_size),
        "block_size": int(config.block_size),
        "neighbor_bias": float(config.neighbor_bias),
        "cluster_bonus": float(config.cluster_bonus),
    }


def build_region_recipe(
    *,
    seed: int | None,
    region: RegionMap,
    config: TerrainConfig = DEFAULT_TERRAIN,
) -> dict[str, Any]:
    recipe: dict[str, Any] = {
        "schema_version": 1,
        "generator": {
            "id": str(region.meta.get("generator", GENERATOR_ID)),
            "version": str(region.meta.get("generator_version", GENERATOR_VERSION)),
            "config": terrain_config_dict(config),
        },
        "seed": int(seed) if seed is not None else None,
        "ecosystem": region.ecosystem,
        "high_level": [list(row) for row in region.high_level],
        "stats": copy.deepcopy(region.meta.get("stats", {})),
        "skipped_cells": int(region.meta.get("skipped_cells", 0)),
        "hashes": {},
    }

    # Avoid hashing the hash fields themselves.
    recipe_for_hash = copy.deepcopy(recipe)
    recipe_for_hash.pop("hashes", None)
    recipe["hashes"] = {
        "recipe": sha256_hex(canonical_json_bytes(recipe_for_hash)),
        "grid": hash_grid(region.detailed, config),
    }
    return recipe
