from __future__ import annotations

import logging

from ..config import DEFAULT_TERRAIN, TerrainConfig

logger = logging.getLogger("cartograph.gen")

Weighting = dict[str, float]


def list_ecosystems(config: TerrainConfig = DEFAULT_TERRAIN) -> tuple[str, ...]:
    return tuple(config.ecosystems.keys())


def get_weighting(ecosystem: str, config: TerrainConfig = DEFAULT_TERRAIN) -> Weighting:
    """
    Base distribution for an ecosystem, keyed in canonical tile order.

    Returns an empty dict (and logs) for an unknown ecosystem; callers treat that
    as "nothing to generate", not as a failure.
    """
    weights = config.ecosystems.get(ecosystem)
    if weights is None:
        logger.error(f"Invalid region ecosystem: {ecosystem!r}")
        return {}
    return {name: float(weights[name]) for name in config.tile_names if name in weights}
