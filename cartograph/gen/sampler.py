from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping

import numpy as np

from .. import constants as C
from .ecosystems import Weighting

logger = logging.getLogger("cartograph.gen")


def normalize(weighting: Mapping[str, float]) -> Weighting:
    """Scale weights to sum to 1, preserving key order. Empty or all-zero input yields {}."""
    if not weighting:
        return {}
    names = list(weighting)
    w = np.fromiter((float(weighting[n]) for n in names), dtype=np.float64, count=len(names))
    total = float(w.sum())
    if total <= 0.0:
        return {}
    probs = w / total
    return {n: float(p) for n, p in zip(names, probs)}


def bias_toward_neighbors(
    weighting: Mapping[str, float], neighbors: Iterable[str | None], *, bias: float = C.NEIGHBOR_BIAS
) -> Weighting:
    """
    Add `bias` per occurrence of a tile among the non-empty neighbors, then renormalize.
    Tiles not present in `weighting` are never introduced.
    """
    counts = Counter(n for n in neighbors if n is not None)
    biased = {tile: float(w) + bias * counts.get(tile, 0) for tile, w in weighting.items()}
    return normalize(biased)


def bias_for_cluster(
    weighting: Mapping[str, float], dominant_tile: str | None, *, bonus: float = C.CLUSTER_BONUS
) -> Weighting:
    """Give the cluster's dominant tile a flat bonus, then renormalize the whole map."""
    boosted = {tile: float(w) + (bonus if tile == dominant_tile else 0.0) for tile, w in weighting.items()}
    return normalize(boosted)


def sample_tile(
    weighting: Mapping[str, float],
    neighbors: Iterable[str | None],
    rng: np.random.Generator,
    *,
    bias: float = C.NEIGHBOR_BIAS,
) -> str | None:
    """
    Draw one tile from `weighting`, biased toward tiles already present among `neighbors`.

    Tiles are walked in the mapping's own key order (callers build weightings in
    canonical tile order), so a fixed generator state always reproduces the same
    draw. Returns None when there is nothing to draw from.
    """
    if not weighting:
        logger.error("No valid tile types found based on the provided weightings.")
        return None

    probs = bias_toward_neighbors(weighting, neighbors, bias=bias)
    if not probs:
        logger.error("All candidate tile weights are zero; nothing to sample.")
        return None

    names = list(probs)
    cumulative = np.cumsum(np.fromiter(probs.values(), dtype=np.float64, count=len(names)))
    draw = float(rng.random())
    # First tile whose cumulative weight exceeds the draw.
    idx = int(np.searchsorted(cumulative, draw, side="right"))
    if idx < len(names):
        return names[idx]

    # Rounding left the draw above the final cumulative sum. Fall back to the
    # last tile that can actually be drawn, so zero-weight tiles stay excluded.
    for name in reversed(names):
        if probs[name] > 0.0:
            return name
    return names[-1]
