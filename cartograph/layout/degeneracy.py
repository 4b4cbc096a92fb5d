from __future__ import annotations

import logging
import math
from typing import Any

from .. import constants as C
from ..config import DEFAULT_LAYOUT, LayoutConfig
from .models import Position

logger = logging.getLogger("cartograph.layout")


def spread_ratio(positions: dict[str, Position]) -> tuple[float, float, float]:
    """(ratio, center_x, center_y) of the axis-aligned bounding box of `positions`."""
    xs = [p.x for p in positions.values()]
    ys = [p.y for p in positions.values()]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    range_x = max_x - min_x
    range_y = max_y - min_y
    ratio = min(range_x, range_y) / (max(range_x, range_y) or 1.0)
    return ratio, (min_x + max_x) / 2.0, (min_y + max_y) / 2.0


def fix_if_linear(
    positions: dict[str, Position],
    *,
    config: LayoutConfig = DEFAULT_LAYOUT,
    meta: dict[str, Any] | None = None,
) -> bool:
    """
    Redistribute a near-collinear layout onto a golden-angle spiral, in place.

    The first entry in `positions` (the start node, since layout inserts it
    first) is pinned at the bounding-box center; entry i > 0 goes to radius
    spacing * sqrt(i) at angle i * golden_angle. Returns True if it moved anything.
    """
    if len(positions) < config.min_nodes_for_linear_fix:
        return False

    ratio, cx, cy = spread_ratio(positions)
    if ratio >= config.linear_ratio_threshold:
        return False

    for i, pos in enumerate(positions.values()):
        if i == 0:
            pos.x = cx
            pos.y = cy
            continue
        r = config.spiral_spacing * math.sqrt(i)
        theta = i * C.GOLDEN_ANGLE
        pos.x = cx + r * math.cos(theta)
        pos.y = cy + r * math.sin(theta)

    logger.info(f"Redistributed linear layout of {len(positions)} nodes (ratio={ratio:.3f})")
    if meta is not None:
        meta.setdefault("fixups", []).append(f"linear_redistribute:ratio={ratio:.3f}")
    return True
