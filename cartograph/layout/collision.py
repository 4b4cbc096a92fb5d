from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from ..config import DEFAULT_LAYOUT, LayoutConfig
from .models import Position


@dataclass(frozen=True)
class CollisionResult:
    position: Position
    nudged: bool
    # True when every nudge candidate collided and the unchecked offset was used
    fallback: bool


def has_collision(x: float, y: float, placed: Mapping[str, Position], *, threshold: float) -> bool:
    for pos in placed.values():
        if math.hypot(pos.x - x, pos.y - y) < threshold:
            return True
    return False


def resolve_collision(
    x: float, y: float, placed: Mapping[str, Position], *, config: LayoutConfig = DEFAULT_LAYOUT
) -> CollisionResult:
    """
    Keep (x, y) if it is clear of every placed position, else spiral outward.

    Probes `nudge_rings` concentric rings (radius = nudge_step * ring) at the fixed
    nudge angles and takes the first clear candidate. If all collide, returns
    (x, y) + fallback_offset without checking it.
    """
    threshold = config.collision_threshold
    if not has_collision(x, y, placed, threshold=threshold):
        return CollisionResult(Position(x=x, y=y), nudged=False, fallback=False)

    for ring in range(1, config.nudge_rings + 1):
        radius = config.nudge_step * ring
        for angle in config.nudge_angles_deg:
            rad = math.radians(angle)
            nx = x + math.cos(rad) * radius
            ny = y + math.sin(rad) * radius
            if not has_collision(nx, ny, placed, threshold=threshold):
                return CollisionResult(Position(x=nx, y=ny), nudged=True, fallback=False)

    ox, oy = config.fallback_offset
    return CollisionResult(Position(x=x + ox, y=y + oy), nudged=True, fallback=True)
