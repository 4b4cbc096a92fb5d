from __future__ import annotations

from ..config import DEFAULT_LAYOUT, LayoutConfig


def direction_vector(direction: str, config: LayoutConfig = DEFAULT_LAYOUT) -> tuple[float, float]:
    return config.direction_vectors.get(direction, config.default_vector)


def distance_scale(distance: str, config: LayoutConfig = DEFAULT_LAYOUT) -> float:
    return float(config.distance_scale.get(distance, config.default_scale))


def connection_offset(direction: str, distance: str, config: LayoutConfig = DEFAULT_LAYOUT) -> tuple[float, float]:
    """Coordinate delta for travelling `direction` over `distance`."""
    vx, vy = direction_vector(direction, config)
    s = distance_scale(distance, config)
    return float(vx) * s, float(vy) * s
