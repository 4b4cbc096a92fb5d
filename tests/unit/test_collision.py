import math

import pytest

from cartograph.config import LayoutConfig
from cartograph.layout.collision import has_collision, resolve_collision
from cartograph.layout.models import Position


def _dense_lattice(half_extent: float = 2.6, step: float = 0.3) -> dict[str, Position]:
    # Every point in the covered square is within 0.22 of a lattice point.
    n = int(round(2 * half_extent / step)) + 1
    return {
        f"p{i}_{j}": Position(x=-half_extent + i * step, y=-half_extent + j * step)
        for i in range(n)
        for j in range(n)
    }


def test_has_collision_threshold_is_strict():
    placed = {"a": Position(x=0.0, y=0.0)}

    assert has_collision(0.49, 0.0, placed, threshold=0.5)
    assert not has_collision(0.5, 0.0, placed, threshold=0.5)
    assert not has_collision(3.0, 3.0, {}, threshold=0.5)


def test_clear_position_is_kept():
    result = resolve_collision(2.0, 0.0, {"a": Position(x=0.0, y=0.0)})

    assert result.position.as_tuple() == (2.0, 0.0)
    assert not result.nudged
    assert not result.fallback


def test_first_ring_first_angle():
    result = resolve_collision(0.0, 0.0, {"a": Position(x=-0.1, y=0.0)})

    # Angle 0 on ring 1 is (0.6, 0), well clear of the blocker
    assert result.position.as_tuple() == pytest.approx((0.6, 0.0))
    assert result.nudged
    assert not result.fallback


def test_angles_probed_in_order():
    placed = {"a": Position(x=0.0, y=0.0), "b": Position(x=0.6, y=0.0)}
    result = resolve_collision(0.0, 0.0, placed)

    # 0 degrees hits b, 45 degrees is still within 0.5 of b, 90 degrees is clear
    assert result.position.as_tuple() == pytest.approx((0.0, 0.6), abs=1e-9)


def test_outer_ring_used_when_inner_is_blocked():
    # Blockers on ring 1 at every probe angle
    placed = {"origin": Position(x=0.0, y=0.0)}
    for k in range(8):
        rad = math.radians(45.0 * k)
        placed[f"r{k}"] = Position(x=0.6 * math.cos(rad), y=0.6 * math.sin(rad))

    result = resolve_collision(0.0, 0.0, placed)

    assert math.hypot(*result.position.as_tuple()) == pytest.approx(1.2)
    assert not result.fallback


def test_fallback_when_everything_collides():
    result = resolve_collision(0.0, 0.0, _dense_lattice())

    assert result.position.as_tuple() == pytest.approx((1.5, 0.5))
    assert result.nudged
    assert result.fallback


def test_fallback_offset_is_configurable():
    config = LayoutConfig(nudge_rings=0, fallback_offset=(0.0, 3.0))
    result = resolve_collision(1.0, 1.0, {"a": Position(x=1.0, y=1.0)}, config=config)

    assert result.position.as_tuple() == pytest.approx((1.0, 4.0))
    assert result.fallback
