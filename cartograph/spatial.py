"""Distance, zone and compass queries between grid positions."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from . import constants as C
from .layout.models import Position


class SpatialEntity(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    type: str = "other"
    grid_position: Position | None = Field(default=None, alias="gridPosition")


def manhattan_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return abs(x1 - x2) + abs(y1 - y2)


def get_zone(distance: float) -> str:
    if distance <= C.ZONE_ADJACENT_MAX:
        return "ADJACENT"
    if distance <= C.ZONE_CLOSE_MAX:
        return "CLOSE"
    if distance <= C.ZONE_NEAR_MAX:
        return "NEAR"
    if distance <= C.ZONE_FAR_MAX:
        return "FAR"
    return "DISTANT"


def direction_to(from_x: float, from_y: float, to_x: float, to_y: float) -> str:
    """8-way compass bearing from one grid cell to another (y grows southward)."""
    dx = to_x - from_x
    dy = to_y - from_y
    if dx == 0 and dy == 0:
        return "here"

    angle = math.degrees(math.atan2(-dy, dx))
    if -22.5 <= angle < 22.5:
        return "east"
    if 22.5 <= angle < 67.5:
        return "northeast"
    if 67.5 <= angle < 112.5:
        return "north"
    if 112.5 <= angle < 157.5:
        return "northwest"
    if angle >= 157.5 or angle < -157.5:
        return "west"
    if -157.5 <= angle < -112.5:
        return "southwest"
    if -112.5 <= angle < -67.5:
        return "south"
    return "southeast"


def spatial_context(
    player_pos: Position | None,
    entities: Iterable[SpatialEntity | Mapping[str, Any]],
    grid_size: tuple[int, int],
) -> str:
    """
    Plain-text summary of where each entity sits relative to the player.

    Entities without a grid position are skipped. Returns "" when there is no
    player position or no entities.
    """
    if player_pos is None:
        return ""
    items = [e if isinstance(e, SpatialEntity) else SpatialEntity.model_validate(e) for e in entities]
    if not items:
        return ""

    width, height = grid_size
    px, py = player_pos.x, player_pos.y
    lines = [f"SPATIAL LAYOUT ({width}x{height} grid):", f"- Player position: ({_fmt(px)}, {_fmt(py)})"]
    for entity in items:
        gp = entity.grid_position
        if gp is None:
            continue
        dist = manhattan_distance(px, py, gp.x, gp.y)
        pace = "pace" if dist == 1 else "paces"
        lines.append(
            f"- {entity.name} ({entity.type}) is {get_zone(dist)} "
            f"({_fmt(dist)} {pace} {direction_to(px, py, gp.x, gp.y)})"
        )
    lines.append("Interaction rules: ADJACENT=melee/touch, CLOSE=conversation, NEAR=ranged/shout, FAR=observe only")
    return "\n".join(lines)


def _fmt(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else f"{v:g}"
