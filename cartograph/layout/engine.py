from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any

from ..config import DEFAULT_LAYOUT, LayoutConfig
from .collision import CollisionResult, resolve_collision
from .degeneracy import fix_if_linear
from .models import LocationNode, Position, as_location_nodes, index_by_name
from .vectors import connection_offset

logger = logging.getLogger("cartograph.layout")

PositionMap = dict[str, Position]


def select_start(nodes: list[LocationNode]) -> LocationNode:
    """Flagged starting location, else the first gate, else the first node."""
    for node in nodes:
        if node.is_starting_location:
            return node
    for node in nodes:
        if node.type == "gate":
            return node
    return nodes[0]


def _lowest_row(positions: Iterable[Position]) -> float:
    # Rows below the cluster are measured from y=0 at least, matching a layout
    # that always starts at the origin.
    max_y = 0.0
    for pos in positions:
        if pos.y > max_y:
            max_y = pos.y
    return max_y


def compute_layout(
    locations: Iterable[LocationNode | Mapping[str, Any]],
    *,
    config: LayoutConfig = DEFAULT_LAYOUT,
    meta: dict[str, Any] | None = None,
) -> PositionMap:
    """
    Embed a settlement's location graph in 2D.

    Breadth-first from the start node (pinned at the origin): every unvisited
    connection target is placed at current + direction * distance, nudged off any
    collision. Near-linear results are redistributed on a golden-angle spiral, and
    nodes the traversal never reached go on a row below everything else.

    Returns lowercased name -> Position, in placement order. Connection targets
    that name no known location still receive a position (they occupy space) but
    are not expanded further.
    """
    nodes = as_location_nodes(locations)
    if not nodes:
        return {}

    by_name = index_by_name(nodes)
    fixups: list[str] = meta.setdefault("fixups", []) if meta is not None else []

    start = select_start(nodes)
    positions: PositionMap = {start.key: Position(x=0.0, y=0.0)}
    visited = {start.key}
    queue = deque([start.key])

    while queue:
        current_key = queue.popleft()
        current = by_name.get(current_key)
        if current is None:
            continue
        current_pos = positions[current_key]

        for conn in current.connections:
            if not conn.location_name:
                continue
            target_key = conn.location_name.lower()
            if target_key in visited:
                continue
            visited.add(target_key)

            dx, dy = connection_offset(conn.direction, conn.distance, config)
            result = resolve_collision(current_pos.x + dx, current_pos.y + dy, positions, config=config)
            if result.fallback:
                logger.warning(f"Collision fallback offset used for {conn.location_name!r}")
                fixups.append(f"collision_fallback:{target_key}")
            positions[target_key] = result.position

            if target_key in by_name:
                queue.append(target_key)

    if len(positions) >= config.min_nodes_for_linear_fix:
        fix_if_linear(positions, config=config, meta=meta)

    row_y = _lowest_row(positions.values()) + config.orphan_row_gap
    orphan_x = 0.0
    for node in nodes:
        if node.key in positions:
            continue
        positions[node.key] = Position(x=orphan_x, y=row_y)
        orphan_x += config.orphan_spacing
        logger.info(f"Placed unreachable location {node.name!r} on the orphan row")
        fixups.append(f"orphan:{node.key}")

    return positions


def _checked_position(result: CollisionResult, node: LocationNode) -> Position:
    if result.fallback:
        logger.warning(f"Collision fallback offset used for {node.name!r}")
    return result.position


def compute_single_node_position(
    existing_locations: Iterable[LocationNode | Mapping[str, Any]],
    new_location: LocationNode | Mapping[str, Any],
    *,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Position:
    """
    Place one new location into an already laid-out settlement without
    recomputing the rest.

    Tries, in order: a connection declared by the new node toward a positioned
    node (placed on the opposite side of it), a connection declared by a
    positioned node toward the new one, then a row below the cluster.
    """
    existing = as_location_nodes(existing_locations)
    new = new_location if isinstance(new_location, LocationNode) else LocationNode.model_validate(new_location)

    if not existing:
        return Position(x=0.0, y=0.0)

    placed: PositionMap = {}
    for loc in existing:
        if loc.coordinates is not None:
            placed[loc.key] = Position(x=loc.coordinates.x, y=loc.coordinates.y)

    # The declared direction leads from the new node to the existing one, so the
    # new node sits at existing - offset.
    for conn in new.connections:
        if not conn.location_name:
            continue
        source = placed.get(conn.location_name.lower())
        if source is None:
            continue
        dx, dy = connection_offset(conn.direction, conn.distance, config)
        return _checked_position(resolve_collision(source.x - dx, source.y - dy, placed, config=config), new)

    for loc in existing:
        for conn in loc.connections:
            if not conn.location_name or conn.location_name.lower() != new.key:
                continue
            source = placed.get(loc.key)
            if source is None:
                continue
            dx, dy = connection_offset(conn.direction, conn.distance, config)
            return _checked_position(resolve_collision(source.x + dx, source.y + dy, placed, config=config), new)

    return Position(x=0.0, y=_lowest_row(placed.values()) + config.orphan_row_gap)
