from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from .directions import sanitize_direction
from .engine import PositionMap, select_start
from .models import Connection, LocationNode, as_location_nodes


def prepare_locations(
    records: Iterable[LocationNode | Mapping[str, Any]], *, rng: np.random.Generator | None = None
) -> list[LocationNode]:
    """
    Turn loosely-authored location records into layout-ready nodes.

    Every connection direction is sanitized to a canonical value, missing
    distances default to "adjacent", and if nothing is flagged as the starting
    location the first gate (else the first record) is flagged.
    """
    if rng is None:
        rng = np.random.default_rng()
    nodes = as_location_nodes(records)

    prepared: list[LocationNode] = []
    for node in nodes:
        connections = [
            Connection(
                location_name=conn.location_name,
                direction=sanitize_direction(conn.direction, rng),
                distance=conn.distance or "adjacent",
                description=conn.description,
            )
            for conn in node.connections
        ]
        prepared.append(node.model_copy(update={"connections": connections, "type": node.type or "other"}))

    if prepared and not any(n.is_starting_location for n in prepared):
        start = select_start(prepared)
        idx = next(i for i, n in enumerate(prepared) if n is start)
        prepared[idx] = start.model_copy(update={"is_starting_location": True})
    return prepared


def apply_layout(nodes: Iterable[LocationNode], positions: PositionMap) -> list[LocationNode]:
    """Copy computed positions onto each node's `coordinates`; unknown nodes keep theirs."""
    out: list[LocationNode] = []
    for node in nodes:
        pos = positions.get(node.key)
        if pos is None:
            out.append(node)
            continue
        out.append(node.model_copy(update={"coordinates": pos.model_copy()}))
    return out
