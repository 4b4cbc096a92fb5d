from __future__ import annotations

import functools
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..config import TileType

AdjacencyTable = Mapping[str, frozenset[str]]


@functools.lru_cache(maxsize=8)
def build_adjacency(tile_types: tuple[TileType, ...]) -> AdjacencyTable:
    """
    Derive the legal-neighbor set for every tile: all tiles not in its forbidden list.
    Computed once per tile table and shared read-only.
    """
    names = [t.name for t in tile_types]
    table = {t.name: frozenset(n for n in names if n not in t.forbidden) for t in tile_types}
    return MappingProxyType(table)


def is_legal_placement(candidate: str, neighbors: Iterable[str | None], adjacency: AdjacencyTable) -> bool:
    # One-directional: only the candidate's own forbidden list is consulted.
    allowed = adjacency.get(candidate)
    if allowed is None:
        return False
    return all(n is None or n in allowed for n in neighbors)


def tile_index(tile_types: tuple[TileType, ...]) -> dict[str, int]:
    return {t.name: i for i, t in enumerate(tile_types)}
