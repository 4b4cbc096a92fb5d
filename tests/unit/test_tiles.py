from cartograph.config import DEFAULT_TERRAIN, TileType
from cartograph.gen.tiles import build_adjacency, is_legal_placement, tile_index


def test_adjacency_excludes_forbidden():
    adj = build_adjacency(DEFAULT_TERRAIN.tile_types)

    assert set(adj) == set(DEFAULT_TERRAIN.tile_names)
    assert "desert" not in adj["forest"]
    assert adj["desert"] == frozenset({"water", "desert", "mountains", "grassland"})
    # Unconstrained tiles admit everything, including themselves
    assert adj["mountains"] == frozenset(DEFAULT_TERRAIN.tile_names)
    assert adj["grassland"] == frozenset(DEFAULT_TERRAIN.tile_names)


def test_adjacency_is_one_directional():
    adj = build_adjacency(DEFAULT_TERRAIN.tile_types)

    # water forbids desert, but desert does not forbid water
    assert "desert" not in adj["water"]
    assert "water" in adj["desert"]
    assert not is_legal_placement("water", ["desert"], adj)
    assert is_legal_placement("desert", ["water"], adj)


def test_adjacency_is_cached_per_table():
    assert build_adjacency(DEFAULT_TERRAIN.tile_types) is build_adjacency(DEFAULT_TERRAIN.tile_types)


def test_legal_placement_ignores_empty_neighbors():
    adj = build_adjacency(DEFAULT_TERRAIN.tile_types)

    assert is_legal_placement("forest", [None] * 8, adj)
    assert is_legal_placement("forest", [None, "water", None, "forest"], adj)
    assert not is_legal_placement("forest", [None, "water", "desert"], adj)


def test_unknown_candidate_is_never_legal():
    adj = build_adjacency(DEFAULT_TERRAIN.tile_types)
    assert not is_legal_placement("lava", [], adj)


def test_custom_tile_table():
    tiles = (TileType("a", frozenset({"b"})), TileType("b"))
    adj = build_adjacency(tiles)

    assert adj["a"] == frozenset({"a"})
    assert adj["b"] == frozenset({"a", "b"})
    assert tile_index(tiles) == {"a": 0, "b": 1}
