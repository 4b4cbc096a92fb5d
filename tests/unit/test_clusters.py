import logging

import numpy as np
import pytest

from cartograph import constants as C
from cartograph.config import DEFAULT_TERRAIN, TerrainConfig, TileType
from cartograph.gen.clusters import (
    encode_grid,
    gather_neighbors,
    generate_detailed_map,
    generate_high_level_clusters,
    tile_histogram,
)


def test_high_level_shape_and_tiles(rng):
    grid = generate_high_level_clusters("Plains", rng)

    assert len(grid) == 5
    assert all(len(row) == 5 for row in grid)
    assert all(tile in DEFAULT_TERRAIN.tile_names for row in grid for tile in row)


def test_high_level_unknown_ecosystem(rng, caplog):
    with caplog.at_level(logging.ERROR, logger="cartograph.gen"):
        assert generate_high_level_clusters("Tundra", rng) == []
    assert "Tundra" in caplog.text


@pytest.mark.parametrize("ecosystem,excluded", [("Forest", "desert"), ("Desert", "forest"), ("Marsh", "desert")])
def test_high_level_never_draws_zero_weight(ecosystem, excluded):
    rng = np.random.default_rng(2024)
    for _ in range(100):
        grid = generate_high_level_clusters(ecosystem, rng)
        assert excluded not in {t for row in grid for t in row}


def test_detailed_shape(rng):
    high = generate_high_level_clusters("Coastal", rng)
    meta: dict = {}
    detailed = generate_detailed_map(high, "Coastal", rng, meta=meta)

    assert len(detailed) == C.DETAILED_SIZE
    assert all(len(row) == C.DETAILED_SIZE for row in detailed)
    # Mountains and grassland admit every neighbor, so the default table never over-constrains
    assert meta["skipped_cells"] == 0
    assert all(tile is not None for row in detailed for tile in row)


def test_detailed_blocks_lean_toward_cluster_tile():
    rng = np.random.default_rng(5)
    high = [["water"] * 5 for _ in range(5)]
    detailed = generate_detailed_map(high, "Mountains", rng)

    counts = tile_histogram(detailed)
    # Mountains' base weight for water is 0.05; the cluster bonus should dominate
    assert counts.get("water", 0) > 625 // 2


def test_detailed_rejects_bad_shape(rng):
    with pytest.raises(ValueError, match="5x5"):
        generate_detailed_map([["forest"] * 4] * 5, "Forest", rng)


def test_detailed_empty_grid_is_a_signal(rng, caplog):
    with caplog.at_level(logging.ERROR, logger="cartograph.gen"):
        assert generate_detailed_map([], "Forest", rng) == []
    assert "Invalid high-level grid" in caplog.text


def test_detailed_unknown_ecosystem(rng):
    high = [["forest"] * 5 for _ in range(5)]
    assert generate_detailed_map(high, "Tundra", rng) == []


def test_over_constrained_cells_are_left_empty(rng, caplog):
    # A single tile that refuses to touch itself: every cell next to a placed one is stuck.
    config = TerrainConfig(
        tile_types=(TileType("a", frozenset({"a"})),),
        ecosystems={"Lonely": {"a": 1.0}},
    )
    high = generate_high_level_clusters("Lonely", rng, config=config)
    meta: dict = {}
    with caplog.at_level(logging.WARNING, logger="cartograph.gen"):
        detailed = generate_detailed_map(high, "Lonely", rng, config=config, meta=meta)

    assert detailed[0][0] == "a"
    assert detailed[0][1] is None
    assert detailed[1][0] is None
    empty = sum(tile is None for row in detailed for tile in row)
    assert empty == meta["skipped_cells"]
    assert 0 < empty < 625
    assert "No valid tile types" in caplog.text


def test_gather_neighbors_bounds():
    grid = [["a", "b"], ["c", None]]
    n = gather_neighbors(grid, 0, 0)

    assert len(n) == 8
    assert sorted(t for t in n if t is not None) == ["b", "c"]


def test_encode_grid():
    grid = [["forest", None], ["marsh", "water"]]
    encoded = encode_grid(grid)

    assert encoded.dtype == np.uint8
    np.testing.assert_array_equal(encoded, np.array([[0, C.EMPTY_TILE_CODE], [5, 1]], dtype=np.uint8))


def test_encode_grid_unknown_tile():
    with pytest.raises(ValueError, match="lava"):
        encode_grid([["lava"]])


def test_tile_histogram_skips_empty():
    assert tile_histogram([["forest", None], ["forest", "water"]]) == {"forest": 2, "water": 1}
