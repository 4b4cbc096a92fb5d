import numpy as np

from cartograph.gen.recipe import build_region_recipe, canonical_json_bytes, hash_grid, sha256_hex
from cartograph.gen.region import GENERATOR_ID, generate_region


def test_region_pipeline_basics():
    region = generate_region("Desert", np.random.default_rng(11))

    assert region.ok
    assert len(region.high_level) == 5
    assert len(region.detailed) == 25
    assert region.meta["generator"] == GENERATOR_ID
    assert region.meta["skipped_cells"] == 0
    assert sum(region.meta["stats"]["detailed"].values()) == 625
    assert sum(region.meta["stats"]["high_level"].values()) == 25
    assert "forest" not in region.meta["stats"]["high_level"]


def test_region_unknown_ecosystem():
    region = generate_region("Tundra", np.random.default_rng(0))

    assert not region.ok
    assert region.high_level == []
    assert region.detailed == []
    assert region.meta["stats"] == {"high_level": {}, "detailed": {}}


def test_region_as_dict_uses_record_field_names():
    region = generate_region("Plains", np.random.default_rng(3))
    d = region.as_dict()

    assert set(d) == {"ecosystem", "highLevelMap", "map"}
    assert d["map"] == region.detailed


def test_recipe_hashes_are_stable():
    r1 = build_region_recipe(seed=42, region=generate_region("Marsh", np.random.default_rng(42)))
    r2 = build_region_recipe(seed=42, region=generate_region("Marsh", np.random.default_rng(42)))

    assert r1["hashes"] == r2["hashes"]
    assert r1["schema_version"] == 1
    assert r1["ecosystem"] == "Marsh"
    assert len(r1["hashes"]["grid"]) == 64


def test_recipe_hash_excludes_hash_field():
    recipe = build_region_recipe(seed=5, region=generate_region("Coastal", np.random.default_rng(5)))
    body = {k: v for k, v in recipe.items() if k != "hashes"}

    assert recipe["hashes"]["recipe"] == sha256_hex(canonical_json_bytes(body))


def test_different_seeds_differ():
    g1 = generate_region("Coastal", np.random.default_rng(1)).detailed
    g2 = generate_region("Coastal", np.random.default_rng(2)).detailed

    assert hash_grid(g1) != hash_grid(g2)


def test_hash_grid_includes_shape():
    assert hash_grid([["forest", "water"]]) != hash_grid([["forest"], ["water"]])
