from .clusters import encode_grid, generate_detailed_map, generate_high_level_clusters, tile_histogram
from .ecosystems import get_weighting, list_ecosystems
from .recipe import build_region_recipe, hash_grid
from .region import RegionMap, generate_region
from .sampler import bias_for_cluster, sample_tile
from .tiles import build_adjacency

__all__ = [
    "RegionMap",
    "bias_for_cluster",
    "build_adjacency",
    "build_region_recipe",
    "encode_grid",
    "generate_detailed_map",
    "generate_high_level_clusters",
    "generate_region",
    "get_weighting",
    "hash_grid",
    "list_ecosystems",
    "sample_tile",
    "tile_histogram",
]
