from .config import LayoutConfig, TerrainConfig, TileType
from .gen import generate_detailed_map, generate_high_level_clusters, generate_region
from .layout import compute_layout, compute_single_node_position, normalize_direction, sanitize_direction

__all__ = [
    "LayoutConfig",
    "TerrainConfig",
    "TileType",
    "compute_layout",
    "compute_single_node_position",
    "generate_detailed_map",
    "generate_high_level_clusters",
    "generate_region",
    "normalize_direction",
    "sanitize_direction",
]
