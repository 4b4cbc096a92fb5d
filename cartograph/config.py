from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from . import constants as C


@dataclass(frozen=True)
class TileType:
    """A terrain category placed into grid cells.

    `forbidden` lists tile names that may not neighbor this tile when this tile
    is the candidate being placed. The rule is one-directional: `desert`
    forbidding `forest` says nothing about what `forest` allows.
    """

    name: str
    forbidden: frozenset[str] = frozenset()


DEFAULT_TILE_TYPES: tuple[TileType, ...] = (
    TileType("forest", frozenset({"desert"})),
    TileType("water", frozenset({"desert"})),
    TileType("desert", frozenset({"forest", "marsh"})),
    TileType("mountains"),
    TileType("grassland"),
    TileType("marsh", frozenset({"desert"})),
)

# Base tile distribution per ecosystem. Weights need not sum to 1; the sampler
# renormalizes on every draw.
DEFAULT_ECOSYSTEM_WEIGHTINGS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "Forest": MappingProxyType(
            {"forest": 0.6, "grassland": 0.2, "water": 0.1, "mountains": 0.05, "marsh": 0.05, "desert": 0.0}
        ),
        "Desert": MappingProxyType(
            {"desert": 0.6, "grassland": 0.2, "mountains": 0.1, "water": 0.05, "marsh": 0.05, "forest": 0.0}
        ),
        "Plains": MappingProxyType(
            {"grassland": 0.6, "forest": 0.2, "mountains": 0.1, "water": 0.05, "marsh": 0.05, "desert": 0.0}
        ),
        "Coastal": MappingProxyType(
            {"water": 0.4, "grassland": 0.2, "forest": 0.1, "marsh": 0.1, "mountains": 0.1, "desert": 0.1}
        ),
        "Marsh": MappingProxyType(
            {"marsh": 0.5, "water": 0.2, "grassland": 0.15, "forest": 0.1, "mountains": 0.05, "desert": 0.0}
        ),
        "Mountains": MappingProxyType(
            {"mountains": 0.5, "forest": 0.2, "grassland": 0.2, "water": 0.05, "marsh": 0.05, "desert": 0.0}
        ),
    }
)

# Screen-space convention: north is -y, east is +x.
DEFAULT_DIRECTION_VECTORS: Mapping[str, tuple[float, float]] = MappingProxyType(
    {
        "north": (0.0, -1.0),
        "south": (0.0, 1.0),
        "east": (1.0, 0.0),
        "west": (-1.0, 0.0),
        "northeast": (0.7, -0.7),
        "northwest": (-0.7, -0.7),
        "southeast": (0.7, 0.7),
        "southwest": (-0.7, 0.7),
        # Vertical/spatial moves only nudge, so they never land on a cardinal step.
        "up": (0.3, -0.5),
        "down": (-0.3, 0.5),
        "inside": (0.3, 0.0),
        "outside": (-0.3, 0.0),
    }
)

DEFAULT_DISTANCE_SCALE: Mapping[str, float] = MappingProxyType(
    {
        "adjacent": 1.0,
        "close": 1.5,
        "far": 2.0,
    }
)


@dataclass(frozen=True)
class TerrainConfig:
    tile_types: tuple[TileType, ...] = DEFAULT_TILE_TYPES
    ecosystems: Mapping[str, Mapping[str, float]] = field(default_factory=lambda: DEFAULT_ECOSYSTEM_WEIGHTINGS)
    high_level_size: int = C.HIGH_LEVEL_SIZE
    block_size: int = C.BLOCK_SIZE
    neighbor_bias: float = C.NEIGHBOR_BIAS
    cluster_bonus: float = C.CLUSTER_BONUS

    def __post_init__(self) -> None:
        if self.high_level_size <= 0 or self.block_size <= 0:
            raise ValueError(
                f"grid sizes must be positive, got high_level_size={self.high_level_size} "
                f"block_size={self.block_size}"
            )
        if self.neighbor_bias < 0.0 or self.cluster_bonus < 0.0:
            raise ValueError("neighbor_bias and cluster_bonus must be non-negative")
        if not self.tile_types:
            raise ValueError("tile_types must not be empty")
        names = [t.name for t in self.tile_types]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate tile names in {names!r}")
        known = set(names)
        for eco, weights in self.ecosystems.items():
            unknown = set(weights) - known
            if unknown:
                raise ValueError(f"ecosystem {eco!r} weights unknown tiles: {sorted(unknown)}")
            if any(w < 0.0 for w in weights.values()):
                raise ValueError(f"ecosystem {eco!r} has negative weights")

    @property
    def tile_names(self) -> tuple[str, ...]:
        """Canonical tile order. Cumulative sampling walks tiles in this order."""
        return tuple(t.name for t in self.tile_types)

    @property
    def detailed_size(self) -> int:
        return self.high_level_size * self.block_size


@dataclass(frozen=True)
class LayoutConfig:
    direction_vectors: Mapping[str, tuple[float, float]] = field(default_factory=lambda: DEFAULT_DIRECTION_VECTORS)
    distance_scale: Mapping[str, float] = field(default_factory=lambda: DEFAULT_DISTANCE_SCALE)
    default_vector: tuple[float, float] = C.DEFAULT_DIRECTION_VECTOR
    default_scale: float = C.DEFAULT_DISTANCE_SCALE
    collision_threshold: float = C.COLLISION_THRESHOLD
    nudge_step: float = C.NUDGE_STEP
    nudge_rings: int = C.NUDGE_RINGS
    nudge_angles_deg: tuple[float, ...] = C.NUDGE_ANGLES_DEG
    fallback_offset: tuple[float, float] = C.FALLBACK_OFFSET
    linear_ratio_threshold: float = C.LINEAR_RATIO_THRESHOLD
    spiral_spacing: float = C.SPIRAL_SPACING
    orphan_row_gap: float = C.ORPHAN_ROW_GAP
    orphan_spacing: float = C.ORPHAN_SPACING
    # Nodes needed before the degeneracy check runs
    min_nodes_for_linear_fix: int = 3

    def __post_init__(self) -> None:
        if self.collision_threshold < 0.0:
            raise ValueError("collision_threshold must be non-negative")
        if self.nudge_rings < 0:
            raise ValueError("nudge_rings must be non-negative")
        if not self.direction_vectors:
            raise ValueError("direction_vectors must not be empty")


DEFAULT_TERRAIN = TerrainConfig()
DEFAULT_LAYOUT = LayoutConfig()

