from .collision import CollisionResult, has_collision, resolve_collision
from .degeneracy import fix_if_linear
from .directions import FALLBACK_DIRECTIONS, VALID_DIRECTIONS, normalize_direction, sanitize_direction
from .engine import PositionMap, compute_layout, compute_single_node_position, select_start
from .models import Connection, LayoutInputError, LocationNode, Position
from .records import apply_layout, prepare_locations
from .vectors import connection_offset

__all__ = [
    "FALLBACK_DIRECTIONS",
    "VALID_DIRECTIONS",
    "CollisionResult",
    "Connection",
    "LayoutInputError",
    "LocationNode",
    "Position",
    "PositionMap",
    "apply_layout",
    "compute_layout",
    "compute_single_node_position",
    "connection_offset",
    "fix_if_linear",
    "has_collision",
    "normalize_direction",
    "prepare_locations",
    "resolve_collision",
    "sanitize_direction",
    "select_start",
]
