"""Pydantic models for settlement location records."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LayoutInputError(ValueError):
    """Location records are malformed in a way the layout cannot interpret."""


class Position(BaseModel):
    """A 2D layout coordinate. North is -y, east is +x."""

    x: float = 0.0
    y: float = 0.0

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def as_tuple(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))


class Connection(BaseModel):
    """A one-directional edge declared on a location, pointing at `location_name`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    location_name: str | None = Field(default=None, alias="locationName")
    direction: str = ""
    distance: str = "adjacent"
    description: str = ""

    @field_validator("direction", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("distance", mode="before")
    @classmethod
    def _default_distance(cls, v: Any) -> Any:
        return "adjacent" if v is None or v == "" else v


class LocationNode(BaseModel):
    """A named place inside a settlement."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    type: str | None = None
    is_starting_location: bool = Field(default=False, alias="isStartingLocation")
    connections: list[Connection] = Field(default_factory=list)
    coordinates: Position | None = None

    @field_validator("connections", mode="before")
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("is_starting_location", mode="before")
    @classmethod
    def _none_to_false(cls, v: Any) -> Any:
        return False if v is None else v

    @property
    def key(self) -> str:
        """Case-insensitive identity used for name lookups."""
        return self.name.lower()


def as_location_nodes(records: Iterable[LocationNode | Mapping[str, Any]]) -> list[LocationNode]:
    """Validate raw records into models; raises pydantic.ValidationError on bad shapes."""
    if records is None:
        return []
    if isinstance(records, (str, bytes, Mapping)):
        raise LayoutInputError(f"expected a sequence of location records, got {type(records).__name__}")
    return [r if isinstance(r, LocationNode) else LocationNode.model_validate(r) for r in records]


def index_by_name(nodes: Iterable[LocationNode]) -> dict[str, LocationNode]:
    """Lowercased name -> node. Duplicate names (case-insensitive) raise LayoutInputError."""
    by_name: dict[str, LocationNode] = {}
    for node in nodes:
        if node.key in by_name:
            raise LayoutInputError(f"duplicate location name: {node.name!r}")
        by_name[node.key] = node
    return by_name
