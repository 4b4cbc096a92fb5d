import numpy as np
import pytest

from cartograph.layout.models import Connection, LocationNode, Position


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def make_location():
    def _make(
        name: str,
        *links: tuple[str, str, str],
        type: str | None = None,
        start: bool = False,
        at: tuple[float, float] | None = None,
    ) -> LocationNode:
        return LocationNode(
            name=name,
            type=type,
            is_starting_location=start,
            connections=[Connection(location_name=t, direction=d, distance=dist) for d, dist, t in links],
            coordinates=Position(x=at[0], y=at[1]) if at is not None else None,
        )

    return _make


@pytest.fixture
def small_settlement(make_location) -> list[LocationNode]:
    """Start(gate) -north/adjacent-> Market -east/close-> Temple; Start -south/far-> Gate2."""
    return [
        make_location("Start", ("north", "adjacent", "Market"), ("south", "far", "Gate2"), type="gate"),
        make_location("Market", ("east", "close", "Temple")),
        make_location("Temple"),
        make_location("Gate2"),
    ]


class FixedDraws:
    """Stand-in generator that replays a fixed sequence of uniform draws."""

    def __init__(self, *draws: float) -> None:
        self._draws = list(draws)

    def random(self) -> float:
        return self._draws.pop(0)


@pytest.fixture
def fixed_draws():
    return FixedDraws
