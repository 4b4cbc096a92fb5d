from __future__ import annotations

import logging
import re

import numpy as np

from ..config import DEFAULT_DIRECTION_VECTORS

logger = logging.getLogger("cartograph.layout")

VALID_DIRECTIONS: tuple[str, ...] = tuple(DEFAULT_DIRECTION_VECTORS)

# Planar fallbacks only; a random "up" or "inside" would read as nonsense.
FALLBACK_DIRECTIONS: tuple[str, ...] = (
    "north",
    "south",
    "east",
    "west",
    "northeast",
    "northwest",
    "southeast",
    "southwest",
)

_VALID = frozenset(VALID_DIRECTIONS)

# "southeast (ice-bridge)" -> "southeast"
_PARENTHETICAL = re.compile(r"\s*\(.*\)")
# "northeast via the rope-bridge" -> "northeast"
_TRAILING_CLAUSE = re.compile(r"\s+(via|the|to|from|through|along|across|over)\b.*$")
# "up the cliff-face" -> "up". A bare north/south followed by east/west is left
# for the compound rule so "north east" does not collapse to "north".
_LEADING_TOKEN = re.compile(
    r"^(?:(northeast|northwest|southeast|southwest|east|west|up|down|inside|outside)\b"
    r"|(north|south)\b(?!\s+(?:east|west)\b))"
)
# "north east" -> "northeast"
_COMPOUND = re.compile(r"^(north|south)\s*(east|west)\b")


def normalize_direction(raw: str | None) -> str | None:
    """
    Map a free-text direction onto one of the 12 canonical directions.

    Rules are tried in order and the first hit wins: exact match, parenthetical
    stripped, trailing clause stripped, hyphens removed, leading direction word,
    two-word compound. Returns None if nothing matches.
    """
    if not raw or not isinstance(raw, str):
        return None

    d = raw.lower().strip()
    if d in _VALID:
        return d

    d = _PARENTHETICAL.sub("", d, count=1).strip()
    if d in _VALID:
        return d

    d = _TRAILING_CLAUSE.sub("", d).strip()
    if d in _VALID:
        return d

    dehyphenated = d.replace("-", "")
    if dehyphenated in _VALID:
        return dehyphenated

    m = _LEADING_TOKEN.match(d)
    if m:
        return m.group(1) or m.group(2)

    m = _COMPOUND.match(d)
    if m:
        return m.group(1) + m.group(2)

    return None


def sanitize_direction(raw: str | None, rng: np.random.Generator | None = None) -> str:
    """Like normalize_direction, but never fails: unrecognized text gets a random planar direction."""
    normalized = normalize_direction(raw)
    if normalized is not None:
        return normalized

    if rng is None:
        rng = np.random.default_rng()
    choice = FALLBACK_DIRECTIONS[int(rng.integers(len(FALLBACK_DIRECTIONS)))]
    logger.debug(f"Unrecognized direction {raw!r}; using {choice!r}")
    return choice
