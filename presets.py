# presets.py: preset table + settings resolver
from __future__ import annotations

import math
from typing import Any, Dict, Optional, Sequence, Tuple

from models import THEMES, Settings, SettingsOverrides

# Fixed ordered symbol pool; themed alphabets are prefixes of it.
ALPHABET_POOL: Tuple[str, ...] = tuple("abcdefghijklmnopqrstuvwxyz")
BINARY_ALPHABET: Tuple[str, ...] = ("0", "1")

TILE_COUNT_BOUNDS = (2, 24)
MIN_LENGTH_BOUNDS = (1, 48)
MAX_LENGTH_CEILING = 64
ALPHABET_SIZE_BOUNDS = (1, len(ALPHABET_POOL))
WIDE_ALPHABET_BOUNDS = (5, 6)

PRESETS: Dict[str, Dict[str, Any]] = {
    "easy": {
        "tile_count": 3, "alphabet_size": 2, "min_length": 2, "max_length": 3,
        "allow_unsolvable": False, "force_unique": True, "theme": "preset",
    },
    "medium": {
        "tile_count": 5, "alphabet_size": 3, "min_length": 2, "max_length": 4,
        "allow_unsolvable": False, "force_unique": True, "theme": "preset",
    },
    "hard": {
        "tile_count": 7, "alphabet_size": 3, "min_length": 3, "max_length": 5,
        "allow_unsolvable": False, "force_unique": True, "theme": "preset",
    },
    "extreme": {
        "tile_count_range": (8, 10), "alphabet_size": 4, "min_length": 3, "max_length": 6,
        "allow_unsolvable": True, "force_unique": True, "theme": "preset",
    },
}

PRESET_NAMES = tuple(PRESETS.keys())
_UNBOUNDED = 1 << 31


def _given(value: Any) -> bool:
    # NaN counts as "not supplied"; the preset value applies instead.
    return value is not None and not (isinstance(value, float) and math.isnan(value))


def _round_half_up(x: Any) -> int:
    v = float(x)
    if math.isinf(v):
        # Larger than any bound, so the clamp that follows pins it to an end.
        return _UNBOUNDED if v > 0 else -_UNBOUNDED
    return int(math.floor(v + 0.5))


def _clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


def _explicit_alphabet(raw: Optional[Sequence[str]]) -> Optional[Tuple[str, ...]]:
    """Split an explicit alphabet into unique single characters, in order."""
    if raw is None:
        return None
    chars = []
    for item in raw:
        for ch in str(item):
            if ch not in chars:
                chars.append(ch)
    return tuple(chars) if chars else None


def _resolve_tile_count(rng, base: Dict[str, Any], ov: SettingsOverrides) -> int:
    if _given(ov.tile_count):
        return _clamp(_round_half_up(ov.tile_count), *TILE_COUNT_BOUNDS)
    span = base.get("tile_count_range")
    if span:
        lo, hi = span
        drawn = math.floor(lo + rng() * (hi - lo + 1))
        return _clamp(int(drawn), *TILE_COUNT_BOUNDS)
    return _clamp(int(base["tile_count"]), *TILE_COUNT_BOUNDS)


def _resolve_alphabet(theme: str, base: Dict[str, Any], ov: SettingsOverrides) -> Tuple[str, ...]:
    explicit = _explicit_alphabet(ov.alphabet)
    if explicit:
        return explicit
    if theme == "binary":
        return BINARY_ALPHABET
    size_src = ov.alphabet_size if _given(ov.alphabet_size) else base["alphabet_size"]
    size = _round_half_up(size_src)
    if theme == "wide":
        size = _clamp(size, *WIDE_ALPHABET_BOUNDS)
    else:
        size = _clamp(size, *ALPHABET_SIZE_BOUNDS)
    return ALPHABET_POOL[:size]


def resolve_settings(preset: str, overrides: Optional[SettingsOverrides], rng) -> Settings:
    """
    Merge a named preset with optional overrides into a concrete Settings.

    Out-of-range numbers are rounded then clamped, never rejected. The stream
    is consulted only when the preset declares a tile-count range and no
    explicit count was given.
    """
    if preset not in PRESETS:
        raise ValueError(f"unknown preset: {preset!r}")
    base = PRESETS[preset]
    ov = overrides or SettingsOverrides()

    tile_count = _resolve_tile_count(rng, base, ov)

    min_src = ov.min_length if _given(ov.min_length) else base["min_length"]
    max_src = ov.max_length if _given(ov.max_length) else base["max_length"]
    min_length = _clamp(_round_half_up(min_src), *MIN_LENGTH_BOUNDS)
    max_length = _clamp(_round_half_up(max_src), min_length, MAX_LENGTH_CEILING)

    theme = str(ov.theme).strip().lower() if ov.theme else base["theme"]
    if theme not in THEMES:
        theme = base["theme"]

    allow_unsolvable = base["allow_unsolvable"] if ov.allow_unsolvable is None else bool(ov.allow_unsolvable)
    force_unique = base["force_unique"] if ov.force_unique is None else bool(ov.force_unique)

    return Settings(
        tile_count=tile_count,
        alphabet=_resolve_alphabet(theme, base, ov),
        min_length=min_length,
        max_length=max_length,
        allow_unsolvable=allow_unsolvable,
        force_unique=force_unique,
        theme=theme,
    )


def preset_table() -> Dict[str, Dict[str, Any]]:
    """JSON-friendly view of the presets (ranges as two-element lists)."""
    out: Dict[str, Dict[str, Any]] = {}
    for name, p in PRESETS.items():
        row = dict(p)
        if "tile_count_range" in row:
            row["tile_count_range"] = list(row["tile_count_range"])
        row["alphabet"] = list(ALPHABET_POOL[: p["alphabet_size"]])
        out[name] = row
    return out
