# generator/unsolvable.py
from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from config import CFG
from models import GenerationExhausted, Settings, Tile
from generator.rng import Mulberry32, make_tile_id, random_string


def tweak_string(rng: Mulberry32, value: str, alphabet: Sequence[str]) -> str:
    """Replace one randomly chosen character with the first alphabet symbol that differs."""
    if not value:
        return value
    idx = rng.below(len(value))
    current = value[idx]
    replacement = next((c for c in alphabet if c != current), current)
    return value[:idx] + replacement + value[idx + 1:]


def build_unsolvable_tiles(rng: Mulberry32, settings: Settings) -> List[Tile]:
    """
    Independent tiles with top != bottom on each tile.

    No search or proof backs the "unsolvable" label; it only records what
    the instance was built to be. Duplicate pairs are avoided on a
    best-effort basis.
    """
    lo, hi = settings.min_length, settings.max_length
    seen: Set[Tuple[str, str]] = set()
    tiles: List[Tile] = []

    for idx in range(settings.tile_count):
        top = bottom = ""
        for _ in range(CFG.UNSOLVABLE_TILE_TRIES):
            top = random_string(rng, settings.alphabet, rng.between(lo, hi))
            bottom = random_string(rng, settings.alphabet, rng.between(lo, hi))
            if bottom == top:
                bottom = tweak_string(rng, bottom, settings.alphabet)
            if top != bottom and (top, bottom) not in seen:
                break

        if top == bottom:
            raise GenerationExhausted(
                f"cannot form a tile with differing top and bottom from alphabet "
                f"{''.join(settings.alphabet)!r} and lengths {lo}-{hi}"
            )

        seen.add((top, bottom))
        tiles.append(Tile(id=make_tile_id(rng, idx), top=top, bottom=bottom))

    return tiles
