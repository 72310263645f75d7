# generator/solvable.py
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Set, Tuple

from config import CFG
from models import GenerationExhausted, Settings, Tile
from attempt_log import log_attempt_detail
from generator.rng import Mulberry32, make_tile_id, random_string, shuffle
from generator.partition import (
    alignment_coincidences,
    fallback_partitions,
    random_partition,
    uniqueness_tolerance,
)


def _distinct_pairs_available(settings: Settings) -> int:
    """Ordered pairs of distinct strings; counting stops once past tile_count."""
    cap = settings.tile_count + 1
    k = len(settings.alphabet)
    strings = 0
    for length in range(settings.min_length, settings.max_length + 1):
        strings += k ** length
        if strings > cap:
            break
    return strings * (strings - 1)


def _pick_total(rng: Mulberry32, min_total: int, max_total: int) -> int:
    # Two nested draws lean the total toward the upper part of the range.
    floor_pick = min_total + int(math.floor(rng() * (max_total - min_total + 1)))
    return floor_pick + int(math.floor(rng() * (max_total - floor_pick + 1)))


def _pair_acceptable(top: Sequence[int], bottom: Sequence[int], settings: Settings) -> bool:
    if list(top) == list(bottom):
        return False
    if settings.force_unique:
        limit = uniqueness_tolerance(settings.tile_count)
        if alignment_coincidences(top, bottom) > limit:
            return False
    return True


def _choose_partitions(
    rng: Mulberry32, settings: Settings
) -> Tuple[Optional[List[int]], Optional[List[int]], int]:
    min_len, max_len = settings.min_length, settings.max_length
    count = settings.tile_count
    min_total = count * min_len
    max_total = count * max_len

    for _ in range(CFG.PARTITION_TRIES):
        total = _pick_total(rng, min_total, max_total)
        top = random_partition(rng, total, count, min_len, max_len)
        bottom = random_partition(rng, total, count, min_len, max_len)
        if top and bottom and _pair_acceptable(top, bottom, settings):
            return top, bottom, total
    return None, None, 0


def _slice_tiles(
    rng: Mulberry32,
    target: str,
    top_parts: Sequence[int],
    bottom_parts: Sequence[int],
) -> Optional[List[Tile]]:
    tiles: List[Tile] = []
    seen: Set[Tuple[str, str]] = set()
    top_off = 0
    bottom_off = 0
    for i, (top_len, bottom_len) in enumerate(zip(top_parts, bottom_parts)):
        top = target[top_off:top_off + top_len]
        bottom = target[bottom_off:bottom_off + bottom_len]
        if top == bottom or (top, bottom) in seen:
            return None
        seen.add((top, bottom))
        tiles.append(Tile(id=make_tile_id(rng, i), top=top, bottom=bottom))
        top_off += top_len
        bottom_off += bottom_len
    return tiles


def build_solvable_tiles(rng: Mulberry32, settings: Settings) -> Tuple[List[Tile], List[str]]:
    """
    Build tiles whose tops and bottoms are two segmentations of one string.

    Returns ``(display_tiles, solution_ids)``. The solution is the
    construction order, which always matches; it is not guaranteed to be the
    only matching order even with ``force_unique``. Raises
    :class:`GenerationExhausted` when no attempt produces a usable set.
    """
    if settings.min_length == settings.max_length:
        # Every partition is then the same constant split, so top == bottom per tile.
        raise GenerationExhausted(
            f"no solvable tile set exists with minLength == maxLength == {settings.min_length}"
        )
    if _distinct_pairs_available(settings) < settings.tile_count:
        raise GenerationExhausted(
            f"too few distinct tiles for {settings.tile_count} over alphabet "
            f"{''.join(settings.alphabet)} with lengths {settings.min_length}-{settings.max_length}"
        )

    for attempt in range(CFG.OUTER_ATTEMPTS):
        top_parts, bottom_parts, total = _choose_partitions(rng, settings)

        if not top_parts or not bottom_parts:
            top_parts, bottom_parts = fallback_partitions(
                settings.tile_count, settings.min_length, settings.max_length
            )
            total = sum(top_parts)
            if not _pair_acceptable(top_parts, bottom_parts, settings):
                log_attempt_detail(
                    "Fallback partitions rejected",
                    attempt=attempt,
                    coincidences=alignment_coincidences(top_parts, bottom_parts),
                )
                continue

        for _ in range(CFG.TARGET_TRIES):
            target = random_string(rng, settings.alphabet, total)
            tiles = _slice_tiles(rng, target, top_parts, bottom_parts)
            if tiles is None:
                continue
            solution = [t.id for t in tiles]
            return shuffle(rng, tiles), solution

        log_attempt_detail(
            "Target strings exhausted",
            attempt=attempt,
            total=total,
            top=top_parts,
            bottom=bottom_parts,
        )

    raise GenerationExhausted(
        f"no solvable tile set after {CFG.OUTER_ATTEMPTS} attempts "
        f"(tiles={settings.tile_count}, lengths={settings.min_length}-{settings.max_length}, "
        f"alphabet={''.join(settings.alphabet)})"
    )
