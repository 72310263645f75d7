# generator/partition.py
from typing import List, Optional, Sequence, Tuple

from config import CFG
from generator.rng import Mulberry32


def random_partition(
    rng: Mulberry32,
    total: int,
    count: int,
    min_len: int,
    max_len: int,
    attempts: Optional[int] = None,
) -> Optional[List[int]]:
    """
    Split ``total`` into ``count`` parts, each within [min_len, max_len].

    Draws ``count - 1`` distinct cut points in (0, total), sorts them and
    keeps the gaps when every gap is in range. Returns None when the totals
    are infeasible or every attempt missed.
    """
    if count <= 0:
        return None
    if total < count * min_len or total > count * max_len:
        return None
    if count == 1:
        return [total]

    budget = CFG.PARTITION_ATTEMPTS if attempts is None else attempts
    for _ in range(budget):
        cuts = set()
        while len(cuts) < count - 1:
            cuts.add(1 + int(rng() * (total - 1)))
        bounds = [0] + sorted(cuts) + [total]
        lens: List[int] = []
        for a, b in zip(bounds, bounds[1:]):
            seg = b - a
            if seg < min_len or seg > max_len:
                break
            lens.append(seg)
        else:
            return lens
    return None


def alignment_coincidences(top_parts: Sequence[int], bottom_parts: Sequence[int]) -> int:
    """Count positions where both running offsets agree and the segment lengths match."""
    top_off = 0
    bottom_off = 0
    hits = 0
    for top_len, bottom_len in zip(top_parts, bottom_parts):
        if top_off == bottom_off and top_len == bottom_len:
            hits += 1
        top_off += top_len
        bottom_off += bottom_len
    return hits


def uniqueness_tolerance(tile_count: int) -> int:
    return 0 if tile_count < 6 else 1


def fallback_partitions(count: int, min_len: int, max_len: int) -> Tuple[List[int], List[int]]:
    """
    Deterministic pair: lengths cycle through [min_len, max_len], sorted
    ascending for the top and descending for the bottom. Both sum to the
    same total and respect the bounds.
    """
    width = max_len - min_len + 1
    base = sorted(min_len + (i % width) for i in range(count))
    return list(base), list(reversed(base))
