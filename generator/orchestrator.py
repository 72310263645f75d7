# Orchestrator: the generate / validate / find-solution boundary
from __future__ import annotations

import time
from typing import Any, Dict, Iterable, List, Optional, Union

from config import CFG
from models import GenerationExhausted, PuzzleInstance, SettingsOverrides
from presets import resolve_settings
from attempt_log import fmt_seconds, log_attempt_detail
from generator.rng import derive_seed, rng_for_seed
from generator.solvable import build_solvable_tiles
from generator.unsolvable import build_unsolvable_tiles

OverridesLike = Union[SettingsOverrides, Dict[str, Any], None]


def _coerce_overrides(maybe: OverridesLike) -> SettingsOverrides:
    if isinstance(maybe, SettingsOverrides):
        return maybe
    if isinstance(maybe, dict):
        return SettingsOverrides.from_mapping(maybe)
    return SettingsOverrides()


# ---------- public entrypoints ----------

def generate_puzzle(
    preset: str,
    seed: Optional[str] = None,
    overrides: OverridesLike = None,
) -> PuzzleInstance:
    """
    Build one instance as a pure function of (seed, preset, overrides).

    A blank seed is replaced by a random one, which is recorded on the
    instance. Raises ``ValueError`` for an unknown preset and
    :class:`GenerationExhausted` when no tile set could be built.
    """
    t0 = time.time()
    actual_seed = derive_seed(seed)
    rng = rng_for_seed(actual_seed)
    settings = resolve_settings(preset, _coerce_overrides(overrides), rng)

    log_attempt_detail(
        "Generation started",
        seed=actual_seed,
        preset=preset,
        tiles=settings.tile_count,
        lengths=f"{settings.min_length}-{settings.max_length}",
        alphabet="".join(settings.alphabet),
        force_unique=int(settings.force_unique),
    )

    make_unsolvable = settings.allow_unsolvable and rng() > CFG.UNSOLVABLE_THRESHOLD

    try:
        if make_unsolvable:
            log_attempt_detail("Unsolvable branch chosen", seed=actual_seed)
            tiles = build_unsolvable_tiles(rng, settings)
            instance = PuzzleInstance(
                seed=actual_seed,
                preset=preset,
                settings=settings,
                tiles=tuple(tiles),
                solvable=False,
            )
        else:
            tiles, solution = build_solvable_tiles(rng, settings)
            instance = PuzzleInstance(
                seed=actual_seed,
                preset=preset,
                settings=settings,
                tiles=tuple(tiles),
                solvable=True,
                solution=tuple(solution),
            )
    except GenerationExhausted as exc:
        log_attempt_detail(
            "Generation exhausted",
            seed=actual_seed,
            preset=preset,
            duration=fmt_seconds(time.time() - t0),
            reason=str(exc),
        )
        raise GenerationExhausted(f"{exc} [seed={actual_seed!r}, preset={preset!r}]") from exc

    log_attempt_detail(
        "Generation finished",
        seed=actual_seed,
        solvable=int(instance.solvable),
        duration=fmt_seconds(time.time() - t0),
    )
    return instance


def validate_solution(instance: PuzzleInstance, order: Iterable[str]) -> bool:
    """
    True iff concatenated tops equal concatenated bottoms for ``order``.

    Tiles may repeat or be left out. An empty order, an unknown id, or any
    malformed input gives False.
    """
    if not isinstance(instance, PuzzleInstance):
        return False
    if order is None or isinstance(order, (str, bytes)):
        return False
    try:
        ids = list(order)
    except TypeError:
        return False
    if not ids:
        return False

    by_id = instance.tile_map()
    tops: List[str] = []
    bottoms: List[str] = []
    for tile_id in ids:
        if not isinstance(tile_id, str):
            return False
        tile = by_id.get(tile_id)
        if tile is None:
            return False
        tops.append(tile.top)
        bottoms.append(tile.bottom)
    return "".join(tops) == "".join(bottoms)


def find_solution(instance: PuzzleInstance) -> Optional[List[str]]:
    """The recorded construction order as a fresh list, or None for unsolvable instances."""
    if not isinstance(instance, PuzzleInstance) or not instance.solvable:
        return None
    if instance.solution is None:
        return None
    return list(instance.solution)


__all__ = ["generate_puzzle", "validate_solution", "find_solution"]
