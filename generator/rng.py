# generator/rng.py: seed derivation + mulberry32 stream
from __future__ import annotations

import secrets
import uuid
from typing import List, Optional, Sequence, TypeVar

from config import CFG

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & MASK32


def to_base36(n: int) -> str:
    if n <= 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 36)
        out.append(_BASE36[rem])
    return "".join(reversed(out))


def derive_seed(seed: Optional[str] = None) -> str:
    """
    Return the trimmed seed if it has content, else a fresh random one.

    The random path is not reproducible; callers that need a replayable
    instance must pass a seed.
    """
    if seed is not None:
        trimmed = str(seed).strip()
        if trimmed:
            return trimmed
    if CFG.SEED_STYLE == "token":
        return "seed-" + "".join(secrets.choice(_BASE36) for _ in range(8))
    return str(uuid.uuid4())


def hash_seed(seed: str) -> int:
    """
    Order-dependent 32-bit multiply/xor/rotate hash of ``seed``.

    Works over UTF-16 code units: a character outside the BMP contributes
    its two surrogates, and the length mixed into the start is in units.
    """
    raw = seed.encode("utf-16-le", "surrogatepass")
    units = [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]
    h = (1779033703 ^ len(units)) & MASK32
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = _rotl32(h, 13)
    return (h ^ (h >> 16)) & MASK32


class Mulberry32:
    """
    Small seeded stream carrying its own 32-bit state.

    Calling the instance advances the state and returns a float in [0, 1).
    Each generation owns one stream; nothing here is shared or global.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed & MASK32

    def __call__(self) -> float:
        self.state = (self.state + 0x6D2B79F5) & MASK32
        t = self.state
        r = _imul(t ^ (t >> 15), 1 | t)
        r ^= (r + _imul(r ^ (r >> 7), 61 | r)) & MASK32
        return ((r ^ (r >> 14)) & MASK32) / 4294967296.0

    def below(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        return int(self() * n) % n if n > 0 else 0

    def between(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi]."""
        return lo + self.below(hi - lo + 1)

    def __repr__(self) -> str:
        return f"Mulberry32(state=0x{self.state:08x})"


def make_rng(seed_state: int) -> Mulberry32:
    return Mulberry32(seed_state)


def rng_for_seed(seed: str) -> Mulberry32:
    return Mulberry32(hash_seed(seed))


def random_string(rng: Mulberry32, alphabet: Sequence[str], length: int) -> str:
    return "".join(alphabet[rng.below(len(alphabet))] for _ in range(length))


def shuffle(rng: Mulberry32, items: Sequence[T]) -> List[T]:
    """Fisher–Yates on a copy; the input is left untouched."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def make_tile_id(rng: Mulberry32, idx: int) -> str:
    # The index keeps ids unique within an instance; the suffix varies per seed.
    return f"tile-{idx}-{to_base36(int(rng() * 1e6))}"
