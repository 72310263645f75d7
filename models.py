from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

THEMES = ("preset", "binary", "wide")


class GenerationExhausted(RuntimeError):
    """The builder could not produce a valid tile set within its attempt budget."""


@dataclass(frozen=True)
class Tile:
    id: str
    top: str
    bottom: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "top": self.top, "bottom": self.bottom}


@dataclass(frozen=True)
class Settings:
    tile_count: int
    alphabet: Tuple[str, ...]
    min_length: int
    max_length: int
    allow_unsolvable: bool = False
    force_unique: bool = False
    theme: str = "preset"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tileCount": self.tile_count,
            "alphabet": list(self.alphabet),
            "minLength": self.min_length,
            "maxLength": self.max_length,
            "allowUnsolvable": self.allow_unsolvable,
            "forceUnique": self.force_unique,
            "theme": self.theme,
        }


@dataclass(frozen=True)
class SettingsOverrides:
    """Optional per-call adjustments layered over a preset.

    ``None`` means "keep the preset value". Numbers may be floats; the
    resolver rounds and clamps them.
    """
    tile_count: Optional[float] = None
    min_length: Optional[float] = None
    max_length: Optional[float] = None
    alphabet_size: Optional[float] = None
    alphabet: Optional[Sequence[str]] = None
    theme: Optional[str] = None
    allow_unsolvable: Optional[bool] = None
    force_unique: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]]) -> "SettingsOverrides":
        if not data:
            return cls()
        known = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class PuzzleInstance:
    seed: str
    preset: str
    settings: Settings
    tiles: Tuple[Tile, ...]
    solvable: bool
    solution: Optional[Tuple[str, ...]] = field(default=None)

    def tile_map(self) -> Dict[str, Tile]:
        return {t.id: t for t in self.tiles}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "preset": self.preset,
            "settings": self.settings.to_dict(),
            "tiles": [t.to_dict() for t in self.tiles],
            "solvable": self.solvable,
            "solution": list(self.solution) if self.solution is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Optional["PuzzleInstance"]:
        """Rebuild an instance from :meth:`to_dict` output; ``None`` if malformed."""
        if not isinstance(data, dict):
            return None
        try:
            raw_settings = data.get("settings") or {}
            settings = Settings(
                tile_count=int(raw_settings["tileCount"]),
                alphabet=tuple(str(c) for c in raw_settings["alphabet"]),
                min_length=int(raw_settings["minLength"]),
                max_length=int(raw_settings["maxLength"]),
                allow_unsolvable=bool(raw_settings.get("allowUnsolvable", False)),
                force_unique=bool(raw_settings.get("forceUnique", False)),
                theme=str(raw_settings.get("theme", "preset")),
            )
            tiles: List[Tile] = []
            for t in data["tiles"]:
                tiles.append(Tile(id=str(t["id"]), top=str(t["top"]), bottom=str(t["bottom"])))
            solution = data.get("solution")
            return cls(
                seed=str(data.get("seed", "")),
                preset=str(data.get("preset", "")),
                settings=settings,
                tiles=tuple(tiles),
                solvable=bool(data.get("solvable", False)),
                solution=tuple(str(s) for s in solution) if solution else None,
            )
        except (KeyError, TypeError, ValueError):
            return None
