# request_parser.py: tolerant decoding of generate/validate payloads
from __future__ import annotations
import re
from typing import Any, Dict, List, Optional, Tuple

from models import SettingsOverrides

# Accept camelCase (as the web client sends it) or snake_case keys.
_OVERRIDE_KEYS: Dict[str, str] = {
    "tileCount": "tile_count", "tile_count": "tile_count",
    "minLength": "min_length", "min_length": "min_length",
    "maxLength": "max_length", "max_length": "max_length",
    "alphabetSize": "alphabet_size", "alphabet_size": "alphabet_size",
    "alphabet": "alphabet",
    "theme": "theme",
    "allowUnsolvable": "allow_unsolvable", "allow_unsolvable": "allow_unsolvable",
    "forceUnique": "force_unique", "force_unique": "force_unique",
}
_NUMERIC = {"tile_count", "min_length", "max_length", "alphabet_size"}
_FLAGS = {"allow_unsolvable", "force_unique"}

_ORDER_SPLIT_RE = re.compile(r"[\s,]+")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _first(val: Any) -> Any:
    # form/args mappings arrive as single-element lists
    if isinstance(val, (list, tuple)) and len(val) == 1:
        return val[0]
    return val


def _to_float(x: Any) -> Optional[float]:
    try:
        return float(x)
    except (TypeError, ValueError):
        return None


def _to_bool(x: Any) -> Optional[bool]:
    if isinstance(x, bool):
        return x
    if isinstance(x, (int, float)):
        return bool(x)
    if isinstance(x, str):
        s = x.strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
    return None


def parse_overrides(form_like: Any) -> Tuple[SettingsOverrides, Optional[str]]:
    """
    Build SettingsOverrides from ``form_like["overrides"]`` or from flat keys.
    Returns (overrides, error_message_or_None); unreadable values are errors.
    """
    if not isinstance(form_like, dict):
        return SettingsOverrides(), None

    source = form_like.get("overrides")
    if source is None:
        source = form_like
    if not isinstance(source, dict):
        return SettingsOverrides(), "overrides must be an object"

    values: Dict[str, Any] = {}
    for raw_key, raw_val in source.items():
        field = _OVERRIDE_KEYS.get(str(raw_key))
        if field is None:
            continue
        val = raw_val if field == "alphabet" else _first(raw_val)
        if val is None or (isinstance(val, str) and val.strip() == "" and field != "alphabet"):
            continue
        if field in _NUMERIC:
            num = _to_float(val)
            if num is None:
                return SettingsOverrides(), f"{raw_key} is not a number: {val!r}"
            values[field] = num
        elif field in _FLAGS:
            flag = _to_bool(val)
            if flag is None:
                return SettingsOverrides(), f"{raw_key} is not a boolean: {val!r}"
            values[field] = flag
        elif field == "alphabet":
            if isinstance(val, (list, tuple)):
                values[field] = [str(v) for v in val]
            elif str(val).strip():
                values[field] = str(val).strip()
        else:
            values[field] = str(val)

    return SettingsOverrides.from_mapping(values), None


def parse_generate_request(form_like: Any) -> Tuple[Optional[str], Optional[str], SettingsOverrides, Optional[str]]:
    """
    Return (preset, seed, overrides, error_message_or_None).
    """
    if not isinstance(form_like, dict) or not form_like:
        return None, None, SettingsOverrides(), "nothing parsed from request"

    preset = _first(form_like.get("preset"))
    if not isinstance(preset, str) or not preset.strip():
        return None, None, SettingsOverrides(), "missing preset"

    seed = _first(form_like.get("seed"))
    seed = None if seed is None else str(seed)

    overrides, err = parse_overrides(form_like)
    if err:
        return None, None, SettingsOverrides(), err
    return preset.strip().lower(), seed, overrides, None


def parse_order(value: Any) -> List[str]:
    """Tile ids from a list, or from a comma/space separated string. Bad input gives []."""
    if value is None:
        return []
    if isinstance(value, str):
        return [tok for tok in _ORDER_SPLIT_RE.split(value.strip()) if tok]
    if isinstance(value, (list, tuple)):
        if len(value) == 1 and isinstance(value[0], str) and _ORDER_SPLIT_RE.search(value[0].strip()):
            return parse_order(value[0])
        out: List[str] = []
        for v in value:
            if not isinstance(v, str):
                return []
            out.append(v)
        return out
    return []


__all__ = ["parse_overrides", "parse_generate_request", "parse_order"]
