import pytest

from generator.rng import rng_for_seed
from models import Settings, SettingsOverrides
from presets import ALPHABET_POOL, PRESETS, preset_table, resolve_settings


def _resolve(preset="easy", **overrides):
    return resolve_settings(preset, SettingsOverrides(**overrides), rng_for_seed("presets"))


def test_easy_preset_resolves_verbatim():
    assert _resolve() == Settings(
        tile_count=3,
        alphabet=("a", "b"),
        min_length=2,
        max_length=3,
        allow_unsolvable=False,
        force_unique=True,
        theme="preset",
    )


def test_inverted_lengths_raise_max_to_min():
    s = _resolve(min_length=5, max_length=3)
    assert (s.min_length, s.max_length) == (5, 5)


@pytest.mark.parametrize(
    "given, expected",
    [(100, 24), (0.4, 2), (-3, 2), (2.5, 3), (7.49, 7)],
)
def test_tile_count_rounded_then_clamped(given, expected):
    assert _resolve(tile_count=given).tile_count == expected


def test_length_bounds_clamped():
    s = _resolve(min_length=0, max_length=500)
    assert (s.min_length, s.max_length) == (1, 64)
    s = _resolve(min_length=99)
    assert s.min_length == 48
    assert s.max_length == 48


def test_binary_theme_pins_alphabet():
    assert _resolve(theme="binary", alphabet_size=9).alphabet == ("0", "1")


@pytest.mark.parametrize("size, expected", [(None, 5), (2, 5), (6, 6), (20, 6)])
def test_wide_theme_clamps_size(size, expected):
    s = _resolve(theme="wide", alphabet_size=size)
    assert s.alphabet == ALPHABET_POOL[:expected]


def test_alphabet_size_clamped_for_preset_theme():
    assert _resolve(alphabet_size=40).alphabet == ALPHABET_POOL
    assert _resolve(alphabet_size=0).alphabet == ("a",)


def test_explicit_alphabet_wins_and_drops_duplicates():
    s = _resolve(alphabet="xyzx", theme="binary")
    assert s.alphabet == ("x", "y", "z")
    s = _resolve(alphabet=["p", "q"])
    assert s.alphabet == ("p", "q")


def test_unknown_theme_falls_back_to_preset_theme():
    assert _resolve(theme="neon").theme == "preset"


def test_flags_pass_through():
    s = _resolve(allow_unsolvable=True, force_unique=False)
    assert s.allow_unsolvable is True
    assert s.force_unique is False


def test_fixed_presets_do_not_consume_stream():
    rng = rng_for_seed("untouched")
    before = rng.state
    resolve_settings("medium", None, rng)
    assert rng.state == before


def test_ranged_preset_draws_once_within_range():
    for seed in ("a", "b", "c", "d", "e", "f"):
        rng = rng_for_seed(seed)
        before = rng.state
        s = resolve_settings("extreme", None, rng)
        assert 8 <= s.tile_count <= 10
        assert rng.state != before


def test_explicit_count_skips_range_draw():
    rng = rng_for_seed("explicit")
    before = rng.state
    s = resolve_settings("extreme", SettingsOverrides(tile_count=4), rng)
    assert s.tile_count == 4
    assert rng.state == before


def test_infinite_overrides_clamp_to_bounds():
    s = _resolve(tile_count=float("inf"), min_length=float("-inf"), max_length=float("inf"))
    assert (s.tile_count, s.min_length, s.max_length) == (24, 1, 64)
    s = _resolve(tile_count=float("-inf"), min_length=float("inf"), alphabet_size=float("inf"))
    assert (s.tile_count, s.min_length, s.max_length) == (2, 48, 48)
    assert s.alphabet == ALPHABET_POOL


def test_nan_overrides_fall_back_to_preset():
    nan = float("nan")
    assert _resolve(tile_count=nan, min_length=nan, max_length=nan, alphabet_size=nan) == _resolve()


def test_nan_count_on_ranged_preset_still_draws():
    s = resolve_settings("extreme", SettingsOverrides(tile_count=float("nan")), rng_for_seed("nan"))
    assert 8 <= s.tile_count <= 10


def test_unknown_preset_rejected():
    with pytest.raises(ValueError):
        _resolve("impossible")


def test_preset_table_is_json_friendly():
    table = preset_table()
    assert set(table) == set(PRESETS)
    assert table["extreme"]["tile_count_range"] == [8, 10]
    assert table["easy"]["alphabet"] == ["a", "b"]
