from models import SettingsOverrides
from request_parser import parse_generate_request, parse_order, parse_overrides


def test_nested_camel_case_overrides():
    ov, err = parse_overrides({
        "overrides": {
            "tileCount": "6",
            "minLength": 2,
            "maxLength": 5.4,
            "alphabetSize": 4,
            "theme": "wide",
            "allowUnsolvable": "true",
            "forceUnique": False,
        }
    })
    assert err is None
    assert ov == SettingsOverrides(
        tile_count=6.0,
        min_length=2.0,
        max_length=5.4,
        alphabet_size=4.0,
        theme="wide",
        allow_unsolvable=True,
        force_unique=False,
    )


def test_flat_form_lists():
    like = {"preset": ["medium"], "seed": ["s1"], "tile_count": ["4"], "alphabet": ["xyz"], "force_unique": ["0"]}
    preset, seed, ov, err = parse_generate_request(like)
    assert err is None
    assert preset == "medium"
    assert seed == "s1"
    assert ov.tile_count == 4.0
    assert ov.alphabet == ["xyz"]
    assert ov.force_unique is False


def test_blank_values_are_ignored():
    ov, err = parse_overrides({"tileCount": "", "minLength": None})
    assert err is None
    assert ov == SettingsOverrides()


def test_bad_number_is_reported():
    ov, err = parse_overrides({"overrides": {"tileCount": "lots"}})
    assert ov == SettingsOverrides()
    assert "tileCount" in err


def test_bad_flag_is_reported():
    _, err = parse_overrides({"forceUnique": "maybe"})
    assert "forceUnique" in err


def test_overrides_must_be_object():
    _, err = parse_overrides({"overrides": [1, 2]})
    assert err == "overrides must be an object"


def test_missing_preset():
    assert parse_generate_request({})[3] == "nothing parsed from request"
    assert parse_generate_request({"seed": "x"})[3] == "missing preset"


def test_preset_is_normalised():
    preset, seed, _, err = parse_generate_request({"preset": " Easy "})
    assert err is None
    assert preset == "easy"
    assert seed is None


def test_parse_order_shapes():
    assert parse_order(["a", "b"]) == ["a", "b"]
    assert parse_order("a, b  c") == ["a", "b", "c"]
    assert parse_order(["a,b"]) == ["a", "b"]
    assert parse_order(["tile-0-x"]) == ["tile-0-x"]
    assert parse_order("") == []
    assert parse_order(None) == []
    assert parse_order([1, "a"]) == []
    assert parse_order({"a": 1}) == []
