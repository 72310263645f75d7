from generator.orchestrator import generate_puzzle
from models import PuzzleInstance, SettingsOverrides


def test_instance_dict_round_trip():
    puzzle = generate_puzzle("medium", "round-trip")
    data = puzzle.to_dict()
    assert data["settings"]["tileCount"] == 5
    assert data["solution"] == list(puzzle.solution)
    assert PuzzleInstance.from_dict(data) == puzzle


def test_from_dict_rejects_malformed():
    assert PuzzleInstance.from_dict(None) is None
    assert PuzzleInstance.from_dict({"tiles": []}) is None
    assert PuzzleInstance.from_dict({"settings": {"tileCount": "x"}, "tiles": []}) is None
    good = generate_puzzle("easy", "abc123").to_dict()
    good["tiles"] = [{"id": "t"}]
    assert PuzzleInstance.from_dict(good) is None


def test_overrides_from_mapping_ignores_unknown_keys():
    ov = SettingsOverrides.from_mapping({"tile_count": 4, "colour": "red"})
    assert ov == SettingsOverrides(tile_count=4)
    assert SettingsOverrides.from_mapping(None) == SettingsOverrides()
