"""
Preferences Service Tests
=========================
Theme preference persists across sessions; bad files fall back to light.
"""
import json

from services.preferences_service import load_dark_mode, save_dark_mode


def test_missing_file_defaults_to_light(tmp_path):
    assert load_dark_mode(tmp_path / "prefs.json") is False


def test_round_trip_dark(tmp_path):
    path = tmp_path / "nested" / "prefs.json"
    save_dark_mode(path, True)
    assert json.loads(path.read_text()) == {"theme": "dark"}
    assert load_dark_mode(path) is True


def test_switch_back_to_light(tmp_path):
    path = tmp_path / "prefs.json"
    save_dark_mode(path, True)
    save_dark_mode(path, False)
    assert load_dark_mode(path) is False


def test_corrupt_file_defaults_to_light(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("{not json")
    assert load_dark_mode(path) is False


def test_non_object_json_defaults_to_light(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text('["dark"]')
    assert load_dark_mode(path) is False
