import json

import settings
from settings import default_settings, load_settings


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(str(tmp_path / "nope.json")) == default_settings()


def test_defaults():
    defaults = default_settings()
    assert defaults["segment_count"] == 12
    assert defaults["spin_duration_ms"] == 3500
    assert defaults["extra_turns"] == 5


def test_values_override_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"segment_count": 20, "spin_duration_ms": 1000, "theme": "x"}),
                    encoding="utf-8")
    loaded = load_settings(str(path))
    assert loaded["segment_count"] == 20
    assert loaded["spin_duration_ms"] == 1000
    assert loaded["extra_turns"] == 5
    assert "theme" not in loaded


def test_malformed_json_gives_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(str(path)) == default_settings()
    assert "using defaults" in caplog.text


def test_non_object_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_settings(str(path)) == default_settings()


def test_bad_values_are_ignored(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "segment_count": 1,
        "spin_duration_ms": "fast",
        "extra_turns": True,
        "window_width": 800,
    }), encoding="utf-8")
    loaded = load_settings(str(path))
    assert loaded["segment_count"] == 12
    assert loaded["spin_duration_ms"] == 3500
    assert loaded["extra_turns"] == 5
    assert loaded["window_width"] == 800
    assert "segment_count" in caplog.text


def test_default_path_is_module_setting(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"extra_turns": 3}), encoding="utf-8")
    monkeypatch.setattr(settings, "SETTINGS_FILE", str(path))
    assert load_settings()["extra_turns"] == 3
