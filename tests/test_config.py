import json

import pytest

from moodstamp import config


def test_default_stamp_set():
    assert list(config.STAMP_CONFIG) == ["thanks", "love", "smile", "cry", "sad", "shock"]
    assert config.STAMP_CONFIG["love"].label == "大好きボタン"


def test_load_stamp_config(tmp_path):
    path = tmp_path / "stamps.json"
    path.write_text(
        json.dumps({"wave": {"glyph": "👋", "label": "あいさつ"}, "fire": {"glyph": "🔥"}}),
        encoding="utf-8",
    )

    loaded = config.load_stamp_config(str(path))

    assert loaded["wave"] == config.StampConfig("👋", "あいさつ")
    assert loaded["fire"].label == "fire"


def test_load_stamp_config_rejects_bad_entry(tmp_path):
    path = tmp_path / "stamps.json"
    path.write_text(json.dumps({"wave": {"label": "no glyph"}}), encoding="utf-8")

    with pytest.raises(ValueError, match="wave"):
        config.load_stamp_config(str(path))


def test_get_stamp_config_env_override(tmp_path, monkeypatch):
    path = tmp_path / "stamps.json"
    path.write_text(json.dumps({"wave": {"glyph": "👋"}}), encoding="utf-8")

    monkeypatch.setenv("MOODSTAMP_STAMP_CONFIG", str(path))
    assert list(config.get_stamp_config()) == ["wave"]

    monkeypatch.delenv("MOODSTAMP_STAMP_CONFIG")
    assert config.get_stamp_config() is config.STAMP_CONFIG


def test_thanks_glyph_matches_stamp_table():
    assert config.STAMP_CONFIG["thanks"] == config.StampConfig("😢", "ありがとうボタン")
