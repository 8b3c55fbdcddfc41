from __future__ import annotations

import json

import pytest

from wsz_kit.config import Config, load_config
from wsz_kit.data import TRANSPARENCY_KEY


def test_defaults():
    config = load_config()
    assert config == Config()
    assert config.transparency_key == TRANSPARENCY_KEY


def test_overrides_from_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"background_color": [1, 2, 3], "sheet_format": "png", "log_level": "debug"}))
    config = load_config(path)
    assert config.background_color == (1, 2, 3)
    assert config.sheet_format == "PNG"
    assert config.log_level == "DEBUG"
    assert config.screenshot_name == "screenshot.png"


@pytest.mark.parametrize(
    "raw",
    [
        {"background_color": [1, 2]},
        {"transparency_key": [0, 0, 0, 300]},
        {"sheet_format": "GIF"},
        {"log_level": "VERBOSE"},
    ],
)
def test_invalid_values(tmp_path, raw):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(raw))
    with pytest.raises(ValueError):
        load_config(path)


def test_malformed_json_is_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_config(path)
