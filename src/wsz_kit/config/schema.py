"""Configuration schema and loading utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from wsz_kit.data import RGB, RGBA, TRANSPARENCY_KEY

_SHEET_FORMATS = ("BMP", "PNG")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Top-level configuration for unpacking, packing and rendering skins."""

    background_color: RGB = (0, 0, 0)
    transparency_key: RGBA = TRANSPARENCY_KEY
    sheet_format: str = "BMP"
    screenshot_name: str = "screenshot.png"
    log_level: str = "INFO"


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides into base without mutating either input."""

    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


def _color(value: Sequence[Any], channels: int, key: str) -> Tuple[int, ...]:
    if not isinstance(value, (list, tuple)) or len(value) != channels:
        raise ValueError(f"'{key}' must be a list of {channels} integers.")
    if not all(isinstance(channel, int) and 0 <= channel <= 255 for channel in value):
        raise ValueError(f"'{key}' channels must be integers between 0 and 255.")
    return tuple(value)


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from JSON, falling back to defaults."""

    base = {
        "background_color": [0, 0, 0],
        "transparency_key": list(TRANSPARENCY_KEY),
        "sheet_format": "BMP",
        "screenshot_name": "screenshot.png",
        "log_level": "INFO",
    }

    if path:
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError("Config file must contain a JSON object.")
        merged = _merge_dict(base, raw)
    else:
        merged = base

    sheet_format = str(merged["sheet_format"]).upper()
    if sheet_format not in _SHEET_FORMATS:
        raise ValueError(
            f"Unknown sheet format '{merged['sheet_format']}'. Available: {', '.join(_SHEET_FORMATS)}"
        )

    log_level = str(merged["log_level"]).upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Unknown log level '{merged['log_level']}'. Available: {', '.join(_LOG_LEVELS)}")

    return Config(
        background_color=_color(merged["background_color"], 3, "background_color"),
        transparency_key=_color(merged["transparency_key"], 4, "transparency_key"),
        sheet_format=sheet_format,
        screenshot_name=str(merged["screenshot_name"]),
        log_level=log_level,
    )
