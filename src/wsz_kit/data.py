"""Core data structures used throughout the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

# Standard background color of Winamp sheets (#00C6FF).
TRANSPARENCY_KEY: RGBA = (0, 198, 255, 255)


@dataclass(frozen=True)
class SpriteRect:
    """Named rectangle inside one sprite sheet, in sheet-local pixels."""

    name: str
    sheet: str
    x: int
    y: int
    width: int
    height: int


class WindowType(Enum):
    """Logical sub-window of the rendered screenshot."""

    MAIN = "main"
    EQUALIZER = "equalizer"
    PLAYLIST = "playlist"


@dataclass(frozen=True)
class WindowPlacement:
    """Position of a sprite within one window of the screenshot."""

    name: str
    sprite_name: str
    window: WindowType
    layer: int
    x: int
    y: int
    width: int
    height: int


def empty_raster() -> np.ndarray:
    """Return a zero-size RGBA raster."""

    return np.zeros((0, 0, 4), dtype=np.uint8)


def solid_raster(width: int, height: int, color: RGBA) -> np.ndarray:
    """Return a raster of the given size filled with one RGBA color."""

    raster = np.empty((height, width, 4), dtype=np.uint8)
    raster[...] = np.asarray(color, dtype=np.uint8)
    return raster


def is_empty_raster(raster: np.ndarray) -> bool:
    return raster.shape[0] == 0 or raster.shape[1] == 0
