from __future__ import annotations

import io
import zipfile
from typing import Dict

import numpy as np
import pytest
from PIL import Image


def make_raster(width: int, height: int, seed: int = 0) -> np.ndarray:
    """Deterministic opaque RGBA raster with distinct pixels."""

    rng = np.random.default_rng(seed)
    raster = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    raster[..., 3] = 255
    return raster


def encode(raster: np.ndarray, fmt: str = "BMP") -> bytes:
    image = Image.fromarray(raster)
    if fmt == "BMP":
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def zip_bytes(contents: Dict[str, bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in contents.items():
            archive.writestr(name, data)
    return buffer.getvalue()


@pytest.fixture
def main_sheet() -> np.ndarray:
    return make_raster(275, 116, seed=1)


@pytest.fixture
def skin_archive(main_sheet: np.ndarray) -> Dict[str, bytes]:
    return {
        "Skin/MAIN.BMP": encode(main_sheet),
        "Skin/monoster.bmp": encode(make_raster(56, 24, seed=2)),
        "Skin/PLEDIT.TXT": b"[Text]\nNormal=#00FF00\nNormalBG=102030\nFont=Arial\n",
        "Skin/viscolor.txt": b"0,0,0, // background\n24,33,41,\n",
        "Skin/region.txt": b"[Normal]\nNumPoints=4\nPointList=0,0 275,0 275,116 0,116\n",
        "Skin/readme.txt": b"hello",
    }
