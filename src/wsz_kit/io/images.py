"""Image decoding and encoding."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from wsz_kit.errors import ImageCodecError


def _image_to_rgba(image: Image.Image) -> np.ndarray:
    """Convert a PIL image to an RGBA uint8 array."""

    return np.array(image.convert("RGBA"), dtype=np.uint8)


def decode_image(data: bytes) -> np.ndarray:
    """Decode image bytes of any format Pillow recognizes into an RGBA raster."""

    try:
        with Image.open(io.BytesIO(data)) as image:
            return _image_to_rgba(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageCodecError(f"Image error: {exc}") from exc


def encode_image(raster: np.ndarray, fmt: str = "PNG") -> bytes:
    """Encode an RGBA raster; BMP output is written as 24-bit RGB."""

    if raster.shape[0] == 0 or raster.shape[1] == 0:
        raise ImageCodecError("Image error: cannot encode an empty image")
    image = Image.fromarray(np.ascontiguousarray(raster, dtype=np.uint8))
    if fmt.upper() == "BMP":
        image = image.convert("RGB")
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=fmt.upper())
    except (OSError, ValueError, KeyError) as exc:
        raise ImageCodecError(f"Image error: {exc}") from exc
    return buffer.getvalue()


def load_image(path: Path) -> np.ndarray:
    """Load an image file as an RGBA raster."""

    return decode_image(Path(path).read_bytes())


def save_image(path: Path, raster: np.ndarray) -> None:
    """Save an RGBA raster, picking the format from the file suffix."""

    fmt = Path(path).suffix.lstrip(".").upper() or "PNG"
    Path(path).write_bytes(encode_image(raster, fmt))
