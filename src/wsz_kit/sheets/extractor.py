"""Cutting sprite sheets into individual sprites."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping

import numpy as np

from wsz_kit.catalog.registry import SpriteCatalog
from wsz_kit.data import SpriteRect, empty_raster
from wsz_kit.errors import SkinNotFoundError
from wsz_kit.io.archive import find_entry
from wsz_kit.io.images import decode_image

logger = logging.getLogger(__name__)


def extract_sprite(sheet: np.ndarray, rect: SpriteRect) -> np.ndarray:
    """Copy one sprite out of a sheet.

    A rectangle that starts outside the sheet yields a zero-size raster; one
    that starts inside but runs past an edge is clipped to what is available.
    """

    height, width = sheet.shape[:2]
    if rect.x >= width or rect.y >= height:
        return empty_raster()
    x1 = min(rect.x + rect.width, width)
    y1 = min(rect.y + rect.height, height)
    if x1 <= rect.x or y1 <= rect.y:
        return empty_raster()
    return sheet[rect.y:y1, rect.x:x1].copy()


def extract_sheet(sheet: np.ndarray, entries: Iterable[SpriteRect]) -> Dict[str, np.ndarray]:
    """Cut every rectangle in ``entries`` out of a decoded sheet."""

    return {entry.name: extract_sprite(sheet, entry) for entry in entries}


def extract_sheet_from_archive(
    archive: Mapping[str, bytes],
    sheet_name: str,
    catalog: SpriteCatalog,
) -> Dict[str, np.ndarray]:
    """Locate, decode and cut one sheet of the archive.

    Raises ``SkinNotFoundError`` when the sheet is not in the archive.
    """

    entries = catalog.sheet_entries(sheet_name)
    key = find_entry(archive, sheet_name)
    if key is None:
        raise SkinNotFoundError(f"{sheet_name} not found in skin (at any path)")
    sheet = decode_image(archive[key])
    logger.debug("Decoded %s from %s (%dx%d)", sheet_name, key, sheet.shape[1], sheet.shape[0])
    return extract_sheet(sheet, entries)


def extract_all_sprites(archive: Mapping[str, bytes], catalog: SpriteCatalog) -> Dict[str, np.ndarray]:
    """Extract sprites from every known sheet present in the archive.

    Missing sheets are skipped; decoding failures propagate.
    """

    sprites: Dict[str, np.ndarray] = {}
    for sheet_name in catalog.sheet_names():
        try:
            sprites.update(extract_sheet_from_archive(archive, sheet_name, catalog))
        except SkinNotFoundError:
            logger.info("Skipping %s: not present in skin", sheet_name)
    return sprites
