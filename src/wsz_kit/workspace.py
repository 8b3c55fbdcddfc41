"""Unpacking a skin into sprite folders and packing folders back into a skin."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

import numpy as np

from wsz_kit.catalog import SpriteCatalog, default_catalog
from wsz_kit.data import RGBA, TRANSPARENCY_KEY, is_empty_raster
from wsz_kit.errors import SkinNotFoundError
from wsz_kit.io import encode_image, entry_basename, load_image, save_image, write_archive
from wsz_kit.sheets import compose_sheet, extract_sheet_from_archive

logger = logging.getLogger(__name__)


def unpack_to_directory(
    archive: Mapping[str, bytes],
    output_dir: Path,
    catalog: Optional[SpriteCatalog] = None,
) -> Dict[str, int]:
    """Write each sheet's sprites as ``<SHEET>/<SPRITE>.png`` under ``output_dir``.

    Non-BMP files are copied to ``output_dir`` with their directory prefix
    removed. Returns the number of sprites written per sheet.
    """

    catalog = catalog or default_catalog()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, int] = {}

    for sheet_name in catalog.sheet_names():
        try:
            sprites = extract_sheet_from_archive(archive, sheet_name, catalog)
        except SkinNotFoundError:
            logger.info("No %s in skin", sheet_name)
            continue
        sheet_dir = output_dir / sheet_name.rsplit(".", 1)[0]
        sheet_dir.mkdir(parents=True, exist_ok=True)
        count = 0
        for name, sprite in sorted(sprites.items()):
            if is_empty_raster(sprite):
                logger.info("Skipping sprite %s because it has no size", name)
                continue
            save_image(sheet_dir / f"{name}.png", sprite)
            count += 1
        written[sheet_name] = count
        logger.info("Extracted %d sprites from %s", count, sheet_name)

    for key, data in archive.items():
        name = entry_basename(key)
        if not name or name.lower().endswith(".bmp"):
            continue
        (output_dir / name).write_bytes(data)
        logger.info("Saved %s", name)

    return written


def _load_sheet_sprites(sheet_dir: Path, sheet_name: str, catalog: SpriteCatalog) -> Dict[str, np.ndarray]:
    known = {entry.name for entry in catalog.sheet_entries(sheet_name)}
    sprites: Dict[str, np.ndarray] = {}
    for path in sorted(sheet_dir.iterdir()):
        if not path.is_file() or path.suffix.lower() != ".png":
            continue
        name = path.stem.upper()
        if name not in known:
            logger.warning("Ignoring %s: not a sprite of %s", path, sheet_name)
            continue
        sprites[name] = load_image(path)
    return sprites


def pack_directory(
    source_dir: Path,
    output_path: Path,
    catalog: Optional[SpriteCatalog] = None,
    sheet_format: str = "BMP",
    key_color: RGBA = TRANSPARENCY_KEY,
) -> Dict[str, bytes]:
    """Rebuild sheets from sprite folders and zip them with the loose files.

    Returns the archive contents that were written.
    """

    catalog = catalog or default_catalog()
    source_dir = Path(source_dir)
    contents: Dict[str, bytes] = {}

    entries = sorted(source_dir.iterdir())
    for path in entries:
        if not path.is_dir():
            continue
        sheet_name = catalog.find_sheet(path.name)
        if sheet_name is None:
            continue
        sprites = _load_sheet_sprites(path, sheet_name, catalog)
        sheet = compose_sheet(catalog.sheet_entries(sheet_name), sprites, key_color)
        if is_empty_raster(sheet):
            logger.warning("No sprites for %s, leaving it out", sheet_name)
            continue
        contents[sheet_name] = encode_image(sheet, sheet_format)
        logger.info("Packed %d sprites into %s", len(sprites), sheet_name)

    for path in entries:
        if path.is_file() and path.name not in contents:
            contents[path.name] = path.read_bytes()

    write_archive(output_path, contents)
    return contents
