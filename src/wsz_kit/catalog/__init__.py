"""Sprite and window placement catalogs."""

from wsz_kit.catalog.registry import SpriteCatalog, default_catalog
from wsz_kit.catalog.sheets import SHEET_NAMES, sheet_sprites
from wsz_kit.catalog.text import character_sprite_name
from wsz_kit.catalog.windows import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    WINDOW_OFFSETS,
    window_placements,
)

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "SHEET_NAMES",
    "SpriteCatalog",
    "WINDOW_OFFSETS",
    "character_sprite_name",
    "default_catalog",
    "sheet_sprites",
    "window_placements",
]
