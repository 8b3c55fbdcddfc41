"""Reassembling sprite sheets from individual sprites."""

from __future__ import annotations

from typing import Iterable, List, Mapping

import numpy as np

from wsz_kit.data import RGBA, TRANSPARENCY_KEY, SpriteRect, is_empty_raster, solid_raster


def compose_sheet(
    entries: Iterable[SpriteRect],
    sprites: Mapping[str, np.ndarray],
    key_color: RGBA = TRANSPARENCY_KEY,
) -> np.ndarray:
    """Build a sheet just large enough for the supplied sprites.

    The canvas is pre-filled with ``key_color`` and each sprite is copied to
    its rectangle origin without blending. Entries without a sprite, and
    zero-size sprites, do not contribute to the sheet size.
    """

    placed: List[tuple[SpriteRect, np.ndarray]] = []
    width = 0
    height = 0
    for entry in entries:
        sprite = sprites.get(entry.name)
        if sprite is None or is_empty_raster(sprite):
            continue
        placed.append((entry, sprite))
        width = max(width, entry.x + sprite.shape[1])
        height = max(height, entry.y + sprite.shape[0])

    sheet = solid_raster(width, height, key_color)
    for entry, sprite in placed:
        sprite_height, sprite_width = sprite.shape[:2]
        sheet[entry.y:entry.y + sprite_height, entry.x:entry.x + sprite_width] = sprite
    return sheet
