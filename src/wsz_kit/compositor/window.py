"""Layered compositing of sprites into the three-window screenshot."""

from __future__ import annotations

import dataclasses
from typing import Dict, Iterable, Mapping, Optional

import numpy as np

from wsz_kit.catalog.windows import CANVAS_HEIGHT, CANVAS_WIDTH, WINDOW_OFFSETS, window_placements
from wsz_kit.data import RGB, WindowPlacement, solid_raster
from wsz_kit.errors import ArgumentError, OutOfBoundsError

DEFAULT_BACKGROUND: RGB = (0, 0, 0)


def draw_sprite(canvas: np.ndarray, sprite: np.ndarray, placement: WindowPlacement) -> None:
    """Copy a sprite onto the canvas at the placement's absolute position.

    The sprite is cropped to the placement size; pixels overwrite the canvas
    without blending.
    """

    offset_x, offset_y = WINDOW_OFFSETS[placement.window]
    x0 = offset_x + placement.x
    y0 = offset_y + placement.y
    if (
        x0 < 0
        or y0 < 0
        or x0 + placement.width > canvas.shape[1]
        or y0 + placement.height > canvas.shape[0]
    ):
        raise OutOfBoundsError(f"Sprite {placement.name} is out of bounds")

    height = min(sprite.shape[0], placement.height)
    width = min(sprite.shape[1], placement.width)
    if width <= 0 or height <= 0:
        return
    canvas[y0:y0 + height, x0:x0 + width] = sprite[:height, :width]


def composite_windows(
    placements: Iterable[WindowPlacement],
    sprites: Mapping[str, np.ndarray],
    background: RGB = DEFAULT_BACKGROUND,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> np.ndarray:
    """Render all placements layer by layer onto a fresh opaque canvas.

    Lower layers are painted first. Placements whose sprite is missing from
    ``sprites`` are skipped.
    """

    placements = list(placements)
    canvas = solid_raster(width, height, (*background, 255))
    for layer in sorted({placement.layer for placement in placements}):
        for placement in placements:
            if placement.layer != layer:
                continue
            sprite = sprites.get(placement.sprite_name)
            if sprite is None:
                continue
            draw_sprite(canvas, sprite, placement)
    return canvas


class WindowCompositor:
    """Holds an editable copy of the placements and renders them on demand."""

    def __init__(
        self,
        placements: Optional[Iterable[WindowPlacement]] = None,
        background: RGB = DEFAULT_BACKGROUND,
    ) -> None:
        source = window_placements() if placements is None else placements
        self._placements: Dict[str, WindowPlacement] = {p.name: p for p in source}
        self.background = background

    @property
    def placements(self) -> Dict[str, WindowPlacement]:
        return dict(self._placements)

    def _require(self, name: str) -> WindowPlacement:
        placement = self._placements.get(name)
        if placement is None:
            raise ArgumentError(f"Sprite {name} not found")
        return placement

    def set_background_color(self, color: RGB) -> None:
        self.background = color

    def set_position(self, name: str, x: int, y: int) -> None:
        """Move a placement within its window."""

        self._placements[name] = dataclasses.replace(self._require(name), x=x, y=y)

    def set_sprite_name(self, name: str, sprite_name: str) -> None:
        """Change which sprite a placement draws."""

        self._placements[name] = dataclasses.replace(self._require(name), sprite_name=sprite_name)

    def add_placement(self, placement: WindowPlacement) -> None:
        self._placements[placement.name] = placement

    def remove_placement(self, name: str) -> None:
        self._placements.pop(name, None)

    def draw_placement(self, canvas: np.ndarray, sprite: np.ndarray, name: str) -> None:
        draw_sprite(canvas, sprite, self._require(name))

    def composite(self, sprites: Mapping[str, np.ndarray]) -> np.ndarray:
        return composite_windows(self._placements.values(), sprites, background=self.background)
