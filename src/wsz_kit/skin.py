"""Top-level access to a skin: sprites, config files and a screenshot."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

import numpy as np

from wsz_kit.catalog import SpriteCatalog, default_catalog
from wsz_kit.compositor import DEFAULT_BACKGROUND, WindowCompositor
from wsz_kit.data import RGB
from wsz_kit.errors import SkinError, SkinNotFoundError
from wsz_kit.io import read_archive, read_archive_bytes
from wsz_kit.sheets import extract_all_sprites
from wsz_kit.text import (
    PleditSettings,
    Regions,
    VisColors,
    pledit_from_archive,
    regions_from_archive,
    vis_colors_from_archive,
)

logger = logging.getLogger(__name__)


class Skin:
    """A decoded skin archive."""

    def __init__(
        self,
        sprites: Dict[str, np.ndarray],
        vis_colors: VisColors,
        pledit: PleditSettings,
        regions: Regions,
    ) -> None:
        self._sprites = sprites
        self.vis_colors = vis_colors
        self.pledit = pledit
        self.regions = regions

    @classmethod
    def from_path(cls, path: Path, catalog: Optional[SpriteCatalog] = None) -> "Skin":
        return cls.from_archive(read_archive(path), catalog)

    @classmethod
    def from_bytes(cls, data: bytes, catalog: Optional[SpriteCatalog] = None) -> "Skin":
        return cls.from_archive(read_archive_bytes(data), catalog)

    @classmethod
    def from_archive(cls, archive: Mapping[str, bytes], catalog: Optional[SpriteCatalog] = None) -> "Skin":
        """Extract sprites and parse the optional config files.

        A missing viscolor.txt or pledit.txt falls back to an empty instance
        while other errors propagate; region.txt falls back on any error.
        """

        sprites = extract_all_sprites(archive, catalog or default_catalog())

        try:
            vis_colors = vis_colors_from_archive(archive)
        except SkinNotFoundError:
            logger.info("viscolor.txt not found, using empty color table")
            vis_colors = VisColors()

        try:
            pledit = pledit_from_archive(archive)
        except SkinNotFoundError:
            logger.info("pledit.txt not found, using default playlist settings")
            pledit = PleditSettings()

        try:
            regions = regions_from_archive(archive)
        except SkinError as exc:
            logger.info("Ignoring region.txt: %s", exc)
            regions = Regions()

        return cls(sprites=sprites, vis_colors=vis_colors, pledit=pledit, regions=regions)

    @property
    def sprites(self) -> Dict[str, np.ndarray]:
        return dict(self._sprites)

    def get_sprite(self, name: str) -> Optional[np.ndarray]:
        return self._sprites.get(name)

    def render_screenshot(self, background: Optional[RGB] = None) -> np.ndarray:
        """Render the main, equalizer and playlist windows as one image.

        The playlist background color from pledit.txt wins over ``background``.
        """

        color = self.pledit.normal_bg or background or DEFAULT_BACKGROUND
        return WindowCompositor(background=color).composite(self._sprites)
