"""Sprite sheet extraction and composition."""

from wsz_kit.sheets.composer import compose_sheet
from wsz_kit.sheets.extractor import (
    extract_all_sprites,
    extract_sheet,
    extract_sheet_from_archive,
    extract_sprite,
)

__all__ = [
    "compose_sheet",
    "extract_all_sprites",
    "extract_sheet",
    "extract_sheet_from_archive",
    "extract_sprite",
]
