"""Unpack, repack and preview classic Winamp skins."""

from wsz_kit.catalog import SpriteCatalog, default_catalog
from wsz_kit.compositor import WindowCompositor, composite_windows
from wsz_kit.errors import (
    ArchiveError,
    ArgumentError,
    ImageCodecError,
    InvalidFormatError,
    OutOfBoundsError,
    SkinError,
    SkinNotFoundError,
)
from wsz_kit.sheets import compose_sheet, extract_sheet
from wsz_kit.skin import Skin
from wsz_kit.workspace import pack_directory, unpack_to_directory

__all__ = [
    "ArchiveError",
    "ArgumentError",
    "ImageCodecError",
    "InvalidFormatError",
    "OutOfBoundsError",
    "Skin",
    "SkinError",
    "SkinNotFoundError",
    "SpriteCatalog",
    "WindowCompositor",
    "compose_sheet",
    "composite_windows",
    "default_catalog",
    "extract_sheet",
    "pack_directory",
    "unpack_to_directory",
]
