"""Immutable lookup table over the per-sheet sprite rectangles."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from wsz_kit.catalog.sheets import sheet_sprites
from wsz_kit.data import SpriteRect
from wsz_kit.errors import ArgumentError


class SpriteCatalog:
    """Sprite rectangles grouped by sheet, addressable by unique sprite name."""

    def __init__(self, sheets: Mapping[str, Sequence[SpriteRect]]) -> None:
        by_name: Dict[str, SpriteRect] = {}
        by_sheet: Dict[str, Tuple[SpriteRect, ...]] = {}
        for sheet, entries in sheets.items():
            for entry in entries:
                if entry.sheet != sheet:
                    raise ValueError(f"Sprite {entry.name} belongs to {entry.sheet}, not {sheet}.")
                if entry.name in by_name:
                    raise ValueError(f"Duplicate sprite name '{entry.name}'.")
                by_name[entry.name] = entry
            by_sheet[sheet] = tuple(entries)
        self._by_name = MappingProxyType(by_name)
        self._by_sheet = MappingProxyType(by_sheet)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[SpriteRect]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def get(self, name: str) -> Optional[SpriteRect]:
        return self._by_name.get(name)

    def require(self, name: str) -> SpriteRect:
        """Return a sprite rectangle or raise ``ArgumentError``."""

        entry = self._by_name.get(name)
        if entry is None:
            raise ArgumentError(f"Sprite {name} not found")
        return entry

    def sheet_names(self) -> List[str]:
        return list(self._by_sheet)

    def sheet_entries(self, sheet: str) -> Tuple[SpriteRect, ...]:
        """Return the rectangles of one sheet, raising for unknown sheets."""

        if sheet not in self._by_sheet:
            raise ArgumentError(f"{sheet} not a known sprite sheet")
        return self._by_sheet[sheet]

    def find_sheet(self, stem: str) -> Optional[str]:
        """Resolve a sheet from its file stem, ignoring case (``main`` -> ``MAIN.BMP``)."""

        wanted = stem.upper()
        for sheet in self._by_sheet:
            if sheet.rsplit(".", 1)[0] == wanted:
                return sheet
        return None


_DEFAULT: Optional[SpriteCatalog] = None


def default_catalog() -> SpriteCatalog:
    """Return the shared catalog of every classic skin sheet."""

    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = SpriteCatalog(sheet_sprites())
    return _DEFAULT
