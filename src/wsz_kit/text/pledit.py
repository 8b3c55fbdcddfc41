"""Parser for pledit.txt, the playlist editor colors and font."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from wsz_kit.data import RGB
from wsz_kit.errors import InvalidFormatError
from wsz_kit.text.grammar import content_lines, key_value, read_text_entry, section_header

_HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")

_COLOR_FIELDS = {
    "normal": "normal",
    "current": "current",
    "normalbg": "normal_bg",
    "selectedbg": "selected_bg",
}


@dataclass(frozen=True)
class PleditSettings:
    """Playlist editor settings.

    Keys the parser does not know about are kept in ``custom`` under
    ``"<Section>.<key>"`` so newer skins round-trip without loss.
    """

    normal: Optional[RGB] = None
    current: Optional[RGB] = None
    normal_bg: Optional[RGB] = None
    selected_bg: Optional[RGB] = None
    font: Optional[str] = None
    custom: Dict[str, str] = field(default_factory=dict)


def parse_hex_color(value: str, line_number: int) -> RGB:
    """Parse ``#9BBBAD`` or ``9BBBAD`` into an RGB triple."""

    digits = value[1:] if value.startswith("#") else value
    if not _HEX_COLOR.fullmatch(digits):
        raise InvalidFormatError(line_number, f"Invalid hex color format: '{value}'")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def parse_pledit(text: str) -> PleditSettings:
    """Parse pledit.txt content; ``;`` starts a comment line."""

    fields: Dict[str, object] = {}
    custom: Dict[str, str] = {}
    section: Optional[str] = None

    for line_number, line in content_lines(text, ";"):
        header = section_header(line)
        if header is not None:
            section = header
            continue

        pair = key_value(line)
        if pair is None:
            raise InvalidFormatError(line_number, f"Invalid line format: '{line}'")
        if not section:
            raise InvalidFormatError(line_number, "Key-value pair outside of any section")

        key, value = pair
        lowered = key.lower()
        if section.lower() == "text" and lowered in _COLOR_FIELDS:
            fields[_COLOR_FIELDS[lowered]] = parse_hex_color(value, line_number)
        elif section.lower() == "text" and lowered == "font":
            fields["font"] = value
        else:
            custom[f"{section}.{key}"] = value

    return PleditSettings(custom=custom, **fields)


def pledit_from_archive(archive: Mapping[str, bytes]) -> PleditSettings:
    return parse_pledit(read_text_entry(archive, "pledit.txt"))
