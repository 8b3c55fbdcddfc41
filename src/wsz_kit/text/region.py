"""Parser for region.txt, the polygons that shape each window.

Each section lists vertex counts in ``NumPoints`` and a flat coordinate list
in ``PointList``; everything outside the polygons is transparent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from wsz_kit.errors import InvalidFormatError
from wsz_kit.text.grammar import content_lines, key_value, read_text_entry, section_header

Point = Tuple[int, int]
Polygons = List[List[Point]]

SECTION_FIELDS: Dict[str, str] = {
    "Normal": "main",
    "WindowShade": "main_shade",
    "Equalizer": "equalizer",
    "EqualizerWS": "equalizer_shade",
}

_SEPARATORS = re.compile(r"[\s,]+")
_NUMBER = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Regions:
    """Window shape polygons; a region is None when the file omits it."""

    main: Optional[Polygons] = None
    main_shade: Optional[Polygons] = None
    equalizer: Optional[Polygons] = None
    equalizer_shade: Optional[Polygons] = None


def _integers(values: List[str], line_number: int) -> List[int]:
    numbers = []
    for value in values:
        if not _NUMBER.fullmatch(value):
            raise InvalidFormatError(line_number, f"Invalid number: '{value}'")
        numbers.append(int(value))
    return numbers


def _polygons(counts: List[int], coordinates: List[int]) -> Polygons:
    points = list(zip(coordinates[0::2], coordinates[1::2]))
    polygons: Polygons = []
    offset = 0
    for count in counts:
        polygons.append(points[offset:offset + count])
        offset += count
    return polygons


def parse_regions(text: str) -> Regions:
    """Parse region.txt content; ``;`` starts a comment line.

    A section is committed as soon as both keys have been read, after which
    further keys need a new section header.
    """

    found: Dict[str, Polygons] = {}
    field_name: Optional[str] = None
    counts: List[int] = []
    coordinates: List[int] = []

    for line_number, line in content_lines(text, ";"):
        header = section_header(line)
        if header is not None:
            if header not in SECTION_FIELDS:
                raise InvalidFormatError(line_number, f"Invalid region type: '{header}'")
            field_name = SECTION_FIELDS[header]
            counts, coordinates = [], []
            continue

        pair = key_value(line)
        if pair is None:
            raise InvalidFormatError(line_number, f"Invalid line format: '{line}'")
        if field_name is None:
            raise InvalidFormatError(line_number, "Key-value pair outside of any section")

        key, value = pair
        lowered = key.lower()
        if lowered == "numpoints":
            counts = _integers([part.strip() for part in value.split(",")], line_number)
        elif lowered == "pointlist":
            coordinates = _integers([part for part in _SEPARATORS.split(value) if part], line_number)
        else:
            raise InvalidFormatError(line_number, f"Invalid key: '{key}'")

        if counts and coordinates:
            if 2 * sum(counts) != len(coordinates):
                raise InvalidFormatError(
                    line_number,
                    "Number of points does not match number of points in the region",
                )
            found[field_name] = _polygons(counts, coordinates)
            field_name = None
            counts, coordinates = [], []

    return Regions(**found)


def regions_from_archive(archive: Mapping[str, bytes]) -> Regions:
    return parse_regions(read_text_entry(archive, "region.txt"))
