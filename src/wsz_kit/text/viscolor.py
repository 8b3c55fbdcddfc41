"""Parser for viscolor.txt, the visualizer color table.

Each content line holds one ``r,g,b`` triple; its position in the file gives
it meaning:

==========  ============================================
index       meaning
==========  ============================================
0           analyzer background
1           background dots
2 - 17      spectrum bars, top (loudest) to bottom
18 - 22     oscilloscope, brightest to darkest
23          analyzer peak dots
==========  ============================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from wsz_kit.data import RGB
from wsz_kit.errors import InvalidFormatError
from wsz_kit.text.grammar import read_text_entry

VIS_COLOR_BG = 0
VIS_COLOR_BG_DOTS = 1
VIS_COLOR_SPEC_15 = 2
VIS_COLOR_SPEC_0 = 17
VIS_COLOR_OSC_1 = 18
VIS_COLOR_OSC_5 = 22
VIS_COLOR_PEAK_DOTS = 23

_COMPONENT = re.compile(r"\d{1,3}")


@dataclass(frozen=True)
class VisColors:
    """Ordered visualizer colors; missing entries read as None."""

    colors: List[RGB] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.colors)

    def get(self, index: int) -> Optional[RGB]:
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return None

    @property
    def bg_color(self) -> Optional[RGB]:
        return self.get(VIS_COLOR_BG)

    @property
    def bg_dots_color(self) -> Optional[RGB]:
        return self.get(VIS_COLOR_BG_DOTS)

    @property
    def peak_dots_color(self) -> Optional[RGB]:
        return self.get(VIS_COLOR_PEAK_DOTS)

    def vis_color(self, level: int) -> Optional[RGB]:
        """Spectrum bar color for ``level`` 0 (bottom) through 15 (top)."""

        if not 0 <= level <= 15:
            return None
        return self.get(VIS_COLOR_SPEC_15 + 15 - level)

    def vis_colors(self) -> List[RGB]:
        """Spectrum bar colors ordered bottom to top."""

        return list(reversed(self.colors[VIS_COLOR_SPEC_15:VIS_COLOR_SPEC_0 + 1]))

    def osc_color(self, index: int) -> Optional[RGB]:
        if not 0 <= index <= VIS_COLOR_OSC_5 - VIS_COLOR_OSC_1:
            return None
        return self.get(VIS_COLOR_OSC_1 + index)

    def osc_colors(self) -> List[RGB]:
        return list(self.colors[VIS_COLOR_OSC_1:VIS_COLOR_OSC_5 + 1])


def _component(value: str, line_number: int) -> int:
    if not _COMPONENT.fullmatch(value) or int(value) > 255:
        raise InvalidFormatError(line_number, f"Invalid color value: '{value}'")
    return int(value)


def parse_vis_colors(text: str) -> VisColors:
    """Parse viscolor.txt content.

    ``//`` starts a comment. Lines without a comma are skipped; anything
    after the third component is ignored.
    """

    colors: List[RGB] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("//", 1)[0].strip()
        if "," not in line:
            continue
        parts = [part.strip() for part in line.split(",")]
        if len(parts) < 3:
            raise InvalidFormatError(line_number, "Expected three comma-separated RGB values")
        red, green, blue = (_component(part, line_number) for part in parts[:3])
        colors.append((red, green, blue))
    return VisColors(colors=colors)


def vis_colors_from_archive(archive: Mapping[str, bytes]) -> VisColors:
    return parse_vis_colors(read_text_entry(archive, "viscolor.txt"))
