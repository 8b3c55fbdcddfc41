"""Character cells of TEXT.BMP, the bitmap font used for scrolling titles."""

from __future__ import annotations

from typing import Dict, List, Tuple

from wsz_kit.data import SpriteRect

CHAR_WIDTH = 5
CHAR_HEIGHT = 6

# (row, column) of each glyph in the 5x6 grid.
_FONT_LOOKUP: Dict[str, Tuple[int, int]] = {
    **{chr(ord("a") + index): (0, index) for index in range(26)},
    '"': (0, 26),
    "@": (0, 27),
    " ": (0, 30),
    **{str(digit): (1, digit) for digit in range(10)},
    "…": (1, 10),
    ".": (1, 11),
    ":": (1, 12),
    "(": (1, 13),
    ")": (1, 14),
    "-": (1, 15),
    "'": (1, 16),
    "!": (1, 17),
    "_": (1, 18),
    "+": (1, 19),
    "\\": (1, 20),
    "/": (1, 21),
    "[": (1, 22),
    "]": (1, 23),
    "^": (1, 24),
    "&": (1, 25),
    "%": (1, 26),
    ",": (1, 27),
    "=": (1, 28),
    "$": (1, 29),
    "#": (1, 30),
    "Å": (2, 0),
    "Ö": (2, 1),
    "Ä": (2, 2),
    "?": (2, 3),
    "*": (2, 4),
    # No dedicated glyphs; reuse the square brackets.
    "<": (1, 22),
    ">": (1, 23),
    "{": (1, 22),
    "}": (1, 23),
}


def character_sprite_name(char: str) -> str:
    """Return the sprite name of a glyph, e.g. ``CHARACTER_97`` for ``a``."""

    return f"CHARACTER_{ord(char)}"


def text_sprites() -> List[SpriteRect]:
    return [
        SpriteRect(
            name=character_sprite_name(char),
            sheet="TEXT.BMP",
            x=column * CHAR_WIDTH,
            y=row * CHAR_HEIGHT,
            width=CHAR_WIDTH,
            height=CHAR_HEIGHT,
        )
        for char, (row, column) in _FONT_LOOKUP.items()
    ]
