"""Sprite rectangles for every sheet of a classic skin."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from wsz_kit.catalog.text import text_sprites
from wsz_kit.data import SpriteRect

SHEET_NAMES: Tuple[str, ...] = (
    "BALANCE.BMP",
    "CBUTTONS.BMP",
    "MAIN.BMP",
    "MONOSTER.BMP",
    "NUMBERS.BMP",
    "NUMS_EX.BMP",
    "PLAYPAUS.BMP",
    "PLEDIT.BMP",
    "EQ_EX.BMP",
    "EQMAIN.BMP",
    "POSBAR.BMP",
    "SHUFREP.BMP",
    "TEXT.BMP",
    "TITLEBAR.BMP",
    "VOLUME.BMP",
    "GEN.BMP",
)

_Row = Tuple[str, int, int, int, int]

# name, x, y, width, height
_SHEET_ROWS: Dict[str, List[_Row]] = {
    "BALANCE.BMP": [
        ("MAIN_BALANCE_BACKGROUND", 9, 0, 38, 420),
        ("MAIN_BALANCE_THUMB", 15, 422, 14, 11),
        ("MAIN_BALANCE_THUMB_ACTIVE", 0, 422, 14, 11),
    ],
    "CBUTTONS.BMP": [
        ("MAIN_PREVIOUS_BUTTON", 0, 0, 23, 18),
        ("MAIN_PREVIOUS_BUTTON_ACTIVE", 0, 18, 23, 18),
        ("MAIN_PLAY_BUTTON", 23, 0, 23, 18),
        ("MAIN_PLAY_BUTTON_ACTIVE", 23, 18, 23, 18),
        ("MAIN_PAUSE_BUTTON", 46, 0, 23, 18),
        ("MAIN_PAUSE_BUTTON_ACTIVE", 46, 18, 23, 18),
        ("MAIN_STOP_BUTTON", 69, 0, 23, 18),
        ("MAIN_STOP_BUTTON_ACTIVE", 69, 18, 23, 18),
        ("MAIN_NEXT_BUTTON", 92, 0, 22, 18),
        ("MAIN_NEXT_BUTTON_ACTIVE", 92, 18, 22, 18),
        ("MAIN_EJECT_BUTTON", 114, 0, 22, 16),
        ("MAIN_EJECT_BUTTON_ACTIVE", 114, 16, 22, 16),
    ],
    "MAIN.BMP": [
        ("MAIN_WINDOW_BACKGROUND", 0, 0, 275, 116),
    ],
    "MONOSTER.BMP": [
        ("MAIN_STEREO", 0, 12, 29, 12),
        ("MAIN_STEREO_ACTIVE", 0, 0, 29, 12),
        ("MAIN_MONO", 29, 12, 27, 12),
        ("MAIN_MONO_ACTIVE", 29, 0, 27, 12),
    ],
    "NUMBERS.BMP": [
        *[(f"DIGIT_{digit}", digit * 9, 0, 9, 13) for digit in range(10)],
        ("NO_MINUS_SIGN", 9, 6, 5, 1),
        ("MINUS_SIGN", 20, 6, 5, 1),
    ],
    "NUMS_EX.BMP": [
        *[(f"DIGIT_{digit}_EX", digit * 9, 0, 9, 13) for digit in range(10)],
        ("NO_MINUS_SIGN_EX", 90, 0, 9, 13),
        ("MINUS_SIGN_EX", 99, 0, 9, 13),
    ],
    "PLAYPAUS.BMP": [
        ("MAIN_PLAYING_INDICATOR", 0, 0, 9, 9),
        ("MAIN_PAUSED_INDICATOR", 9, 0, 9, 9),
        ("MAIN_STOPPED_INDICATOR", 18, 0, 9, 9),
        ("MAIN_NOT_WORKING_INDICATOR", 36, 0, 3, 9),
        ("MAIN_WORKING_INDICATOR", 39, 0, 3, 9),
    ],
    "PLEDIT.BMP": [
        ("PLAYLIST_TOP_TILE", 127, 21, 25, 20),
        ("PLAYLIST_TOP_LEFT_CORNER", 0, 21, 25, 20),
        ("PLAYLIST_TITLE_BAR", 26, 21, 100, 20),
        ("PLAYLIST_TOP_RIGHT_CORNER", 153, 21, 25, 20),
        ("PLAYLIST_TOP_TILE_SELECTED", 127, 0, 25, 20),
        ("PLAYLIST_TOP_LEFT_SELECTED", 0, 0, 25, 20),
        ("PLAYLIST_TITLE_BAR_SELECTED", 26, 0, 100, 20),
        ("PLAYLIST_TOP_RIGHT_CORNER_SELECTED", 153, 0, 25, 20),
        ("PLAYLIST_LEFT_TILE", 0, 42, 12, 29),
        ("PLAYLIST_RIGHT_TILE", 31, 42, 20, 29),
        ("PLAYLIST_BOTTOM_TILE", 179, 0, 25, 38),
        ("PLAYLIST_BOTTOM_LEFT_CORNER", 0, 72, 125, 38),
        ("PLAYLIST_BOTTOM_RIGHT_CORNER", 126, 72, 150, 38),
        ("PLAYLIST_VISUALIZER_BACKGROUND", 205, 0, 75, 38),
        ("PLAYLIST_SCROLL_HANDLE", 52, 53, 8, 18),
        ("PLAYLIST_SCROLL_HANDLE_SELECTED", 61, 53, 8, 18),
        ("PLAYLIST_CLOSE_SELECTED", 52, 42, 9, 9),
        ("PLAYLIST_COLLAPSE_SELECTED", 62, 42, 9, 9),
    ],
    "EQ_EX.BMP": [
        ("EQ_SHADE_BACKGROUND_SELECTED", 0, 0, 275, 14),
        ("EQ_SHADE_BACKGROUND", 0, 15, 275, 14),
        ("EQ_SHADE_VOLUME_SLIDER_LEFT", 1, 30, 3, 7),
        ("EQ_SHADE_VOLUME_SLIDER_CENTER", 4, 30, 3, 7),
        ("EQ_SHADE_VOLUME_SLIDER_RIGHT", 7, 30, 3, 7),
        ("EQ_SHADE_BALANCE_SLIDER_LEFT", 11, 30, 3, 7),
        ("EQ_SHADE_BALANCE_SLIDER_CENTER", 14, 30, 3, 7),
        ("EQ_SHADE_BALANCE_SLIDER_RIGHT", 17, 30, 3, 7),
        ("EQ_MAXIMIZE_BUTTON_ACTIVE", 1, 38, 9, 9),
        ("EQ_MINIMIZE_BUTTON_ACTIVE", 1, 47, 9, 9),
        ("EQ_SHADE_CLOSE_BUTTON", 11, 38, 9, 9),
        ("EQ_SHADE_CLOSE_BUTTON_ACTIVE", 11, 47, 9, 9),
    ],
    "EQMAIN.BMP": [
        ("EQ_WINDOW_BACKGROUND", 0, 0, 275, 116),
        ("EQ_TITLE_BAR", 0, 149, 275, 14),
        ("EQ_TITLE_BAR_SELECTED", 0, 134, 275, 14),
        ("EQ_SLIDER_BACKGROUND", 13, 164, 209, 129),
        ("EQ_SLIDER_THUMB", 0, 164, 11, 11),
        ("EQ_SLIDER_THUMB_SELECTED", 0, 176, 11, 11),
        ("EQ_ON_BUTTON", 10, 119, 26, 12),
        ("EQ_ON_BUTTON_DEPRESSED", 128, 119, 26, 12),
        ("EQ_ON_BUTTON_SELECTED", 69, 119, 26, 12),
        ("EQ_AUTO_BUTTON", 36, 119, 32, 12),
        ("EQ_AUTO_BUTTON_SELECTED", 95, 119, 32, 12),
        ("EQ_GRAPH_BACKGROUND", 0, 294, 113, 19),
        ("EQ_GRAPH_LINE_COLORS", 115, 294, 1, 19),
        ("EQ_PRESETS_BUTTON", 224, 164, 44, 12),
        ("EQ_PRESETS_BUTTON_SELECTED", 224, 176, 44, 12),
        ("EQ_PREAMP_LINE", 0, 314, 113, 1),
        ("EQ_CLOSE_BUTTON", 0, 116, 9, 9),
        ("EQ_CLOSE_BUTTON_ACTIVE", 0, 125, 9, 9),
    ],
    "POSBAR.BMP": [
        ("MAIN_POSITION_SLIDER_BACKGROUND", 0, 0, 248, 10),
        ("MAIN_POSITION_SLIDER_THUMB", 248, 0, 29, 10),
        ("MAIN_POSITION_SLIDER_THUMB_SELECTED", 278, 0, 29, 10),
    ],
    "SHUFREP.BMP": [
        ("MAIN_REPEAT_BUTTON", 0, 0, 28, 15),
        ("MAIN_REPEAT_BUTTON_DEPRESSED", 0, 15, 28, 15),
        ("MAIN_REPEAT_BUTTON_SELECTED", 0, 30, 28, 15),
        ("MAIN_REPEAT_BUTTON_SELECTED_DEPRESSED", 0, 45, 28, 15),
        ("MAIN_SHUFFLE_BUTTON", 28, 0, 47, 15),
        ("MAIN_SHUFFLE_BUTTON_DEPRESSED", 28, 15, 47, 15),
        ("MAIN_SHUFFLE_BUTTON_SELECTED", 28, 30, 47, 15),
        ("MAIN_SHUFFLE_BUTTON_SELECTED_DEPRESSED", 28, 45, 47, 15),
        ("MAIN_EQ_BUTTON", 0, 61, 23, 12),
        ("MAIN_EQ_BUTTON_SELECTED", 0, 73, 23, 12),
        ("MAIN_EQ_BUTTON_DEPRESSED", 46, 61, 23, 12),
        ("MAIN_EQ_BUTTON_DEPRESSED_SELECTED", 46, 73, 23, 12),
        ("MAIN_PLAYLIST_BUTTON", 23, 61, 23, 12),
        ("MAIN_PLAYLIST_BUTTON_SELECTED", 23, 73, 23, 12),
        ("MAIN_PLAYLIST_BUTTON_DEPRESSED", 69, 61, 23, 12),
        ("MAIN_PLAYLIST_BUTTON_DEPRESSED_SELECTED", 69, 73, 23, 12),
    ],
    "TITLEBAR.BMP": [
        ("MAIN_TITLE_BAR", 27, 15, 275, 14),
        ("MAIN_TITLE_BAR_SELECTED", 27, 0, 275, 14),
        ("MAIN_EASTER_EGG_TITLE_BAR", 27, 72, 275, 14),
        ("MAIN_EASTER_EGG_TITLE_BAR_SELECTED", 27, 57, 275, 14),
        ("MAIN_OPTIONS_BUTTON", 0, 0, 9, 9),
        ("MAIN_OPTIONS_BUTTON_DEPRESSED", 0, 9, 9, 9),
        ("MAIN_MINIMIZE_BUTTON", 9, 0, 9, 9),
        ("MAIN_MINIMIZE_BUTTON_DEPRESSED", 9, 9, 9, 9),
        ("MAIN_SHADE_BUTTON", 0, 18, 9, 9),
        ("MAIN_SHADE_BUTTON_DEPRESSED", 9, 18, 9, 9),
        ("MAIN_CLOSE_BUTTON", 18, 0, 9, 9),
        ("MAIN_CLOSE_BUTTON_DEPRESSED", 18, 9, 9, 9),
        ("MAIN_CLUTTER_BAR_BACKGROUND", 304, 0, 8, 43),
        ("MAIN_CLUTTER_BAR_BACKGROUND_DISABLED", 312, 0, 8, 43),
        ("MAIN_SHADE_BACKGROUND", 27, 42, 275, 14),
        ("MAIN_SHADE_BACKGROUND_SELECTED", 27, 29, 275, 13),
    ],
    "VOLUME.BMP": [
        ("MAIN_VOLUME_BACKGROUND", 0, 0, 68, 420),
        ("MAIN_VOLUME_THUMB", 15, 422, 14, 11),
        ("MAIN_VOLUME_THUMB_SELECTED", 0, 422, 14, 11),
    ],
    "GEN.BMP": [
        ("GEN_TOP_LEFT_SELECTED", 0, 0, 25, 20),
        ("GEN_TOP_LEFT_END_SELECTED", 26, 0, 25, 20),
        ("GEN_TOP_CENTER_FILL_SELECTED", 52, 0, 25, 20),
        ("GEN_TOP_RIGHT_END_SELECTED", 78, 0, 25, 20),
        ("GEN_TOP_LEFT_RIGHT_FILL_SELECTED", 104, 0, 25, 20),
        ("GEN_TOP_RIGHT_SELECTED", 130, 0, 25, 20),
        ("GEN_TOP_LEFT", 0, 21, 25, 20),
        ("GEN_TOP_LEFT_END", 26, 21, 25, 20),
        ("GEN_TOP_CENTER_FILL", 52, 21, 25, 20),
        ("GEN_TOP_RIGHT_END", 78, 21, 25, 20),
        ("GEN_TOP_LEFT_RIGHT_FILL", 104, 21, 25, 20),
        ("GEN_TOP_RIGHT", 130, 21, 25, 20),
        ("GEN_BOTTOM_LEFT", 0, 42, 125, 14),
        ("GEN_BOTTOM_RIGHT", 0, 57, 125, 14),
        ("GEN_BOTTOM_FILL", 127, 72, 25, 14),
        ("GEN_MIDDLE_LEFT", 127, 42, 11, 29),
        ("GEN_MIDDLE_LEFT_BOTTOM", 158, 42, 11, 24),
        ("GEN_MIDDLE_RIGHT", 139, 42, 8, 29),
        ("GEN_MIDDLE_RIGHT_BOTTOM", 170, 42, 8, 24),
        ("GEN_CLOSE_SELECTED", 148, 42, 9, 9),
    ],
}


def _build(sheet: str, rows: Iterable[_Row]) -> List[SpriteRect]:
    return [
        SpriteRect(name=name, sheet=sheet, x=x, y=y, width=width, height=height)
        for name, x, y, width, height in rows
    ]


def sheet_sprites() -> Dict[str, List[SpriteRect]]:
    """Return the sprite rectangles of every known sheet, keyed by sheet name."""

    tables = {sheet: _build(sheet, rows) for sheet, rows in _SHEET_ROWS.items()}
    tables["TEXT.BMP"] = text_sprites()
    return {sheet: tables[sheet] for sheet in SHEET_NAMES}
