"""Placement of sprites inside the three windows of the screenshot.

The windows are stacked vertically on one shared canvas: main window on top,
equalizer below it, playlist editor at the bottom.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from wsz_kit.data import WindowPlacement, WindowType

CANVAS_WIDTH = 275
CANVAS_HEIGHT = 435

WINDOW_OFFSETS: Dict[WindowType, Tuple[int, int]] = {
    WindowType.MAIN: (0, 0),
    WindowType.EQUALIZER: (0, 116),
    WindowType.PLAYLIST: (0, 232),
}

PLAYLIST_HEIGHT = CANVAS_HEIGHT - WINDOW_OFFSETS[WindowType.PLAYLIST][1]

_Row = Tuple[str, str, int, int, int, int, int]

# name, sprite, layer, x, y, width, height
_MAIN_ROWS: List[_Row] = [
    ("MAIN_WINDOW_BACKGROUND", "MAIN_WINDOW_BACKGROUND", 0, 0, 0, 275, 116),
    ("MAIN_TITLE_BAR", "MAIN_TITLE_BAR_SELECTED", 1, 0, 0, 275, 14),
    ("MAIN_OPTIONS_BUTTON", "MAIN_OPTIONS_BUTTON", 2, 6, 3, 9, 9),
    ("MAIN_MINIMIZE_BUTTON", "MAIN_MINIMIZE_BUTTON", 2, 244, 3, 9, 9),
    ("MAIN_SHADE_BUTTON", "MAIN_SHADE_BUTTON", 2, 254, 3, 9, 9),
    ("MAIN_CLOSE_BUTTON", "MAIN_CLOSE_BUTTON", 2, 264, 3, 9, 9),
    ("MAIN_CLUTTER_BAR", "MAIN_CLUTTER_BAR_BACKGROUND", 1, 10, 22, 8, 43),
    ("MAIN_STOPPED_INDICATOR", "MAIN_STOPPED_INDICATOR", 1, 26, 28, 9, 9),
    ("MAIN_MINUTE_TENS", "DIGIT_0", 1, 48, 26, 9, 13),
    ("MAIN_MINUTE_ONES", "DIGIT_0", 1, 60, 26, 9, 13),
    ("MAIN_SECOND_TENS", "DIGIT_0", 1, 78, 26, 9, 13),
    ("MAIN_SECOND_ONES", "DIGIT_0", 1, 90, 26, 9, 13),
    ("MAIN_MONO", "MAIN_MONO", 1, 212, 41, 27, 12),
    ("MAIN_STEREO", "MAIN_STEREO", 1, 239, 41, 29, 12),
    ("MAIN_VOLUME_BACKGROUND", "MAIN_VOLUME_BACKGROUND", 1, 107, 57, 68, 13),
    ("MAIN_VOLUME_THUMB", "MAIN_VOLUME_THUMB", 2, 147, 58, 14, 11),
    ("MAIN_BALANCE_BACKGROUND", "MAIN_BALANCE_BACKGROUND", 1, 177, 57, 38, 13),
    ("MAIN_BALANCE_THUMB", "MAIN_BALANCE_THUMB", 2, 189, 58, 14, 11),
    ("MAIN_EQ_BUTTON", "MAIN_EQ_BUTTON", 1, 219, 58, 23, 12),
    ("MAIN_PLAYLIST_BUTTON", "MAIN_PLAYLIST_BUTTON", 1, 242, 58, 23, 12),
    ("MAIN_POSITION_SLIDER_BACKGROUND", "MAIN_POSITION_SLIDER_BACKGROUND", 1, 17, 72, 248, 10),
    ("MAIN_POSITION_SLIDER_THUMB", "MAIN_POSITION_SLIDER_THUMB", 2, 17, 72, 29, 10),
    ("MAIN_PREVIOUS_BUTTON", "MAIN_PREVIOUS_BUTTON", 1, 16, 88, 23, 18),
    ("MAIN_PLAY_BUTTON", "MAIN_PLAY_BUTTON", 1, 39, 88, 23, 18),
    ("MAIN_PAUSE_BUTTON", "MAIN_PAUSE_BUTTON", 1, 62, 88, 23, 18),
    ("MAIN_STOP_BUTTON", "MAIN_STOP_BUTTON", 1, 85, 88, 23, 18),
    ("MAIN_NEXT_BUTTON", "MAIN_NEXT_BUTTON", 1, 108, 88, 22, 18),
    ("MAIN_EJECT_BUTTON", "MAIN_EJECT_BUTTON", 1, 136, 89, 22, 16),
    ("MAIN_SHUFFLE_BUTTON", "MAIN_SHUFFLE_BUTTON", 1, 164, 89, 46, 15),
    ("MAIN_REPEAT_BUTTON", "MAIN_REPEAT_BUTTON", 1, 210, 89, 28, 15),
]

_EQUALIZER_ROWS: List[_Row] = [
    ("EQ_WINDOW_BACKGROUND", "EQ_WINDOW_BACKGROUND", 0, 0, 0, 275, 116),
    ("EQ_TITLE_BAR", "EQ_TITLE_BAR_SELECTED", 1, 0, 0, 275, 14),
    ("EQ_CLOSE_BUTTON", "EQ_CLOSE_BUTTON", 2, 264, 3, 9, 9),
    ("EQ_ON_BUTTON", "EQ_ON_BUTTON", 1, 14, 18, 26, 12),
    ("EQ_AUTO_BUTTON", "EQ_AUTO_BUTTON", 1, 40, 18, 32, 12),
    ("EQ_GRAPH_BACKGROUND", "EQ_GRAPH_BACKGROUND", 1, 86, 17, 113, 19),
    ("EQ_PREAMP_LINE", "EQ_PREAMP_LINE", 2, 86, 26, 113, 1),
    ("EQ_PRESETS_BUTTON", "EQ_PRESETS_BUTTON", 1, 217, 18, 44, 12),
]

_TILE = 25
_SIDE_TILE = 29
_TOP_HEIGHT = 20
_BOTTOM_HEIGHT = 38


def _playlist_rows() -> List[_Row]:
    rows: List[_Row] = [
        ("PLAYLIST_TOP_LEFT_CORNER", "PLAYLIST_TOP_LEFT_SELECTED", 1, 0, 0, _TILE, _TOP_HEIGHT),
        (
            "PLAYLIST_TOP_RIGHT_CORNER",
            "PLAYLIST_TOP_RIGHT_CORNER_SELECTED",
            1,
            CANVAS_WIDTH - _TILE,
            0,
            _TILE,
            _TOP_HEIGHT,
        ),
        # Drawn above the top tiles so it occludes the ones behind it.
        ("PLAYLIST_TITLE_BAR", "PLAYLIST_TITLE_BAR_SELECTED", 2, 87, 0, 100, _TOP_HEIGHT),
    ]
    for index, x in enumerate(range(_TILE, CANVAS_WIDTH - _TILE, _TILE)):
        rows.append(
            (f"PLAYLIST_TOP_TILE_{index}", "PLAYLIST_TOP_TILE_SELECTED", 1, x, 0, _TILE, _TOP_HEIGHT)
        )

    bottom_y = PLAYLIST_HEIGHT - _BOTTOM_HEIGHT
    for index, y in enumerate(range(_TOP_HEIGHT, bottom_y, _SIDE_TILE)):
        height = min(_SIDE_TILE, bottom_y - y)
        rows.append((f"PLAYLIST_LEFT_TILE_{index}", "PLAYLIST_LEFT_TILE", 1, 0, y, 12, height))
        rows.append(
            (f"PLAYLIST_RIGHT_TILE_{index}", "PLAYLIST_RIGHT_TILE", 1, CANVAS_WIDTH - 20, y, 20, height)
        )

    rows.extend(
        [
            ("PLAYLIST_SCROLL_HANDLE", "PLAYLIST_SCROLL_HANDLE", 2, CANVAS_WIDTH - 15, _TOP_HEIGHT, 8, 18),
            ("PLAYLIST_BOTTOM_LEFT_CORNER", "PLAYLIST_BOTTOM_LEFT_CORNER", 1, 0, bottom_y, 125, _BOTTOM_HEIGHT),
            (
                "PLAYLIST_BOTTOM_RIGHT_CORNER",
                "PLAYLIST_BOTTOM_RIGHT_CORNER",
                1,
                125,
                bottom_y,
                150,
                _BOTTOM_HEIGHT,
            ),
        ]
    )
    return rows


def _build(window: WindowType, rows: List[_Row]) -> List[WindowPlacement]:
    return [
        WindowPlacement(
            name=name,
            sprite_name=sprite_name,
            window=window,
            layer=layer,
            x=x,
            y=y,
            width=width,
            height=height,
        )
        for name, sprite_name, layer, x, y, width, height in rows
    ]


def window_placements() -> List[WindowPlacement]:
    """Return the default placements used to render a skin screenshot."""

    return (
        _build(WindowType.MAIN, _MAIN_ROWS)
        + _build(WindowType.EQUALIZER, _EQUALIZER_ROWS)
        + _build(WindowType.PLAYLIST, _playlist_rows())
    )
