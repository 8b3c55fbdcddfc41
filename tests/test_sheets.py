from __future__ import annotations

import numpy as np
import pytest

from conftest import encode, make_raster
from wsz_kit.catalog import default_catalog
from wsz_kit.data import TRANSPARENCY_KEY, SpriteRect
from wsz_kit.errors import ArgumentError, ImageCodecError, SkinNotFoundError
from wsz_kit.sheets import (
    compose_sheet,
    extract_all_sprites,
    extract_sheet,
    extract_sheet_from_archive,
    extract_sprite,
)

ENTRIES = [
    SpriteRect("LEFT", "T.BMP", 0, 0, 4, 6),
    SpriteRect("RIGHT", "T.BMP", 4, 0, 6, 3),
    SpriteRect("BOTTOM", "T.BMP", 4, 3, 6, 3),
]


def test_extract_copies_pixels_verbatim():
    sheet = make_raster(10, 6)
    sprite = extract_sprite(sheet, SpriteRect("S", "T.BMP", 2, 1, 3, 4))
    assert sprite.shape == (4, 3, 4)
    np.testing.assert_array_equal(sprite, sheet[1:5, 2:5])


def test_extract_clips_partial_sprite():
    sheet = make_raster(10, 10)
    sprite = extract_sprite(sheet, SpriteRect("S", "T.BMP", 5, 5, 20, 20))
    assert sprite.shape == (5, 5, 4)
    np.testing.assert_array_equal(sprite, sheet[5:, 5:])


@pytest.mark.parametrize("x, y", [(20, 0), (0, 20), (10, 0)])
def test_extract_outside_sheet_is_empty(x, y):
    sprite = extract_sprite(make_raster(10, 10), SpriteRect("S", "T.BMP", x, y, 5, 5))
    assert sprite.shape == (0, 0, 4)


def test_extract_sheet_returns_every_entry():
    sprites = extract_sheet(make_raster(10, 6), ENTRIES)
    assert set(sprites) == {"LEFT", "RIGHT", "BOTTOM"}


def test_compose_reverses_extract():
    sheet = make_raster(10, 6, seed=3)
    rebuilt = compose_sheet(ENTRIES, extract_sheet(sheet, ENTRIES))
    np.testing.assert_array_equal(rebuilt, sheet)


def test_compose_fills_uncovered_pixels_with_key_color():
    sheet = make_raster(12, 6, seed=4)
    rebuilt = compose_sheet(ENTRIES, extract_sheet(sheet, ENTRIES))
    # Columns 10-11 are not covered by any rectangle and fall outside the extents.
    assert rebuilt.shape == (6, 10, 4)

    gapped = [SpriteRect("A", "T.BMP", 0, 0, 2, 2), SpriteRect("B", "T.BMP", 4, 4, 2, 2)]
    rebuilt = compose_sheet(gapped, extract_sheet(sheet, gapped))
    assert rebuilt.shape == (6, 6, 4)
    assert tuple(rebuilt[0, 3]) == TRANSPARENCY_KEY
    assert tuple(rebuilt[5, 0]) == TRANSPARENCY_KEY
    np.testing.assert_array_equal(rebuilt[4:6, 4:6], sheet[4:6, 4:6])


def test_compose_is_idempotent():
    sheet = make_raster(12, 8, seed=5)
    once = compose_sheet(ENTRIES, extract_sheet(sheet, ENTRIES))
    twice = compose_sheet(ENTRIES, extract_sheet(once, ENTRIES))
    np.testing.assert_array_equal(once, twice)


def test_compose_skips_absent_and_empty_sprites():
    sprites = {
        "LEFT": make_raster(4, 6),
        "RIGHT": np.zeros((0, 0, 4), dtype=np.uint8),
        "UNRELATED": make_raster(50, 50),
    }
    rebuilt = compose_sheet(ENTRIES, sprites)
    assert rebuilt.shape == (6, 4, 4)


def test_compose_uses_supplied_raster_size():
    sprites = {"RIGHT": make_raster(3, 2)}
    rebuilt = compose_sheet(ENTRIES, sprites, key_color=(1, 2, 3, 255))
    assert rebuilt.shape == (2, 7, 4)
    assert tuple(rebuilt[0, 0]) == (1, 2, 3, 255)


def test_compose_nothing_yields_empty_sheet():
    assert compose_sheet(ENTRIES, {}).shape == (0, 0, 4)


def test_extract_from_archive_matches_nested_case_insensitive(skin_archive, main_sheet):
    sprites = extract_sheet_from_archive(skin_archive, "MAIN.BMP", default_catalog())
    np.testing.assert_array_equal(sprites["MAIN_WINDOW_BACKGROUND"], main_sheet)


def test_extract_from_archive_errors():
    catalog = default_catalog()
    with pytest.raises(SkinNotFoundError):
        extract_sheet_from_archive({}, "MAIN.BMP", catalog)
    with pytest.raises(ArgumentError):
        extract_sheet_from_archive({}, "NOT_A_SHEET.BMP", catalog)
    with pytest.raises(ImageCodecError):
        extract_sheet_from_archive({"MAIN.BMP": b"not an image"}, "MAIN.BMP", catalog)


def test_extract_all_sprites_skips_missing_sheets(skin_archive):
    sprites = extract_all_sprites(skin_archive, default_catalog())
    assert "MAIN_WINDOW_BACKGROUND" in sprites
    assert sprites["MAIN_STEREO"].shape == (12, 29, 4)
    assert "DIGIT_0" not in sprites


def test_truncated_sheet_yields_partial_and_empty_sprites():
    archive = {"POSBAR.BMP": encode(make_raster(260, 10))}
    sprites = extract_all_sprites(archive, default_catalog())
    assert sprites["MAIN_POSITION_SLIDER_BACKGROUND"].shape == (10, 248, 4)
    assert sprites["MAIN_POSITION_SLIDER_THUMB"].shape == (10, 12, 4)
    assert sprites["MAIN_POSITION_SLIDER_THUMB_SELECTED"].shape == (0, 0, 4)
