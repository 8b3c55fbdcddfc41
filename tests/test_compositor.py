from __future__ import annotations

import numpy as np
import pytest

from conftest import make_raster
from wsz_kit.catalog import CANVAS_HEIGHT, CANVAS_WIDTH
from wsz_kit.compositor import WindowCompositor, composite_windows
from wsz_kit.data import WindowPlacement, WindowType, solid_raster
from wsz_kit.errors import ArgumentError, OutOfBoundsError

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _placement(name, sprite, layer, x=0, y=0, width=10, height=10, window=WindowType.MAIN):
    return WindowPlacement(name, sprite, window, layer, x, y, width, height)


def test_canvas_has_fixed_size_and_background():
    canvas = composite_windows([], {}, background=(1, 2, 3))
    assert canvas.shape == (CANVAS_HEIGHT, CANVAS_WIDTH, 4)
    assert tuple(canvas[200, 100]) == (1, 2, 3, 255)


def test_higher_layer_occludes_lower_layer():
    sprites = {"BIG": solid_raster(10, 10, RED), "SMALL": solid_raster(4, 4, BLUE)}
    # Listed top layer first to show that list order does not decide z-order.
    placements = [
        _placement("top", "SMALL", 1, x=3, y=3, width=4, height=4),
        _placement("bottom", "BIG", 0),
    ]
    canvas = composite_windows(placements, sprites)
    assert tuple(canvas[4, 4]) == BLUE
    assert tuple(canvas[0, 0]) == RED
    assert tuple(canvas[9, 9]) == RED
    assert tuple(canvas[11, 11]) == (0, 0, 0, 255)


def test_window_offsets_are_applied():
    sprites = {"S": solid_raster(2, 2, RED)}
    canvas = composite_windows(
        [_placement("eq", "S", 0, x=5, y=1, width=2, height=2, window=WindowType.EQUALIZER)],
        sprites,
    )
    assert tuple(canvas[117, 5]) == RED
    assert tuple(canvas[1, 5]) == (0, 0, 0, 255)


def test_sprite_is_cropped_to_placement():
    sprites = {"TALL": make_raster(5, 40)}
    canvas = composite_windows([_placement("p", "TALL", 0, width=5, height=3)], sprites)
    np.testing.assert_array_equal(canvas[0:3, 0:5], sprites["TALL"][0:3])
    assert tuple(canvas[3, 0]) == (0, 0, 0, 255)


def test_missing_sprite_is_skipped():
    canvas = composite_windows([_placement("p", "GONE", 0)], {})
    assert tuple(canvas[0, 0]) == (0, 0, 0, 255)


def test_out_of_bounds_placement_fails():
    placement = _placement("p", "S", 0, x=270, y=0, width=10, height=10)
    with pytest.raises(OutOfBoundsError):
        composite_windows([placement], {"S": solid_raster(10, 10, RED)})

    playlist = _placement("pl", "S", 0, y=200, width=10, height=10, window=WindowType.PLAYLIST)
    with pytest.raises(ArgumentError):
        composite_windows([playlist], {"S": solid_raster(10, 10, RED)})


def test_compositor_edits_do_not_touch_catalog():
    compositor = WindowCompositor([_placement("p", "A", 0, width=2, height=2)])
    sprites = {"A": solid_raster(2, 2, RED), "B": solid_raster(2, 2, BLUE)}

    compositor.set_position("p", 20, 30)
    compositor.set_sprite_name("p", "B")
    canvas = compositor.composite(sprites)
    assert tuple(canvas[30, 20]) == BLUE
    assert tuple(canvas[0, 0]) == (0, 0, 0, 255)

    compositor.remove_placement("p")
    compositor.set_background_color((9, 9, 9))
    assert tuple(compositor.composite(sprites)[30, 20]) == (9, 9, 9, 255)

    with pytest.raises(ArgumentError):
        compositor.set_position("p", 0, 0)


def test_default_compositor_uses_screenshot_placements():
    compositor = WindowCompositor()
    assert "MAIN_WINDOW_BACKGROUND" in compositor.placements
    background = solid_raster(275, 116, RED)
    canvas = compositor.composite({"MAIN_WINDOW_BACKGROUND": background, "EQ_WINDOW_BACKGROUND": background})
    assert tuple(canvas[50, 50]) == RED
    assert tuple(canvas[116 + 50, 50]) == RED
    assert tuple(canvas[300, 100]) == (0, 0, 0, 255)


def test_draw_placement_by_name():
    compositor = WindowCompositor([_placement("p", "A", 0, x=1, y=1, width=2, height=2)])
    canvas = solid_raster(CANVAS_WIDTH, CANVAS_HEIGHT, (0, 0, 0, 255))
    compositor.draw_placement(canvas, solid_raster(2, 2, RED), "p")
    assert tuple(canvas[1, 1]) == RED
    with pytest.raises(ArgumentError):
        compositor.draw_placement(canvas, solid_raster(2, 2, RED), "missing")


def test_negative_layers_are_drawn_first():
    sprites = {"BIG": solid_raster(10, 10, RED), "SMALL": solid_raster(4, 4, BLUE)}
    placements = [
        _placement("top", "SMALL", 0, width=4, height=4),
        _placement("under", "BIG", -1),
        _placement("sparse", "SMALL", 1000, x=6, y=6, width=4, height=4),
    ]
    canvas = composite_windows(placements, sprites)
    assert tuple(canvas[0, 0]) == BLUE
    assert tuple(canvas[5, 5]) == RED
    assert tuple(canvas[9, 9]) == BLUE
