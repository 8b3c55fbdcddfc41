"""Window compositing utilities."""

from wsz_kit.compositor.window import (
    DEFAULT_BACKGROUND,
    WindowCompositor,
    composite_windows,
    draw_sprite,
)

__all__ = ["DEFAULT_BACKGROUND", "WindowCompositor", "composite_windows", "draw_sprite"]
