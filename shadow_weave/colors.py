from __future__ import annotations

from typing import NamedTuple

from shadow_weave.types import Mode

# Type aliases for colors
Color = tuple[int, int, int]
ColorRGBA = tuple[int, int, int, int]

# Basic colors
WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)


class ColorPair(NamedTuple):
    """Foreground/background pair for the two-tone model."""

    fg: Color
    bg: Color


LIGHT_PAIR = ColorPair(fg=BLACK, bg=WHITE)
DARK_PAIR = ColorPair(fg=WHITE, bg=BLACK)


def pair_for_mode(mode: Mode) -> ColorPair:
    """Return the color pair for a light/dark mode."""
    match mode:
        case Mode.LIGHT:
            return LIGHT_PAIR
        case Mode.DARK:
            return DARK_PAIR


def with_alpha(color: Color, alpha: int = 255) -> ColorRGBA:
    return (*color, alpha)
