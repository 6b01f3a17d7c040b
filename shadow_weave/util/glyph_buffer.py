from __future__ import annotations

import numpy as np

from shadow_weave import colors

# This is the public, backend-agnostic data type for a single cell.
GLYPH_DTYPE = np.dtype(
    [
        ("ch", np.int32),  # Character code
        ("fg", "4B"),  # Foreground RGBA (4 unsigned bytes)
        ("bg", "4B"),  # Background RGBA (4 unsigned bytes)
    ]
)


class GlyphBuffer:
    """
    A backend-agnostic 2D grid of glyphs, foreground, and background colors.

    The scene fills one of these from its glyph grid and color pair. It holds
    what character and colors go where without any knowledge of how it will
    be drawn; the tcod and terminal front ends both read from it.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be positive.")
        self.width = width
        self.height = height
        self.data: np.ndarray = np.zeros((height, width), dtype=GLYPH_DTYPE)
        self.clear()

    def clear(
        self,
        ch: int = ord(" "),
        fg: colors.ColorRGBA = (0, 0, 0, 0),
        bg: colors.ColorRGBA = (0, 0, 0, 0),
    ) -> None:
        """Fills the entire buffer with a single glyph."""
        self.data["ch"] = ch
        self.data["fg"] = fg
        self.data["bg"] = bg

    def fill_glyphs(
        self,
        glyphs: np.ndarray,
        fg: colors.ColorRGBA,
        bg: colors.ColorRGBA,
    ) -> None:
        """Copies a (height, width) array of one-character strings in one go."""
        if glyphs.shape != (self.height, self.width):
            raise ValueError(
                f"Glyph grid shape {glyphs.shape} does not match buffer "
                f"({self.height}, {self.width})"
            )
        text = "".join(glyphs.ravel().tolist())
        codes = np.frombuffer(text.encode("utf-32-le"), dtype=np.int32)
        self.data["ch"] = codes.reshape(self.height, self.width)
        self.data["fg"] = fg
        self.data["bg"] = bg

    def to_text(self) -> str:
        """Returns the characters as newline-separated rows."""
        return "\n".join(
            "".join(chr(code) for code in row) for row in self.data["ch"].tolist()
        )
