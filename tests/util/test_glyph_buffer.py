from __future__ import annotations

import numpy as np
import pytest

from shadow_weave.util.glyph_buffer import GLYPH_DTYPE, GlyphBuffer


class TestGlyphBuffer:
    def test_init_shape_and_clear(self) -> None:
        """The buffer is (height, width) and starts blank."""
        buf = GlyphBuffer(6, 3)
        assert buf.data.shape == (3, 6)
        assert buf.data.dtype == GLYPH_DTYPE
        assert np.all(buf.data["ch"] == ord(" "))

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_size_raises(self, width: int, height: int) -> None:
        """Non-positive sizes are rejected."""
        with pytest.raises(ValueError):
            GlyphBuffer(width, height)

    def test_fill_glyphs_copies_characters_and_colors(self) -> None:
        """fill_glyphs encodes each one-character string as a code point."""
        glyphs = np.array([["╔", "═"], ["║", "⣿"]], dtype="<U1")
        buf = GlyphBuffer(2, 2)
        buf.fill_glyphs(glyphs, (0, 0, 0, 255), (255, 255, 255, 255))

        assert buf.data["ch"][0, 0] == ord("╔")
        assert buf.data["ch"][1, 1] == ord("⣿")
        assert np.all(buf.data["fg"] == (0, 0, 0, 255))
        assert np.all(buf.data["bg"] == (255, 255, 255, 255))

    def test_fill_glyphs_shape_mismatch_raises(self) -> None:
        buf = GlyphBuffer(3, 2)
        with pytest.raises(ValueError):
            buf.fill_glyphs(
                np.full((3, 2), " ", dtype="<U1"), (0, 0, 0, 255), (0, 0, 0, 255)
            )

    def test_to_text_round_trips_rows(self) -> None:
        """to_text joins rows with newlines, top row first."""
        glyphs = np.array([["a", "b", "c"], ["╵", " ", "╷"]], dtype="<U1")
        buf = GlyphBuffer(3, 2)
        buf.fill_glyphs(glyphs, (0, 0, 0, 255), (0, 0, 0, 255))
        assert buf.to_text() == "abc\n╵ ╷"
