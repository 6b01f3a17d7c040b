from __future__ import annotations

import numpy as np
import pytest

from shadow_weave.types import Style
from shadow_weave.weave.layers.edges import edge_mask
from shadow_weave.weave.layers.glyphs import (
    BLANK,
    DUST,
    FINE_TEXTURE_RAMP,
    MASK_GLYPHS,
    TEXTURE_RAMP,
    GlyphParams,
    glyph_from_mask,
    glyphize_simple,
    horizontal_run_glyphs,
    lookup_glyphs,
    texture_glyphs,
    vertical_run_glyphs,
)

STUBS = {"╵", "╶", "╷", "╴"}
BOX = set(MASK_GLYPHS.tolist()) - {BLANK}


class TestMaskTable:
    def test_known_masks(self) -> None:
        assert glyph_from_mask(0) == BLANK
        assert glyph_from_mask(5) == "║"
        assert glyph_from_mask(10) == "═"
        assert glyph_from_mask(6) == "╔"
        assert glyph_from_mask(15) == "╬"

    def test_table_covers_every_mask(self) -> None:
        """Each of the 16 masks has a distinct glyph."""
        assert len(MASK_GLYPHS) == 16
        assert len(set(MASK_GLYPHS.tolist())) == 16

    def test_out_of_range_masks_render_blank(self) -> None:
        glyphs = lookup_glyphs(np.array([[3, 16, 200]], dtype=np.uint8))
        assert glyphs.tolist() == [["╚", BLANK, BLANK]]


class TestSimpleStyle:
    def test_no_stubs_and_voids_only_dust(self, weave_context) -> None:
        """Simple output never shows stubs; void cells are blank or dust."""
        for seed in range(10):
            ctx = weave_context(style=Style.SIMPLE, seed=seed)
            glyphs = ctx.glyphs
            assert not STUBS & set(glyphs.ravel().tolist())
            assert set(glyphs[ctx.void_mask].tolist()) <= {BLANK, *DUST}

    def test_connected_cells_use_table_glyphs(self, weave_context) -> None:
        """Cells with two or more edges show their box-drawing glyph."""
        ctx = weave_context(style=Style.SIMPLE, seed=3)
        masks = edge_mask(ctx.cell_edges)
        multi = ~np.isin(masks, (0, 1, 2, 4, 8))
        np.testing.assert_array_equal(ctx.glyphs[multi], MASK_GLYPHS[masks[multi]])

    def test_dust_respects_chance(self) -> None:
        """With zero dust chance, empty cells stay blank."""
        masks = np.zeros((10, 10), dtype=np.uint8)
        masks[0, 0] = 1
        void = np.zeros((10, 10), dtype=bool)
        params = GlyphParams(False, 1.0, 0.0, 0.0, dust_chance=0.0)

        glyphs = glyphize_simple(masks, void, params, np.random.default_rng(0))

        assert np.all(glyphs == BLANK)


class TestDenseStyle:
    @pytest.mark.parametrize("seed", range(6))
    def test_void_cells_blank(self, weave_context, seed: int) -> None:
        ctx = weave_context(style=Style.DENSE, seed=seed)
        assert np.all(ctx.glyphs[ctx.void_mask] == BLANK)

    def test_glyphs_from_known_sets(self, weave_context) -> None:
        """Dense output only uses box, texture, column and thread glyphs."""
        allowed = (
            BOX
            | {BLANK}
            | set(TEXTURE_RAMP)
            | set(FINE_TEXTURE_RAMP)
            | {"░", "▒", "▓", "⣿", "┄", "╌"}
        )
        for seed in range(6):
            glyphs = weave_context(style=Style.DENSE, seed=seed).glyphs
            assert set(glyphs.ravel().tolist()) <= allowed

    def test_dense_fills_more_cells_than_simple(self, weave_context) -> None:
        dense = weave_context(cols=50, rows=35, style=Style.DENSE, seed=11).glyphs
        simple = weave_context(cols=50, rows=35, style=Style.SIMPLE, seed=11).glyphs
        assert (dense != BLANK).sum() > (simple != BLANK).sum()


class TestDenseHelpers:
    def test_texture_ramp_extremes(self) -> None:
        tone = np.array([[0.0, 1.0]])
        jitter = np.full((1, 2), 0.5)
        glyphs = texture_glyphs(tone, jitter, TEXTURE_RAMP)
        assert glyphs.tolist() == [[TEXTURE_RAMP[0], TEXTURE_RAMP[-1]]]

    def test_vertical_run_shading(self) -> None:
        tone = np.array([[0.1, 0.3, 0.5, 0.65, 0.9, 0.9]])
        fat = np.array([[True, True, True, True, False, True]])
        glyphs = vertical_run_glyphs(tone, fat)
        assert glyphs.tolist() == [["║", "░", "▒", "▓", "▓", "⣿"]]

    def test_horizontal_run_threads(self) -> None:
        glyphs = horizontal_run_glyphs(np.array([[0.2, 0.5, 0.9]]))
        assert glyphs.tolist() == [["┄", "╌", "═"]]
