"""Tests for the scalar field layer."""

from __future__ import annotations

import numpy as np
import pytest

from shadow_weave.types import Style
from shadow_weave.weave import ScalarFieldLayer, WeaveContext
from shadow_weave.weave.layers.fields import border_distance

FIELD_NAMES = ("blend", "glitch", "v_gate", "h_gate", "rung")


class TestScalarFieldLayer:
    @pytest.mark.parametrize("style", [Style.SIMPLE, Style.DENSE])
    def test_fields_shape_and_range(self, weave_context, style: Style) -> None:
        """Every field is (rows, cols) float32 inside [0, 1]."""
        ctx = weave_context(cols=37, rows=23, style=style, upto="fields")
        for name in FIELD_NAMES:
            field = getattr(ctx, name)
            assert field.shape == (23, 37), name
            assert field.dtype == np.float32, name
            assert field.min() >= 0.0, name
            assert field.max() <= 1.0, name

    def test_glitch_vanishes_on_border(self, weave_context) -> None:
        """Glitch is suppressed to zero on the outermost ring of cells."""
        for seed in range(10):
            glitch = weave_context(cols=40, rows=30, seed=seed, upto="fields").glitch
            assert np.all(glitch[0, :] == 0.0)
            assert np.all(glitch[-1, :] == 0.0)
            assert np.all(glitch[:, 0] == 0.0)
            assert np.all(glitch[:, -1] == 0.0)

    def test_fields_vary_across_grid(self, weave_context) -> None:
        """Gate fields are not flat."""
        ctx = weave_context(cols=60, rows=40, upto="fields")
        assert ctx.v_gate.std() > 0.0
        assert ctx.h_gate.std() > 0.0

    def test_fields_deterministic(self, weave_context) -> None:
        a = weave_context(seed=77, upto="fields")
        b = weave_context(seed=77, upto="fields")
        for name in FIELD_NAMES:
            np.testing.assert_array_equal(getattr(a, name), getattr(b, name))

    def test_requires_bands(self) -> None:
        """Running without BandLayer is a programming error."""
        ctx = WeaveContext.create_empty(20, 20, seed=1)
        with pytest.raises(RuntimeError):
            ScalarFieldLayer().apply(ctx)


def test_border_distance() -> None:
    dist = border_distance(5, 7)
    assert dist.shape == (5, 7)
    assert dist[0, 3] == 0
    assert dist[2, 0] == 0
    assert dist[2, 3] == 2
    assert dist[1, 1] == 1
