from __future__ import annotations

import numpy as np

from shadow_weave import config
from shadow_weave.types import Style
from shadow_weave.util.rng import RNGProvider
from shadow_weave.weave.layers.voids import make_islands, void_fraction


class TestMakeIslands:
    def test_simple_island_count_range(self) -> None:
        """Simple style draws 2 to 5 islands."""
        for seed in range(40):
            islands = make_islands(
                60, 40, Style.SIMPLE, RNGProvider(seed).get("weave.voids")
            )
            assert 2 <= len(islands) <= 5

    def test_dense_can_have_no_islands(self) -> None:
        """Dense style sometimes has no negative space at all."""
        counts = []
        for seed in range(60):
            rng = RNGProvider(seed).get("weave.voids")
            counts.append(len(make_islands(60, 40, Style.DENSE, rng)))
        assert min(counts) == 0
        assert max(counts) <= 2

    def test_islands_centered_away_from_edges(self) -> None:
        low, high = config.VOID_CENTER_RANGE
        for seed in range(20):
            rng = RNGProvider(seed).get("weave.voids")
            for island in make_islands(80, 50, Style.SIMPLE, rng):
                assert low * 80 <= island.x <= high * 80
                assert low * 50 <= island.y <= high * 50
                assert island.radius > 0


class TestVoidMaskLayer:
    def test_mask_shape(self, weave_context) -> None:
        ctx = weave_context(cols=33, rows=21, upto="voids")
        assert ctx.void_mask.shape == (21, 33)
        assert ctx.void_mask.dtype == np.bool_

    def test_dense_without_islands_has_empty_mask(self, weave_context) -> None:
        """A dense run that drew zero islands has no void cells."""
        found = False
        for seed in range(60):
            rng = RNGProvider(seed).get("weave.voids")
            if make_islands(40, 30, Style.DENSE, rng):
                continue
            ctx = weave_context(
                cols=40, rows=30, style=Style.DENSE, seed=seed, upto="voids"
            )
            assert not ctx.void_mask.any()
            found = True
            break
        assert found

    def test_simple_has_more_void_than_dense(self, weave_context) -> None:
        """Averaged over seeds, simple style is emptier than dense."""

        def mean_fraction(style: Style) -> float:
            fractions = [
                void_fraction(
                    weave_context(
                        cols=60, rows=40, style=style, seed=seed, upto="voids"
                    ).void_mask
                )
                for seed in range(20)
            ]
            return float(np.mean(fractions))

        simple = mean_fraction(Style.SIMPLE)
        dense = mean_fraction(Style.DENSE)
        assert simple > dense
        assert simple > 0.0


def test_void_fraction() -> None:
    mask = np.zeros((4, 5), dtype=bool)
    assert void_fraction(mask) == 0.0
    mask[0, :] = True
    assert void_fraction(mask) == 0.25
    assert void_fraction(np.zeros((0, 0), dtype=bool)) == 0.0
