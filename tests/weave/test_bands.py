from __future__ import annotations

import pytest

from shadow_weave import config
from shadow_weave.util.rng import RNGProvider
from shadow_weave.weave.layers.bands import (
    Band,
    band_at_row,
    build_row_band_index,
    make_bands,
)


def _bands(rows: int, seed: int) -> list[Band]:
    return make_bands(rows, RNGProvider(seed).get("weave.bands"))


class TestMakeBands:
    @pytest.mark.parametrize("rows", [18, 25, 30, 45, 80, 200])
    def test_bands_cover_rows_exactly(self, rows: int) -> None:
        """Bands are contiguous, ordered, and cover [0, rows) with no gaps."""
        for seed in range(25):
            bands = _bands(rows, seed)
            assert bands[0].row_start == 0
            assert bands[-1].row_end == rows
            for upper, lower in zip(bands, bands[1:], strict=False):
                assert upper.row_end == lower.row_start

    @pytest.mark.parametrize("rows", [18, 19, 25, 30, 45, 80])
    def test_every_band_keeps_minimum_height(self, rows: int) -> None:
        """No band is thinner than the minimum, even after jitter."""
        for seed in range(25):
            for band in _bands(rows, seed):
                assert band.height >= config.BAND_MIN_ROWS

    def test_band_count_range(self) -> None:
        """Tall grids get 3 to 5 bands."""
        counts = {len(_bands(120, seed)) for seed in range(60)}
        assert counts <= {3, 4, 5}
        assert len(counts) > 1

    def test_short_grid_gets_fewer_bands(self) -> None:
        """A grid too short for three full bands gets fewer."""
        for seed in range(20):
            bands = _bands(12, seed)
            assert len(bands) <= 2
            assert bands[-1].row_end == 12

    def test_tiny_grid_gets_single_band(self) -> None:
        bands = _bands(3, 1)
        assert len(bands) == 1
        assert (bands[0].row_start, bands[0].row_end) == (0, 3)

    def test_parameters_inside_ranges(self) -> None:
        """Band parameters are drawn from their configured ranges."""
        low_w, high_w = config.BAND_SECONDARY_WEIGHT_RANGE
        low_d, high_d = config.BAND_DRIFT_RANGE
        for seed in range(30):
            for band in _bands(60, seed):
                assert low_w <= band.secondary_weight <= high_w
                assert low_d <= band.drift <= high_d
                assert 0.05 <= band.glitch_bias <= 0.8

    def test_deterministic_for_seed(self) -> None:
        assert _bands(50, 9) == _bands(50, 9)


class TestBandLookup:
    def test_band_at_row(self) -> None:
        """Rows map to the band containing them."""
        bands = [
            Band(0, 6, 0.5, 0.0, 0.1),
            Band(6, 14, 0.5, 0.0, 0.1),
            Band(14, 20, 0.5, 0.0, 0.1),
        ]
        assert band_at_row(bands, 0) is bands[0]
        assert band_at_row(bands, 6) is bands[1]
        assert band_at_row(bands, 19) is bands[2]

    def test_band_at_row_falls_back_to_last(self) -> None:
        """A row outside every band resolves to the last band."""
        bands = [Band(0, 6, 0.5, 0.0, 0.1), Band(6, 12, 0.5, 0.0, 0.1)]
        assert band_at_row(bands, 50) is bands[-1]

    def test_row_band_index_matches_lookup(self) -> None:
        bands = _bands(40, 3)
        index = build_row_band_index(bands, 40)
        for row in range(40):
            assert bands[index[row]] is band_at_row(bands, row)
