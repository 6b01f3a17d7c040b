"""Band partitioning layer.

Splits the row range into a handful of contiguous horizontal bands. Each
band carries its own secondary weight, drift and glitch bias, so texture and
structure shift gradually from top to bottom instead of being uniform.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from shadow_weave import config
from shadow_weave.util.rng import RNGStream
from shadow_weave.weave.context import WeaveContext
from shadow_weave.weave.layer import WeaveLayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Band:
    """A horizontal slice of the grid.

    Attributes:
        row_start: First row of the band.
        row_end: One past the last row of the band.
        secondary_weight: Pulls the blend field up or down for these rows.
        drift: Tilts the gate fields between vertical and horizontal.
        glitch_bias: Raises glitch activity; high values make a "hot" band.
    """

    row_start: int
    row_end: int
    secondary_weight: float
    drift: float
    glitch_bias: float

    @property
    def height(self) -> int:
        return self.row_end - self.row_start

    def contains(self, row: int) -> bool:
        return self.row_start <= row < self.row_end


def make_bands(rows: int, rng: RNGStream) -> list[Band]:
    """Partition ``[0, rows)`` into bands with randomized parameters.

    The cuts start from even spacing, get jittered by up to
    ``BAND_CUT_JITTER * rows``, and are then pushed apart so every band keeps
    at least ``BAND_MIN_ROWS`` rows. Short grids get fewer bands.
    """
    min_rows = config.BAND_MIN_ROWS
    count = rng.randrange(*config.BAND_COUNT_RANGE)
    count = max(1, min(count, rows // min_rows))

    jitter = rows * config.BAND_CUT_JITTER
    cuts = [0]
    for i in range(1, count):
        cuts.append(math.floor(rows * i / count + rng.uniform(-jitter, jitter)))
    cuts.append(rows)

    cuts = sorted(max(0, min(rows, cut)) for cut in cuts)
    cuts[0] = 0
    cuts[-1] = rows

    if count * min_rows <= rows:
        for i in range(1, count):
            cuts[i] = max(cuts[i], cuts[i - 1] + min_rows)
        for i in range(count - 1, 0, -1):
            cuts[i] = min(cuts[i], cuts[i + 1] - min_rows)

    bands = []
    for row_start, row_end in zip(cuts, cuts[1:], strict=False):
        secondary_weight = rng.uniform_range(config.BAND_SECONDARY_WEIGHT_RANGE)
        drift = rng.uniform_range(config.BAND_DRIFT_RANGE)
        if rng.random() < config.BAND_HIGH_GLITCH_CHANCE:
            glitch_bias = rng.uniform_range(config.BAND_HIGH_GLITCH_RANGE)
        else:
            glitch_bias = rng.uniform_range(config.BAND_LOW_GLITCH_RANGE)
        bands.append(
            Band(
                row_start=row_start,
                row_end=row_end,
                secondary_weight=secondary_weight,
                drift=drift,
                glitch_bias=glitch_bias,
            )
        )
    return bands


def band_at_row(bands: list[Band], row: int) -> Band:
    """Return the band containing ``row``, or the last band if none does."""
    for band in bands:
        if band.contains(row):
            return band
    return bands[-1]


def build_row_band_index(bands: list[Band], rows: int) -> np.ndarray:
    """Map every row to the index of its band."""
    index = np.full(rows, len(bands) - 1, dtype=np.int16)
    for i, band in enumerate(bands):
        index[band.row_start : band.row_end] = i
    return index


class BandLayer(WeaveLayer):
    """Partitions the rows into bands and records the row lookup."""

    def apply(self, ctx: WeaveContext) -> None:
        ctx.bands = make_bands(ctx.rows, ctx.rng.get("weave.bands"))
        ctx.row_band_index = build_row_band_index(ctx.bands, ctx.rows)
        logger.debug(
            f"{len(ctx.bands)} bands: "
            + ", ".join(f"[{b.row_start}, {b.row_end})" for b in ctx.bands)
        )
