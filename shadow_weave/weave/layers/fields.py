"""Scalar field layer.

Builds the five smooth fields that drive the rest of the pipeline:

- blend: broad light/heavy weighting, biased by band weight and column
- glitch: patches of disturbance, suppressed near the grid border
- v_gate / h_gate: likelihood of vertical / horizontal edges
- rung: where extra horizontal bridges may appear

Every frequency and threshold is drawn once per run from the
"weave.fields" stream, so one composition is coherent while the next looks
different. Fields are computed for the whole grid at once with numpy.
"""

from __future__ import annotations

import logging

import numpy as np

from shadow_weave.util.misc import clamp, smoothstep
from shadow_weave.util.rng import RNGStream
from shadow_weave.weave.context import WeaveContext
from shadow_weave.weave.layer import WeaveLayer

logger = logging.getLogger(__name__)

# Noise space offsets keep the fields from sampling the same region.
GLITCH_OFFSET = (100.0, 200.0)
GATE_OCTAVE1_OFFSET = (10.0, 20.0)
GATE_OCTAVE2_OFFSET = (60.0, 70.0)
RUNG_OFFSET = (300.0, 400.0)


def row_parameter(ctx: WeaveContext, name: str) -> np.ndarray:
    """Return a band parameter per row as a (rows, 1) column."""
    index = ctx.require("row_band_index")
    values = np.array([getattr(band, name) for band in ctx.bands], dtype=np.float32)
    return values[index][:, np.newaxis]


def column_position(ctx: WeaveContext) -> np.ndarray:
    """Return c / cols - 0.5 as a (1, cols) row."""
    return (np.arange(ctx.cols, dtype=np.float32) / ctx.cols - 0.5)[np.newaxis, :]


def row_position(ctx: WeaveContext) -> np.ndarray:
    """Return r / rows - 0.5 as a (rows, 1) column."""
    return (np.arange(ctx.rows, dtype=np.float32) / ctx.rows - 0.5)[:, np.newaxis]


def border_distance(rows: int, cols: int) -> np.ndarray:
    """Distance of each cell to the nearest border, in cells."""
    r = np.arange(rows)
    c = np.arange(cols)
    dist_r = np.minimum(r, rows - 1 - r)[:, np.newaxis]
    dist_c = np.minimum(c, cols - 1 - c)[np.newaxis, :]
    return np.minimum(dist_r, dist_c).astype(np.float32)


def build_blend_field(ctx: WeaveContext, rng: RNGStream) -> np.ndarray:
    sx = rng.uniform(0.012, 0.02)
    sy = rng.uniform(0.012, 0.02)

    n = ctx.noise.grid(ctx.rows, ctx.cols, x_scale=sx, y_scale=sy)
    v = row_parameter(ctx, "secondary_weight") * 0.75 + n * 0.35
    v = v + column_position(ctx) * 0.18 + row_parameter(ctx, "drift") * 0.04
    return smoothstep(0.08, 0.92, clamp(v, 0.0, 1.0)).astype(np.float32)


def build_glitch_field(ctx: WeaveContext, rng: RNGStream) -> np.ndarray:
    sx = rng.uniform(0.02, 0.035)
    sy = rng.uniform(0.02, 0.035)
    threshold = rng.uniform(0.52, 0.66)

    n = ctx.noise.grid(
        ctx.rows,
        ctx.cols,
        x_offset=GLITCH_OFFSET[0],
        y_offset=GLITCH_OFFSET[1],
        x_scale=sx,
        y_scale=sy,
    )
    v = n * 0.9 + row_parameter(ctx, "glitch_bias") * 0.25 - 0.1
    v = smoothstep(threshold, 0.95, v)

    # Falls from 1 to 0 over the outer 12% of the minor dimension.
    edge = border_distance(ctx.rows, ctx.cols) / min(ctx.rows, ctx.cols)
    v = v * smoothstep(0.02, 0.12, edge)
    return clamp(v, 0.0, 1.0).astype(np.float32)


def build_gate_field(ctx: WeaveContext, rng: RNGStream, vertical: bool) -> np.ndarray:
    """Build the vertical or horizontal gate field.

    Both orientations share the recipe; drift and blend push them in
    opposite directions, so where one gate opens the other tends to close.
    """
    sx1 = rng.uniform(0.01, 0.02)
    sy1 = rng.uniform(0.01, 0.02)
    sx2 = rng.uniform(0.03, 0.05)
    sy2 = rng.uniform(0.03, 0.05)

    blend = ctx.require("blend")
    glitch = ctx.require("glitch")
    sign = 1.0 if vertical else -1.0

    n1 = ctx.noise.grid(
        ctx.rows,
        ctx.cols,
        x_offset=GATE_OCTAVE1_OFFSET[0],
        y_offset=GATE_OCTAVE1_OFFSET[1],
        x_scale=sx1,
        y_scale=sy1,
    )
    n2 = ctx.noise.grid(
        ctx.rows,
        ctx.cols,
        x_offset=GATE_OCTAVE2_OFFSET[0],
        y_offset=GATE_OCTAVE2_OFFSET[1],
        x_scale=sx2,
        y_scale=sy2,
    )

    v = 0.65 * n1 + 0.35 * n2
    v = v + row_parameter(ctx, "drift") * (0.06 * sign)
    position = column_position(ctx) if vertical else row_position(ctx)
    v = v + position * 0.08

    v = clamp(v + (blend - 0.5) * (0.12 * sign), 0.0, 1.0)
    v = clamp(v - glitch * 0.25, 0.0, 1.0)
    return smoothstep(0.15, 0.85, v).astype(np.float32)


def build_rung_field(ctx: WeaveContext, rng: RNGStream) -> np.ndarray:
    sx = rng.uniform(0.02, 0.04)
    sy = rng.uniform(0.02, 0.04)

    v_gate = ctx.require("v_gate")
    glitch = ctx.require("glitch")

    n = ctx.noise.grid(
        ctx.rows,
        ctx.cols,
        x_offset=RUNG_OFFSET[0],
        y_offset=RUNG_OFFSET[1],
        x_scale=sx,
        y_scale=sy,
    )
    v = n * 0.85 + row_parameter(ctx, "secondary_weight") * 0.25
    v = v * (0.65 + 0.7 * v_gate)
    v = v + glitch * 0.15
    return smoothstep(0.2, 0.9, clamp(v, 0.0, 1.0)).astype(np.float32)


class ScalarFieldLayer(WeaveLayer):
    """Builds blend, glitch, both gates and the rung field, in that order.

    Later fields read earlier ones, so the order is fixed.
    """

    def apply(self, ctx: WeaveContext) -> None:
        if not ctx.bands:
            raise RuntimeError("ScalarFieldLayer requires BandLayer to run first")

        rng = ctx.rng.get("weave.fields")
        ctx.blend = build_blend_field(ctx, rng)
        ctx.glitch = build_glitch_field(ctx, rng)
        ctx.v_gate = build_gate_field(ctx, rng, vertical=True)
        ctx.h_gate = build_gate_field(ctx, rng, vertical=False)
        ctx.rung = build_rung_field(ctx, rng)

        logger.debug(
            f"Fields built: blend mean {ctx.blend.mean():.3f}, "
            f"glitch mean {ctx.glitch.mean():.3f}, "
            f"v_gate mean {ctx.v_gate.mean():.3f}, "
            f"h_gate mean {ctx.h_gate.mean():.3f}"
        )
