"""Negative space layer.

Carves a few roughly circular "islands" of void out of the grid. Simple
style gets more and larger islands; dense style gets at most two small ones
and often none. Island outlines are warped by noise, and a second noise
sample nibbles the boundary, so holes read as organic rather than circular.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from shadow_weave import config
from shadow_weave.types import Style
from shadow_weave.util.rng import RNGStream
from shadow_weave.weave.context import WeaveContext
from shadow_weave.weave.layer import WeaveLayer

logger = logging.getLogger(__name__)

WARP_OFFSET = (700.0, 800.0)
SOFTEN_OFFSET = (900.0, 950.0)
SOFTEN_SCALE = 0.06


@dataclass(frozen=True)
class VoidIsland:
    """A void island center and radius, in cell units."""

    x: float
    y: float
    radius: float


def make_islands(
    cols: int, rows: int, style: Style, rng: RNGStream
) -> list[VoidIsland]:
    """Draw the island count, base radius and every island for a style."""
    count = rng.randrange(*config.VOID_ISLAND_COUNT_RANGE[style])
    base_radius = rng.uniform_range(config.VOID_BASE_RADIUS_RANGE[style])
    minor = min(cols, rows)

    islands = []
    for _ in range(count):
        islands.append(
            VoidIsland(
                x=rng.uniform_range(config.VOID_CENTER_RANGE) * cols,
                y=rng.uniform_range(config.VOID_CENTER_RANGE) * rows,
                radius=base_radius
                * minor
                * rng.uniform_range(config.VOID_RADIUS_JITTER),
            )
        )
    return islands


def build_void_mask(ctx: WeaveContext, rng: RNGStream) -> np.ndarray:
    """Build the void mask for the context's style.

    A cell is void when it falls inside any warped island and the softening
    noise at that cell stays below the style threshold.
    """
    islands = make_islands(ctx.cols, ctx.rows, ctx.style, rng)
    nx = rng.uniform(0.02, 0.05)
    ny = rng.uniform(0.02, 0.05)

    mask = np.zeros(ctx.shape, dtype=bool)
    if not islands:
        return mask

    warp = ctx.noise.grid(
        ctx.rows,
        ctx.cols,
        x_offset=WARP_OFFSET[0],
        y_offset=WARP_OFFSET[1],
        x_scale=nx,
        y_scale=ny,
    )
    warp = (warp - 0.5) * config.VOID_WARP_AMPLITUDE[ctx.style]
    limit = 1.0 + warp

    cols = np.arange(ctx.cols, dtype=np.float64)[np.newaxis, :]
    rows = np.arange(ctx.rows, dtype=np.float64)[:, np.newaxis]
    inside = np.zeros(ctx.shape, dtype=bool)
    for island in islands:
        dx = (cols - island.x) / island.radius
        dy = (rows - island.y) / island.radius
        inside |= np.sqrt(dx * dx + dy * dy) < limit

    soften = ctx.noise.grid(
        ctx.rows,
        ctx.cols,
        x_offset=SOFTEN_OFFSET[0],
        y_offset=SOFTEN_OFFSET[1],
        x_scale=SOFTEN_SCALE,
        y_scale=SOFTEN_SCALE,
    )
    mask[:] = inside & (soften < config.VOID_SOFTEN_THRESHOLD[ctx.style])
    return mask


class VoidMaskLayer(WeaveLayer):
    """Marks the negative space cells for the run's style."""

    def apply(self, ctx: WeaveContext) -> None:
        ctx.void_mask = build_void_mask(ctx, ctx.rng.get("weave.voids"))
        logger.debug(
            f"Void mask ({ctx.style.value}): {int(ctx.void_mask.sum())} cells "
            f"({void_fraction(ctx.void_mask):.1%})"
        )


def void_fraction(mask: np.ndarray) -> float:
    """Share of cells that are void."""
    return float(mask.mean()) if mask.size else 0.0
