"""Shared-edge resolution layer.

Every pair of adjacent cells shares exactly one boolean edge. Resolving the
edge once per adjacency, rather than once per cell side, is what guarantees
the two cells always agree about their common boundary.

Vertical edges join (r, c) to (r + 1, c) and live in an array of shape
(rows - 1, cols). Horizontal edges join (r, c) to (r, c + 1) and live in an
array of shape (rows, cols - 1). After resolution the shared edges are copied
out into per-cell north/east/south/west records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from shadow_weave import config
from shadow_weave.types import Style
from shadow_weave.util.misc import clamp, smoothstep
from shadow_weave.util.rng import RNGStream
from shadow_weave.weave.context import WeaveContext
from shadow_weave.weave.layer import WeaveLayer

logger = logging.getLogger(__name__)

# Per-cell edge record.
CELL_EDGES_DTYPE = np.dtype(
    [
        ("north", np.bool_),
        ("east", np.bool_),
        ("south", np.bool_),
        ("west", np.bool_),
    ]
)

# Bit per direction in an edge mask.
NORTH = 1
EAST = 2
SOUTH = 4
WEST = 8


@dataclass(frozen=True)
class EdgeParams:
    """Per-run edge constants, drawn once from the "weave.edges" stream."""

    v_threshold: float
    h_threshold: float
    rung_period: int
    rung_cutoff: float
    v_glitch_penalty: float
    h_glitch_penalty: float


def draw_edge_params(style: Style, rng: RNGStream) -> EdgeParams:
    return EdgeParams(
        v_threshold=rng.uniform_range(config.EDGE_V_THRESHOLD_RANGE[style]),
        h_threshold=rng.uniform_range(config.EDGE_H_THRESHOLD_RANGE[style]),
        rung_period=rng.randrange(*config.RUNG_PERIOD_RANGE[style]),
        rung_cutoff=config.RUNG_CUTOFF[style],
        v_glitch_penalty=config.EDGE_V_GLITCH_PENALTY[style],
        h_glitch_penalty=config.EDGE_H_GLITCH_PENALTY[style],
    )


def resolve_vertical_edges(ctx: WeaveContext, params: EdgeParams) -> np.ndarray:
    """Resolve the (rows - 1, cols) vertical edges.

    The upper cell's gate carries 60% of the weight. Blend pushes vertical
    edges on, glitch pushes them off.
    """
    v_gate = ctx.require("v_gate")
    blend = ctx.require("blend")
    glitch = ctx.require("glitch")
    void = ctx.require("void_mask")

    vg = 0.6 * v_gate[:-1, :] + 0.4 * v_gate[1:, :]
    b = 0.5 * (blend[:-1, :] + blend[1:, :])
    g = 0.5 * (glitch[:-1, :] + glitch[1:, :])

    p = vg + (b - 0.5) * 0.12 - g * params.v_glitch_penalty
    p = smoothstep(0.15, 0.85, clamp(p, 0.0, 1.0))

    edges = p > params.v_threshold
    edges &= ~(void[:-1, :] | void[1:, :])
    return edges


def resolve_horizontal_edges(ctx: WeaveContext, params: EdgeParams) -> np.ndarray:
    """Resolve the (rows, cols - 1) horizontal edges.

    Mirror image of the vertical rule, with the blend term inverted so that
    blend-heavy areas favour vertical structure over horizontal.
    """
    h_gate = ctx.require("h_gate")
    blend = ctx.require("blend")
    glitch = ctx.require("glitch")
    void = ctx.require("void_mask")

    hg = 0.6 * h_gate[:, :-1] + 0.4 * h_gate[:, 1:]
    b = 0.5 * (blend[:, :-1] + blend[:, 1:])
    g = 0.5 * (glitch[:, :-1] + glitch[:, 1:])

    p = hg - (b - 0.5) * 0.10 - g * params.h_glitch_penalty
    p = smoothstep(0.15, 0.85, clamp(p, 0.0, 1.0))

    edges = p > params.h_threshold
    edges &= ~(void[:, :-1] | void[:, 1:])
    return edges


def rung_mask(ctx: WeaveContext, params: EdgeParams) -> np.ndarray:
    """Return the (rows, cols - 1) horizontal adjacencies that get a rung.

    A rung fires on rows where ``(row + floor(blend * 10)) % period == 0``.
    The blend term shifts the phase cell by cell, so rungs step irregularly
    instead of lining up on a strict period. Rungs only bridge cells whose
    vertical gates are both live.
    """
    rung = ctx.require("rung")
    blend = ctx.require("blend")
    v_gate = ctx.require("v_gate")
    void = ctx.require("void_mask")

    rows = np.arange(ctx.rows, dtype=np.int64)[:, np.newaxis]
    blend_shift = np.floor(blend[:, :-1] * 10).astype(np.int64)
    phase = (rows + blend_shift) % params.rung_period

    live = v_gate > config.RUNG_LIVE_GATE
    return (
        ~(void[:, :-1] | void[:, 1:])
        & (rung[:, :-1] > params.rung_cutoff)
        & (phase == 0)
        & live[:, :-1]
        & live[:, 1:]
    )


def distribute_edges(
    v_edges: np.ndarray, h_edges: np.ndarray, void_mask: np.ndarray
) -> np.ndarray:
    """Copy shared edges into per-cell records.

    Sides on the grid border are always off, and void cells get all-false
    records whatever the shared edges say.
    """
    rows, cols = void_mask.shape
    cells = np.zeros((rows, cols), dtype=CELL_EDGES_DTYPE)

    cells["north"][1:, :] = v_edges
    cells["south"][:-1, :] = v_edges
    cells["west"][:, 1:] = h_edges
    cells["east"][:, :-1] = h_edges

    cells[void_mask] = (False, False, False, False)
    return cells


def edge_mask(cell_edges: np.ndarray) -> np.ndarray:
    """Pack per-cell records into 4-bit masks (N=1, E=2, S=4, W=8)."""
    return (
        cell_edges["north"].astype(np.uint8) * NORTH
        | cell_edges["east"].astype(np.uint8) * EAST
        | cell_edges["south"].astype(np.uint8) * SOUTH
        | cell_edges["west"].astype(np.uint8) * WEST
    )


class EdgeResolverLayer(WeaveLayer):
    """Resolves shared edges, adds rungs and builds per-cell edge records."""

    def apply(self, ctx: WeaveContext) -> None:
        params = draw_edge_params(ctx.style, ctx.rng.get("weave.edges"))

        ctx.v_edges = resolve_vertical_edges(ctx, params)
        h_edges = resolve_horizontal_edges(ctx, params)
        rungs = rung_mask(ctx, params)
        ctx.h_edges = h_edges | rungs
        ctx.cell_edges = distribute_edges(
            ctx.v_edges, ctx.h_edges, ctx.require("void_mask")
        )

        logger.debug(
            f"Edges ({ctx.style.value}): {int(ctx.v_edges.sum())} vertical, "
            f"{int(ctx.h_edges.sum())} horizontal, "
            f"{int((rungs & ~h_edges).sum())} added by rungs "
            f"(period {params.rung_period})"
        )
