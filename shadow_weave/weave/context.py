"""Generation context for the weave pipeline.

The WeaveContext is a mutable container that holds all state during
generation. Each layer in the pipeline receives the same context, reads the
outputs of earlier layers and writes its own. Nothing outside the pipeline
sees the context; it is frozen into a WeaveResult at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from shadow_weave.types import RandomSeed, Style
from shadow_weave.util.noise import NoiseField
from shadow_weave.util.rng import RNGProvider

from .base import WeaveResult

if TYPE_CHECKING:
    from .layers.bands import Band

# Smallest grid that still has at least one vertical and one horizontal edge.
MIN_CONTEXT_SIZE = 2


@dataclass
class WeaveContext:
    """Mutable state container passed through the weave pipeline.

    Attributes:
        cols: Grid width in cells.
        rows: Grid height in cells.
        style: Visual style for this run.
        seed: Master seed for this run.
        rng: Provider of per-stage random streams derived from ``seed``.
        noise: Smooth noise source seeded from ``rng``.
        bands: Horizontal bands (BandLayer).
        row_band_index: For each row, the index of its band (BandLayer).
        blend, glitch, v_gate, h_gate, rung: Scalar fields of shape
            (rows, cols) in [0, 1] (ScalarFieldLayer).
        void_mask: Negative space, shape (rows, cols) (VoidMaskLayer).
        v_edges, h_edges: Shared edges (EdgeResolverLayer).
        cell_edges: Per-cell edge records (EdgeResolverLayer).
        glyphs: Final characters (GlyphLayer).
    """

    cols: int
    rows: int
    style: Style
    seed: RandomSeed
    rng: RNGProvider
    noise: NoiseField
    bands: list[Band] = field(default_factory=list)
    row_band_index: np.ndarray | None = None
    blend: np.ndarray | None = None
    glitch: np.ndarray | None = None
    v_gate: np.ndarray | None = None
    h_gate: np.ndarray | None = None
    rung: np.ndarray | None = None
    void_mask: np.ndarray | None = None
    v_edges: np.ndarray | None = None
    h_edges: np.ndarray | None = None
    cell_edges: np.ndarray | None = None
    glyphs: np.ndarray | None = None

    @classmethod
    def create_empty(
        cls,
        cols: int,
        rows: int,
        style: Style = Style.SIMPLE,
        seed: RandomSeed = None,
    ) -> WeaveContext:
        """Create an empty context ready for layer processing.

        Args:
            cols: Grid width in cells.
            rows: Grid height in cells.
            style: Visual style for this run.
            seed: Optional master seed for deterministic generation.

        Raises:
            ValueError: If the grid is smaller than 2x2.
        """
        if cols < MIN_CONTEXT_SIZE or rows < MIN_CONTEXT_SIZE:
            raise ValueError(
                f"Weave grid must be at least {MIN_CONTEXT_SIZE}x{MIN_CONTEXT_SIZE}, "
                f"got {cols}x{rows}"
            )

        rng = RNGProvider(seed)
        noise = NoiseField(rng.get("weave.noise").derive_seed())

        return cls(
            cols=cols,
            rows=rows,
            style=style,
            seed=seed,
            rng=rng,
            noise=noise,
        )

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def require(self, name: str) -> np.ndarray:
        """Return an array produced by an earlier layer.

        Raises:
            RuntimeError: If the layer that produces ``name`` has not run yet.
        """
        value = getattr(self, name)
        if value is None:
            raise RuntimeError(
                f"WeaveContext.{name} is not set; the layer that builds it "
                "must run earlier in the pipeline"
            )
        return value

    def to_result(self) -> WeaveResult:
        """Freeze this context into a WeaveResult.

        Returns:
            A WeaveResult holding every field of the finished run.
        """
        if not self.bands:
            raise RuntimeError("WeaveContext.bands is not set")
        return WeaveResult(
            seed=self.seed,
            style=self.style,
            bands=tuple(self.bands),
            blend=self.require("blend"),
            glitch=self.require("glitch"),
            v_gate=self.require("v_gate"),
            h_gate=self.require("h_gate"),
            rung=self.require("rung"),
            void_mask=self.require("void_mask"),
            v_edges=self.require("v_edges"),
            h_edges=self.require("h_edges"),
            cell_edges=self.require("cell_edges"),
            glyphs=self.require("glyphs"),
        )
