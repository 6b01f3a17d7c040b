"""Base classes for weave generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from shadow_weave.types import (
        BoolGrid,
        GridCoord,
        RandomSeed,
        ScalarField,
        Style,
    )
    from shadow_weave.weave.layers.bands import Band


@dataclass(frozen=True)
class WeaveResult:
    """A container for all data produced by one generation run.

    The arrays are owned by the result and never mutated after the
    pipeline hands it over; a rebuild produces a new result.

    Attributes:
        seed: The master seed the run was derived from.
        style: The style the run was generated for.
        bands: Horizontal bands, top to bottom.
        blend: Blend scalar field, shape (rows, cols).
        glitch: Glitch scalar field, shape (rows, cols).
        v_gate: Vertical gate field, shape (rows, cols).
        h_gate: Horizontal gate field, shape (rows, cols).
        rung: Rung field, shape (rows, cols).
        void_mask: True where a cell is negative space, shape (rows, cols).
        v_edges: Shared vertical edges, shape (rows - 1, cols). Entry [r, c]
            joins cell (r, c) to cell (r + 1, c).
        h_edges: Shared horizontal edges, shape (rows, cols - 1). Entry [r, c]
            joins cell (r, c) to cell (r, c + 1).
        cell_edges: Per-cell CELL_EDGES_DTYPE records, shape (rows, cols).
        glyphs: One-character strings, shape (rows, cols).
    """

    seed: RandomSeed
    style: Style
    bands: tuple[Band, ...]
    blend: ScalarField
    glitch: ScalarField
    v_gate: ScalarField
    h_gate: ScalarField
    rung: ScalarField
    void_mask: BoolGrid
    v_edges: BoolGrid
    h_edges: BoolGrid
    cell_edges: np.ndarray
    glyphs: np.ndarray

    @property
    def rows(self) -> int:
        return int(self.void_mask.shape[0])

    @property
    def cols(self) -> int:
        return int(self.void_mask.shape[1])

    def glyph_rows(self) -> list[str]:
        """Return the glyph grid as one string per row."""
        return ["".join(row) for row in self.glyphs.tolist()]


class BaseWeaveGenerator(abc.ABC):
    """Abstract base class for weave generators."""

    def __init__(self, cols: GridCoord, rows: GridCoord) -> None:
        self.cols = cols
        self.rows = rows

    @abc.abstractmethod
    def generate(self) -> WeaveResult:
        """Generate the weave and all of its intermediate fields."""
        raise NotImplementedError
