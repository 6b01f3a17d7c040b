"""Seeded smooth 2D noise sampled onto grids.

Wraps ``tcod.noise.Noise`` so callers get values in [0, 1] instead of
[-1, 1], sampled over a whole (rows, cols) grid in one vectorized call.
"""

from __future__ import annotations

import numpy as np
import tcod.noise

# Fractal Perlin with four octaves gives soft, large-scale variation at the
# low frequencies the weave fields use.
DEFAULT_OCTAVES = 4


class NoiseField:
    """Deterministic 2D noise source.

    Two instances built from the same seed return identical samples for
    identical coordinates.
    """

    def __init__(self, seed: int, octaves: int = DEFAULT_OCTAVES) -> None:
        self.seed = seed
        self._noise = tcod.noise.Noise(
            dimensions=2,
            algorithm=tcod.noise.Algorithm.PERLIN,
            implementation=tcod.noise.Implementation.FBM,
            octaves=octaves,
            seed=seed,
        )

    def grid(
        self,
        rows: int,
        cols: int,
        x_offset: float = 0.0,
        y_offset: float = 0.0,
        x_scale: float = 1.0,
        y_scale: float = 1.0,
    ) -> np.ndarray:
        """Sample a (rows, cols) grid of noise values in [0, 1].

        The cell at [r, c] is sampled at
        ``(x_offset + c * x_scale, y_offset + r * y_scale)``.
        """
        xs = (x_offset + np.arange(cols, dtype=np.float64) * x_scale).astype(np.float32)
        ys = (y_offset + np.arange(rows, dtype=np.float64) * y_scale).astype(np.float32)
        # Broadcast (1, cols) against (rows, 1) so the result is row-major.
        values = self._noise[xs[np.newaxis, :], ys[:, np.newaxis]]
        return _to_unit(values)


def _to_unit(values: np.ndarray) -> np.ndarray:
    """Map tcod's [-1, 1] output to [0, 1]."""
    return np.clip((np.asarray(values, dtype=np.float32) + 1.0) * 0.5, 0.0, 1.0)
