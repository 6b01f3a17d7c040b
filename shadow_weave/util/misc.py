from __future__ import annotations

import numpy as np


def clamp(value, low: float = 0.0, high: float = 1.0):
    """Clamp a scalar or array into [low, high]."""
    if isinstance(value, np.ndarray):
        return np.clip(value, low, high)
    return max(low, min(high, value))


def smoothstep(edge0: float, edge1: float, x):
    """Hermite interpolation between two edges.

    Accepts scalars or arrays. Inputs outside the edges are clamped rather
    than rejected, and a zero-width range degrades to a step at ``edge0``.
    """
    if edge1 == edge0:
        if isinstance(x, np.ndarray):
            return (x >= edge0).astype(np.float32)
        return 1.0 if x >= edge0 else 0.0
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
