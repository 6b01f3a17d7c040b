from __future__ import annotations

from enum import Enum
from typing import Literal, TypeAlias

import numpy as np

# =============================================================================
# GRID TYPES
# =============================================================================

GridCoord: TypeAlias = int  # Always integer cell position

# Pixel coordinates
PixelCoord: TypeAlias = int | float

# A 2D float32 array of shape (rows, cols) with values in [0, 1].
ScalarField: TypeAlias = np.ndarray

# A 2D bool array of shape (rows, cols).
BoolGrid: TypeAlias = np.ndarray

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed: TypeAlias = int | str | None

# Generic min/max float range used for per-generation random constants.
FloatRange: TypeAlias = tuple[float, float]


class Style(Enum):
    """Visual style of a weave.

    SIMPLE favours negative space and clean lines. DENSE covers the grid
    with textured fills, fat columns and dashed threads.
    """

    SIMPLE = "simple"
    DENSE = "dense"

    def toggled(self) -> Style:
        match self:
            case Style.SIMPLE:
                return Style.DENSE
            case Style.DENSE:
                return Style.SIMPLE


class Mode(Enum):
    """Two-tone color mode. Purely cosmetic, never affects generation."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Mode:
        match self:
            case Mode.LIGHT:
                return Mode.DARK
            case Mode.DARK:
                return Mode.LIGHT


# =============================================================================
# BACKEND CONFIGURATION
# =============================================================================

AppBackend: TypeAlias = Literal["tcod", "terminal"]
