"""Weave pipeline layers, in pipeline order."""

from .bands import BandLayer
from .edges import EdgeResolverLayer
from .fields import ScalarFieldLayer
from .glyphs import GlyphLayer
from .voids import VoidMaskLayer

__all__ = [
    "BandLayer",
    "EdgeResolverLayer",
    "GlyphLayer",
    "ScalarFieldLayer",
    "VoidMaskLayer",
]
