"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to manually assemble layers.
"""

from __future__ import annotations

from shadow_weave.types import RandomSeed, Style

from .layers import (
    BandLayer,
    EdgeResolverLayer,
    GlyphLayer,
    ScalarFieldLayer,
    VoidMaskLayer,
)
from .pipeline import WeavePipeline


def create_pipeline(
    name: str,
    cols: int,
    rows: int,
    style: Style = Style.SIMPLE,
    seed: RandomSeed = None,
) -> WeavePipeline:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "weave": The full circuit weave (bands, fields, voids, edges, glyphs)

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "weave":
        return create_weave_pipeline(cols, rows, style, seed)
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_weave_pipeline(
    cols: int,
    rows: int,
    style: Style = Style.SIMPLE,
    seed: RandomSeed = None,
) -> WeavePipeline:
    """Create the full weave pipeline.

    The weave pipeline generates:
    1. Horizontal bands with their own bias parameters (BandLayer)
    2. Blend, glitch, gate and rung fields (ScalarFieldLayer)
    3. Negative space islands (VoidMaskLayer)
    4. Shared edges, rungs and per-cell edge records (EdgeResolverLayer)
    5. One glyph per cell (GlyphLayer)

    Args:
        cols: Grid width in cells.
        rows: Grid height in cells.
        style: Visual style.
        seed: Optional random seed for deterministic generation.
    """
    layers = [
        BandLayer(),
        ScalarFieldLayer(),
        VoidMaskLayer(),
        EdgeResolverLayer(),
        GlyphLayer(),
    ]

    return WeavePipeline(
        layers=layers,
        cols=cols,
        rows=rows,
        style=style,
        seed=seed,
    )
