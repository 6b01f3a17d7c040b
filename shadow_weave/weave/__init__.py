"""Pipeline-based weave generation.

This package provides a layered architecture for generating a weave. Each
layer fills in part of a shared WeaveContext, and the pipeline outputs an
immutable WeaveResult.

Example usage:
    from shadow_weave.weave import create_pipeline

    pipeline = create_pipeline("weave", cols=80, rows=45, seed=42)
    result = pipeline.generate()

The pipeline can also be assembled manually:
    from shadow_weave.weave import (
        BandLayer,
        ScalarFieldLayer,
        VoidMaskLayer,
        WeavePipeline,
    )
"""

from .base import BaseWeaveGenerator, WeaveResult
from .context import WeaveContext
from .factory import create_pipeline, create_weave_pipeline
from .layer import WeaveLayer
from .layers import (
    BandLayer,
    EdgeResolverLayer,
    GlyphLayer,
    ScalarFieldLayer,
    VoidMaskLayer,
)
from .pipeline import WeavePipeline

__all__ = [
    "BandLayer",
    "BaseWeaveGenerator",
    "EdgeResolverLayer",
    "GlyphLayer",
    "ScalarFieldLayer",
    "VoidMaskLayer",
    "WeaveContext",
    "WeaveLayer",
    "WeavePipeline",
    "WeaveResult",
    "create_pipeline",
    "create_weave_pipeline",
]
