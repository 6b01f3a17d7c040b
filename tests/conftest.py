from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import pytest

from shadow_weave.types import RandomSeed, Style
from shadow_weave.weave import (
    BandLayer,
    EdgeResolverLayer,
    GlyphLayer,
    ScalarFieldLayer,
    VoidMaskLayer,
    WeaveContext,
)

STAGES = {
    "bands": [BandLayer],
    "fields": [BandLayer, ScalarFieldLayer],
    "voids": [BandLayer, ScalarFieldLayer, VoidMaskLayer],
    "edges": [BandLayer, ScalarFieldLayer, VoidMaskLayer, EdgeResolverLayer],
    "glyphs": [
        BandLayer,
        ScalarFieldLayer,
        VoidMaskLayer,
        EdgeResolverLayer,
        GlyphLayer,
    ],
}

ContextFactory: TypeAlias = Callable[..., WeaveContext]


@pytest.fixture
def weave_context() -> ContextFactory:
    """Build a WeaveContext with the pipeline run up to a named stage."""

    def _build(
        cols: int = 40,
        rows: int = 30,
        style: Style = Style.SIMPLE,
        seed: RandomSeed = 42,
        upto: str = "glyphs",
    ) -> WeaveContext:
        ctx = WeaveContext.create_empty(cols, rows, style=style, seed=seed)
        for layer_cls in STAGES[upto]:
            layer_cls().apply(ctx)
        return ctx

    return _build
