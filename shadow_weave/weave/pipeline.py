"""Pipeline generator that orchestrates layer-based weave generation.

The WeavePipeline runs a sequence of WeaveLayers, each transforming a shared
WeaveContext. The output is an immutable WeaveResult; nothing is visible to
the caller until every layer has finished.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from shadow_weave.types import GridCoord, RandomSeed, Style

from .base import BaseWeaveGenerator, WeaveResult
from .context import WeaveContext

if TYPE_CHECKING:
    from .layer import WeaveLayer

logger = logging.getLogger(__name__)


class WeavePipeline(BaseWeaveGenerator):
    """Weave generator that runs layers sequentially on a shared context.

    Example:
        pipeline = WeavePipeline(
            layers=[
                BandLayer(),
                ScalarFieldLayer(),
                VoidMaskLayer(),
                EdgeResolverLayer(),
                GlyphLayer(),
            ],
            cols=80,
            rows=45,
            style=Style.DENSE,
            seed=12345,
        )
        result = pipeline.generate()

    Attributes:
        layers: List of WeaveLayer instances to apply.
        style: Visual style passed to every layer through the context.
        seed: Optional random seed for reproducible generation.
    """

    def __init__(
        self,
        layers: list[WeaveLayer],
        cols: GridCoord,
        rows: GridCoord,
        style: Style = Style.SIMPLE,
        seed: RandomSeed = None,
    ) -> None:
        super().__init__(cols, rows)
        self.layers = layers
        self.style = style
        self.seed = seed

    def generate(self) -> WeaveResult:
        """Generate a weave by running all layers in sequence.

        Returns:
            WeaveResult with every field, edge grid and the glyph grid.
        """
        ctx = WeaveContext.create_empty(
            cols=self.cols,
            rows=self.rows,
            style=self.style,
            seed=self.seed,
        )

        for layer in self.layers:
            start = time.perf_counter()
            layer.apply(ctx)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            logger.debug(f"{type(layer).__name__} applied in {elapsed_ms:.2f} ms")

        return ctx.to_result()
