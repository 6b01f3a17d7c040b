"""Abstract base class for weave layers.

Each stage of the pipeline implements the WeaveLayer interface and fills in
part of the WeaveContext - bands, scalar fields, voids, edges or glyphs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import WeaveContext


class WeaveLayer(ABC):
    """Abstract base class for weave generation layers.

    Layers are applied sequentially by the WeavePipeline. Each layer
    receives a WeaveContext, reads what earlier layers produced and stores
    its own output on the context.

    Subclasses must implement the apply() method to perform their specific
    generation logic.
    """

    @abstractmethod
    def apply(self, ctx: WeaveContext) -> None:
        """Apply this layer's generation logic to the context.

        Random decisions must come from ``ctx.rng`` streams and smooth
        variation from ``ctx.noise`` so the run stays reproducible.

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
