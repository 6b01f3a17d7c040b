"""The Scene: the single mutable root of a running weave.

A Scene owns the seed, style, mode and grid layout, plus the WeaveResult
generated from them. Any change that affects structure (seed, style or
dimensions) runs the whole pipeline again and swaps in the new result in one
assignment, so a half-built weave is never visible. Toggling the color mode
touches nothing but the mode.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from shadow_weave import colors, config
from shadow_weave.colors import ColorPair
from shadow_weave.types import Mode, PixelCoord, RandomSeed, Style
from shadow_weave.util.glyph_buffer import GlyphBuffer
from shadow_weave.util.rng import RNGProvider
from shadow_weave.weave import WeaveResult, create_weave_pipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridLayout:
    """Grid dimensions derived from a window size.

    Attributes:
        cell_size: Cell edge length in pixels.
        cols: Grid width in cells.
        rows: Grid height in cells.
        offset_x: Left margin in pixels that centers the grid.
        offset_y: Top margin in pixels that centers the grid.
    """

    cell_size: int
    cols: int
    rows: int
    offset_x: int
    offset_y: int


def compute_grid_layout(width: PixelCoord, height: PixelCoord) -> GridLayout:
    """Fit a grid into a window of ``width`` x ``height`` pixels.

    The cell size scales with the smaller window side. Columns and rows never
    drop below the configured minimums, even for tiny or empty windows.
    """
    width = max(0.0, width)
    height = max(0.0, height)

    cell_size = math.floor(min(width, height) / config.CELL_SIZE_DIVISOR)
    cell_size = max(config.MIN_CELL_SIZE, min(config.MAX_CELL_SIZE, cell_size))

    cols = max(config.MIN_GRID_COLS, math.floor(width / cell_size))
    rows = max(config.MIN_GRID_ROWS, math.floor(height / cell_size))

    return GridLayout(
        cell_size=cell_size,
        cols=cols,
        rows=rows,
        offset_x=math.floor((width - cols * cell_size) / 2),
        offset_y=math.floor((height - rows * cell_size) / 2),
    )


class Scene:
    """Seed, style, mode and the weave generated from them.

    Entry points:
        regenerate(new_composition): new seed; with ``True`` also rolls a new
            mode and style.
        toggle_mode(): flip light/dark without rebuilding.
        toggle_style(): flip simple/dense and rebuild with the same seed.
        resize(width, height): recompute the grid and rebuild, same seed.
    """

    def __init__(
        self,
        width: PixelCoord = config.WINDOW_WIDTH,
        height: PixelCoord = config.WINDOW_HEIGHT,
        seed: int | None = None,
        style: Style | None = None,
        mode: Mode | None = None,
        roulette_seed: RandomSeed = config.RANDOM_SEED,
    ) -> None:
        """Create a scene and build its first weave.

        Args:
            width: Window width in pixels.
            height: Window height in pixels.
            seed: Structure seed. Drawn at random when None.
            style: Visual style. Falls back to config.DEFAULT_STYLE, then to
                a random pick.
            mode: Color mode. Falls back to config.DEFAULT_MODE, then to a
                random pick.
            roulette_seed: Seed for the stream that draws new seeds, styles
                and modes. None uses system entropy.
        """
        self._roulette = RNGProvider(roulette_seed).get("scene.roulette")

        self.seed: int = seed if seed is not None else self._draw_seed()
        self.mode: Mode = mode or config.DEFAULT_MODE or self._draw_mode()
        self.style: Style = style or config.DEFAULT_STYLE or self._draw_style()

        self.width = width
        self.height = height
        self.layout = compute_grid_layout(width, height)
        self.weave: WeaveResult = self._generate()

    # -------------------------------------------------------------------------
    # Read-only views of the current weave
    # -------------------------------------------------------------------------

    @property
    def cols(self) -> int:
        return self.layout.cols

    @property
    def rows(self) -> int:
        return self.layout.rows

    @property
    def cell_size(self) -> int:
        return self.layout.cell_size

    def colors(self) -> ColorPair:
        """Foreground/background pair for the current mode."""
        return colors.pair_for_mode(self.mode)

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def regenerate(self, new_composition: bool) -> None:
        """Reseed and rebuild.

        Args:
            new_composition: When True, also roll a new mode and style
                ("roulette"). When False, keep both and change only the
                structure.
        """
        self.seed = self._draw_seed()
        if new_composition:
            self.mode = self._draw_mode()
            self.style = self._draw_style()
        self.rebuild()

    def toggle_mode(self) -> None:
        """Flip light/dark. Cosmetic only; the weave is untouched."""
        self.mode = self.mode.toggled()

    def toggle_style(self) -> None:
        """Flip simple/dense and rebuild with the current seed."""
        self.style = self.style.toggled()
        self.rebuild()

    def resize(self, width: PixelCoord, height: PixelCoord) -> None:
        """Fit the grid to a new window size and rebuild with the same seed."""
        self.width = width
        self.height = height
        self.layout = compute_grid_layout(width, height)
        self.rebuild()

    def rebuild(self) -> None:
        """Run the full pipeline and replace the current weave."""
        self.weave = self._generate()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, buffer: GlyphBuffer | None = None) -> GlyphBuffer:
        """Fill a GlyphBuffer with the glyph grid and the mode's colors.

        Reuses ``buffer`` when it already matches the grid size. Never
        changes the scene.
        """
        if buffer is None or (buffer.width, buffer.height) != (self.cols, self.rows):
            buffer = GlyphBuffer(self.cols, self.rows)
        fg, bg = self.colors()
        buffer.fill_glyphs(
            self.weave.glyphs, colors.with_alpha(fg), colors.with_alpha(bg)
        )
        return buffer

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _generate(self) -> WeaveResult:
        pipeline = create_weave_pipeline(
            cols=self.layout.cols,
            rows=self.layout.rows,
            style=self.style,
            seed=self.seed,
        )
        result = pipeline.generate()
        logger.info(
            f"Built weave seed={self.seed} style={self.style.value} "
            f"grid={self.layout.cols}x{self.layout.rows}"
        )
        return result

    def _draw_seed(self) -> int:
        return self._roulette.randrange(config.MAX_SEED)

    def _draw_mode(self) -> Mode:
        return Mode.LIGHT if self._roulette.random() < 0.5 else Mode.DARK

    def _draw_style(self) -> Style:
        return Style.SIMPLE if self._roulette.random() < 0.5 else Style.DENSE
