"""Glyph layer: edge masks to characters.

Each cell's edge record is packed into a 4-bit mask (N=1, E=2, S=4, W=8) and
looked up in a fixed box-drawing table. The two styles then diverge:

SIMPLE keeps the grid clean. Dangling stubs are dropped, and empty cells
get only the occasional speck of dust.

DENSE covers everything. Empty cells are filled from a texture ramp by
tone, vertical runs thicken into shaded columns, and horizontal runs break
into dashed threads. Void cells stay blank.

All per-cell rolls are drawn as whole arrays from a numpy Generator seeded
from the "weave.glyphs" stream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from shadow_weave import config
from shadow_weave.types import Style
from shadow_weave.util.misc import clamp
from shadow_weave.util.rng import RNGStream
from shadow_weave.weave.context import WeaveContext
from shadow_weave.weave.layer import WeaveLayer

from .edges import EAST, NORTH, SOUTH, WEST, edge_mask

logger = logging.getLogger(__name__)

BLANK = " "
DUST = ("·", "∙", "▪")

# Dense textures, darkest last.
TEXTURE_RAMP = (" ", "·", ":", "░", "▒", "▓", "⣿")
FINE_TEXTURE_RAMP = (" ", "·", "∙", "∘", "▪", "▫", "░", "▒", "▓")

TEXTURE_NOISE_OFFSET = (900.0, 800.0)
TEXTURE_NOISE_SCALE = 0.08

STUB_MASKS = (NORTH, EAST, SOUTH, WEST)
VERTICAL_RUN = NORTH | SOUTH
HORIZONTAL_RUN = EAST | WEST


def glyph_from_mask(mask: int) -> str:
    """Return the box-drawing character for an edge mask."""
    match mask:
        case 0:
            return BLANK
        # Stubs
        case 1:
            return "╵"
        case 2:
            return "╶"
        case 4:
            return "╷"
        case 8:
            return "╴"
        # Straight runs
        case 5:
            return "║"
        case 10:
            return "═"
        # Corners
        case 3:
            return "╚"
        case 6:
            return "╔"
        case 9:
            return "╝"
        case 12:
            return "╗"
        # Tees
        case 7:
            return "╠"
        case 11:
            return "╩"
        case 13:
            return "╣"
        case 14:
            return "╦"
        # Cross
        case 15:
            return "╬"
        case _:
            return BLANK


MASK_GLYPHS = np.array([glyph_from_mask(mask) for mask in range(16)], dtype="<U1")


@dataclass(frozen=True)
class GlyphParams:
    """Per-run glyph constants, drawn once from the "weave.glyphs" stream."""

    use_fine_ramp: bool
    shade_gain: float
    fat_column_chance: float
    dash_chance: float
    dust_chance: float

    @property
    def ramp(self) -> tuple[str, ...]:
        return FINE_TEXTURE_RAMP if self.use_fine_ramp else TEXTURE_RAMP


def draw_glyph_params(style: Style, rng: RNGStream) -> GlyphParams:
    return GlyphParams(
        use_fine_ramp=rng.random() < config.FINE_RAMP_CHANCE,
        shade_gain=rng.uniform_range(config.SHADE_GAIN_RANGE[style]),
        fat_column_chance=rng.uniform_range(config.FAT_COLUMN_CHANCE_RANGE[style]),
        dash_chance=rng.uniform_range(config.DASH_CHANCE_RANGE[style]),
        dust_chance=rng.uniform_range(config.DUST_CHANCE_RANGE[style]),
    )


def lookup_glyphs(masks: np.ndarray) -> np.ndarray:
    """Vectorized table lookup; out-of-range masks render blank."""
    in_range = masks < len(MASK_GLYPHS)
    glyphs = np.full(masks.shape, BLANK, dtype="<U1")
    glyphs[in_range] = MASK_GLYPHS[masks[in_range]]
    return glyphs


def compute_tone(
    blend: np.ndarray, glitch: np.ndarray, shade_gain: float
) -> np.ndarray:
    """Shading tone in [0, 1]: heavy where blend is high and glitch is low."""
    tone = blend * 0.75 + (1.0 - glitch) * 0.25
    return clamp(tone * shade_gain, 0.0, 1.0)


def glyphize_simple(
    masks: np.ndarray,
    void_mask: np.ndarray,
    params: GlyphParams,
    gen: np.random.Generator,
) -> np.ndarray:
    glyphs = lookup_glyphs(masks)
    glyphs[np.isin(masks, STUB_MASKS)] = BLANK

    dust_roll = gen.random(masks.shape)
    dust_pick = gen.integers(0, len(DUST), size=masks.shape)
    dust = np.array(DUST, dtype="<U1")[dust_pick]

    empty_dust = (masks == 0) & ~void_mask & (dust_roll < params.dust_chance)
    void_dust_chance = params.dust_chance * config.VOID_DUST_MULTIPLIER
    void_dust = void_mask & (dust_roll < void_dust_chance)

    glyphs[void_mask] = BLANK
    glyphs[empty_dust] = dust[empty_dust]
    glyphs[void_dust] = dust[void_dust]
    return glyphs


def texture_glyphs(
    tone: np.ndarray, jitter_noise: np.ndarray, ramp: tuple[str, ...]
) -> np.ndarray:
    """Pick a ramp entry per cell from tone plus a little noise jitter."""
    jitter = (jitter_noise - 0.5) * config.TEXTURE_JITTER
    levels = len(ramp) - 1
    index = np.floor((tone + jitter) * levels).astype(np.int64)
    index = np.clip(index, 0, levels)
    return np.array(ramp, dtype="<U1")[index]


def vertical_run_glyphs(tone: np.ndarray, fat: np.ndarray) -> np.ndarray:
    """Shade a vertical run by tone; the heaviest band may become a fat column."""
    glyphs = np.full(tone.shape, "║", dtype="<U1")
    glyphs[tone > 0.26] = "░"
    glyphs[tone > 0.42] = "▒"
    glyphs[tone > 0.58] = "▓"
    glyphs[(tone > 0.72) & fat] = "⣿"
    return glyphs


def horizontal_run_glyphs(tone: np.ndarray) -> np.ndarray:
    """Dashed thread variants of a horizontal run, lighter as tone drops."""
    glyphs = np.full(tone.shape, "┄", dtype="<U1")
    glyphs[tone > 0.45] = "╌"
    glyphs[tone > 0.7] = "═"
    return glyphs


def glyphize_dense(
    masks: np.ndarray,
    void_mask: np.ndarray,
    tone: np.ndarray,
    jitter_noise: np.ndarray,
    params: GlyphParams,
    gen: np.random.Generator,
) -> np.ndarray:
    glyphs = lookup_glyphs(masks)

    empty = masks == 0
    glyphs[empty] = texture_glyphs(tone, jitter_noise, params.ramp)[empty]

    keep_roll = gen.random(masks.shape)
    fat_roll = gen.random(masks.shape)
    keep_line = keep_roll < config.VERTICAL_LINE_KEEP_CHANCE
    restyle = (masks == VERTICAL_RUN) & ~keep_line
    columns = vertical_run_glyphs(tone, fat_roll < params.fat_column_chance)
    glyphs[restyle] = columns[restyle]

    dash_roll = gen.random(masks.shape)
    dashed = (masks == HORIZONTAL_RUN) & (dash_roll < params.dash_chance)
    threads = horizontal_run_glyphs(tone)
    glyphs[dashed] = threads[dashed]

    glyphs[void_mask] = BLANK
    return glyphs


class GlyphLayer(WeaveLayer):
    """Turns per-cell edge records into the final glyph grid."""

    def apply(self, ctx: WeaveContext) -> None:
        rng = ctx.rng.get("weave.glyphs")
        params = draw_glyph_params(ctx.style, rng)
        gen = rng.numpy_generator()

        masks = edge_mask(ctx.require("cell_edges"))
        void_mask = ctx.require("void_mask")

        match ctx.style:
            case Style.SIMPLE:
                ctx.glyphs = glyphize_simple(masks, void_mask, params, gen)
            case Style.DENSE:
                tone = compute_tone(
                    ctx.require("blend"), ctx.require("glitch"), params.shade_gain
                )
                jitter_noise = ctx.noise.grid(
                    ctx.rows,
                    ctx.cols,
                    x_offset=TEXTURE_NOISE_OFFSET[0],
                    y_offset=TEXTURE_NOISE_OFFSET[1],
                    x_scale=TEXTURE_NOISE_SCALE,
                    y_scale=TEXTURE_NOISE_SCALE,
                )
                ctx.glyphs = glyphize_dense(
                    masks, void_mask, tone, jitter_noise, params, gen
                )

        logger.debug(
            f"Glyphs ({ctx.style.value}): "
            f"{int((ctx.glyphs != BLANK).sum())} non-blank cells, "
            f"{'fine' if params.use_fine_ramp else 'coarse'} ramp"
        )
