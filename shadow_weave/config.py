"""
Configuration constants.

Centralizes all magic numbers and configuration values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

from pathlib import Path

from shadow_weave.types import AppBackend, Mode, Style

# =============================================================================
# GENERAL
# =============================================================================

# None means a fresh seed from system entropy on every start.
RANDOM_SEED: int | None = None

# Upper bound (exclusive) for seeds drawn by regenerate().
MAX_SEED = 1_000_000_000

# Default log level used by the command line entry point
LOG_LEVEL = "WARNING"

# =============================================================================
# DISPLAY & RENDERING
# =============================================================================

WINDOW_TITLE = "Shadow Weave"

# Initial window size in pixels
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 800

# Application backend selection
APP_BACKEND: AppBackend = "tcod"

# Startup style/mode. None means pick one at random ("roulette").
DEFAULT_STYLE: Style | None = None
DEFAULT_MODE: Mode | None = None

# True-type font used by the tcod backend. Must cover box drawing, block
# elements and braille for every glyph to show up.
FONT_PATH = Path("/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf")

# Font size is the cell size scaled by this factor.
FONT_SCALE = 1.05

VSYNC = True

# =============================================================================
# GRID SIZING
# =============================================================================

# Cell size in pixels is min(width, height) // CELL_SIZE_DIVISOR, clamped.
CELL_SIZE_DIVISOR = 75
MIN_CELL_SIZE = 9
MAX_CELL_SIZE = 18

# Grids never shrink below this many columns or rows.
MIN_GRID_COLS = 18
MIN_GRID_ROWS = 18

# =============================================================================
# BANDS
# =============================================================================

BAND_COUNT_RANGE = (3, 6)  # Half-open, like randrange
BAND_MIN_ROWS = 6
BAND_CUT_JITTER = 0.06  # Fraction of the row count

BAND_SECONDARY_WEIGHT_RANGE = (0.2, 0.85)
BAND_DRIFT_RANGE = (-1.5, 1.5)

# Glitch bias is a mixture: mostly "hot" bands, occasionally calm ones.
BAND_HIGH_GLITCH_CHANCE = 0.65
BAND_HIGH_GLITCH_RANGE = (0.35, 0.8)
BAND_LOW_GLITCH_RANGE = (0.05, 0.25)

# =============================================================================
# VOIDS (negative space)
# =============================================================================

VOID_ISLAND_COUNT_RANGE = {Style.SIMPLE: (2, 6), Style.DENSE: (0, 3)}
VOID_BASE_RADIUS_RANGE = {Style.SIMPLE: (0.10, 0.22), Style.DENSE: (0.06, 0.14)}
VOID_RADIUS_JITTER = (0.8, 1.25)
VOID_CENTER_RANGE = (0.15, 0.85)
VOID_WARP_AMPLITUDE = {Style.SIMPLE: 0.45, Style.DENSE: 0.25}
VOID_SOFTEN_THRESHOLD = {Style.SIMPLE: 0.92, Style.DENSE: 0.96}

# =============================================================================
# EDGES
# =============================================================================

EDGE_V_THRESHOLD_RANGE = {Style.SIMPLE: (0.44, 0.58), Style.DENSE: (0.34, 0.48)}
EDGE_H_THRESHOLD_RANGE = {Style.SIMPLE: (0.44, 0.60), Style.DENSE: (0.34, 0.50)}
EDGE_V_GLITCH_PENALTY = {Style.SIMPLE: 0.14, Style.DENSE: 0.08}
EDGE_H_GLITCH_PENALTY = {Style.SIMPLE: 0.12, Style.DENSE: 0.07}

RUNG_PERIOD_RANGE = {Style.SIMPLE: (5, 9), Style.DENSE: (3, 6)}  # Half-open
RUNG_CUTOFF = {Style.SIMPLE: 0.65, Style.DENSE: 0.50}
RUNG_LIVE_GATE = 0.55

# =============================================================================
# GLYPHS
# =============================================================================

DUST_CHANCE_RANGE = {Style.SIMPLE: (0.001, 0.01), Style.DENSE: (0.01, 0.03)}
VOID_DUST_MULTIPLIER = 1.5
SHADE_GAIN_RANGE = {Style.SIMPLE: (0.75, 1.05), Style.DENSE: (1.0, 1.35)}
FAT_COLUMN_CHANCE_RANGE = {Style.SIMPLE: (0.10, 0.25), Style.DENSE: (0.30, 0.60)}
DASH_CHANCE_RANGE = {Style.SIMPLE: (0.10, 0.25), Style.DENSE: (0.35, 0.65)}
FINE_RAMP_CHANCE = 0.45
VERTICAL_LINE_KEEP_CHANCE = 0.75
TEXTURE_JITTER = 0.18
