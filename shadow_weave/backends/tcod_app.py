from __future__ import annotations

import logging

import tcod.context
import tcod.event
import tcod.tileset
from tcod.console import Console
from tcod.sdl.video import WindowFlags

from shadow_weave import config
from shadow_weave.app import App, AppConfig
from shadow_weave.input_handler import InputHandler
from shadow_weave.scene import Scene
from shadow_weave.util.glyph_buffer import GlyphBuffer

logger = logging.getLogger(__name__)


def load_tileset(cell_size: int) -> tcod.tileset.Tileset:
    """Load the viewer font at a size matching the scene's cells."""
    font_height = max(1, int(cell_size * config.FONT_SCALE))
    return tcod.tileset.load_truetype_font(config.FONT_PATH, cell_size, font_height)


class TCODApp(App):
    """
    The TCOD implementation of the application driver.

    Uses a blocking event loop: the scene only changes in response to input,
    so there is nothing to do between events but wait.
    """

    def __init__(self, app_config: AppConfig, scene: Scene) -> None:
        self.scene = scene
        self.input_handler = InputHandler(scene)
        self.buffer: GlyphBuffer | None = None

        self._cell_size = scene.cell_size
        tileset = load_tileset(self._cell_size)
        self.root_console = Console(scene.cols, scene.rows, order="C")

        sdl_flags = WindowFlags.RESIZABLE | WindowFlags.ALLOW_HIGHDPI
        self.tcod_context = tcod.context.new(
            width=app_config.width,
            height=app_config.height,
            tileset=tileset,
            title=app_config.title,
            vsync=app_config.vsync,
            sdl_window_flags=sdl_flags,
        )

    def run(self) -> None:
        """Starts the main application loop and shows the scene."""
        try:
            while True:
                self.render_frame()
                for event in tcod.event.wait():
                    if self.input_handler.dispatch(event):
                        self.sync_console()
        except Exception:
            logger.exception("Viewer loop failed")
            raise
        finally:
            self.tcod_context.close()

    def sync_console(self) -> None:
        """Match the console and tileset to the scene after a rebuild."""
        if self.scene.cell_size != self._cell_size:
            self._cell_size = self.scene.cell_size
            self.tcod_context.change_tileset(load_tileset(self._cell_size))
        if (self.root_console.width, self.root_console.height) != (
            self.scene.cols,
            self.scene.rows,
        ):
            logger.debug(f"Resizing console to {self.scene.cols}x{self.scene.rows}")
            self.root_console = Console(self.scene.cols, self.scene.rows, order="C")

    def render_frame(self) -> None:
        """Copies the scene's glyph buffer into the console and presents it."""
        self.buffer = self.scene.render(self.buffer)
        data = self.buffer.data
        self.root_console.ch[:] = data["ch"]
        self.root_console.fg[:] = data["fg"][..., :3]
        self.root_console.bg[:] = data["bg"][..., :3]

        _, bg = self.scene.colors()
        self.tcod_context.present(self.root_console, keep_aspect=True, clear_color=bg)
