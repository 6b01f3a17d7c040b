from __future__ import annotations

import sys
from typing import TextIO

from shadow_weave.app import App, AppConfig
from shadow_weave.colors import Color
from shadow_weave.scene import Scene

ANSI_RESET = "\x1b[0m"


def ansi_colors(fg: Color, bg: Color) -> str:
    """24-bit ANSI escape selecting a foreground/background pair."""
    return f"\x1b[38;2;{fg[0]};{fg[1]};{fg[2]}m\x1b[48;2;{bg[0]};{bg[1]};{bg[2]}m"


class TerminalApp(App):
    """Prints the scene's glyph grid once and returns.

    Colors are emitted as ANSI escapes when ``use_color`` is set, so the
    light/dark mode survives in a terminal that supports 24-bit color.
    """

    def __init__(
        self,
        app_config: AppConfig,
        scene: Scene,
        stream: TextIO | None = None,
        use_color: bool = False,
    ) -> None:
        self.app_config = app_config
        self.scene = scene
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = use_color

    def run(self) -> None:
        text = self.scene.render().to_text()
        if self.use_color:
            fg, bg = self.scene.colors()
            prefix = ansi_colors(fg, bg)
            text = "\n".join(prefix + line + ANSI_RESET for line in text.split("\n"))
        self.stream.write(text + "\n")
        self.stream.flush()
