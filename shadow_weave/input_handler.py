from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import tcod.event

from shadow_weave.commands import (
    NewCompositionUICommand,
    QuitUICommand,
    RegenerateUICommand,
    ResizeUICommand,
    ToggleModeUICommand,
    ToggleStyleUICommand,
    UICommand,
)

if TYPE_CHECKING:
    from shadow_weave.scene import Scene

logger = logging.getLogger(__name__)


class InputHandler:
    """Translates tcod events into scene commands.

    Keys:
        SPACE: new composition (seed, mode and style)
        R: new structure, same mode and style
        C: toggle light/dark
        V: toggle simple/dense
        ESCAPE: quit
    """

    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def dispatch(self, event: tcod.event.Event) -> bool:
        """Handle one event.

        Returns:
            True if a command ran, so the caller knows to redraw.
        """
        command = self.handle_event(event)
        if command is None:
            return False
        logger.debug(f"Executing {type(command).__name__}")
        command.execute()
        return True

    def handle_event(self, event: tcod.event.Event) -> UICommand | None:
        match event:
            case tcod.event.Quit():
                return QuitUICommand()
            case tcod.event.KeyDown(sym=tcod.event.KeySym.ESCAPE):
                return QuitUICommand()
            case tcod.event.KeyDown(sym=tcod.event.KeySym.SPACE):
                return NewCompositionUICommand(self.scene)
            case tcod.event.KeyDown(sym=tcod.event.KeySym.R):
                return RegenerateUICommand(self.scene)
            case tcod.event.KeyDown(sym=tcod.event.KeySym.C):
                return ToggleModeUICommand(self.scene)
            case tcod.event.KeyDown(sym=tcod.event.KeySym.V):
                return ToggleStyleUICommand(self.scene)
            case tcod.event.WindowResized(width=width, height=height):
                return ResizeUICommand(self.scene, width, height)
        return None
