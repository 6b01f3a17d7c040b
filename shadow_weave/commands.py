"""
User interface commands that act on the Scene.

Each key the viewer understands maps to one UICommand. Commands are
immediate and synchronous: by the time execute() returns, any rebuild it
triggered has finished and the scene holds the new weave.

Examples:
    - NewCompositionUICommand: new seed, mode and style
    - RegenerateUICommand: new seed, same mode and style
    - ToggleModeUICommand: light/dark only
    - ToggleStyleUICommand: simple/dense, same seed
    - ResizeUICommand: new grid for a new window size
    - QuitUICommand: exit the viewer
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shadow_weave.scene import Scene


class UICommand(abc.ABC):
    """Commands that affect the scene or the application."""

    @abc.abstractmethod
    def execute(self) -> None:
        pass


class NewCompositionUICommand(UICommand):
    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def execute(self) -> None:
        self.scene.regenerate(new_composition=True)


class RegenerateUICommand(UICommand):
    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def execute(self) -> None:
        self.scene.regenerate(new_composition=False)


class ToggleModeUICommand(UICommand):
    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def execute(self) -> None:
        self.scene.toggle_mode()


class ToggleStyleUICommand(UICommand):
    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def execute(self) -> None:
        self.scene.toggle_style()


class ResizeUICommand(UICommand):
    """Command for fitting the grid to a new window size."""

    def __init__(self, scene: Scene, width: int, height: int) -> None:
        self.scene = scene
        self.width = width
        self.height = height

    def execute(self) -> None:
        self.scene.resize(self.width, self.height)


class QuitUICommand(UICommand):
    """Command for quitting the viewer."""

    def execute(self) -> None:
        raise SystemExit()
