from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from shadow_weave.scene import Scene


@dataclass
class AppConfig:
    """Configuration for an App implementation."""

    width: int
    height: int
    title: str
    vsync: bool


class App(Protocol):
    """
    Defines the structural interface for an application driver.

    An App bridges a Scene with a concrete output: a window, a terminal, or
    anything else that can show a grid of characters in two colors.

    Responsibilities:
    -----------------
    - Output Management: creates whatever surface it draws on and sizes it to
      the scene's grid.

    - Main Loop Execution: implements run(). A window backend polls events
      and redraws until asked to quit; a one-shot backend draws once and
      returns.

    - Input Event Translation: where there is input, events go to an
      InputHandler, which turns them into scene commands.

    The scene is read-only from the App's point of view except through those
    commands, so rendering can run any number of times without side effects.
    """

    def __init__(self, app_config: AppConfig, scene: Scene) -> None:
        """Initializes the host with the scene and configuration."""
        ...

    def run(self) -> None:
        """Starts the application and shows the scene."""
        ...
