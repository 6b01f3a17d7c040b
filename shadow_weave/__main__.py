"""Main entry point for the viewer."""

from __future__ import annotations

import argparse
import logging

from . import config
from .app import App, AppConfig
from .scene import Scene
from .types import Mode, Style


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadow_weave", description="Generative woven box-drawing patterns"
    )
    parser.add_argument(
        "--backend",
        default=config.APP_BACKEND,
        help="Output backend: tcod (window) or terminal (print once)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Structure seed")
    parser.add_argument(
        "--style", choices=[s.value for s in Style], default=None, help="Visual style"
    )
    parser.add_argument(
        "--mode", choices=[m.value for m in Mode], default=None, help="Color mode"
    )
    parser.add_argument(
        "--width", type=int, default=config.WINDOW_WIDTH, help="Window width in px"
    )
    parser.add_argument(
        "--height", type=int, default=config.WINDOW_HEIGHT, help="Window height in px"
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Terminal backend: print with 24-bit ANSI colors",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app_config = AppConfig(
        title=config.WINDOW_TITLE,
        width=args.width,
        height=args.height,
        vsync=config.VSYNC,
    )

    scene = Scene(
        width=args.width,
        height=args.height,
        seed=args.seed,
        style=Style(args.style) if args.style else None,
        mode=Mode(args.mode) if args.mode else None,
    )

    app: App
    match args.backend:
        case "tcod":
            from shadow_weave.backends.tcod_app import TCODApp

            app = TCODApp(app_config, scene)
        case "terminal":
            from shadow_weave.backends.terminal import TerminalApp

            app = TerminalApp(app_config, scene, use_color=args.color)
        case _:
            raise ValueError(f"Unknown app backend: {args.backend}")

    app.run()


if __name__ == "__main__":
    main()
