import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .draw import build_frame
from .editor import Editor
from .errors import ExternalQueryError
from .registry import OutputRegistry
from .sway import SwayMsg
from .sway_socket import sway_env
from .text_view import render_text
from .view import Viewport

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="screen-placer", description="Drag sway outputs into place.")
    parser.add_argument("--text", action="store_true", help="print the current layout as text and exit")
    parser.add_argument("--scale", type=int, default=config.SCALE, help="layout pixels per screen pixel")
    parser.add_argument("--debug", action="store_true", help="log debug messages")
    return parser.parse_args(argv)


def _environment():
    try:
        return sway_env()
    except (EnvironmentError, FileNotFoundError) as exc:
        # swaymsg reports the missing socket itself when it runs
        log.warning("could not locate the sway socket: %s", exc)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    registry = OutputRegistry(SwayMsg(env=_environment()))
    try:
        registry.load()
    except ExternalQueryError as exc:
        log.error("could not read outputs: %s", exc)
        return 1

    editor = Editor(registry, Viewport(scale=max(1, args.scale)))
    if args.text:
        editor.begin_frame()
        print(render_text(build_frame(editor), editor.viewport.width, editor.viewport.height))
        return 0

    from .tk_view import TkView

    TkView(editor).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
