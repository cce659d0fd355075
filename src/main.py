"""Entry point for the Lights Out terminal puzzle.

Sets up the ECS world, event bus and systems, then runs the poll loop on a
curses render surface.
"""
import argparse
import curses
import logging
import random
import sys
from typing import List, Optional

from lightsout.constants import DEFAULT_BOARD_SIZE, POLL_TIMEOUT_MS
from lightsout.events.bus import (
    EVENT_KEY_CHAR,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_QUIT_REQUEST,
    EVENT_RESIZE,
    EventBus,
)
from lightsout.events.input_events import InputEvent, KeyEvent, MouseAction, MouseEvent, ResizeEvent
from lightsout.rendering.curses_surface import CursesSurface
from lightsout.rendering.surface import RenderSurface, TerminalInitError
from lightsout.systems.board import BoardSystem
from lightsout.systems.command_input import CommandInputSystem
from lightsout.systems.input import InputSystem
from lightsout.systems.layout_system import LayoutSystem
from lightsout.systems.render import RenderSystem
from lightsout.world import create_world

logger = logging.getLogger(__name__)


class LightsOutApp:
    def __init__(
        self,
        surface: RenderSurface,
        *,
        size: int = DEFAULT_BOARD_SIZE,
        rng: Optional[random.Random] = None,
        poll_timeout_ms: int = POLL_TIMEOUT_MS,
    ):
        self.surface = surface
        self.poll_timeout_ms = poll_timeout_ms
        self.running = True
        self.event_bus = EventBus()
        self.world = create_world(
            size=size,
            terminal_size=(surface.width(), surface.height()),
            rng=rng,
        )
        # Board rules
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.layout_system = LayoutSystem(self.world, self.event_bus)

        # Input systems
        self.input_system = InputSystem(self.world, self.event_bus)
        self.command_input_system = CommandInputSystem(self.world, self.event_bus)

        self.render_system = RenderSystem(self.world, surface)
        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit_request)

    def on_quit_request(self, sender, **kwargs):
        logger.debug("Quit requested via %s", kwargs.get("source"))
        self.running = False

    def on_resize(self, width: int, height: int):
        self.event_bus.emit(EVENT_RESIZE, width=width, height=height)

    def on_mouse_press(self, x: int, y: int, button: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_release(self, x: int, y: int, button: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_key_char(self, char: str):
        self.event_bus.emit(EVENT_KEY_CHAR, char=char)

    def dispatch(self, event: InputEvent):
        if isinstance(event, ResizeEvent):
            self.on_resize(event.width, event.height)
        elif isinstance(event, MouseEvent):
            if event.action == MouseAction.PRESS:
                self.on_mouse_press(event.x, event.y, event.button)
            else:
                self.on_mouse_release(event.x, event.y, event.button)
        elif isinstance(event, KeyEvent):
            self.on_key_char(event.char)

    def run(self) -> int:
        """Render, poll and dispatch one event per iteration until quit."""
        while self.running:
            self.render_system.process()
            event = self.surface.poll_event(self.poll_timeout_ms)
            if event is not None:
                self.dispatch(event)
        return 0


def configure_logging(log_file: Optional[str], level: str):
    root = logging.getLogger()
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        # Anything printed to stderr would land on top of the curses screen.
        root.addHandler(logging.NullHandler())


def _board_size(value: str) -> int:
    size = int(value)
    if size < 1:
        raise argparse.ArgumentTypeError("board size must be at least 1")
    return size


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Lights Out in the terminal")
    ap.add_argument("--size", type=_board_size, default=DEFAULT_BOARD_SIZE, help="Board dimension N (N x N)")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for board generation")
    ap.add_argument("--log-file", default=None, help="Write logs to this file")
    ap.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file",
    )
    args = ap.parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    rng = random.Random(args.seed)
    logger.info("Starting %dx%d game (seed=%s)", args.size, args.size, args.seed)

    def _run(stdscr) -> int:
        app = LightsOutApp(CursesSurface(stdscr), size=args.size, rng=rng)
        return app.run()

    try:
        return curses.wrapper(_run)
    except (TerminalInitError, curses.error) as exc:
        logger.error("Terminal initialisation failed: %s", exc)
        print(f"lightsout: cannot start terminal UI: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
