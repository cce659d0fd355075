"""Render surface backed by the terminal through ``curses``."""
from __future__ import annotations

import curses
import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Tuple, Union

from lightsout.constants import BACKSPACE_SIGNAL, MOUSE_BUTTON_LEFT
from lightsout.events.input_events import InputEvent, KeyEvent, MouseAction, MouseEvent, ResizeEvent
from lightsout.rendering.surface import Color, TerminalInitError

logger = logging.getLogger(__name__)

CURSES_COLORS = {
    Color.BLACK: curses.COLOR_BLACK,
    Color.WHITE: curses.COLOR_WHITE,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.GREEN: curses.COLOR_GREEN,
    Color.RED: curses.COLOR_RED,
    Color.CYAN: curses.COLOR_CYAN,
}

BACKSPACE_CHARS = ('\x7f', '\b')

MouseReader = Callable[[], Tuple[int, int, int, int, int]]
SizeReader = Callable[[], Tuple[int, int]]


def translate_key(key: Union[int, str], read_mouse: MouseReader, read_size: SizeReader) -> List[InputEvent]:
    """Convert one ``get_wch`` result into zero or more input events.

    ``read_mouse`` returns ``curses.getmouse()``-style tuples and
    ``read_size`` returns ``(width, height)``. A combined click report is
    split into a press followed by a release.
    """
    if isinstance(key, str):
        if key in BACKSPACE_CHARS:
            return [KeyEvent(BACKSPACE_SIGNAL)]
        if key.isprintable():
            return [KeyEvent(key)]
        return []
    if key == curses.KEY_RESIZE:
        width, height = read_size()
        return [ResizeEvent(width, height)]
    if key == curses.KEY_BACKSPACE:
        return [KeyEvent(BACKSPACE_SIGNAL)]
    if key == curses.KEY_MOUSE:
        try:
            _, x, y, _, bstate = read_mouse()
        except curses.error:
            return []
        if bstate & curses.BUTTON1_PRESSED:
            return [MouseEvent(MouseAction.PRESS, x, y, MOUSE_BUTTON_LEFT)]
        if bstate & curses.BUTTON1_RELEASED:
            return [MouseEvent(MouseAction.RELEASE, x, y, MOUSE_BUTTON_LEFT)]
        if bstate & curses.BUTTON1_CLICKED:
            return [
                MouseEvent(MouseAction.PRESS, x, y, MOUSE_BUTTON_LEFT),
                MouseEvent(MouseAction.RELEASE, x, y, MOUSE_BUTTON_LEFT),
            ]
    return []


class CursesSurface:
    """Draws styled characters with curses and reads keyboard, mouse and resize input."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr
        self._pairs: Dict[Tuple[Color, Color], int] = {}
        self._pending: Deque[InputEvent] = deque()
        self._colors = False
        try:
            self.stdscr.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor")
            available, _ = curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
            if not available:
                logger.warning("Terminal does not report mouse events; use keyboard mode")
            # Report press and release separately instead of waiting for clicks.
            curses.mouseinterval(0)
            if curses.has_colors():
                curses.start_color()
                self._colors = True
        except curses.error as exc:
            raise TerminalInitError(f"Could not initialise terminal: {exc}") from exc

    def width(self) -> int:
        return self.stdscr.getmaxyx()[1]

    def height(self) -> int:
        return self.stdscr.getmaxyx()[0]

    def clear(self) -> None:
        self.stdscr.erase()

    def put(self, x: int, y: int, ch: str, fg: Color, bg: Color, bold: bool = False) -> None:
        height, width = self.stdscr.getmaxyx()
        if not (0 <= x < width and 0 <= y < height):
            return
        attr = self._attr(fg, bg)
        if bold:
            attr |= curses.A_BOLD
        try:
            self.stdscr.addstr(y, x, ch, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass

    def present(self) -> None:
        self.stdscr.refresh()

    def poll_event(self, timeout_ms: int) -> Optional[InputEvent]:
        if self._pending:
            return self._pending.popleft()
        self.stdscr.timeout(timeout_ms)
        try:
            key = self.stdscr.get_wch()
        except curses.error:
            return None
        self._pending.extend(translate_key(key, curses.getmouse, self._size))
        if self._pending:
            return self._pending.popleft()
        return None

    def _size(self) -> Tuple[int, int]:
        height, width = self.stdscr.getmaxyx()
        return width, height

    def _attr(self, fg: Color, bg: Color) -> int:
        if not self._colors:
            return curses.A_REVERSE if bg != Color.BLACK else curses.A_NORMAL
        pair = self._pairs.get((fg, bg))
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return curses.A_NORMAL
            curses.init_pair(pair, CURSES_COLORS[fg], CURSES_COLORS[bg])
            self._pairs[(fg, bg)] = pair
        return curses.color_pair(pair)
