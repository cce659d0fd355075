from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Protocol

from lightsout.events.input_events import InputEvent


class Color(Enum):
    BLACK = auto()
    WHITE = auto()
    YELLOW = auto()
    GREEN = auto()
    RED = auto()
    CYAN = auto()


class TerminalInitError(RuntimeError):
    """Raised when a render surface cannot take over the terminal."""


class RenderSurface(Protocol):
    """Character-cell surface the game draws on and reads input from.

    Writes outside ``width()`` x ``height()`` must be dropped silently.
    """

    def width(self) -> int: ...

    def height(self) -> int: ...

    def clear(self) -> None: ...

    def put(self, x: int, y: int, ch: str, fg: Color, bg: Color, bold: bool = False) -> None: ...

    def present(self) -> None: ...

    def poll_event(self, timeout_ms: int) -> Optional[InputEvent]: ...
