"""Terminal-independent input events produced by a render surface."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class MouseAction(Enum):
    PRESS = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyEvent:
    char: str


@dataclass(frozen=True)
class MouseEvent:
    action: MouseAction
    x: int
    y: int
    button: int = 1


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


InputEvent = Union[KeyEvent, MouseEvent, ResizeEvent]
