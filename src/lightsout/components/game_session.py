"""Session resource describing progress and the active input mode."""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class InputMode(Enum):
    """How the player addresses cells."""
    MOUSE = auto()
    KEYBOARD = auto()


@dataclass
class GameSession:
    """Singleton component storing per-session progress.

    ``mouse_released`` latches a left press until the button comes back up so
    a held button only toggles once.
    """
    moves: int = 0
    has_won: bool = False
    input_mode: InputMode = InputMode.MOUSE
    input_buffer: List[str] = field(default_factory=list)
    message: str = ""
    mouse_released: bool = True

    @property
    def buffer_text(self) -> str:
        return "".join(self.input_buffer)
