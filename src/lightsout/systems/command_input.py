"""Character input: single-key commands in mouse mode, typed cells in keyboard mode."""
from __future__ import annotations

import logging
from typing import Any

from esper import World

from lightsout.components.game_session import GameSession, InputMode
from lightsout.constants import (
    BACKSPACE_SIGNAL,
    COMMAND_PREFIX,
    COMMAND_QUIT,
    COMMAND_RESET,
    COMMAND_TOGGLE_MODE,
)
from lightsout.events.bus import (
    EVENT_CELL_PRESS,
    EVENT_KEY_CHAR,
    EVENT_QUIT_REQUEST,
    EVENT_RESET_REQUEST,
    EventBus,
)
from lightsout.utils.coordinates import parse_cell_coordinate
from lightsout.utils.session import get_board, get_session, toggle_input_mode

logger = logging.getLogger(__name__)


class CommandInputSystem:
    """Interprets characters according to the session input mode."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_CHAR, self.on_key_char)

    def on_key_char(self, sender: Any, **payload: Any) -> None:
        char = payload.get("char")
        if not isinstance(char, str) or len(char) != 1:
            return
        session = get_session(self.world)
        if session.input_mode == InputMode.KEYBOARD:
            self.handle_keyboard_char(session, char)
        else:
            self.run_command(char)

    def run_command(self, command: str) -> bool:
        """Execute ``command`` (case-insensitive). Returns False if unknown."""
        name = command.upper()
        source = get_session(self.world).input_mode.name.lower()
        if name == COMMAND_QUIT:
            self.event_bus.emit(EVENT_QUIT_REQUEST, source=source)
        elif name == COMMAND_RESET:
            self.event_bus.emit(EVENT_RESET_REQUEST, source=source)
        elif name == COMMAND_TOGGLE_MODE:
            toggle_input_mode(self.world, self.event_bus)
        else:
            return False
        return True

    def handle_keyboard_char(self, session: GameSession, char: str) -> None:
        if char == BACKSPACE_SIGNAL:
            if session.input_buffer:
                session.input_buffer.pop()
            return
        session.input_buffer.append(char.upper())
        buffer = session.buffer_text

        if buffer.startswith(COMMAND_PREFIX):
            command = buffer[len(COMMAND_PREFIX):]
            # Unknown commands stay in the buffer until backspaced.
            if command and self.run_command(command):
                session.input_buffer.clear()
            return

        if len(buffer) < 2:
            return
        cell = parse_cell_coordinate(buffer)
        if cell is None:
            return
        row, col = cell
        if not get_board(self.world).in_bounds(row, col):
            # Wait for more digits, e.g. "A1" on the way to "A12".
            return
        session.input_buffer.clear()
        if session.has_won:
            return
        logger.debug("Typed cell %s", buffer)
        self.event_bus.emit(EVENT_CELL_PRESS, row=row, col=col, source="keyboard")
