from __future__ import annotations

import logging

from esper import World

from lightsout.components.board import Board
from lightsout.components.game_session import GameSession, InputMode
from lightsout.components.layout import LayoutInfo
from lightsout.constants import MAX_KEYBOARD_ROWS
from lightsout.events.bus import (
    EVENT_INPUT_MODE_CHANGED,
    EVENT_INPUT_MODE_REJECTED,
    EventBus,
)

logger = logging.getLogger(__name__)


def session_entity(world: World) -> int:
    for entity, _ in world.get_component(GameSession):
        return entity
    raise RuntimeError("GameSession not found")


def get_session(world: World) -> GameSession:
    for _, session in world.get_component(GameSession):
        return session
    raise RuntimeError("GameSession not found")


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_layout(world: World) -> LayoutInfo:
    for _, layout in world.get_component(LayoutInfo):
        return layout
    raise RuntimeError("LayoutInfo not found")


def replace_layout(world: World, layout: LayoutInfo) -> None:
    # add_component swaps out the previous LayoutInfo on the same entity.
    world.add_component(session_entity(world), layout)


def set_input_mode(world: World, event_bus: EventBus, mode: InputMode) -> bool:
    """Switch the session input mode, emitting a change or rejection event.

    Keyboard mode addresses rows with single letters, so boards larger than
    ``MAX_KEYBOARD_ROWS`` stay in mouse mode. Returns whether the mode is now
    ``mode``.
    """
    session = get_session(world)
    previous_mode = session.input_mode
    if previous_mode == mode:
        return True
    if mode == InputMode.KEYBOARD:
        size = get_board(world).size
        if size > MAX_KEYBOARD_ROWS:
            reason = f"Board is too large for keyboard input (max {MAX_KEYBOARD_ROWS} rows)."
            session.message = reason
            logger.debug("Rejected keyboard mode for %dx%d board", size, size)
            event_bus.emit(EVENT_INPUT_MODE_REJECTED, requested_mode=mode, reason=reason)
            return False
    session.input_mode = mode
    session.input_buffer.clear()
    if mode == InputMode.KEYBOARD:
        session.message = "Keyboard mode: type a cell like A1, or :K for mouse."
    else:
        session.message = "Mouse mode: click a cell, press 'k' for keyboard."
    logger.debug("Input mode %s -> %s", previous_mode.name, mode.name)
    event_bus.emit(EVENT_INPUT_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
    return True


def toggle_input_mode(world: World, event_bus: EventBus) -> bool:
    session = get_session(world)
    target = InputMode.KEYBOARD if session.input_mode == InputMode.MOUSE else InputMode.MOUSE
    return set_input_mode(world, event_bus, target)
