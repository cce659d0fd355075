from __future__ import annotations

from typing import Any

from esper import World

from lightsout.components.game_session import InputMode
from lightsout.constants import MOUSE_BUTTON_LEFT
from lightsout.events.bus import (
    EVENT_CELL_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EventBus,
)
from lightsout.ui.layout import resolve_cell
from lightsout.utils.session import get_board, get_layout, get_session


class InputSystem:
    """Turns left clicks on the table into cell presses while in mouse mode.

    One press registers per press/release cycle: a left press closes the
    session latch and only a release opens it again.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)

    def on_mouse_press(self, sender: Any, **payload: Any) -> None:
        x = payload.get('x')
        y = payload.get('y')
        button = payload.get('button')
        if x is None or y is None or button is None:
            return
        try:
            xf = float(x)
            yf = float(y)
            button_int = int(button)
        except (TypeError, ValueError):
            return
        if button_int != MOUSE_BUTTON_LEFT:
            return
        session = get_session(self.world)
        if session.input_mode != InputMode.MOUSE:
            return
        if session.mouse_released and not session.has_won:
            size = get_board(self.world).size
            cell = resolve_cell(get_layout(self.world), xf, yf, size)
            if cell is not None:
                self.event_bus.emit(EVENT_CELL_PRESS, row=cell[0], col=cell[1], source='mouse')
        session.mouse_released = False

    def on_mouse_release(self, sender: Any, **payload: Any) -> None:
        get_session(self.world).mouse_released = True
