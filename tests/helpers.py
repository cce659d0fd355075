from __future__ import annotations

import random
from collections import deque
from typing import Iterable, Sequence

from esper import World

from lightsout.events.bus import EventBus
from lightsout.events.input_events import InputEvent
from lightsout.rendering.surface import Color
from lightsout.systems.board import BoardSystem
from lightsout.systems.command_input import CommandInputSystem
from lightsout.systems.input import InputSystem
from lightsout.systems.layout_system import LayoutSystem
from lightsout.utils.session import get_board
from lightsout.world import create_world


def make_session(
    size: int = 5,
    *,
    lit: Iterable[tuple[int, int]] = (),
    terminal_size: tuple[int, int] = (80, 24),
    seed: int = 1234,
) -> tuple[EventBus, World]:
    """Create a bus and world with every core system attached.

    The board starts cleared apart from the ``lit`` positions.
    """
    bus = EventBus()
    world = create_world(size=size, terminal_size=terminal_size, rng=random.Random(seed), scramble=False)
    board = get_board(world)
    for row, col in lit:
        board.cells[board.index(row, col)] = True
    BoardSystem(world, bus)
    LayoutSystem(world, bus)
    InputSystem(world, bus)
    CommandInputSystem(world, bus)
    return bus, world


class EventCapture:
    """Records the payloads emitted for one event name."""

    def __init__(self, bus: EventBus, name: str):
        self.received: list[dict] = []
        bus.subscribe(name, self.on_event)

    def on_event(self, sender, **payload):
        self.received.append(payload)


class FakeSurface:
    """In-memory render surface fed from a scripted list of input events."""

    def __init__(self, width: int = 80, height: int = 24, events: Sequence[InputEvent | None] = ()):
        self._width = width
        self._height = height
        self.events = deque(events)
        self.cells: dict[tuple[int, int], tuple[str, Color, Color, bool]] = {}
        self.presented = 0
        self.polls = 0

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    def clear(self) -> None:
        self.cells.clear()

    def put(self, x: int, y: int, ch: str, fg: Color, bg: Color, bold: bool = False) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self.cells[(x, y)] = (ch, fg, bg, bold)

    def present(self) -> None:
        self.presented += 1

    def poll_event(self, timeout_ms: int):
        self.polls += 1
        if self.events:
            return self.events.popleft()
        return None

    def char_at(self, x: int, y: int) -> str:
        entry = self.cells.get((x, y))
        return entry[0] if entry else ' '

    def row_text(self, y: int) -> str:
        return ''.join(self.char_at(x, y) for x in range(self._width))
