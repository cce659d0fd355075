import logging

from esper import World

from lightsout.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_CELL_PRESS,
    EVENT_PUZZLE_SOLVED,
    EVENT_RESET_REQUEST,
    EVENT_SESSION_RESET,
    EventBus,
)
from lightsout.factories.board import generate_board
from lightsout.systems.board_ops import is_solved, toggle_cell
from lightsout.utils.session import get_board, get_session

logger = logging.getLogger(__name__)


class BoardSystem:
    """Applies accepted cell presses and session resets to the board."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_PRESS, self.on_cell_press)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)

    def on_cell_press(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        board = get_board(self.world)
        session = get_session(self.world)
        if session.has_won or not board.in_bounds(row, col):
            return
        flipped = toggle_cell(board, row, col)
        session.moves += 1
        session.has_won = is_solved(board)
        logger.debug("Pressed (%d, %d) via %s, move %d", row, col, kwargs.get('source', 'unknown'), session.moves)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='press', positions=flipped)
        if session.has_won:
            session.message = f"Solved in {session.moves} moves!"
            logger.info("Board solved in %d moves", session.moves)
            self.event_bus.emit(EVENT_PUZZLE_SOLVED, moves=session.moves)

    def on_reset_request(self, sender, **kwargs):
        self.reset()

    def reset(self):
        board = get_board(self.world)
        session = get_session(self.world)
        presses = generate_board(board, getattr(self.world, 'random', None))
        session.moves = 0
        session.has_won = False
        session.input_buffer.clear()
        session.message = "New board."
        logger.debug("Session reset with %d presses", len(presses))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='reset', positions=[])
        self.event_bus.emit(EVENT_SESSION_RESET, presses=len(presses))
