import logging
import random

from esper import World
from lightsout.components.board import Board
from lightsout.components.game_session import GameSession
from lightsout.constants import DEFAULT_BOARD_SIZE, DESIGN_HEIGHT, DESIGN_WIDTH
from lightsout.factories.board import generate_board
from lightsout.ui.layout import compute_layout

logger = logging.getLogger(__name__)


def create_world(
    *,
    size: int = DEFAULT_BOARD_SIZE,
    terminal_size: tuple[int, int] = (DESIGN_WIDTH, DESIGN_HEIGHT),
    rng: random.Random | None = None,
    scramble: bool = True,
) -> World:
    """Build a world holding the single session entity.

    The session entity carries the Board, GameSession and LayoutInfo
    components. ``rng`` becomes ``world.random`` and drives every board
    generation, so a seeded source gives reproducible sessions. Pass
    ``scramble=False`` to start from a cleared board.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    board = Board(size=size)
    if scramble:
        generate_board(board, world.random)
    width, height = terminal_size
    world.create_entity(
        board,
        GameSession(),
        compute_layout(width, height, size),
    )
    logger.debug("Created %dx%d session for %dx%d terminal", size, size, width, height)
    return world
