"""Random start positions built by pressing cells of a cleared board."""
from __future__ import annotations

import logging
import math
import random
from typing import List

from lightsout.components.board import Board
from lightsout.constants import GENERATION_MAX_FRACTION, GENERATION_MIN_FRACTION
from lightsout.systems.board_ops import Position, clear_board, toggle_cell

logger = logging.getLogger(__name__)


def press_count_range(size: int) -> tuple[int, int]:
    """Inclusive bounds for the number of presses used on a board of ``size``."""
    area = size * size
    return math.ceil(area * GENERATION_MIN_FRACTION), math.floor(area * GENERATION_MAX_FRACTION)


def sample_press_count(size: int, rng: random.Random) -> int:
    area = size * size
    sample = rng.uniform(area * GENERATION_MIN_FRACTION, area * GENERATION_MAX_FRACTION)
    low, high = press_count_range(size)
    # Round half away from zero; ``round`` would use banker's rounding.
    return min(max(int(math.floor(sample + 0.5)), low), high)


def generate_board(board: Board, rng: random.Random | None = None) -> List[Position]:
    """Clear ``board`` and scramble it with random presses.

    Cells are drawn with replacement, so the same cell may be pressed more
    than once. Every result is solvable because it was reached from the
    solved state. Returns the presses in the order they were applied.
    """
    rng = rng or random.Random()
    clear_board(board)
    amount = sample_press_count(board.size, rng)
    presses: List[Position] = []
    for _ in range(amount):
        row, col = divmod(rng.randrange(board.size * board.size), board.size)
        toggle_cell(board, row, col)
        presses.append((row, col))
    logger.debug("Generated %dx%d board with %d presses", board.size, board.size, amount)
    return presses
