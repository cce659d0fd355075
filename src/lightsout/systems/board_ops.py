from __future__ import annotations

from typing import List, Tuple

from lightsout.components.board import Board

Position = Tuple[int, int]

# Orthogonal neighbours, no wraparound at the edges.
_NEIGHBOUR_OFFSETS: Tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def toggle_cell(board: Board, row: int, col: int) -> List[Position]:
    """Flip the light at (row, col) and its existing orthogonal neighbours.

    Applying the same press twice restores the previous board. Returns the
    positions that changed, pressed cell first.
    """
    if not board.in_bounds(row, col):
        raise ValueError(f"Cell ({row}, {col}) outside {board.size}x{board.size} board")
    flipped: List[Position] = [(row, col)]
    for dr, dc in _NEIGHBOUR_OFFSETS:
        r, c = row + dr, col + dc
        if board.in_bounds(r, c):
            flipped.append((r, c))
    for r, c in flipped:
        idx = board.index(r, c)
        board.cells[idx] = not board.cells[idx]
    return flipped


def is_solved(board: Board) -> bool:
    return not any(board.cells)


def clear_board(board: Board) -> None:
    for idx in range(len(board.cells)):
        board.cells[idx] = False


def lit_count(board: Board) -> int:
    return sum(1 for lit in board.cells if lit)


def lit_positions(board: Board) -> List[Position]:
    return [divmod(idx, board.size) for idx, lit in enumerate(board.cells) if lit]
