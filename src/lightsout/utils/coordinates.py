from __future__ import annotations

import string
from typing import Optional, Sequence, Tuple

ROW_LETTERS = string.ascii_uppercase


def parse_cell_coordinate(text: Sequence[str]) -> Optional[Tuple[int, int]]:
    """Parse ``<Letter><Digits>`` into zero-based (row, col).

    Returns ``None`` when the text does not have that shape. The indices are
    not range checked, so ``A0`` yields column -1.
    """
    if len(text) < 2:
        return None
    letter = text[0].upper()
    if letter not in ROW_LETTERS:
        return None
    digits = "".join(text[1:])
    if not all(ch in string.digits for ch in digits):
        return None
    return ROW_LETTERS.index(letter), int(digits) - 1


def format_cell_label(row: int, col: int) -> str:
    if not 0 <= row < len(ROW_LETTERS):
        return ""
    return f"{ROW_LETTERS[row]}{col + 1}"
