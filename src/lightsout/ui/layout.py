from __future__ import annotations

import math
from typing import Optional, Tuple

from lightsout.components.layout import LayoutInfo
from lightsout.constants import BLOCK_HEIGHT_MARGIN, DESIGN_HEIGHT, DESIGN_WIDTH, TABLE_RECT


def compute_scale(width: int, height: int) -> Tuple[float, float]:
    """Return (horizontal, vertical) scale relative to the design resolution."""
    return width / DESIGN_WIDTH, height / DESIGN_HEIGHT


def compute_layout(width: int, height: int, size: int) -> LayoutInfo:
    """Scale the design table to a ``width`` x ``height`` terminal.

    Block height leaves ``BLOCK_HEIGHT_MARGIN`` rows for borders and HUD.
    """
    h_scale, v_scale = compute_scale(width, height)
    x, y, w, h = TABLE_RECT
    table_width = w * h_scale
    table_height = h * v_scale
    return LayoutInfo(
        table_x=x * h_scale,
        table_y=y * v_scale,
        table_width=table_width,
        table_height=table_height,
        block_width=table_width / size,
        block_height=(table_height - BLOCK_HEIGHT_MARGIN) / size,
    )


def point_in_table(layout: LayoutInfo, x: float, y: float) -> bool:
    left = math.ceil(layout.table_x)
    top = math.ceil(layout.table_y)
    if not left < x <= left + math.ceil(layout.table_width):
        return False
    return top < y <= top + math.ceil(layout.table_height)


def point_to_cell(layout: LayoutInfo, x: float, y: float) -> Tuple[int, int]:
    """Map a terminal position to raw board indices.

    The result is not validated; use ``resolve_cell`` to reject points
    outside the table or beyond the board.
    """
    row = (x - math.ceil(layout.table_x)) / math.ceil(layout.block_width)
    col = (y - math.ceil(layout.table_y)) / math.ceil(layout.block_height)
    return int(row), int(col)


def resolve_cell(layout: LayoutInfo, x: float, y: float, size: int) -> Optional[Tuple[int, int]]:
    if not point_in_table(layout, x, y):
        return None
    # Very small terminals collapse blocks to nothing; no cell can be hit.
    if math.ceil(layout.block_width) <= 0 or math.ceil(layout.block_height) <= 0:
        return None
    row, col = point_to_cell(layout, x, y)
    if row < 0 or col < 0 or row >= size or col >= size:
        return None
    return row, col


def cell_to_rect(layout: LayoutInfo, row: int, col: int) -> Tuple[int, int, int, int]:
    """Return the (x, y, w, h) outline of a cell.

    Width and height are one short of the block pitch, leaving a gap between
    neighbouring outlines.
    """
    block_w = math.ceil(layout.block_width)
    block_h = math.ceil(layout.block_height)
    x = block_w * row + math.ceil(layout.table_x)
    y = block_h * col + math.ceil(layout.table_y)
    return x, y, block_w - 1, block_h - 1
