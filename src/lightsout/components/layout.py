from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LayoutInfo:
    """Physical placement of the board table for one terminal size.

    Values stay fractional; callers round up when placing characters. A new
    instance replaces the old one on every resize.
    """
    table_x: float
    table_y: float
    table_width: float
    table_height: float
    block_width: float
    block_height: float
