from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Board:
    """Square grid of lights stored row-major in a flat list.

    ``True`` means lit. The size is fixed for the lifetime of the component;
    cells are only changed through the helpers in ``board_ops``.
    """
    size: int
    cells: List[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}")
        if not self.cells:
            self.cells = [False] * (self.size * self.size)
        elif len(self.cells) != self.size * self.size:
            raise ValueError(f"Expected {self.size * self.size} cells, got {len(self.cells)}")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def is_lit(self, row: int, col: int) -> bool:
        return self.cells[self.index(row, col)]
