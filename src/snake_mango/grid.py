from dataclasses import dataclass
from typing import Iterator, Tuple

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Fixed COLS x ROWS coordinate space, (0, 0) in the top-left corner."""
    cols: int
    rows: int

    def __post_init__(self):
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"grid must be positive, got {self.cols}x{self.rows}")

    @property
    def size(self) -> int:
        return self.cols * self.rows

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cells(self) -> Iterator[Cell]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield (x, y)
