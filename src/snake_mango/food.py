import logging
from typing import Collection, Optional

import numpy as np  # type: ignore

from .grid import Cell, Grid

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when there is no free cell left to put food on."""


class FoodSpawner:
    def __init__(self, grid: Grid, rng: Optional[np.random.Generator] = None):
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, occupied: Collection[Cell]) -> Cell:
        """Uniformly pick a cell that is not in `occupied` (rejection sampling)."""
        taken = set(occupied)
        free = self.grid.size - sum(1 for c in taken if self.grid.in_bounds(c))
        if free <= 0:
            raise BoardFullError(
                f"no free cell left on {self.grid.cols}x{self.grid.rows} grid"
            )
        while True:
            fx = int(self.rng.integers(self.grid.cols))
            fy = int(self.rng.integers(self.grid.rows))
            if (fx, fy) not in taken:
                logger.debug("food spawned at %s", (fx, fy))
                return (fx, fy)
