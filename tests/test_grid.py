import pytest

from snake_mango.grid import Grid


class TestGrid:
    def test_in_bounds_corners(self):
        grid = Grid(24, 18)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((23, 17))

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (24, 0), (0, 18), (24, 18)])
    def test_out_of_bounds(self, cell):
        assert not Grid(24, 18).in_bounds(cell)

    def test_size_and_cells(self):
        grid = Grid(3, 2)
        assert grid.size == 6
        assert list(grid.cells()) == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_rejects_empty_grid(self):
        with pytest.raises(ValueError):
            Grid(0, 5)
