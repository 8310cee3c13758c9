"""Tests for the Grid canvas"""

import numpy as np
import pytest

from neon_errors import GridIndexError
from neon_grid import Cell, Grid, trim_vertical


class TestGridAccess:
    def test_new_grid_is_empty(self):
        grid = Grid(4, 2)
        assert grid.shape == (2, 4)
        assert grid.occupied_count() == 0
        assert grid.to_text() == "    \n    "

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 4), (-1, 0), (0, -1)])
    def test_out_of_bounds_raises(self, row, col):
        grid = Grid(4, 2)
        with pytest.raises(GridIndexError):
            grid.get(row, col)
        with pytest.raises(IndexError):
            grid.set(row, col, Cell.glyph('x'))

    def test_set_and_get(self):
        grid = Grid(3, 3)
        grid[1, 2] = Cell.glyph('x', (1, 2, 3))
        assert grid.get(1, 2).char == 'x'
        assert grid[1, 2].fg == (1, 2, 3)
        assert grid.row_text(1) == "  x"

    def test_space_glyph_is_empty(self):
        assert not Cell.glyph(' ').occupied
        assert Cell.glyph('#').occupied

    def test_copy_is_deep(self):
        grid = Grid.from_rows(["ab"])
        clone = grid.copy()
        clone.get(0, 0).char = 'z'
        assert grid.get(0, 0).char == 'a'
        assert clone != grid

    def test_from_rows_pads_short_rows(self):
        grid = Grid.from_rows(["abc", "d"])
        assert grid.width == 3
        assert grid.lines() == ["abc", "d  "]

    def test_cell_count_must_match(self):
        with pytest.raises(ValueError):
            Grid(2, 2, [Cell()])


class TestNumpyViews:
    def test_occupancy(self):
        grid = Grid.from_rows(["a ", " b"])
        assert grid.occupancy().tolist() == [[True, False], [False, True]]

    def test_colored_mask_skips_uncolored_cells(self):
        grid = Grid.from_rows(["ab"])
        grid.get(0, 0).fg = (1, 1, 1)
        assert grid.colored().tolist() == [[True, False]]

    def test_color_planes_default(self):
        grid = Grid.from_rows(["a "])
        colors, mask = grid.color_planes(default=(9, 9, 9))
        assert colors[0, 0].tolist() == [9, 9, 9]
        assert mask.tolist() == [[True, False]]

    def test_apply_colors_rounds_half_up(self):
        grid = Grid.from_rows(["ab"])
        colors = np.array([[[127.5, 0.49, 300.0], [1.0, 2.0, 3.0]]])
        grid.apply_colors(colors, np.array([[True, False]]))
        assert grid.get(0, 0).fg == (128, 0, 255)
        assert grid.get(0, 1).fg is None


class TestCompositing:
    def test_blit_clips_at_edges(self):
        target = Grid(3, 2)
        target.blit(Grid.from_rows(["xy", "zw"]), 1, 2)
        assert target.lines() == ["   ", "  x"]

    def test_blit_occupied_only_keeps_background(self):
        target = Grid.from_rows(["...."])
        target.blit(Grid.from_rows(["a b"]), 0, 0)
        assert target.lines() == ["a.b."]

    def test_crop(self):
        grid = Grid.from_rows(["abc", "def"])
        assert grid.crop(1, 1, 1, 2).lines() == ["ef"]
        with pytest.raises(GridIndexError):
            grid.crop(1, 1, 2, 2)


class TestTrimVertical:
    def test_removes_outer_blank_rows_only(self):
        grid = Grid.from_rows(["   ", "a  ", "   ", "  b", "   "])
        trimmed = trim_vertical(grid)
        assert trimmed.lines() == ["a  ", "   ", "  b"]

    def test_idempotent(self):
        grid = Grid.from_rows(["  ", "ab", "  "])
        once = trim_vertical(grid)
        assert trim_vertical(once) == once

    def test_no_blank_rows_keeps_size(self):
        grid = Grid.from_rows(["a", "b"])
        trimmed = trim_vertical(grid)
        assert trimmed.shape == grid.shape
        assert trimmed == grid
        assert trimmed is not grid

    def test_all_blank_grid(self):
        assert trim_vertical(Grid(2, 3)).shape == (0, 2)
