#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Grid Module
=================================
Copyright (c) 2025 PNGN-Tec LLC

Cell Canvas
===========
The Grid is the fixed-size canvas every pipeline stage reads and writes.
Cells are stored row-major; width and height never change for the lifetime
of an instance, and any coordinate outside them raises GridIndexError.
Stages that need a different size (shadow, padding, borders) build a new
Grid and blit onto it.

Numpy views (occupancy masks and float color planes) let the color and
animation stages do their per-cell math vectorized, then write the results
back with apply_colors().
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from neon_config import RGBColor, WHITE
from neon_errors import GridIndexError

# Configure logging
logger = logging.getLogger('neon_grid')


@dataclass
class Cell:
    """
    Single grid cell with complete styling context.

    alpha is the intensity used by blending passes; 0.0 marks an empty cell,
    which always renders as a bare space with no color codes.
    """
    char: str = ' '
    fg: Optional[RGBColor] = None
    bg: Optional[RGBColor] = None
    alpha: float = 0.0

    @property
    def occupied(self) -> bool:
        return self.alpha > 0.0

    @classmethod
    def glyph(cls, char: str, fg: Optional[RGBColor] = None) -> 'Cell':
        """Occupied cell showing char (a space yields an empty cell)"""
        if char == ' ':
            return cls()
        return cls(char=char, fg=fg, alpha=1.0)

    def copy(self) -> 'Cell':
        return replace(self)


class Grid:
    """
    Rectangular, fixed-size canvas of Cells in row-major order.

    Attributes:
        width: Columns (constant)
        height: Rows (constant)
    """

    def __init__(self, width: int, height: int, cells: Optional[List[Cell]] = None):
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        if cells is None:
            cells = [Cell() for _ in range(width * height)]
        elif len(cells) != width * height:
            raise ValueError(f"Expected {width * height} cells, got {len(cells)}")
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Grid':
        """
        Build a grid from text rows; shorter rows are right-padded and
        every non-space character becomes an occupied cell.
        """
        width = max((len(row) for row in rows), default=0)
        cells = []
        for row in rows:
            cells.extend(Cell.glyph(char) for char in row.ljust(width))
        return cls(width, len(rows), cells)

    # ------------------------------------------------------------------------
    # Dimensions and access
    # ------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), numpy order"""
        return (self._height, self._width)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise GridIndexError(row, col, self._height, self._width)
        return row * self._width + col

    def get(self, row: int, col: int) -> Cell:
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, cell: Cell) -> None:
        self._cells[self._index(row, col)] = cell

    def clear(self, row: int, col: int) -> None:
        self._cells[self._index(row, col)] = Cell()

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        return self.get(*position)

    def __setitem__(self, position: Tuple[int, int], cell: Cell) -> None:
        self.set(position[0], position[1], cell)

    def row(self, row: int) -> List[Cell]:
        """Cells of one row (the list is a copy, the cells are shared)"""
        if not 0 <= row < self._height:
            raise GridIndexError(row, 0, self._height, self._width)
        start = row * self._width
        return self._cells[start:start + self._width]

    def rows(self) -> Iterator[List[Cell]]:
        for row in range(self._height):
            yield self.row(row)

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (row, col, cell) in row-major order"""
        for index, cell in enumerate(self._cells):
            yield index // self._width, index % self._width, cell

    def copy(self) -> 'Grid':
        """Deep copy; cells are never shared between grids"""
        return Grid(self._width, self._height, [cell.copy() for cell in self._cells])

    # ------------------------------------------------------------------------
    # Text views
    # ------------------------------------------------------------------------

    def row_text(self, row: int) -> str:
        return ''.join(cell.char if cell.occupied else ' ' for cell in self.row(row))

    def to_text(self) -> str:
        """Characters only, rows joined by newlines"""
        return '\n'.join(self.row_text(row) for row in range(self._height))

    def lines(self) -> List[str]:
        return [self.row_text(row) for row in range(self._height)]

    def is_row_empty(self, row: int) -> bool:
        return not any(cell.occupied for cell in self.row(row))

    def occupied_count(self) -> int:
        return sum(1 for cell in self._cells if cell.occupied)

    # ------------------------------------------------------------------------
    # Numpy views
    # ------------------------------------------------------------------------

    def occupancy(self) -> np.ndarray:
        """Boolean (height, width) mask of occupied cells"""
        flat = np.fromiter((cell.occupied for cell in self._cells), dtype=bool,
                           count=len(self._cells))
        return flat.reshape(self.shape)

    def colored(self) -> np.ndarray:
        """Boolean (height, width) mask of occupied cells that carry an fg"""
        flat = np.fromiter((cell.occupied and cell.fg is not None for cell in self._cells),
                           dtype=bool, count=len(self._cells))
        return flat.reshape(self.shape)

    def color_planes(self, default: RGBColor = WHITE) -> Tuple[np.ndarray, np.ndarray]:
        """
        Foreground colors as a float array.

        Args:
            default: Color used for occupied cells that have no fg

        Returns:
            (colors, mask): colors has shape (height, width, 3); mask marks
            occupied cells
        """
        colors = np.zeros((self._height, self._width, 3), dtype=np.float64)
        mask = np.zeros(self.shape, dtype=bool)
        for row, col, cell in self.iter_cells():
            if cell.occupied:
                colors[row, col] = cell.fg if cell.fg is not None else default
                mask[row, col] = True
        return colors, mask

    def apply_colors(self, colors: np.ndarray, mask: np.ndarray) -> None:
        """
        Write foreground colors back for every cell where mask is set.

        Values are rounded half-up and clamped to 0..255.
        """
        rounded = np.clip(np.floor(np.asarray(colors, dtype=np.float64) + 0.5), 0, 255)
        rounded = rounded.astype(np.int64)
        for row, col in np.argwhere(mask):
            cell = self._cells[row * self._width + col]
            r, g, b = rounded[row, col]
            cell.fg = (int(r), int(g), int(b))

    # ------------------------------------------------------------------------
    # Compositing
    # ------------------------------------------------------------------------

    def blit(self, other: 'Grid', top: int, left: int, occupied_only: bool = True) -> None:
        """
        Copy another grid onto this one at (top, left).

        Cells of other landing outside this grid are dropped; compositing is
        the one place where clipping at the edge is the defined behavior.
        """
        for row, col, cell in other.iter_cells():
            if occupied_only and not cell.occupied:
                continue
            target_row = top + row
            target_col = left + col
            if self.in_bounds(target_row, target_col):
                self._cells[target_row * self._width + target_col] = cell.copy()

    def crop(self, top: int, left: int, height: int, width: int) -> 'Grid':
        """New grid holding the given window; the window must lie inside"""
        if height < 0 or width < 0 or top < 0 or left < 0 \
                or top + height > self._height or left + width > self._width:
            raise GridIndexError(top + height - 1, left + width - 1, self._height, self._width)
        cells = []
        for row in range(top, top + height):
            start = row * self._width + left
            cells.extend(cell.copy() for cell in self._cells[start:start + width])
        return Grid(width, height, cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height}, occupied={self.occupied_count()})"


def trim_vertical(grid: Grid) -> Grid:
    """
    Remove fully empty rows from the top and bottom only.

    Interior blank rows and columns are never touched; a grid without
    leading or trailing blank rows comes back as an equal copy.
    """
    top = 0
    bottom = grid.height
    while top < bottom and grid.is_row_empty(top):
        top += 1
    while bottom > top and grid.is_row_empty(bottom - 1):
        bottom -= 1
    if top == 0 and bottom == grid.height:
        return grid.copy()
    logger.debug(f"Trimmed {top} top and {grid.height - bottom} bottom rows")
    return grid.crop(top, 0, bottom - top, grid.width)
