#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Border Frames
===================================
Copyright (c) 2025 PNGN-Tec LLC

Draws a one-cell box around a finished banner. The frame is either
uncolored, a single stroke color, or a gradient evaluated over the full
framed bounds so it lines up with a gradient of the same direction.
"""

import logging

from neon_color import Gradient, Palette
from neon_config import BorderConfig
from neon_grid import Cell, Grid

# Configure logging
logger = logging.getLogger('neon_border')


def apply_border(grid: Grid, border: BorderConfig) -> Grid:
    """
    Frame a grid.

    Args:
        grid: Banner to frame (unchanged)
        border: Box characters and stroke coloring

    Returns:
        New grid two columns wider and two rows taller, with the occupied
        inner cells copied to (1, 1)
    """
    top_left, top_right, bottom_left, bottom_right, horizontal, vertical = border.glyphs()
    width = grid.width + 2
    height = grid.height + 2
    out = Grid(width, height)

    colors = None
    if border.palette is not None:
        gradient = Gradient(Palette(border.palette), border.direction)
        colors = gradient.colors_at(gradient.positions(height, width))

    def stroke(row: int, col: int, char: str) -> None:
        fg = border.color
        if colors is not None:
            fg = tuple(int(min(255.0, max(0.0, channel + 0.5))) for channel in colors[row, col])
        out.set(row, col, Cell(char=char, fg=fg, alpha=1.0))

    for col in range(1, width - 1):
        stroke(0, col, horizontal)
        stroke(height - 1, col, horizontal)
    for row in range(1, height - 1):
        stroke(row, 0, vertical)
        stroke(row, width - 1, vertical)
    stroke(0, 0, top_left)
    stroke(0, width - 1, top_right)
    stroke(height - 1, 0, bottom_left)
    stroke(height - 1, width - 1, bottom_right)

    out.blit(grid, 1, 1, occupied_only=True)
    logger.debug(f"Framed {grid!r} with {border.style.value} border")
    return out
