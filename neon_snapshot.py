#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Raster Snapshot
=====================================
Copyright (c) 2025 PNGN-Tec LLC

Pixel-art snapshots of banners for previews and docs.

Each cell becomes a cell_size rectangle. Shade characters blend their
color into the background by coverage (░ 25%, ▒ 50%, ▓ 75%); every other
occupied character paints the full cell. Occupied cells without an fg use
the terminal default foreground (white). Animations export as a looping
GIF with Pillow's multi-frame save.
"""

import io
import logging
from typing import Dict, Iterable, Tuple

import numpy as np
from PIL import Image

from neon_config import BLACK, DEFAULT_FRAME_MS, RGBColor, WHITE
from neon_grid import Grid

# Configure logging
logger = logging.getLogger('neon_snapshot')

# Fraction of the cell each character covers
COVERAGE: Dict[str, float] = {
    '░': 0.25,
    '▒': 0.5,
    '▓': 0.75,
    '·': 0.2,
    ':': 0.3,
}

DEFAULT_CELL_SIZE = (6, 12)


def grid_to_array(grid: Grid, background: RGBColor = BLACK) -> np.ndarray:
    """One RGB pixel per cell, uint8 array of shape (height, width, 3)"""
    pixels = np.empty((grid.height, grid.width, 3), dtype=np.float64)
    pixels[:] = background
    back = np.asarray(background, dtype=np.float64)
    for row, col, cell in grid.iter_cells():
        if not cell.occupied:
            continue
        fg = np.asarray(cell.fg if cell.fg is not None else WHITE, dtype=np.float64)
        base = np.asarray(cell.bg, dtype=np.float64) if cell.bg is not None else back
        coverage = COVERAGE.get(cell.char, 1.0)
        pixels[row, col] = base + (fg - base) * coverage
    return np.clip(np.floor(pixels + 0.5), 0, 255).astype(np.uint8)


def grid_to_image(grid: Grid, cell_size: Tuple[int, int] = DEFAULT_CELL_SIZE,
                  background: RGBColor = BLACK) -> Image.Image:
    """
    Rasterize a grid.

    Args:
        grid: Grid to draw
        cell_size: (width, height) of one cell in pixels
        background: Color of empty cells

    Returns:
        RGB image of size (grid.width * cell_w, grid.height * cell_h)
    """
    cell_w, cell_h = cell_size
    if cell_w < 1 or cell_h < 1:
        raise ValueError(f"Cell size must be positive, got {cell_size}")
    pixels = grid_to_array(grid, background)
    if pixels.size == 0:
        return Image.new('RGB', (max(1, grid.width * cell_w), max(1, grid.height * cell_h)),
                         background)
    image = Image.fromarray(pixels, 'RGB')
    return image.resize((grid.width * cell_w, grid.height * cell_h), Image.NEAREST)


def frames_to_gif(frames: Iterable[Grid], duration_ms: int = DEFAULT_FRAME_MS, loop: int = 0,
                  cell_size: Tuple[int, int] = DEFAULT_CELL_SIZE,
                  background: RGBColor = BLACK) -> bytes:
    """
    Encode frames as an animated GIF.

    Args:
        frames: Grids in playback order (e.g. an AnimationFrames)
        duration_ms: Display time per frame
        loop: GIF loop count, 0 loops forever

    Returns:
        GIF file contents
    """
    images = [grid_to_image(frame, cell_size, background) for frame in frames]
    if not images:
        raise ValueError("No frames to encode")

    buffer = io.BytesIO()
    images[0].save(
        buffer,
        format='GIF',
        save_all=True,
        append_images=images[1:],
        duration=duration_ms,
        loop=loop,
        optimize=False
    )
    logger.debug(f"Encoded {len(images)} frames into {buffer.tell()} byte GIF")
    return buffer.getvalue()
