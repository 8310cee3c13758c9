#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Fill & Dither Engine
==========================================
Copyright (c) 2025 PNGN-Tec LLC

Replaces the characters of occupied cells. Colors are never touched here;
the gradient stage runs first and dithering reads the colors it left.

Fill Modes
==========
- keep:   glyph characters stay as drawn by the font
- blocks: every occupied cell becomes a solid block
- solid:  every occupied cell becomes ``fill.char``
- pixel:  ``fill.char`` thinned to ``fill.density`` with a 4x4 Bayer matrix

Dither Modes
============
Brightness b is the cell's luminance / 255 (1.0 when uncolored) and the
ramp level is b * (len(ramp) - 1).

- checker: ordered dither; the fractional part of the level is compared to
  a per-position threshold ((row + col) % period + 0.5) / period
- noise:   seeded 32-bit avalanche hash per cell; bits 8..15 offset the
  level, bits 0..7 pick stipple cells against ``threshold``

Stipple cells (checker: (row + col) % period == 0) show dots[0] on even
(row + col) and dots[-1] on odd; without dots they step one ramp entry
sparser. Every decision is a function of coordinates, color and config,
so the same input always dithers the same way.
"""

import logging

import numpy as np

from neon_config import DitherConfig, DitherMode, FillConfig, FillMode, SOLID_BLOCK, WHITE
from neon_grid import Cell, Grid

# Configure logging
logger = logging.getLogger('neon_fill')

# Ordered dither matrix, values 0..15
BAYER_4X4 = np.array([
    [0, 8, 2, 10],
    [12, 4, 14, 6],
    [3, 11, 1, 9],
    [15, 7, 13, 5],
], dtype=np.float64)

# Rec. 709 luma weights
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

MASK32 = 0xFFFFFFFF

# ============================================================================
# HASHING
# ============================================================================

def mix_hash(seed: int, x: int, y: int) -> int:
    """32-bit avalanche hash of a seed and a cell coordinate"""
    v = (seed ^ ((x * 0x9E3779B1) & MASK32) ^ ((y * 0x85EBCA77) & MASK32)) & MASK32
    v ^= v >> 16
    v = (v * 0x7FEB352D) & MASK32
    v ^= v >> 15
    v = (v * 0x846CA68B) & MASK32
    v ^= v >> 16
    return v


def mix_hash_grid(seed: int, height: int, width: int) -> np.ndarray:
    """mix_hash for every cell at once (x = column, y = row)"""
    rows, cols = np.indices((height, width), dtype=np.uint64)
    mask = np.uint64(MASK32)
    v = (np.uint64(seed & MASK32)
         ^ ((cols * np.uint64(0x9E3779B1)) & mask)
         ^ ((rows * np.uint64(0x85EBCA77)) & mask))
    v ^= v >> np.uint64(16)
    v = (v * np.uint64(0x7FEB352D)) & mask
    v ^= v >> np.uint64(15)
    v = (v * np.uint64(0x846CA68B)) & mask
    v ^= v >> np.uint64(16)
    return v


# ============================================================================
# FILL
# ============================================================================

def bayer_keep_mask(height: int, width: int, density: float) -> np.ndarray:
    """True where a pixel fill of the given density keeps its cell"""
    rows, cols = np.indices((height, width))
    thresholds = (BAYER_4X4[rows % 4, cols % 4] + 0.5) / 16.0
    return thresholds < density


def apply_fill(grid: Grid, fill: FillConfig) -> None:
    """
    Apply a fill mode to the occupied cells of a grid in place, followed by
    the fill's own dither when one is configured.
    """
    if fill.mode == FillMode.BLOCKS:
        _replace_chars(grid, SOLID_BLOCK)
    elif fill.mode == FillMode.SOLID:
        _replace_chars(grid, fill.char)
    elif fill.mode == FillMode.PIXEL:
        _replace_chars(grid, fill.char)
        if fill.density < 1.0:
            keep = bayer_keep_mask(grid.height, grid.width, fill.density)
            cleared = 0
            for row, col, cell in grid.iter_cells():
                if cell.occupied and not keep[row, col]:
                    grid.set(row, col, Cell())
                    cleared += 1
            logger.debug(f"Pixel fill at density {fill.density} cleared {cleared} cells")

    if fill.dither is not None:
        apply_dither(grid, fill.dither)


def _replace_chars(grid: Grid, char: str) -> None:
    for _, _, cell in grid.iter_cells():
        if cell.occupied:
            cell.char = char


# ============================================================================
# DITHER
# ============================================================================

def brightness_map(grid: Grid) -> np.ndarray:
    """Per-cell brightness in 0..1; uncolored cells count as full brightness"""
    colors, _ = grid.color_planes(default=WHITE)
    return colors @ LUMA_WEIGHTS / 255.0


def dither_plan(grid: Grid, dither: DitherConfig):
    """
    Compute ramp indices and stipple positions for every cell.

    Returns:
        (indices, stipple): integer ramp indices (all zero without a ramp)
        and a boolean stipple mask, both (height, width)
    """
    height, width = grid.shape
    rows, cols = np.indices((height, width))
    diagonal = rows + cols

    if dither.mode == DitherMode.NOISE:
        hashes = mix_hash_grid(dither.seed, height, width)
        stipple = (hashes & np.uint64(0xFF)) < np.uint64(dither.threshold)
    else:
        hashes = None
        stipple = diagonal % dither.period == 0

    if dither.ramp is None:
        return np.zeros((height, width), dtype=np.int64), stipple

    top = len(dither.ramp) - 1
    level = brightness_map(grid) * top
    if dither.mode == DitherMode.NOISE:
        offset = ((hashes >> np.uint64(8)) & np.uint64(0xFF)).astype(np.float64) / 256.0
        indices = np.floor(level + offset)
    else:
        thresholds = (diagonal % dither.period + 0.5) / dither.period
        base = np.floor(level)
        indices = base + ((level - base) > thresholds)
    indices = np.clip(indices, 0, top).astype(np.int64)

    if not dither.dots:
        indices = np.where(stipple, np.maximum(indices - 1, 0), indices)
    return indices, stipple


def apply_dither(grid: Grid, dither: DitherConfig) -> None:
    """
    Dither the occupied cells of a grid in place.

    Cells outside ``dither.targets`` (when set) keep their character.
    """
    if grid.width == 0 or grid.height == 0:
        return
    indices, stipple = dither_plan(grid, dither)
    changed = 0
    for row, col, cell in grid.iter_cells():
        if not cell.occupied:
            continue
        if dither.targets is not None and cell.char not in dither.targets:
            continue
        if dither.dots and stipple[row, col]:
            cell.char = dither.dot if (row + col) % 2 == 0 else dither.alt
        elif dither.ramp is not None:
            cell.char = dither.ramp[indices[row, col]]
        else:
            continue
        changed += 1
    logger.debug(f"{dither.mode.value} dither changed {changed} cells")
