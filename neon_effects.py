#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Post-Effects Module
=========================================
Copyright (c) 2025 PNGN-Tec LLC

Neighborhood-aware passes over a fully composited Grid.

Effects
=======
- Shadow: darkened copy offset by (dx, dy), composited beneath the source;
  the grid grows by |dx| columns and |dy| rows so nothing is cut off
- Edge shade: one-cell ring of shade characters on empty cells touching
  the glyphs, colored from the neighbor that claims it first
- Outline: occupied cells with an empty (or off-grid) neighbor are boundary
  cells and can be re-charactered or recolored
- Light sweep: static highlight band; the sweep animation reuses the same
  band math per frame

Order matters: shadow, then edge shade, then outline. Edge shading looks at
post-shadow occupancy, so the shade ring wraps the shadow as well.
"""

import logging
from typing import Optional

import numpy as np

from neon_color import darken
from neon_config import (
    EdgeShadeConfig,
    OutlineConfig,
    ShadowConfig,
    SweepConfig,
    SweepDirection,
)
from neon_grid import Cell, Grid

# Configure logging
logger = logging.getLogger('neon_effects')

# Scan order for neighbor lookups: orthogonal first, then diagonal
NEIGHBORS_4 = ((-1, 0), (1, 0), (0, -1), (0, 1))
NEIGHBORS_8 = NEIGHBORS_4 + ((-1, -1), (-1, 1), (1, -1), (1, 1))

# ============================================================================
# SHADOW
# ============================================================================

def apply_shadow(grid: Grid, shadow: ShadowConfig) -> Grid:
    """
    Composite a drop shadow beneath the grid.

    Args:
        grid: Source grid (unchanged)
        shadow: Offset, darkening and optional replacement character

    Returns:
        New grid enlarged by |dx| x |dy|; negative offsets move the source
        right/down so the shadow can fall up/left
    """
    if shadow.dx == 0 and shadow.dy == 0:
        return grid.copy()

    origin_col = max(0, -shadow.dx)
    origin_row = max(0, -shadow.dy)
    out = Grid(grid.width + abs(shadow.dx), grid.height + abs(shadow.dy))

    for row, col, cell in grid.iter_cells():
        if not cell.occupied:
            continue
        out.set(origin_row + row + shadow.dy, origin_col + col + shadow.dx, Cell(
            char=shadow.char or cell.char,
            fg=darken(cell.fg, shadow.alpha) if cell.fg is not None else None,
            alpha=cell.alpha,
        ))

    # Source cells always win over shadow cells
    out.blit(grid, origin_row, origin_col, occupied_only=True)
    logger.debug(f"Shadow ({shadow.dx}, {shadow.dy}) grew {grid!r} to {out!r}")
    return out


# ============================================================================
# OUTLINE AND EDGE SHADE
# ============================================================================

def find_boundary(grid: Grid, neighborhood: int = 8) -> np.ndarray:
    """
    Boolean mask of occupied cells with at least one empty neighbor.

    Neighbors outside the grid count as empty.
    """
    occupied = grid.occupancy()
    padded = np.pad(occupied, 1, constant_values=False)
    height, width = occupied.shape
    offsets = NEIGHBORS_8 if neighborhood == 8 else NEIGHBORS_4

    empty_neighbor = np.zeros_like(occupied)
    for dr, dc in offsets:
        neighbor = padded[1 + dr:1 + dr + height, 1 + dc:1 + dc + width]
        empty_neighbor |= ~neighbor
    return occupied & empty_neighbor


def apply_outline(grid: Grid, outline: OutlineConfig) -> np.ndarray:
    """
    Emphasize boundary cells in place.

    Returns:
        The boundary mask that was applied
    """
    boundary = find_boundary(grid, outline.neighborhood)
    for row, col in np.argwhere(boundary):
        cell = grid.get(row, col)
        if outline.char is not None:
            cell.char = outline.char
        if outline.color is not None:
            cell.fg = outline.color
        elif outline.darken > 0 and cell.fg is not None:
            cell.fg = darken(cell.fg, outline.darken)
    logger.debug(f"Outline marked {int(boundary.sum())} boundary cells")
    return boundary


def apply_edge_shade(grid: Grid, shade: EdgeShadeConfig) -> Grid:
    """
    Add a one-cell shaded ring around the occupied cells.

    Source cells are visited in row-major order and claim their empty
    8-neighbors in NEIGHBORS_8 order; the first claim sticks.

    Returns:
        New grid of the same size
    """
    out = grid.copy()
    added = 0
    for row, col, cell in grid.iter_cells():
        if not cell.occupied:
            continue
        for dr, dc in NEIGHBORS_8:
            target_row, target_col = row + dr, col + dc
            if not out.in_bounds(target_row, target_col):
                continue
            if out.get(target_row, target_col).occupied:
                continue
            out.set(target_row, target_col, Cell(
                char=shade.char,
                fg=darken(cell.fg, shade.darken) if cell.fg is not None else None,
                alpha=1.0,
            ))
            added += 1
    logger.debug(f"Edge shade added {added} cells")
    return out


# ============================================================================
# LIGHT SWEEP
# ============================================================================

def axis_t(direction: SweepDirection, height: int, width: int) -> np.ndarray:
    """
    Normalized position of every cell along a sweep direction.

    Diagonals run corner to corner: diagonal-down from top-left to
    bottom-right, diagonal-up from bottom-left to top-right. diagonal-up is
    measured from the bottom-left corner ((height - 1 - row) + col), so the
    band enters there; the mirrored (row + (width - 1 - col)) form would run
    top-right to bottom-left instead.
    """
    rows, cols = np.indices((height, width), dtype=np.float64)
    if direction == SweepDirection.HORIZONTAL:
        return cols / (width - 1) if width > 1 else np.zeros_like(cols)
    if direction == SweepDirection.VERTICAL:
        return rows / (height - 1) if height > 1 else np.zeros_like(rows)
    span = width + height - 2
    if span <= 0:
        return np.zeros_like(rows)
    if direction == SweepDirection.DIAGONAL_DOWN:
        return (rows + cols) / span
    return ((height - 1 - rows) + cols) / span


def sweep_amounts(height: int, width: int, sweep: SweepConfig,
                  center: Optional[float] = None) -> np.ndarray:
    """
    Highlight strength per cell for a band at ``center``.

    amount = intensity * (1 - d / half) ** softness inside the band (d is
    the distance to the center, half is width / 2), zero outside.
    """
    if center is None:
        center = sweep.center
    half = sweep.width / 2.0
    distance = np.abs(axis_t(sweep.direction, height, width) - center)
    inside = distance <= half
    falloff = np.where(inside, 1.0 - np.minimum(distance / half, 1.0), 0.0)
    return np.clip(sweep.intensity * falloff ** sweep.softness, 0.0, 1.0)


def apply_light_sweep(grid: Grid, sweep: SweepConfig, center: Optional[float] = None) -> None:
    """
    Brighten colored cells under the band in place.

    The tint is added onto each channel scaled by the local amount and
    clamped at 255. Uncolored cells keep the terminal default.
    """
    if grid.width == 0 or grid.height == 0:
        return
    amounts = sweep_amounts(grid.height, grid.width, sweep, center)
    colors, _ = grid.color_planes()
    tint = np.asarray(sweep.tint, dtype=np.float64)
    lit = np.minimum(255.0, colors + tint * amounts[..., None])
    grid.apply_colors(lit, grid.colored() & (amounts > 0))
