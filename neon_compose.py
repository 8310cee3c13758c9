#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Text Compositor
=====================================
Copyright (c) 2025 PNGN-Tec LLC

Turns text into a Grid of glyph cells.

Layout Rules
============
- Lines split on newlines (\\r\\n and \\r normalized)
- Glyphs sit left-to-right with ``kerning`` blank columns between them
  (never after the last glyph of a line)
- Lines stack with ``line_gap`` blank rows between them
- Each line is aligned independently within the block width; center puts
  the odd leftover column on the right
- Whitespace becomes a space, anything outside printable ASCII becomes '?'

The block width is the widest line, or ``layout.width`` when that is
larger. Padding is applied separately (pad_grid) so the pipeline can color
the glyph block before it is framed by blank space.
"""

import logging
from typing import List, Optional

from neon_config import Align, LayoutConfig, Padding
from neon_errors import EmptyTextError
from neon_font import FIRST_CODE, LAST_CODE, Font
from neon_grid import Cell, Grid

# Configure logging
logger = logging.getLogger('neon_compose')

REPLACEMENT_CHAR = '?'


def sanitize_line(line: str) -> str:
    """Map one line onto the printable ASCII range"""
    chars = []
    for char in line:
        if char.isspace():
            chars.append(' ')
        elif FIRST_CODE <= ord(char) <= LAST_CODE:
            chars.append(char)
        else:
            chars.append(REPLACEMENT_CHAR)
    return ''.join(chars)


def split_lines(text: str) -> List[str]:
    """Normalized, sanitized lines of text"""
    normalized = text.replace('\r\n', '\n').replace('\r', '\n')
    return [sanitize_line(line) for line in normalized.split('\n')]


def align_offset(content: int, total: int, align: Align) -> int:
    """Left offset placing content columns inside total columns"""
    slack = total - content
    if align == Align.RIGHT:
        return slack
    if align == Align.CENTER:
        # Odd column goes right, whether padding or clipping
        return slack // 2 if slack >= 0 else -(-slack // 2)
    return 0


def compose(text: str, font: Font, layout: Optional[LayoutConfig] = None,
            pad: bool = True) -> Grid:
    """
    Lay text out as glyph cells.

    Args:
        text: Text to render (may contain newlines)
        font: Font supplying the glyphs
        layout: Alignment, kerning, line gap, width and padding
        pad: Surround the block with layout.padding

    Returns:
        New Grid; glyph cells are occupied and uncolored

    Raises:
        EmptyTextError: text has no printable non-whitespace character
    """
    if layout is None:
        layout = LayoutConfig()

    lines = split_lines(text)
    # Trailing newline does not add an empty line
    if len(lines) > 1 and lines[-1] == '':
        lines.pop()
    if not any(line.strip() for line in lines):
        raise EmptyTextError(f"Nothing to render in {text!r}")

    widths = [font.text_width(line, layout.kerning) for line in lines]
    block_width = max(widths)
    if layout.width is not None and layout.width > block_width:
        block_width = layout.width

    height = len(lines) * font.height + (len(lines) - 1) * layout.line_gap
    grid = Grid(block_width, height)

    for index, (line, line_width) in enumerate(zip(lines, widths)):
        top = index * (font.height + layout.line_gap)
        left = align_offset(line_width, block_width, layout.align)
        for char in line:
            glyph = font.glyph(char)
            for row_offset, row_text in enumerate(glyph.rows):
                for col_offset, glyph_char in enumerate(row_text):
                    if glyph_char != ' ':
                        grid.set(top + row_offset, left + col_offset, Cell.glyph(glyph_char))
            left += glyph.width + layout.kerning

    logger.debug(f"Composed {len(lines)} line(s) into {grid!r}")
    if pad:
        grid = pad_grid(grid, layout.padding)
    return grid


def pad_grid(grid: Grid, padding: Padding) -> Grid:
    """New grid with blank cells added on each side"""
    padding = Padding.coerce(padding)
    if padding == Padding():
        return grid.copy()
    padded = Grid(grid.width + padding.horizontal, grid.height + padding.vertical)
    padded.blit(grid, padding.top, padding.left, occupied_only=False)
    return padded


def fit_width(grid: Grid, width: Optional[int] = None, max_width: Optional[int] = None,
              align: Align = Align.LEFT) -> Grid:
    """
    Force or limit the grid width.

    Args:
        grid: Source grid (unchanged)
        width: Exact output width; wider content is clipped, narrower padded
        max_width: Upper bound on the output width
        align: Which side keeps its content when clipping, and where the
            content sits when padding

    Returns:
        New grid of the resulting width and the same height
    """
    target = grid.width if width is None else width
    if max_width is not None:
        target = min(target, max_width)
    if target == grid.width:
        return grid.copy()

    fitted = Grid(target, grid.height)
    # Negative offsets clip, blit drops whatever falls outside
    offset = align_offset(grid.width, target, align)
    fitted.blit(grid, 0, offset, occupied_only=False)
    logger.debug(f"Fitted width {grid.width} -> {target} ({align.value})")
    return fitted
