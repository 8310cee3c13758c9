#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - ANSI Emitter
==================================
Copyright (c) 2025 PNGN-Tec LLC

Serializes a Grid into terminal escape sequences.

Color Modes
===========
- truecolor: ESC[38;2;r;g;bm / ESC[48;2;r;g;bm
- ansi256:   ESC[38;5;nm / ESC[48;5;nm, nearest entry of the 6x6x6 cube
             or the 24-step gray ramp
- none:      characters only, no escape sequences at all
- auto:      resolved from CapabilityHints by detect_color_mode()

Output Rules
============
- A run of cells sharing (fg, bg) opens with one SGR sequence
- Empty cells are bare spaces, preceded by a reset if a color is active
- In color modes every row ends with ESC[0m; rows are joined with \\n and
  there is no trailing newline
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from neon_config import CapabilityHints, ColorMode, RGBColor, coerce_enum
from neon_grid import Grid

# Configure logging
logger = logging.getLogger('neon_emit')

# ============================================================================
# ANSI CODES AND UTILITIES
# ============================================================================

class ANSI:
    ESC = "\033["
    RESET = "\033[0m"


# Channel values of the xterm 6x6x6 color cube
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
CUBE_BASE = 16
GRAY_BASE = 232
GRAY_STEPS = 24

SGR_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

Style = Tuple[Optional[object], Optional[object]]


def strip_ansi(text: str) -> str:
    """Remove SGR color sequences"""
    return SGR_PATTERN.sub('', text)


def _nearest_cube_index(value: int) -> int:
    return min(range(len(CUBE_LEVELS)), key=lambda i: abs(CUBE_LEVELS[i] - value))


def _distance(a: RGBColor, b: RGBColor) -> int:
    return sum((x - y) ** 2 for x, y in zip(a, b))


def ansi256_to_rgb(index: int) -> RGBColor:
    """RGB value of a cube or gray-ramp palette entry (16..255)"""
    if index >= GRAY_BASE:
        level = 8 + 10 * (index - GRAY_BASE)
        return (level, level, level)
    index -= CUBE_BASE
    return (CUBE_LEVELS[index // 36], CUBE_LEVELS[(index // 6) % 6], CUBE_LEVELS[index % 6])


def rgb_to_ansi256(color: RGBColor) -> int:
    """
    Quantize to the nearest 256-color palette entry.

    The cube candidate and the closest gray step are compared by squared
    RGB distance; the cube wins ties.

    Examples:
        >>> rgb_to_ansi256((255, 0, 0))
        196
        >>> rgb_to_ansi256((128, 128, 128))
        244
    """
    r, g, b = (_nearest_cube_index(channel) for channel in color)
    cube_index = CUBE_BASE + 36 * r + 6 * g + b

    mean = sum(color) / 3.0
    step = int(min(GRAY_STEPS - 1, max(0, round((mean - 8) / 10))))
    gray_index = GRAY_BASE + step

    if _distance(color, ansi256_to_rgb(gray_index)) < _distance(color, ansi256_to_rgb(cube_index)):
        return gray_index
    return cube_index


# ============================================================================
# COLOR MODE DETECTION
# ============================================================================

def detect_color_mode(hints: Optional[CapabilityHints] = None) -> ColorMode:
    """
    Choose a concrete color mode from terminal hints.

    Precedence: no_color -> none; COLORTERM truecolor/24bit -> truecolor;
    any TERM other than empty or "dumb" -> ansi256; otherwise none.
    """
    hints = hints or CapabilityHints()
    colorterm = hints.colorterm.lower()
    term = hints.term.strip().lower()
    if hints.no_color:
        return ColorMode.NONE
    if 'truecolor' in colorterm or '24bit' in colorterm:
        return ColorMode.TRUECOLOR
    if term and term != 'dumb':
        return ColorMode.ANSI256
    return ColorMode.NONE


def resolve_mode(mode, hints: Optional[CapabilityHints] = None) -> ColorMode:
    """Turn AUTO (or a mode name) into a concrete mode"""
    mode = coerce_enum(ColorMode, mode, 'color_mode')
    if mode == ColorMode.AUTO:
        mode = detect_color_mode(hints)
        logger.debug(f"Auto-detected color mode: {mode.value}")
    return mode


# ============================================================================
# EMISSION
# ============================================================================

def _quantize(color: Optional[RGBColor], mode: ColorMode):
    if color is None:
        return None
    if mode == ColorMode.ANSI256:
        return rgb_to_ansi256(color)
    return tuple(color)


def _sgr(style: Style) -> str:
    parts = []
    for prefix, color in zip(('38', '48'), style):
        if color is None:
            continue
        if isinstance(color, int):
            parts.append(f"{prefix};5;{color}")
        else:
            parts.append(f"{prefix};2;{color[0]};{color[1]};{color[2]}")
    return f"{ANSI.ESC}{';'.join(parts)}m"


def _emit_row(grid: Grid, row: int, mode: ColorMode) -> str:
    parts: List[str] = []
    active: Optional[Style] = None
    for cell in grid.row(row):
        if not cell.occupied:
            if active is not None:
                parts.append(ANSI.RESET)
                active = None
            parts.append(' ')
            continue

        style = (_quantize(cell.fg, mode), _quantize(cell.bg, mode))
        if style == (None, None):
            if active is not None:
                parts.append(ANSI.RESET)
                active = None
        elif style != active:
            parts.append(_sgr(style))
            active = style
        parts.append(cell.char)
    parts.append(ANSI.RESET)
    return ''.join(parts)


def emit(grid: Grid, mode=ColorMode.AUTO, hints: Optional[CapabilityHints] = None) -> str:
    """
    Serialize a grid to a printable string.

    Args:
        grid: Grid to serialize
        mode: Color mode (AUTO consults hints)
        hints: Terminal capability hints for AUTO

    Returns:
        Rows joined by newlines, without a trailing newline
    """
    mode = resolve_mode(mode, hints)
    if mode == ColorMode.NONE:
        return grid.to_text()
    return '\n'.join(_emit_row(grid, row, mode) for row in range(grid.height))


def emit_frames(frames: Iterable[Grid], mode=ColorMode.AUTO,
                hints: Optional[CapabilityHints] = None) -> List[str]:
    """Serialize every frame with one resolved color mode"""
    mode = resolve_mode(mode, hints)
    return [emit(frame, mode) for frame in frames]
