#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Color & Gradient Engine
=============================================
Copyright (c) 2025 PNGN-Tec LLC

Color System
============
Colors are plain (r, g, b) tuples. Palettes are ordered, non-empty sequences
of stops; a Gradient pairs a palette with an axis and maps each occupied
cell's normalized position to a color by piecewise-linear RGB blending.

Gradient Axes
=============
- vertical:   row / (height - 1)
- horizontal: col / (width - 1)
- diagonal:   mean of the vertical and horizontal positions

A single-row or single-column axis maps to 0.0 instead of dividing by
zero. Position 0.0 is exactly the first stop and 1.0 exactly the last;
rounding between stops is half-up.

Named Palettes
==============
PALETTES holds the stock gradients used by the style presets.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union

import numpy as np

from neon_config import (
    BLACK,
    GradientDirection,
    RGBColor,
    WHITE,
    check_rgb,
    coerce_enum,
)
from neon_errors import ColorParseError, ConfigError
from neon_grid import Grid

# Configure logging
logger = logging.getLogger('neon_color')

HEX_PATTERN = re.compile(r'^#([0-9a-fA-F]{6})$')

# ============================================================================
# COLOR UTILITIES
# ============================================================================

def parse_hex(value: str) -> RGBColor:
    """
    Parse a '#RRGGBB' string.

    Examples:
        >>> parse_hex('#FF5AD9')
        (255, 90, 217)

    Raises:
        ColorParseError: on anything other than '#' plus six hex digits
    """
    if not isinstance(value, str):
        raise ColorParseError(value)
    match = HEX_PATTERN.match(value.strip())
    if not match:
        raise ColorParseError(value)
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_hex(color: RGBColor) -> str:
    """(255, 90, 217) -> '#FF5AD9'"""
    r, g, b = color
    return f"#{r:02X}{g:02X}{b:02X}"


def _round_channel(value: float) -> int:
    return int(min(255.0, max(0.0, np.floor(value + 0.5))))


def lerp(start: RGBColor, end: RGBColor, t: float) -> RGBColor:
    """Linear blend from start (t=0) to end (t=1), t clamped"""
    t = min(1.0, max(0.0, t))
    return tuple(_round_channel(a + (b - a) * t) for a, b in zip(start, end))


def darken(color: RGBColor, amount: float) -> RGBColor:
    """Scale every channel by (1 - amount)"""
    factor = 1.0 - min(1.0, max(0.0, amount))
    return tuple(_round_channel(channel * factor) for channel in color)


def add_light(color: RGBColor, tint: RGBColor, amount: float) -> RGBColor:
    """Additive blend: channel + tint * amount, clamped to 255"""
    amount = max(0.0, amount)
    return tuple(_round_channel(c + t * amount) for c, t in zip(color, tint))


def luminance(color: RGBColor) -> float:
    """Relative luminance (Rec. 709 weights) in 0..255"""
    r, g, b = color
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def breathe(colors: np.ndarray, dim: np.ndarray, bright: np.ndarray) -> np.ndarray:
    """
    Dim toward black, then brighten toward white, vectorized.

    Args:
        colors: (..., 3) float colors
        dim: (...) dim amounts in 0..1
        bright: (...) brighten amounts in 0..1
    """
    dim = np.clip(dim, 0.0, 1.0)[..., None]
    bright = np.clip(bright, 0.0, 1.0)[..., None]
    black = np.asarray(BLACK, dtype=np.float64)
    white = np.asarray(WHITE, dtype=np.float64)
    dimmed = colors + (black - colors) * dim
    return dimmed + (white - dimmed) * bright


# ============================================================================
# PALETTE AND GRADIENT
# ============================================================================

@dataclass(frozen=True)
class Palette:
    """Ordered gradient stops (at least one)"""
    stops: Tuple[RGBColor, ...]

    def __post_init__(self):
        object.__setattr__(self, 'stops', tuple(
            check_rgb('palette', stop) for stop in self.stops))
        self.validate()

    def validate(self) -> bool:
        if not self.stops:
            raise ConfigError('palette', self.stops, "needs at least one color stop")
        return True

    @classmethod
    def from_hex(cls, hexes: Union[str, Sequence[str]]) -> 'Palette':
        """
        Build a palette from '#RRGGBB' strings.

        Args:
            hexes: Sequence of hex strings, or one comma-separated string

        Raises:
            ColorParseError: on the first malformed entry
            ConfigError: when no stops are given
        """
        if isinstance(hexes, str):
            hexes = [part for part in hexes.split(',') if part.strip()]
        return cls(tuple(parse_hex(value) for value in hexes))

    def __len__(self) -> int:
        return len(self.stops)

    @property
    def first(self) -> RGBColor:
        return self.stops[0]

    @property
    def last(self) -> RGBColor:
        return self.stops[-1]


def axis_positions(height: int, width: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Normalized row and column coordinates as (height, width) arrays.

    A degenerate axis (length 1) is all zeros.
    """
    rows, cols = np.indices((height, width), dtype=np.float64)
    fy = rows / (height - 1) if height > 1 else np.zeros_like(rows)
    fx = cols / (width - 1) if width > 1 else np.zeros_like(cols)
    return fy, fx


@dataclass(frozen=True)
class Gradient:
    """
    Palette plus axis.

    Attributes:
        palette: Color stops
        direction: vertical, horizontal or diagonal
    """
    palette: Palette
    direction: GradientDirection = GradientDirection.VERTICAL

    def __post_init__(self):
        if not isinstance(self.palette, Palette):
            raise ConfigError('gradient.palette', self.palette, "must be a Palette")
        object.__setattr__(self, 'direction',
                           coerce_enum(GradientDirection, self.direction, 'gradient.direction'))

    @classmethod
    def vertical(cls, palette: Palette) -> 'Gradient':
        return cls(palette, GradientDirection.VERTICAL)

    @classmethod
    def horizontal(cls, palette: Palette) -> 'Gradient':
        return cls(palette, GradientDirection.HORIZONTAL)

    @classmethod
    def diagonal(cls, palette: Palette) -> 'Gradient':
        return cls(palette, GradientDirection.DIAGONAL)

    def positions(self, height: int, width: int) -> np.ndarray:
        """Normalized position of every cell along this gradient's axis"""
        fy, fx = axis_positions(height, width)
        if self.direction == GradientDirection.VERTICAL:
            return fy
        if self.direction == GradientDirection.HORIZONTAL:
            return fx
        return (fy + fx) / 2.0

    def colors_at(self, t: np.ndarray) -> np.ndarray:
        """
        Interpolate colors for an array of positions.

        Returns:
            Float array of shape t.shape + (3,), unrounded
        """
        t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
        stops = np.asarray(self.palette.stops, dtype=np.float64)
        if len(stops) == 1:
            return np.broadcast_to(stops[0], t.shape + (3,)).copy()
        anchors = np.linspace(0.0, 1.0, len(stops))
        return np.stack([np.interp(t, anchors, stops[:, channel]) for channel in range(3)],
                        axis=-1)

    def color_at(self, t: float) -> RGBColor:
        """Color at one normalized position, rounded half-up"""
        r, g, b = self.colors_at(np.array(t))
        return (_round_channel(r), _round_channel(g), _round_channel(b))

    def apply(self, grid: Grid) -> None:
        """Set the fg of every occupied cell in place; empty cells untouched"""
        if grid.width == 0 or grid.height == 0:
            return
        colors = self.colors_at(self.positions(grid.height, grid.width))
        grid.apply_colors(colors, grid.occupancy())
        logger.debug(f"Applied {self.direction.value} gradient with "
                     f"{len(self.palette)} stops to {grid!r}")


def fill_color(grid: Grid, color: RGBColor) -> None:
    """Paint every occupied cell one solid color"""
    color = check_rgb('color', color)
    for _, _, cell in grid.iter_cells():
        if cell.occupied:
            cell.fg = color


# ============================================================================
# NAMED PALETTES
# ============================================================================

PALETTES: Dict[str, Tuple[str, ...]] = {
    'neon_cyber': ("#00E5FF", "#7B5CFF", "#FF5AD9"),        # cyan -> purple -> pink
    'arctic_tech': ("#00E5FF", "#3A7BFF", "#E6F6FF"),       # cyan -> blue -> ice
    'sunset_neon': ("#FF8C42", "#FF3D7F", "#7B5CFF"),       # orange -> pink -> purple
    'forest_sky': ("#00FF6A", "#00B7A8", "#3B5BFF"),        # green -> teal -> blue
    'chrome': ("#F5F5F5", "#BDBDBD", "#6B7280", "#E5E7EB"),
    'crt_amber': ("#FFB000", "#FF8C00", "#7A3E00"),
    'ocean_flow': ("#0077FF", "#00C2FF", "#00FFA3"),        # blue -> teal -> aqua
    'deep_space': ("#1E3A8A", "#5B21B6", "#312E81"),
    'fire_warning': ("#FACC15", "#FB923C", "#EF4444"),
    'warm_luxury': ("#FF5AD9", "#FF8FAB", "#FFD166"),
    'earth_tone': ("#E6CCB2", "#B08968", "#6B705C"),
    'royal_purple': ("#E9D5FF", "#A855F7", "#581C87"),
    'matrix': ("#00FF9C", "#00C46A", "#003B24"),
    'aurora_flux': ("#2DD4BF", "#38BDF8", "#8B5CF6", "#C026D3"),
}


def get_palette(name: str) -> Palette:
    """
    Look up a named palette.

    Raises:
        ConfigError: for unknown names
    """
    key = name.strip().lower().replace('-', '_')
    if key not in PALETTES:
        raise ConfigError('palette', name, f"unknown palette; choose from {', '.join(PALETTES)}")
    return Palette.from_hex(PALETTES[key])
