#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Configuration Module
==========================================
Copyright (c) 2025 PNGN-Tec LLC

Centralized Configuration System
=================================
Complete configuration for banner rendering including:
- Effect character sets (blocks, ramps, stipple dots, box drawing)
- Default colors and animation parameters
- Enumerations for every mode switch (alignment, fill, dither, sweep, ...)
- Immutable configuration records with eager validation
- Terminal capability hints consumed by the ANSI emitter

Configuration Overview
======================
Every record here is a frozen dataclass whose validate() runs from
__post_init__, so an out-of-range value fails where the record is built and
never at render time. Enum fields accept either the enum member or its
string value ("center", "diagonal", ...) and are normalized on construction.

Records compose into the top-level BannerConfig defined in neon_banner.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar, Union

from neon_errors import ConfigError
from neon_width import require_single_column

# Configure logging
logger = logging.getLogger('neon_config')

# Type alias for RGB colors
RGBColor = Tuple[int, int, int]

# ============================================================================
# EFFECT CHARACTER SETS
# ============================================================================

# Uniform solid block used by the "blocks" fill
SOLID_BLOCK = '█'

# Stipple dot characters
DEFAULT_DOTS = "·:"

# Character drawn by edge shading
DEFAULT_SHADE_CHAR = '░'

# ============================================================================
# COLOR DEFAULTS
# ============================================================================

WHITE: RGBColor = (255, 255, 255)
BLACK: RGBColor = (0, 0, 0)

# ============================================================================
# ANIMATION SETTINGS
# ============================================================================

DEFAULT_FRAME_COUNT = 180     # Frames per animation pass
DEFAULT_FRAME_MS = 30         # Suggested delay between frames

SWEEP_WIDTH = 0.25            # Band size as a fraction of the axis
SWEEP_INTENSITY = 0.9         # Peak brightening
SWEEP_SOFTNESS = 2.5          # Falloff exponent
SWEEP_TRAVEL = 0.75           # Distance travelled either side of the center

WAVE_DIM = 0.35
WAVE_BRIGHT = 0.2
WAVE_FREQ_X = 5.0
WAVE_FREQ_Y = 3.0

# ============================================================================
# CONFIGURATION ENUMS
# ============================================================================

class Align(Enum):
    """Horizontal alignment of each text line"""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class GradientDirection(Enum):
    """Axis a gradient runs along"""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"


class FillMode(Enum):
    """How occupied cells are drawn"""
    KEEP = "keep"
    BLOCKS = "blocks"
    SOLID = "solid"
    PIXEL = "pixel"


class DitherMode(Enum):
    """Dither pattern selection"""
    CHECKER = "checker"
    NOISE = "noise"


class SweepDirection(Enum):
    """Direction a highlight band travels"""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal-down"
    DIAGONAL_UP = "diagonal-up"


class RollAxis(Enum):
    """Axis the roll animation scrolls along"""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class AnimationEffect(Enum):
    """Animation effect types"""
    SWEEP = "sweep"
    WAVE = "wave"
    ROLL = "roll"


class ColorMode(Enum):
    """Output color capability"""
    AUTO = "auto"
    TRUECOLOR = "truecolor"
    ANSI256 = "ansi256"
    NONE = "none"


class BorderStyle(Enum):
    """Box drawing sets for border frames"""
    SINGLE = "single"
    DOUBLE = "double"
    ROUNDED = "rounded"
    HEAVY = "heavy"
    ASCII = "ascii"


# Corner and edge characters: top-left, top-right, bottom-left, bottom-right,
# horizontal, vertical
BORDER_CHARS = {
    BorderStyle.SINGLE: "┌┐└┘─│",
    BorderStyle.DOUBLE: "╔╗╚╝═║",
    BorderStyle.ROUNDED: "╭╮╰╯─│",
    BorderStyle.HEAVY: "┏┓┗┛━┃",
    BorderStyle.ASCII: "++++-|",
}

# ============================================================================
# VALIDATION HELPERS
# ============================================================================

E = TypeVar('E', bound=Enum)


def coerce_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    """Accept an enum member or its string value"""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace('_', '-')
        for member in enum_cls:
            if member.value.replace('_', '-') == normalized:
                return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ConfigError(field_name, value, f"expected one of: {choices}")


def check_rgb(field_name: str, color: Any) -> RGBColor:
    """Validate an RGB triple and return it as a plain tuple"""
    if not isinstance(color, (tuple, list)) or len(color) != 3:
        raise ConfigError(field_name, color, "expected an (r, g, b) tuple")
    for channel in color:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise ConfigError(field_name, color, "channels must be integers 0..255")
    return tuple(color)


def check_range(field_name: str, value: float, low: float, high: Optional[float] = None) -> None:
    """Validate low <= value (<= high)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(field_name, value, "must be a number")
    if value < low or (high is not None and value > high):
        bound = f"[{low}, {high}]" if high is not None else f">= {low}"
        raise ConfigError(field_name, value, f"must be in {bound}")


def check_count(field_name: str, value: Any, minimum: int = 0) -> None:
    """Validate a non-negative integer count"""
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(field_name, value, f"must be an integer >= {minimum}")


# ============================================================================
# LAYOUT CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class Padding:
    """Blank cells added around the composed block"""
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self):
        self.validate()

    def validate(self) -> bool:
        for name in ('top', 'right', 'bottom', 'left'):
            check_count(f"padding.{name}", getattr(self, name))
        return True

    @classmethod
    def uniform(cls, value: int) -> 'Padding':
        return cls(value, value, value, value)

    @classmethod
    def coerce(cls, value: Union['Padding', int, Tuple[int, ...]]) -> 'Padding':
        """
        Build padding from an int, a (vertical, horizontal) pair or a
        (top, right, bottom, left) tuple.
        """
        if isinstance(value, Padding):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.uniform(value)
        if isinstance(value, (tuple, list)):
            if len(value) == 2:
                return cls(value[0], value[1], value[0], value[1])
            if len(value) == 4:
                return cls(*value)
        raise ConfigError('padding', value, "expected int, 2-tuple or 4-tuple")

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@dataclass(frozen=True)
class LayoutConfig:
    """
    Text composition parameters.

    Attributes:
        align: Alignment of each line within the block width
        padding: Blank cells around the block
        kerning: Blank columns between adjacent glyphs
        line_gap: Blank rows between text lines
        width: Force the output width (pads, or clips when narrower)
        max_width: Clip the output to at most this many columns
        trim: Remove blank rows from the top and bottom of the glyph block
    """
    align: Align = Align.LEFT
    padding: Padding = field(default_factory=Padding)
    kerning: int = 1
    line_gap: int = 0
    width: Optional[int] = None
    max_width: Optional[int] = None
    trim: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'align', coerce_enum(Align, self.align, 'align'))
        object.__setattr__(self, 'padding', Padding.coerce(self.padding))
        self.validate()

    def validate(self) -> bool:
        check_count('kerning', self.kerning)
        check_count('line_gap', self.line_gap)
        if self.width is not None:
            check_count('width', self.width, 1)
        if self.max_width is not None:
            check_count('max_width', self.max_width, 1)
        return True


# ============================================================================
# FILL AND DITHER CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class DitherConfig:
    """
    Dither configuration.

    A ramp (sparse to dense) replaces occupied cells by brightness; dots add
    stipple at positions chosen by the same positional or hashed rule. At
    least one of the two must be set.

    Attributes:
        mode: checker (ordered, positional) or noise (seeded hash)
        ramp: Characters from sparse to dense, or None to keep glyph chars
        period: Checker pattern period (>= 1)
        seed: Noise seed
        threshold: Noise stipple threshold, 0..255
        dots: One or two stipple characters
        targets: Only cells showing these characters are dithered
    """
    mode: DitherMode = DitherMode.CHECKER
    ramp: Optional[str] = None
    period: int = 3
    seed: int = 0
    threshold: int = 96
    dots: Optional[str] = DEFAULT_DOTS
    targets: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'mode', coerce_enum(DitherMode, self.mode, 'dither.mode'))
        self.validate()

    def validate(self) -> bool:
        check_count('dither.period', self.period, 1)
        check_count('dither.seed', self.seed)
        check_count('dither.threshold', self.threshold)
        if self.threshold > 255:
            raise ConfigError('dither.threshold', self.threshold, "must be in [0, 255]")
        if self.ramp is None and not self.dots:
            raise ConfigError('dither', None, "needs a ramp, dots, or both")
        if self.ramp is not None:
            require_single_column('dither.ramp', self.ramp)
        if self.dots is not None:
            require_single_column('dither.dots', self.dots)
            if len(self.dots) > 2:
                raise ConfigError('dither.dots', self.dots, "takes one or two characters")
        if self.targets is not None:
            require_single_column('dither.targets', self.targets)
        return True

    @property
    def dot(self) -> Optional[str]:
        return self.dots[0] if self.dots else None

    @property
    def alt(self) -> Optional[str]:
        return self.dots[-1] if self.dots else None


@dataclass(frozen=True)
class FillConfig:
    """
    Fill configuration for occupied cells.

    Attributes:
        mode: keep, blocks, solid or pixel
        char: Character for solid and pixel fills
        density: Pixel halftone coverage in (0, 1]
        dither: Optional dither applied right after the fill
    """
    mode: FillMode = FillMode.KEEP
    char: str = SOLID_BLOCK
    density: float = 1.0
    dither: Optional[DitherConfig] = None

    def __post_init__(self):
        object.__setattr__(self, 'mode', coerce_enum(FillMode, self.mode, 'fill.mode'))
        self.validate()

    def validate(self) -> bool:
        require_single_column('fill.char', self.char)
        if len(self.char) != 1:
            raise ConfigError('fill.char', self.char, "must be exactly one character")
        check_range('fill.density', self.density, 0.0, 1.0)
        if self.density == 0:
            raise ConfigError('fill.density', self.density, "must be greater than 0")
        return True


# ============================================================================
# POST-EFFECT CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class ShadowConfig:
    """Drop shadow: darkened copy offset by (dx, dy)"""
    dx: int = 2
    dy: int = 1
    alpha: float = 0.35
    char: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> bool:
        for name in ('dx', 'dy'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"shadow.{name}", value, "must be an integer")
        check_range('shadow.alpha', self.alpha, 0.0, 1.0)
        if self.char is not None:
            require_single_column('shadow.char', self.char)
            if len(self.char) != 1:
                raise ConfigError('shadow.char', self.char, "must be exactly one character")
        return True


@dataclass(frozen=True)
class EdgeShadeConfig:
    """One-cell darkened ring drawn on empty cells around the glyphs"""
    darken: float = 0.4
    char: str = DEFAULT_SHADE_CHAR

    def __post_init__(self):
        self.validate()

    def validate(self) -> bool:
        check_range('edge_shade.darken', self.darken, 0.0, 1.0)
        require_single_column('edge_shade.char', self.char)
        if len(self.char) != 1:
            raise ConfigError('edge_shade.char', self.char, "must be exactly one character")
        return True


@dataclass(frozen=True)
class OutlineConfig:
    """Boundary emphasis for occupied cells touching empty space"""
    neighborhood: int = 8
    char: Optional[str] = None
    color: Optional[RGBColor] = None
    darken: float = 0.0

    def __post_init__(self):
        if self.color is not None:
            object.__setattr__(self, 'color', check_rgb('outline.color', self.color))
        self.validate()

    def validate(self) -> bool:
        if self.neighborhood not in (4, 8):
            raise ConfigError('outline.neighborhood', self.neighborhood, "must be 4 or 8")
        if self.char is not None:
            require_single_column('outline.char', self.char)
            if len(self.char) != 1:
                raise ConfigError('outline.char', self.char, "must be exactly one character")
        check_range('outline.darken', self.darken, 0.0, 1.0)
        return True


# ============================================================================
# ANIMATION CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class SweepConfig:
    """
    Highlight band parameters.

    Attributes:
        direction: Axis the band travels along
        width: Band size as a fraction of the axis (> 0)
        intensity: Peak brightening, 0..1
        softness: Falloff exponent (>= 1)
        center: Band center on the axis for static sweeps, midpoint of travel
        tint: Color added onto highlighted cells
        travel: How far past the center the band starts and ends
    """
    direction: SweepDirection = SweepDirection.DIAGONAL_DOWN
    width: float = SWEEP_WIDTH
    intensity: float = SWEEP_INTENSITY
    softness: float = SWEEP_SOFTNESS
    center: float = 0.5
    tint: RGBColor = WHITE
    travel: float = SWEEP_TRAVEL

    def __post_init__(self):
        object.__setattr__(self, 'direction',
                           coerce_enum(SweepDirection, self.direction, 'sweep.direction'))
        object.__setattr__(self, 'tint', check_rgb('sweep.tint', self.tint))
        self.validate()

    def validate(self) -> bool:
        check_range('sweep.width', self.width, 0.0)
        if self.width == 0:
            raise ConfigError('sweep.width', self.width, "must be greater than 0")
        check_range('sweep.intensity', self.intensity, 0.0, 1.0)
        check_range('sweep.softness', self.softness, 1.0)
        check_range('sweep.center', self.center, -10.0, 10.0)
        check_range('sweep.travel', self.travel, 0.0)
        return True


@dataclass(frozen=True)
class WaveConfig:
    """Breathing brightness wave; glyphs never move"""
    dim: float = WAVE_DIM
    bright: float = WAVE_BRIGHT
    freq_x: float = WAVE_FREQ_X
    freq_y: float = WAVE_FREQ_Y
    cycles: int = 1

    def __post_init__(self):
        self.validate()

    def validate(self) -> bool:
        check_range('wave.dim', self.dim, 0.0, 1.0)
        check_range('wave.bright', self.bright, 0.0, 1.0)
        check_range('wave.freq_x', self.freq_x, 0.0)
        check_range('wave.freq_y', self.freq_y, 0.0)
        check_count('wave.cycles', self.cycles, 1)
        return True


@dataclass(frozen=True)
class RollConfig:
    """Scroll with wraparound along one axis"""
    axis: RollAxis = RollAxis.HORIZONTAL
    step: int = 1
    reverse: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'axis', coerce_enum(RollAxis, self.axis, 'roll.axis'))
        self.validate()

    def validate(self) -> bool:
        check_count('roll.step', self.step, 1)
        return True


# ============================================================================
# BORDER CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class BorderConfig:
    """
    Box frame drawn around the finished banner.

    Attributes:
        style: Built-in box drawing set
        chars: Custom set of six characters (tl, tr, bl, br, h, v)
        color: Solid stroke color
        palette: Gradient stops across the frame bounds
        direction: Gradient direction when a palette is set
    """
    style: BorderStyle = BorderStyle.SINGLE
    chars: Optional[str] = None
    color: Optional[RGBColor] = None
    palette: Optional[Tuple[RGBColor, ...]] = None
    direction: GradientDirection = GradientDirection.HORIZONTAL

    def __post_init__(self):
        object.__setattr__(self, 'style', coerce_enum(BorderStyle, self.style, 'border.style'))
        object.__setattr__(self, 'direction',
                           coerce_enum(GradientDirection, self.direction, 'border.direction'))
        if self.color is not None:
            object.__setattr__(self, 'color', check_rgb('border.color', self.color))
        if self.palette is not None:
            object.__setattr__(self, 'palette', tuple(
                check_rgb('border.palette', stop) for stop in self.palette))
        self.validate()

    def validate(self) -> bool:
        if self.chars is not None:
            if len(self.chars) != 6:
                raise ConfigError('border.chars', self.chars, "needs exactly six characters")
            require_single_column('border.chars', self.chars)
        if self.color is not None and self.palette is not None:
            raise ConfigError('border', 'color+palette', "set a color or a palette, not both")
        if self.palette is not None and not self.palette:
            raise ConfigError('border.palette', self.palette, "needs at least one stop")
        return True

    def glyphs(self) -> str:
        return self.chars if self.chars is not None else BORDER_CHARS[self.style]


# ============================================================================
# TERMINAL CAPABILITY HINTS
# ============================================================================

@dataclass(frozen=True)
class CapabilityHints:
    """
    Terminal capability signals consumed by color-mode auto-detection.

    The core never reads the process environment itself; callers build
    hints once (usually with from_environ) and pass them in.
    """
    no_color: bool = False
    colorterm: str = ""
    term: str = ""

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> 'CapabilityHints':
        """
        Read NO_COLOR, COLORTERM and TERM from a mapping.

        Args:
            environ: Mapping to read (defaults to os.environ)
        """
        if environ is None:
            environ = os.environ
        hints = cls(
            no_color='NO_COLOR' in environ,
            colorterm=environ.get('COLORTERM', ''),
            term=environ.get('TERM', ''),
        )
        logger.debug(f"Capability hints: {hints}")
        return hints
