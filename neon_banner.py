#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Banner Pipeline
=====================================
Copyright (c) 2025 PNGN-Tec LLC

Core Features:
- One immutable BannerConfig describing the whole look of a banner
- Fixed stage order from text to escape sequences
- Animation frames built on the fully styled banner
- BannerRenderer facade with render timing statistics

Pipeline
========
1. compose text into glyph cells (no padding yet)
2. optional top/bottom trim
3. gradient colors
4. fill, then the fill's own dither, then the banner dot dither
5. padding, then forced / maximum width
6. shadow, edge shade, outline
7. optional static light sweep
8. optional border frame
9. emit (or hand the grid to the animation engine)

A render either returns complete output or raises; nothing is printed or
written along the way.

Module Interface
================
- render_grid() / render(): single banner
- animate() / animate_ansi(): sweep, wave or roll frames
- BannerRenderer / create_renderer(): reusable renderer with stats
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

from neon_animate import AnimationFrames, roll_frames, sweep_frames, wave_frames
from neon_border import apply_border
from neon_color import Gradient
from neon_compose import compose, fit_width, pad_grid
from neon_config import (
    AnimationEffect,
    BorderConfig,
    CapabilityHints,
    ColorMode,
    DEFAULT_FRAME_COUNT,
    DitherConfig,
    EdgeShadeConfig,
    FillConfig,
    LayoutConfig,
    OutlineConfig,
    RollConfig,
    ShadowConfig,
    SweepConfig,
    WaveConfig,
    check_count,
    coerce_enum,
)
from neon_effects import apply_edge_shade, apply_light_sweep, apply_outline, apply_shadow
from neon_emit import emit, emit_frames
from neon_errors import ConfigError
from neon_fill import apply_dither, apply_fill
from neon_font import Font
from neon_glyphs import BUILTIN_FONT
from neon_grid import Grid, trim_vertical

# Configure logging
logger = logging.getLogger('neon_banner')

EffectParams = Union[SweepConfig, WaveConfig, RollConfig]

# Parameter record expected by each animation effect
EFFECT_PARAMS = {
    AnimationEffect.SWEEP: SweepConfig,
    AnimationEffect.WAVE: WaveConfig,
    AnimationEffect.ROLL: RollConfig,
}

# ============================================================================
# BANNER CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class BannerConfig:
    """
    Complete banner styling.

    Attributes:
        layout: Alignment, padding, kerning, line gap, width limits, trim
        gradient: Color gradient over the glyph block (None = uncolored)
        fill: Character fill for occupied cells
        dither: Banner-level dot dither applied after the fill
        shadow: Drop shadow
        edge_shade: Shaded ring around the glyphs
        outline: Boundary emphasis
        light_sweep: Static highlight band
        border: Frame around the finished banner
        color_mode: Output color mode
        name: Preset name, informational
    """
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    gradient: Optional[Gradient] = None
    fill: FillConfig = field(default_factory=FillConfig)
    dither: Optional[DitherConfig] = None
    shadow: Optional[ShadowConfig] = None
    edge_shade: Optional[EdgeShadeConfig] = None
    outline: Optional[OutlineConfig] = None
    light_sweep: Optional[SweepConfig] = None
    border: Optional[BorderConfig] = None
    color_mode: ColorMode = ColorMode.AUTO
    name: str = ''

    def __post_init__(self):
        object.__setattr__(self, 'color_mode',
                           coerce_enum(ColorMode, self.color_mode, 'color_mode'))
        self.validate()

    def validate(self) -> bool:
        """
        Check that every section holds the right record type.

        Raises:
            ConfigError: on a section of the wrong type
        """
        expected = {
            'layout': (LayoutConfig, False),
            'gradient': (Gradient, True),
            'fill': (FillConfig, False),
            'dither': (DitherConfig, True),
            'shadow': (ShadowConfig, True),
            'edge_shade': (EdgeShadeConfig, True),
            'outline': (OutlineConfig, True),
            'light_sweep': (SweepConfig, True),
            'border': (BorderConfig, True),
        }
        for name, (record_type, optional) in expected.items():
            value = getattr(self, name)
            if value is None and optional:
                continue
            if not isinstance(value, record_type):
                raise ConfigError(name, value, f"expected {record_type.__name__}")
        return True

    def with_changes(self, **changes: Any) -> 'BannerConfig':
        """Copy with some sections replaced (validated again)"""
        return replace(self, **changes)


# ============================================================================
# PIPELINE
# ============================================================================

def render_grid(text: str, config: Optional[BannerConfig] = None,
                font: Optional[Font] = None) -> Grid:
    """
    Run every styling stage and return the finished grid.

    Args:
        text: Banner text
        config: Styling (defaults to a plain BannerConfig)
        font: Font (defaults to the builtin block font)

    Raises:
        EmptyTextError: text has nothing printable
    """
    config = config or BannerConfig()
    font = font or BUILTIN_FONT
    layout = config.layout

    grid = compose(text, font, replace(layout, width=None, max_width=None), pad=False)
    if layout.trim:
        grid = trim_vertical(grid)

    if config.gradient is not None:
        config.gradient.apply(grid)
    apply_fill(grid, config.fill)
    if config.dither is not None:
        apply_dither(grid, config.dither)

    grid = pad_grid(grid, layout.padding)
    if layout.width is not None or layout.max_width is not None:
        grid = fit_width(grid, layout.width, layout.max_width, layout.align)

    if config.shadow is not None:
        grid = apply_shadow(grid, config.shadow)
    if config.edge_shade is not None:
        grid = apply_edge_shade(grid, config.edge_shade)
    if config.outline is not None:
        apply_outline(grid, config.outline)

    if config.light_sweep is not None:
        apply_light_sweep(grid, config.light_sweep)
    if config.border is not None:
        grid = apply_border(grid, config.border)

    logger.debug(f"Rendered {text!r} with {config.name or 'custom'} style: {grid!r}")
    return grid


def render(text: str, config: Optional[BannerConfig] = None, font: Optional[Font] = None,
           hints: Optional[CapabilityHints] = None) -> str:
    """
    Render a banner to an escape-sequence string.

    Args:
        text: Banner text
        config: Styling
        font: Font (defaults to the builtin block font)
        hints: Terminal capability hints for color_mode AUTO

    Returns:
        Rows joined by newlines, no trailing newline
    """
    config = config or BannerConfig()
    return emit(render_grid(text, config, font), config.color_mode, hints)


def animate(text: str, effect: Union[AnimationEffect, str] = AnimationEffect.SWEEP,
            frames: Optional[int] = None, config: Optional[BannerConfig] = None,
            font: Optional[Font] = None, params: Optional[EffectParams] = None) -> AnimationFrames:
    """
    Build animation frames over the fully styled banner.

    Args:
        text: Banner text
        effect: sweep, wave or roll
        frames: Frame count (roll defaults to one full period, the others
            to DEFAULT_FRAME_COUNT)
        config: Styling of the base banner
        font: Font (defaults to the builtin block font)
        params: SweepConfig, WaveConfig or RollConfig matching the effect

    Raises:
        ConfigError: params of the wrong type for the effect
    """
    effect = coerce_enum(AnimationEffect, effect, 'effect')
    expected = EFFECT_PARAMS[effect]
    if params is not None and not isinstance(params, expected):
        raise ConfigError('params', params, f"{effect.value} takes {expected.__name__}")

    if frames is not None:
        check_count('frames', frames, 1)
    total = DEFAULT_FRAME_COUNT if frames is None else frames

    base = render_grid(text, config, font)
    if effect == AnimationEffect.ROLL:
        sequence = roll_frames(base, params, frames)
    elif effect == AnimationEffect.WAVE:
        sequence = wave_frames(base, params, total)
    else:
        sequence = sweep_frames(base, params, total)

    logger.info(f"Prepared {len(sequence)} {effect.value} frames for {text!r}")
    return sequence


def animate_ansi(text: str, effect: Union[AnimationEffect, str] = AnimationEffect.SWEEP,
                 frames: Optional[int] = None, config: Optional[BannerConfig] = None,
                 font: Optional[Font] = None, hints: Optional[CapabilityHints] = None,
                 params: Optional[EffectParams] = None,
                 max_workers: Optional[int] = None) -> List[str]:
    """Animation frames serialized to escape-sequence strings, in order"""
    config = config or BannerConfig()
    sequence = animate(text, effect, frames, config, font, params)
    return emit_frames(sequence.render_all(max_workers), config.color_mode, hints)


# ============================================================================
# RENDERER FACADE
# ============================================================================

class BannerRenderer:
    """
    Font and style bundled for repeated rendering.

    Keeps the wall-clock time of every render and animation build so
    callers can inspect throughput with get_stats().
    """

    def __init__(self, config: Optional[BannerConfig] = None, font: Optional[Font] = None,
                 hints: Optional[CapabilityHints] = None):
        self.config = config or BannerConfig()
        self.font = font or BUILTIN_FONT
        self.hints = hints
        self.render_times: List[float] = []
        self.frames_generated = 0

    def _timed(self, started: float) -> None:
        self.render_times.append((time.perf_counter() - started) * 1000)

    def render_grid(self, text: str) -> Grid:
        started = time.perf_counter()
        grid = render_grid(text, self.config, self.font)
        self._timed(started)
        return grid

    def render(self, text: str) -> str:
        started = time.perf_counter()
        output = render(text, self.config, self.font, self.hints)
        self._timed(started)
        return output

    def animate(self, text: str, effect: Union[AnimationEffect, str] = AnimationEffect.SWEEP,
                frames: Optional[int] = None,
                params: Optional[EffectParams] = None) -> AnimationFrames:
        started = time.perf_counter()
        sequence = animate(text, effect, frames, self.config, self.font, params)
        self.frames_generated += len(sequence)
        self._timed(started)
        return sequence

    def animate_ansi(self, text: str, effect: Union[AnimationEffect, str] = AnimationEffect.SWEEP,
                     frames: Optional[int] = None, params: Optional[EffectParams] = None,
                     max_workers: Optional[int] = None) -> List[str]:
        started = time.perf_counter()
        output = animate_ansi(text, effect, frames, self.config, self.font, self.hints,
                              params, max_workers)
        self.frames_generated += len(output)
        self._timed(started)
        return output

    def get_stats(self) -> Dict[str, Any]:
        """Get render statistics"""
        if not self.render_times:
            return {'status': 'No renders yet'}

        return {
            'avg_render_time': sum(self.render_times) / len(self.render_times),
            'min_render_time': min(self.render_times),
            'max_render_time': max(self.render_times),
            'renders_completed': len(self.render_times),
            'frames_generated': self.frames_generated,
            'font': self.font.name or '<unnamed>',
            'style': self.config.name or 'custom',
            'color_mode': self.config.color_mode.value,
        }


# ============================================================================
# FACTORY FUNCTION
# ============================================================================

def create_renderer(config: Optional[BannerConfig] = None, font: Optional[Font] = None,
                    hints: Optional[CapabilityHints] = None) -> BannerRenderer:
    """Factory function for renderer creation"""
    return BannerRenderer(config, font, hints)
