#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Style Presets
===================================
Copyright (c) 2025 PNGN-Tec LLC

Named, immutable BannerConfig records, one per stock palette: vertical
gradient, glyph characters kept, checker dot dither on the shade
characters, truecolor output.

Environment Overrides
=====================
config_from_environment() reads:
- NEON_STYLE:      preset name to start from
- NEON_COLOR_MODE: auto, truecolor, ansi256 or none
- NEON_KERNING:    blank columns between glyphs
- NEON_PADDING:    "n", "vertical,horizontal" or "top,right,bottom,left"
"""

import logging
import os
from dataclasses import replace
from typing import Dict, List, Mapping, Optional

from neon_banner import BannerConfig
from neon_color import PALETTES, Gradient, get_palette
from neon_config import (
    ColorMode,
    DEFAULT_DOTS,
    DitherConfig,
    DitherMode,
    FillConfig,
    FillMode,
    Padding,
    coerce_enum,
)
from neon_errors import ConfigError

# Configure logging
logger = logging.getLogger('neon_presets')

DEFAULT_STYLE = 'neon_cyber'

# Shade characters eligible for the preset dot dither
PRESET_DITHER_TARGETS = "░▒▓"


def _preset(name: str) -> BannerConfig:
    return BannerConfig(
        gradient=Gradient.vertical(get_palette(name)),
        fill=FillConfig(mode=FillMode.KEEP),
        dither=DitherConfig(
            mode=DitherMode.CHECKER,
            period=3,
            dots=DEFAULT_DOTS,
            targets=PRESET_DITHER_TARGETS,
        ),
        color_mode=ColorMode.TRUECOLOR,
        name=name,
    )


STYLES: Dict[str, BannerConfig] = {name: _preset(name) for name in PALETTES}


def list_styles() -> List[str]:
    """Preset names in definition order"""
    return list(STYLES)


def get_style(name: str) -> BannerConfig:
    """
    Look up a preset by name ('-' and '_' are interchangeable).

    Raises:
        ConfigError: for unknown names
    """
    key = name.strip().lower().replace('-', '_')
    if key not in STYLES:
        raise ConfigError('style', name, f"unknown style; choose from {', '.join(STYLES)}")
    return STYLES[key]


# ============================================================================
# ENVIRONMENT OVERRIDES
# ============================================================================

def _parse_int(field_name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(field_name, raw, "must be an integer")


def _parse_padding(raw: str) -> Padding:
    parts = [_parse_int('NEON_PADDING', part) for part in raw.split(',')]
    if len(parts) == 1:
        return Padding.coerce(parts[0])
    return Padding.coerce(tuple(parts))


def config_from_environment(environ: Optional[Mapping[str, str]] = None,
                            base: Optional[BannerConfig] = None) -> BannerConfig:
    """
    Apply NEON_* overrides to a config.

    Args:
        environ: Mapping to read (defaults to os.environ)
        base: Starting config when NEON_STYLE is not set (defaults to a
            plain BannerConfig)

    Returns:
        New BannerConfig; the base is never modified

    Raises:
        ConfigError: unknown style or color mode, or a malformed number
    """
    if environ is None:
        environ = os.environ

    config = base or BannerConfig()
    if 'NEON_STYLE' in environ:
        config = get_style(environ['NEON_STYLE'])

    if 'NEON_COLOR_MODE' in environ:
        config = replace(config, color_mode=coerce_enum(
            ColorMode, environ['NEON_COLOR_MODE'], 'NEON_COLOR_MODE'))

    layout = config.layout
    if 'NEON_KERNING' in environ:
        layout = replace(layout, kerning=_parse_int('NEON_KERNING', environ['NEON_KERNING']))
    if 'NEON_PADDING' in environ:
        layout = replace(layout, padding=_parse_padding(environ['NEON_PADDING']))
    if layout is not config.layout:
        config = replace(config, layout=layout)

    logger.debug(f"Environment config: style={config.name or 'custom'}, "
                 f"color_mode={config.color_mode.value}")
    return config
