#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Error Types
=================================
Copyright (c) 2025 PNGN-Tec LLC

Every failure the renderer can produce derives from BannerError so callers
can catch the whole family at the boundary. Nothing in the core retries or
swallows these; a render either completes or raises before any output is
returned.
"""

from typing import Any, Optional


class BannerError(Exception):
    """Base class for all banner rendering failures"""


class FontFormatError(BannerError):
    """Malformed header, truncated glyph data or a missing glyph"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
        self.line_number = line_number


class EmptyTextError(BannerError):
    """Input text contains nothing renderable"""


class ColorParseError(BannerError):
    """Color string is not a valid #RRGGBB value"""

    def __init__(self, value: Any):
        super().__init__(f"Invalid hex color {value!r}; expected '#RRGGBB'")
        self.value = value


class ConfigError(BannerError, ValueError):
    """Configuration value out of range, raised at construction time"""

    def __init__(self, field_name: str, value: Any, reason: str):
        super().__init__(f"{field_name}={value!r}: {reason}")
        self.field_name = field_name
        self.value = value


class GridIndexError(BannerError, IndexError):
    """Coordinate outside a grid's fixed bounds"""

    def __init__(self, row: int, col: int, height: int, width: int):
        super().__init__(f"Cell ({row}, {col}) outside {width}x{height} grid")
        self.row = row
        self.col = col
