#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Cell Width Module
=======================================
Copyright (c) 2025 PNGN-Tec LLC

Terminal Column Measurement
===========================
Every grid cell occupies exactly one terminal column. Characters supplied
through configuration (fill blocks, dither ramps, stipple dots, shade and
border glyphs) are checked here before they can reach a grid, so a wide
emoji or a combining mark is rejected at construction time instead of
silently breaking row alignment at emit time.

Technical Implementation
========================
- Uses wcwidth for the East Asian width and zero-width tables
- Per-codepoint cache pre-seeded with printable ASCII
- Thread-safe: the cache is shared across frame worker threads

Module Interface
================
- WidthCalculator: cached per-character width lookups
- char_width(): width of one character via the default calculator
- require_single_column(): raise ConfigError unless every char is 1 column
"""

import logging
import threading
from typing import Dict, Iterable, Union

from wcwidth import wcwidth

from neon_errors import ConfigError

# Configure logging
logger = logging.getLogger('neon_width')


class WidthCalculator:
    """
    Thread-safe character width calculator with a codepoint cache.

    Attributes:
        stats: Dictionary containing lookup statistics
    """

    def __init__(self, use_codepoint_cache: bool = True):
        self._lock = threading.Lock()
        self._use_codepoint_cache = use_codepoint_cache
        self._codepoint_cache: Dict[int, int] = (
            self._build_codepoint_cache() if use_codepoint_cache else {}
        )
        self.stats = {
            'cache_hits': 0,
            'cache_misses': 0,
        }

    def char_width(self, char: str) -> int:
        """
        Get the column width of a single character.

        Args:
            char: One character

        Returns:
            Column width; -1 for control characters, 0 for zero-width marks
        """
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")

        code = ord(char)
        with self._lock:
            if code in self._codepoint_cache:
                self.stats['cache_hits'] += 1
                return self._codepoint_cache[code]
            self.stats['cache_misses'] += 1

        width = wcwidth(char)
        if self._use_codepoint_cache:
            with self._lock:
                self._codepoint_cache[code] = width
        return width

    def _build_codepoint_cache(self) -> Dict[int, int]:
        """Seed the cache with printable ASCII"""
        return {code: 1 for code in range(32, 127)}

    def get_stats(self) -> Dict[str, Union[int, float]]:
        """Get lookup statistics with hit rate"""
        with self._lock:
            stats = dict(self.stats)
            stats['cache_entries'] = len(self._codepoint_cache)
        total = stats['cache_hits'] + stats['cache_misses']
        stats['cache_hit_rate'] = stats['cache_hits'] / total if total else 0.0
        return stats


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_calculator = None
_calculator_lock = threading.Lock()


def get_calculator() -> WidthCalculator:
    """Get the shared default calculator"""
    global _default_calculator

    if _default_calculator is None:
        with _calculator_lock:
            if _default_calculator is None:
                _default_calculator = WidthCalculator()

    return _default_calculator


def char_width(char: str) -> int:
    """
    Get column width of one character using the default calculator.

    Example:
        >>> char_width("█")
        1
        >>> char_width("你")
        2
    """
    return get_calculator().char_width(char)


def is_single_column(char: str) -> bool:
    """True when char is exactly one character occupying one column"""
    return len(char) == 1 and char_width(char) == 1


def require_single_column(field_name: str, chars: Iterable[str]) -> None:
    """
    Validate that every configured character fits in one grid cell.

    Args:
        field_name: Config field reported in the error
        chars: Characters (or a string) to check

    Raises:
        ConfigError: on an empty sequence or any non single-column character
    """
    chars = list(chars)
    if not chars:
        raise ConfigError(field_name, '', "must contain at least one character")
    for char in chars:
        if not is_single_column(char):
            raise ConfigError(field_name, char, "must be a single-column printable character")
