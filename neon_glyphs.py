#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Builtin Font
==================================
Copyright (c) 2025 PNGN-Tec LLC

Five-row block face shipped with the renderer. Every stroke casts a one
column light-shade side to its right, so the shade characters the presets
dither are present in the default face. The glyph table is plain data;
BUILTIN_FONT is assembled from it at import time without any flf parsing
and is validated by Font like any parsed font. Lowercase letters reuse the
uppercase shapes.
"""

from typing import Dict, Tuple

from neon_font import Font, Glyph

BUILTIN_FONT_NAME = "neon-block"
BUILTIN_HEIGHT = 5

STROKE_CHAR = '█'
SHADE_CHAR = '░'

# Uppercase, digits and punctuation; every entry has BUILTIN_HEIGHT rows
BLOCK_ROWS: Dict[str, Tuple[str, ...]] = {
    ' ': ("   ", "   ", "   ", "   ", "   "),
    '!': ("█", "█", "█", " ", "█"),
    '"': ("█ █", "█ █", "   ", "   ", "   "),
    '#': (" █ █ ", "█████", " █ █ ", "█████", " █ █ "),
    '$': (" ████", "█ █  ", " ███ ", "  █ █", "████ "),
    '%': ("█   █", "   █ ", "  █  ", " █   ", "█   █"),
    '&': (" ██  ", "█  █ ", " ██ █", "█  █ ", " ██ █"),
    "'": ("█", "█", " ", " ", " "),
    '(': (" █", "█ ", "█ ", "█ ", " █"),
    ')': ("█ ", " █", " █", " █", "█ "),
    '*': ("     ", "█ █ █", " ███ ", "█ █ █", "     "),
    '+': ("     ", "  █  ", "█████", "  █  ", "     "),
    ',': ("  ", "  ", "  ", " █", "█ "),
    '-': ("    ", "    ", "████", "    ", "    "),
    '.': (" ", " ", " ", " ", "█"),
    '/': ("    █", "   █ ", "  █  ", " █   ", "█    "),
    '0': (" ███ ", "█  ██", "█ █ █", "██  █", " ███ "),
    '1': (" █ ", "██ ", " █ ", " █ ", "███"),
    '2': ("████ ", "    █", " ███ ", "█    ", "█████"),
    '3': ("████ ", "    █", " ███ ", "    █", "████ "),
    '4': ("█   █", "█   █", "█████", "    █", "    █"),
    '5': ("█████", "█    ", "████ ", "    █", "████ "),
    '6': (" ███ ", "█    ", "████ ", "█   █", " ███ "),
    '7': ("█████", "    █", "   █ ", "  █  ", "  █  "),
    '8': (" ███ ", "█   █", " ███ ", "█   █", " ███ "),
    '9': (" ███ ", "█   █", " ████", "    █", " ███ "),
    ':': (" ", "█", " ", "█", " "),
    ';': ("  ", " █", "  ", " █", "█ "),
    '<': ("  █", " █ ", "█  ", " █ ", "  █"),
    '=': ("    ", "████", "    ", "████", "    "),
    '>': ("█  ", " █ ", "  █", " █ ", "█  "),
    '?': ("████ ", "    █", "  ██ ", "     ", "  █  "),
    '@': (" ███ ", "█   █", "█ ███", "█    ", " ████"),
    'A': (" ███ ", "█   █", "█████", "█   █", "█   █"),
    'B': ("████ ", "█   █", "████ ", "█   █", "████ "),
    'C': (" ████", "█    ", "█    ", "█    ", " ████"),
    'D': ("████ ", "█   █", "█   █", "█   █", "████ "),
    'E': ("█████", "█    ", "████ ", "█    ", "█████"),
    'F': ("█████", "█    ", "████ ", "█    ", "█    "),
    'G': (" ████", "█    ", "█  ██", "█   █", " ████"),
    'H': ("█   █", "█   █", "█████", "█   █", "█   █"),
    'I': ("███", " █ ", " █ ", " █ ", "███"),
    'J': ("  ███", "    █", "    █", "█   █", " ███ "),
    'K': ("█   █", "█  █ ", "███  ", "█  █ ", "█   █"),
    'L': ("█    ", "█    ", "█    ", "█    ", "█████"),
    'M': ("█   █", "██ ██", "█ █ █", "█   █", "█   █"),
    'N': ("█   █", "██  █", "█ █ █", "█  ██", "█   █"),
    'O': (" ███ ", "█   █", "█   █", "█   █", " ███ "),
    'P': ("████ ", "█   █", "████ ", "█    ", "█    "),
    'Q': (" ███ ", "█   █", "█ █ █", "█  █ ", " ██ █"),
    'R': ("████ ", "█   █", "████ ", "█  █ ", "█   █"),
    'S': (" ████", "█    ", " ███ ", "    █", "████ "),
    'T': ("█████", "  █  ", "  █  ", "  █  ", "  █  "),
    'U': ("█   █", "█   █", "█   █", "█   █", " ███ "),
    'V': ("█   █", "█   █", "█   █", " █ █ ", "  █  "),
    'W': ("█   █", "█   █", "█ █ █", "██ ██", "█   █"),
    'X': ("█   █", " █ █ ", "  █  ", " █ █ ", "█   █"),
    'Y': ("█   █", " █ █ ", "  █  ", "  █  ", "  █  "),
    'Z': ("█████", "   █ ", "  █  ", " █   ", "█████"),
    '[': ("██", "█ ", "█ ", "█ ", "██"),
    '\\': ("█    ", " █   ", "  █  ", "   █ ", "    █"),
    ']': ("██", " █", " █", " █", "██"),
    '^': (" █ ", "█ █", "   ", "   ", "   "),
    '_': ("    ", "    ", "    ", "    ", "████"),
    '`': ("█ ", " █", "  ", "  ", "  "),
    '{': (" ██", " █ ", "██ ", " █ ", " ██"),
    '|': ("█", "█", "█", "█", "█"),
    '}': ("██ ", " █ ", " ██", " █ ", "██ "),
    '~': ("     ", " ██ █", "█ ██ ", "     ", "     "),
}


def shade_rows(rows: Tuple[str, ...]) -> Tuple[str, ...]:
    """Widen a glyph by one column and shade blanks right of each stroke"""
    width = max(len(row) for row in rows) + 1
    shaded = []
    for row in rows:
        chars = list(row.ljust(width))
        for col in range(1, width):
            if chars[col] == ' ' and row[col - 1:col] == STROKE_CHAR:
                chars[col] = SHADE_CHAR
        shaded.append(''.join(chars))
    return tuple(shaded)


def _build_glyphs() -> Dict[str, Glyph]:
    glyphs = {char: Glyph.from_rows(char, shade_rows(rows)) for char, rows in BLOCK_ROWS.items()}
    for upper in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        lower = upper.lower()
        glyphs[lower] = Glyph.from_rows(lower, shade_rows(BLOCK_ROWS[upper]))
    return glyphs


BUILTIN_FONT = Font(
    height=BUILTIN_HEIGHT,
    glyphs=_build_glyphs(),
    hardblank='$',
    baseline=BUILTIN_HEIGHT,
    name=BUILTIN_FONT_NAME,
    comments="Builtin five-row block face with light-shade sides",
)
