"""Shared fixtures: a tiny three-row FIGlet font and small grids"""

import pytest

from neon_font import parse_font, printable_chars
from neon_grid import Cell, Grid

MINI_HEIGHT = 3

# Distinctive glyphs; everything else is a one-column 'o' bar
MINI_GLYPHS = {
    ' ': ("$", "$", "$"),
    'A': (" # ", "###", "# #"),
    'B': ("## ", "###", "## "),
    '-': ("  ", "--", "  "),
}
DEFAULT_GLYPH = ("o", "o", "o")


def build_flf(glyphs=None, height=MINI_HEIGHT, comments=("mini test font", "two lines")):
    """flf2a text for every printable character, '@' end marks"""
    glyphs = MINI_GLYPHS if glyphs is None else glyphs
    lines = [f"flf2a$ {height} {height} 8 0 {len(comments)}"]
    lines.extend(comments)
    for char in printable_chars():
        rows = glyphs.get(char, DEFAULT_GLYPH)
        for index, row in enumerate(rows):
            lines.append(row + ("@@" if index == len(rows) - 1 else "@"))
    return "\n".join(lines) + "\n"


@pytest.fixture
def mini_font_text():
    return build_flf()


@pytest.fixture
def mini_font(mini_font_text):
    return parse_font(mini_font_text, name="mini")


def solid_grid(width, height, fg=None, char='#'):
    """Grid with every cell occupied"""
    return Grid(width, height, [Cell(char=char, fg=fg, alpha=1.0)
                                for _ in range(width * height)])


@pytest.fixture
def colored_row():
    """1x5 row of black cells"""
    return solid_grid(5, 1, fg=(0, 0, 0))
