"""Tests for colors, palettes and gradients"""

import numpy as np
import pytest

from neon_color import (
    PALETTES,
    Gradient,
    Palette,
    add_light,
    darken,
    fill_color,
    get_palette,
    lerp,
    luminance,
    parse_hex,
    to_hex,
)
from neon_config import GradientDirection
from neon_errors import ColorParseError, ConfigError
from neon_grid import Grid

BLACK_WHITE = Palette(((0, 0, 0), (255, 255, 255)))
CYBER = Palette.from_hex(["#00E5FF", "#7B5CFF", "#FF5AD9"])


class TestParseHex:
    def test_valid(self):
        assert parse_hex("#FF5AD9") == (255, 90, 217)
        assert parse_hex("#00e5ff") == (0, 229, 255)

    def test_surrounding_whitespace(self):
        assert parse_hex("  #010203\n") == (1, 2, 3)

    @pytest.mark.parametrize("value", ["FF00FF", "#FFF", "#FF00FF0", "#GG0000", "", 0xFF00FF])
    def test_invalid(self, value):
        with pytest.raises(ColorParseError):
            parse_hex(value)

    def test_to_hex(self):
        assert to_hex((255, 90, 217)) == "#FF5AD9"


class TestPalette:
    def test_empty_palette_rejected(self):
        with pytest.raises(ConfigError):
            Palette.from_hex([])

    def test_first_bad_entry_raises(self):
        with pytest.raises(ColorParseError) as excinfo:
            Palette.from_hex(["#000000", "nope", "#zzzzzz"])
        assert excinfo.value.value == "nope"

    def test_comma_separated(self):
        assert Palette.from_hex("#000000, #FFFFFF") == BLACK_WHITE

    def test_named_palettes_all_parse(self):
        for name in PALETTES:
            assert len(get_palette(name)) >= 2

    def test_unknown_palette(self):
        with pytest.raises(ConfigError):
            get_palette("plaid")


class TestGradient:
    def test_endpoints_exact(self):
        gradient = Gradient(CYBER)
        assert gradient.color_at(0.0) == (0, 229, 255)
        assert gradient.color_at(1.0) == (255, 90, 217)

    def test_exact_at_interior_stop(self):
        assert Gradient(CYBER).color_at(0.5) == (123, 92, 255)

    def test_half_up_rounding(self):
        assert Gradient(BLACK_WHITE).color_at(0.5) == (128, 128, 128)

    def test_clamped(self):
        gradient = Gradient(BLACK_WHITE)
        assert gradient.color_at(-3.0) == (0, 0, 0)
        assert gradient.color_at(7.0) == (255, 255, 255)

    def test_single_stop(self):
        assert Gradient(Palette(((9, 8, 7),))).color_at(0.3) == (9, 8, 7)

    def test_direction_validated_eagerly(self):
        with pytest.raises(ConfigError):
            Gradient(CYBER, "sideways")
        assert Gradient(CYBER, "horizontal").direction == GradientDirection.HORIZONTAL

    def test_diagonal_positions(self):
        positions = Gradient.diagonal(BLACK_WHITE).positions(3, 3)
        assert positions[0, 0] == 0.0
        assert positions[2, 2] == 1.0
        assert positions[0, 2] == pytest.approx(0.5)

    def test_degenerate_axis_is_zero(self):
        assert np.all(Gradient.vertical(BLACK_WHITE).positions(1, 4) == 0.0)
        assert np.all(Gradient.horizontal(BLACK_WHITE).positions(4, 1) == 0.0)

    def test_vertical_apply_monotonic(self):
        grid = Grid.from_rows(["#"] * 5)
        Gradient.vertical(BLACK_WHITE).apply(grid)
        reds = [grid.get(row, 0).fg[0] for row in range(5)]
        assert reds == sorted(reds)
        assert reds[0] == 0 and reds[-1] == 255

    def test_single_row_uses_first_stop(self):
        grid = Grid.from_rows(["###"])
        Gradient.vertical(CYBER).apply(grid)
        assert {cell.fg for _, _, cell in grid.iter_cells()} == {(0, 229, 255)}

    def test_apply_skips_empty_cells(self):
        grid = Grid.from_rows(["# #"])
        Gradient.horizontal(BLACK_WHITE).apply(grid)
        assert grid.get(0, 1).fg is None
        assert grid.get(0, 2).fg == (255, 255, 255)


class TestColorHelpers:
    def test_lerp(self):
        assert lerp((0, 0, 0), (100, 200, 255), 0.5) == (50, 100, 128)

    def test_darken(self):
        assert darken((200, 100, 50), 0.5) == (100, 50, 25)
        assert darken((200, 100, 50), 1.0) == (0, 0, 0)

    def test_add_light_clamps(self):
        assert add_light((200, 0, 10), (255, 255, 255), 0.5) == (255, 128, 138)

    def test_luminance(self):
        assert luminance((255, 255, 255)) == pytest.approx(255.0)
        assert luminance((0, 0, 0)) == 0.0

    def test_fill_color(self):
        grid = Grid.from_rows(["a "])
        fill_color(grid, (1, 2, 3))
        assert grid.get(0, 0).fg == (1, 2, 3)
        assert grid.get(0, 1).fg is None
