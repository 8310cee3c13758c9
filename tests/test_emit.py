"""Tests for ANSI emission and color mode detection"""

import re

import pytest

from neon_color import Gradient, Palette
from neon_config import CapabilityHints, ColorMode
from neon_emit import (
    ANSI,
    ansi256_to_rgb,
    detect_color_mode,
    emit,
    emit_frames,
    rgb_to_ansi256,
    strip_ansi,
)
from neon_grid import Cell, Grid

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def colored(rows, fg):
    grid = Grid.from_rows(rows)
    for _, _, cell in grid.iter_cells():
        if cell.occupied:
            cell.fg = fg
    return grid


class TestDetectColorMode:
    @pytest.mark.parametrize("hints, expected", [
        (CapabilityHints(no_color=True, colorterm='truecolor', term='xterm'), ColorMode.NONE),
        (CapabilityHints(colorterm='truecolor', term='dumb'), ColorMode.TRUECOLOR),
        (CapabilityHints(colorterm='24bit'), ColorMode.TRUECOLOR),
        (CapabilityHints(term='xterm-256color'), ColorMode.ANSI256),
        (CapabilityHints(term='dumb'), ColorMode.NONE),
        (CapabilityHints(), ColorMode.NONE),
    ])
    def test_precedence(self, hints, expected):
        assert detect_color_mode(hints) == expected

    def test_no_color_presence_counts(self):
        hints = CapabilityHints.from_environ({'NO_COLOR': '', 'COLORTERM': 'truecolor'})
        assert hints.no_color
        assert detect_color_mode(hints) == ColorMode.NONE

    def test_from_environ_reads_mapping(self):
        hints = CapabilityHints.from_environ({'TERM': 'screen', 'COLORTERM': 'x'})
        assert hints == CapabilityHints(no_color=False, colorterm='x', term='screen')


class TestAnsi256:
    def test_primaries(self):
        assert rgb_to_ansi256(RED) == 196
        assert rgb_to_ansi256((0, 0, 0)) == 16
        assert rgb_to_ansi256((255, 255, 255)) == 231

    def test_grays_use_gray_ramp(self):
        assert rgb_to_ansi256((128, 128, 128)) == 244
        assert ansi256_to_rgb(244) == (128, 128, 128)

    def test_cube_roundtrip(self):
        assert ansi256_to_rgb(rgb_to_ansi256((95, 135, 175))) == (95, 135, 175)


class TestEmit:
    def test_none_mode_is_plain_text(self):
        grid = colored(["ab", " c"], RED)
        output = emit(grid, ColorMode.NONE)
        assert output == "ab\n c"
        assert "\033" not in output

    def test_truecolor_run_shares_one_sequence(self):
        output = emit(colored(["ab"], RED), ColorMode.TRUECOLOR)
        assert output == "\033[38;2;255;0;0mab\033[0m"

    def test_color_change_starts_new_sequence(self):
        grid = colored(["ab"], RED)
        grid.get(0, 1).fg = BLUE
        output = emit(grid, 'truecolor')
        assert output == "\033[38;2;255;0;0ma\033[38;2;0;0;255mb\033[0m"

    def test_empty_cell_resets_active_color(self):
        output = emit(colored(["a b"], RED), ColorMode.TRUECOLOR)
        assert output == "\033[38;2;255;0;0ma\033[0m \033[38;2;255;0;0mb\033[0m"

    def test_background(self):
        grid = Grid(1, 1)
        grid.set(0, 0, Cell(char='x', fg=RED, bg=BLUE, alpha=1.0))
        assert emit(grid, ColorMode.TRUECOLOR) == "\033[38;2;255;0;0;48;2;0;0;255mx\033[0m"
        assert emit(grid, ColorMode.ANSI256) == "\033[38;5;196;48;5;21mx\033[0m"

    def test_ansi256_quantized(self):
        assert emit(colored(["a"], RED), ColorMode.ANSI256) == "\033[38;5;196ma\033[0m"

    def test_ansi256_merges_colors_in_same_bucket(self):
        grid = colored(["ab"], (250, 0, 0))
        grid.get(0, 1).fg = (252, 3, 1)
        assert emit(grid, ColorMode.ANSI256).count("\033[38;5;") == 1

    def test_rows_end_with_reset_and_no_trailing_newline(self):
        output = emit(colored(["a", "b"], RED), ColorMode.TRUECOLOR)
        rows = output.split("\n")
        assert len(rows) == 2
        assert all(row.endswith(ANSI.RESET) for row in rows)
        assert not output.endswith("\n")

    def test_uncolored_cells_emit_no_color(self):
        assert emit(Grid.from_rows(["ab"]), ColorMode.TRUECOLOR) == "ab\033[0m"

    def test_auto_uses_hints(self):
        grid = colored(["a"], RED)
        assert emit(grid, 'auto', CapabilityHints(term='xterm')) == "\033[38;5;196ma\033[0m"
        assert emit(grid, ColorMode.AUTO) == "a"

    def test_no_consecutive_identical_sequences(self):
        grid = Grid.from_rows(["#### ####", "#########", "## ## ###"])
        Gradient.horizontal(Palette(((0, 0, 0), (255, 255, 255)))).apply(grid)
        sequences = re.findall(r"\033\[[0-9;]*m", emit(grid, ColorMode.ANSI256))
        for first, second in zip(sequences, sequences[1:]):
            assert first != second or first == ANSI.RESET

    def test_strip_ansi_recovers_text(self):
        grid = colored(["a b", "cde"], RED)
        assert strip_ansi(emit(grid, ColorMode.TRUECOLOR)) == grid.to_text()

    def test_emit_frames(self):
        frames = [colored(["a"], RED), colored(["a"], BLUE)]
        outputs = emit_frames(frames, ColorMode.TRUECOLOR)
        assert outputs == ["\033[38;2;255;0;0ma\033[0m", "\033[38;2;0;0;255ma\033[0m"]
