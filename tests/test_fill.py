"""Tests for fill modes and dithering"""

import pytest

from conftest import solid_grid
from neon_config import DitherConfig, DitherMode, FillConfig, FillMode
from neon_errors import ConfigError
from neon_fill import (
    apply_dither,
    apply_fill,
    bayer_keep_mask,
    brightness_map,
    mix_hash,
    mix_hash_grid,
)
from neon_grid import Grid

RAMP = "░▒▓█"


class TestFill:
    def test_keep_leaves_characters(self):
        grid = Grid.from_rows(["ab "])
        apply_fill(grid, FillConfig())
        assert grid.lines() == ["ab "]

    def test_blocks(self):
        grid = Grid.from_rows(["a b"])
        apply_fill(grid, FillConfig(mode=FillMode.BLOCKS))
        assert grid.lines() == ["█ █"]

    def test_solid_uses_fill_char(self):
        grid = Grid.from_rows(["ab"])
        apply_fill(grid, FillConfig(mode='solid', char='#'))
        assert grid.lines() == ["##"]

    def test_pixel_full_density_keeps_everything(self):
        grid = solid_grid(4, 4, char='x')
        apply_fill(grid, FillConfig(mode=FillMode.PIXEL, char='▀'))
        assert grid.occupied_count() == 16
        assert set(grid.to_text().replace('\n', '')) == {'▀'}

    def test_pixel_half_density_is_deterministic_halftone(self):
        grid = solid_grid(4, 4)
        apply_fill(grid, FillConfig(mode=FillMode.PIXEL, density=0.5))
        assert grid.occupied_count() == 8
        assert grid.occupancy().tolist() == bayer_keep_mask(4, 4, 0.5).tolist()

    def test_fill_runs_its_own_dither(self):
        grid = solid_grid(3, 1)
        apply_fill(grid, FillConfig(mode=FillMode.BLOCKS,
                                    dither=DitherConfig(period=1, dots='.')))
        assert grid.lines() == ["..."]

    @pytest.mark.parametrize("kwargs", [
        {'char': ''},
        {'char': 'ab'},
        {'char': '字'},
        {'density': 0.0},
        {'density': 1.5},
        {'mode': 'sparkle'},
    ])
    def test_invalid_fill_config(self, kwargs):
        with pytest.raises(ConfigError):
            FillConfig(**kwargs)


class TestHash:
    def test_grid_matches_scalar(self):
        hashes = mix_hash_grid(7, 3, 4)
        for row in range(3):
            for col in range(4):
                assert int(hashes[row, col]) == mix_hash(7, col, row)

    def test_fits_32_bits(self):
        assert 0 <= mix_hash(0xFFFFFFFF, 12345, 678) <= 0xFFFFFFFF


class TestDither:
    def test_checker_stipple_positions(self):
        grid = solid_grid(3, 3)
        apply_dither(grid, DitherConfig(mode=DitherMode.CHECKER, ramp=RAMP, period=3, dots='.:'))
        # Uncolored cells are full brightness, stipple where (row + col) % 3 == 0
        assert grid.lines() == [".██", "██:", "█:█"]

    def test_ramp_follows_brightness(self):
        grid = Grid(2, 1)
        grid.set(0, 0, solid_grid(1, 1, fg=(0, 0, 0)).get(0, 0))
        grid.set(0, 1, solid_grid(1, 1, fg=(255, 255, 255)).get(0, 0))
        apply_dither(grid, DitherConfig(ramp=RAMP, period=2, dots=None))
        # (0, 0) is a stipple cell: already the sparsest entry
        assert grid.lines() == ["░█"]

    def test_stipple_without_dots_steps_sparser(self):
        grid = solid_grid(2, 1)
        apply_dither(grid, DitherConfig(ramp=RAMP, period=1, dots=None))
        assert grid.lines() == ["▓▓"]

    def test_brightness_map(self):
        grid = Grid.from_rows(["ab "])
        grid.get(0, 0).fg = (0, 0, 0)
        assert brightness_map(grid)[0].tolist()[:2] == [0.0, pytest.approx(1.0)]

    def test_targets_limit_dithered_cells(self):
        grid = Grid.from_rows(["░█░"])
        apply_dither(grid, DitherConfig(period=1, dots='.', targets='░'))
        assert grid.lines() == [".█."]

    def test_empty_cells_untouched(self):
        grid = Grid.from_rows(["# #"])
        apply_dither(grid, DitherConfig(period=1, dots='.'))
        assert grid.lines() == [". ."]

    def test_noise_is_deterministic(self):
        config = DitherConfig(mode=DitherMode.NOISE, ramp=RAMP, seed=42, threshold=80)
        first, second = solid_grid(12, 6, fg=(120, 80, 200)), solid_grid(12, 6, fg=(120, 80, 200))
        apply_dither(first, config)
        apply_dither(second, config)
        assert first == second

    def test_noise_seed_changes_pattern(self):
        first, second = solid_grid(12, 6), solid_grid(12, 6)
        apply_dither(first, DitherConfig(mode='noise', seed=1, threshold=128))
        apply_dither(second, DitherConfig(mode='noise', seed=2, threshold=128))
        assert first != second

    def test_noise_threshold_zero_never_stipples(self):
        grid = solid_grid(8, 4)
        apply_dither(grid, DitherConfig(mode='noise', ramp=RAMP, threshold=0))
        assert set(grid.to_text().replace('\n', '')) <= set(RAMP)

    def test_noise_stipple_matches_hash(self):
        grid = solid_grid(6, 3)
        apply_dither(grid, DitherConfig(mode='noise', seed=9, threshold=128, dots='.'))
        for row, col, cell in grid.iter_cells():
            expected = '.' if (mix_hash(9, col, row) & 0xFF) < 128 else '#'
            assert cell.char == expected

    @pytest.mark.parametrize("kwargs", [
        {'ramp': None, 'dots': None},
        {'period': 0},
        {'threshold': 256},
        {'dots': '.:;'},
        {'ramp': ''},
        {'seed': -1},
    ])
    def test_invalid_dither_config(self, kwargs):
        with pytest.raises(ConfigError):
            DitherConfig(**kwargs)
