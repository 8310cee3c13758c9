#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Animation Engine
======================================
Copyright (c) 2025 PNGN-Tec LLC

Deterministic Frame Generation
==============================
An animation is a base Grid plus a frame transform. Frame i is computed
from (base, i, total, params) only, so any frame can be produced on
demand, in any order, on any thread, and always comes out the same.

Effects
=======
- Sweep: highlight band travelling from center - travel to center + travel
- Wave:  sinusoidal breathing; dims toward black in the troughs and
         brightens toward white on the crests, characters never change
- Roll:  the whole grid scrolls with wraparound along one axis, so frame k
         and frame k + axis length are identical

Module Interface
================
- AnimationFrames: finite, indexable, restartable frame sequence
- sweep_frames() / wave_frames() / roll_frames(): effect factories
- sweep_frame() / wave_frame() / roll_frame(): single-frame transforms
"""

import itertools
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Callable, Iterator, List, Optional

import numpy as np

from neon_color import axis_positions, breathe
from neon_config import (
    DEFAULT_FRAME_COUNT,
    RollAxis,
    RollConfig,
    SweepConfig,
    WaveConfig,
    check_count,
)
from neon_effects import apply_light_sweep
from neon_grid import Grid

# Configure logging
logger = logging.getLogger('neon_animate')

# (base, index, total) -> frame
FrameTransform = Callable[[Grid, int, int], Grid]

# Frame counts at or below this render serially in render_all()
SERIAL_THRESHOLD = 2

# ============================================================================
# FRAME SEQUENCE
# ============================================================================

class AnimationFrames:
    """
    Finite sequence of animation frames computed on demand.

    Supports len(), indexing (negative indices count from the end) and
    repeated iteration. Every returned frame is a new Grid; the base is
    never modified.
    """

    def __init__(self, base: Grid, total: int, transform: FrameTransform,
                 effect: str = 'custom'):
        check_count('frames', total, 1)
        self.base = base.copy()
        self.total = total
        self.transform = transform
        self.effect = effect

    def __len__(self) -> int:
        return self.total

    def frame(self, index: int) -> Grid:
        """Compute frame ``index`` (0 <= index < total)"""
        if index < 0:
            index += self.total
        if not 0 <= index < self.total:
            raise IndexError(f"Frame {index} out of range for {self.total} frames")
        return self.transform(self.base, index, self.total)

    def __getitem__(self, index: int) -> Grid:
        return self.frame(index)

    def __iter__(self) -> Iterator[Grid]:
        for index in range(self.total):
            yield self.frame(index)

    def loop(self) -> Iterator[Grid]:
        """Cycle through the frames forever"""
        for index in itertools.cycle(range(self.total)):
            yield self.frame(index)

    def render_all(self, max_workers: Optional[int] = None) -> List[Grid]:
        """
        Compute every frame, concurrently when there are enough of them.

        Args:
            max_workers: Override max worker threads

        Returns:
            Frames in index order
        """
        if self.total <= SERIAL_THRESHOLD:
            return list(self)

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self.frame, index) for index in range(self.total)]
            frames = [future.result() for future in futures]

        logger.debug(f"Rendered {self.total} {self.effect} frames")
        return frames

    def __repr__(self) -> str:
        return f"AnimationFrames({self.effect}, frames={self.total}, base={self.base!r})"


# ============================================================================
# FRAME TRANSFORMS
# ============================================================================

def sweep_center(index: int, total: int, sweep: SweepConfig) -> float:
    """Band center for one frame"""
    start = sweep.center - sweep.travel
    return start + (index / total) * 2.0 * sweep.travel


def sweep_frame(base: Grid, index: int, total: int, sweep: SweepConfig) -> Grid:
    frame = base.copy()
    apply_light_sweep(frame, sweep, sweep_center(index, total, sweep))
    return frame


def wave_frame(base: Grid, index: int, total: int, wave: WaveConfig) -> Grid:
    frame = base.copy()
    if frame.width == 0 or frame.height == 0:
        return frame

    phase = 2.0 * math.pi * wave.cycles * index / total
    fy, fx = axis_positions(frame.height, frame.width)
    w = (np.sin(phase + 2.0 * math.pi * (fx * wave.freq_x + fy * wave.freq_y)) + 1.0) / 2.0
    dim = np.where(w < 0.5, wave.dim * (0.5 - w) / 0.5, 0.0)
    bright = np.where(w >= 0.5, wave.bright * (w - 0.5) / 0.5, 0.0)

    colors, _ = frame.color_planes()
    frame.apply_colors(breathe(colors, dim, bright), frame.colored())
    return frame


def roll_offset(index: int, length: int, roll: RollConfig) -> int:
    """Signed shift for one frame, already reduced modulo the axis length"""
    offset = (index * roll.step) % length
    return -offset if roll.reverse else offset


def roll_frame(base: Grid, index: int, total: int, roll: RollConfig) -> Grid:
    axis = 1 if roll.axis == RollAxis.HORIZONTAL else 0
    length = base.shape[axis]
    if length == 0:
        return base.copy()

    source = np.roll(np.arange(base.width * base.height).reshape(base.shape),
                     roll_offset(index, length, roll), axis=axis)
    cells = [base.get(int(position) // base.width, int(position) % base.width).copy()
             for position in source.ravel()]
    return Grid(base.width, base.height, cells)


# ============================================================================
# FACTORIES
# ============================================================================

def sweep_frames(base: Grid, sweep: Optional[SweepConfig] = None,
                 total: int = DEFAULT_FRAME_COUNT) -> AnimationFrames:
    """Highlight band sweeping across the banner"""
    sweep = sweep or SweepConfig()
    return AnimationFrames(base, total, partial(sweep_frame, sweep=sweep), 'sweep')


def wave_frames(base: Grid, wave: Optional[WaveConfig] = None,
                total: int = DEFAULT_FRAME_COUNT) -> AnimationFrames:
    """Breathing brightness wave"""
    wave = wave or WaveConfig()
    return AnimationFrames(base, total, partial(wave_frame, wave=wave), 'wave')


def roll_frames(base: Grid, roll: Optional[RollConfig] = None,
                total: Optional[int] = None) -> AnimationFrames:
    """
    Scroll with wraparound.

    total defaults to one full period (the axis length), at least one frame.
    """
    roll = roll or RollConfig()
    if total is None:
        length = base.width if roll.axis == RollAxis.HORIZONTAL else base.height
        total = max(1, length)
    return AnimationFrames(base, total, partial(roll_frame, roll=roll), 'roll')
