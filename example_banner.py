#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Animated Banner Example
=============================================
Copyright (c) 2025 PNGN-Tec LLC
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from neon_banner import create_renderer
from neon_config import CapabilityHints, DEFAULT_FRAME_MS
from neon_emit import emit_frames
from neon_errors import BannerError
from neon_font import parse_font
from neon_presets import DEFAULT_STYLE, config_from_environment, get_style, list_styles
from neon_snapshot import frames_to_gif


def main():
    parser = argparse.ArgumentParser(description='PNGN Neon Banner')
    parser.add_argument('text', nargs='?', default='NEON')
    parser.add_argument('--style', default=DEFAULT_STYLE, choices=list_styles())
    parser.add_argument('--font', type=Path, help='FIGlet .flf font file')
    parser.add_argument('--effect', choices=['none', 'sweep', 'wave', 'roll'], default='none')
    parser.add_argument('--frames', type=int, default=None)
    parser.add_argument('--delay', type=int, default=DEFAULT_FRAME_MS, help='ms between frames')
    parser.add_argument('--gif', type=Path, help='Also save the animation as a GIF')
    parser.add_argument('--debug', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(name)s %(levelname)s: %(message)s')

    try:
        font = parse_font(args.font.read_bytes(), name=args.font.stem) if args.font else None
        config = config_from_environment(base=get_style(args.style))
        renderer = create_renderer(config, font, CapabilityHints.from_environ())

        if args.effect == 'none':
            print(renderer.render(args.text))
            return 0

        frames = renderer.animate(args.text, args.effect, args.frames)
        grids = frames.render_all()
        outputs = emit_frames(grids, config.color_mode, renderer.hints)
    except (BannerError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    height = grids[0].height
    for index, output in enumerate(outputs):
        if index:
            # Cursor back to the top of the banner
            sys.stdout.write(f"\033[{height - 1}F" if height > 1 else "\r")
        sys.stdout.write(output)
        sys.stdout.flush()
        time.sleep(args.delay / 1000)
    sys.stdout.write("\n")

    if args.gif:
        try:
            args.gif.write_bytes(frames_to_gif(grids, duration_ms=args.delay))
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(f"✓ Saved {args.gif}")

    stats = renderer.get_stats()
    logging.getLogger('example_banner').info(
        f"{len(outputs)} frames, avg {stats['avg_render_time']:.1f}ms per call")
    return 0


if __name__ == "__main__":
    sys.exit(main())
