#!/usr/bin/env python3
#
# PROJECT: triangle-cli-rasterizer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import argparse
import logging
import random
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from triangle_cli_rasterizer.config import RenderConfig
from triangle_cli_rasterizer.errors import RasterError
from triangle_cli_rasterizer.scene import Scene
from triangle_cli_rasterizer.renderer import Renderer
from triangle_cli_rasterizer import demo


def parse_point(text):
    """argparse type for 'X,Y' grid points."""
    try:
        x, y = (int(v) for v in text.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y integers, got {text!r}")
    return (x, y)


def build_parser():
    epilog = """\
examples:
  %(prog)s                                        Random triangles, new one every second
  %(prog)s --points 7,0 1,6 11,12 --factor 4      Fixed triangle, 4x4 dots per cell
  %(prog)s --fill-color #33CC33 --no-outline      Fixed fill color, no outline
  %(prog)s --snapshot --cols 40 --rows 12         Print one random frame and exit
  %(prog)s --snapshot --points 0,0 8,0 4,4 --ascii --no-grid
"""
    parser = argparse.ArgumentParser(
        description="Triangle rasterization demo",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--points", nargs=3, type=parse_point, metavar="X,Y",
                        help="Draw this triangle instead of random ones")
    parser.add_argument("--fill-color", default=None,
                        help="Fill color in hex #RGB or #RRGGBB (default: random)")
    parser.add_argument("--outline-color", default="#EEEEEE",
                        help="Outline color in hex (default: #EEEEEE)")
    parser.add_argument("--factor", type=int, default=2,
                        help="Terminal dots per grid cell, 1-8 (default: 2)")
    parser.add_argument("--no-grid", action="store_true",
                        help="Do not leave gaps between grid cells")
    parser.add_argument("--no-outline", action="store_true",
                        help="Do not draw the triangle outline")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--delay", type=float, default=1.0,
                        help="Seconds between random triangles (default: 1.0)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random triangle generator")
    parser.add_argument("--snapshot", action="store_true",
                        help="Print a single frame to stdout instead of running curses")
    parser.add_argument("--cols", type=int, default=60,
                        help="Snapshot width in characters (default: 60)")
    parser.add_argument("--rows", type=int, default=20,
                        help="Snapshot height in characters (default: 20)")
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                        help="Write log output to this file (stderr is hidden by curses)")
    return parser


def build_config(args):
    config = RenderConfig.detect_terminal(
        draw_factor=args.factor,
        draw_outline=not args.no_outline,
        draw_grid=not args.no_grid,
        outline_color=args.outline_color,
        frame_delay=args.delay,
        log_level=args.log_level,
    )
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    return config


def build_scene(args, max_x=None, max_y=None):
    """Scene for the given points, or a random triangle when sized."""
    scene = Scene(fill_color=args.fill_color, rng=random.Random(args.seed))
    if args.points:
        scene.set_triangle(args.points)
    elif max_x is not None:
        scene.randomize(max_x, max_y)
    return scene


def configure_logging(config, log_file=None):
    level = getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def snapshot(args, config):
    canv_w = args.cols * 2 // config.draw_factor - 1
    canv_h = args.rows * 4 // config.draw_factor - 1
    scene = build_scene(args, canv_w, canv_h)
    canv = Renderer().render_frame(scene, config, args.cols, args.rows)
    for line in canv.to_lines(config.use_braille):
        print(line)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = build_config(args)
    except RasterError as e:
        parser.error(str(e))
    configure_logging(config, args.log_file)

    if args.snapshot:
        try:
            snapshot(args, config)
        except RasterError as e:
            parser.error(str(e))
        return 0

    try:
        # Random scenes are sized by the demo once the terminal is known
        scene = build_scene(args)
    except RasterError as e:
        parser.error(str(e))

    try:
        curses.wrapper(lambda s: demo.main(s, config, scene))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        curses.endwin()
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
