#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/line.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#
# Integer-only Bresenham line rasterization.
# Every function calls draw_point(x, y) once per cell, never buffering.
#

from .color import hex_to_rgb, lerp_rgb
from .geometry import as_coordinate


def draw_horizontal_line(x0, x1, y, draw_point):
    """Emit (x, y) for every x in [min(x0, x1), max(x0, x1)], left to right."""
    start, end = (x1, x0) if x0 > x1 else (x0, x1)
    for x in range(start, end + 1):
        draw_point(x, y)


def draw_vertical_line(x, y0, y1, draw_point):
    """Emit (x, y) for every y in [min(y0, y1), max(y0, y1)], top to bottom."""
    start, end = (y1, y0) if y0 > y1 else (y0, y1)
    for y in range(start, end + 1):
        draw_point(x, y)


def _draw_line_low_slope(x0, y0, x1, y1, draw_point):
    # |dy| < dx, x0 < x1
    dx = x1 - x0
    dy = y1 - y0
    yi = 1
    if dy < 0:
        yi = -1
        dy = -dy
    d = 2 * dy - dx
    y = y0

    for x in range(x0, x1 + 1):
        draw_point(x, y)
        if d > 0:
            y += yi
            d += 2 * (dy - dx)
        else:
            d += 2 * dy


def _draw_line_high_slope(x0, y0, x1, y1, draw_point):
    # |dx| <= dy, y0 < y1
    dx = x1 - x0
    dy = y1 - y0
    xi = 1
    if dx < 0:
        xi = -1
        dx = -dx
    d = 2 * dx - dy
    x = x0

    for y in range(y0, y1 + 1):
        draw_point(x, y)
        if d > 0:
            x += xi
            d += 2 * (dx - dy)
        else:
            d += 2 * dx


def draw_line(x0, y0, x1, y1, draw_point):
    """
    Draw the segment (x0, y0)-(x1, y1), both endpoints included.

    Cells are emitted once each, walking the dominant axis in ascending
    order, so the cell set does not depend on which endpoint comes first.
    Emits max(|dx|, |dy|) + 1 cells; a zero-length line emits one.
    Raises InvalidGeometry for non-integral coordinates before drawing.
    """
    x0 = as_coordinate(x0, 'x0')
    y0 = as_coordinate(y0, 'y0')
    x1 = as_coordinate(x1, 'x1')
    y1 = as_coordinate(y1, 'y1')

    if abs(y1 - y0) < abs(x1 - x0):
        if y0 == y1:
            draw_horizontal_line(x0, x1, y0, draw_point)
        elif x0 > x1:
            _draw_line_low_slope(x1, y1, x0, y0, draw_point)
        else:
            _draw_line_low_slope(x0, y0, x1, y1, draw_point)
    else:
        if x0 == x1:
            draw_vertical_line(x0, y0, y1, draw_point)
        elif y0 > y1:
            _draw_line_high_slope(x1, y1, x0, y0, draw_point)
        else:
            _draw_line_high_slope(x0, y0, x1, y1, draw_point)


def make_color_lerp_sink(x0, y0, x1, y1, color0, color1, draw_point):
    """
    Wrap a colored sink draw_point(x, y, color) into a plain (x, y) sink.

    Each cell gets the color lerped between color0 and color1 at the
    cell's projection onto the segment, clamped to [0, 1]. Endpoints and
    colors are checked here, so bad input fails before any cell is drawn.
    """
    x0 = as_coordinate(x0, 'x0')
    y0 = as_coordinate(y0, 'y0')
    x1 = as_coordinate(x1, 'x1')
    y1 = as_coordinate(y1, 'y1')
    rgb0 = hex_to_rgb(color0)
    rgb1 = hex_to_rgb(color1)
    dx = x1 - x0
    dy = y1 - y0
    length_sq = dx * dx + dy * dy

    def percent_travelled(x, y):
        if length_sq == 0:
            return 0.0
        t = ((x - x0) * dx + (y - y0) * dy) / length_sq
        return max(0.0, min(1.0, t))

    def colored_point(x, y):
        draw_point(x, y, lerp_rgb(rgb0, rgb1, percent_travelled(x, y)))

    return colored_point


def draw_gradient_line(x0, y0, x1, y1, color0, color1, draw_point):
    """Draw a line whose color runs from color0 at (x0, y0) to color1 at (x1, y1)."""
    sink = make_color_lerp_sink(x0, y0, x1, y1, color0, color1, draw_point)
    draw_line(x0, y0, x1, y1, sink)
