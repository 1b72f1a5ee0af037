#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/triangle.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .geometry import as_triangle
from .line import draw_horizontal_line, draw_line

log = logging.getLogger(__name__)


def sort_points(points):
    """
    Validate and sort triangle points by Y, ties broken by X.
    p0 is the top-left-most point, p2 the bottom-right-most.
    """
    return sorted(as_triangle(points), key=lambda p: (p.y, p.x))


def _draw_outline_sorted(p0, p1, p2, draw_point):
    draw_line(p0.x, p0.y, p1.x, p1.y, draw_point)
    draw_line(p1.x, p1.y, p2.x, p2.y, draw_point)
    draw_line(p0.x, p0.y, p2.x, p2.y, draw_point)


def draw_triangle_outline(points, draw_point):
    """
    Draw the three edges of a triangle: p0-p1, p1-p2, then p0-p2
    (points in sorted order). A triangle with no vertical extent draws
    nothing. Raises InvalidGeometry before drawing on malformed input.
    """
    p0, p1, p2 = sort_points(points)
    if p0.y == p2.y:
        log.debug("skipping zero-area triangle %s", (p0, p1, p2))
        return
    _draw_outline_sorted(p0, p1, p2, draw_point)


def _min_max(values):
    lo = hi = values[0]
    for v in values[1:]:
        if v < lo:
            lo = v
        elif v > hi:
            hi = v
    return lo, hi


def triangle_spans(points):
    """
    Rows covered by a filled triangle as (y, min_x, max_x), ascending y.

    The outline is rasterized with draw_line and its cells bucketed by row;
    each row's span runs from the leftmost to the rightmost outline cell.
    Zero-area triangles have no spans.
    """
    p0, p1, p2 = sort_points(points)
    if p0.y == p2.y:
        log.debug("skipping zero-area triangle %s", (p0, p1, p2))
        return []

    # Buckets are local to this call
    rows = {}

    def visit_point(x, y):
        rows.setdefault(y, []).append(x)

    _draw_outline_sorted(p0, p1, p2, visit_point)

    return [(y, *_min_max(rows[y])) for y in sorted(rows)]


def draw_triangle_filled(points, draw_point):
    """
    Draw a filled triangle row by row, top to bottom.

    Each row is emitted as a single cell when its span is one cell wide,
    otherwise as a horizontal line from the span's left to right edge.
    Raises InvalidGeometry before drawing on malformed input.
    """
    for y, x_min, x_max in triangle_spans(points):
        if x_min == x_max:
            draw_point(x_min, y)
        else:
            draw_horizontal_line(x_min, x_max, y, draw_point)
