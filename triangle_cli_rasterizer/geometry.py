#
# PROJECT: triangle-cli-rasterizer
# MODULE: triangle_cli_rasterizer/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from numbers import Real
from typing import NamedTuple

from .errors import InvalidGeometry


class Point(NamedTuple):
    """Immutable grid cell coordinate."""
    x: int
    y: int


def as_coordinate(value, name='coordinate') -> int:
    """
    Coerce a single grid coordinate to int.
    Accepts ints and integral reals (e.g. 3.0). Rejects bools, NaN,
    fractional values and anything non-numeric with InvalidGeometry.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidGeometry(f"{name} must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        as_int = int(value)
    except (ValueError, OverflowError):
        raise InvalidGeometry(f"{name} must be finite, got {value!r}") from None
    if as_int != value:
        raise InvalidGeometry(f"{name} must be a whole grid cell, got {value!r}")
    return as_int


def as_point(value, name='point') -> Point:
    """Coerce an (x, y) pair to a Point."""
    if isinstance(value, Point):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise InvalidGeometry(f"{name} must be an (x, y) pair, got {value!r}") from None
    return Point(as_coordinate(x, f"{name}.x"), as_coordinate(y, f"{name}.y"))


def as_triangle(points):
    """
    Validate a triangle: exactly 3 (x, y) pairs.
    Returns a new list of Points; the caller's sequence is left untouched.
    """
    if isinstance(points, (str, bytes)):
        raise InvalidGeometry(f"triangle must be a sequence of points, got {points!r}")
    try:
        pts = list(points)
    except TypeError:
        raise InvalidGeometry(f"triangle must be a sequence of points, got {points!r}") from None
    if len(pts) != 3:
        raise InvalidGeometry(f"triangle needs exactly 3 points, got {len(pts)}")
    return [as_point(p, f"points[{i}]") for i, p in enumerate(pts)]
