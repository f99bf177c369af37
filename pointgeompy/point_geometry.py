"""
Point geometry: construction, distance and containment queries.

All functions are pure reads over value arguments and are safe to call from
any thread. The random point generators are the exception: they read the
configured random source and current window from `pointgeompy.surfaces`.

Degenerate shapes never raise. A zero-area triangle contains nothing and a
segment shorter than one unit only matches its own endpoints.
"""

import logging

import numpy as np

from .constants import MIN_LINE_LENGTH_SQUARED, SMALL
from .geom_types import Point2D, Vector2D
from .primitives import (
    Circle,
    Line,
    Rectangle,
    Triangle,
    line_length_squared,
    rectangle_around,
    rectangle_bottom,
    rectangle_left,
    rectangle_right,
    rectangle_top,
)
from .surfaces import (
    SizedSurface,
    Window,
    bitmap_height,
    bitmap_width,
    current_window,
    rnd,
)
from .vector_2d import (
    dot_product,
    vector_angle,
    vector_from_point,
    vector_magnitude,
    vector_point_to_point,
    vector_subtract,
)

logger = logging.getLogger(__name__)


# ========== Construction ==========


def point_at(x: float, y: float) -> Point2D:
    return Point2D(x, y)


def point_at_origin() -> Point2D:
    return point_at(0, 0)


def point_offset_by(start_point: Point2D, offset: Vector2D) -> Point2D:
    return point_at(start_point.x + offset.x, start_point.y + offset.y)


def point_to_string(pt: Point2D) -> str:
    """Format as ``Pt @<x>:<y>``, e.g. ``Pt @1.500000:2.000000``."""
    return str(pt)


# ========== Random points ==========


def random_screen_point() -> Point2D:
    """Random point within the current window.

    Raises:
        NoCurrentWindowError: If no window is open
    """
    return random_window_point(current_window())


def random_window_point(window: Window) -> Point2D:
    return point_at(rnd() * window.width, rnd() * window.height)


def random_bitmap_point(bitmap: SizedSurface) -> Point2D:
    return point_at(rnd() * bitmap_width(bitmap), rnd() * bitmap_height(bitmap))


# ========== Distance and angle ==========


def point_point_distance(pt1: Point2D, pt2: Point2D) -> float:
    return vector_magnitude(vector_point_to_point(pt1, pt2))


def calculate_angle_between(pt1: Point2D, pt2: Point2D) -> float:
    """
    Angle of the direction from `pt1` to `pt2`.

    Returns:
        float: Degrees in (-180, 180], measured from the positive x axis.
            Identical points give 0.
    """
    return vector_angle(vector_point_to_point(pt1, pt2))


# ========== Containment ==========


def point_in_triangle(pt: Point2D, tri: Triangle) -> bool:
    """
    Test whether `pt` lies strictly inside `tri` using barycentric coordinates.

    Points on an edge or vertex are outside. Works for either winding.
    """
    p = vector_from_point(pt)
    a, b, c = (vector_from_point(vertex) for vertex in tri.points)

    v0 = vector_subtract(c, a)
    v1 = vector_subtract(b, a)
    v2 = vector_subtract(p, a)

    dot00 = dot_product(v0, v0)
    dot01 = dot_product(v0, v1)
    dot02 = dot_product(v0, v2)
    dot11 = dot_product(v1, v1)
    dot12 = dot_product(v1, v2)

    denom = dot00 * dot11 - dot01 * dot01
    if denom == 0:
        logger.debug(f"Degenerate triangle {tri.points}, treating {pt} as outside")
        return False

    u = (dot11 * dot02 - dot01 * dot12) / denom
    v = (dot00 * dot12 - dot01 * dot02) / denom

    return u > 0 and v > 0 and u + v < 1


def point_in_rectangle(pt: Point2D, rect: Rectangle) -> bool:
    """Inclusive test: points on any edge are inside. NaN coordinates are outside."""
    if not pt.x >= rectangle_left(rect):
        return False
    elif not pt.x <= rectangle_right(rect):
        return False
    elif not pt.y >= rectangle_top(rect):
        return False
    elif not pt.y <= rectangle_bottom(rect):
        return False
    return True


def point_in_circle(pt: Point2D, c: Circle) -> bool:
    return point_point_distance(c.center, pt) <= abs(c.radius)


def same_point(pt1: Point2D, pt2: Point2D) -> bool:
    """
    Compare points after truncating each coordinate toward zero.

    This is deliberately coarse: (1.9, 1.9) and (1.0, 1.0) are the same point,
    while (2.0, 1.9) and (1.9, 1.9) are not. NaN coordinates never match.
    """
    return bool(
        np.trunc(pt1.x) == np.trunc(pt2.x) and np.trunc(pt1.y) == np.trunc(pt2.y)
    )


def point_on_line(pt: Point2D, l: Line) -> bool:
    """
    Test whether `pt` lies on segment `l`, allowing a tolerance of SMALL units.

    Segments shorter than one unit only match their endpoints (see same_point).
    Vertical and horizontal segments use a band of +/- SMALL across the
    segment. Sloped segments require both the line's x at pt.y and its y at
    pt.x to be within SMALL of the point, and the point to fall inside the
    segment's bounding rectangle.
    """
    start, end = l.start_point, l.end_point

    if line_length_squared(l) < MIN_LINE_LENGTH_SQUARED:
        logger.debug(
            f"Segment {start}-{end} is shorter than one unit, comparing endpoints"
        )
        return same_point(pt, start) or same_point(pt, end)

    if end.x == start.x:
        min_y, max_y = min(start.y, end.y), max(start.y, end.y)
        return (
            start.x - SMALL <= pt.x <= start.x + SMALL
            and min_y <= pt.y <= max_y
        )

    if end.y == start.y:
        min_x, max_x = min(start.x, end.x), max(start.x, end.x)
        return (
            start.y - SMALL <= pt.y <= start.y + SMALL
            and min_x <= pt.x <= max_x
        )

    m = (end.y - start.y) / (end.x - start.x)
    if m == 0:
        # dx overflowed to inf or dy/dx underflowed; no usable slope
        logger.debug(f"Slope of segment {start}-{end} is not representable")
        return False
    c = start.y - m * start.x

    ly = m * pt.x + c
    lx = (pt.y - c) / m

    return (
        pt.x - SMALL <= lx <= pt.x + SMALL
        and pt.y - SMALL <= ly <= pt.y + SMALL
        and point_in_rectangle(pt, rectangle_around(l))
    )
