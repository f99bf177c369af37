"""
Vector helpers consumed by the point geometry predicates.

Vectors are Vector2D arrays, so the arithmetic is plain numpy; these
functions only give the operations names and keep conversions between
points and vectors in one place.
"""

import math

import numpy as np

from .geom_types import Point2D, Vector2D


def vector_to(x: float, y: float) -> Vector2D:
    return Vector2D(x, y)


def vector_from_point(pt: Point2D) -> Vector2D:
    """Return the vector from the origin to `pt`."""
    return Vector2D(pt.x, pt.y)


def vector_to_point(v: Vector2D) -> Point2D:
    """Return the point reached by travelling `v` from the origin."""
    return Point2D(float(v[0]), float(v[1]))


def vector_point_to_point(start: Point2D, end: Point2D) -> Vector2D:
    return Vector2D(end.x - start.x, end.y - start.y)


def vector_add(v1: Vector2D, v2: Vector2D) -> Vector2D:
    return Vector2D(v1[0] + v2[0], v1[1] + v2[1])


def vector_subtract(v1: Vector2D, v2: Vector2D) -> Vector2D:
    return Vector2D(v1[0] - v2[0], v1[1] - v2[1])


def dot_product(v1: Vector2D, v2: Vector2D) -> float:
    return float(np.dot(v1, v2))


def vector_magnitude_squared(v: Vector2D) -> float:
    return dot_product(v, v)


def vector_magnitude(v: Vector2D) -> float:
    return float(np.linalg.norm(v))


def vector_angle(v: Vector2D) -> float:
    """
    Angle of `v` measured from the positive x axis.

    Returns:
        float: Degrees in the range (-180, 180]. The zero vector has angle 0.
    """
    return math.degrees(math.atan2(v[1], v[0]))
