"""
2D geometric primitives queried by the point geometry predicates.

Shapes are immutable values. Constructors accept either Point2D instances or
plain (x, y) tuples; tuples are converted so every stored vertex is a Point2D.
"""

from dataclasses import dataclass
from typing import Tuple

from .geom_types import Point2D, PointLike, as_point


@dataclass(frozen=True)
class Line:
    """A 2D line segment from `start_point` to `end_point`."""

    start_point: Point2D
    end_point: Point2D

    def __post_init__(self):
        object.__setattr__(self, "start_point", as_point(self.start_point))
        object.__setattr__(self, "end_point", as_point(self.end_point))

    def to_json(self):
        return {
            "start_point": self.start_point.to_json(),
            "end_point": self.end_point.to_json(),
        }

    @staticmethod
    def from_json(json_data):
        return Line(
            Point2D.from_json(json_data["start_point"]),
            Point2D.from_json(json_data["end_point"]),
        )


@dataclass(frozen=True)
class Circle:
    """A 2D circle. The radius is kept as given, including its sign."""

    center: Point2D
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "center", as_point(self.center))

    def to_json(self):
        return {
            "center": self.center.to_json(),
            "radius": float(self.radius),
        }

    @staticmethod
    def from_json(json_data):
        return Circle(Point2D.from_json(json_data["center"]), json_data["radius"])


@dataclass(frozen=True)
class Rectangle:
    """
    An axis-aligned rectangle anchored at (x, y).

    Width and height may be negative; the edge accessors always report the
    normalised bounds so that left <= right and top <= bottom.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def right(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def top(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def bottom(self) -> float:
        return max(self.y, self.y + self.height)

    def to_json(self):
        return {
            "x": float(self.x),
            "y": float(self.y),
            "width": float(self.width),
            "height": float(self.height),
        }

    @staticmethod
    def from_json(json_data):
        return Rectangle(
            json_data["x"], json_data["y"], json_data["width"], json_data["height"]
        )


@dataclass(frozen=True)
class Triangle:
    """A 2D triangle defined by exactly three vertices."""

    points: Tuple[Point2D, Point2D, Point2D]

    def __post_init__(self):
        points = tuple(as_point(p) for p in self.points)
        if len(points) != 3:
            raise ValueError(f"Triangle requires exactly 3 points, got {len(points)}")
        object.__setattr__(self, "points", points)

    def to_json(self):
        return {"points": [p.to_json() for p in self.points]}

    @staticmethod
    def from_json(json_data):
        return Triangle(tuple(Point2D.from_json(p) for p in json_data["points"]))


# ========== Factories ==========


def line_from(start: PointLike, end: PointLike) -> Line:
    return Line(as_point(start), as_point(end))


def circle_at(center: PointLike, radius: float) -> Circle:
    return Circle(as_point(center), radius)


def rectangle_from(x: float, y: float, width: float, height: float) -> Rectangle:
    return Rectangle(x, y, width, height)


def triangle_from(a: PointLike, b: PointLike, c: PointLike) -> Triangle:
    return Triangle((as_point(a), as_point(b), as_point(c)))


# ========== Queries ==========


def line_length_squared(line: Line) -> float:
    dx = line.end_point.x - line.start_point.x
    dy = line.end_point.y - line.start_point.y
    return dx * dx + dy * dy


def line_length(line: Line) -> float:
    return line_length_squared(line) ** 0.5


def rectangle_around(line: Line) -> Rectangle:
    """Smallest axis-aligned rectangle containing both endpoints of `line`."""
    left = min(line.start_point.x, line.end_point.x)
    top = min(line.start_point.y, line.end_point.y)
    right = max(line.start_point.x, line.end_point.x)
    bottom = max(line.start_point.y, line.end_point.y)
    return Rectangle(left, top, right - left, bottom - top)


def rectangle_left(rect: Rectangle) -> float:
    return rect.left


def rectangle_right(rect: Rectangle) -> float:
    return rect.right


def rectangle_top(rect: Rectangle) -> float:
    return rect.top


def rectangle_bottom(rect: Rectangle) -> float:
    return rect.bottom
