from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from .constants import POINT_STRING_PREFIX, VECTOR_TOLERANCE


class Vector2D(np.ndarray):
    def __new__(cls, x: float, y: float) -> "Vector2D":
        return np.asarray([x, y], dtype=float).view(cls)

    def __eq__(self, other: object) -> bool:
        return bool(
            np.allclose(np.asarray(self), np.asarray(other), atol=VECTOR_TOLERANCE)
        )

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    def to_json(self):
        return {
            "x": float(self.x),
            "y": float(self.y),
        }

    @staticmethod
    def from_json(json_data):
        return Vector2D(json_data["x"], json_data["y"])


@dataclass(frozen=True)
class Point2D:
    """
    An immutable location in 2D space.

    Points are plain values: they are compared by coordinates, hashed and
    copied freely. Displacements between points are expressed as Vector2D.
    """

    x: float
    y: float

    def __str__(self):
        return f"{POINT_STRING_PREFIX}{self.x:f}:{self.y:f}"

    def to_json(self):
        return {
            "x": float(self.x),
            "y": float(self.y),
        }

    @staticmethod
    def from_json(json_data):
        return Point2D(json_data["x"], json_data["y"])


PointLike = Union[Tuple[float, float], Point2D]


def as_point(value: PointLike) -> Point2D:
    """Coerce an (x, y) pair into a Point2D, passing points through unchanged."""
    if isinstance(value, Point2D):
        return value
    x, y = value
    return Point2D(float(x), float(y))
