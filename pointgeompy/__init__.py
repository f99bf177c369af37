"""
pointgeompy - 2D point geometry queries.

This package provides point construction, distances and containment tests
against triangles, rectangles, circles and line segments.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Value types
from .geom_types import Point2D, Vector2D

# Shapes
from .primitives import (
    Circle,
    Line,
    Rectangle,
    Triangle,
    circle_at,
    line_from,
    rectangle_around,
    rectangle_from,
    triangle_from,
)

# Point geometry queries
from .point_geometry import (
    calculate_angle_between,
    point_at,
    point_at_origin,
    point_in_circle,
    point_in_rectangle,
    point_in_triangle,
    point_offset_by,
    point_on_line,
    point_point_distance,
    point_to_string,
    random_bitmap_point,
    random_screen_point,
    random_window_point,
    same_point,
)

# Collaborators for random points
from .surfaces import (
    NoCurrentWindowError,
    Window,
    close_window,
    current_window,
    load_bitmap,
    open_window,
    set_random_source,
)

# Define what gets imported with "from pointgeompy import *"
__all__ = [
    # Value types
    "Point2D",
    "Vector2D",
    # Shapes
    "Circle",
    "Line",
    "Rectangle",
    "Triangle",
    "circle_at",
    "line_from",
    "rectangle_around",
    "rectangle_from",
    "triangle_from",
    # Queries
    "calculate_angle_between",
    "point_at",
    "point_at_origin",
    "point_in_circle",
    "point_in_rectangle",
    "point_in_triangle",
    "point_offset_by",
    "point_on_line",
    "point_point_distance",
    "point_to_string",
    "random_bitmap_point",
    "random_screen_point",
    "random_window_point",
    "same_point",
    # Surfaces
    "NoCurrentWindowError",
    "Window",
    "close_window",
    "current_window",
    "load_bitmap",
    "open_window",
    "set_random_source",
]
