"""
Region Queries
==============

Measurements and queries over zone polygons.

This module handles:
    - Area calculations (shoelace formula)
    - Label anchors and bounding boxes
    - Point-in-polygon queries for pointer hit testing
    - Rigid translation of point sets

Example:
    from venue_engine.geometry import polygon_area, point_in_polygon

    area = polygon_area(zone.points)
    hit = point_in_polygon((50.0, 30.0), zone.points)
"""

from typing import List, Sequence, Tuple

import numpy as np

from venue_engine.models.geometry import Point


def polygon_area(points: Sequence[Point]) -> float:
    """
    Area of a simple polygon in square logical units.

    Uses the shoelace formula:
        area = 0.5 * |sum(x_i * y_{i+1} - x_{i+1} * y_i)|
    """
    if len(points) < 3:
        return 0.0
    pts = np.asarray(points, dtype=float)
    x = pts[:, 0]
    y = pts[:, 1]
    return float(0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))


def polygon_centroid(points: Sequence[Point]) -> Point:
    """
    Label anchor for a zone: the mean of its vertices.

    This is the point renderers place zone names at, not the area centroid.
    """
    pts = np.asarray(points, dtype=float)
    mean = pts.mean(axis=0)
    return float(mean[0]), float(mean[1])


def polygon_bounds(points: Sequence[Point]) -> Tuple[float, float, float, float]:
    """Axis-aligned bounds as ``(min_x, min_y, max_x, max_y)``."""
    pts = np.asarray(points, dtype=float)
    min_x, min_y = pts.min(axis=0)
    max_x, max_y = pts.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """
    Check if a point is inside a polygon.

    Uses the ray casting algorithm (even-odd rule); works for concave
    polygons.
    """
    x, y = point
    inside = False
    n = len(polygon)
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside


def translate_points(points: Sequence[Point], dx: float, dy: float) -> List[Point]:
    """Translate every point by the same ``(dx, dy)`` delta."""
    return [(x + dx, y + dy) for x, y in points]
