"""Polygon helpers for checking computed hulls.

Pure math functions for area, centroid, convexity and containment of a
counter-clockwise boundary.
"""

from typing import Iterable, Optional

import numpy as np

from .constants import MIN_HULL_POINTS, Turn
from .errors import InvalidInputError, TooFewPointsError
from .points import Point, PointLike, as_points
from .predicates import orientation


def _as_array(points: list[Point]) -> np.ndarray:
    return np.array([p.to_tuple() for p in points], dtype=float).reshape(-1, 2)


def compute_centroid(points: Iterable[PointLike], ndigits: Optional[int] = 4) -> Point:
    """Compute the centroid (center of mass) of a set of points."""
    points = as_points(points)
    if not points:
        return Point(0, 0)

    mean = _as_array(points).mean(axis=0)
    if ndigits is None:
        return Point(mean[0], mean[1])
    return Point(round(float(mean[0]), ndigits), round(float(mean[1]), ndigits))


def polygon_area(boundary: Iterable[PointLike]) -> float:
    """Signed area by the shoelace formula; positive for counter-clockwise."""
    points = as_points(boundary)
    if len(points) < MIN_HULL_POINTS:
        return 0.0

    coords = _as_array(points)
    x, y = coords[:, 0], coords[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))


def _triples(points):
    n = len(points)
    for i in range(n):
        yield points[i], points[(i + 1) % n], points[(i + 2) % n]


def is_convex(boundary: Iterable[PointLike], tolerance: Optional[float] = None) -> bool:
    """True if every consecutive triple, wrap-around included, turns left."""
    points = as_points(boundary)
    if len(points) < MIN_HULL_POINTS:
        return False
    return all(orientation(a, b, c, tolerance) == Turn.LEFT for a, b, c in _triples(points))


def contains_point(
    boundary: Iterable[PointLike],
    point: PointLike,
    tolerance: Optional[float] = None,
) -> bool:
    """True if point lies inside or on a counter-clockwise convex polygon.

    Raises:
        TooFewPointsError: boundary has fewer than three points.
    """
    if boundary is None or point is None:
        raise InvalidInputError("Boundary and point are required")
    points = as_points(boundary)
    if len(points) < MIN_HULL_POINTS:
        raise TooFewPointsError(f"A polygon needs {MIN_HULL_POINTS} points, got {len(points)}")

    point = Point.from_value(point)
    n = len(points)
    for i in range(n):
        if orientation(points[i], points[(i + 1) % n], point, tolerance) == Turn.RIGHT:
            return False
    return True
