"""Geometric predicates: turn direction, distance and angle from the pivot.

All arithmetic is done in floating point. Collinearity is judged relative to
the magnitude of the cross product's two terms (``config.COLLINEAR_TOLERANCE``
unless one is passed in), so round-off does not flip a collinear triple into
a turn and small or large coordinates classify the same way.
"""

import math
from typing import Optional

from .config import config
from .constants import Turn
from .errors import AngleUndefinedError, InvalidInputError
from .points import Point


def _tolerance(tolerance: Optional[float]) -> float:
    return config.COLLINEAR_TOLERANCE if tolerance is None else tolerance


def _cross_terms(a: Point, b: Point, c: Point) -> tuple[float, float]:
    return (b.y - a.y) * (c.x - b.x), (b.x - a.x) * (c.y - b.y)


def cross_value(a: Point, b: Point, c: Point) -> float:
    """Cross product of the turn at b going a -> b -> c.

    Positive for a clockwise (right) turn, negative for a counter-clockwise
    (left) turn.
    """
    first, second = _cross_terms(a, b, c)
    return first - second


def orientation(a: Point, b: Point, c: Point, tolerance: Optional[float] = None) -> str:
    """Classify the turn made at b when walking a -> b -> c.

    The triple is collinear when the cross product is within a relative
    tolerance of the sum of its terms' magnitudes. Scaling every coordinate
    by the same factor never changes the result.

    Returns:
        One of Turn.LEFT, Turn.RIGHT, Turn.COLLINEAR. Coincident points are
        collinear.
    """
    first, second = _cross_terms(a, b, c)
    value = first - second
    if abs(value) <= _tolerance(tolerance) * (abs(first) + abs(second)):
        return Turn.COLLINEAR
    return Turn.RIGHT if value > 0 else Turn.LEFT


def distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def angle_from_pivot(pivot: Point, point: Point) -> float:
    """Angle between the ray pivot -> point and the positive x-axis.

    Only defined for points on or above the pivot (equal y requires
    point.x >= pivot.x), which holds for every point once the pivot is the
    lowest point of its set. The result lies in [0, pi].

    Raises:
        AngleUndefinedError: if point coincides with pivot.
        InvalidInputError: if point lies below the pivot.
    """
    if point.y < pivot.y or (point.y == pivot.y and point.x < pivot.x):
        raise InvalidInputError(
            f"Point {point.to_tuple()} lies below pivot {pivot.to_tuple()}"
        )

    hypotenuse = distance(pivot, point)
    if hypotenuse == 0.0:
        raise AngleUndefinedError(
            f"Angle undefined: point {point.to_tuple()} coincides with pivot"
        )

    # Rounding can push the ratio a hair outside acos' domain
    cosine = max(-1.0, min(1.0, (point.x - pivot.x) / hypotenuse))
    return math.acos(cosine)
