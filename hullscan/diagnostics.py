"""
Diagnostics for point sets: error messages, point descriptions, tolerant
comparison and random point sets for tests.
"""

import logging
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from .config import config
from .constants import DescDetail
from .errors import (
    AngleUndefinedError,
    HullError,
    InvalidInputError,
    TooFewPointsError,
    UnimplementedError,
)
from .points import Point, PointLike, PointSet, as_points
from .sorting import SortKeys

logger = logging.getLogger(__name__)


# Most specific class first; lookups walk the exception's MRO
ERROR_MESSAGES = {
    TooFewPointsError: "Not enough points",
    AngleUndefinedError: "Angle undefined between coincident points",
    InvalidInputError: "Invalid input",
    UnimplementedError: "Function has not yet been implemented",
    HullError: "Hull computation failed",
}


def error_message(error: Union[HullError, type]) -> str:
    """Short human-readable message for a hull error or error class."""
    error_type = error if isinstance(error, type) else type(error)
    for cls in error_type.__mro__:
        if cls in ERROR_MESSAGES:
            return ERROR_MESSAGES[cls]
    return "Unknown error"


def describe_point(
    point: PointLike,
    detail: int = DescDetail.MIN,
    key: Optional[float] = None,
    key_description: Optional[str] = None,
) -> str:
    """Describe a point at the requested detail level.

    MIN gives the coordinates, VERBOSE adds the sort key, FULL adds what
    the key measures.
    """
    point = Point.from_value(point)
    text = f"coords[x: {point.x:f}, y: {point.y:f}]"
    if detail >= DescDetail.VERBOSE and key is not None:
        text += f", sort_val: {key:f}"
        if detail >= DescDetail.FULL and key_description:
            text += f" ({key_description})"
    return text


def describe_points(
    points: Iterable[PointLike],
    detail: int = DescDetail.MIN,
    keys: Optional[Union[SortKeys, Sequence[float]]] = None,
) -> str:
    """Describe every point in a set, one line per point."""
    points = as_points(points)
    if not points:
        raise InvalidInputError("Cannot describe an empty point set")
    if keys is not None and len(keys) != len(points):
        raise InvalidInputError(f"Expected {len(points)} sort keys, got {len(keys)}")

    description = keys.description if isinstance(keys, SortKeys) else None
    lines = []
    for index, point in enumerate(points):
        key = keys[index] if keys is not None else None
        lines.append(describe_point(point, detail, key, description))
    return "\n".join(lines)


def compare_points(a: PointLike, b: PointLike, tolerance: Optional[float] = None) -> bool:
    """True if both coordinates agree within tolerance."""
    tolerance = config.FLOAT_TOLERANCE if tolerance is None else tolerance
    a, b = Point.from_value(a), Point.from_value(b)
    return abs(a.x - b.x) <= tolerance and abs(a.y - b.y) <= tolerance


def compare_point_sets(
    a: Optional[Iterable[PointLike]],
    b: Optional[Iterable[PointLike]],
    tolerance: Optional[float] = None,
) -> bool:
    """True if both sets hold the same points in the same order."""
    if a is None or b is None:
        return False
    a, b = as_points(a), as_points(b)
    if len(a) != len(b):
        return False
    return all(compare_points(p, q, tolerance) for p, q in zip(a, b))


def generate_random_point_set(
    num_points: int,
    low: float = 0,
    high: float = 100,
    integer: bool = True,
    seed: Optional[int] = None,
) -> PointSet:
    """Random point set for testing.

    Args:
        num_points: Number of points to generate (must be positive).
        low, high: Coordinate range; integer coordinates include high.
        integer: Whole-number coordinates if True, otherwise uniform floats.
        seed: Seed for numpy's default_rng, for reproducible sets.
    """
    if num_points <= 0:
        raise InvalidInputError(f"num_points must be positive, got {num_points}")
    if high < low:
        raise InvalidInputError(f"Empty coordinate range [{low}, {high}]")

    rng = np.random.default_rng(seed)
    if integer:
        coords = rng.integers(int(low), int(high), size=(num_points, 2), endpoint=True)
    else:
        coords = rng.uniform(low, high, size=(num_points, 2))

    logger.debug(f"Generated {num_points} random points in [{low}, {high}]")
    return PointSet((float(x), float(y)) for x, y in coords)
