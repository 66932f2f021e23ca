"""
Keyed merge sort and angular ordering around the pivot.

Sort keys are kept in a SortKeys object parallel to the point list rather
than on the points, so the same points can be sorted by different keys in
independent calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence, Union

from .config import config
from .constants import (
    ANGLE_KEY_DESCRIPTION,
    MIN_HULL_POINTS,
    PIVOT_SORT_KEY,
    Turn,
)
from .errors import AngleUndefinedError, InvalidInputError, TooFewPointsError
from .points import Point, PointLike, as_points, find_lowest_point
from .predicates import angle_from_pivot, distance, orientation

logger = logging.getLogger(__name__)


@dataclass
class SortKeys:
    """Sort key per point index, plus a note on what the keys measure."""

    values: list[float] = field(default_factory=list)
    description: str = ""

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]


def _merge(left, right, precedes):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Left side wins ties, which keeps the sort stable
        if precedes(left[i], right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort_indices(indices, precedes):
    if len(indices) <= 1:
        return indices
    middle = len(indices) // 2
    left = _merge_sort_indices(indices[:middle], precedes)
    right = _merge_sort_indices(indices[middle:], precedes)
    return _merge(left, right, precedes)


def merge_sort(
    points: Optional[Iterable[PointLike]],
    keys: Union[SortKeys, Sequence[float]],
    tiebreak: Optional[Callable[[Point], float]] = None,
    key_tolerance: Optional[float] = None,
    same_key: Optional[Callable[[Point, Point], bool]] = None,
) -> list[Point]:
    """Stable merge sort of points by a parallel list of keys.

    Args:
        points: Points to sort. Not modified.
        keys: One key per point, in the same order as points.
        tiebreak: Optional secondary key. When given, keys within
                  key_tolerance of each other are ordered by it.
        key_tolerance: Tolerance for tiebreak comparisons. Defaults to
                       config.FLOAT_TOLERANCE.
        same_key: Optional test for whether two points tie, replacing the
                  key_tolerance comparison. Points that do not tie are
                  ordered by key.

    Returns:
        New list of points in non-decreasing key order.
    """
    points = as_points(points)
    if not points:
        raise InvalidInputError("Cannot sort an empty point set")
    if keys is None or len(keys) != len(points):
        raise InvalidInputError(
            f"Expected {len(points)} sort keys, got {0 if keys is None else len(keys)}"
        )

    values = list(keys.values if isinstance(keys, SortKeys) else keys)
    tolerance = config.FLOAT_TOLERANCE if key_tolerance is None else key_tolerance

    if tiebreak is None:
        def precedes(i, j):
            return values[i] <= values[j]
    else:
        secondary = [tiebreak(p) for p in points]

        def tied(i, j):
            if same_key is None:
                return abs(values[i] - values[j]) <= tolerance
            return same_key(points[i], points[j])

        def precedes(i, j):
            if tied(i, j):
                return secondary[i] <= secondary[j]
            return values[i] < values[j]

    order = _merge_sort_indices(list(range(len(points))), precedes)
    return [points[i] for i in order]


def compute_point_angles(
    points: Optional[Iterable[PointLike]],
    pivot: Optional[PointLike] = None,
) -> SortKeys:
    """Angle of every point as seen from the pivot.

    The pivot gets PIVOT_SORT_KEY so it sorts first. If the pivot occurs
    more than once, only its first occurrence is treated as the pivot.

    Args:
        points: Point set to measure.
        pivot: Reference point; defaults to the lowest point in the set.

    Returns:
        SortKeys parallel to points.

    Raises:
        InvalidInputError: empty set, pivot not in the set, or a point
                           below the pivot.
        AngleUndefinedError: another point coincides with the pivot.
    """
    points = as_points(points)
    if not points:
        raise InvalidInputError("Cannot compute angles for an empty point set")

    pivot = find_lowest_point(points) if pivot is None else Point.from_value(pivot)
    try:
        pivot_index = points.index(pivot)
    except ValueError:
        raise InvalidInputError(f"Pivot {pivot.to_tuple()} is not in the point set")

    values = []
    for index, point in enumerate(points):
        if index == pivot_index:
            values.append(PIVOT_SORT_KEY)
            continue
        try:
            values.append(angle_from_pivot(pivot, point))
        except AngleUndefinedError:
            logger.debug(f"Point {index} duplicates pivot {pivot.to_tuple()}")
            raise

    return SortKeys(values=values, description=ANGLE_KEY_DESCRIPTION)


def sort_by_angle(
    points: Optional[Iterable[PointLike]],
    pivot: Optional[PointLike] = None,
) -> list[Point]:
    """Order points by angle around the pivot, pivot first.

    Points collinear with the pivot, by the same orientation test the scan
    uses, are ordered nearest first, so the scan sees a nearer collinear
    point before the farther one that makes it redundant. All other points
    are ordered by angle, however close their angles are.

    Raises:
        InvalidInputError: missing or empty set.
        TooFewPointsError: fewer than three points.
        AngleUndefinedError: a non-pivot point coincides with the pivot.
    """
    points = as_points(points)
    if not points:
        raise InvalidInputError("Cannot sort an empty point set")
    if len(points) < MIN_HULL_POINTS:
        raise TooFewPointsError(
            f"Angular sort needs at least {MIN_HULL_POINTS} points, got {len(points)}"
        )

    pivot = find_lowest_point(points) if pivot is None else Point.from_value(pivot)
    keys = compute_point_angles(points, pivot)
    ordered = merge_sort(
        points,
        keys,
        tiebreak=lambda p: distance(pivot, p),
        same_key=lambda p, q: orientation(pivot, p, q) == Turn.COLLINEAR,
    )

    logger.debug(f"Sorted {len(ordered)} points by {keys.description} {pivot.to_tuple()}")
    return ordered
