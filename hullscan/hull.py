"""
Convex hull entry point.

Validates the point set, removes repeated coordinates and dispatches to the
requested hull method. Errors from any stage propagate unchanged.
"""

import logging
from typing import Iterable, Optional

from .config import config
from .constants import MIN_HULL_POINTS, HullMethod
from .errors import InvalidInputError, TooFewPointsError, UnimplementedError
from .graham import compute_graham_scan
from .points import Point, PointLike, as_points

logger = logging.getLogger(__name__)


HULL_METHODS = {
    HullMethod.GRAHAM_SCAN: compute_graham_scan,
}


def remove_duplicate_points(points: Iterable[PointLike]) -> list[Point]:
    """Drop points whose coordinates repeat an earlier point's, keeping order.

    Points that differ by less than the tolerance are left alone; the scan
    treats the zero-length edge between them as collinear.
    """
    seen = set()
    unique: list[Point] = []
    for point in as_points(points):
        if point in seen:
            continue
        seen.add(point)
        unique.append(point)
    return unique


def compute_convex_hull(
    points: Optional[Iterable[PointLike]],
    method: Optional[str] = None,
    degeneracy_mode: Optional[str] = None,
) -> list[Point]:
    """Compute the convex hull of a point set.

    Args:
        points: Any collection of Point or (x, y) pairs. Not modified.
        method: Hull algorithm; defaults to config.DEFAULT_METHOD.
        degeneracy_mode: DegeneracyMode value; defaults to
                         config.DEFAULT_DEGENERACY_MODE.

    Returns:
        New list of hull points, counter-clockwise, starting at the lowest
        (then leftmost) point.

    Raises:
        InvalidInputError: points missing or empty, or unknown mode.
        TooFewPointsError: fewer than three distinct points.
        UnimplementedError: unsupported method.
    """
    if points is None:
        raise InvalidInputError("Point set is missing")
    points = as_points(points)
    if not points:
        raise InvalidInputError("Point set is empty")
    if len(points) < MIN_HULL_POINTS:
        raise TooFewPointsError(
            f"Convex hull needs at least {MIN_HULL_POINTS} points, got {len(points)}"
        )

    unique = remove_duplicate_points(points)
    if len(unique) < len(points):
        logger.debug(f"Ignoring {len(points) - len(unique)} duplicate points")
    if len(unique) < MIN_HULL_POINTS:
        raise TooFewPointsError(
            f"Convex hull needs at least {MIN_HULL_POINTS} distinct points, got {len(unique)}"
        )

    method = method or config.DEFAULT_METHOD
    degeneracy_mode = degeneracy_mode or config.DEFAULT_DEGENERACY_MODE

    hull_fn = HULL_METHODS.get(method)
    if hull_fn is None:
        raise UnimplementedError(f"Hull method {method!r} is not implemented")

    hull = hull_fn(unique, degeneracy_mode)
    logger.info(f"Computed {method} hull: {len(hull)} of {len(points)} points")
    return hull
