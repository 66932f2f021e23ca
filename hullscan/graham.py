"""
Graham scan: monotonic-stack hull construction and collinear reduction.

The scan expects points already ordered by angle around the pivot (see
sorting.sort_by_angle). Hulls come out counter-clockwise, pivot first.
"""

import logging
from typing import Iterable, Optional

from .constants import (
    ALL_DEGENERACY_MODES,
    MIN_HULL_POINTS,
    DegeneracyMode,
    Turn,
)
from .errors import InvalidInputError, TooFewPointsError
from .points import Point, PointLike, as_points, find_lowest_point
from .predicates import orientation
from .sorting import sort_by_angle

logger = logging.getLogger(__name__)


def _require_points(points, what):
    if points is None:
        raise InvalidInputError(f"{what} is missing")
    points = as_points(points)
    if len(points) < MIN_HULL_POINTS:
        raise TooFewPointsError(
            f"{what} needs at least {MIN_HULL_POINTS} points, got {len(points)}"
        )
    return points


def _check_mode(degeneracy_mode):
    if degeneracy_mode not in ALL_DEGENERACY_MODES:
        raise InvalidInputError(f"Unknown degeneracy mode: {degeneracy_mode!r}")


def build_hull(
    ordered_points: Optional[Iterable[PointLike]],
    degeneracy_mode: str = DegeneracyMode.NONE,
) -> list[Point]:
    """Build the hull boundary from angularly sorted points.

    The stack starts with the pivot and the first sorted point. Every later
    point pops the stack while the top two points and the new point turn
    right (or are collinear, in REDUCE mode), then is pushed. Seeding with
    two points means the third point goes through the same check, so a
    collinear run at the start of the order is handled like any other.

    Args:
        ordered_points: Output of sort_by_angle, pivot first.
        degeneracy_mode: DegeneracyMode.NONE keeps collinear points the
                         scan meets on the boundary; DegeneracyMode.REDUCE
                         pops them as they are met.

    Returns:
        New list with the stack contents in push order.
    """
    points = _require_points(ordered_points, "Hull construction")
    _check_mode(degeneracy_mode)

    pop_on = {Turn.RIGHT}
    if degeneracy_mode == DegeneracyMode.REDUCE:
        pop_on.add(Turn.COLLINEAR)

    stack = [points[0], points[1]]
    popped = 0
    for point in points[2:]:
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], point) in pop_on:
            stack.pop()
            popped += 1
        stack.append(point)

    logger.debug(f"Stack scan over {len(points)} points popped {popped}, kept {len(stack)}")
    return stack


def reduce_degeneracies(hull: Optional[Iterable[PointLike]]) -> list[Point]:
    """Drop collinear points from a hull boundary.

    Slides an (A, B, C) window along the boundary. When A, B, C are
    collinear B is dropped and the window steps back to B's predecessor;
    otherwise B is kept. Once the last point is placed, the two wrap-around
    triples (last, last, first) and (last, first, second) are tested the
    same way, so a redundant point on the closing edge is removed too.

    A boundary whose points are all collinear reduces to its two ends.
    """
    points = _require_points(hull, "Degeneracy reduction")

    reduced: list[Point] = []
    for point in points:
        while len(reduced) >= 2 and orientation(reduced[-2], reduced[-1], point) == Turn.COLLINEAR:
            reduced.pop()
        reduced.append(point)

    # wrap-around: the closing edge runs last -> first
    while len(reduced) >= 3:
        if orientation(reduced[-2], reduced[-1], reduced[0]) == Turn.COLLINEAR:
            reduced.pop()
        elif orientation(reduced[-1], reduced[0], reduced[1]) == Turn.COLLINEAR:
            reduced.pop(0)
        else:
            break

    dropped = len(points) - len(reduced)
    if dropped:
        logger.debug(f"Removed {dropped} collinear points from hull of {len(points)}")
    return reduced


def compute_graham_scan(
    points: Optional[Iterable[PointLike]],
    degeneracy_mode: str = DegeneracyMode.REDUCE,
) -> list[Point]:
    """Convex hull by Graham scan.

    Selects the pivot, sorts by angle around it, runs the stack scan and,
    in REDUCE mode, removes collinear points from the result. When every
    point is collinear, REDUCE mode returns the two extreme points.
    """
    points = _require_points(points, "Graham scan")
    _check_mode(degeneracy_mode)

    pivot = find_lowest_point(points)
    ordered = sort_by_angle(points, pivot)
    hull = build_hull(ordered, degeneracy_mode)

    # a REDUCE scan over collinear input already leaves just the two ends
    if degeneracy_mode == DegeneracyMode.REDUCE and len(hull) >= MIN_HULL_POINTS:
        hull = reduce_degeneracies(hull)

    return hull
