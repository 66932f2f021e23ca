"""
Point and point-set types shared by every hull operation.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Union

from .errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A point in the cartesian plane."""

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_value(cls, value: Union["Point", Sequence[float]]) -> "Point":
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Cannot interpret {value!r} as a 2-D point") from e
        return cls(x, y)


PointLike = Union[Point, Sequence[float]]


class PointSet:
    """Ordered, index-addressable collection of points.

    Points are stored in one contiguous list; the set itself is mutable but
    the points in it are not.
    """

    def __init__(self, points: Optional[Iterable[PointLike]] = None):
        self._points: list[Point] = []
        if points is not None:
            for point in points:
                self.add_point(point)

    def add_point(self, point: PointLike) -> Point:
        point = Point.from_value(point)
        self._points.append(point)
        return point

    def add_coords(self, x: float, y: float) -> Point:
        return self.add_point(Point(x, y))

    def copy(self) -> "PointSet":
        """Return an independent copy, for callers sharing a set across threads."""
        return PointSet(self._points)

    def lowest_point(self) -> Point:
        return find_lowest_point(self._points)

    def to_list(self) -> list[Point]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other) -> bool:
        if isinstance(other, PointSet):
            return self._points == other._points
        return NotImplemented

    def __repr__(self) -> str:
        return f"PointSet(num_points={len(self._points)})"


def as_points(points: Optional[Iterable[PointLike]]) -> list[Point]:
    """Copy any point collection into a fresh list of Point.

    Raises:
        InvalidInputError: if points is None.
    """
    if points is None:
        raise InvalidInputError("Point set is missing")
    return [Point.from_value(p) for p in points]


def find_lowest_point(points: Optional[Iterable[PointLike]]) -> Point:
    """Find the point with the minimum y-coordinate, ties broken by minimum x.

    The first such point wins when coordinates repeat.
    """
    points = as_points(points)
    if not points:
        raise InvalidInputError("Cannot find the lowest point of an empty set")

    lowest = points[0]
    for point in points[1:]:
        if point.y < lowest.y or (point.y == lowest.y and point.x < lowest.x):
            lowest = point
    logger.debug(f"Lowest point of {len(points)} points is {lowest}")
    return lowest
