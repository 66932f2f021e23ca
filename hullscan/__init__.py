"""
Convex hulls of 2-D point sets by Graham scan.
"""

from .config import config, configure_logging
from .constants import DegeneracyMode, DescDetail, HullMethod, Turn
from .diagnostics import (
    compare_point_sets,
    compare_points,
    describe_point,
    describe_points,
    error_message,
    generate_random_point_set,
)
from .errors import (
    AngleUndefinedError,
    HullError,
    InvalidInputError,
    TooFewPointsError,
    UnimplementedError,
)
from .graham import build_hull, compute_graham_scan, reduce_degeneracies
from .hull import compute_convex_hull
from .points import Point, PointSet, find_lowest_point
from .polygon import compute_centroid, contains_point, is_convex, polygon_area
from .predicates import angle_from_pivot, distance, orientation
from .sorting import SortKeys, compute_point_angles, merge_sort, sort_by_angle

__all__ = [
    "config",
    "configure_logging",
    "DegeneracyMode",
    "DescDetail",
    "HullMethod",
    "Turn",
    "compare_point_sets",
    "compare_points",
    "describe_point",
    "describe_points",
    "error_message",
    "generate_random_point_set",
    "AngleUndefinedError",
    "HullError",
    "InvalidInputError",
    "TooFewPointsError",
    "UnimplementedError",
    "build_hull",
    "compute_graham_scan",
    "reduce_degeneracies",
    "compute_convex_hull",
    "Point",
    "PointSet",
    "find_lowest_point",
    "compute_centroid",
    "contains_point",
    "is_convex",
    "polygon_area",
    "angle_from_pivot",
    "distance",
    "orientation",
    "SortKeys",
    "compute_point_angles",
    "merge_sort",
    "sort_by_angle",
]
