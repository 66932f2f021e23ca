"""
Pytest fixtures for hull tests.
"""

import math

import pytest

from hullscan.points import Point


def pts(*coords):
    """Shorthand: pts((0, 0), (1, 0)) -> [Point(0, 0), Point(1, 0)]."""
    return [Point(x, y) for x, y in coords]


@pytest.fixture
def square_with_center():
    """Unit square plus its center."""
    return pts((0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.5))


@pytest.fixture
def collinear_edge():
    """Square with an extra point in the middle of its bottom edge."""
    return pts((0, 0), (2, 0), (4, 0), (4, 4), (0, 4))


@pytest.fixture
def triangle():
    return pts((0, 0), (4, 0), (0, 4))


@pytest.fixture
def circle_points():
    """16 points on the unit circle, counter-clockwise from angle 0."""
    n = 16
    return [Point(math.cos(2 * math.pi * i / n), math.sin(2 * math.pi * i / n)) for i in range(n)]
