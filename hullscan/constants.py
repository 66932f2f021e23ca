"""Shared constants for turn kinds, hull methods, and degeneracy modes.

Using these constants instead of hard-coded strings keeps the predicates,
the scan, and the orchestration layer in agreement.
"""


# ── Orientation ─────────────────────────────────────────────────────────
class Turn:
    LEFT = 'left'
    RIGHT = 'right'
    COLLINEAR = 'collinear'


# ── Hull computation ────────────────────────────────────────────────────
class HullMethod:
    GRAHAM_SCAN = 'graham_scan'


class DegeneracyMode:
    NONE = 'none'        # keep whatever collinear points the scan leaves
    REDUCE = 'reduce'    # drop collinear points, wrap-around edge included


ALL_DEGENERACY_MODES = (DegeneracyMode.NONE, DegeneracyMode.REDUCE)


# ── Diagnostics ─────────────────────────────────────────────────────────
class DescDetail:
    MIN = 0
    VERBOSE = 1
    FULL = 2


# Sort key given to the pivot; angles from the pivot live in [0, pi]
PIVOT_SORT_KEY = -1.0

PIVOT_KEY_DESCRIPTION = 'lowest point'
ANGLE_KEY_DESCRIPTION = 'angle with lowest point'

MIN_HULL_POINTS = 3
