"""
Configuration settings for hull computations.
"""

import logging
import os
from typing import Optional

from .constants import DegeneracyMode, HullMethod


class Config:
    """Configuration settings loaded from environment variables."""

    def __getitem__(self, item):
        return getattr(self, item)

    # Absolute tolerance for point equality and sort key ties
    FLOAT_TOLERANCE: float = float(os.getenv("HULLSCAN_FLOAT_TOLERANCE", "1e-6"))

    # Relative tolerance for collinearity, scaled by the size of the cross
    # product terms so it holds at any coordinate magnitude
    COLLINEAR_TOLERANCE: float = float(os.getenv("HULLSCAN_COLLINEAR_TOLERANCE", "1e-9"))

    # Defaults used when compute_convex_hull is called without them
    DEFAULT_METHOD: str = os.getenv("HULLSCAN_METHOD", HullMethod.GRAHAM_SCAN)
    DEFAULT_DEGENERACY_MODE: str = os.getenv(
        "HULLSCAN_DEGENERACY_MODE", DegeneracyMode.REDUCE
    )

    LOG_LEVEL: str = os.getenv("HULLSCAN_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


config = Config()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts that use the library directly."""
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format=config.LOG_FORMAT,
    )
