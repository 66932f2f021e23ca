"""
Exceptions raised by hull computations.

Codes mirror the numeric error codes of the C library these algorithms
were first written for, so callers bridging the two can map them 1:1.
"""

from typing import Optional


class HullError(Exception):
    """Base exception for hull computation errors."""
    code = -1

    def __init__(self, message: str, code: Optional[int] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class InvalidInputError(HullError):
    """Raised for missing or empty input, or a violated precondition."""
    code = -3


class TooFewPointsError(InvalidInputError):
    """Raised when an operation needs at least three points."""
    code = -2


class AngleUndefinedError(InvalidInputError):
    """Raised when an angle is requested between coincident points."""
    pass


class UnimplementedError(HullError):
    """Raised for a hull method that is not implemented."""
    code = -5
