"""
Exceptions raised by curve construction and evaluation.

Construction-time problems (bad parameters, malformed market series) are
rejected when the curve is built; domain violations are reported on each
evaluation.
"""

from typing import Optional


class CurveError(ValueError):
    """Base exception for curve construction and evaluation failures."""


class InvalidParameterError(CurveError):
    """A model parameter violates its admissible range."""


class MalformedSeriesError(CurveError):
    """Market point series is inconsistent (length, ordering, anchor, sign)."""


class OutOfDomainError(CurveError):
    """Curve evaluated outside the interval on which it is defined."""

    def __init__(
        self,
        t: float,
        lower: Optional[float] = None,
        upper: Optional[float] = None,
        message: Optional[str] = None
    ):
        self.t = t
        self.lower = lower
        self.upper = upper
        if message is None:
            message = f"Time {t} outside curve domain [{lower}, {upper}]"
        super().__init__(message)


__all__ = [
    "CurveError",
    "InvalidParameterError",
    "MalformedSeriesError",
    "OutOfDomainError",
]
