# errors.py
"""
Exceptions raised by the spline utilities.

All of them subclass ValueError, so `except ValueError` still catches
every bad-input case.
"""


class SplineError(ValueError):
    """Base class for spline evaluation errors."""


class InvalidArgumentError(SplineError):
    """Bad parameter or malformed point array (shape, NaN, subdivisions, alpha)."""


class InvalidGeometryError(SplineError):
    """Control points that do not define a curve, e.g. coincident neighbours."""

    def __init__(self, message, indices=None):
        super().__init__(message)
        self.indices = indices
