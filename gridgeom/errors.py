"""Exception taxonomy shared by every gridgeom component."""

from __future__ import annotations


class GeometryError(Exception):
    """Base class for failures raised by gridgeom."""


class InvalidArgumentError(GeometryError, ValueError):
    """Raised for out-of-range precisions, bad point counts or centers."""


class DegenerateGeometryError(GeometryError, ValueError):
    """Raised when duplicate or collinear points have no unique answer."""


class NumericRangeError(GeometryError, OverflowError):
    """Raised when a value cannot be represented as a C ``int``."""


class PrecisionUnavailableError(GeometryError, ArithmeticError):
    """Raised when the machine precision probe cannot establish a result."""


class ResourceExhaustionError(GeometryError, MemoryError):
    """Raised when a point buffer cannot be allocated."""


__all__ = [
    "GeometryError",
    "InvalidArgumentError",
    "DegenerateGeometryError",
    "NumericRangeError",
    "PrecisionUnavailableError",
    "ResourceExhaustionError",
]
