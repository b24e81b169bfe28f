"""Errors raised by the vector types."""

from __future__ import annotations


class VectorMathError(ValueError):
    """Base class for undefined vector operations."""


class ZeroLengthVectorError(VectorMathError):
    """Raised when an operation needs a direction and the vector has none."""


class VectorDivideByZeroError(VectorMathError, ZeroDivisionError):
    """Raised when a vector is divided by a zero scalar."""


def require_same_type(a, b) -> None:
    """Raise TypeError unless b is the same vector type as a."""
    if type(b) is not type(a):
        raise TypeError(f"expected {type(a).__name__}, got {type(b).__name__}")
