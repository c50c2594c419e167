"""Errors raised by NumericVector operations.

Every error subclasses :class:`VectorError`, and also the builtin exception a
plain Python container would raise for the same mistake, so callers can catch
either one.
"""
from __future__ import annotations

__all__: list[str] = [
    "VectorError",
    "OutOfRangeError",
    "InvalidRangeError",
    "SizeMismatchError",
    "InvalidDimensionError",
    "EmptyVectorError",
]


class VectorError(Exception):
    """Base class for vector errors."""


class OutOfRangeError(VectorError, IndexError):
    """An index or position is past the valid bound."""


class InvalidRangeError(VectorError, ValueError):
    """A (first, last) pair or a length argument is malformed."""


class SizeMismatchError(VectorError, ValueError):
    """Operands of a binary operation differ in length."""


class InvalidDimensionError(VectorError, ValueError):
    """The vector is too short for the requested operation."""


class EmptyVectorError(VectorError, ValueError):
    """A reduction needs at least one element."""
