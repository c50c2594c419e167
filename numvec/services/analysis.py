"""Vector analysis helpers for plain lists of numbers."""
from __future__ import annotations

import math
from typing import Callable, Iterable, Sequence

from numvec.core.errors import VectorError
from numvec.core.extremum import Extremum, ExtremumValue
from numvec.core.vector import NumericVector, add, concat, cross, dot, subtract

__all__: list[str] = [
    "BINARY_OPERATIONS",
    "NonFiniteResultError",
    "build_vector",
    "combine",
    "dot_product",
    "extremum_payload",
    "normalized",
    "vector_summary",
]

BINARY_OPERATIONS: dict[str, Callable[[NumericVector, NumericVector], NumericVector]] = {
    "add": add,
    "subtract": subtract,
    "cross": cross,
    "concat": concat,
}


class NonFiniteResultError(VectorError, ArithmeticError):
    """A result overflowed to infinity or became NaN and cannot be sent as JSON."""


def _require_finite(name: str, values: Iterable[float]) -> None:
    if not all(math.isfinite(v) for v in values):
        raise NonFiniteResultError(f"{name} is not a finite number")


def build_vector(values: Sequence[float] | Sequence[int]) -> NumericVector:
    return NumericVector.from_values([float(v) for v in values], dtype="float64")


def extremum_payload(result: Extremum) -> dict[str, object]:
    if isinstance(result, ExtremumValue):
        return {"value": result.value}
    return {"indices": list(result.indices)}


def vector_summary(values: Sequence[float] | Sequence[int]) -> dict[str, object]:
    """
    Compute length, sum, product, mean, median, min, max and magnitude.
    Raises EmptyVectorError if input is empty and NonFiniteResultError on overflow.
    """
    vec = build_vector(values)
    result = {
        "length": len(vec),
        "sum": vec.sum(),
        "product": vec.product(),
        "mean": vec.mean(),
        "median": vec.median(),
        "min": extremum_payload(vec.min()),
        "max": extremum_payload(vec.max()),
        "magnitude": vec.magnitude(),
    }
    for name in ("sum", "product", "mean", "median", "magnitude"):
        _require_finite(name, [result[name]])  # type: ignore[list-item]
    return result


def normalized(values: Sequence[float] | Sequence[int]) -> dict[str, object]:
    """Unit vector along ``values`` together with the original magnitude."""
    vec = build_vector(values)
    magnitude = vec.magnitude()
    _require_finite("magnitude", [magnitude])
    vec.normalize()
    return {"values": vec.tolist(), "magnitude": magnitude}


def dot_product(u: Sequence[float], v: Sequence[float]) -> float:
    result = dot(build_vector(u), build_vector(v))
    _require_finite("dot product", [result])
    return result


def combine(operation: str, u: Sequence[float], v: Sequence[float]) -> list[float]:
    """
    Apply one of BINARY_OPERATIONS to two lists and return the resulting elements.
    Raises KeyError for an unknown operation name.
    """
    result = BINARY_OPERATIONS[operation](build_vector(u), build_vector(v)).tolist()
    _require_finite(operation, result)
    return result
