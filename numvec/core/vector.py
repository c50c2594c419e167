"""Owning, resizable numeric vector backed by an exact-size numpy buffer.

A :class:`NumericVector` exclusively owns a one-dimensional numpy array whose
length always equals the vector's length. A zero-length vector holds no buffer.
Every size change allocates a fresh buffer, so numpy views obtained through
:meth:`NumericVector.as_array` go stale after ``resize``, ``insert`` or ``erase``.
"""
from __future__ import annotations

import math
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

import numpy as np
import numpy.typing as npt

from numvec.core.errors import (
    EmptyVectorError,
    InvalidDimensionError,
    InvalidRangeError,
    OutOfRangeError,
    SizeMismatchError,
)
from numvec.core.extremum import Extremum, ExtremumIndices, ExtremumValue

__all__: list[str] = [
    "DEFAULT_DTYPE",
    "NumericVector",
    "add",
    "concat",
    "cross",
    "dot",
    "subtract",
]

T = TypeVar("T", int, float)

DEFAULT_DTYPE = np.dtype(np.float64)


def _arithmetic_dtype(dtype: npt.DTypeLike) -> np.dtype:
    """Resolve ``dtype`` and reject anything that is not an integer or float type."""
    resolved = np.dtype(dtype)
    if not (np.issubdtype(resolved, np.integer) or np.issubdtype(resolved, np.floating)):
        raise TypeError(f"unsupported element type {resolved}; expected an integer or floating dtype")
    return resolved


class NumericVector(Generic[T]):
    """Dynamically sized vector of integers or floats with value semantics.

    ``NumericVector(n)`` allocates ``n`` zeros. Use :meth:`from_values` to copy
    numbers in, :meth:`adopt` to take over an existing numpy buffer and
    :meth:`take` to move the contents out of another vector.
    """

    __slots__ = ("_length", "_entries", "_dtype")

    # Mutable container: equality is structural, so instances are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, length: int = 0, dtype: npt.DTypeLike = DEFAULT_DTYPE) -> None:
        length = operator.index(length)
        if length < 0:
            raise InvalidRangeError(f"length must be non-negative, got {length}")
        self._dtype: np.dtype = _arithmetic_dtype(dtype)
        self._length: int = length
        self._entries: Optional[np.ndarray] = np.zeros(length, dtype=self._dtype) if length else None

    # ------------------------------------------------------------------
    # Construction & ownership
    # ------------------------------------------------------------------
    @classmethod
    def _wrap(cls, entries: Optional[np.ndarray], dtype: npt.DTypeLike) -> NumericVector:
        vec = cls.__new__(cls)
        vec._dtype = np.dtype(dtype)
        vec._length = 0 if entries is None else int(entries.shape[0])
        vec._entries = entries if vec._length else None
        return vec

    @classmethod
    def adopt(cls, buffer: Optional[np.ndarray]) -> NumericVector:
        """
        Take ownership of a one-dimensional numpy array.
        The array is not copied when it is already contiguous, so the caller
        must not touch ``buffer`` afterwards. ``None`` or an empty array
        gives an empty vector.
        """
        if buffer is None:
            return cls()
        if not isinstance(buffer, np.ndarray):
            raise TypeError("adopt() takes a numpy array; use from_values() to copy other iterables")
        if buffer.ndim != 1:
            raise TypeError(f"adopt() takes a one-dimensional array, got {buffer.ndim} dimensions")
        dtype = _arithmetic_dtype(buffer.dtype)
        if buffer.size == 0:
            return cls(dtype=dtype)
        return cls._wrap(np.ascontiguousarray(buffer), dtype)

    @classmethod
    def take(cls, source: NumericVector) -> NumericVector:
        """Move the contents of ``source`` into a new vector, leaving ``source`` empty."""
        entries, dtype = source._entries, source._dtype
        source._entries = None
        source._length = 0
        return cls._wrap(entries, dtype)

    @classmethod
    def from_values(cls, values: Iterable[Any], dtype: npt.DTypeLike = None) -> NumericVector:
        """Copy ``values`` into a new vector; numpy infers the dtype when none is given."""
        data = np.array(list(values), dtype=dtype)
        if data.ndim != 1:
            raise TypeError("from_values() takes a flat sequence of numbers")
        resolved = _arithmetic_dtype(data.dtype)
        if data.size == 0:
            return cls(dtype=resolved)
        return cls._wrap(data, resolved)

    def copy(self) -> NumericVector:
        """Element-wise copy into a newly allocated buffer."""
        entries = None if self._entries is None else self._entries.copy()
        return type(self)._wrap(entries, self._dtype)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> NumericVector:
        return self.copy()

    def swap(self, other: NumericVector) -> None:
        self._length, other._length = other._length, self._length
        self._entries, other._entries = other._entries, self._entries
        self._dtype, other._dtype = other._dtype, self._dtype

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> int:
        i = operator.index(index)
        if not 0 <= i < self._length:
            raise OutOfRangeError(f"index {i} out of range for vector of length {self._length}")
        return i

    def __getitem__(self, index: int) -> T:
        i = self._check_index(index)
        return self._entries[i].item()  # type: ignore[index]

    def __setitem__(self, index: int, value: T) -> None:
        i = self._check_index(index)
        self._entries[i] = value  # type: ignore[index]

    def __iter__(self) -> Iterator[T]:
        entries = self._entries
        if entries is None:
            return
        for value in entries:
            yield value.item()

    def tolist(self) -> list:
        return [] if self._entries is None else self._entries.tolist()

    def as_array(self) -> np.ndarray:
        """
        Read-only view of the current buffer.
        The view is invalidated by any operation that changes the length.
        """
        if self._entries is None:
            return np.empty(0, dtype=self._dtype)
        view = self._entries.view()
        view.flags.writeable = False
        return view

    def sort(self, *, key: Optional[Callable[[Any], Any]] = None, reverse: bool = False) -> None:
        if self._entries is None:
            return
        if key is None and not reverse:
            self._entries.sort()
        else:
            self._entries[:] = sorted(self._entries.tolist(), key=key, reverse=reverse)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------
    def clear(self) -> None:
        self._length = 0
        self._entries = None

    def resize(self, new_length: int, fill_value: int | float = 0) -> None:
        """
        Reallocate to exactly ``new_length`` elements.
        The common prefix is kept; slots added at the tail get ``fill_value``.
        """
        new_length = operator.index(new_length)
        if new_length < 0:
            raise InvalidRangeError(f"length must be non-negative, got {new_length}")
        if new_length == self._length:
            return
        if new_length == 0:
            self.clear()
            return

        entries = np.empty(new_length, dtype=self._dtype)
        kept = min(self._length, new_length)
        if kept:
            entries[:kept] = self._entries[:kept]  # type: ignore[index]
        entries[kept:] = fill_value
        self._entries = entries
        self._length = new_length

    def subrange(self, start: int, end: int) -> NumericVector:
        """New vector holding the elements in ``[start, end)``."""
        start, end = operator.index(start), operator.index(end)
        if start >= end:
            raise InvalidRangeError(f"invalid range [{start}, {end})")
        if start < 0 or end > self._length:
            raise OutOfRangeError(f"range [{start}, {end}) out of range for vector of length {self._length}")
        return type(self)._wrap(self._entries[start:end].copy(), self._dtype)  # type: ignore[index]

    def _open_gap(self, pos: int, count: int) -> int:
        pos = operator.index(pos)
        if not 0 <= pos <= self._length:
            raise OutOfRangeError(f"insert position {pos} out of range for vector of length {self._length}")
        if count:
            old_length = self._length
            self.resize(old_length + count)
            self._entries[pos + count:] = self._entries[pos:old_length].copy()  # type: ignore[index]
        return pos

    def insert(self, pos: int, value: T, count: int = 1) -> None:
        """Insert ``count`` copies of ``value`` before position ``pos``."""
        count = operator.index(count)
        if count < 0:
            raise InvalidRangeError(f"count must be non-negative, got {count}")
        # Convert before the gap opens so a rejected value leaves the vector untouched.
        fill = np.empty(count, dtype=self._dtype)
        fill[:] = value
        pos = self._open_gap(pos, count)
        if count:
            self._entries[pos:pos + count] = fill  # type: ignore[index]

    def insert_all(self, pos: int, values: Iterable[T]) -> None:
        """Insert every item of ``values``, in order, before position ``pos``."""
        block = np.asarray(list(values), dtype=self._dtype)
        if block.ndim != 1:
            raise TypeError("insert_all() takes a flat sequence of numbers")
        pos = self._open_gap(pos, block.size)
        if block.size:
            self._entries[pos:pos + block.size] = block  # type: ignore[index]

    def _close_gap(self, first: int, last: int) -> None:
        removed = last - first
        self._entries[first:self._length - removed] = self._entries[last:].copy()  # type: ignore[index]
        self.resize(self._length - removed)

    def erase(self, pos: int) -> None:
        pos = operator.index(pos)
        if not 0 <= pos < self._length:
            raise OutOfRangeError(f"erase position {pos} out of range for vector of length {self._length}")
        self._close_gap(pos, pos + 1)

    def erase_range(self, first: int, last: int) -> None:
        """Remove the elements in ``[first, last)``."""
        first, last = operator.index(first), operator.index(last)
        if first < 0 or first >= self._length or last > self._length:
            raise OutOfRangeError(f"range [{first}, {last}) out of range for vector of length {self._length}")
        if first >= last:
            raise InvalidRangeError(f"invalid range [{first}, {last})")
        self._close_gap(first, last)

    # ------------------------------------------------------------------
    # Reductions & statistics
    # ------------------------------------------------------------------
    def sum(self) -> T:
        if self._entries is None:
            return self._dtype.type(0).item()
        return self._entries.sum().item()

    def product(self) -> T:
        if self._entries is None:
            return self._dtype.type(1).item()
        return self._entries.prod().item()

    def mean(self) -> float:
        if not self._length:
            raise EmptyVectorError("mean of an empty vector is undefined")
        return self.sum() / self._length

    def median(self) -> int | float:
        """
        Middle element for odd lengths, average of the two middle elements for
        even lengths. Selection runs on a partitioned copy; the vector keeps its order.
        """
        if not self._length:
            raise EmptyVectorError("median of an empty vector is undefined")
        mid = self._length // 2
        if self._length % 2:
            return np.partition(self._entries, mid)[mid].item()
        partitioned = np.partition(self._entries, (mid - 1, mid))
        return (partitioned[mid - 1].item() + partitioned[mid].item()) / 2

    def max(self) -> Extremum:
        """Largest element, or the indices of all largest elements when it is tied."""
        return self._extremum(np.max)

    def min(self) -> Extremum:
        """Smallest element, or the indices of all smallest elements when it is tied."""
        return self._extremum(np.min)

    def _extremum(self, pick: Callable[[np.ndarray], Any]) -> Extremum:
        if self._entries is None:
            raise EmptyVectorError("extremum of an empty vector is undefined")
        entries = self._entries
        candidates = entries
        if np.issubdtype(self._dtype, np.floating):
            # NaN has no place in the order; skip it.
            candidates = entries[~np.isnan(entries)]
            if not candidates.size:
                raise EmptyVectorError("vector holds no comparable elements")

        extreme = pick(candidates)
        indices = np.flatnonzero(entries == extreme)
        if indices.size == 1:
            return ExtremumValue(extreme.item())
        return ExtremumIndices(tuple(int(i) for i in indices))

    # ------------------------------------------------------------------
    # Vector algebra
    # ------------------------------------------------------------------
    def magnitude(self) -> float:
        return math.sqrt(dot(self, self))

    def normalize(self) -> None:
        """Scale to unit length in place. A zero vector is left unchanged."""
        if not np.issubdtype(self._dtype, np.floating):
            raise TypeError(f"normalize() needs a floating element type, vector holds {self._dtype}")
        mag = self.magnitude()
        if mag == 0:
            return
        self._scale_in_place(1 / mag)

    def _scale_in_place(self, scalar: int | float) -> None:
        if self._entries is not None:
            # Results are cast back to the element type.
            np.multiply(self._entries, scalar, out=self._entries, casting="unsafe")

    def scale(self, scalar: int | float) -> NumericVector:
        result = self.copy()
        result._scale_in_place(scalar)
        return result

    def __imul__(self, scalar: int | float) -> NumericVector:
        if isinstance(scalar, NumericVector):
            return NotImplemented
        self._scale_in_place(scalar)
        return self

    def __mul__(self, scalar: int | float) -> NumericVector:
        if isinstance(scalar, NumericVector):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def _apply_in_place(self, other: NumericVector, ufunc: np.ufunc) -> NumericVector:
        _require_same_length(self, other, ufunc.__name__)
        if self._entries is not None:
            ufunc(self._entries, other._entries, out=self._entries, casting="unsafe")
        return self

    def add_assign(self, other: NumericVector) -> NumericVector:
        """Element-wise ``self + other`` written into ``self``."""
        return self._apply_in_place(other, np.add)

    def sub_assign(self, other: NumericVector) -> NumericVector:
        """Element-wise ``self - other`` written into ``self``."""
        return self._apply_in_place(other, np.subtract)

    def __iadd__(self, other: NumericVector) -> NumericVector:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.add_assign(other)

    def __isub__(self, other: NumericVector) -> NumericVector:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.sub_assign(other)

    def __add__(self, other: NumericVector) -> NumericVector:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: NumericVector) -> NumericVector:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return subtract(self, other)

    # ------------------------------------------------------------------
    # Equality & ordering
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        if self._length != other._length:
            return False
        return self._length == 0 or bool(np.array_equal(self._entries, other._entries))

    def __lt__(self, other: NumericVector) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return self.tolist() < other.tolist()

    def __gt__(self, other: NumericVector) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return other.tolist() < self.tolist()

    def __le__(self, other: NumericVector) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return not other < self

    def __ge__(self, other: NumericVector) -> bool:
        if not isinstance(other, NumericVector):
            return NotImplemented
        return not self < other

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_values({self.tolist()!r}, dtype={self._dtype.name})"


def _require_same_length(u: NumericVector, v: NumericVector, operation: str = "operation") -> None:
    if len(u) != len(v):
        raise SizeMismatchError(f"{operation} needs vectors of equal length, got {len(u)} and {len(v)}")


def _elementwise(u: NumericVector, v: NumericVector, ufunc: np.ufunc) -> NumericVector:
    _require_same_length(u, v, ufunc.__name__)
    dtype = np.result_type(u.dtype, v.dtype)
    if not len(u):
        return NumericVector(dtype=dtype)
    return NumericVector._wrap(ufunc(u._entries, v._entries).astype(dtype, copy=False), dtype)


def add(u: NumericVector, v: NumericVector) -> NumericVector:
    """Element-wise sum as a new vector; neither operand changes."""
    return _elementwise(u, v, np.add)


def subtract(u: NumericVector, v: NumericVector) -> NumericVector:
    """Element-wise difference as a new vector; neither operand changes."""
    return _elementwise(u, v, np.subtract)


def dot(u: NumericVector, v: NumericVector) -> int | float:
    _require_same_length(u, v, "dot product")
    dtype = np.result_type(u.dtype, v.dtype)
    if not len(u):
        return dtype.type(0).item()
    if np.issubdtype(dtype, np.integer):
        # Accumulate in Python ints; small element types would wrap inside np.dot.
        return sum(x * y for x, y in zip(u, v))
    return np.dot(u._entries, v._entries).item()


def cross(u: NumericVector, v: NumericVector) -> NumericVector:
    """
    Cross product of two vectors with at least three components.

    The first three components are the usual 3-D cross product of the first
    three elements. For longer vectors, component ``i >= 3`` follows the
    cyclic convention ``u[i+1]*v[i+2] - u[i+2]*v[i+1]`` with indices taken
    modulo the length. That extension is a convention of this library, not a
    general law of vector algebra.
    """
    _require_same_length(u, v, "cross product")
    n = len(u)
    if n < 3:
        raise InvalidDimensionError(f"cross product needs at least 3 components, got {n}")

    a, b = u._entries, v._entries
    dtype = np.result_type(u.dtype, v.dtype)
    w = np.empty(n, dtype=dtype)
    for i in range(n):
        period = 3 if i < 3 else n
        j, k = (i + 1) % period, (i + 2) % period
        w[i] = a[j] * b[k] - a[k] * b[j]  # type: ignore[index]
    return NumericVector._wrap(w, dtype)


def concat(a: NumericVector, b: NumericVector) -> NumericVector:
    """New vector holding ``a``'s elements followed by ``b``'s."""
    dtype = np.result_type(a.dtype, b.dtype)
    if not (len(a) or len(b)):
        return NumericVector(dtype=dtype)
    joined = np.concatenate((a.as_array(), b.as_array())).astype(dtype, copy=False)
    return NumericVector._wrap(joined, dtype)
