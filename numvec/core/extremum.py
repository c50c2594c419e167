"""Result type of NumericVector.max() and NumericVector.min()."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__: list[str] = [
    "Extremum",
    "ExtremumIndices",
    "ExtremumValue",
]


@dataclass(frozen=True)
class ExtremumValue:
    """The extreme value occurs exactly once."""

    value: int | float

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ExtremumIndices:
    """The extreme value occurs at several positions, listed in ascending order."""

    indices: tuple[int, ...]

    def __str__(self) -> str:
        return "[" + ", ".join(str(i) for i in self.indices) + "]"


Extremum = Union[ExtremumValue, ExtremumIndices]
