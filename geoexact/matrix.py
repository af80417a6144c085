"""Fixed-size square matrices used as scratch space for exact determinants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Tuple, Union

import numpy as np

from .primitives import T

Index = Tuple[int, int]


def _collect(values: Iterable[T], size: int, name: str) -> Tuple[T, ...]:
    items = tuple(values)
    if len(items) != size * size:
        raise ValueError(f"{name} expects {size * size} values, got {len(items)}")
    return items


@dataclass(frozen=True)
class Matrix2x2(Generic[T]):
    """2x2 grid stored row-major and addressed as ``matrix[col, row]``."""

    values: Tuple[T, ...]

    def __init__(self, values: Iterable[T]) -> None:
        object.__setattr__(self, "values", _collect(values, 2, "Matrix2x2"))

    def __getitem__(self, index: Index) -> T:
        col, row = index
        return self.values[row * 2 + col]

    def determinant(self) -> T:
        return self[0, 0] * self[1, 1] - self[1, 0] * self[0, 1]

    def to_numpy(self) -> np.ndarray:
        return np.array(self.values, dtype=object).reshape(2, 2)


@dataclass(frozen=True)
class Matrix3x3(Generic[T]):
    """3x3 grid stored row-major and addressed as ``matrix[col, row]``."""

    values: Tuple[T, ...]

    def __init__(self, values: Iterable[T]) -> None:
        object.__setattr__(self, "values", _collect(values, 3, "Matrix3x3"))

    def __getitem__(self, index: Index) -> T:
        col, row = index
        return self.values[row * 3 + col]

    def determinant(self) -> T:
        m = self
        # Rule of Sarrus.
        return (
            m[0, 0] * m[1, 1] * m[2, 2]
            + m[0, 1] * m[1, 2] * m[2, 0]
            + m[0, 2] * m[1, 0] * m[2, 1]
            - m[2, 0] * m[1, 1] * m[0, 2]
            - m[2, 1] * m[1, 2] * m[0, 0]
            - m[2, 2] * m[1, 0] * m[0, 1]
        )

    def to_numpy(self) -> np.ndarray:
        return np.array(self.values, dtype=object).reshape(3, 3)


def det(matrix: Union[Matrix2x2[T], Matrix3x3[T]]) -> T:
    """Return the exact determinant of ``matrix``."""

    return matrix.determinant()


__all__ = ["Matrix2x2", "Matrix3x3", "det"]
