from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Protocol, Sequence, TypeVar, Union


class NumericType(Protocol):
    """Capabilities a coordinate type needs: exact ring arithmetic plus ordering."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __floordiv__(self, other: Any) -> Any: ...
    def __mod__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...
    def __le__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=NumericType)


@dataclass(frozen=True)
class Point(Generic[T]):
    x: T
    y: T

    @classmethod
    def of(cls, value: Union["Point[T]", Sequence[T]]) -> "Point[T]":
        if isinstance(value, Point):
            return value
        if len(value) != 2:
            raise ValueError(f"point needs exactly two coordinates, got {len(value)}")
        return cls(value[0], value[1])

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x};{self.y})"


@dataclass(frozen=True)
class Segment(Generic[T]):
    """Directed segment ``first -> second``."""

    first: Point[T]
    second: Point[T]

    @classmethod
    def of(
        cls,
        first: Union[Point[T], Sequence[T]],
        second: Union[Point[T], Sequence[T]],
    ) -> "Segment[T]":
        return cls(Point.of(first), Point.of(second))

    def reversed(self) -> "Segment[T]":
        """Same segment with the opposite orientation."""
        return Segment(self.second, self.first)

    def __iter__(self) -> Iterator[Point[T]]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"{self.first}-{self.second}"


__all__ = ["NumericType", "T", "Point", "Segment"]
