from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Tuple

from .config import get_reduction_config
from .primitives import T


class DomainError(ValueError):
    """Raised when a value falls outside the domain of an exact operation."""


def gcd(a: T, b: T) -> T:
    """Greatest common divisor by Euclid's algorithm.

    Defined cleanly for non-negative operands.  With negative operands the
    sign of the result follows the host type's ``%``; callers that care
    about sign placement normalise afterwards (see :meth:`Fraction.reduce`).
    """

    while b != 0:
        a, b = b, a % b
    return a


@dataclass(eq=True)
class Fraction(Generic[T]):
    """Exact rational ``num/den`` over an exact numeric type.

    The denominator is checked on every assignment, so neither construction,
    :meth:`reduce` nor setting ``den`` directly can leave it at zero.
    Fractions are mutable and therefore unhashable; so is any ``Point``
    holding them.
    """

    num: T
    den: T

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "den" and value == 0:
            raise DomainError("division by 0")
        super().__setattr__(name, value)

    def __float__(self) -> float:
        # Display only; predicates never go through this.
        try:
            return float(self.num / self.den)
        except OverflowError:
            return -math.inf if (self.num < 0) != (self.den < 0) else math.inf

    def __str__(self) -> str:
        return f"{self.num}/{self.den}"

    def _reduced_terms(self) -> Tuple[T, T]:
        div = gcd(self.num, self.den)
        num, den = self.num // div, self.den // div
        if get_reduction_config().positive_denominator and den < 0:
            num, den = -num, -den
        return num, den

    def reduced(self) -> "Fraction[T]":
        """Return an equivalent fraction in lowest terms."""
        num, den = self._reduced_terms()
        return Fraction(num, den)

    def reduce(self) -> None:
        """Bring this fraction to lowest terms in place."""
        self.num, self.den = self._reduced_terms()


__all__ = ["DomainError", "gcd", "Fraction"]
