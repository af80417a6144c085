"""Configuration helpers for fraction reduction."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class ReductionConfig:
    """Controls how :meth:`Fraction.reduce` places signs.

    With ``positive_denominator`` set, a reduced fraction always carries its
    sign on the numerator.  Switching it off keeps whatever signs Euclid's
    algorithm produced under the host type's ``%`` semantics.
    """

    positive_denominator: bool = True


_REDUCTION_CONFIG = ReductionConfig()


def get_reduction_config() -> ReductionConfig:
    return copy.deepcopy(_REDUCTION_CONFIG)


def set_reduction_config(config: ReductionConfig) -> None:
    global _REDUCTION_CONFIG
    _REDUCTION_CONFIG = copy.deepcopy(config)
