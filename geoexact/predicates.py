"""Exact orientation and intersection predicates for segment pairs.

Every predicate works directly on the coordinate type of its inputs; there
are no tolerances, so the answers are exact for integers and rationals.
"""

from __future__ import annotations

import logging
from typing import Optional

from .fraction import Fraction
from .logging_utils import apply_debug_logging
from .matrix import Matrix2x2, Matrix3x3, det
from .primitives import Point, Segment, T

logger = logging.getLogger(__name__)


def sgn(value: T) -> int:
    return int(0 < value) - int(value < 0)


def side(seg: Segment[T], point: Point[T]) -> int:
    """Classify ``point`` against the directed line through ``seg``.

    Returns ``-1`` for left, ``0`` for collinear and ``1`` for right, reading
    the plane with the y axis pointing down.  In a y-up frame ``1`` means a
    counter-clockwise turn ``first -> second -> point``.
    """

    a, b = seg
    matrix = Matrix3x3([
        a.x, a.y, 1,
        b.x, b.y, 1,
        point.x, point.y, 1,
    ])
    return sgn(det(matrix))


def same_side(seg: Segment[T], point1: Point[T], point2: Point[T]) -> bool:
    """Both points on the same side of ``seg``'s line (both collinear counts)."""

    return side(seg, point1) == side(seg, point2)


def seg_contains(seg: Segment[T], point: Point[T]) -> bool:
    """Whether ``point`` lies on the closed segment ``seg``."""

    if side(seg, point) != 0:
        return False
    a, b = seg
    lo_x, hi_x = min(a.x, b.x), max(a.x, b.x)
    lo_y, hi_y = min(a.y, b.y), max(a.y, b.y)
    return bool(lo_x <= point.x and point.x <= hi_x and lo_y <= point.y and point.y <= hi_y)


def seg_intersects(seg1: Segment[T], seg2: Segment[T]) -> bool:
    """Whether the closed segments share at least one point."""

    straddle = not same_side(seg1, seg2.first, seg2.second) and not same_side(
        seg2, seg1.first, seg1.second
    )
    return (
        straddle
        or seg_contains(seg1, seg2.first)
        or seg_contains(seg1, seg2.second)
        or seg_contains(seg2, seg1.first)
        or seg_contains(seg2, seg1.second)
    )


def seg_intersection(seg1: Segment[T], seg2: Segment[T]) -> Optional[Point[Fraction[T]]]:
    """Exact intersection of the lines through ``seg1`` and ``seg2``.

    Returns ``None`` for parallel or coincident lines, which includes
    collinear overlapping segments.  The result is not clamped to the
    segments; confirm with :func:`seg_intersects` first when that matters.
    The returned point holds mutable fractions and cannot be hashed; key
    sets or dicts on ``(x.num, x.den, y.num, y.den)`` instead.
    """

    (x1, y1), (x2, y2) = seg1
    (x3, y3), (x4, y4) = seg2

    den_det = det(Matrix2x2([
        x1 - x2, y1 - y2,
        x3 - x4, y3 - y4,
    ]))
    if den_det == 0:
        logger.debug("parallel lines %s and %s: no intersection point", seg1, seg2)
        return None

    d1 = det(Matrix2x2([x1, y1, x2, y2]))
    d2 = det(Matrix2x2([x3, y3, x4, y4]))
    x_num = det(Matrix2x2([
        d1, x1 - x2,
        d2, x3 - x4,
    ]))
    y_num = det(Matrix2x2([
        d1, y1 - y2,
        d2, y3 - y4,
    ]))

    return Point(Fraction(x_num, den_det).reduced(), Fraction(y_num, den_det).reduced())


__all__ = [
    "sgn",
    "side",
    "same_side",
    "seg_contains",
    "seg_intersects",
    "seg_intersection",
]


apply_debug_logging(globals(), logger=logger, skip={"sgn"})
