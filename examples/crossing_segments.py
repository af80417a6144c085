"""Example: classify a handful of segment pairs and print exact crossings."""

import logging
from fractions import Fraction as Q

from geoexact import Segment, seg_intersection, seg_intersects, side

logger = logging.getLogger(__name__)

PAIRS = [
    ("crossing", Segment.of((0, 0), (4, 4)), Segment.of((0, 4), (4, 0))),
    ("off-grid crossing", Segment.of((0, 0), (3, 1)), Segment.of((0, 1), (1, 0))),
    ("touching endpoint", Segment.of((0, 0), (2, 2)), Segment.of((2, 2), (4, 0))),
    ("parallel", Segment.of((0, 0), (2, 2)), Segment.of((1, 0), (3, 2))),
    ("collinear overlap", Segment.of((0, 0), (4, 0)), Segment.of((2, 0), (6, 0))),
    ("rational endpoints", Segment.of((Q(1, 2), 0), (Q(1, 2), 3)), Segment.of((0, Q(1, 3)), (2, Q(1, 3)))),
]


def main() -> None:
    for label, seg1, seg2 in PAIRS:
        hit = seg_intersects(seg1, seg2)
        logger.info("%s: side of %s w.r.t. %s is %d", label, seg2.first, seg1, side(seg1, seg2.first))
        point = seg_intersection(seg1, seg2)
        rendered = "none" if point is None else str(point)
        print(f"{label:>20}: {seg1} x {seg2} -> intersects={hit} point={rendered}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    main()
