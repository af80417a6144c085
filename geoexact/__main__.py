import argparse
import fractions
import logging
import sys
from typing import Optional, Sequence

from geoexact import Point, Segment, seg_intersection, seg_intersects

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _coordinate(text: str):
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return fractions.Fraction(text)
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"not an exact number: {text!r}") from None


def _point(value: str) -> Point:
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}")
    return Point(_coordinate(parts[0]), _coordinate(parts[1]))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Exact intersection of two line segments")
    for name in ("a1", "a2", "b1", "b2"):
        parser.add_argument(name, type=_point, help=f"Endpoint {name} as X,Y (integers or fractions like 1/2)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    seg1 = Segment(args.a1, args.a2)
    seg2 = Segment(args.b1, args.b2)
    logger.info("Testing %s against %s", seg1, seg2)

    print(f"segment 1: {seg1}")
    print(f"segment 2: {seg2}")
    print(f"intersects: {seg_intersects(seg1, seg2)}")

    point = seg_intersection(seg1, seg2)
    if point is None:
        print("point: none (parallel lines)")
    else:
        print(f"point: {point}")


if __name__ == "__main__":
    main(sys.argv[1:])
