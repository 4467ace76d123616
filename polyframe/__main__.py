import argparse
import logging
import sys
from typing import List, Optional, Sequence

from polyframe import (
    GeometryError,
    Point,
    Polygon,
    canonical_key,
    flip_reflect,
    flip_rotate,
    reorient,
)

logger = logging.getLogger(__name__)

_OPERATIONS = {
    "flip-rotate": flip_rotate,
    "flip-reflect": flip_reflect,
    "reorient": reorient,
}


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_point(text: str) -> Point:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"non-numeric coordinate in {text!r}") from None


def _format_coord(value: float) -> str:
    return f"{value + 0.0:.12g}"


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Canonicalize a polygon")
    parser.add_argument(
        "operation",
        choices=sorted([*_OPERATIONS, "key"]),
        help="Transform to apply",
    )
    parser.add_argument(
        "points",
        nargs="*",
        type=_parse_point,
        help="Vertices as x,y pairs in order (put -- before negative values)",
    )
    parser.add_argument(
        "--align",
        type=int,
        default=0,
        help="Shift the starting vertex before transforming (default: 0)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    points: List[Point] = list(args.points)
    polygon = Polygon(points).align(args.align)
    logger.info("Read %d vertices, starting at %d", len(polygon), polygon.orientation)

    try:
        if args.operation == "key":
            key = canonical_key(polygon)
            print(" ".join(_format_coord(value) for value in key))
            return
        result = _OPERATIONS[args.operation](polygon)
    except GeometryError as exc:
        logger.error("%s failed: %s", args.operation, exc)
        raise SystemExit(1)

    for p in result.points():
        print(f"{_format_coord(p.x)} {_format_coord(p.y)}")


if __name__ == "__main__":
    main(sys.argv[1:])
