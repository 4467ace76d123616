"""Polygon canonicalization.

Every operation reads vertices through :meth:`Polygon.points` and returns a
new owned :class:`Polygon` with orientation ``0``; inputs are never modified.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .config import get_canonical_config
from .logging_utils import debug_log_call
from .matrix import Matrix
from .point import Point
from .polygon import Polygon
from .vect import Vect

logger = logging.getLogger(__name__)

X_AXIS = Vect(1.0, 0.0)


@debug_log_call(logger)
def flip_rotate(polygon: Polygon) -> Polygon:
    """Keep the first edge and turn every later vertex half way around.

    ``p_k`` becomes ``p1 - (p_k - p0)``, the point reflection through the
    midpoint of ``p0 p1``. Applying it twice gives back the input vertices.
    """

    pts = polygon.points()
    p0 = pts.expect(2)
    p1 = pts.expect(2)
    tail = [p1.sub(p.sub(p0)) for p in pts]
    return Polygon.owned([p0, p1, *tail])


@debug_log_call(logger)
def flip_reflect(polygon: Polygon) -> Polygon:
    """Mirror every vertex after the first edge across the line ``p0 p1``."""

    pts = polygon.points()
    p0 = pts.expect(2)
    p1 = pts.expect(2)
    axis = p1.sub(p0)
    axis.unit()  # coincident p0, p1 leave no mirror line

    tail: List[Point] = []
    for p in pts:
        v = p.sub(p0)
        perp = v.sub(v.onto(axis))
        tail.append(p.sub(perp.scale(2.0)))
    return Polygon.owned([p0, p1, *tail])


@debug_log_call(logger)
def reorient(
    polygon: Polygon,
    *,
    anchor: Optional[Point] = None,
    axis: Vect = X_AXIS,
) -> Polygon:
    """Move ``polygon`` into the frame fixed by its first edge.

    ``p0`` lands on ``anchor`` (the origin by default) and ``p0 -> p1`` points
    along ``axis``. Angles and edge lengths are kept, so congruent polygons
    with the same labeling reorient to the same coordinates.
    """

    origin = Point.origin()
    if anchor is None:
        anchor = origin

    pts = polygon.points()
    p0 = pts.expect(3)
    p1 = pts.expect(3)
    p2 = pts.expect(3)

    t1 = Matrix.translate(origin.sub(p0))
    r = Matrix.rotate_scale(axis.unit().mul(p1.sub(p0).conjugate().unit()))
    t0 = Matrix.translate(anchor.sub(origin))
    t = t0 * r * t1

    return Polygon.owned(t.apply(p) for p in (p0, p1, p2, *pts))


def variants(polygon: Polygon) -> List[Polygon]:
    """Reoriented forms of every relabeling and flip of ``polygon``.

    For each starting vertex the polygon itself, its :func:`flip_rotate` and
    its :func:`flip_reflect` are reoriented, in that order.
    """

    result: List[Polygon] = []
    for shift in range(len(polygon)):
        aligned = polygon.align(shift)
        result.append(reorient(aligned))
        result.append(reorient(flip_rotate(aligned)))
        result.append(reorient(flip_reflect(aligned)))
    logger.debug("variants: %d from %d vertices", len(result), len(polygon))
    return result


def _key_for(polygon: Polygon, digits: int) -> Tuple[float, ...]:
    return tuple(round(c, digits) + 0.0 for p in reorient(polygon).points() for c in (p.x, p.y))


@debug_log_call(logger)
def canonical_key(polygon: Polygon, digits: Optional[int] = None) -> Tuple[float, ...]:
    """Hashable key equal for congruent polygons, whatever their starting vertex.

    Raises :class:`InsufficientVertices` for fewer than 3 vertices.
    """

    if digits is None:
        digits = get_canonical_config().key_digits
    keys = [_key_for(polygon.align(shift), digits) for shift in range(max(len(polygon), 1))]
    return min(keys)


@debug_log_call(logger)
def congruent(a: Polygon, b: Polygon, abs_tol: Optional[float] = None) -> bool:
    """Return ``True`` when some relabeling of ``b`` matches ``a`` up to placement."""

    if len(a) != len(b):
        return False
    if abs_tol is None:
        abs_tol = get_canonical_config().abs_tol
    target = reorient(a)
    for shift in range(len(b)):
        if reorient(b.align(shift)).isclose(target, abs_tol=abs_tol):
            return True
    return False


__all__ = [
    "flip_rotate",
    "flip_reflect",
    "reorient",
    "variants",
    "canonical_key",
    "congruent",
]
