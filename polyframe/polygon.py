"""Circular views over polygon vertex sequences."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .config import get_canonical_config
from .errors import InsufficientVertices
from .point import Point


class PointIter:
    """Single pass over a polygon's vertices in logical order.

    Walks the storage tail (``orientation`` to the end) and then the head
    (start to ``orientation``), yielding each vertex exactly once. Once
    exhausted it stays exhausted; draw a fresh one from
    :meth:`Polygon.points` to traverse again.
    """

    __slots__ = ("_storage", "_orientation", "_taken")

    def __init__(self, storage: Sequence[Point], orientation: int) -> None:
        self._storage = storage
        self._orientation = orientation
        self._taken = 0

    def __iter__(self) -> PointIter:
        return self

    def __next__(self) -> Point:
        size = len(self._storage)
        if self._taken >= size:
            raise StopIteration
        index = (self._orientation + self._taken) % size
        self._taken += 1
        return self._storage[index]

    def __len__(self) -> int:
        return len(self._storage) - self._taken

    def expect(self, required: int) -> Point:
        """Return the next vertex of an operation needing ``required`` of them."""

        try:
            return next(self)
        except StopIteration:
            raise InsufficientVertices(required, len(self._storage)) from None


class Polygon:
    """Ordered, circularly indexed vertices with a movable starting vertex.

    The storage is either borrowed (the caller's sequence, kept by reference)
    or owned (a tuple built by this package). :meth:`align` shares storage
    with the original, so re-labeling never copies coordinates.
    Borrowed storage that shrinks later is read modulo its current length.
    """

    __slots__ = ("_storage", "_orientation", "_owned")

    def __init__(self, points: Sequence[Point], orientation: int = 0, *, _owned: bool = False) -> None:
        size = len(points)
        if size == 0 and orientation != 0:
            raise ValueError("empty polygon must have orientation 0")
        if size and not 0 <= orientation < size:
            raise ValueError(f"orientation {orientation} out of range for {size} vertices")
        self._storage = points
        self._orientation = orientation
        self._owned = _owned

    @classmethod
    def owned(cls, points: Iterable[Point], orientation: int = 0) -> Polygon:
        return cls(tuple(points), orientation, _owned=True)

    @classmethod
    def from_array(cls, xy: np.ndarray) -> Polygon:
        arr = np.asarray(xy, dtype=float).reshape(-1, 2)
        return cls.owned(Point(float(x), float(y)) for x, y in arr)

    @property
    def orientation(self) -> int:
        return self._orientation

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def storage(self) -> Sequence[Point]:
        return self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def align(self, delta: int) -> Polygon:
        size = len(self._storage)
        if size == 0:
            return Polygon(self._storage, 0, _owned=self._owned)
        return Polygon(self._storage, (self._orientation + delta) % size, _owned=self._owned)

    def points(self) -> PointIter:
        return PointIter(self._storage, self._orientation)

    def vertices(self) -> Tuple[Point, ...]:
        return tuple(self.points())

    def to_array(self) -> np.ndarray:
        return np.array([(p.x, p.y) for p in self.points()], dtype=float).reshape(-1, 2)

    def signed_area(self) -> float:
        """Shoelace area; positive when the vertices wind counter-clockwise."""

        verts = self.vertices()
        if len(verts) < 3:
            return 0.0
        origin = verts[0]
        area = 0.0
        for a, b in zip(verts[1:], verts[2:]):
            area += (a - origin).cross(b - origin)
        return 0.5 * area

    def isclose(self, other: Polygon, *, abs_tol: Optional[float] = None) -> bool:
        if abs_tol is None:
            abs_tol = get_canonical_config().abs_tol
        if len(self) != len(other):
            return False
        return all(a.isclose(b, abs_tol=abs_tol) for a, b in zip(self.points(), other.points()))

    def flip_rotate(self) -> Polygon:
        from .canonical import flip_rotate  # Local import to avoid circular dependency.

        return flip_rotate(self)

    def flip_reflect(self) -> Polygon:
        from .canonical import flip_reflect

        return flip_reflect(self)

    def reorient(self, **kwargs) -> Polygon:
        from .canonical import reorient

        return reorient(self, **kwargs)

    def __iter__(self) -> Iterator[Point]:
        return self.points()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.vertices() == other.vertices()

    def __repr__(self) -> str:
        coords = ", ".join(f"({p.x:g}, {p.y:g})" for p in self.points())
        return f"Polygon([{coords}], orientation={self._orientation})"


__all__ = ["Polygon", "PointIter"]
