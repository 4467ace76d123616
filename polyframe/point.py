"""Located positions in the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union, overload

from .vect import Vect


@dataclass(frozen=True)
class Point:
    """A location; combine points only through :class:`Vect` displacements."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @staticmethod
    def origin() -> Point:
        return Point()

    def displacement(self) -> Vect:
        return Vect(self.x, self.y)

    def add(self, v: Vect) -> Point:
        if not isinstance(v, Vect):
            raise TypeError(f"can only translate a Point by a Vect, not {type(v).__name__}")
        return Point(self.x + v.x, self.y + v.y)

    @overload
    def sub(self, other: Point) -> Vect: ...

    @overload
    def sub(self, other: Vect) -> Point: ...

    def sub(self, other: Union[Point, Vect]) -> Union[Point, Vect]:
        """``point - point`` is a displacement, ``point - vect`` a location."""

        if isinstance(other, Point):
            return Vect(self.x - other.x, self.y - other.y)
        if isinstance(other, Vect):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError(f"cannot subtract {type(other).__name__} from Point")

    def isclose(self, other: Point, *, abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, abs_tol=abs_tol
        )

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Vect):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object):
        if not isinstance(other, (Point, Vect)):
            return NotImplemented
        return self.sub(other)

    def __iter__(self):
        yield self.x
        yield self.y


__all__ = ["Point"]
