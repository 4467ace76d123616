"""Free 2D displacements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .errors import UndefinedNormalization


@dataclass(frozen=True)
class Vect:
    """Direction and magnitude, not tied to a location."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def dot(self, other: Vect) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vect) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def unit(self) -> Vect:
        """Return the unit vector pointing along ``self``.

        The zero vector has no direction, so it raises
        :class:`UndefinedNormalization` instead of picking one.
        """

        if self.is_zero():
            raise UndefinedNormalization("unit undefined for the zero vector")
        return self.divide(self.norm())

    def onto(self, other: Vect) -> Vect:
        """Orthogonal projection of ``self`` onto the line spanned by ``other``."""

        direction = other.unit()
        return direction.scale(self.dot(direction))

    def neg(self) -> Vect:
        return Vect(-self.x, -self.y)

    def add(self, other: Vect) -> Vect:
        return Vect(self.x + other.x, self.y + other.y)

    def sub(self, other: Vect) -> Vect:
        return Vect(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> Vect:
        return Vect(k * self.x, k * self.y)

    def divide(self, k: float) -> Vect:
        return Vect(self.x / k, self.y / k)

    def mul(self, other: Vect) -> Vect:
        """Complex-style product: rotations add, magnitudes multiply."""

        return Vect(
            self.x * other.x - self.y * other.y,
            self.x * other.y + other.x * self.y,
        )

    def conjugate(self) -> Vect:
        return Vect(self.x, -self.y)

    def isclose(self, other: Vect, *, abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, abs_tol=abs_tol
        )

    def __neg__(self) -> Vect:
        return self.neg()

    def __add__(self, other: object) -> Vect:
        if not isinstance(other, Vect):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vect:
        if not isinstance(other, Vect):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> Vect:
        if isinstance(other, Vect):
            return self.mul(other)
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Vect:
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __truediv__(self, other: object) -> Vect:
        if isinstance(other, Real):
            return self.divide(float(other))
        return NotImplemented

    def __iter__(self):
        yield self.x
        yield self.y


__all__ = ["Vect"]
