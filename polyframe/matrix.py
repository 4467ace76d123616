"""Similarity transforms of the plane.

A :class:`Matrix` stands for the homogeneous matrix::

    [ v11 v12 v13 ]
    [ v21 v22 v23 ]
    [  0   0   1  ]

restricted to rotation, uniform scale and translation. The linear block is
always generated by one vector ``(a, b)`` as ``v11 = v22 = a`` and
``v21 = -v12 = b``, so it is stored as that vector (``linear``) together with
the translation column (``shift``). Shear and non-uniform scale cannot be
expressed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union, overload

import numpy as np

from .errors import UndefinedNormalization
from .point import Point
from .vect import Vect


@dataclass(frozen=True)
class Matrix:
    linear: Vect = Vect(1.0, 0.0)
    shift: Vect = Vect(0.0, 0.0)

    @staticmethod
    def identity() -> Matrix:
        return Matrix()

    @staticmethod
    def translate(v: Vect) -> Matrix:
        return Matrix(shift=v)

    @staticmethod
    def rotate_scale(v: Vect) -> Matrix:
        """Linear map sending ``(1, 0)`` to ``v``.

        A unit ``v`` gives a pure rotation; other lengths scale uniformly.
        """

        if v.is_zero():
            raise UndefinedNormalization("rotate_scale needs a non-zero direction")
        return Matrix(linear=v)

    @property
    def v11(self) -> float:
        return self.linear.x

    @property
    def v21(self) -> float:
        return self.linear.y

    @property
    def v31(self) -> float:
        return 0.0

    @property
    def v12(self) -> float:
        return -self.linear.y

    @property
    def v22(self) -> float:
        return self.linear.x

    @property
    def v32(self) -> float:
        return 0.0

    @property
    def v13(self) -> float:
        return self.shift.x

    @property
    def v23(self) -> float:
        return self.shift.y

    @property
    def v33(self) -> float:
        return 1.0

    @property
    def coords(self) -> Tuple[float, float, float, float, float, float]:
        return (self.v11, self.v21, self.v12, self.v22, self.v13, self.v23)

    def compose(self, other: Matrix) -> Matrix:
        """Return the transform applying ``other`` first, then ``self``.

        Linear parts multiply as complex numbers. The right operand's
        translation is carried through the left linear part before the
        translations add, so two pure translations simply sum.
        """

        return Matrix(
            linear=self.linear.mul(other.linear),
            shift=self.linear.mul(other.shift).add(self.shift),
        )

    def apply(self, p: Point) -> Point:
        x = self.v11 * p.x + self.v12 * p.y + self.v13
        y = self.v21 * p.x + self.v22 * p.y + self.v23
        return Point(x, y)

    def as_array(self) -> np.ndarray:
        return np.array(
            [
                [self.v11, self.v12, self.v13],
                [self.v21, self.v22, self.v23],
                [self.v31, self.v32, self.v33],
            ],
            dtype=float,
        )

    def apply_array(self, xy: np.ndarray) -> np.ndarray:
        """Apply to an ``(N, 2)`` array of coordinates."""

        arr = np.asarray(xy, dtype=float).reshape(-1, 2)
        block = self.as_array()
        return arr @ block[:2, :2].T + block[:2, 2]

    @overload
    def __mul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __mul__(self, other: Point) -> Point: ...

    def __mul__(self, other: object) -> Union[Matrix, Point]:
        if isinstance(other, Matrix):
            return self.compose(other)
        if isinstance(other, Point):
            return self.apply(other)
        return NotImplemented


__all__ = ["Matrix"]
