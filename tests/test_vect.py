import math

import pytest

from polyframe import UndefinedNormalization, Vect


@pytest.mark.parametrize(
    "v",
    [Vect(3.0, 4.0), Vect(-2.0, 0.5), Vect(1e-6, -3e-6), Vect(0.0, -7.0)],
)
def test_unit_has_length_one_and_keeps_direction(v):
    u = v.unit()

    assert u.norm() == pytest.approx(1.0)
    assert v.cross(u) == pytest.approx(0.0, abs=1e-12)
    assert v.dot(u) > 0.0


def test_unit_of_zero_vector_raises():
    with pytest.raises(UndefinedNormalization):
        Vect(0.0, 0.0).unit()


def test_is_zero_is_exact():
    assert Vect(0.0, 0.0).is_zero()
    assert Vect(-0.0, 0.0).is_zero()
    assert not Vect(0.0, 1e-300).is_zero()


def test_dot_and_norm():
    assert Vect(1.0, 2.0).dot(Vect(3.0, -4.0)) == -5.0
    assert Vect(3.0, 4.0).norm() == 5.0


def test_onto_parallel_vector_is_identity():
    b = Vect(1.0, 2.0)
    a = b.scale(-2.5)

    projected = a.onto(b)

    assert projected.isclose(a)


def test_onto_perpendicular_vector_vanishes():
    projected = Vect(2.0, 0.0).onto(Vect(0.0, 3.0))

    assert projected.isclose(Vect(0.0, 0.0))


def test_onto_does_not_depend_on_target_length():
    a = Vect(2.0, 5.0)

    short = a.onto(Vect(1.0, 1.0))
    long = a.onto(Vect(10.0, 10.0))

    assert short.isclose(long)
    assert short.isclose(Vect(3.5, 3.5))


def test_onto_zero_vector_raises():
    with pytest.raises(UndefinedNormalization):
        Vect(1.0, 1.0).onto(Vect(0.0, 0.0))


def test_complex_product():
    assert Vect(1.0, 2.0).mul(Vect(3.0, 4.0)) == Vect(-5.0, 10.0)
    assert Vect(0.0, 1.0) * Vect(0.0, 1.0) == Vect(-1.0, 0.0)


def test_product_with_conjugate_undoes_rotation():
    angle = math.radians(37.0)
    q = Vect(math.cos(angle), math.sin(angle))
    v = Vect(2.0, -1.0)

    assert v.mul(q).mul(q.conjugate()).isclose(v)


def test_componentwise_operators():
    v = Vect(1.0, -1.0)
    w = Vect(0.5, 2.0)

    assert -v == Vect(-1.0, 1.0)
    assert v + w == Vect(1.5, 1.0)
    assert v - w == Vect(0.5, -3.0)
    assert 2 * v == Vect(2.0, -2.0)
    assert v * 2 == Vect(2.0, -2.0)
    assert v / 2 == Vect(0.5, -0.5)
    assert v.add(w) == v + w
    assert v.sub(w) == v - w
    assert v.neg() == -v
    assert v.divide(4.0) == Vect(0.25, -0.25)


def test_vect_is_immutable():
    v = Vect(1, 2)

    assert isinstance(v.x, float)
    with pytest.raises(AttributeError):
        v.x = 3.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "v, expected",
    [
        (Vect(1e-200, 0.0), Vect(1.0, 0.0)),
        (Vect(0.0, -3e-190), Vect(0.0, -1.0)),
        (Vect(1e200, 1e200), Vect(math.sqrt(0.5), math.sqrt(0.5))),
        (Vect(-3e250, 4e250), Vect(-0.6, 0.8)),
    ],
)
def test_unit_survives_extreme_magnitudes(v, expected):
    u = v.unit()

    assert u.isclose(expected)
    assert u.norm() == pytest.approx(1.0)


def test_norm_of_extreme_vectors_is_finite_and_nonzero():
    assert Vect(3e-200, 4e-200).norm() == pytest.approx(5e-200)
    assert Vect(3e200, 4e200).norm() == pytest.approx(5e200)


def test_onto_tiny_axis():
    projected = Vect(2.0, 5.0).onto(Vect(1e-170, 0.0))

    assert projected.isclose(Vect(2.0, 0.0))
