import math

import numpy as np
import pytest
from charge_sim.types import Vector3D, Charge
from charge_sim.errors import DegenerateGeometryError


def test_vector_arithmetic_returns_new_values():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-4.0, 0.5, 2.0)

    s = a.add(b)
    assert s == Vector3D(-3.0, 2.5, 5.0)
    assert a.scale(2.0) == Vector3D(2.0, 4.0, 6.0)
    assert a - b == Vector3D(5.0, 1.5, 1.0)
    assert -a == Vector3D(-1.0, -2.0, -3.0)
    assert 0.5 * a == a * 0.5 == Vector3D(0.5, 1.0, 1.5)

    # Operands untouched
    assert a == Vector3D(1.0, 2.0, 3.0)
    assert b == Vector3D(-4.0, 0.5, 2.0)


def test_vector_is_frozen():
    v = Vector3D(1.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        v.x = 2.0


def test_magnitude_and_normalize():
    v = Vector3D(3.0, 4.0, 12.0)
    assert v.magnitude_squared() == 169.0
    assert v.magnitude() == pytest.approx(13.0)

    u = v.normalize()
    assert u.magnitude() == pytest.approx(1.0)
    assert u.x == pytest.approx(3.0 / 13.0)
    assert u.z == pytest.approx(12.0 / 13.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(DegenerateGeometryError):
        Vector3D.zero().normalize()
    # Also catchable as the arithmetic error it stands in for
    with pytest.raises(ZeroDivisionError):
        Vector3D(0.0, 0.0, 0.0).normalize()


def test_array_conversion():
    v = Vector3D(1.5, -2.0, 0.25)
    arr = v.to_array()
    assert arr.dtype == np.float64
    assert np.allclose(arr, [1.5, -2.0, 0.25])
    assert Vector3D.from_array(arr) == v
    assert tuple(v) == (1.5, -2.0, 0.25)

    with pytest.raises(ValueError):
        Vector3D.from_array([1.0, 2.0])


def test_charge_record():
    c = Charge(1.0, -1.0, 0.0, 1e-6)
    assert c.position == Vector3D(1.0, -1.0, 0.0)

    r = c.separation_from(Vector3D(4.0, 3.0, 0.0))
    assert r == Vector3D(3.0, 4.0, 0.0)
    assert math.isclose(r.magnitude(), 5.0)

    with pytest.raises(AttributeError):
        c.value = 2e-6


def test_tiny_vector_still_normalizes():
    """Squares of 1e-200 underflow to zero; the length must not."""
    v = Vector3D(-1e-200, 0.0, 0.0)
    assert v.magnitude_squared() == 0.0
    assert v.magnitude() == pytest.approx(1e-200)
    assert v.normalize() == Vector3D(-1.0, 0.0, 0.0)
