# MIT License (see LICENSE)
"""
Core type definitions for the electrostatics model.

Defines the fundamental value types:
- Vector3D: immutable 3D vector with the arithmetic the field sums need.
- Charge: an immutable point charge (position + signed value).

Both are frozen dataclasses. Every operation returns a new value and never
mutates its operands.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np

from .errors import DegenerateGeometryError
from .util import f64


# =============================================================================
# Vector3D
# =============================================================================

@dataclass(frozen=True)
class Vector3D:
    """
    Immutable 3D vector.

    Attributes:
        x, y, z: Cartesian components.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector3D":
        """The zero vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, arr) -> "Vector3D":
        """Build a vector from any array-like of length 3."""
        a = f64(arr)
        if a.shape != (3,):
            raise ValueError(f"Expected shape (3,), got {a.shape}")
        return cls(float(a[0]), float(a[1]), float(a[2]))

    def to_array(self) -> np.ndarray:
        """Components as a float64 array of shape (3,)."""
        return f64((self.x, self.y, self.z))

    def add(self, other: "Vector3D") -> "Vector3D":
        """Componentwise sum."""
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, s: float) -> "Vector3D":
        """Componentwise multiplication by a scalar."""
        return Vector3D(self.x * s, self.y * s, self.z * s)

    def magnitude_squared(self) -> float:
        """x² + y² + z². Avoids sqrt when only r² is needed."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Length of the vector. hypot avoids underflow of the squared terms."""
        return math.hypot(self.x, self.y, self.z)

    def normalize(self) -> "Vector3D":
        """
        Unit vector in the same direction.

        Raises:
            DegenerateGeometryError: If the vector has zero magnitude.
        """
        m = self.magnitude()
        if m == 0.0:
            raise DegenerateGeometryError("Cannot normalize a zero-length vector")
        return Vector3D(self.x / m, self.y / m, self.z / m)

    def __add__(self, other: "Vector3D") -> "Vector3D":
        return self.add(other)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3D":
        return self.scale(-1.0)

    def __mul__(self, s: float) -> "Vector3D":
        return self.scale(s)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


# =============================================================================
# Charge
# =============================================================================

@dataclass(frozen=True)
class Charge:
    """
    A point charge at a fixed position.

    Attributes:
        x, y, z: Position in meters.
        value: Signed charge in Coulombs. Zero is allowed.
    """
    x: float
    y: float
    z: float
    value: float

    @property
    def position(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def separation_from(self, point: Vector3D) -> Vector3D:
        """Vector pointing from this charge to `point` (point - position)."""
        return Vector3D(point.x - self.x, point.y - self.y, point.z - self.z)
