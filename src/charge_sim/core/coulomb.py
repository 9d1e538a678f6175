# MIT License (see LICENSE)
"""
Pairwise Coulomb contributions.

The aggregate queries on ChargeSystem are superpositions of the two
primitives here:

- field_from:    E = k * q / |r|² * r̂,           r = point - position
- force_between: F = k * q_t * q_s / |r|² * r̂,   r = target - source

A positive force magnitude along r̂ pushes the target away from the source,
so like charges repel and unlike charges attract through the sign of the
product. Neither function softens the singularity: a zero separation raises
DegenerateGeometryError from Vector3D.normalize.
"""
from __future__ import annotations

from ..constants import K_COULOMB
from ..types import Charge, Vector3D


def field_from(charge: Charge, point: Vector3D, k: float = K_COULOMB) -> Vector3D:
    """
    Electric field of a single charge at a point.

    Args:
        charge: The source charge.
        point: Where the field is evaluated.
        k: Coulomb's constant.

    Raises:
        DegenerateGeometryError: If `point` coincides with the charge.
    """
    r = charge.separation_from(point)
    d = r.magnitude()
    # normalize() raises for d == 0, so the magnitude is never used then.
    # Dividing by d twice keeps tiny separations from underflowing to r² = 0.
    magnitude = (k * charge.value) / d / d if d else 0.0
    return r.normalize().scale(magnitude)


def force_between(target: Charge, source: Charge, k: float = K_COULOMB) -> Vector3D:
    """
    Electrostatic force on `target` due to `source`.

    Antisymmetric: force_between(a, b) == -force_between(b, a).

    Raises:
        DegenerateGeometryError: If both charges share a position.
    """
    r = source.separation_from(target.position)
    d = r.magnitude()
    magnitude = (k * target.value * source.value) / d / d if d else 0.0
    return r.normalize().scale(magnitude)
