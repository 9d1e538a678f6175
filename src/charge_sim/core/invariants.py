# MIT License (see LICENSE)
"""
Utilities for calculating whole-system quantities.

Used for verifying the force and field sums. For an isolated set of charges
the pairwise forces cancel in total (Newton's third law), so net_force()
should be zero within floating point error.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from ..constants import NO_EXCLUDE
from ..errors import DegenerateGeometryError
from ..types import Vector3D
from ..util import as_xyz

if TYPE_CHECKING:
    from ..system import ChargeSystem


def net_force(system: "ChargeSystem") -> Vector3D:
    """
    Sum of the forces on every charge.

    F_net = Σ_i F_i

    Args:
        system: A fully populated charge system.

    Returns:
        Net force vector in Newtons (≈ 0 for any configuration).
    """
    total = Vector3D.zero()
    for _, f in system.forces_report():
        total = total.add(f)
    return total


def potential_at(system: "ChargeSystem", point, exclude_index: int = NO_EXCLUDE) -> float:
    """
    Electrostatic potential at a point.

    V = Σ k * q_i / |r_i|

    Raises:
        DegenerateGeometryError: If `point` coincides with a contributing charge.
    """
    p = Vector3D(*as_xyz(point))
    v = 0.0
    for i, c in system.populated():
        if i == exclude_index:
            continue
        r = c.separation_from(p).magnitude()
        if r == 0.0:
            raise DegenerateGeometryError(f"Point {p} coincides with charge {i}")
        v += system.k * c.value / r
    return v


def potential_energy(system: "ChargeSystem") -> float:
    """
    Total electrostatic potential energy of the configuration.

    U = Σ_{i<j} k * q_i * q_j / |r_ij|

    Returns:
        Energy in Joules. Negative when attraction dominates.
    """
    pts = system.positions()
    q = system.values()
    u = 0.0
    for i in range(len(q) - 1):
        # Distances from charge i to every later charge
        d = np.linalg.norm(pts[i + 1:] - pts[i], axis=1)
        if np.any(d == 0.0):
            raise DegenerateGeometryError(f"Charge {i} shares a position with a later charge")
        u += float(system.k * q[i] * np.sum(q[i + 1:] / d))
    return u
