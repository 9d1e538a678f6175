# MIT License (see LICENSE)
"""
charge_sim - Electrostatics of static point charges in 3D.

This package models a fixed set of point charges and computes Coulomb
interactions between them: the electric field at any point and the net
force on each charge. An optional renderer draws the configuration.

Main entry points:
    - ChargeSystem: Fixed-capacity registry of charges with field/force queries.
    - Charge: Immutable point charge (position + value).
    - Vector3D: Immutable 3D vector.

Submodules:
    - core: Pairwise Coulomb contributions and system invariants.
    - io: JSON serialization/deserialization.
    - renderer: Optional visualization adapters.

Example:
    from charge_sim import ChargeSystem

    system = ChargeSystem(2)
    system.set_charge(0, 0.0, -1.0, 0.0, 2e-6)
    system.set_charge(1, 0.0, 1.0, 0.0, -2e-6)
    print(system.force_on(0))
"""
from .system import ChargeSystem
from .types import Charge, Vector3D
from .constants import K_COULOMB
from .errors import ChargeSystemError, DegenerateGeometryError, IncompleteSystemError

__all__ = [
    # Model
    "ChargeSystem",
    "Charge",
    "Vector3D",
    # Constants
    "K_COULOMB",
    # Errors
    "ChargeSystemError",
    "DegenerateGeometryError",
    "IncompleteSystemError",
]
