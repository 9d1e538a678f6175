# MIT License (see LICENSE)
"""
Core electrostatics components.

This subpackage provides:
    - Pairwise Coulomb contributions: field of one charge, force between two.
    - Invariants: net force, potential and potential energy of a system.

Typical usage:
    from charge_sim.core import force_between, potential_energy

    f = force_between(a, b)
    u = potential_energy(system)
"""
from .coulomb import field_from, force_between
from .invariants import net_force, potential_at, potential_energy

__all__ = [
    # Pairwise
    "field_from",
    "force_between",
    # Invariants
    "net_force",
    "potential_at",
    "potential_energy",
]
