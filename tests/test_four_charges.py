import math

import numpy as np
import pytest
from charge_sim.__main__ import four_charge_demo
from charge_sim.core.invariants import net_force, potential_at, potential_energy
from charge_sim.errors import DegenerateGeometryError

K = 8.9875e9


def test_four_charge_total_is_zero():
    system = four_charge_demo()
    assert system.total_charge() == 0.0


def test_four_charge_force_on_first():
    """
    Charge 0: +2 uC at (0,-1,0). Contributions, r = pos0 - pos_j:
      j=1 (-2 uC at (0,2,0)):  r = (0,-3,0), |r|²=9  -> (0, +4e-12 K/9, 0)
      j=2 (+1 uC at (1,-1,0)): r = (-1,0,0), |r|²=1  -> (-2e-12 K, 0, 0)
      j=3 (-1 uC at (1,1,0)):  r = (-1,-2,0), |r|²=5 -> -2e-12 K/5 * (-1,-2,0)/√5
    """
    s5 = 5.0 * math.sqrt(5.0)
    fx = K * 2e-12 * (-1.0 + 1.0 / s5)
    fy = K * 4e-12 * (1.0 / 9.0 + 1.0 / s5)

    f = four_charge_demo().force_on(0)
    print("force on 0", f, "exp", (fx, fy, 0.0))

    assert f.x == pytest.approx(fx, rel=1e-12)
    assert f.y == pytest.approx(fy, rel=1e-12)
    assert f.z == 0.0


def test_forces_report_matches_force_on():
    system = four_charge_demo()
    report = system.forces_report()
    assert [i for i, _ in report] == [0, 1, 2, 3]
    for i, f in report:
        assert f == system.force_on(i)


def test_net_force_vanishes():
    """Pairwise forces cancel: Σ F_i = 0."""
    system = four_charge_demo()
    scale = max(f.magnitude() for _, f in system.forces_report())
    total = net_force(system)
    assert total.magnitude() <= 1e-12 * scale


def test_potential_energy_pair_sum():
    system = four_charge_demo()
    # U = Σ_{i<j} K q_i q_j / r_ij
    pts = system.positions()
    q = system.values()
    u_exp = 0.0
    for i in range(4):
        for j in range(i + 1, 4):
            u_exp += K * q[i] * q[j] / np.linalg.norm(pts[i] - pts[j])
    assert potential_energy(system) == pytest.approx(u_exp, rel=1e-12)


def test_potential_at_point():
    system = four_charge_demo()
    # On the far side, the potential of a neutral system tends to zero
    far = potential_at(system, (1e6, 1e6, 1e6))
    near = potential_at(system, (0.5, 0.0, 0.0))
    assert abs(far) < abs(near)

    # Excluding a charge at its own position avoids the singularity
    potential_at(system, (0.0, -1.0, 0.0), exclude_index=0)
    with pytest.raises(DegenerateGeometryError):
        potential_at(system, (0.0, -1.0, 0.0))


def test_potential_energy_skips_empty_slots_and_rejects_overlap():
    from charge_sim.system import ChargeSystem

    system = ChargeSystem(3, k=1.0)
    system.set_charge(0, 0.0, 0.0, 0.0, 2.0)
    system.set_charge(2, 0.0, 4.0, 0.0, -3.0)
    # U = k q0 q2 / 4
    assert potential_energy(system) == pytest.approx(-1.5)
    assert potential_energy(ChargeSystem(0)) == 0.0

    system.set_charge(1, 0.0, 4.0, 0.0, 1.0)
    with pytest.raises(DegenerateGeometryError):
        potential_energy(system)
