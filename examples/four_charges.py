from charge_sim import ChargeSystem
from charge_sim.core import net_force, potential_energy

system = ChargeSystem(4)
system.set_charge(0, 0.0, -1.0, 0.0, 2e-6)   # 2 uC at (0, -1, 0) meters
system.set_charge(1, 0.0, 2.0, 0.0, -2e-6)   # -2 uC at (0, 2, 0) meters
system.set_charge(2, 1.0, -1.0, 0.0, 1e-6)   # 1 uC at (1, -1, 0) meters
system.set_charge(3, 1.0, 1.0, 0.0, -1e-6)   # -1 uC at (1, 1, 0) meters

for line in system.report():
    print(line)

for i, f in system.forces_report():
    print(f"Force on Charge {i}: ({f.x}, {f.y}, {f.z})")

print("net force", net_force(system))
print("potential energy", potential_energy(system), "J")

if system.render("charge_distribution.png"):
    print("PNG file created in the current folder")
