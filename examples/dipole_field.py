from charge_sim import ChargeSystem
from charge_sim.renderer import DebugRenderer

# Equal and opposite charges on the y axis; field along the x axis
q = 2e-6
system = ChargeSystem(2)
system.set_charge(0, 0.0, -1.0, 0.0, +q)
system.set_charge(1, 0.0, 1.0, 0.0, -q)

DebugRenderer().render_system(system)

for x in [0.0, 0.5, 1.0, 2.0, 4.0]:
    E = system.electric_field_at((x, 0.0, 0.0))
    print(f"x={x:4.1f}  E=({E.x:.4g}, {E.y:.4g}, {E.z:.4g})  |E|={E.magnitude():.4g} N/C")
