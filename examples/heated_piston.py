import numpy as np
import cantera as ct
from pywall import (
    Wall, PistonWall, WallConfig, SolutionReactor, Reservoir, Sin, setup_logging
)
from pywall.utils.visualization import WallVisualizer

setup_logging()

# Hot, high-pressure gas on the left; ambient air on the right
gas = ct.Solution('gri30.yaml')
gas.TPX = 1500.0, 5 * ct.one_atm, 'CH4:0.1, O2:0.2, N2:0.7'
cylinder = SolutionReactor(gas, volume=5e-4)
ambient = Reservoir(pressure=ct.one_atm, temperature=300.0)

# Flexible, conducting and radiating wall
config = WallConfig(
    name='liner',
    area=0.01,                # m^2
    heat_transfer_coeff=50.0, # W/m^2/K
    emissivity=0.8,
    expansion_rate_coeff=1e-9 # m/s/Pa
)
liner = Wall(config)
liner.install(cylinder, ambient)

# Piston driven by a prescribed motion profile
piston = PistonWall(WallConfig(name='piston', area=0.005,
                               velocity=Sin(omega=2 * np.pi * 50.0, amplitude=2.0)))
piston.install(cylinder, ambient)

times = np.linspace(0.0, 0.04, 201)
for wall in (liner, piston):
    viz = WallVisualizer(wall)
    viz.evaluate(times)
    print(f"{wall.name}: vdot(0) = {wall.vdot(0.0):.4e} m^3/s, Q(0) = {wall.Q(0.0):.4e} W")
    viz.plot_history()

import matplotlib.pyplot as plt
plt.show()
