"""
carrier phase state module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

from dataclasses import dataclass, field
import numpy as np
import cantera as ct
from flavap.solution.fluid_utils import validate_pressure, validate_temperature


@dataclass
class CarrierPhaseState:
    """gas state at the particle location

    Attributes:
        temperature: gas temperature [K]
        pressure: gas pressure [Pa]
        density: gas density [kg/m³]
        velocity: gas velocity vector [m/s]
        viscosity: dynamic viscosity [Pa·s]
        thermal_conductivity: thermal conductivity [W/m·K]
        cp_mass: specific heat [J/kg·K]
        vapour_mass_fraction: mass fraction of the droplet vapour in the gas
        velocity_gradient: (du/dx, du/dy, dv/dx, dv/dy) [1/s]
    """
    temperature: float
    pressure: float
    density: float
    velocity: np.ndarray
    viscosity: float
    thermal_conductivity: float
    cp_mass: float
    vapour_mass_fraction: float = 0.0
    velocity_gradient: np.ndarray = field(default_factory=lambda: np.zeros(4))

    def __post_init__(self):
        validate_temperature(self.temperature)
        validate_pressure(self.pressure)
        self.velocity = np.asarray(self.velocity, dtype=float)
        self.velocity_gradient = np.asarray(self.velocity_gradient, dtype=float)
        if self.velocity_gradient.shape != (4,):
            raise ValueError(f"velocity gradient must be (du/dx, du/dy, dv/dx, dv/dy), current shape: {self.velocity_gradient.shape}")

    @property
    def prandtl(self) -> float:
        return self.cp_mass * self.viscosity / self.thermal_conductivity

    def slip_velocity(self, particle_velocity: np.ndarray) -> float:
        """magnitude of the gas velocity relative to the particle [m/s]"""
        return float(np.linalg.norm(self.velocity - np.asarray(particle_velocity, dtype=float)))

    def reynolds(self, diameter: float, particle_velocity: np.ndarray) -> float:
        """particle Reynolds number ρ·|u-v|·d/μ"""
        return self.density * self.slip_velocity(particle_velocity) * diameter / self.viscosity

    @classmethod
    def from_cantera(cls, gas: ct.Solution, velocity=(0.0, 0.0, 0.0),
                     velocity_gradient=(0.0, 0.0, 0.0, 0.0), vapour_species: str = None) -> 'CarrierPhaseState':
        """create the carrier state from a cantera Solution with a transport model

        Args:
            gas: cantera Solution at the particle location
            velocity: gas velocity vector [m/s]
            velocity_gradient: (du/dx, du/dy, dv/dx, dv/dy) [1/s]
            vapour_species: name of the droplet vapour in the gas mechanism, None for pure air
        """
        vapour_mass_fraction = 0.0
        if vapour_species is not None:
            vapour_mass_fraction = float(gas.Y[gas.species_index(vapour_species)])
        return cls(
            temperature=gas.T,
            pressure=gas.P,
            density=gas.density_mass,
            velocity=np.asarray(velocity, dtype=float),
            viscosity=gas.viscosity,
            thermal_conductivity=gas.thermal_conductivity,
            cp_mass=gas.cp_mass,
            vapour_mass_fraction=vapour_mass_fraction,
            velocity_gradient=np.asarray(velocity_gradient, dtype=float),
        )


def air(temperature: float, pressure: float = ct.one_atm, mechanism_file: str = 'air.yaml') -> ct.Solution:
    """cantera air with mixture averaged transport at the given state"""
    gas = ct.Solution(mechanism_file)
    gas.TPX = temperature, pressure, {'N2': 0.79, 'O2': 0.21}
    return gas
