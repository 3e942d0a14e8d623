"""
particle state module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the per particle data carried between time steps:
1. RadialTemperatureProfile: temperature samples on the normalized radius
2. JacobianState: FLA deformation gradient, its rate and number density
3. EvaporationDiagnostics: heat and mass transfer numbers of the last step
4. ParticleStorage: the three blocks above, owned by one particle
5. ParticleState: droplet kinematic and physical quantities
"""

from dataclasses import dataclass, field
from typing import Optional
import numpy as np
from .runtime import DPM_DT

N_EQ: int = 8  # number of FLA equations
N_COMPONENTS: int = 1  # supported droplet component count


@dataclass
class RadialTemperatureProfile:
    """radial temperature distribution inside the droplet

    Attributes:
        temperature: samples at r_j = j/cell_count [K], the last one is the surface
    """
    temperature: np.ndarray

    @classmethod
    def create(cls, cell_count: int, temperature: float) -> 'RadialTemperatureProfile':
        """create a uniform profile"""
        return cls(temperature=np.full(cell_count + 1, float(temperature)))

    @property
    def cell_count(self) -> int:
        return self.temperature.size - 1

    @property
    def surface_temperature(self) -> float:
        return float(self.temperature[-1])

    @property
    def centre_temperature(self) -> float:
        return float(self.temperature[0])

    def replace(self, temperature: np.ndarray) -> None:
        """replace all samples with a new profile of the same size"""
        temperature = np.asarray(temperature, dtype=float)
        if temperature.shape != self.temperature.shape:
            raise ValueError(f"profile size mismatch: expected {self.temperature.shape}, actual {temperature.shape}")
        self.temperature = temperature.copy()


@dataclass
class JacobianState:
    """Fully Lagrangian Approach state of one particle

    Attributes:
        J11, J12, J21, J22: Jacobian of the map from the initial to the current position
        W11, W12, W21, W22: time derivative of the Jacobian
        J_DET: Jacobian determinant of the last step
        N_P: number density, 1/|J_DET|
        N_J_SIGN: number of sign changes of J_DET
        BETA: inverse relaxation time [1/s]
        R_0: initial radial position for axisymmetric flows [m]
    """
    J11: float = 1.0
    J12: float = 0.0
    J21: float = 0.0
    J22: float = 1.0
    W11: float = 0.0
    W12: float = 0.0
    W21: float = 0.0
    W22: float = 0.0
    J_DET: float = 1.0
    N_P: float = 1.0
    N_J_SIGN: int = 0
    BETA: float = 0.0
    R_0: float = 0.0

    def as_vector(self) -> np.ndarray:
        """[J11, J12, J21, J22, W11, W12, W21, W22]"""
        return np.array([self.J11, self.J12, self.J21, self.J22,
                         self.W11, self.W12, self.W21, self.W22])

    def set_vector(self, y: np.ndarray) -> None:
        if len(y) != N_EQ:
            raise ValueError(f"FLA state vector must have {N_EQ} components, current size: {len(y)}")
        (self.J11, self.J12, self.J21, self.J22,
         self.W11, self.W12, self.W21, self.W22) = (float(v) for v in y)

    def determinant(self) -> float:
        return self.J11 * self.J22 - self.J12 * self.J21


@dataclass
class EvaporationDiagnostics:
    """heat and mass transfer quantities of the last step

    Attributes:
        surface_mole_fraction: vapour mole fraction at the surface
        surface_mass_fraction: vapour mass fraction at the surface
        total_surface_mass_fraction: total vapour mass fraction at the surface
        total_vaporization_rate: total evaporation rate [kg/s]
        vaporization_rate: species evaporation rate [kg/s]
        B_M: Spalding mass transfer number
        B_T: Spalding heat transfer number
        latent_heat: effective latent heat [J/kg]
        Nu: Nusselt number
        Nu_star: film corrected Nusselt number
        Sh: Sherwood number
        Sh_star: film corrected Sherwood number
        coef: cp_v·ρ·D/k·Sh*
        Pe: liquid Peclet number
        effective_conductivity: liquid effective thermal conductivity [W/m·K]
        diffusivity: vapour binary diffusivity [m²/s]
        gas_conductivity: gas thermal conductivity [W/m·K]
        heat_transfer_coefficient: Nu·k/d [W/m²·K]
        dh_dt: convective heat rate to the droplet [W]
        dm_dt: droplet mass loss rate [kg/s]
        dh_dt_scaled: dh_dt multiplied by the number density
        dm_dt_scaled: dm_dt multiplied by the number density
        average_temperature: volume averaged droplet temperature [K], input of the next step
    """
    surface_mole_fraction: float = 0.0
    surface_mass_fraction: float = 0.0
    total_surface_mass_fraction: float = 0.0
    total_vaporization_rate: float = 0.0
    vaporization_rate: float = 0.0
    B_M: float = 0.0
    B_T: float = 0.0
    latent_heat: float = 0.0
    Nu: float = 2.0
    Nu_star: float = 2.0
    Sh: float = 0.0
    Sh_star: float = 2.0
    coef: float = 0.0
    Pe: float = 0.0
    effective_conductivity: float = 0.0
    diffusivity: float = 0.0
    gas_conductivity: float = 0.0
    heat_transfer_coefficient: float = 0.0
    dh_dt: float = 0.0
    dm_dt: float = 0.0
    dh_dt_scaled: float = 0.0
    dm_dt_scaled: float = 0.0
    average_temperature: float = 0.0


@dataclass
class ParticleStorage:
    """persistent per particle storage of the evaporation and FLA calculations"""
    profile: RadialTemperatureProfile
    jacobian: JacobianState = field(default_factory=JacobianState)
    diagnostics: EvaporationDiagnostics = field(default_factory=EvaporationDiagnostics)

    @classmethod
    def create(cls, cell_count: int, temperature: float, latent_heat: float) -> 'ParticleStorage':
        storage = cls(profile=RadialTemperatureProfile.create(cell_count, temperature))
        storage.initialize(temperature, latent_heat)
        return storage

    def initialize(self, temperature: float, latent_heat: float) -> None:
        """injection state: uniform temperature, Nu = 2, no blowing, identity Jacobian

        Args:
            temperature: droplet temperature at injection [K]
            latent_heat: latent heat at the injection temperature [J/kg]
        """
        self.profile = RadialTemperatureProfile.create(self.profile.cell_count, temperature)
        self.diagnostics = EvaporationDiagnostics(latent_heat=latent_heat,
                                                  average_temperature=float(temperature))
        self.jacobian = JacobianState()


@dataclass
class ParticleState:
    """droplet kinematic and physical quantities

    Attributes:
        diameter: droplet diameter [m]
        mass: droplet mass [kg]
        density: liquid density [kg/m³]
        velocity: droplet velocity vector [m/s]
        temperature: droplet (volume averaged) temperature [K]
        reynolds: particle Reynolds number based on the slip velocity
        time_step: particle integration time step [s]
        component_count: number of liquid components
        storage: persistent storage of the evaporation and FLA calculations
    """
    diameter: float
    mass: float
    density: float
    velocity: np.ndarray
    temperature: float
    reynolds: float = 0.0
    time_step: float = DPM_DT
    component_count: int = N_COMPONENTS
    storage: Optional[ParticleStorage] = None

    @classmethod
    def create(cls, diameter: float, density: float, temperature: float, velocity=(0.0, 0.0, 0.0),
               reynolds: float = 0.0, time_step: float = DPM_DT) -> 'ParticleState':
        """create a spherical droplet, the mass follows from the diameter and the density"""
        mass = density * np.pi * diameter**3 / 6.0
        return cls(diameter=diameter, mass=mass, density=density,
                   velocity=np.asarray(velocity, dtype=float), temperature=temperature,
                   reynolds=reynolds, time_step=time_step)

    @property
    def area(self) -> float:
        """surface area π·d² [m²]"""
        return np.pi * self.diameter**2

    @staticmethod
    def diameter_from_mass(mass: float, density: float) -> float:
        """diameter of a sphere of the given mass and density"""
        return (6.0 * mass / (np.pi * density))**(1.0 / 3.0)
