"""
droplet heating, evaporation and FLA simulation module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
Main classes:
- SimulationParameters: simulation setting parameters class
- Simulation: main simulation class, a single particle in a frozen gas state
"""

import numpy as np
import cantera as ct
from typing import Optional, Tuple
from dataclasses import dataclass
from flavap.solution import Fluid, get_fluid
from flavap.core import (Runtime, DataManager, ParticleState, ParticleStorage,
                         CarrierPhaseState, DPM_DT)
from flavap.core.carrier import air
from flavap.solvers import HeatMassTransfer, HeatMassResult, JacobianIntegrator, relaxation_time, scale_sources


@dataclass
class SimulationParameters:
    """simulation setting parameters class

    Attributes:
        case_name: case name
        fluid: droplet fluid ('water'/'dodecane'/'isooctane')
        droplet_diameter: initial droplet diameter [m]
        droplet_temperature: initial droplet temperature [K]
        gas_temperature: gas temperature [K]
        pressure: gas pressure [Pa]
        reynolds: initial particle Reynolds number, sets the slip velocity along x when given
        gas_velocity: gas velocity vector [m/s], used when reynolds is None
        droplet_velocity: droplet velocity vector [m/s]
        velocity_gradient: (du/dx, du/dy, dv/dx, dv/dy) of the gas [1/s]
        time_step: constant particle time step [s]
        end_time: end time [s]
        cell_count: number of radial layers inside the droplet
        n_lambda: number of terms in the temperature series
        conductivity_multiplier: factor on the liquid conductivity (1000 for an infinitely conducting droplet)
        mechanism_file: cantera input file of the gas, must carry a transport model
        droplet_save_interval: droplet data save interval
        profile_save_interval: temperature profile save interval
        result_root: root directory of the results
    """
    case_name: str
    fluid: str = 'dodecane'
    droplet_diameter: float = 20e-6
    droplet_temperature: float = 300.0
    gas_temperature: float = 800.0
    pressure: float = ct.one_atm
    reynolds: Optional[float] = None
    gas_velocity: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    droplet_velocity: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity_gradient: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    time_step: float = DPM_DT
    end_time: float = 1e-2
    cell_count: int = 100
    n_lambda: int = 44
    conductivity_multiplier: float = 1.0
    mechanism_file: str = 'air.yaml'
    droplet_save_interval: int = 10
    profile_save_interval: int = 100
    result_root: str = 'result'


class Simulation:
    """droplet heating and evaporation simulation main class

    Features:
    - initialize the gas state, the droplet and its storage
    - advance the droplet temperature profile and the FLA Jacobian with a constant time step
    - apply the source terms to the droplet mass and diameter
    - accumulate the source terms of the gas
    """
    def __init__(self, params: SimulationParameters):
        """initialize simulation """
        self.params = params
        self.runtime: Optional[Runtime] = None
        self.data_manager: Optional[DataManager] = None
        self.fluid: Optional[Fluid] = None
        self.gas: Optional[ct.Solution] = None
        self.carrier: Optional[CarrierPhaseState] = None
        self.particle: Optional[ParticleState] = None
        self.heat_mass: Optional[HeatMassTransfer] = None
        self.last_result: Optional[HeatMassResult] = None

        # accumulated two-way coupling sources of the gas
        self.gas_energy_source: float = 0.0  # J
        self.gas_vapour_source: float = 0.0  # kg

    def initialize(self):
        """initialize simulation components with the following order:
        1. runtime
        2. fluid property model
        3. gas phase state
        4. droplet and its storage
        5. solver
        6. data manager
        """
        self.runtime = Runtime(time_step=self.params.time_step, end_time=self.params.end_time)
        self.fluid = get_fluid(self.params.fluid)

        # gas phase state, frozen during the simulation
        self.gas = air(self.params.gas_temperature, self.params.pressure, self.params.mechanism_file)
        droplet_velocity = np.asarray(self.params.droplet_velocity, dtype=float)
        if self.params.reynolds is not None:
            slip = (self.params.reynolds * self.gas.viscosity
                    / (self.gas.density_mass * self.params.droplet_diameter))
            gas_velocity = droplet_velocity + np.array([slip, 0.0, 0.0])
        else:
            gas_velocity = np.asarray(self.params.gas_velocity, dtype=float)
        self.carrier = CarrierPhaseState.from_cantera(self.gas, gas_velocity, self.params.velocity_gradient)

        # droplet
        T0 = self.params.droplet_temperature
        self.particle = ParticleState.create(
            diameter=self.params.droplet_diameter,
            density=self.fluid.liquid_density(T0),
            temperature=T0,
            velocity=droplet_velocity,
            time_step=self.runtime.constant_time_step(),
        )
        self.particle.reynolds = self.carrier.reynolds(self.particle.diameter, self.particle.velocity)
        self.particle.storage = ParticleStorage.create(self.params.cell_count, T0, self.fluid.latent_heat(T0))
        JacobianIntegrator.initialize(self.particle.storage.jacobian)

        self.heat_mass = HeatMassTransfer(
            self.fluid,
            n_lambda=self.params.n_lambda,
            cell_count=self.params.cell_count,
            conductivity_multiplier=self.params.conductivity_multiplier,
        )

        self.data_manager = DataManager(
            case_name=self.params.case_name,
            simulation_params=self.params,
            cell_count=self.params.cell_count,
            droplet_save_interval=self.params.droplet_save_interval,
            profile_save_interval=self.params.profile_save_interval,
            result_root=self.params.result_root,
        )

        print("=== droplet initialization ===")
        print(f"* fluid: {self.fluid.name}, density: {self.particle.density:.2f} kg/m3, mass: {self.particle.mass:.4g} kg")
        print(f"* gas: T = {self.carrier.temperature:.2f} K, p = {self.carrier.pressure:.1f} Pa, "
              f"rho = {self.carrier.density:.4f} kg/m3, k = {self.carrier.thermal_conductivity:.4g} W/m/K")
        print(f"* Reynolds number: {self.particle.reynolds:.4g}")
        print("="*50+"\n")

    def step(self) -> HeatMassResult:
        """advance the droplet by one constant time step

        steps:
        1. heat and mass transfer, new temperature profile
        2. FLA Jacobian and number density
        3. number density scaled sources
        4. droplet temperature, mass and diameter
        """
        particle = self.particle
        storage = particle.storage
        dt = self.runtime.constant_time_step()
        particle.time_step = dt

        # 1. heat and mass transfer
        result = self.heat_mass.compute(particle, self.carrier)

        # 2. FLA
        tau = relaxation_time(particle.diameter, particle.density, self.carrier.viscosity, particle.reynolds)
        JacobianIntegrator.step(storage.jacobian, self.carrier.velocity_gradient, tau, dt)

        # 3. scaled sources
        scale_sources(storage.diagnostics, storage.jacobian.N_P)

        # 4. droplet state
        particle.temperature = result.average_temperature
        particle.mass = max(particle.mass + result.mass_source * dt, 0.0)
        particle.density = self.fluid.liquid_density(result.average_temperature)
        particle.diameter = ParticleState.diameter_from_mass(particle.mass, particle.density)
        if particle.diameter > 0.0:
            particle.reynolds = self.carrier.reynolds(particle.diameter, particle.velocity)
        self.gas_energy_source += result.energy_source * dt
        self.gas_vapour_source += result.vaporization_rate * dt
        self.last_result = result
        return result

    def run(self):
        """execute the main loop of the simulation"""
        try:
            while self.runtime.is_running():
                self.runtime.advance()
                self.step()
                self.data_manager.save_all(self)
                self.data_manager.increment_iteration()
                # check if the droplet diameter is less than 1/10 of the initial diameter, if so, end the simulation
                if self.particle.diameter < 0.1 * self.params.droplet_diameter:
                    print("=== droplet evaporation performance ===")
                    print(f"* droplet diameter ({self.particle.diameter:.6e}) is less than 1/10 of the initial diameter ({self.params.droplet_diameter:.6e}), simulation ends.")
                    print("="*50)
                    self.runtime.stop()
                    break
        finally:
            self.data_manager.close()

        jacobian = self.particle.storage.jacobian
        print(f"\nsimulation ends at {self.runtime.current_time:.6g} s after {self.runtime.step_count} steps")
        print(f"* surface temperature: {self.particle.storage.profile.surface_temperature:.4f} K, "
              f"average temperature: {self.particle.temperature:.4f} K")
        print(f"* J_DET: {jacobian.J_DET:.6g}, N_P: {jacobian.N_P:.6g}, sign changes: {jacobian.N_J_SIGN}")
        print(f"* gas energy source: {self.gas_energy_source:.4g} J, vapour source: {self.gas_vapour_source:.4g} kg")
        print("="*50)
