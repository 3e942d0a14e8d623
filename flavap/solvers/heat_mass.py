"""
droplet heat and mass transfer solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
heating and evaporation of a single component droplet over one time step

1. surface vapour fractions from the saturation pressure at the surface temperature
2. Spalding numbers, Sherwood and Nusselt numbers (Abramzon-Sirignano film model)
3. effective liquid conductivity (Abramzon-Sirignano recirculation model)
4. analytical temperature profile inside the droplet (series solution)
5. source terms for the droplet and the gas
"""

import warnings
from dataclasses import dataclass
from typing import Optional
import numpy as np
from flavap.core.particle import ParticleState, EvaporationDiagnostics, N_COMPONENTS
from flavap.core.carrier import CarrierPhaseState
from flavap.solution import Fluid
from flavap.solution.fluid_para import AIR_MOLECULAR_WEIGHT, AIR_GAS_CONSTANT
from flavap.solution.fluid_utils import validate_diameter, validate_temperature
from .math_utils import SMALL
from .eigenvalue import EigenvalueSolver, N_LAMBDA
from .temperature_profile import TemperatureProfileSolver
from .evaporation_closure import EvaporationClosure, spalding_mass_number

PECLET_MIN: float = 1e-12


@dataclass
class HeatMassResult:
    """output of one heat and mass transfer step, applied to the particle and the gas by the caller

    Attributes:
        surface_temperature: new droplet surface temperature [K]
        average_temperature: new volume averaged droplet temperature [K]
        profile: new radial temperature profile [K]
        vaporization_rate: vapour mass source to the gas [kg/s]
        mass_source: droplet mass rate, -vaporization_rate [kg/s]
        energy_source: energy source to the gas, -dh_dt [W]
        heat_transfer_coefficient: Nu·k/d [W/m²·K]
        mass_transfer_coefficient: ρ·π·d·Sh*·D [kg/s]
        diagnostics: evaporation diagnostics of the step
    """
    surface_temperature: float
    average_temperature: float
    profile: np.ndarray
    vaporization_rate: float
    mass_source: float
    energy_source: float
    heat_transfer_coefficient: float
    mass_transfer_coefficient: float
    diagnostics: EvaporationDiagnostics


def effective_conductivity(peclet: float, liquid_conductivity: float) -> float:
    """k_eff = (1.86 + 0.86·tanh(2.225·log10(Pe/30)))·k_l (Abramzon & Sirignano, 1989)"""
    if abs(peclet) < PECLET_MIN:
        return liquid_conductivity
    return (1.86 + 0.86 * np.tanh(2.225 * np.log10(peclet / 30.0))) * liquid_conductivity


class HeatMassTransfer:
    """effective thermal conductivity model of droplet heating and evaporation

    Attributes:
        fluid: fluid property model
        eigenvalue_solver: roots of the characteristic equation
        profile_solver: series solution of the temperature profile
        closure: film model closure
        conductivity_multiplier: factor on the liquid conductivity, large values give an infinitely conducting droplet
    """
    def __init__(self, fluid: Fluid, n_lambda: int = N_LAMBDA, cell_count: int = 100,
                 closure: Optional[EvaporationClosure] = None, conductivity_multiplier: float = 1.0):
        self.fluid = fluid
        self.eigenvalue_solver = EigenvalueSolver(n_lambda=n_lambda)
        self.profile_solver = TemperatureProfileSolver(cell_count)
        self.closure = closure if closure is not None else EvaporationClosure()
        self.conductivity_multiplier = conductivity_multiplier

    def surface_fractions(self, surface_temperature: float, pressure: float):
        """vapour mole fraction, vapour mass fraction and mean molecular weight at the surface"""
        x_surf = self.fluid.saturation_pressure(surface_temperature) / pressure
        molecular_weight = x_surf * self.fluid.molecular_weight + (1.0 - x_surf) * AIR_MOLECULAR_WEIGHT
        molecular_weight = max(molecular_weight, SMALL)
        y_surf = x_surf * self.fluid.molecular_weight / molecular_weight
        return x_surf, y_surf, molecular_weight

    def compute(self, particle: ParticleState, carrier: CarrierPhaseState,
                latent_heat: Optional[float] = None) -> HeatMassResult:
        """advance the droplet temperature profile and compute the source terms

        the particle storage (profile and diagnostics) is updated, the particle itself is not.

        Args:
            particle: droplet state with initialized storage
            carrier: gas state at the droplet location
            latent_heat: latent heat supplied by the caller [J/kg], None for the fluid correlation

        Returns:
            HeatMassResult: new temperatures and source terms
        """
        if particle.storage is None:
            raise ValueError("particle storage is not initialized")
        if particle.component_count != N_COMPONENTS:
            warnings.warn(f"particle has {particle.component_count} components, "
                          f"only {N_COMPONENTS} component droplets are supported")
        validate_diameter(particle.diameter)
        storage = particle.storage
        diameter = particle.diameter
        area = np.pi * diameter**2
        T_gas = carrier.temperature
        k_gas = carrier.thermal_conductivity
        reynolds = particle.reynolds

        # 1. surface fractions
        Tp = storage.profile.surface_temperature
        validate_temperature(Tp)
        x_surf, y_surf, _ = self.surface_fractions(Tp, carrier.pressure)
        ys_tot = max(y_surf, SMALL)
        L = self.fluid.latent_heat(Tp) if latent_heat is None else latent_heat
        L_eff = y_surf * L / ys_tot

        # 2. film properties at the 1/3 rule reference temperature
        T_ref = (T_gas + 2.0 * Tp) / 3.0
        rho_gas_s = carrier.pressure / (AIR_GAS_CONSTANT * T_ref)
        cp_vapour = self.fluid.vapour_cp(T_ref)
        D = self.fluid.binary_diffusivity(carrier.pressure, T_ref)
        schmidt = carrier.viscosity / (rho_gas_s * D)
        prandtl = carrier.prandtl

        # 3. mass and heat transfer numbers
        B_M = spalding_mass_number(ys_tot)
        Sh_star, Sh = self.closure.sherwood(reynolds, schmidt, B_M)
        total_vaporization_rate = area * D * rho_gas_s * Sh / diameter
        coef = cp_vapour * rho_gas_s * D / k_gas * Sh_star
        heat = self.closure.heat_transfer_number(reynolds, prandtl, B_M, coef)
        Nu = heat.Nu

        # 4. liquid properties at the average temperature
        T_av = storage.diagnostics.average_temperature
        mu_l = self.fluid.liquid_viscosity(T_av)
        k_l = self.fluid.liquid_conductivity(T_av) * self.conductivity_multiplier
        cp_l = self.fluid.liquid_cp(T_av)
        slip = carrier.slip_velocity(particle.velocity)
        peclet = (12.69 / 16.0 * particle.density * 0.5 * diameter * cp_l / k_l * slip
                  * carrier.viscosity / mu_l * reynolds**(1.0 / 3.0) / (1.0 + B_M))
        k_eff = effective_conductivity(peclet, k_l)

        # 5. temperature profile
        T_eff = T_gas - total_vaporization_rate * L_eff / (np.pi * diameter * Nu * k_gas)
        h0 = k_gas * Nu * 0.5 / k_eff - 1.0
        kappa = k_eff / (cp_l * particle.density * 0.25 * diameter**2)
        eigenvalues = self.eigenvalue_solver.solve(h0)
        profile = self.profile_solver.advance(storage.profile.temperature, eigenvalues, h0,
                                              T_eff, kappa, particle.time_step)
        T_av_new = self.profile_solver.average_temperature(profile)
        storage.profile.replace(profile)

        # 6. source terms
        vaporization_rate = y_surf * total_vaporization_rate / ys_tot
        dh_dt = Nu * k_gas * area / diameter * (T_gas - T_av_new)
        htc = Nu * k_gas / diameter
        mtc = carrier.density * np.pi * diameter * Sh_star * D

        diagnostics = storage.diagnostics
        diagnostics.surface_mole_fraction = x_surf
        diagnostics.surface_mass_fraction = y_surf
        diagnostics.total_surface_mass_fraction = ys_tot
        diagnostics.total_vaporization_rate = total_vaporization_rate
        diagnostics.vaporization_rate = vaporization_rate
        diagnostics.B_M = B_M
        diagnostics.B_T = heat.B_T
        diagnostics.latent_heat = L_eff
        diagnostics.Nu = Nu
        diagnostics.Nu_star = heat.Nu_star
        diagnostics.Sh = Sh
        diagnostics.Sh_star = Sh_star
        diagnostics.coef = coef
        diagnostics.Pe = peclet
        diagnostics.effective_conductivity = k_eff
        diagnostics.diffusivity = D
        diagnostics.gas_conductivity = k_gas
        diagnostics.heat_transfer_coefficient = htc
        diagnostics.dh_dt = dh_dt
        diagnostics.dm_dt = vaporization_rate
        diagnostics.average_temperature = T_av_new

        return HeatMassResult(
            surface_temperature=storage.profile.surface_temperature,
            average_temperature=T_av_new,
            profile=profile,
            vaporization_rate=vaporization_rate,
            mass_source=-vaporization_rate,
            energy_source=-dh_dt,
            heat_transfer_coefficient=htc,
            mass_transfer_coefficient=mtc,
            diagnostics=diagnostics,
        )
