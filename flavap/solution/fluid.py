"""
Single component fluid property class for evaporating droplets

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

from typing import Callable, Dict, Type
from . import fluid_para
from .fluid_para import CRITICAL_CUTOFF
from .fluid_utils import validate_pressure, validate_temperature, validate_fluid_name


class Fluid:
    """single component fluid property model

    this class exposes the physical property correlations of one droplet fluid:
    1. vapour properties:
       - saturation pressure (Pa): saturation_pressure(T) method
       - specific heat (J/kg·K): vapour_cp(T) method
       - binary diffusivity in air (m²/s): binary_diffusivity(p, T) method
    2. liquid properties:
       - latent heat (J/kg): latent_heat(T) method
       - density (kg/m³): liquid_density(T) method
       - dynamic viscosity (Pa·s): liquid_viscosity(T) method
       - thermal conductivity (W/m·K): liquid_conductivity(T) method
       - specific heat (J/kg·K): liquid_cp(T) method

    the instance is stateless, one instance may be shared by all particles.
    subclasses bind the numba kernels of fluid_para.
    """
    name: str = ''
    molecular_weight: float = 0.0  # kg/kmol
    critical_temperature: float = 0.0  # K
    _vapor_pressure: Callable[[float], float]
    _vapour_cp: Callable[[float], float]
    _binary_diffusivity: Callable[[float, float], float]
    _latent_heat: Callable[[float], float]
    _liquid_density: Callable[[float], float]
    _liquid_viscosity: Callable[[float], float]
    _liquid_conductivity: Callable[[float], float]
    _liquid_cp: Callable[[float], float]

    @property
    def cutoff_temperature(self) -> float:
        """temperature above which the singular correlations are clamped"""
        return CRITICAL_CUTOFF * self.critical_temperature

    def saturation_pressure(self, temperature: float) -> float:
        validate_temperature(temperature)
        return float(type(self)._vapor_pressure(temperature))

    def vapour_cp(self, temperature: float) -> float:
        validate_temperature(temperature)
        return float(type(self)._vapour_cp(temperature))

    def binary_diffusivity(self, pressure: float, temperature: float) -> float:
        validate_pressure(pressure)
        validate_temperature(temperature)
        return float(type(self)._binary_diffusivity(pressure, temperature))

    def latent_heat(self, temperature: float) -> float:
        validate_temperature(temperature)
        return float(type(self)._latent_heat(temperature))

    def liquid_density(self, temperature: float) -> float:
        validate_temperature(temperature)
        return float(type(self)._liquid_density(temperature))

    def liquid_viscosity(self, temperature: float) -> float:
        validate_temperature(temperature)
        return float(type(self)._liquid_viscosity(temperature))

    def liquid_conductivity(self, temperature: float) -> float:
        validate_temperature(temperature)
        return float(type(self)._liquid_conductivity(temperature))

    def liquid_cp(self, temperature: float) -> float:
        validate_temperature(temperature)
        return float(type(self)._liquid_cp(temperature))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(molecular_weight={self.molecular_weight}, critical_temperature={self.critical_temperature})"


class Water(Fluid):
    name = 'water'
    molecular_weight = fluid_para.WATER_MOLECULAR_WEIGHT
    critical_temperature = fluid_para.WATER_TC
    _vapor_pressure = fluid_para.water_vapor_pressure
    _vapour_cp = fluid_para.water_vapour_cp
    _binary_diffusivity = fluid_para.water_binary_diffusivity
    _latent_heat = fluid_para.water_latent_heat
    _liquid_density = fluid_para.water_liquid_density
    _liquid_viscosity = fluid_para.water_liquid_viscosity
    _liquid_conductivity = fluid_para.water_liquid_conductivity
    _liquid_cp = fluid_para.water_liquid_cp


class Dodecane(Fluid):
    name = 'dodecane'
    molecular_weight = fluid_para.DODECANE_MOLECULAR_WEIGHT
    critical_temperature = fluid_para.DODECANE_TC
    _vapor_pressure = fluid_para.dodecane_vapor_pressure
    _vapour_cp = fluid_para.dodecane_vapour_cp
    _binary_diffusivity = fluid_para.dodecane_binary_diffusivity
    _latent_heat = fluid_para.dodecane_latent_heat
    _liquid_density = fluid_para.dodecane_liquid_density
    _liquid_viscosity = fluid_para.dodecane_liquid_viscosity
    _liquid_conductivity = fluid_para.dodecane_liquid_conductivity
    _liquid_cp = fluid_para.dodecane_liquid_cp


class Isooctane(Fluid):
    name = 'isooctane'
    molecular_weight = fluid_para.ISOOCTANE_MOLECULAR_WEIGHT
    critical_temperature = fluid_para.ISOOCTANE_TC
    _vapor_pressure = fluid_para.isooctane_vapor_pressure
    _vapour_cp = fluid_para.isooctane_vapour_cp
    _binary_diffusivity = fluid_para.isooctane_binary_diffusivity
    _latent_heat = fluid_para.isooctane_latent_heat
    _liquid_density = fluid_para.isooctane_liquid_density
    _liquid_viscosity = fluid_para.isooctane_liquid_viscosity
    _liquid_conductivity = fluid_para.isooctane_liquid_conductivity
    _liquid_cp = fluid_para.isooctane_liquid_cp


FLUIDS: Dict[str, Type[Fluid]] = {
    'water': Water,
    'dodecane': Dodecane,
    'isooctane': Isooctane,
}


def get_fluid(name: str) -> Fluid:
    """create the fluid property model by name ('water'/'dodecane'/'isooctane')"""
    return FLUIDS[validate_fluid_name(name)]()
