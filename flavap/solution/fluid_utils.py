"""
fluid utils module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the input validation functions of the fluid and droplet calculations:
   - validate_temperature: validate the validity of temperature
   - validate_pressure: validate the validity of pressure
   - validate_diameter: validate the validity of droplet diameter
   - validate_fluid_name: validate the selected fluid
"""

import numba
from .fluid_para import FLUID_NAMES


# constant definition
PRESSURE_MIN = 0.0
TEMPERATURE_MIN = 0.0
DIAMETER_MIN = 0.0


@numba.njit(cache=True)
def _validate_pressure_impl(pressure: float) -> None:
    """validate the implementation function of the pressure"""
    if not pressure > PRESSURE_MIN:
        raise ValueError("Invalid pressure")

@numba.njit(cache=True)
def _validate_temperature_impl(temperature: float) -> None:
    """validate the implementation function of the temperature"""
    if not temperature > TEMPERATURE_MIN:
        raise ValueError("Invalid temperature")

@numba.njit(cache=True)
def _validate_diameter_impl(diameter: float) -> None:
    """validate the implementation function of the diameter"""
    if not diameter > DIAMETER_MIN:
        raise ValueError("Invalid diameter")


def validate_pressure(pressure: float) -> None:
    """validate the validity of the pressure"""
    try:
        _validate_pressure_impl(pressure)
    except ValueError:
        raise ValueError(f"pressure must be greater than {PRESSURE_MIN}Pa, current value: {pressure}Pa")

def validate_temperature(temperature: float) -> None:
    """validate the validity of the temperature"""
    try:
        _validate_temperature_impl(temperature)
    except ValueError:
        raise ValueError(f"temperature must be greater than {TEMPERATURE_MIN}K, current value: {temperature}K")

def validate_diameter(diameter: float) -> None:
    """validate the validity of the droplet diameter"""
    try:
        _validate_diameter_impl(diameter)
    except ValueError:
        raise ValueError(f"droplet diameter must be greater than {DIAMETER_MIN}m, current value: {diameter}m")

def validate_fluid_name(name: str) -> str:
    """validate the fluid name and return its normalized form"""
    key = name.strip().lower().replace('-', '').replace('_', '')
    if key in ('ndodecane', 'c12h26'):
        key = 'dodecane'
    elif key in ('ic8h18', 'c8h18', '224trimethylpentane'):
        key = 'isooctane'
    elif key == 'h2o':
        key = 'water'
    if key not in FLUID_NAMES:
        raise ValueError(f"unsupported fluid: {name}, available fluids: {', '.join(FLUID_NAMES)}")
    return key
