"""
solution module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the droplet fluid related functions, including:
1. fluid_para: fluid constants and property correlation kernels
2. fluid_utils: input validation tool
3. fluid: fluid property model classes (water, n-dodecane, iso-octane)
"""
from .fluid import Fluid, Water, Dodecane, Isooctane, get_fluid

__all__ = ['Fluid', 'Water', 'Dodecane', 'Isooctane', 'get_fluid']
