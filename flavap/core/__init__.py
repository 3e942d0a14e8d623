"""
core module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the core functions of the droplet evaporation simulation framework, including:
1. time management (runtime)
2. particle state and persistent storage (particle)
3. carrier phase state (carrier)
4. data management (data_manager)
5. console log duplication (logger)
"""

from .runtime import Runtime, DPM_DT
from .particle import (ParticleState, ParticleStorage, RadialTemperatureProfile,
                       JacobianState, EvaporationDiagnostics)
from .carrier import CarrierPhaseState
from .data_manager import DataManager
from .logger import TeeLogger

__all__ = [
    'Runtime', 'DPM_DT',
    'ParticleState', 'ParticleStorage', 'RadialTemperatureProfile',
    'JacobianState', 'EvaporationDiagnostics',
    'CarrierPhaseState',
    'DataManager',
    'TeeLogger'
]
