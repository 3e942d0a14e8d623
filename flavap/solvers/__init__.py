"""
solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
solver module for droplet heating, evaporation and FLA simulation

This module provides the solver functions for the simulation framework, including:
1. eigenvalue solver of the droplet heat conduction problem (eigenvalue)
2. analytical temperature profile solver (temperature_profile)
3. film model closure of the heat and mass transfer numbers (evaporation_closure)
4. droplet heat and mass transfer per time step (heat_mass)
5. Fully Lagrangian Approach Jacobian integrator (fla)
"""
from .eigenvalue import EigenvalueSolver
from .temperature_profile import TemperatureProfileSolver
from .evaporation_closure import EvaporationClosure, ConvergenceError, ClosureResult
from .heat_mass import HeatMassTransfer, HeatMassResult
from .fla import JacobianIntegrator, relaxation_time, scale_sources

__all__ = [
    'EigenvalueSolver',
    'TemperatureProfileSolver',
    'EvaporationClosure', 'ConvergenceError', 'ClosureResult',
    'HeatMassTransfer', 'HeatMassResult',
    'JacobianIntegrator', 'relaxation_time', 'scale_sources'
]
