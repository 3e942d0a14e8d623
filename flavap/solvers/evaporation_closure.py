"""
evaporation closure module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
Abramzon-Sirignano film model

The mass transfer side is explicit once the Spalding mass transfer number B_M is known,
the heat transfer number B_T is the fixed point of

    B_T = (1+B_M)^φ - 1,  φ = cp_v·ρ·D/k·Sh*/Nu*(B_T)

which is iterated from B_T = B_M until |ΔB_T| < accuracy.
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np
from .math_utils import ACCURACY, SMALL, log_ratio, convective_enhancement

BM_MAX: float = 1e20
BM_MIN: float = -0.99999
MAX_ITERATIONS: int = 100


class ConvergenceError(RuntimeError):
    """the heat transfer number iteration did not converge

    Attributes:
        last_value: last iterate of B_T
        iterations: number of iterations performed
        residual: last |ΔB_T|
    """
    def __init__(self, last_value: float, iterations: int, residual: float):
        super().__init__(f"heat transfer number B_T does not converge after {iterations} iterations, "
                         f"last value: {last_value:.6g}, |dB_T|: {residual:.3g}")
        self.last_value = last_value
        self.iterations = iterations
        self.residual = residual


@dataclass
class ClosureResult:
    """converged heat transfer side of the film model

    Attributes:
        B_T: heat transfer number
        Nu_star: film corrected Nusselt number
        Nu: Nusselt number with the blowing correction
        iterations: number of fixed point iterations
    """
    B_T: float
    Nu_star: float
    Nu: float
    iterations: int


def spalding_mass_number(total_surface_mass_fraction: float) -> float:
    """B_M = Y_s/(1-Y_s) with zero vapour in the ambient gas, limited to [BM_MIN, BM_MAX]"""
    denominator = max(1.0 - total_surface_mass_fraction, SMALL)
    return float(np.clip(total_surface_mass_fraction / denominator, BM_MIN, BM_MAX))

def film_correction(b: float) -> float:
    """F(B) = (1+B)^0.7·ln(1+B)/B"""
    return (1.0 + b)**0.7 * log_ratio(b)


class EvaporationClosure:
    """heat and mass transfer numbers of an evaporating droplet"""
    def __init__(self, max_iterations: int = MAX_ITERATIONS, accuracy: float = ACCURACY):
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, current value: {max_iterations}")
        self.max_iterations = max_iterations
        self.accuracy = accuracy

    def sherwood(self, reynolds: float, schmidt: float, B_M: float) -> Tuple[float, float]:
        """film corrected Sherwood number Sh* and Sh = ln(1+B_M)·Sh*"""
        Sh_star = 2.0 + convective_enhancement(reynolds, schmidt) / film_correction(B_M)
        Sh = np.log1p(B_M) * Sh_star
        return Sh_star, Sh

    def nusselt_star(self, reynolds: float, prandtl: float, B_T: float) -> float:
        return 2.0 + convective_enhancement(reynolds, prandtl) / film_correction(B_T)

    def heat_transfer_number(self, reynolds: float, prandtl: float, B_M: float, coef: float) -> ClosureResult:
        """solve the heat transfer number by fixed point iteration

        Args:
            reynolds: particle Reynolds number
            prandtl: gas Prandtl number
            B_M: Spalding mass transfer number
            coef: cp_v·ρ_gas·D/k_gas·Sh*

        Returns:
            ClosureResult: converged B_T, Nu*, Nu

        Raises:
            ConvergenceError: |ΔB_T| is still above the accuracy after max_iterations
        """
        B_T = B_M
        dif = np.inf
        for iteration in range(1, self.max_iterations + 1):
            Nu_star = self.nusselt_star(reynolds, prandtl, B_T)
            phi = coef / Nu_star
            B_T_new = (1.0 + B_M)**phi - 1.0
            dif = abs(B_T_new - B_T)
            B_T = B_T_new
            if dif < self.accuracy:
                Nu = log_ratio(B_T) * Nu_star
                return ClosureResult(B_T=B_T, Nu_star=Nu_star, Nu=Nu, iterations=iteration)
        raise ConvergenceError(B_T, self.max_iterations, dif)
