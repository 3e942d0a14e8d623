"""
droplet temperature profile solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
analytical temperature profile solver

The transient heat conduction inside a spherical droplet with the boundary condition
k_eff·∂T/∂R + h·(T - T_eff) = 0 is advanced over one time step by the series solution
(Sazhin, Prog. Energy Combust. Sci. 32 (2006) 162-214)

    T(r, t+Δt) = T_eff + Σ q_n·sin(λ_n·r)/r
    q_n = (I_n - sin(λ_n)/λ_n²·(h0+1)·T_eff)·exp(-κ·λ_n²·Δt)/b_n
    I_n = ∫ T(r, t)·r·sin(λ_n·r) dr,  b_n = (1 + h0/(h0² + λ_n²))/2

with the normalized radius r = R/R_d on N_INT uniform layers.
"""

import numpy as np
from .eigenvalue import valid_eigenvalues
from .math_utils import radial_grid, simpson_integral

N_INT: int = 100  # number of layers inside a droplet


class TemperatureProfileSolver:
    """series solution of the droplet heat conduction on a uniform radial grid

    Attributes:
        cell_count: number of radial layers (even)
        radius: normalized radii of the samples, shape (cell_count+1,)
        dr: layer thickness, 1/cell_count
    """
    def __init__(self, cell_count: int = N_INT):
        self.radius = radial_grid(cell_count)
        self.cell_count = cell_count
        self.dr = 1.0 / cell_count

    def _check_profile(self, profile: np.ndarray) -> np.ndarray:
        profile = np.asarray(profile, dtype=float)
        if profile.shape != self.radius.shape:
            raise ValueError(f"temperature profile must have {self.cell_count + 1} samples, current shape: {profile.shape}")
        return profile

    def series_coefficients(self, profile: np.ndarray, eigenvalues: np.ndarray, h0: float,
                            t_eff: float, kappa: float, dt: float) -> np.ndarray:
        """coefficients q_n of the new profile for the valid eigenvalues"""
        profile = self._check_profile(profile)
        lam = valid_eigenvalues(eigenvalues)
        if lam.size == 0:
            return lam
        zeta = (h0 + 1.0) * t_eff
        b_n = 0.5 * (1.0 + h0 / (h0 * h0 + lam * lam))
        integrand = profile * self.radius * np.sin(np.outer(lam, self.radius))
        I_n = simpson_integral(integrand, self.dr, axis=1)
        return (I_n - np.sin(lam) / (lam * lam) * zeta) * np.exp(-kappa * lam * lam * dt) / b_n

    def advance(self, profile: np.ndarray, eigenvalues: np.ndarray, h0: float, t_eff: float,
                kappa: float, dt: float) -> np.ndarray:
        """advance the temperature profile by one time step

        Args:
            profile: temperature samples at the beginning of the step (K), index cell_count is the surface
            eigenvalues: output of EigenvalueSolver.solve(h0), sentinels are skipped
            h0: convective parameter
            t_eff: effective gas temperature (K)
            kappa: k_eff/(cp_l·ρ_l·R_d²) (1/s)
            dt: time step (s)

        Returns:
            np.ndarray: new temperature samples, the input is not modified
        """
        q_n = self.series_coefficients(profile, eigenvalues, h0, t_eff, kappa, dt)
        new_profile = np.full_like(self.radius, t_eff)
        if q_n.size == 0:
            return new_profile
        lam = valid_eigenvalues(eigenvalues)
        r = self.radius[1:]
        # sin(λr)/r -> λ at the centre
        new_profile[0] += q_n @ lam
        new_profile[1:] += q_n @ (np.sin(np.outer(lam, r)) / r)
        return new_profile

    def average_temperature(self, profile: np.ndarray) -> float:
        """volume averaged temperature 3·∫T·r² dr"""
        profile = self._check_profile(profile)
        return float(3.0 * simpson_integral(profile * self.radius**2, self.dr))
