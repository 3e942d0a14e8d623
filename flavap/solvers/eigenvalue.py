"""
eigenvalue solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module finds the eigenvalues of the droplet heat conduction problem with a
convective boundary condition, i.e. the positive roots of

    λ·cos(λ) + h0·sin(λ) = 0

one root per band [iπ, (i+1/2)π] (shifted by π/2 when h0 > 0). A band without a
sign change keeps the sentinel value NO_ROOT.
"""

import numpy as np
import numba
from scipy.optimize import bisect

N_LAMBDA: int = 44  # number of terms in the series
NO_ROOT: float = -1.0
BISECTION_TOLERANCE: float = 1e-8
BAND_MARGIN: float = 1e-7


@numba.njit(cache=True)
def characteristic_function(lam: float, h0: float) -> float:
    return lam * np.cos(lam) + h0 * np.sin(lam)


class EigenvalueSolver:
    """bisection of the characteristic equation band by band

    Attributes:
        n_lambda: number of bands (series terms)
        tolerance: bracket width at which the bisection stops
        margin: inward shrink of each band end
    """
    def __init__(self, n_lambda: int = N_LAMBDA, tolerance: float = BISECTION_TOLERANCE,
                 margin: float = BAND_MARGIN):
        if n_lambda < 1:
            raise ValueError(f"number of eigenvalues must be positive, current value: {n_lambda}")
        self.n_lambda = n_lambda
        self.tolerance = tolerance
        self.margin = margin

    def bands(self, h0: float) -> np.ndarray:
        """search bands of the roots, shape (n_lambda, 2)"""
        index = np.arange(self.n_lambda)
        left = index * np.pi + self.margin
        right = (index + 0.5) * np.pi - self.margin
        if h0 > 0.0:
            left += 0.5 * np.pi
            right += 0.5 * np.pi
        return np.column_stack((left, right))

    def solve(self, h0: float) -> np.ndarray:
        """calculate the eigenvalues for the convective parameter h0

        Args:
            h0: k_gas·Nu/(2·k_eff) - 1

        Returns:
            np.ndarray: roots in increasing order, NO_ROOT where a band has no sign change
        """
        if h0 == 0.0:
            # cos(λ) = 0, the roots sit on the band edges
            return (np.arange(self.n_lambda) + 0.5) * np.pi
        eigenvalues = np.full(self.n_lambda, NO_ROOT)
        for i, (left, right) in enumerate(self.bands(h0)):
            f_left = characteristic_function(left, h0)
            f_right = characteristic_function(right, h0)
            if f_left * f_right < 0.0:
                eigenvalues[i] = bisect(characteristic_function, left, right, args=(h0,),
                                        xtol=self.tolerance)
        return eigenvalues


def valid_eigenvalues(eigenvalues: np.ndarray) -> np.ndarray:
    """drop the sentinel entries"""
    return eigenvalues[eigenvalues > 0.0]
