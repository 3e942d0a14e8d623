"""
math utils module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

import numpy as np
import numba
from scipy.integrate import simpson

SMALL: float = 1e-20  # floor of the near-zero denominators
ACCURACY: float = 1e-6  # convergence criterion of the heat transfer number


@numba.njit(cache=True)
def log_ratio(b: float) -> float:
    """ln(1+b)/b, equal to 1 in the limit b -> 0"""
    if abs(b) < 1e-10:
        return 1.0 - 0.5 * b
    return np.log1p(b) / b

@numba.njit(cache=True)
def convective_enhancement(reynolds: float, diffusion_number: float) -> float:
    """(1+Re·X)^(1/3)·max(1, Re^0.077) - 1 with X the Prandtl or Schmidt number (Clift et al.)"""
    return (1.0 + reynolds * diffusion_number)**(1.0 / 3.0) * max(1.0, reynolds**0.077) - 1.0


def radial_grid(cell_count: int) -> np.ndarray:
    """normalized radii r_j = j/cell_count, j = 0..cell_count

    Args:
        cell_count: number of radial layers, must be even for the Simpson rule
    """
    if cell_count < 2 or cell_count % 2:
        raise ValueError(f"radial cell count must be an even number >= 2, current value: {cell_count}")
    return np.arange(cell_count + 1) / cell_count

def simpson_integral(values: np.ndarray, dr: float, axis: int = -1) -> np.ndarray:
    """composite Simpson 1/3 rule on the uniform radial grid (weights 1,4,2,...,4,1)"""
    return simpson(values, dx=dr, axis=axis)
