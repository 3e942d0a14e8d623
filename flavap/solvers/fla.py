"""
Fully Lagrangian Approach solver module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

"""
Fully Lagrangian Approach (Osiptsov, 2000)

The Jacobian of the map from the initial to the current particle position and its rate
are integrated along the trajectory (2-D planar form):

    dJ/dt = W
    dW/dt = (∇u·J - W)/τ

The number density follows as N_P = 1/|det J|, a sign change of det J marks a fold
(caustic) of the particle trajectories.
"""

import numpy as np
import numba
from flavap.core.particle import JacobianState, EvaporationDiagnostics
from flavap.solution.fluid_utils import validate_diameter


@numba.njit(cache=True)
def schiller_naumann_drag_factor(reynolds: float) -> float:
    """18·Cd·Re/24 of the spherical drag law, 18 in the Stokes limit"""
    if reynolds < 1000.0:
        return 18.0 * (1.0 + 0.15 * reynolds**0.687)
    return 18.0 * 0.44 * reynolds / 24.0

def relaxation_time(diameter: float, density: float, viscosity: float, reynolds: float) -> float:
    """particle momentum relaxation time τ = ρ_p·d²/(μ_g·f_D) [s]

    Args:
        diameter: particle diameter [m]
        density: particle density [kg/m³]
        viscosity: gas dynamic viscosity [Pa·s]
        reynolds: particle Reynolds number
    """
    validate_diameter(diameter)
    if viscosity <= 0.0:
        raise ValueError(f"gas viscosity must be greater than 0, current value: {viscosity}")
    return density * diameter * diameter / (viscosity * schiller_naumann_drag_factor(reynolds))


@numba.njit(cache=True)
def fla_dydt(y: np.ndarray, gradient: np.ndarray, tau: float) -> np.ndarray:
    """right hand side of the FLA system

    Args:
        y: [J11, J12, J21, J22, W11, W12, W21, W22]
        gradient: [du/dx, du/dy, dv/dx, dv/dy]
        tau: relaxation time [s]
    """
    dudx, dudy, dvdx, dvdy = gradient[0], gradient[1], gradient[2], gradient[3]
    f = np.empty(8)
    f[0] = y[4]
    f[1] = y[5]
    f[2] = y[6]
    f[3] = y[7]
    f[4] = (y[0] * dudx + y[2] * dudy - y[4]) / tau
    f[5] = (y[1] * dudx + y[3] * dudy - y[5]) / tau
    f[6] = (y[0] * dvdx + y[2] * dvdy - y[6]) / tau
    f[7] = (y[1] * dvdx + y[3] * dvdy - y[7]) / tau
    return f

@numba.njit(cache=True)
def fla_rk4_step(y: np.ndarray, gradient: np.ndarray, tau: float, h: float) -> np.ndarray:
    """classical 4th order Runge-Kutta step with the gradient frozen over the step"""
    k1 = fla_dydt(y, gradient, tau)
    k2 = fla_dydt(y + 0.5 * h * k1, gradient, tau)
    k3 = fla_dydt(y + 0.5 * h * k2, gradient, tau)
    k4 = fla_dydt(y + h * k3, gradient, tau)
    return y + (k1 + 2.0 * k2 + 2.0 * k3 + k4) * h / 6.0


class JacobianIntegrator:
    """advance the FLA state of a particle by one time step"""

    @staticmethod
    def initialize(state: JacobianState) -> None:
        """J = I, W = 0, J_DET = 1, N_P = 1, no sign change"""
        state.set_vector(np.array([1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0]))
        state.J_DET = 1.0
        state.N_P = 1.0
        state.N_J_SIGN = 0
        state.BETA = 0.0

    @staticmethod
    def step(state: JacobianState, velocity_gradient: np.ndarray, tau: float, dt: float) -> None:
        """integrate the Jacobian over dt and update the determinant, sign counter and number density

        Args:
            state: FLA state of the particle, modified in place
            velocity_gradient: [du/dx, du/dy, dv/dx, dv/dy] at the particle location [1/s]
            tau: relaxation time [s]
            dt: particle time step [s]
        """
        if tau <= 0.0:
            raise ValueError(f"relaxation time must be greater than 0s, current value: {tau}s")
        gradient = np.asarray(velocity_gradient, dtype=float)
        state.BETA = 1.0 / tau
        state.set_vector(fla_rk4_step(state.as_vector(), gradient, tau, dt))
        det = state.determinant()
        if np.signbit(state.J_DET) != np.signbit(det):
            state.N_J_SIGN += 1
        state.J_DET = det
        # det = 0 at a caustic gives an infinite number density
        with np.errstate(divide='ignore'):
            state.N_P = float(1.0 / np.abs(np.float64(det)))


def scale_sources(diagnostics: EvaporationDiagnostics, number_density: float) -> None:
    """heat and mass rates weighted by the FLA number density"""
    diagnostics.dh_dt_scaled = diagnostics.dh_dt * number_density
    diagnostics.dm_dt_scaled = diagnostics.dm_dt * number_density
