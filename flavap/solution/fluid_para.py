"""
Fluid physical property parameter module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module holds the constants and the numba kernels of the single component
fluid correlations. Every kernel takes SI units (K, Pa) and returns SI units:
1. water: Yaws (2008), Incropera & DeWitt (2002)
2. n-dodecane: Abramzon & Sazhin, Fuel 85 (2006) 32-46
3. iso-octane: Poling, Prausnitz & O'Connell (2000), Ambrose & Walton (1989)

Above CRITICAL_CUTOFF*Tc the correlations that are singular at Tc are evaluated
at the cutoff temperature.
"""

import numpy as np
import numba

# define the common constants
AIR_MOLECULAR_WEIGHT: float = 28.967  # kg/kmol
AIR_GAS_CONSTANT: float = 287.01625988193461525  # J/(kg·K), ideal gas law of the film
CRITICAL_CUTOFF: float = 0.99  # reduced temperature of the near-critical clamping
FLUID_NAMES = ('water', 'dodecane', 'isooctane')

# water
WATER_MOLECULAR_WEIGHT: float = 18.0  # kg/kmol
WATER_TC: float = 647.13  # K
WATER_TB: float = 373.15  # K
WATER_PC: float = 220.55e5  # Pa
WATER_OMEGA: float = 0.3449  # acentric factor

# n-dodecane
DODECANE_MOLECULAR_WEIGHT: float = 170.34  # kg/kmol
DODECANE_TC: float = 659.0  # K
DODECANE_TB: float = 489.47  # K

# iso-octane, the critical pressure comes from the group correlation with carbon number 8
ISOOCTANE_CARBON_NUMBER: float = 8.0
ISOOCTANE_MOLECULAR_WEIGHT: float = 114.23  # kg/kmol
ISOOCTANE_TC: float = 543.9  # K
ISOOCTANE_TB: float = 372.39  # K
ISOOCTANE_PC: float = (-0.0186 * ISOOCTANE_CARBON_NUMBER**3 + 0.459 * ISOOCTANE_CARBON_NUMBER**2
                       - 5.924 * ISOOCTANE_CARBON_NUMBER + 54.071) * 1e5  # Pa
ISOOCTANE_OMEGA: float = 0.303


# 1. shared correlations

@numba.njit(cache=True)
def clamp_temperature(temperature: float, tc: float) -> float:
    """limit the temperature to the near-critical cutoff"""
    return min(temperature, CRITICAL_CUTOFF * tc)

@numba.njit(cache=True)
def ambrose_walton_vapor_pressure(temperature: float, tc: float, pc: float, omega: float) -> float:
    """corresponding states saturation pressure (Ambrose & Walton, 1989)

    Args:
        temperature: temperature (K)
        tc: critical temperature (K)
        pc: critical pressure (Pa)
        omega: acentric factor

    Returns:
        float: saturation pressure (Pa)
    """
    Tr = clamp_temperature(temperature, tc) / tc
    tau = 1.0 - Tr
    tau_15 = tau**1.5
    tau_25 = tau**2.5
    tau_5 = tau**5.0
    f0 = (-5.97616 * tau + 1.29874 * tau_15 - 0.60394 * tau_25 - 1.06841 * tau_5) / Tr
    f1 = (-5.03365 * tau + 1.11505 * tau_15 - 5.41217 * tau_25 - 7.46628 * tau_5) / Tr
    f2 = (-0.64771 * tau + 2.41539 * tau_15 - 4.26979 * tau_25 + 3.25259 * tau_5) / Tr
    return np.exp(f0 + f1 * omega + f2 * omega * omega) * pc

@numba.njit(cache=True)
def watson_latent_heat(temperature: float, tc: float, coefficient: float, exponent: float,
                       molecular_weight: float) -> float:
    """latent heat of the form coefficient*(1-Tr)^exponent [MJ/kmol] in J/kg"""
    Tr = clamp_temperature(temperature, tc) / tc
    return coefficient * (1.0 - Tr)**exponent / molecular_weight * 1e6


# 2. water

@numba.njit(cache=True)
def water_vapor_pressure(temperature: float) -> float:
    return ambrose_walton_vapor_pressure(temperature, WATER_TC, WATER_PC, WATER_OMEGA)

@numba.njit(cache=True)
def water_vapour_cp(temperature: float) -> float:
    T = temperature
    return (-5.9796e-9 * T**3 + 1.7437e-5 * T**2 - 3.2463e-3 * T + 33.174) / WATER_MOLECULAR_WEIGHT * 1e3

@numba.njit(cache=True)
def water_binary_diffusivity(pressure: float, temperature: float) -> float:
    """water vapour in air, Wilke & Lee

    the collision integral uses the Lennard-Jones energies of water (809.1 K) and air (78.6 K)
    """
    mw_va = 2.0 / (1.0 / WATER_MOLECULAR_WEIGHT + 1.0 / AIR_MOLECULAR_WEIGHT)
    sq_mw_va = np.sqrt(mw_va)
    sigma_va = 0.5 * (2.641 + 3.711)
    T_n = temperature / np.sqrt(78.6 * 809.1)
    omega_d = (1.06036 * T_n**-0.1561 + 0.193 * np.exp(-0.47635 * T_n)
               + 1.03587 * np.exp(-1.52996 * T_n) + 1.76474 * np.exp(-3.89411 * T_n))
    return ((3.03 - 0.98 / sq_mw_va) / (pressure * sq_mw_va * sigma_va * sigma_va * omega_d)
            * 1e-2 * temperature**1.5)

@numba.njit(cache=True)
def water_latent_heat(temperature: float) -> float:
    return watson_latent_heat(temperature, WATER_TC, 54.0, 0.34, WATER_MOLECULAR_WEIGHT)

@numba.njit(cache=True)
def water_liquid_density(temperature: float) -> float:
    return 1.0 / 1.058 * 1e3

@numba.njit(cache=True)
def water_liquid_viscosity(temperature: float) -> float:
    T = temperature
    return 10.0**(-11.6225 + 1.949e3 / T + 2.1641e-2 * T - 1.5990e-5 * T * T) * 1e-3

@numba.njit(cache=True)
def water_liquid_conductivity(temperature: float) -> float:
    return 0.686

@numba.njit(cache=True)
def water_liquid_cp(temperature: float) -> float:
    return 4239.0


# 3. n-dodecane

@numba.njit(cache=True)
def dodecane_vapor_pressure(temperature: float) -> float:
    """saturation pressure, continued exponentially above the cutoff"""
    theta = 300.0 / temperature
    psat = np.exp(8.1948 - 7.8099 * theta - 9.0098 * theta * theta) * 1e5
    if temperature > CRITICAL_CUTOFF * DODECANE_TC:
        psat *= np.exp(15.0 * (temperature / CRITICAL_CUTOFF / DODECANE_TC - 1.0))
    return psat

@numba.njit(cache=True)
def dodecane_vapour_cp(temperature: float) -> float:
    theta = temperature / 300.0
    return (0.2979 + 1.4394 * theta - 0.1351 * theta * theta) * 1000.0

@numba.njit(cache=True)
def dodecane_binary_diffusivity(pressure: float, temperature: float) -> float:
    return 0.527 * (temperature / 300.0)**1.583 / pressure

@numba.njit(cache=True)
def dodecane_latent_heat(temperature: float) -> float:
    T = clamp_temperature(temperature, DODECANE_TC)
    return 37.44 * (DODECANE_TC - T)**0.38 * 1000.0

@numba.njit(cache=True)
def dodecane_liquid_density(temperature: float) -> float:
    return 744.11 - 0.771 * (temperature - 300.0)

@numba.njit(cache=True)
def dodecane_liquid_viscosity(temperature: float) -> float:
    theta = 300.0 / temperature
    return 1e-3 * np.exp(2.0303 * theta * theta + 1.1769 * theta - 2.929)

@numba.njit(cache=True)
def dodecane_liquid_conductivity(temperature: float) -> float:
    return 0.1405 - 0.00022 * (temperature - 300.0)

@numba.njit(cache=True)
def dodecane_liquid_cp(temperature: float) -> float:
    return (2.18 + 0.0041 * (temperature - 300.0)) * 1000.0


# 4. iso-octane

@numba.njit(cache=True)
def isooctane_vapor_pressure(temperature: float) -> float:
    return ambrose_walton_vapor_pressure(temperature, ISOOCTANE_TC, ISOOCTANE_PC, ISOOCTANE_OMEGA)

@numba.njit(cache=True)
def isooctane_vapour_cp(temperature: float) -> float:
    # NIST value at 400 K
    return 244.60 / ISOOCTANE_MOLECULAR_WEIGHT * 1000.0

@numba.njit(cache=True)
def isooctane_binary_diffusivity(pressure: float, temperature: float) -> float:
    T = temperature
    return (-0.0578 + 3.0455e-4 * T + 3.4265e-7 * T * T) * 1e-4

@numba.njit(cache=True)
def isooctane_latent_heat(temperature: float) -> float:
    return watson_latent_heat(temperature, ISOOCTANE_TC, 49.32456, 0.382229, ISOOCTANE_MOLECULAR_WEIGHT)

@numba.njit(cache=True)
def isooctane_liquid_density(temperature: float) -> float:
    """Rackett type density with carbon number group coefficients"""
    n = ISOOCTANE_CARBON_NUMBER
    a = -0.000981411583995317 * n * n + 0.0167403553403262 * n + 0.175683060992056
    b = -0.000706081955526297 * n * n + 0.00873629109926122 * n + 0.249117016533684
    c = 0.00114456989247312 * n * n - 0.0174424731182795 * n + 0.343958172043011
    Tr = clamp_temperature(temperature, ISOOCTANE_TC) / ISOOCTANE_TC
    return 1000.0 * a * b**(-(1.0 - Tr)**c)

@numba.njit(cache=True)
def isooctane_liquid_viscosity(temperature: float) -> float:
    T = temperature
    return 10.0**(-10.2217 + 1423.586 / T + 0.024242 * T - 2.33636e-5 * T * T - 3.0)

@numba.njit(cache=True)
def isooctane_liquid_conductivity(temperature: float) -> float:
    """Latini correlation"""
    Tr = clamp_temperature(temperature, ISOOCTANE_TC) / ISOOCTANE_TC
    return (0.0035 * ISOOCTANE_TB**1.2 * ISOOCTANE_MOLECULAR_WEIGHT**-0.5 * ISOOCTANE_TC**-0.167
            * (1.0 - Tr)**0.38 * Tr**(-1.0 / 6.0))

@numba.njit(cache=True)
def isooctane_liquid_cp(temperature: float) -> float:
    # the published iso-octane correlation has a misprint, n-dodecane values are used
    return dodecane_liquid_cp(temperature)
