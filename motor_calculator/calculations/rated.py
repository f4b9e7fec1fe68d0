"""
Rated-physics approximations.

Quick estimates driven by rated power, nominal voltage and overall stator
dimensions, for when the core geometry is not known yet. Dimensions come
in millimetres.
"""

import math

from ..utils.constants import (
    DENSITY_STEEL, EMF_CONSTANT, EMF_WINDING_FACTOR,
    REFERENCE_FLUX, REFERENCE_FREQUENCY, REFERENCE_POLES, REFERENCE_POWER
)
from .magnetic import require_positive


def synchronous_speed(frequency: float, poles: int) -> float:
    """Synchronous speed n_s = 120 f / poles [rpm]."""
    require_positive("poles", poles)
    return 120 * frequency / poles


def rated_torque(power_w: float, speed_rpm: float) -> float:
    """Torque T = P * 60 / (2π n) [N·m]."""
    require_positive("synchronous_speed", speed_rpm)
    return power_w * 60 / (2 * math.pi * speed_rpm)


def air_gap_surface(diameter_mm: float, length_mm: float) -> float:
    """
    Cylindrical air gap surface A = 2π r L [m²].

    Args:
        diameter_mm: Stator diameter [mm]
        length_mm: Stack length [mm]
    """
    radius = diameter_mm / 2000
    return 2 * math.pi * radius * (length_mm / 1000)


def flux_from_power(power_w: float, frequency: float, poles: int) -> float:
    """
    Flux per pole scaled from a 1 kW, 50 Hz, 4-pole reference of 1 mWb.

    Φ = Φ_ref * sqrt(P / P_ref) * (f_ref / f) * (poles_ref / poles)
    """
    require_positive("frequency", frequency)
    require_positive("poles", poles)
    return (REFERENCE_FLUX * math.sqrt(power_w / REFERENCE_POWER) *
            (REFERENCE_FREQUENCY / frequency) * (REFERENCE_POLES / poles))


def estimate_turns_per_phase(voltage: float, frequency: float, flux_per_pole: float) -> float:
    """N = V / (4.44 f Φ Kw) with a typical winding factor (not rounded)."""
    require_positive("frequency", frequency)
    require_positive("flux_per_pole", flux_per_pole)
    return voltage / (EMF_CONSTANT * frequency * flux_per_pole * EMF_WINDING_FACTOR)


def induced_voltage(frequency: float, turns_per_phase: float, flux_per_pole: float) -> float:
    """E = 4.44 f N Φ Kw with a typical winding factor [V]."""
    return EMF_CONSTANT * frequency * turns_per_phase * flux_per_pole * EMF_WINDING_FACTOR


def specific_power_per_mass(power_kw: float, diameter_mm: float, length_mm: float) -> float:
    """
    Output per unit of estimated core mass [kW/kg].

    The mass is a solid steel cylinder of the stator diameter and length.
    Returns 0 when the estimated mass is not positive.
    """
    volume = math.pi * math.pow(diameter_mm / 2000, 2) * (length_mm / 1000)
    weight = volume * DENSITY_STEEL
    if weight <= 0:
        return 0
    return power_kw / weight
