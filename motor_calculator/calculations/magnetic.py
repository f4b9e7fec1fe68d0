"""
Magnetic circuit calculations: flux per pole, air gap area and inductions.

All lengths in metres, flux in Wb, inductions in T.
"""

import math

from ..exceptions import InvalidParameter
from ..utils.constants import (
    EMF_CONSTANT, SEED_TURNS_PER_PHASE, SEED_WINDING_FACTOR
)


def require_positive(name: str, value: float):
    """Raise InvalidParameter unless value is strictly positive."""
    if not value > 0:
        raise InvalidParameter(name, f"must be positive, got {value}")


def estimate_flux_per_pole(
    voltage_phase: float,
    frequency: float,
    turns_seed: float = SEED_TURNS_PER_PHASE,
    winding_factor_seed: float = SEED_WINDING_FACTOR
) -> float:
    """
    Initial flux per pole estimate from seed turns and winding factor.

    Φ = (E * 60) / (4.44 * f * N_seed * Kw_seed)

    Args:
        voltage_phase: Phase voltage [V]
        frequency: Supply frequency [Hz]
        turns_seed: Assumed turns per phase
        winding_factor_seed: Assumed winding factor

    Returns:
        Flux per pole [Wb]
    """
    require_positive("frequency", frequency)
    return (voltage_phase * 60) / (
        EMF_CONSTANT * frequency * turns_seed * winding_factor_seed)


def calculate_flux_per_pole(
    voltage_phase: float,
    frequency: float,
    turns_per_phase: float,
    winding_factor: float
) -> float:
    """
    Flux per pole from the EMF equation.

    Φ = E / (4.44 * f * N * Kw)
    """
    require_positive("frequency", frequency)
    require_positive("turns_per_phase", turns_per_phase)
    require_positive("winding_factor", winding_factor)
    return voltage_phase / (EMF_CONSTANT * frequency * turns_per_phase * winding_factor)


def calculate_air_gap_area(internal_diameter: float, stack_length: float, poles: int) -> float:
    """
    Air gap area under one pole [m²].

    A = π * D * L / poles
    """
    require_positive("poles", poles)
    return (math.pi * internal_diameter * stack_length) / poles


def calculate_air_gap_induction(flux_per_pole: float, air_gap_area: float) -> float:
    """Air gap flux density B = Φ / A [T]."""
    require_positive("air_gap_area", air_gap_area)
    return flux_per_pole / air_gap_area


def calculate_tooth_induction(flux: float, tooth_area: float) -> float:
    """Stator tooth flux density B = Φ / A_tooth [T]."""
    require_positive("tooth_area", tooth_area)
    return flux / tooth_area


def calculate_yoke_induction(flux: float, yoke_area: float) -> float:
    """
    Stator yoke (crown) flux density [T].

    The yoke flux splits into two return paths, so each carries half.
    """
    require_positive("yoke_area", yoke_area)
    return flux / (yoke_area * 2)
