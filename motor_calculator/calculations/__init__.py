"""Calculation modules for motor electromagnetic parameters."""

from .magnetic import (
    require_positive,
    estimate_flux_per_pole,
    calculate_flux_per_pole,
    calculate_air_gap_area,
    calculate_air_gap_induction,
    calculate_tooth_induction,
    calculate_yoke_induction
)

from .winding import (
    WindingConfiguration,
    calculate_turns_per_phase,
    typical_harmonic_factor,
    typical_harmonics
)

from .conductor import (
    average_turn_length,
    conductor_length,
    phase_resistance,
    joule_losses,
    wire_section,
    section_to_m2,
    nearest_awg
)

from .rated import (
    synchronous_speed,
    rated_torque,
    air_gap_surface,
    flux_from_power,
    estimate_turns_per_phase,
    induced_voltage,
    specific_power_per_mass
)

__all__ = [
    # Magnetic
    'require_positive',
    'estimate_flux_per_pole',
    'calculate_flux_per_pole',
    'calculate_air_gap_area',
    'calculate_air_gap_induction',
    'calculate_tooth_induction',
    'calculate_yoke_induction',

    # Winding
    'WindingConfiguration',
    'calculate_turns_per_phase',
    'typical_harmonic_factor',
    'typical_harmonics',

    # Conductor
    'average_turn_length',
    'conductor_length',
    'phase_resistance',
    'joule_losses',
    'wire_section',
    'section_to_m2',
    'nearest_awg',

    # Rated
    'synchronous_speed',
    'rated_torque',
    'air_gap_surface',
    'flux_from_power',
    'estimate_turns_per_phase',
    'induced_voltage',
    'specific_power_per_mass'
]
