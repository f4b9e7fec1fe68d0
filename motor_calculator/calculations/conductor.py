"""
Stator conductor calculations.

Includes:
- Mean turn length and conductor length per phase
- Phase resistance and Joule losses
- Wire cross-section sizing
- Nearest American Wire Gauge lookup
"""

import math

from ..utils.constants import (
    AWG_TABLE, MM2_TO_M2, RHO_COPPER, WIRE_CURRENT_DENSITY
)
from .magnetic import require_positive


def average_turn_length(stack_length: float, internal_diameter: float, poles: int) -> float:
    """
    Mean length of one turn [m].

    l_avg = 2 * (L + π * D / poles)
    """
    require_positive("poles", poles)
    return 2 * (stack_length + math.pi * internal_diameter / poles)


def conductor_length(turns_per_phase: float, stack_length: float,
                     internal_diameter: float, poles: int) -> float:
    """Total conductor length per phase [m]."""
    return turns_per_phase * average_turn_length(stack_length, internal_diameter, poles)


def phase_resistance(length: float, section_m2: float,
                     resistivity: float = RHO_COPPER) -> float:
    """
    Phase resistance R = ρ * l / A [Ω].

    Args:
        length: Conductor length [m]
        section_m2: Conductor cross-section [m²]
        resistivity: Conductor resistivity [Ω·m]
    """
    require_positive("wire_section", section_m2)
    return (resistivity * length) / section_m2


def joule_losses(current_phase: float, resistance: float, phases: int = 3) -> float:
    """Stator Joule losses P = m * I² * R [W]."""
    return phases * math.pow(current_phase, 2) * resistance


def wire_section(current: float, current_density: float = WIRE_CURRENT_DENSITY) -> float:
    """
    Conductor cross-section for a given current density.

    Args:
        current: Conductor current [A]
        current_density: Current density [A/mm²]

    Returns:
        Cross-section [mm²]
    """
    require_positive("current_density", current_density)
    return current / current_density


def section_to_m2(section_mm2: float) -> float:
    return section_mm2 * MM2_TO_M2


def nearest_awg(section_mm2: float) -> str:
    """
    Nearest standard wire gauge for a cross-section.

    The first table entry wins when two are equally close. Values outside
    the table map to the thinnest or thickest gauge.

    Args:
        section_mm2: Conductor cross-section [mm²]

    Returns:
        Gauge label, e.g. '10 AWG'
    """
    area, label = min(AWG_TABLE, key=lambda entry: abs(entry[0] - section_mm2))
    return label
