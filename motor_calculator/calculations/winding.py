"""
Stator winding calculations.
Handles slots per pole per phase, distribution and pitch factors, turns per
phase and harmonic winding factors.
"""

from dataclasses import dataclass, field
from typing import Tuple
import math

from ..exceptions import InvalidParameter
from ..models.results import HarmonicResults
from ..utils.constants import (
    EMF_CONSTANT, FULL_PITCH_FACTOR, HARMONIC_ORDERS,
    TYPICAL_SLOTS_PER_POLE, TYPICAL_SHORT_PITCH
)
from .magnetic import require_positive


@dataclass
class WindingConfiguration:
    """
    Three-phase full-pitch stator winding.

    Attributes:
        number_of_slots: Total number of stator slots
        poles: Number of poles
    """
    number_of_slots: int
    poles: int

    # Derived quantities
    q: float = field(init=False)           # Slots per pole per phase
    slot_angle: float = field(init=False)  # Mechanical angle between slots [rad]
    alpha: float = field(init=False)       # Slot angle times pole pairs [rad]

    def __post_init__(self):
        require_positive("number_of_slots", self.number_of_slots)
        require_positive("poles", self.poles)
        self.q = self.number_of_slots / (self.poles * 3.0)
        self.slot_angle = (2 * math.pi) / self.number_of_slots
        self.alpha = self.slot_angle * self.poles / 2

    @property
    def pitch_factor(self) -> float:
        """Pitch factor K_p (full pitch)."""
        return FULL_PITCH_FACTOR

    @property
    def distribution_factor(self) -> float:
        """
        Distribution (breadth) factor K_d.

        K_d = sin(q * α/2) / (q * sin(α/2))

        Exactly 1.0 when there is at most one slot per pole per phase.
        """
        if self.q > 1:
            return math.sin(self.q * self.alpha / 2) / (self.q * math.sin(self.alpha / 2))
        return 1.0

    @property
    def winding_factor(self) -> float:
        """Total winding factor K_w = K_p * K_d."""
        return self.pitch_factor * self.distribution_factor

    def harmonic_factor(self, harmonic: int) -> float:
        """
        Winding factor magnitude for one harmonic order.

        α_h = slot_angle * h / 2
        K_d,h = sin(q * α_h/2) / (q * sin(α_h/2))
        K_p,h = cos((h - 1) * π / (2h))

        Args:
            harmonic: Harmonic order (5, 7, 11, 13, 17, ...)

        Returns:
            |K_d,h * K_p,h|
        """
        alpha_h = self.slot_angle * harmonic / 2
        k_d = math.sin(self.q * alpha_h / 2) / (self.q * math.sin(alpha_h / 2))
        k_p = math.cos((harmonic - 1) * math.pi / (2 * harmonic))
        return abs(k_d * k_p)

    def harmonics(self) -> HarmonicResults:
        """Harmonic magnitudes for orders 5, 7, 11, 13 and 17."""
        fifth, seventh, eleventh, thirteenth, seventeenth = (
            self.harmonic_factor(h) for h in HARMONIC_ORDERS)
        return HarmonicResults(
            fifth=fifth,
            seventh=seventh,
            eleventh=eleventh,
            thirteenth=thirteenth,
            seventeenth=seventeenth,
            fundamental=self.winding_factor
        )


def calculate_turns_per_phase(
    voltage_phase: float,
    frequency: float,
    flux_per_pole: float,
    winding_factor: float
) -> int:
    """
    Turns per phase from the EMF equation, rounded to a whole number.

    N = E / (4.44 * f * Φ * Kw)

    Halves round to the nearest even integer.

    Returns:
        Turns per phase (at least one)
    """
    require_positive("frequency", frequency)
    require_positive("flux_per_pole", flux_per_pole)
    require_positive("winding_factor", winding_factor)
    turns = round(voltage_phase / (EMF_CONSTANT * frequency * flux_per_pole * winding_factor))
    if turns < 1:
        raise InvalidParameter(
            "turns_per_phase", f"rounds to {turns}; phase voltage is too low")
    return turns


def typical_harmonic_factor(
    harmonic: int,
    slots_per_pole: int = TYPICAL_SLOTS_PER_POLE,
    winding_pitch: float = TYPICAL_SHORT_PITCH
) -> float:
    """
    Harmonic winding factor for a typical short-pitched three-phase winding.

    K_d,h = sin(π/(2h)) / (q * sin(π/(2hq)))
    K_p,h = sin(h * π * y / 2)

    Args:
        harmonic: Harmonic order
        slots_per_pole: Slots per pole per phase q
        winding_pitch: Coil pitch as a fraction of the pole pitch

    Returns:
        |K_d,h * K_p,h|
    """
    k_d = math.sin(math.pi / (2 * harmonic)) / (
        slots_per_pole * math.sin(math.pi / (2 * harmonic * slots_per_pole)))
    k_p = math.sin(harmonic * math.pi * winding_pitch / 2)
    return abs(k_d * k_p)


def typical_harmonics() -> HarmonicResults:
    """Harmonic magnitudes of the typical winding for orders 5 to 17."""
    values: Tuple[float, ...] = tuple(typical_harmonic_factor(h) for h in HARMONIC_ORDERS)
    return HarmonicResults(*values)
