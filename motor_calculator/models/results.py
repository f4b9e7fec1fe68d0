"""
Calculation results, harmonic content and validation alerts.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, List, Dict, Any
import math

from .quantities import MagneticInduction


class AlertType(Enum):
    """Severity of a validation alert."""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class ValidationAlert:
    """
    A soft-limit finding attached to a successful calculation.

    Attributes:
        severity: Info, Warning or Critical
        message: Human-readable description
        parameter: Name of the result or input field concerned
        current_value: Offending value, in the units of that field
        recommended_min: Lower end of the recommended range
        recommended_max: Upper end of the recommended range
    """
    severity: AlertType
    message: str
    parameter: str
    current_value: Optional[float] = None
    recommended_min: Optional[float] = None
    recommended_max: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['severity'] = self.severity.value
        return data


@dataclass(frozen=True)
class HarmonicResults:
    """
    Harmonic winding factor magnitudes for the odd orders 5 to 17.

    Attributes:
        fifth, seventh, eleventh, thirteenth, seventeenth: |k_d * k_p| per order
        fundamental: Fundamental winding factor, when known
    """
    fifth: float
    seventh: float
    eleventh: float
    thirteenth: float
    seventeenth: float
    fundamental: Optional[float] = None

    @property
    def total_harmonic_distortion(self) -> float:
        """Euclidean norm of the five harmonic magnitudes."""
        return math.sqrt(
            self.fifth ** 2 +
            self.seventh ** 2 +
            self.eleventh ** 2 +
            self.thirteenth ** 2 +
            self.seventeenth ** 2
        )

    def by_order(self) -> Dict[int, float]:
        """Magnitudes keyed by harmonic order."""
        return {
            5: self.fifth,
            7: self.seventh,
            11: self.eleventh,
            13: self.thirteenth,
            17: self.seventeenth,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['total_harmonic_distortion'] = self.total_harmonic_distortion
        return data


def _has_critical(alerts: List[ValidationAlert]) -> bool:
    return any(a.severity is AlertType.CRITICAL for a in alerts)


@dataclass
class CalculationResults:
    """
    Complete output of the staged pipeline.

    Units: flux [Wb], induction [T], area [m²], resistance [Ω], losses [W],
    wire section [mm²], current density [A/mm²], specific power [W/m³].
    """
    # Flux
    total_flux: float
    flux_per_pole: float

    # Inductions
    air_gap_induction: float
    stator_tooth_induction: float
    stator_crown_induction: float

    # Winding factors
    pitch_factor: float
    distribution_factor: float
    winding_factor: float
    slots_per_pole_per_phase: float

    air_gap_area: float
    turns_per_phase: int

    # Conductors
    resistance_per_phase: float
    joule_losses: float
    wire_section: float
    current_density: float
    awg_size: str

    specific_power: float
    harmonics: HarmonicResults
    alerts: List[ValidationAlert] = field(default_factory=list)

    @property
    def total_harmonic_distortion(self) -> float:
        return self.harmonics.total_harmonic_distortion

    @property
    def has_critical_alerts(self) -> bool:
        return _has_critical(self.alerts)

    def alerts_by_severity(self, severity: AlertType) -> List[ValidationAlert]:
        return [a for a in self.alerts if a.severity is severity]

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict representation for serialization."""
        data = {
            name: getattr(self, name)
            for name in self.__dataclass_fields__
            if name not in ('harmonics', 'alerts')
        }
        data['harmonics'] = self.harmonics.to_dict()
        data['alerts'] = [a.to_dict() for a in self.alerts]
        return data


@dataclass
class RatedCalculationResults:
    """
    Output of the rated-physics approximation.

    Units: flux [Wb], voltage [V], specific power [kW/kg], speed [rpm],
    torque [N·m].
    """
    flux_per_pole: float
    air_gap_induction: MagneticInduction
    tooth_induction: MagneticInduction
    yoke_induction: MagneticInduction
    winding_factor: float
    turns_per_phase: float
    induced_voltage: float
    specific_power: float
    synchronous_speed: float
    rated_torque: float
    harmonics: HarmonicResults
    alerts: List[ValidationAlert] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when none of the design checks raised an alert."""
        return len(self.alerts) == 0

    @property
    def has_critical_alerts(self) -> bool:
        return _has_critical(self.alerts)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict representation for serialization."""
        return {
            'flux_per_pole': self.flux_per_pole,
            'air_gap_induction': self.air_gap_induction.value,
            'tooth_induction': self.tooth_induction.value,
            'yoke_induction': self.yoke_induction.value,
            'winding_factor': self.winding_factor,
            'turns_per_phase': self.turns_per_phase,
            'induced_voltage': self.induced_voltage,
            'specific_power': self.specific_power,
            'synchronous_speed': self.synchronous_speed,
            'rated_torque': self.rated_torque,
            'harmonics': self.harmonics.to_dict(),
            'is_valid': self.is_valid,
            'alerts': [a.to_dict() for a in self.alerts],
        }
