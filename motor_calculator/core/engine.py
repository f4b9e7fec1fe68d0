"""
Calculation engine for three-phase induction motor parameters.

Two formula sets are available, selected explicitly by the caller:

- compute(): the staged pipeline over a core-data MotorSpecification
  1. Input screening
  2. Flux estimation from seed turns and winding factor
  3. Magnetic inductions
  4. Winding factors
  5. Turns per phase and one flux refinement
  6. Resistance and Joule losses
  7. Wire sizing
  8. Specific power
  9. Harmonics
  10. Final validation
- compute_rated(): the rated-physics approximation over a
  RatedMotorSpecification

Neither mutates its input. Soft-limit findings become ValidationAlerts on
the result; structural problems raise MotorCalculatorError subclasses.
"""

import logging
import math
from typing import List, Optional

from ..models.specification import MotorSpecification, RatedMotorSpecification
from ..models.quantities import MagneticInduction
from ..models.results import (
    AlertType, ValidationAlert, HarmonicResults,
    CalculationResults, RatedCalculationResults
)
from ..calculations.magnetic import (
    estimate_flux_per_pole, calculate_flux_per_pole,
    calculate_air_gap_area, calculate_air_gap_induction,
    calculate_tooth_induction, calculate_yoke_induction
)
from ..calculations.winding import (
    WindingConfiguration, calculate_turns_per_phase, typical_harmonics
)
from ..calculations.conductor import (
    conductor_length, phase_resistance, joule_losses,
    wire_section, section_to_m2, nearest_awg
)
from ..calculations import rated
from ..utils.constants import (
    DesignLimits, PLACEHOLDER_WIRE_SECTION, WATTS_PER_HP, WIRE_CURRENT_DENSITY,
    TOOTH_AREA_RATIO, YOKE_AREA_RATIO,
    TYPICAL_PITCH_FACTOR, TYPICAL_DISTRIBUTION_FACTOR
)

logger = logging.getLogger(__name__)


class MotorCalculationEngine:
    """
    Staged pipeline for a core-data motor specification.

    Usage:
        engine = MotorCalculationEngine(spec)
        results = engine.run()

    An engine instance is single-use; compute() creates a fresh one per call.
    """

    def __init__(self, spec: MotorSpecification, verbose: bool = False):
        """
        Initialize the engine.

        Args:
            spec: Motor specification
            verbose: Log stage progress at INFO instead of DEBUG
        """
        self.spec = spec
        self.core = spec.core
        self.verbose = verbose

        # Populated stage by stage
        self.alerts: List[ValidationAlert] = []
        self.voltage_phase: float = spec.phase_voltage
        self.flux_per_pole: Optional[float] = None
        self.total_flux: Optional[float] = None
        self.air_gap_area: Optional[float] = None
        self.air_gap_induction: Optional[float] = None
        self.stator_tooth_induction: Optional[float] = None
        self.stator_crown_induction: Optional[float] = None
        self.winding: Optional[WindingConfiguration] = None
        self.turns_per_phase: Optional[int] = None
        self.conductor_length: Optional[float] = None
        self.resistance_per_phase: Optional[float] = None
        self.joule_losses: Optional[float] = None
        self.current_density: Optional[float] = None
        self.wire_section: Optional[float] = None
        self.awg_size: Optional[str] = None
        self.specific_power: Optional[float] = None
        self.harmonics: Optional[HarmonicResults] = None

    def _log(self, message: str, *args):
        logger.log(logging.INFO if self.verbose else logging.DEBUG, message, *args)

    def _alert(self, severity: AlertType, message: str, parameter: str,
               current_value: Optional[float] = None,
               recommended_min: Optional[float] = None,
               recommended_max: Optional[float] = None):
        self.alerts.append(ValidationAlert(
            severity=severity,
            message=message,
            parameter=parameter,
            current_value=current_value,
            recommended_min=recommended_min,
            recommended_max=recommended_max
        ))
        self._log("  %s alert on %s: %s", severity.value, parameter, message)

    def run(self) -> CalculationResults:
        """
        Run every stage in order.

        Returns:
            CalculationResults with the accumulated alerts
        """
        self._log("Motor calculation for %s", self.spec.model)

        self._screen_inputs()
        self._estimate_flux()
        self._calculate_inductions()
        self._calculate_winding_factors()
        self._refine_turns_per_phase()
        self._calculate_resistance()
        self._size_wire()
        self._calculate_specific_power()
        self._calculate_harmonics()
        self._final_validation()

        return self._compile_results()

    def _screen_inputs(self):
        """Stage 1: soft checks on the rated values."""
        spec = self.spec
        if spec.power_hp <= 0:
            self._alert(AlertType.CRITICAL, "Power must be greater than zero", "power_hp",
                        current_value=spec.power_hp)

        if not DesignLimits.EFFICIENCY_MIN <= spec.efficiency <= DesignLimits.EFFICIENCY_MAX:
            self._alert(
                AlertType.WARNING,
                "Efficiency outside the typical range (80-105%)",
                "efficiency",
                current_value=spec.efficiency,
                recommended_min=DesignLimits.EFFICIENCY_MIN,
                recommended_max=DesignLimits.EFFICIENCY_MAX
            )

        if not DesignLimits.POWER_FACTOR_MIN <= spec.power_factor <= DesignLimits.POWER_FACTOR_MAX:
            self._alert(
                AlertType.CRITICAL,
                "Power factor must be between 0.1 and 1.0",
                "power_factor",
                current_value=spec.power_factor,
                recommended_min=DesignLimits.POWER_FACTOR_MIN,
                recommended_max=DesignLimits.POWER_FACTOR_MAX
            )

    def _estimate_flux(self):
        """Stage 2: seed flux per pole."""
        self.flux_per_pole = estimate_flux_per_pole(self.voltage_phase, self.spec.frequency)
        self.total_flux = self.flux_per_pole * self.spec.poles
        self._log("  Seed flux per pole: %.6f Wb", self.flux_per_pole)

    def _calculate_inductions(self):
        """Stage 3: air gap, stator tooth and stator crown inductions."""
        core = self.core
        self.air_gap_area = calculate_air_gap_area(
            core.internal_diameter, core.stack_length, self.spec.poles)
        self.air_gap_induction = calculate_air_gap_induction(
            self.flux_per_pole, self.air_gap_area)
        self.stator_tooth_induction = calculate_tooth_induction(
            self.flux_per_pole, core.stator_tooth_width * core.stack_length)
        self.stator_crown_induction = calculate_yoke_induction(
            self.flux_per_pole, core.crown_height * core.stack_length)

        self._log("  B air gap: %.4f T, B tooth: %.4f T, B crown: %.4f T",
                  self.air_gap_induction, self.stator_tooth_induction,
                  self.stator_crown_induction)

        if self.stator_tooth_induction > DesignLimits.TOOTH_INDUCTION_MAX:
            self._alert(
                AlertType.CRITICAL,
                "Magnetic saturation in the stator teeth",
                "stator_tooth_induction",
                current_value=self.stator_tooth_induction,
                recommended_max=DesignLimits.TOOTH_INDUCTION_MAX
            )

        if self.stator_crown_induction > DesignLimits.CROWN_INDUCTION_MAX:
            self._alert(
                AlertType.CRITICAL,
                "Magnetic saturation in the stator crown",
                "stator_crown_induction",
                current_value=self.stator_crown_induction,
                recommended_max=DesignLimits.CROWN_INDUCTION_MAX
            )

    def _calculate_winding_factors(self):
        """Stage 4: pitch, distribution and winding factors."""
        self.winding = WindingConfiguration(
            number_of_slots=self.core.number_of_slots,
            poles=self.spec.poles
        )
        self._log("  Slots per pole per phase q: %.3f", self.winding.q)
        self._log("  Winding factor: %.4f", self.winding.winding_factor)

    def _refine_turns_per_phase(self):
        """
        Stage 5: integral turns per phase, then one flux recompute.

        A single pass, not iterated to convergence.
        """
        winding_factor = self.winding.winding_factor
        self.turns_per_phase = calculate_turns_per_phase(
            self.voltage_phase, self.spec.frequency, self.flux_per_pole, winding_factor)
        self.flux_per_pole = calculate_flux_per_pole(
            self.voltage_phase, self.spec.frequency, self.turns_per_phase, winding_factor)
        self.total_flux = self.flux_per_pole * self.spec.poles
        self._log("  Turns per phase: %d, refined flux per pole: %.6f Wb",
                  self.turns_per_phase, self.flux_per_pole)

    def _calculate_resistance(self):
        """Stage 6: resistance over a placeholder section and Joule losses."""
        core = self.core
        self.conductor_length = conductor_length(
            self.turns_per_phase, core.stack_length, core.internal_diameter, self.spec.poles)
        self.resistance_per_phase = phase_resistance(
            self.conductor_length, PLACEHOLDER_WIRE_SECTION)
        self.joule_losses = joule_losses(self.spec.current_star.value, self.resistance_per_phase)

    def _size_wire(self):
        """Stage 7: wire section, final resistance and gauge.

        Joule losses keep the placeholder-section value from stage 6.
        """
        self.current_density = WIRE_CURRENT_DENSITY
        self.wire_section = wire_section(self.spec.current_star.value, self.current_density)
        self.resistance_per_phase = phase_resistance(
            self.conductor_length, section_to_m2(self.wire_section))
        self.awg_size = nearest_awg(self.wire_section)

        self._log("  Wire section: %.3f mm² (%s), R: %.6f Ω",
                  self.wire_section, self.awg_size, self.resistance_per_phase)

        if self.current_density > DesignLimits.CURRENT_DENSITY_WARNING:
            self._alert(
                AlertType.WARNING,
                "High current density, may cause excessive heating",
                "current_density",
                current_value=self.current_density,
                recommended_max=DesignLimits.CURRENT_DENSITY_WARNING
            )

    def _calculate_specific_power(self):
        """Stage 8: output per unit of D²L volume."""
        core = self.core
        power_watts = self.spec.power_hp * WATTS_PER_HP
        volume = math.pow(core.internal_diameter, 2) * core.stack_length
        self.specific_power = power_watts / volume

        if not DesignLimits.SPECIFIC_POWER_MIN <= self.specific_power <= DesignLimits.SPECIFIC_POWER_MAX:
            self._alert(
                AlertType.INFO,
                "Specific power outside the typical range",
                "specific_power",
                current_value=self.specific_power,
                recommended_min=DesignLimits.SPECIFIC_POWER_MIN,
                recommended_max=DesignLimits.SPECIFIC_POWER_MAX
            )

    def _calculate_harmonics(self):
        """Stage 9: harmonic winding factors."""
        self.harmonics = self.winding.harmonics()
        self._log("  THD: %.4f", self.harmonics.total_harmonic_distortion)

    def _final_validation(self):
        """Stage 10: sizing and harmonic distortion checks."""
        if self.specific_power < DesignLimits.SPECIFIC_POWER_OVERSIZED:
            self._alert(
                AlertType.WARNING,
                "Motor may be oversized",
                "specific_power",
                current_value=self.specific_power,
                recommended_min=DesignLimits.SPECIFIC_POWER_OVERSIZED
            )

        if self.specific_power > DesignLimits.SPECIFIC_POWER_UNDERSIZED:
            self._alert(
                AlertType.WARNING,
                "Motor may be undersized",
                "specific_power",
                current_value=self.specific_power,
                recommended_max=DesignLimits.SPECIFIC_POWER_UNDERSIZED
            )

        thd = self.harmonics.total_harmonic_distortion
        if thd > DesignLimits.THD_MAX:
            self._alert(
                AlertType.WARNING,
                "High harmonic distortion",
                "total_harmonic_distortion",
                current_value=thd,
                recommended_max=DesignLimits.THD_MAX
            )

    def _compile_results(self) -> CalculationResults:
        return CalculationResults(
            total_flux=self.total_flux,
            flux_per_pole=self.flux_per_pole,
            air_gap_induction=self.air_gap_induction,
            stator_tooth_induction=self.stator_tooth_induction,
            stator_crown_induction=self.stator_crown_induction,
            pitch_factor=self.winding.pitch_factor,
            distribution_factor=self.winding.distribution_factor,
            winding_factor=self.winding.winding_factor,
            slots_per_pole_per_phase=self.winding.q,
            air_gap_area=self.air_gap_area,
            turns_per_phase=self.turns_per_phase,
            resistance_per_phase=self.resistance_per_phase,
            joule_losses=self.joule_losses,
            wire_section=self.wire_section,
            current_density=self.current_density,
            awg_size=self.awg_size,
            specific_power=self.specific_power,
            harmonics=self.harmonics,
            alerts=list(self.alerts)
        )


def compute(spec: MotorSpecification, verbose: bool = False) -> CalculationResults:
    """
    Run the staged pipeline for a core-data specification.

    Args:
        spec: Motor specification
        verbose: Log stage progress at INFO level

    Returns:
        CalculationResults

    Raises:
        InvalidParameter: a denominator of the pipeline is not positive
    """
    if not isinstance(spec, MotorSpecification):
        raise TypeError(
            f"compute() expects a MotorSpecification, got {type(spec).__name__}")
    return MotorCalculationEngine(spec, verbose=verbose).run()


def _rated_alerts(spec: RatedMotorSpecification,
                  air_gap_induction: float) -> List[ValidationAlert]:
    """Design checks of the rated-physics approximation."""
    alerts = []

    if air_gap_induction > DesignLimits.AIR_GAP_INDUCTION_MAX:
        alerts.append(ValidationAlert(
            AlertType.CRITICAL,
            "Air gap induction exceeds 1.1 T - magnetic saturation risk",
            "air_gap_induction",
            current_value=air_gap_induction,
            recommended_max=DesignLimits.AIR_GAP_INDUCTION_MAX
        ))

    if spec.current_density > DesignLimits.CURRENT_DENSITY_RECOMMENDED:
        alerts.append(ValidationAlert(
            AlertType.WARNING,
            "Current density above 4.5 A/mm² - consider increasing conductor area",
            "current_density",
            current_value=spec.current_density,
            recommended_max=DesignLimits.CURRENT_DENSITY_RECOMMENDED
        ))

    if spec.current_density > DesignLimits.CURRENT_DENSITY_MAX:
        alerts.append(ValidationAlert(
            AlertType.CRITICAL,
            "Current density exceeds 6.5 A/mm² - unsafe operating condition",
            "current_density",
            current_value=spec.current_density,
            recommended_max=DesignLimits.CURRENT_DENSITY_MAX
        ))

    if spec.efficiency < DesignLimits.REQUEST_EFFICIENCY_MIN:
        alerts.append(ValidationAlert(
            AlertType.WARNING,
            "Efficiency below 90% - design optimization needed",
            "efficiency",
            current_value=spec.efficiency,
            recommended_min=DesignLimits.REQUEST_EFFICIENCY_MIN
        ))

    if spec.efficiency > DesignLimits.REQUEST_EFFICIENCY_MAX:
        alerts.append(ValidationAlert(
            AlertType.CRITICAL,
            "Efficiency above 105% - physically impossible",
            "efficiency",
            current_value=spec.efficiency,
            recommended_max=DesignLimits.REQUEST_EFFICIENCY_MAX
        ))

    if spec.power_factor < DesignLimits.POWER_FACTOR_WARNING:
        alerts.append(ValidationAlert(
            AlertType.WARNING,
            "Power factor below 0.8 - consider power factor correction",
            "power_factor",
            current_value=spec.power_factor,
            recommended_min=DesignLimits.POWER_FACTOR_WARNING
        ))

    aspect_ratio = spec.aspect_ratio
    if aspect_ratio > DesignLimits.ASPECT_RATIO_MAX:
        alerts.append(ValidationAlert(
            AlertType.WARNING,
            "Length/Diameter ratio > 3.0 - mechanical stability concerns",
            "aspect_ratio",
            current_value=aspect_ratio,
            recommended_max=DesignLimits.ASPECT_RATIO_MAX
        ))

    if aspect_ratio < DesignLimits.ASPECT_RATIO_MIN:
        alerts.append(ValidationAlert(
            AlertType.WARNING,
            "Length/Diameter ratio < 0.5 - inefficient magnetic circuit",
            "aspect_ratio",
            current_value=aspect_ratio,
            recommended_min=DesignLimits.ASPECT_RATIO_MIN
        ))

    return alerts


def compute_rated(spec: RatedMotorSpecification) -> RatedCalculationResults:
    """
    Run the rated-physics approximation.

    Args:
        spec: Rated motor specification

    Returns:
        RatedCalculationResults

    Raises:
        UnknownUnit: the power unit has no conversion to Watts
        InvalidParameter: a denominator is not positive
    """
    if not isinstance(spec, RatedMotorSpecification):
        raise TypeError(
            f"compute_rated() expects a RatedMotorSpecification, got {type(spec).__name__}")

    logger.debug("Rated calculation for %s", spec.name)

    power_watts = spec.power.to_watts()
    speed = rated.synchronous_speed(spec.frequency, spec.poles)
    torque = rated.rated_torque(power_watts, speed)

    air_gap_area = rated.air_gap_surface(spec.diameter, spec.length)
    flux_per_pole = rated.flux_from_power(power_watts, spec.frequency, spec.poles)

    air_gap_induction = calculate_air_gap_induction(flux_per_pole, air_gap_area)
    tooth_induction = calculate_tooth_induction(flux_per_pole, air_gap_area * TOOTH_AREA_RATIO)
    yoke_induction = calculate_yoke_induction(flux_per_pole, air_gap_area * YOKE_AREA_RATIO)

    winding_factor = TYPICAL_PITCH_FACTOR * TYPICAL_DISTRIBUTION_FACTOR

    turns = rated.estimate_turns_per_phase(spec.voltage.value, spec.frequency, flux_per_pole)
    emf = rated.induced_voltage(spec.frequency, turns, flux_per_pole)

    specific_power = rated.specific_power_per_mass(
        power_watts / 1000, spec.diameter, spec.length)

    alerts = _rated_alerts(spec, air_gap_induction)
    logger.debug("Rated calculation for %s finished with %d alerts", spec.name, len(alerts))

    return RatedCalculationResults(
        flux_per_pole=flux_per_pole,
        air_gap_induction=MagneticInduction(air_gap_induction),
        tooth_induction=MagneticInduction(tooth_induction),
        yoke_induction=MagneticInduction(yoke_induction),
        winding_factor=winding_factor,
        turns_per_phase=turns,
        induced_voltage=emf,
        specific_power=specific_power,
        synchronous_speed=speed,
        rated_torque=torque,
        harmonics=typical_harmonics(),
        alerts=alerts
    )
