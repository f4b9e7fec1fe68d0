"""
Motor specification models.

Two input shapes are supported, each feeding its own formula set:

- MotorSpecification: the core-data shape (delta/star ratings plus measured
  stator core geometry in metres) used by the staged pipeline.
- RatedMotorSpecification: the rated shape (power with unit, single nominal
  voltage, overall dimensions in millimetres) used by the rated-physics
  approximation.

Both are immutable. Construction validates every field in a fixed order and
raises InvalidParameter on the first violation.
"""

from dataclasses import dataclass
from typing import Optional
import math

from .quantities import Power, Voltage, Current
from ..exceptions import InvalidParameter
from ..utils.constants import SQRT_3, DesignLimits


def _check_name(field: str, name: str):
    if not name or not name.strip():
        raise InvalidParameter(field, "cannot be empty")
    if len(name) > DesignLimits.NAME_MAX_LENGTH:
        raise InvalidParameter(
            field, f"cannot exceed {DesignLimits.NAME_MAX_LENGTH} characters")


def _check_number(field: str, value: float):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(field, f"must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameter(field, f"must be finite, got {value}")


def _check_positive(field: str, value: float, maximum: Optional[float] = None):
    _check_number(field, value)
    if not value > 0:
        raise InvalidParameter(field, f"must be positive, got {value}")
    if maximum is not None and value > maximum:
        raise InvalidParameter(field, f"cannot exceed {maximum}, got {value}")


def _check_poles(poles: int):
    if isinstance(poles, bool) or not isinstance(poles, int):
        raise InvalidParameter("poles", f"must be an integer, got {poles!r}")
    if poles <= 0 or poles % 2 != 0:
        raise InvalidParameter("poles", f"must be a positive even number, got {poles}")
    if poles > DesignLimits.POLES_MAX:
        raise InvalidParameter(
            "poles", f"cannot exceed {DesignLimits.POLES_MAX}, got {poles}")


def _check_efficiency(efficiency: float):
    _check_number("efficiency", efficiency)
    if not 0 < efficiency <= DesignLimits.SPEC_EFFICIENCY_MAX:
        raise InvalidParameter(
            "efficiency",
            f"must be in (0, {DesignLimits.SPEC_EFFICIENCY_MAX}], got {efficiency}")


def _check_power_factor(power_factor: float):
    _check_number("power_factor", power_factor)
    if not 0 < power_factor <= 1:
        raise InvalidParameter(
            "power_factor", f"must be in (0, 1], got {power_factor}")


@dataclass(frozen=True)
class CoreData:
    """
    Stator core geometry.

    Attributes:
        internal_diameter: Stator bore diameter D [m]
        stack_length: Lamination stack length L [m]
        slot_depth: Slot depth h [m]
        crown_height: Stator yoke (crown) height hc [m]
        stator_tooth_width: Stator tooth width bd [m]
        number_of_slots: Number of stator slots N

    Validated by the owning MotorSpecification, after its electrical fields.
    """
    internal_diameter: float
    stack_length: float
    slot_depth: float
    crown_height: float
    stator_tooth_width: float
    number_of_slots: int

    def validate(self):
        """Raise InvalidParameter on the first geometry field out of bounds."""
        _check_positive("internal_diameter", self.internal_diameter)
        _check_positive("stack_length", self.stack_length)
        _check_positive("slot_depth", self.slot_depth)
        _check_positive("crown_height", self.crown_height)
        _check_positive("stator_tooth_width", self.stator_tooth_width)
        if (isinstance(self.number_of_slots, bool) or
                not isinstance(self.number_of_slots, int)):
            raise InvalidParameter(
                "number_of_slots", f"must be an integer, got {self.number_of_slots!r}")
        _check_positive("number_of_slots", self.number_of_slots)


@dataclass(frozen=True)
class MotorSpecification:
    """
    Core-data motor specification for the staged pipeline.

    Fields are validated in this order: model, power_hp, voltage_delta,
    voltage_star, current_delta, current_star, frequency, rpm, poles,
    efficiency, power_factor, current_density, then the core geometry.

    Attributes:
        model: Motor model name (1-100 characters)
        power_hp: Rated power [HP]
        voltage_delta: Rated line voltage in delta connection
        voltage_star: Rated line voltage in star connection
        current_delta: Rated line current in delta connection
        current_star: Rated line current in star connection
        frequency: Supply frequency [Hz]
        rpm: Rated speed [rpm]
        poles: Number of poles (even, 2-100)
        efficiency: Rated efficiency (fraction)
        power_factor: Rated power factor (fraction)
        core: Stator core geometry
        current_density: Target current density [A/mm²] (informational)
    """
    model: str
    power_hp: float
    voltage_delta: Voltage
    voltage_star: Voltage
    current_delta: Current
    current_star: Current
    frequency: float
    rpm: float
    poles: int
    efficiency: float
    power_factor: float
    core: CoreData
    current_density: Optional[float] = None

    def __post_init__(self):
        _check_name("model", self.model)
        _check_positive("power_hp", self.power_hp, DesignLimits.POWER_MAX)
        _check_positive("voltage_delta", self.voltage_delta.value)
        _check_positive("voltage_star", self.voltage_star.value)
        _check_positive("current_delta", self.current_delta.value)
        _check_positive("current_star", self.current_star.value)
        _check_positive("frequency", self.frequency, DesignLimits.FREQUENCY_MAX)
        _check_positive("rpm", self.rpm)
        _check_poles(self.poles)
        _check_efficiency(self.efficiency)
        _check_power_factor(self.power_factor)
        if self.current_density is not None:
            _check_positive("current_density", self.current_density)
        if not isinstance(self.core, CoreData):
            raise InvalidParameter("core", "must be a CoreData instance")
        self.core.validate()

    @property
    def phase_voltage(self) -> float:
        """Phase voltage of the star connection [V]."""
        return self.voltage_star.value / SQRT_3

    @property
    def synchronous_speed(self) -> float:
        """Synchronous speed [rpm]."""
        return 120 * self.frequency / self.poles

    @property
    def slip(self) -> float:
        """Rated slip."""
        return (self.synchronous_speed - self.rpm) / self.synchronous_speed


@dataclass(frozen=True)
class RatedMotorSpecification:
    """
    Rated motor specification for the rated-physics approximation.

    Fields are validated in this order: name, power, voltage, frequency,
    poles, efficiency, power_factor, current_density, diameter, length,
    air_gap_length.

    Attributes:
        name: Motor name (1-100 characters)
        power: Rated power with unit
        voltage: Nominal line voltage
        frequency: Supply frequency [Hz]
        poles: Number of poles (even, 2-100)
        efficiency: Rated efficiency (fraction)
        power_factor: Rated power factor (fraction)
        current_density: Conductor current density [A/mm²]
        diameter: Stator diameter [mm]
        length: Stack length [mm]
        air_gap_length: Air gap length [mm]
    """
    name: str
    power: Power
    voltage: Voltage
    frequency: float
    poles: int
    efficiency: float
    power_factor: float
    current_density: float
    diameter: float
    length: float
    air_gap_length: float

    def __post_init__(self):
        _check_name("name", self.name)
        _check_positive("power", self.power.value, DesignLimits.POWER_MAX)
        _check_positive("voltage", self.voltage.value)
        _check_positive("frequency", self.frequency, DesignLimits.FREQUENCY_MAX)
        _check_poles(self.poles)
        _check_efficiency(self.efficiency)
        _check_power_factor(self.power_factor)
        _check_positive("current_density", self.current_density)
        _check_positive("diameter", self.diameter)
        _check_positive("length", self.length)
        _check_positive("air_gap_length", self.air_gap_length)

    @property
    def aspect_ratio(self) -> float:
        """Length / diameter ratio."""
        return self.length / self.diameter

    @property
    def synchronous_speed(self) -> float:
        """Synchronous speed [rpm]."""
        return 120 * self.frequency / self.poles

    @property
    def air_gap_radius(self) -> float:
        """Air gap radius [m]."""
        return self.diameter / 2000


# Factory functions taking plain numbers
def create_specification(
    model: str,
    power_hp: float,
    power_factor: float,
    rpm: float,
    poles: int,
    efficiency: float,
    frequency: float,
    voltage_delta: float,
    voltage_star: float,
    current_delta: float,
    current_star: float,
    slot_depth: float,
    crown_height: float,
    stator_tooth_width: float,
    number_of_slots: int,
    stack_length: float,
    internal_diameter: float,
    current_density: Optional[float] = None
) -> MotorSpecification:
    """Create a core-data specification from plain values (SI units)."""
    core = CoreData(
        internal_diameter=internal_diameter,
        stack_length=stack_length,
        slot_depth=slot_depth,
        crown_height=crown_height,
        stator_tooth_width=stator_tooth_width,
        number_of_slots=number_of_slots
    )
    return MotorSpecification(
        model=model,
        power_hp=power_hp,
        voltage_delta=Voltage(voltage_delta),
        voltage_star=Voltage(voltage_star),
        current_delta=Current(current_delta),
        current_star=Current(current_star),
        frequency=frequency,
        rpm=rpm,
        poles=poles,
        efficiency=efficiency,
        power_factor=power_factor,
        core=core,
        current_density=current_density
    )


def create_rated_specification(
    name: str,
    power_rating: float,
    voltage: float,
    frequency: float,
    poles: int,
    efficiency: float,
    power_factor: float,
    current_density: float,
    diameter: float,
    length: float,
    air_gap_length: float,
    power_unit: str = 'CV'
) -> RatedMotorSpecification:
    """Create a rated specification from plain values (dimensions in mm)."""
    return RatedMotorSpecification(
        name=name,
        power=Power(power_rating, power_unit),
        voltage=Voltage(voltage),
        frequency=frequency,
        poles=poles,
        efficiency=efficiency,
        power_factor=power_factor,
        current_density=current_density,
        diameter=diameter,
        length=length,
        air_gap_length=air_gap_length
    )
