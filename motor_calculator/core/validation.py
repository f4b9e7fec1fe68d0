"""
Request validation rule sets.

Hard bounds checked on incoming request records before any calculation is
attempted. Each field has a list of rules; every rule is evaluated and the
failures are reported in table order. A Critical failure rejects the
request; a Warning is reported but lets the calculation run.

This gate is independent from the soft checks performed inside
the calculation engine: its efficiency window is stricter.

Requests may be mappings or objects exposing the fields as attributes.
"""

from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple
import math

from ..models.results import AlertType
from ..utils.constants import DesignLimits


@dataclass(frozen=True)
class ValidationMessage:
    """A single rule failure."""
    field: str
    message: str
    severity: AlertType = AlertType.CRITICAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field': self.field,
            'message': self.message,
            'severity': self.severity.value
        }


@dataclass
class ValidationResult:
    """Complete validation result."""
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True if no Critical rule failed."""
        return not self.errors

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity is AlertType.CRITICAL]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity is AlertType.WARNING]

    def errors_by_field(self) -> Dict[str, List[str]]:
        """Critical messages grouped by field, in rule order."""
        grouped: Dict[str, List[str]] = {}
        for m in self.errors:
            grouped.setdefault(m.field, []).append(m.message)
        return grouped


@dataclass(frozen=True)
class Rule:
    """
    One bound on one field.

    Attributes:
        field: Request field name
        check: Predicate returning True when the value is acceptable
        message: Fixed message reported on failure
        severity: Critical (rejects) or Warning (reported only)
    """
    field: str
    check: Callable[[Any], bool]
    message: str
    severity: AlertType = AlertType.CRITICAL

    def evaluate(self, value: Any) -> Optional[ValidationMessage]:
        if self.check(value):
            return None
        return ValidationMessage(self.field, self.message, self.severity)


# =============================================================================
# PREDICATES
# =============================================================================

def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value):
        return None
    return value


def greater_than(limit: float) -> Callable[[Any], bool]:
    def check(value):
        v = _number(value)
        return v is not None and v > limit
    return check


def at_most(limit: float) -> Callable[[Any], bool]:
    def check(value):
        v = _number(value)
        return v is not None and v <= limit
    return check


def between(lower: float, upper: float) -> Callable[[Any], bool]:
    """Inclusive range check."""
    def check(value):
        v = _number(value)
        return v is not None and lower <= v <= upper
    return check


def is_even(value: Any) -> bool:
    v = _number(value)
    return v is not None and float(v).is_integer() and int(v) % 2 == 0


def not_empty(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def max_length(limit: int) -> Callable[[Any], bool]:
    def check(value):
        return value is None or len(str(value)) <= limit
    return check


def optional(inner: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Accept an absent value, otherwise defer to inner."""
    def check(value):
        return value is None or inner(value)
    return check


def _positive_at_most(name: str, label: str, limit: float,
                      limit_text: str) -> Tuple[Rule, Rule]:
    return (
        Rule(name, greater_than(0), f"{label} must be positive"),
        Rule(name, at_most(limit), f"{label} cannot exceed {limit_text}"),
    )


def _poles_rules(name: str = 'poles') -> Tuple[Rule, ...]:
    return (
        Rule(name, greater_than(0), "Number of poles must be positive"),
        Rule(name, is_even, "Number of poles must be even"),
        Rule(name, at_most(DesignLimits.POLES_MAX),
             f"Number of poles cannot exceed {DesignLimits.POLES_MAX}"),
    )


# =============================================================================
# RULE TABLES
# =============================================================================

MOTOR_PARAMETER_RULES: Tuple[Rule, ...] = (
    Rule('name', not_empty, "Motor name is required"),
    Rule('name', max_length(DesignLimits.NAME_MAX_LENGTH),
         "Motor name cannot exceed 100 characters"),
    *_positive_at_most('power_rating', "Power rating", 10000, "10000 CV"),
    *_positive_at_most('voltage', "Voltage", 50000, "50kV"),
    *_positive_at_most('frequency', "Frequency", 400, "400 Hz"),
    *_poles_rules(),
    Rule('efficiency', between(DesignLimits.REQUEST_EFFICIENCY_MIN,
                               DesignLimits.REQUEST_EFFICIENCY_MAX),
         "Efficiency must be between 90-105%"),
    Rule('power_factor', between(0.1, 1.0),
         "Power factor must be between 0.1 and 1.0"),
    Rule('current_density', greater_than(0), "Current density must be positive"),
    Rule('current_density', at_most(DesignLimits.CURRENT_DENSITY_MAX),
         "Current density should not exceed 6.5 A/mm² for safety"),
    Rule('current_density', at_most(DesignLimits.CURRENT_DENSITY_RECOMMENDED),
         "Current density above 4.5 A/mm² is not recommended",
         severity=AlertType.WARNING),
    *_positive_at_most('diameter', "Diameter", 5000, "5000 mm"),
    *_positive_at_most('length', "Length", 10000, "10000 mm"),
    *_positive_at_most('air_gap_length', "Air gap length", 50, "50 mm"),
)


CORE_DATA_RULES: Tuple[Rule, ...] = (
    Rule('model', not_empty, "Motor model is required"),
    Rule('model', max_length(DesignLimits.NAME_MAX_LENGTH),
         "Motor model cannot exceed 100 characters"),
    *_positive_at_most('power_hp', "Power", 10000, "10000 HP"),
    *_positive_at_most('power_factor', "Power factor", 1, "1.0"),
    *_positive_at_most('rpm', "RPM", 36000, "36000"),
    *_poles_rules(),
    *_positive_at_most('efficiency', "Efficiency", 1.1, "110%"),
    *_positive_at_most('frequency', "Frequency", 400, "400 Hz"),
    *_positive_at_most('voltage_delta', "Delta voltage", 50000, "50 kV"),
    *_positive_at_most('voltage_star', "Star voltage", 50000, "50 kV"),
    *_positive_at_most('current_delta', "Delta current", 10000, "10000 A"),
    *_positive_at_most('current_star', "Star current", 10000, "10000 A"),
    *_positive_at_most('slot_depth', "Slot depth", 1, "1 metre"),
    *_positive_at_most('crown_height', "Crown height", 1, "1 metre"),
    *_positive_at_most('stator_tooth_width', "Tooth width", 0.5, "0.5 metre"),
    *_positive_at_most('number_of_slots', "Number of slots", 1000, "1000"),
    *_positive_at_most('stack_length', "Stack length", 5, "5 metres"),
    *_positive_at_most('internal_diameter', "Internal diameter", 10, "10 metres"),
    Rule('current_density', optional(greater_than(0)),
         "Current density must be positive when given"),
)


def _get(params: Any, name: str) -> Any:
    if isinstance(params, Mapping):
        return params.get(name)
    return getattr(params, name, None)


def apply_rules(params: Any, rules: Tuple[Rule, ...]) -> ValidationResult:
    """Evaluate every rule against a request record."""
    result = ValidationResult()
    for rule in rules:
        message = rule.evaluate(_get(params, rule.field))
        if message is not None:
            result.messages.append(message)
    return result


def validate_motor_parameters(params: Any) -> ValidationResult:
    """
    Validate a rated-shape request record.

    Args:
        params: Mapping or object with name, power_rating, voltage,
            frequency, poles, efficiency, power_factor, current_density,
            diameter, length and air_gap_length

    Returns:
        ValidationResult; valid is False when any hard bound failed
    """
    return apply_rules(params, MOTOR_PARAMETER_RULES)


def validate_core_data_parameters(params: Any) -> ValidationResult:
    """Validate a core-data request record."""
    return apply_rules(params, CORE_DATA_RULES)
