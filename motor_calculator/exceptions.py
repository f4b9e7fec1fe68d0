"""
Errors raised by the motor calculator.

All of them derive from ValueError so callers that only guard against bad
input keep working.
"""


class MotorCalculatorError(ValueError):
    """Base class for structural failures of a calculation."""


class InvalidQuantity(MotorCalculatorError):
    """A physical quantity was given a negative value."""

    def __init__(self, quantity: str, value: float):
        self.quantity = quantity
        self.value = value
        super().__init__(f"{quantity} cannot be negative or NaN, got {value}")


class InvalidParameter(MotorCalculatorError):
    """A specification field violates a hard structural bound."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class UnknownUnit(MotorCalculatorError):
    """A unit conversion was requested for a unit that is not modelled."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unknown power unit: {unit}")
