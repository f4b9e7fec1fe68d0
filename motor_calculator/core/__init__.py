"""Calculation engine, request validation and request handling."""

from .engine import (
    MotorCalculationEngine,
    compute,
    compute_rated
)

from .validation import (
    Rule,
    ValidationMessage,
    ValidationResult,
    MOTOR_PARAMETER_RULES,
    CORE_DATA_RULES,
    apply_rules,
    validate_motor_parameters,
    validate_core_data_parameters
)

from .service import (
    calculate_motor,
    calculate_core_data_motor,
    validate_parameters,
    motor_limits
)

__all__ = [
    # Engine
    'MotorCalculationEngine',
    'compute',
    'compute_rated',

    # Validation
    'Rule',
    'ValidationMessage',
    'ValidationResult',
    'MOTOR_PARAMETER_RULES',
    'CORE_DATA_RULES',
    'apply_rules',
    'validate_motor_parameters',
    'validate_core_data_parameters',

    # Service
    'calculate_motor',
    'calculate_core_data_motor',
    'validate_parameters',
    'motor_limits'
]
