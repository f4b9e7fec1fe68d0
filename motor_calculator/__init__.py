"""
Three-Phase Motor Calculator

Electromagnetic design parameters of three-phase induction motors: flux,
inductions, winding factors, turns, resistance, wire gauge, harmonics and
specific power, with engineering limit alerts.

Usage:
    from motor_calculator import compute, create_specification

    results = compute(create_specification(
        model="Test4P",
        power_hp=10,
        power_factor=0.85,
        rpm=1800,
        poles=4,
        efficiency=0.9,
        frequency=60,
        voltage_delta=380,
        voltage_star=220,
        current_delta=15,
        current_star=26,
        slot_depth=0.02,
        crown_height=0.015,
        stator_tooth_width=0.008,
        number_of_slots=36,
        stack_length=0.12,
        internal_diameter=0.08
    ))
"""

import logging

from .exceptions import (
    MotorCalculatorError,
    InvalidQuantity,
    InvalidParameter,
    UnknownUnit
)

from .models import (
    # Quantities
    Power,
    Voltage,
    Current,
    MagneticInduction,
    # Specification
    CoreData,
    MotorSpecification,
    RatedMotorSpecification,
    create_specification,
    create_rated_specification,
    # Results
    AlertType,
    ValidationAlert,
    HarmonicResults,
    CalculationResults,
    RatedCalculationResults
)

from .calculations import (
    WindingConfiguration,
    nearest_awg
)

from .core import (
    MotorCalculationEngine,
    compute,
    compute_rated,
    ValidationResult,
    validate_motor_parameters,
    validate_core_data_parameters,
    calculate_motor,
    calculate_core_data_motor,
    validate_parameters,
    motor_limits
)

from .utils import (
    DesignLimits,
    configure_logging
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Main entry points
    'compute',
    'compute_rated',
    'MotorCalculationEngine',

    # Errors
    'MotorCalculatorError',
    'InvalidQuantity',
    'InvalidParameter',
    'UnknownUnit',

    # Models
    'Power',
    'Voltage',
    'Current',
    'MagneticInduction',
    'CoreData',
    'MotorSpecification',
    'RatedMotorSpecification',
    'create_specification',
    'create_rated_specification',
    'AlertType',
    'ValidationAlert',
    'HarmonicResults',
    'CalculationResults',
    'RatedCalculationResults',

    # Calculations
    'WindingConfiguration',
    'nearest_awg',

    # Validation and requests
    'ValidationResult',
    'validate_motor_parameters',
    'validate_core_data_parameters',
    'calculate_motor',
    'calculate_core_data_motor',
    'validate_parameters',
    'motor_limits',

    # Utils
    'DesignLimits',
    'configure_logging'
]
