"""Data models for motor calculations."""

from .quantities import (
    Power,
    Voltage,
    Current,
    MagneticInduction
)
from .specification import (
    CoreData,
    MotorSpecification,
    RatedMotorSpecification,
    create_specification,
    create_rated_specification
)
from .results import (
    AlertType,
    ValidationAlert,
    HarmonicResults,
    CalculationResults,
    RatedCalculationResults
)

__all__ = [
    # Quantities
    'Power',
    'Voltage',
    'Current',
    'MagneticInduction',
    # Specification
    'CoreData',
    'MotorSpecification',
    'RatedMotorSpecification',
    'create_specification',
    'create_rated_specification',
    # Results
    'AlertType',
    'ValidationAlert',
    'HarmonicResults',
    'CalculationResults',
    'RatedCalculationResults'
]
