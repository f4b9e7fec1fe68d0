"""Utility functions and constants."""

from .constants import (
    SQRT_3,
    RHO_COPPER,
    EMF_CONSTANT,
    DENSITY_STEEL,
    WATTS_PER_HP,
    POWER_UNIT_TO_WATTS,
    AWG_TABLE,
    HARMONIC_ORDERS,
    WIRE_CURRENT_DENSITY,
    DesignLimits
)
from .log import configure_logging

__all__ = [
    'SQRT_3',
    'RHO_COPPER',
    'EMF_CONSTANT',
    'DENSITY_STEEL',
    'WATTS_PER_HP',
    'POWER_UNIT_TO_WATTS',
    'AWG_TABLE',
    'HARMONIC_ORDERS',
    'WIRE_CURRENT_DENSITY',
    'DesignLimits',
    'configure_logging'
]
