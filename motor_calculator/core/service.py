"""
Request handling around the calculation engine.

Maps plain request mappings onto specifications, applies the request
validation gate, runs the selected formula set and maps the outcome onto a
plain response dictionary:

    {'status': 200, 'success': True, 'results': {...}, 'warnings': [...]}
    {'status': 400, 'success': False, 'errors': {field: [messages]}}
    {'status': 400, 'success': False, 'error_message': '...'}

The engine is never called when a hard bound of the request fails.
"""

import logging
from typing import Any, Dict, Mapping

from ..exceptions import MotorCalculatorError
from ..models.specification import create_specification, create_rated_specification
from ..utils.constants import DesignLimits
from .engine import compute, compute_rated
from .validation import (
    ValidationResult, validate_motor_parameters, validate_core_data_parameters
)

logger = logging.getLogger(__name__)

RATED_FIELDS = (
    'name', 'power_rating', 'power_unit', 'voltage', 'frequency', 'poles',
    'efficiency', 'power_factor', 'current_density', 'diameter', 'length',
    'air_gap_length',
)

CORE_DATA_FIELDS = (
    'model', 'power_hp', 'power_factor', 'rpm', 'poles', 'efficiency',
    'frequency', 'voltage_delta', 'voltage_star', 'current_delta',
    'current_star', 'slot_depth', 'crown_height', 'stator_tooth_width',
    'number_of_slots', 'stack_length', 'internal_diameter', 'current_density',
)


def _bad_request(validation: ValidationResult) -> Dict[str, Any]:
    return {
        'status': 400,
        'success': False,
        'errors': validation.errors_by_field(),
    }


def _error_response(error: MotorCalculatorError) -> Dict[str, Any]:
    return {
        'status': 400,
        'success': False,
        'error_message': str(error),
    }


def _pick(params: Mapping, fields) -> Dict[str, Any]:
    return {name: params[name] for name in fields if name in params}


def calculate_motor(params: Mapping) -> Dict[str, Any]:
    """
    Validate a rated-shape request and run the rated-physics calculation.

    Args:
        params: Request with the RATED_FIELDS keys ('power_unit' defaults to CV)

    Returns:
        Response dictionary
    """
    name = params.get('name')
    logger.info("Starting motor calculation for motor: %s", name)

    validation = validate_motor_parameters(params)
    if not validation.valid:
        logger.warning("Motor calculation validation failed for motor: %s. Errors: %s",
                       name, ", ".join(m.message for m in validation.errors))
        return _bad_request(validation)

    parameters = _pick(params, RATED_FIELDS)
    try:
        spec = create_rated_specification(**parameters)
        results = compute_rated(spec)
    except MotorCalculatorError as exc:
        logger.warning("Motor calculation rejected for motor: %s: %s", name, exc)
        return _error_response(exc)

    logger.info("Motor calculation completed for motor: %s. Valid: %s",
                name, results.is_valid)
    return {
        'status': 200,
        'success': True,
        'name': spec.name,
        'parameters': parameters,
        'results': results.to_dict(),
        'warnings': [m.to_dict() for m in validation.warnings],
    }


def calculate_core_data_motor(params: Mapping) -> Dict[str, Any]:
    """
    Validate a core-data request and run the staged pipeline.

    Args:
        params: Request with the CORE_DATA_FIELDS keys (SI units)

    Returns:
        Response dictionary
    """
    model = params.get('model')
    logger.info("Starting core data calculation for motor: %s", model)

    validation = validate_core_data_parameters(params)
    if not validation.valid:
        logger.warning("Core data validation failed for motor: %s. Errors: %s",
                       model, ", ".join(m.message for m in validation.errors))
        return _bad_request(validation)

    try:
        spec = create_specification(**_pick(params, CORE_DATA_FIELDS))
        results = compute(spec)
    except MotorCalculatorError as exc:
        logger.warning("Core data calculation rejected for motor: %s: %s", model, exc)
        return _error_response(exc)

    logger.info("Core data calculation completed for motor: %s with %d alerts",
                model, len(results.alerts))
    return {
        'status': 200,
        'success': True,
        'model': spec.model,
        'results': results.to_dict(),
        'warnings': [m.to_dict() for m in validation.warnings],
    }


def validate_parameters(params: Mapping) -> Dict[str, Any]:
    """Validate a rated-shape request without calculating."""
    validation = validate_motor_parameters(params)
    if not validation.valid:
        return _bad_request(validation)
    return {
        'status': 200,
        'success': True,
        'is_valid': True,
        'message': "Motor parameters are valid",
        'warnings': [m.to_dict() for m in validation.warnings],
    }


def motor_limits() -> Dict[str, Any]:
    """Engineering limits and recommended ranges."""
    eff_min, eff_max = DesignLimits.RECOMMENDED_EFFICIENCY
    pf_min, pf_max = DesignLimits.RECOMMENDED_POWER_FACTOR
    return {
        'efficiency': {
            'min': DesignLimits.REQUEST_EFFICIENCY_MIN,
            'max': DesignLimits.REQUEST_EFFICIENCY_MAX,
            'recommended': {'min': eff_min, 'max': eff_max},
        },
        'current_density': {
            'max': DesignLimits.CURRENT_DENSITY_MAX,
            'recommended': DesignLimits.CURRENT_DENSITY_RECOMMENDED,
            'unit': 'A/mm²',
        },
        'air_gap_induction': {
            'max': DesignLimits.AIR_GAP_INDUCTION_MAX,
            'recommended': DesignLimits.AIR_GAP_INDUCTION_RECOMMENDED,
            'unit': 'T',
        },
        'power_factor': {
            'min': DesignLimits.POWER_FACTOR_MIN,
            'max': DesignLimits.POWER_FACTOR_MAX,
            'recommended': {'min': pf_min, 'max': pf_max},
        },
        'aspect_ratio': {
            'min': DesignLimits.ASPECT_RATIO_MIN,
            'max': DesignLimits.ASPECT_RATIO_MAX,
            'unit': 'Length/Diameter',
        },
        'frequency': {
            'min': 1,
            'max': DesignLimits.FREQUENCY_MAX,
            'common': list(DesignLimits.COMMON_FREQUENCIES),
            'unit': 'Hz',
        },
        'poles': {
            'min': DesignLimits.POLES_MIN,
            'max': DesignLimits.POLES_MAX,
            'common': list(DesignLimits.COMMON_POLES),
            'note': 'Must be even',
        },
    }
