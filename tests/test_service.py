import logging

import pytest

from motor_calculator import (
    calculate_motor, calculate_core_data_motor, validate_parameters, motor_limits
)
from motor_calculator.core import service


def test_calculate_motor(rated_request):
    response = calculate_motor(rated_request)
    assert response['status'] == 200
    assert response['success'] is True
    assert response['name'] == "W22 10CV"
    assert response['parameters'] == rated_request
    assert response['results']['synchronous_speed'] == 1800
    assert response['results']['is_valid'] is True
    assert response['warnings'] == []


def test_power_unit_defaults_to_cv(rated_request):
    del rated_request['power_unit']
    response = calculate_motor(rated_request)
    assert response['status'] == 200
    assert response['results']['rated_torque'] == pytest.approx(
        calculate_motor(dict(rated_request, power_unit='CV'))['results']['rated_torque'])


def test_current_density_warning_still_calculates(rated_request):
    rated_request['current_density'] = 5.0
    response = calculate_motor(rated_request)
    assert response['status'] == 200
    assert [w['field'] for w in response['warnings']] == ['current_density']
    alerts = response['results']['alerts']
    assert [(a['parameter'], a['severity']) for a in alerts] == [('current_density', 'warning')]


def test_hard_bound_failure_skips_calculation(rated_request, monkeypatch):
    def fail(spec):
        raise AssertionError("calculation must not run")
    monkeypatch.setattr(service, 'compute_rated', fail)

    rated_request['current_density'] = 7.0
    response = calculate_motor(rated_request)
    assert response == {
        'status': 400,
        'success': False,
        'errors': {'current_density': ["Current density should not exceed 6.5 A/mm² for safety"]},
    }


def test_unknown_unit_is_a_bad_request(rated_request):
    rated_request['power_unit'] = 'MW'
    response = calculate_motor(rated_request)
    assert response['status'] == 400
    assert response['error_message'] == "Unknown power unit: MW"


def test_validation_failure_logged(rated_request, caplog):
    rated_request['efficiency'] = 0.85
    with caplog.at_level(logging.WARNING, logger='motor_calculator'):
        calculate_motor(rated_request)
    assert "validation failed for motor: W22 10CV" in caplog.text


def test_calculate_core_data_motor(core_data_request):
    response = calculate_core_data_motor(core_data_request)
    assert response['status'] == 200
    assert response['model'] == "Test4P"
    assert response['results']['turns_per_phase'] == 2
    assert response['results']['awg_size'] == '10 AWG'
    assert len(response['results']['alerts']) == 5


def test_core_data_rejected_by_specification(core_data_request):
    core_data_request['efficiency'] = 1.08
    response = calculate_core_data_motor(core_data_request)
    assert response['status'] == 400
    assert response['error_message'].startswith("efficiency:")


def test_core_data_rejected_by_validation(core_data_request):
    core_data_request['number_of_slots'] = 0
    response = calculate_core_data_motor(core_data_request)
    assert response['status'] == 400
    assert list(response['errors']) == ['number_of_slots']


def test_validate_parameters(rated_request):
    response = validate_parameters(rated_request)
    assert response['status'] == 200
    assert response['is_valid'] is True

    rated_request['poles'] = 5
    response = validate_parameters(rated_request)
    assert response['status'] == 400
    assert response['errors'] == {'poles': ["Number of poles must be even"]}


def test_motor_limits():
    limits = motor_limits()
    assert set(limits) == {
        'efficiency', 'current_density', 'air_gap_induction', 'power_factor',
        'aspect_ratio', 'frequency', 'poles'
    }
    assert limits['efficiency']['min'] == 0.90
    assert limits['current_density']['max'] == 6.5
    assert limits['poles']['common'] == [2, 4, 6, 8]


def test_core_data_non_numeric_current_density(core_data_request):
    core_data_request['current_density'] = "4.5"
    response = calculate_core_data_motor(core_data_request)
    assert response == {
        'status': 400,
        'success': False,
        'errors': {'current_density': ["Current density must be positive when given"]},
    }


def test_core_data_infinite_current_density(core_data_request):
    core_data_request['current_density'] = float('inf')
    response = calculate_core_data_motor(core_data_request)
    assert response['status'] == 400
    assert response['error_message'].startswith("current_density:")


def test_core_data_optional_current_density(core_data_request):
    core_data_request['current_density'] = 4.0
    assert calculate_core_data_motor(core_data_request)['status'] == 200
