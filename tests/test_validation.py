from types import SimpleNamespace

import pytest

from motor_calculator import (
    AlertType, InvalidParameter, compute,
    validate_motor_parameters, validate_core_data_parameters
)
from motor_calculator.core import Rule, apply_rules
from motor_calculator.core.validation import greater_than, is_even


def test_valid_request(rated_request):
    result = validate_motor_parameters(rated_request)
    assert result.valid
    assert result.messages == []


def test_attribute_records_accepted(rated_request):
    assert validate_motor_parameters(SimpleNamespace(**rated_request)).valid


def test_current_density_warning_is_accepted(rated_request):
    rated_request['current_density'] = 5.0
    result = validate_motor_parameters(rated_request)
    assert result.valid
    assert [m.field for m in result.warnings] == ['current_density']
    assert result.warnings[0].message == "Current density above 4.5 A/mm² is not recommended"


def test_current_density_above_limit_rejected(rated_request):
    rated_request['current_density'] = 7.0
    result = validate_motor_parameters(rated_request)
    assert not result.valid
    assert result.errors_by_field() == {
        'current_density': ["Current density should not exceed 6.5 A/mm² for safety"]
    }


@pytest.mark.parametrize('efficiency', [1.2, 0.85])
def test_efficiency_window(rated_request, efficiency):
    rated_request['efficiency'] = efficiency
    result = validate_motor_parameters(rated_request)
    assert result.errors_by_field() == {'efficiency': ["Efficiency must be between 90-105%"]}


def test_efficiency_tiers_are_independent(make_spec, rated_request):
    # Accepted by the engine without an alert, rejected by the request gate
    results = compute(make_spec(efficiency=0.85))
    assert 'efficiency' not in [a.parameter for a in results.alerts]

    rated_request['efficiency'] = 0.85
    assert not validate_motor_parameters(rated_request).valid


def test_efficiency_above_hard_bound_rejected_everywhere(make_spec, rated_request):
    rated_request['efficiency'] = 1.2
    assert not validate_motor_parameters(rated_request).valid
    with pytest.raises(InvalidParameter, match="efficiency"):
        make_spec(efficiency=1.2)


@pytest.mark.parametrize('poles, messages', [
    (0, ["Number of poles must be positive"]),
    (2.5, ["Number of poles must be even"]),
    (3, ["Number of poles must be even"]),
    (102, ["Number of poles cannot exceed 100"]),
    (-2, ["Number of poles must be positive"]),
])
def test_poles(rated_request, poles, messages):
    rated_request['poles'] = poles
    assert validate_motor_parameters(rated_request).errors_by_field() == {'poles': messages}


def test_every_failure_reported_in_table_order(rated_request):
    rated_request.update(name='', voltage=60000, diameter=-1)
    errors = validate_motor_parameters(rated_request).errors
    assert [m.field for m in errors] == ['name', 'voltage', 'diameter']
    assert errors[1].message == "Voltage cannot exceed 50kV"


def test_missing_and_wrong_types(rated_request):
    del rated_request['voltage']
    rated_request['frequency'] = "60"
    rated_request['length'] = True
    errors = validate_motor_parameters(rated_request).errors_by_field()
    assert list(errors) == ['voltage', 'frequency', 'length']


def test_name_too_long(rated_request):
    rated_request['name'] = 'x' * 101
    assert validate_motor_parameters(rated_request).errors_by_field() == {
        'name': ["Motor name cannot exceed 100 characters"]
    }


def test_core_data_request(core_data_request):
    assert validate_core_data_parameters(core_data_request).valid


@pytest.mark.parametrize('field, value', [
    ('power_hp', 10001),
    ('rpm', 36001),
    ('efficiency', 1.11),
    ('power_factor', 1.01),
    ('slot_depth', 1.5),
    ('stator_tooth_width', 0.6),
    ('number_of_slots', 1001),
    ('stack_length', 6),
    ('internal_diameter', 11),
    ('current_star', 0),
])
def test_core_data_bounds(core_data_request, field, value):
    core_data_request[field] = value
    assert list(validate_core_data_parameters(core_data_request).errors_by_field()) == [field]


def test_core_data_efficiency_window_is_wider(core_data_request):
    core_data_request['efficiency'] = 1.08
    assert validate_core_data_parameters(core_data_request).valid


def test_custom_rules():
    rules = (
        Rule('slots', greater_than(0), "Slots must be positive"),
        Rule('slots', is_even, "Slots should be even", severity=AlertType.WARNING),
    )
    result = apply_rules({'slots': 35}, rules)
    assert result.valid
    assert result.warnings[0].to_dict() == {
        'field': 'slots', 'message': "Slots should be even", 'severity': 'warning'
    }
