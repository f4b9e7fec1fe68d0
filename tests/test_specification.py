import dataclasses

import pytest

from motor_calculator import (
    CoreData, MotorSpecification, Voltage, Current,
    InvalidParameter, InvalidQuantity, create_rated_specification
)
from conftest import TEST4P, RATED


def test_create_specification(test4p):
    assert test4p.model == "Test4P"
    assert test4p.voltage_star == Voltage(220)
    assert test4p.current_star == Current(26)
    assert test4p.core.number_of_slots == 36
    assert test4p.current_density is None
    assert test4p.phase_voltage == pytest.approx(127.01706, rel=1e-6)
    assert test4p.synchronous_speed == 1800
    assert test4p.slip == 0


def test_specification_is_frozen(test4p):
    with pytest.raises(dataclasses.FrozenInstanceError):
        test4p.poles = 6


@pytest.mark.parametrize('poles', [2, 4, 50, 100])
def test_valid_poles(make_spec, poles):
    assert make_spec(poles=poles).poles == poles


@pytest.mark.parametrize('poles', [3, 0, -2, 101, 102])
def test_invalid_poles(make_spec, poles):
    with pytest.raises(InvalidParameter) as excinfo:
        make_spec(poles=poles)
    assert excinfo.value.field == 'poles'


@pytest.mark.parametrize('field, value', [
    ('model', ''),
    ('model', '   '),
    ('model', 'x' * 101),
    ('power_hp', 0),
    ('power_hp', 10001),
    ('voltage_delta', 0),
    ('voltage_star', 0),
    ('current_delta', 0),
    ('current_star', 0),
    ('frequency', 0),
    ('frequency', 401),
    ('rpm', 0),
    ('efficiency', 0),
    ('efficiency', 1.2),
    ('power_factor', 0),
    ('power_factor', 1.01),
    ('current_density', 0),
    ('internal_diameter', 0),
    ('stack_length', -0.1),
    ('slot_depth', 0),
    ('crown_height', 0),
    ('stator_tooth_width', 0),
    ('number_of_slots', 0),
    ('number_of_slots', 36.0),
])
def test_hard_bounds(make_spec, field, value):
    with pytest.raises(InvalidParameter) as excinfo:
        make_spec(**{field: value})
    assert excinfo.value.field == field


def test_error_order_is_fixed(make_spec):
    with pytest.raises(InvalidParameter, match="^model"):
        make_spec(model='', power_hp=0, frequency=0)
    with pytest.raises(InvalidParameter, match="^power_hp"):
        make_spec(power_hp=0, voltage_star=0)
    with pytest.raises(InvalidParameter, match="^voltage_star"):
        make_spec(voltage_star=0, frequency=0)
    with pytest.raises(InvalidParameter, match="^frequency"):
        make_spec(frequency=0, poles=3)
    with pytest.raises(InvalidParameter, match="^poles"):
        make_spec(poles=3, efficiency=2)
    with pytest.raises(InvalidParameter, match="^efficiency"):
        make_spec(efficiency=2, power_factor=0)
    with pytest.raises(InvalidParameter, match="^power_factor"):
        make_spec(power_factor=0, current_density=-1)
    with pytest.raises(InvalidParameter, match="^current_density"):
        make_spec(current_density=-1, internal_diameter=0)


def test_geometry_checked_after_electrical_fields(make_spec):
    with pytest.raises(InvalidParameter) as excinfo:
        make_spec(internal_diameter=0, efficiency=1.5)
    assert excinfo.value.field == 'efficiency'


def test_negative_voltage_is_an_invalid_quantity(make_spec):
    with pytest.raises(InvalidQuantity):
        make_spec(voltage_star=-220)


def test_core_must_be_core_data():
    params = dict(TEST4P)
    with pytest.raises(InvalidParameter, match="core"):
        MotorSpecification(
            model=params['model'],
            power_hp=params['power_hp'],
            voltage_delta=Voltage(380),
            voltage_star=Voltage(220),
            current_delta=Current(15),
            current_star=Current(26),
            frequency=60,
            rpm=1800,
            poles=4,
            efficiency=0.9,
            power_factor=0.85,
            core={'number_of_slots': 36},
        )


def test_core_data_validate():
    core = CoreData(0.08, 0.12, 0.02, 0.015, 0.008, 0)
    with pytest.raises(InvalidParameter, match="number_of_slots"):
        core.validate()


def test_rated_specification(rated_spec):
    assert rated_spec.power.to_watts() == pytest.approx(7355)
    assert rated_spec.aspect_ratio == 1.25
    assert rated_spec.air_gap_radius == 0.1
    assert rated_spec.synchronous_speed == 1800


@pytest.mark.parametrize('field, value', [
    ('name', ''),
    ('power_rating', 0),
    ('voltage', 0),
    ('frequency', 500),
    ('poles', 5),
    ('efficiency', 1.06),
    ('power_factor', 0),
    ('current_density', 0),
    ('diameter', 0),
    ('length', 0),
    ('air_gap_length', 0),
])
def test_rated_hard_bounds(field, value):
    params = dict(RATED)
    params[field] = value
    expected = 'power' if field == 'power_rating' else field
    with pytest.raises(InvalidParameter) as excinfo:
        create_rated_specification(**params)
    assert excinfo.value.field == expected


def test_rated_error_order():
    params = dict(RATED, name='', poles=3, diameter=0)
    with pytest.raises(InvalidParameter, match="^name"):
        create_rated_specification(**params)


@pytest.mark.parametrize('field, value', [
    ('voltage_star', float('inf')),
    ('current_star', float('inf')),
    ('frequency', float('inf')),
    ('frequency', float('nan')),
    ('internal_diameter', float('inf')),
    ('internal_diameter', float('nan')),
    ('stack_length', float('nan')),
])
def test_non_finite_values_rejected(make_spec, field, value):
    with pytest.raises(InvalidParameter, match="^" + field) as excinfo:
        make_spec(**{field: value})
    assert excinfo.value.field == field


@pytest.mark.parametrize('field', ['efficiency', 'power_factor'])
def test_nan_ratio_rejected(make_spec, field):
    with pytest.raises(InvalidParameter) as excinfo:
        make_spec(**{field: float('nan')})
    assert excinfo.value.field == field


@pytest.mark.parametrize('value', ["4.5", True, [4.5]])
def test_non_numeric_current_density(make_spec, value):
    with pytest.raises(InvalidParameter, match="must be a number") as excinfo:
        make_spec(current_density=value)
    assert excinfo.value.field == 'current_density'


@pytest.mark.parametrize('poles', [4.0, True])
def test_poles_must_be_integer(make_spec, poles):
    with pytest.raises(InvalidParameter, match="must be an integer") as excinfo:
        make_spec(poles=poles)
    assert excinfo.value.field == 'poles'


def test_rated_non_finite_diameter():
    params = dict(RATED, diameter=float('inf'))
    with pytest.raises(InvalidParameter, match="^diameter"):
        create_rated_specification(**params)


def test_nan_voltage_is_an_invalid_quantity(make_spec):
    with pytest.raises(InvalidQuantity):
        make_spec(voltage_star=float('nan'))
