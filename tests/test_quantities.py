import dataclasses

import pytest

from motor_calculator import (
    Power, Voltage, Current, MagneticInduction,
    InvalidQuantity, UnknownUnit, MotorCalculatorError
)


@pytest.mark.parametrize('quantity', [Power, Voltage, Current, MagneticInduction])
def test_negative_value_rejected(quantity):
    with pytest.raises(InvalidQuantity, match="cannot be negative"):
        quantity(-0.1)


@pytest.mark.parametrize('quantity', [Power, Voltage, Current, MagneticInduction])
def test_zero_allowed(quantity):
    assert quantity(0).value == 0


def test_default_units():
    assert Power(1).unit == 'CV'
    assert Voltage(1).unit == 'V'
    assert Current(1).unit == 'A'
    assert MagneticInduction(1).unit == 'T'


@pytest.mark.parametrize('unit, watts', [
    ('CV', 735.5),
    ('HP', 746),
    ('kW', 1000),
    ('W', 1),
])
def test_to_watts(unit, watts):
    assert Power(2, unit).to_watts() == 2 * watts


def test_unknown_unit():
    with pytest.raises(UnknownUnit, match="MW") as excinfo:
        Power(1, 'MW').to_watts()
    assert excinfo.value.unit == 'MW'
    assert isinstance(excinfo.value, MotorCalculatorError)


def test_equality_by_value_and_unit():
    assert Power(10, 'HP') == Power(10, 'HP')
    assert Power(10, 'HP') != Power(10, 'CV')
    assert Power(10, 'HP') != Power(11, 'HP')
    assert Voltage(1) != Current(1)
    assert len({Power(1), Power(1), Power(2)}) == 2


def test_immutable():
    v = Voltage(220)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.value = 380


def test_float_and_str():
    assert float(Current(26)) == 26.0
    assert str(Power(10, 'kW')) == "10.00 kW"
    assert str(MagneticInduction(0.85)) == "0.8500 T"


def test_nan_rejected():
    with pytest.raises(InvalidQuantity):
        Voltage(float('nan'))
