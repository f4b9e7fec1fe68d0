import pytest

from motor_calculator import create_specification, create_rated_specification


TEST4P = dict(
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
    internal_diameter=0.08,
)

RATED = dict(
    name="W22 10CV",
    power_rating=10,
    power_unit='CV',
    voltage=380,
    frequency=60,
    poles=4,
    efficiency=0.92,
    power_factor=0.86,
    current_density=4.0,
    diameter=200,
    length=250,
    air_gap_length=0.5,
)


@pytest.fixture()
def core_data_request():
    return dict(TEST4P)


@pytest.fixture()
def rated_request():
    return dict(RATED)


@pytest.fixture()
def test4p():
    return create_specification(**TEST4P)


@pytest.fixture()
def make_spec():
    """Build a core-data specification with some fields overridden."""
    def factory(**overrides):
        params = dict(TEST4P)
        params.update(overrides)
        return create_specification(**params)
    return factory


@pytest.fixture()
def rated_spec():
    return create_rated_specification(**RATED)


@pytest.fixture()
def make_rated_spec():
    def factory(**overrides):
        params = dict(RATED)
        params.update(overrides)
        return create_rated_specification(**params)
    return factory
