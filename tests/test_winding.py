import math

import pytest

from motor_calculator import WindingConfiguration, HarmonicResults, InvalidParameter
from motor_calculator.calculations import (
    calculate_turns_per_phase, typical_harmonic_factor, typical_harmonics
)


def test_36_slots_4_poles():
    winding = WindingConfiguration(36, 4)
    assert winding.q == 3.0
    assert winding.slot_angle == pytest.approx(math.radians(10))
    assert winding.alpha == pytest.approx(math.radians(20))
    assert winding.pitch_factor == 1.0
    assert winding.distribution_factor == pytest.approx(0.959795, rel=1e-5)
    assert winding.winding_factor == winding.distribution_factor


@pytest.mark.parametrize('slots, poles', [(12, 4), (6, 2), (36, 100), (24, 8)])
def test_distribution_factor_is_one_for_q_up_to_one(slots, poles):
    winding = WindingConfiguration(slots, poles)
    assert winding.q <= 1
    assert winding.distribution_factor == 1.0


@pytest.mark.parametrize('slots', [18, 24, 36, 48, 54, 72, 96])
@pytest.mark.parametrize('poles', [2, 4, 6, 8])
def test_winding_factor_in_unit_interval(slots, poles):
    kw = WindingConfiguration(slots, poles).winding_factor
    assert 0 < kw <= 1


def test_invalid_configuration():
    with pytest.raises(InvalidParameter, match="number_of_slots"):
        WindingConfiguration(0, 4)
    with pytest.raises(InvalidParameter, match="poles"):
        WindingConfiguration(36, 0)


def test_fifth_harmonic_factor():
    winding = WindingConfiguration(36, 4)
    alpha_5 = math.radians(25)
    k_d = math.sin(3 * alpha_5 / 2) / (3 * math.sin(alpha_5 / 2))
    k_p = math.cos(4 * math.pi / 10)
    assert winding.harmonic_factor(5) == pytest.approx(abs(k_d * k_p))
    assert winding.harmonic_factor(5) == pytest.approx(0.28972, rel=1e-4)


def test_harmonics():
    winding = WindingConfiguration(36, 4)
    harmonics = winding.harmonics()
    assert harmonics.fundamental == winding.winding_factor
    assert list(harmonics.by_order()) == [5, 7, 11, 13, 17]
    for order, magnitude in harmonics.by_order().items():
        assert magnitude == winding.harmonic_factor(order)
        assert magnitude >= 0


def test_total_harmonic_distortion_is_euclidean_norm():
    harmonics = HarmonicResults(3.0, 4.0, 0.0, 0.0, 0.0)
    assert harmonics.total_harmonic_distortion == 5.0

    harmonics = WindingConfiguration(36, 4).harmonics()
    expected = math.sqrt(sum(v ** 2 for v in harmonics.by_order().values()))
    assert harmonics.total_harmonic_distortion == pytest.approx(expected)


def test_harmonics_to_dict():
    data = HarmonicResults(0.1, 0.2, 0.0, 0.0, 0.0, fundamental=0.96).to_dict()
    assert data['fifth'] == 0.1
    assert data['fundamental'] == 0.96
    assert data['total_harmonic_distortion'] == pytest.approx(math.sqrt(0.05))


def test_turns_per_phase_is_rounded():
    turns = calculate_turns_per_phase(127.0170592, 60, 0.3178605, 0.9597980)
    assert turns == 2
    assert isinstance(turns, int)


def test_turns_per_phase_below_one():
    with pytest.raises(InvalidParameter, match="turns_per_phase"):
        calculate_turns_per_phase(0.1, 60, 0.3, 0.96)


def test_turns_per_phase_zero_flux():
    with pytest.raises(InvalidParameter, match="flux_per_pole"):
        calculate_turns_per_phase(127, 60, 0, 0.96)


def test_typical_harmonic_factors():
    # 0.8 pitch cancels the fifth
    assert typical_harmonic_factor(5) == pytest.approx(0, abs=1e-12)
    assert typical_harmonic_factor(7) == pytest.approx(0.58341, rel=1e-4)

    harmonics = typical_harmonics()
    assert harmonics.fundamental is None
    assert harmonics.seventh == typical_harmonic_factor(7)
