import math

import pytest

from sketchkit.noise.lut import SinCosLUT


@pytest.fixture(scope="module")
def lut():
    return SinCosLUT()


def test_default_period_covers_quarter_degrees(lut):
    assert lut.period == 1440
    assert len(lut.sin_table) == lut.period
    assert len(lut.cos_table) == lut.period


def test_custom_precision_period():
    assert SinCosLUT(1.0).period == 360


def test_invalid_precision_raises():
    with pytest.raises(ValueError):
        SinCosLUT(0.0)


def test_values_at_zero(lut):
    assert lut.sin(0.0) == 0.0
    assert lut.cos(0.0) == 1.0


@pytest.mark.parametrize("theta", [0.1, 0.5, 1.0, math.pi / 2, 2.0, 3.0, 4.5, 6.0])
def test_matches_math_functions(lut, theta):
    assert lut.sin(theta) == pytest.approx(math.sin(theta), abs=0.005)
    assert lut.cos(theta) == pytest.approx(math.cos(theta), abs=0.005)


@pytest.mark.parametrize("theta", [-0.3, -math.pi / 2, -2.5, -10.0])
def test_negative_angles_wrap(lut, theta):
    assert lut.sin(theta) == pytest.approx(math.sin(theta), abs=0.005)
    assert lut.cos(theta) == pytest.approx(math.cos(theta), abs=0.005)


@pytest.mark.parametrize("theta", [7.0, 13.0, 100.0])
def test_large_angles_wrap(lut, theta):
    assert lut.sin(theta) == pytest.approx(math.sin(theta), abs=0.005)
    assert lut.cos(theta) == pytest.approx(math.cos(theta), abs=0.005)


def test_tables_stay_on_unit_circle(lut):
    assert all(
        s * s + c * c == pytest.approx(1.0)
        for s, c in zip(lut.sin_table, lut.cos_table)
    )