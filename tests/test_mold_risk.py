"""Tests for the mold risk model."""

import pytest
from climate_analysis.domain.entities.mold_risk_level import MoldRiskLevel
from climate_analysis.domain.use_cases.mold_risk import (
    calculate_mold_risk,
    get_mold_risk_level,
)


@pytest.mark.parametrize(
    "temperature,humidity,expected",
    [
        (20.0, 85.0, 5 * (20 / 15)),
        (10.0, 90.0, 10 * (10 / 15)),
        (25.0, 95.0, 25.0),
    ],
)
def test_known_values(temperature, humidity, expected):
    """Test reference risk values."""
    assert calculate_mold_risk(temperature, humidity) == pytest.approx(expected)


def test_reference_values_rounded():
    """Test the two ~6.667 reference values."""
    assert round(calculate_mold_risk(20, 85), 3) == 6.667
    assert round(calculate_mold_risk(10, 90), 3) == 6.667


@pytest.mark.parametrize("humidity", [0.0, 50.0, 79.9, 80.0])
def test_zero_at_or_below_80_percent(humidity):
    """Test no risk at or below 80% humidity, at any temperature."""
    for temperature in (-50.0, 0.0, 25.0, 50.0):
        assert calculate_mold_risk(temperature, humidity) == 0


def test_non_negative_for_non_negative_temperature():
    """Test risk is never negative over the valid non-negative temperature grid."""
    for temperature in range(0, 51, 5):
        for humidity in range(0, 101, 5):
            assert calculate_mold_risk(float(temperature), float(humidity)) >= 0


@pytest.mark.parametrize(
    "risk,level",
    [
        (0.0, MoldRiskLevel.NEGLIGIBLE),
        (0.999, MoldRiskLevel.NEGLIGIBLE),
        (1.0, MoldRiskLevel.LOW),
        (4.999, MoldRiskLevel.LOW),
        (5.0, MoldRiskLevel.MODERATE),
        (9.999, MoldRiskLevel.MODERATE),
        (10.0, MoldRiskLevel.HIGH),
        (19.999, MoldRiskLevel.HIGH),
        (20.0, MoldRiskLevel.VERY_HIGH),
        (250.0, MoldRiskLevel.VERY_HIGH),
    ],
)
def test_level_boundaries(risk, level):
    """Test half-open classification boundaries."""
    assert get_mold_risk_level(risk) == level


def test_level_label():
    """Test the human readable label."""
    assert get_mold_risk_level(25.0).value == "Very high"
