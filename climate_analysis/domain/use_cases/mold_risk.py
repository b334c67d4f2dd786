"""Mold growth risk model."""

from ..entities.mold_risk_level import MoldRiskLevel

HUMIDITY_THRESHOLD = 80.0
TEMPERATURE_SCALE = 15.0

# (upper bound, level), checked in order; bounds are exclusive
_LEVEL_BOUNDS = (
    (1.0, MoldRiskLevel.NEGLIGIBLE),
    (5.0, MoldRiskLevel.LOW),
    (10.0, MoldRiskLevel.MODERATE),
    (20.0, MoldRiskLevel.HIGH),
)


def calculate_mold_risk(temperature: float, humidity: float) -> float:
    """
    Calculate the mold risk index.

    Zero at or below 80% humidity, otherwise the humidity excess scaled
    by temperature / 15.

    Args:
        temperature: Mean temperature in Celsius
        humidity: Mean relative humidity in percent

    Returns:
        Mold risk index
    """
    if humidity <= HUMIDITY_THRESHOLD:
        return 0.0
    return (humidity - HUMIDITY_THRESHOLD) * (temperature / TEMPERATURE_SCALE)


def get_mold_risk_level(risk: float) -> MoldRiskLevel:
    """Classify a mold risk index."""
    for upper, level in _LEVEL_BOUNDS:
        if risk < upper:
            return level
    return MoldRiskLevel.VERY_HIGH
