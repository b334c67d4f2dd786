"""Mold risk level enumeration."""

from enum import Enum


class MoldRiskLevel(str, Enum):
    """Qualitative classification of the mold risk index."""

    NEGLIGIBLE = "Negligible"
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very high"
