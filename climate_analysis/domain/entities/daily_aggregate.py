"""Daily aggregate entity."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class DailyAggregate:
    """Represents the per-date, per-location mean of valid observations."""

    date: date
    location: str
    avg_temperature: Optional[float] = None  # Celsius
    avg_humidity: Optional[float] = None  # percentage
    mold_risk: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.location}_{self.date:%Y-%m-%d}"
