"""Ingestion report entity."""

from dataclasses import dataclass, field
from typing import List, Optional
from .weather_observation import WeatherObservation


@dataclass
class IngestionReport:
    """Outcome of one load of raw observations into the store."""

    source: Optional[str] = None
    valid_rows: int = 0
    invalid_rows: int = 0
    stored_rows: int = 0
    errors: List[str] = field(default_factory=list)
    observations: List[WeatherObservation] = field(default_factory=list)
    succeeded: bool = True
    failure: Optional[str] = None

    @property
    def total_rows(self) -> int:
        """Data rows seen (header and blank lines excluded)."""
        return self.valid_rows + self.invalid_rows
