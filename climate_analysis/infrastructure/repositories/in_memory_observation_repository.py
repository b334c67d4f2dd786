"""In-memory observation repository implementation."""

import logging
from datetime import datetime
from typing import List, Optional
from ...domain.entities.weather_observation import WeatherObservation
from ...domain.repositories.observation_repository import ObservationRepository

logger = logging.getLogger(__name__)


class InMemoryObservationRepository(ObservationRepository):
    """Repository keeping observations in a process-local list."""

    def __init__(self):
        self._observations: List[WeatherObservation] = []

    def clear(self) -> None:
        """Discard all observations."""
        logger.debug(f"Clearing {len(self._observations)} observations")
        self._observations = []

    def add_batch(self, batch: List[WeatherObservation]) -> None:
        """Append a batch of observations."""
        self._observations.extend(batch)

    def query(
        self,
        location: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        valid_only: bool = True,
    ) -> List[WeatherObservation]:
        """Filter stored observations and order them by timestamp."""
        result = []
        for o in self._observations:
            if valid_only and not o.is_valid:
                continue
            if location is not None and o.location != location:
                continue
            if start is not None and (o.timestamp is None or o.timestamp < start):
                continue
            if end is not None and (o.timestamp is None or o.timestamp > end):
                continue
            result.append(o)
        return sorted(result, key=lambda o: (o.timestamp is None, o.timestamp or datetime.min))

    def count(self) -> int:
        """Number of stored observations."""
        return len(self._observations)
