"""Observation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from ..entities.weather_observation import WeatherObservation


class ObservationRepository(ABC):
    """Abstract store for validated weather observations."""

    @abstractmethod
    def clear(self) -> None:
        """
        Discard every stored observation.

        Called once at the start of each load, before any batch is added.
        """
        pass

    @abstractmethod
    def add_batch(self, batch: List[WeatherObservation]) -> None:
        """
        Append a batch of observations.

        Args:
            batch: Observations to append, in order
        """
        pass

    @abstractmethod
    def query(
        self,
        location: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        valid_only: bool = True,
    ) -> List[WeatherObservation]:
        """
        Retrieve stored observations ordered by timestamp.

        Args:
            location: Filter by canonical location label (optional)
            start: Earliest timestamp, inclusive (optional)
            end: Latest timestamp, inclusive (optional)
            valid_only: Exclude observations flagged invalid

        Returns:
            List of WeatherObservation entities
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored observations."""
        pass
