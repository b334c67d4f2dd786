"""Concrete repository implementations."""

from .in_memory_observation_repository import InMemoryObservationRepository
from .csv_observation_repository import CsvObservationRepository

__all__ = [
    "InMemoryObservationRepository",
    "CsvObservationRepository",
]
