"""Repository interfaces."""

from .observation_repository import ObservationRepository

__all__ = [
    "ObservationRepository",
]
