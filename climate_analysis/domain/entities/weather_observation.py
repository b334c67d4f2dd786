"""Weather observation entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
from .row_error_kind import RowErrorKind


@dataclass(frozen=True)
class WeatherObservation:
    """Represents one sensor reading parsed from a raw input line."""

    timestamp: Optional[datetime] = None
    location: str = ""
    temperature: Optional[float] = None  # Celsius
    humidity: Optional[float] = None  # percentage
    is_valid: bool = True
    error_message: str = ""
    error_kind: Optional[RowErrorKind] = None
    line_number: int = 0

    @classmethod
    def invalid(
        cls, kind: RowErrorKind, message: str, line_number: int = 0
    ) -> "WeatherObservation":
        """Create a rejected observation tagged with its error kind."""
        return cls(
            is_valid=False,
            error_message=message,
            error_kind=kind,
            line_number=line_number,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary (storage / DataFrame row)."""
        return {
            "timestamp": self.timestamp,
            "location": self.location,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "is_valid": self.is_valid,
            "error_message": self.error_message,
        }

    def __str__(self) -> str:
        if not self.is_valid:
            return f"line {self.line_number}: {self.error_message}"
        return (
            f"{self.timestamp:%Y-%m-%d %H:%M}: {self.temperature}°C, "
            f"{self.humidity}% ({self.location})"
        )
