"""Season criteria entity."""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class SeasonCriteria:
    """Threshold rule marking the start of a meteorological season."""

    name: str  # e.g., 'autumn', 'winter'
    threshold: float  # daily mean must stay strictly below (Celsius)
    consecutive_days: int

    @classmethod
    def from_dict(cls, name: str, definition: Dict[str, Any]) -> "SeasonCriteria":
        """Create SeasonCriteria from dictionary definition."""
        return cls(
            name=name,
            threshold=float(definition["threshold"]),
            consecutive_days=int(definition["consecutive_days"]),
        )

    def __str__(self) -> str:
        return self.name
