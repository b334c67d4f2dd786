"""Location enumeration."""

from enum import Enum


class Location(str, Enum):
    """Canonical sensor location labels."""

    OUTDOOR = "Outdoor"
    INDOOR = "Indoor"

    @classmethod
    def from_code(cls, code: str) -> str:
        """
        Map a raw location code to its canonical label.

        Unrecognized codes are returned trimmed and lowercased.

        Args:
            code: Raw code from the sensor export (e.g. 'ute', 'inne')

        Returns:
            Canonical label, or the lowercased code itself
        """
        normalized = code.strip().lower()
        mapping = {
            "ute": cls.OUTDOOR,
            "inne": cls.INDOOR,
        }
        location = mapping.get(normalized)
        if location is None:
            return normalized
        return location.value

    @classmethod
    def resolve(cls, value: str) -> str:
        """Resolve a raw code or a canonical label to the stored label."""
        for location in cls:
            if value.strip().lower() == location.value.lower():
                return location.value
        return cls.from_code(value)
