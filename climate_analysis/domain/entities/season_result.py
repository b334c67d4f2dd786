"""Season result entity."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class SeasonResult:
    """Season transition dates detected for one location."""

    location: str
    autumn_start: Optional[date] = None
    winter_start: Optional[date] = None
    message: str = ""

    def __str__(self) -> str:
        return self.message
