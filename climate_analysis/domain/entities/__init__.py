"""Domain entities."""

from .location import Location
from .mold_risk_level import MoldRiskLevel
from .row_error_kind import RowErrorKind
from .weather_observation import WeatherObservation
from .daily_aggregate import DailyAggregate
from .season_criteria import SeasonCriteria
from .season_result import SeasonResult
from .ingestion_report import IngestionReport

__all__ = [
    "Location",
    "MoldRiskLevel",
    "RowErrorKind",
    "WeatherObservation",
    "DailyAggregate",
    "SeasonCriteria",
    "SeasonResult",
    "IngestionReport",
]
