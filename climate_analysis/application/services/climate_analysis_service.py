"""Main service orchestrating ingestion and climate analyses."""

import logging
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ...domain.entities.daily_aggregate import DailyAggregate
from ...domain.entities.ingestion_report import IngestionReport
from ...domain.entities.season_criteria import SeasonCriteria
from ...domain.entities.season_result import SeasonResult
from ...domain.entities.weather_observation import WeatherObservation
from ...domain.exceptions import IngestionError
from ...domain.repositories.observation_repository import ObservationRepository

# Use cases
from ...domain.use_cases.parse_observation import ParseObservationUseCase
from ...domain.use_cases.ingest_observations import IngestObservationsUseCase
from ...domain.use_cases.aggregate_daily import AggregateDailyUseCase
from ...domain.use_cases.rank_daily_aggregates import RankDailyAggregatesUseCase
from ...domain.use_cases.detect_seasons import DetectSeasonsUseCase

logger = logging.getLogger(__name__)


class ClimateAnalysisService:
    """Orchestrates loading, aggregation, ranking and season detection.

    Every use case shares the repository handle passed in here; the
    service holds no other state between calls.
    """

    def __init__(
        self,
        repository: ObservationRepository,
        season_criteria: Dict[str, Dict[str, Any]],
        delimiter: str = ",",
        temperature_range: Tuple[float, float] = (-50.0, 50.0),
        humidity_range: Tuple[float, float] = (0.0, 100.0),
        ingestion_settings: Optional[Dict[str, int]] = None,
        top_n: int = 10,
        raw_limit: int = 50,
    ):
        self.repository = repository
        self.raw_limit = raw_limit

        # Convert definitions to domain entities
        self.season_criteria = {
            name: SeasonCriteria.from_dict(name, definition)
            for name, definition in season_criteria.items()
        }

        self.parse_uc = ParseObservationUseCase(
            delimiter=delimiter,
            temperature_range=temperature_range,
            humidity_range=humidity_range,
        )
        self.ingest_uc = IngestObservationsUseCase(
            repository, self.parse_uc, **(ingestion_settings or {})
        )
        self.aggregate_uc = AggregateDailyUseCase(repository)
        self.rank_uc = RankDailyAggregatesUseCase(self.aggregate_uc, limit=top_n)
        self.seasons_uc = DetectSeasonsUseCase(self.aggregate_uc, self.season_criteria)

    def load_observations(
        self, path: str, encoding: str = "utf-8"
    ) -> IngestionReport:
        """
        Replace the stored observations with the contents of a file.

        Source and storage failures abort this load only; they are logged
        and returned as a failed report.
        """
        logger.info("=== Starting observation load ===")
        try:
            report = self.ingest_uc.execute_file(path, encoding=encoding)
        except IngestionError as e:
            logger.error(f"Load failed: {e}")
            return IngestionReport(source=str(path), succeeded=False, failure=str(e))

        logger.info(
            f"Load complete: {report.valid_rows} valid rows, "
            f"{report.invalid_rows} invalid rows"
        )
        return report

    def load_lines(self, lines: Iterable[str]) -> IngestionReport:
        """Replace the stored observations with already read lines."""
        try:
            return self.ingest_uc.execute(lines)
        except IngestionError as e:
            logger.error(f"Load failed: {e}")
            return IngestionReport(succeeded=False, failure=str(e))

    def daily_aggregates(
        self,
        location: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[DailyAggregate]:
        """Daily aggregates for a location, optionally within a date range."""
        return self.aggregate_uc.execute(location, start_date, end_date)

    def daily_aggregate_for(self, target_date: date, location: str) -> List[DailyAggregate]:
        """Daily aggregate for one date and location."""
        return self.aggregate_uc.for_date(target_date, location)

    def top_days(
        self, location: str, key: str, limit: Optional[int] = None
    ) -> List[DailyAggregate]:
        """Days ranked by temperature, humidity or mold risk, highest first."""
        return self.rank_uc.execute(location, key, limit)

    def seasons(self, location: str) -> SeasonResult:
        """Autumn and winter start dates for a location."""
        return self.seasons_uc.execute(location)

    def raw_observations(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> List[WeatherObservation]:
        """Valid stored observations in timestamp order, capped at limit."""
        start = datetime.combine(start_date, time.min) if start_date else None
        end = datetime.combine(end_date, time.max) if end_date else None
        observations = self.repository.query(start=start, end=end)
        return observations[: self.raw_limit if limit is None else limit]
