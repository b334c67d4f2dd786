"""Use case for aggregating observations into daily means."""

import logging
from datetime import date, datetime, time
from typing import List, Optional
import numpy as np
import pandas as pd
from ..entities.daily_aggregate import DailyAggregate
from ..entities.weather_observation import WeatherObservation
from ..repositories.observation_repository import ObservationRepository
from .mold_risk import calculate_mold_risk

logger = logging.getLogger(__name__)


def _optional_float(value) -> Optional[float]:
    """Convert a pandas scalar to float, mapping NaN to None."""
    if pd.isna(value):
        return None
    return float(value)


def aggregate(observations: List[WeatherObservation]) -> List[DailyAggregate]:
    """
    Group valid observations by (date, location) and average each field.

    Temperature and humidity are averaged independently: a missing value
    only drops out of its own mean. A group with no values for a field
    gets None for that mean. Mold risk is attached when both means exist.

    Args:
        observations: Observations in any order

    Returns:
        DailyAggregate entities sorted by location, then date
    """
    rows = [o.to_dict() for o in observations if o.is_valid]
    if not rows:
        return []

    df = pd.DataFrame(rows)
    df["date"] = pd.to_datetime(df["timestamp"]).dt.date
    df["temperature"] = pd.to_numeric(df["temperature"], errors="coerce")
    df["humidity"] = pd.to_numeric(df["humidity"], errors="coerce")

    grouped = (
        df.groupby(["location", "date"], sort=True)[["temperature", "humidity"]]
        .mean()
        .reset_index()
    )

    both_present = grouped["temperature"].notna() & grouped["humidity"].notna()
    grouped["mold_risk"] = [
        calculate_mold_risk(t, h) if ok else np.nan
        for t, h, ok in zip(grouped["temperature"], grouped["humidity"], both_present)
    ]

    result = []
    for _, row in grouped.iterrows():
        result.append(
            DailyAggregate(
                date=row["date"],
                location=row["location"],
                avg_temperature=_optional_float(row["temperature"]),
                avg_humidity=_optional_float(row["humidity"]),
                mold_risk=_optional_float(row["mold_risk"]),
            )
        )
    return result


class AggregateDailyUseCase:
    """Use case to compute daily aggregates from stored observations."""

    def __init__(self, repository: ObservationRepository):
        """
        Initialize use case.

        Args:
            repository: Store to read observations from
        """
        self.repository = repository

    def execute(
        self,
        location: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[DailyAggregate]:
        """
        Execute the use case.

        Args:
            location: Canonical location label
            start_date: First date, inclusive (optional)
            end_date: Last date, inclusive (optional)

        Returns:
            List of DailyAggregate entities sorted by date ascending
        """
        start = datetime.combine(start_date, time.min) if start_date else None
        end = datetime.combine(end_date, time.max) if end_date else None
        logger.info(
            f"Aggregating daily means: location={location}, "
            f"start={start_date}, end={end_date}"
        )
        observations = self.repository.query(location=location, start=start, end=end)
        result = aggregate(observations)
        logger.info(f"Computed {len(result)} daily aggregates")
        return result

    def for_date(self, target_date: date, location: str) -> List[DailyAggregate]:
        """Aggregates for a single calendar date (zero or one entry)."""
        return self.execute(location, target_date, target_date)
