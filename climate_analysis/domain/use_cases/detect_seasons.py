"""Use case for detecting meteorological season transitions."""

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence
from ..entities.daily_aggregate import DailyAggregate
from ..entities.season_criteria import SeasonCriteria
from ..entities.season_result import SeasonResult
from .aggregate_daily import AggregateDailyUseCase

logger = logging.getLogger(__name__)


def find_season_start(
    aggregates: Sequence[DailyAggregate],
    threshold: float,
    consecutive_days: int,
) -> Optional[date]:
    """
    Find the first day of the earliest run of cold days.

    Scans every start index left to right and returns the date at the
    first index whose window of `consecutive_days` aggregates all have a
    mean temperature strictly below `threshold`. A missing mean breaks the
    window. After a failed window the scan resumes at the next index.

    Args:
        aggregates: Daily aggregates sorted by date ascending
        threshold: Exclusive upper temperature bound (Celsius)
        consecutive_days: Required run length

    Returns:
        Date of the first day of the run, or None if no run exists
    """
    if consecutive_days < 1:
        raise ValueError("consecutive_days must be at least 1")

    for i in range(len(aggregates) - consecutive_days + 1):
        window = aggregates[i : i + consecutive_days]
        if all(
            day.avg_temperature is not None and day.avg_temperature < threshold
            for day in window
        ):
            return aggregates[i].date
    return None


class DetectSeasonsUseCase:
    """Use case to find autumn and winter start dates for a location."""

    def __init__(
        self,
        aggregate_use_case: AggregateDailyUseCase,
        criteria: Dict[str, SeasonCriteria],
    ):
        """
        Initialize use case.

        Args:
            aggregate_use_case: Source of daily aggregates
            criteria: Season criteria keyed by name; must hold 'autumn' and 'winter'
        """
        missing = {"autumn", "winter"} - set(criteria)
        if missing:
            raise ValueError(f"Missing season criteria: {', '.join(sorted(missing))}")
        self.aggregate_use_case = aggregate_use_case
        self.criteria = criteria

    def detect(self, aggregates: List[DailyAggregate], location: str) -> SeasonResult:
        """
        Detect season starts in already computed aggregates.

        Autumn and winter are searched independently; winter is not
        required to follow autumn.

        Args:
            aggregates: Daily aggregates for one location, any order
            location: Location label used in the message

        Returns:
            SeasonResult entity
        """
        if not aggregates:
            return SeasonResult(
                location=location,
                message=f"No data available for season calculation ({location})",
            )

        ordered = sorted(aggregates, key=lambda a: a.date)
        autumn = self.criteria["autumn"]
        winter = self.criteria["winter"]

        autumn_start = find_season_start(ordered, autumn.threshold, autumn.consecutive_days)
        winter_start = find_season_start(ordered, winter.threshold, winter.consecutive_days)

        if autumn_start is None:
            logger.info(
                f"No autumn start for {location}: no {autumn.consecutive_days} "
                f"consecutive days below {autumn.threshold}°C"
            )
        if winter_start is None:
            logger.info(
                f"No winter start for {location}: no {winter.consecutive_days} "
                f"consecutive days below {winter.threshold}°C"
            )

        return SeasonResult(
            location=location,
            autumn_start=autumn_start,
            winter_start=winter_start,
            message=(
                f"Season calculation complete for {location}. "
                f"Data from {ordered[0].date:%Y-%m-%d} to {ordered[-1].date:%Y-%m-%d}"
            ),
        )

    def execute(self, location: str) -> SeasonResult:
        """
        Execute the use case.

        Args:
            location: Canonical location label

        Returns:
            SeasonResult entity
        """
        logger.info(f"Detecting seasons for {location}")
        aggregates = self.aggregate_use_case.execute(location)
        return self.detect(aggregates, location)
