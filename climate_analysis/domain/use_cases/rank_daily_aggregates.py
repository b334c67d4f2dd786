"""Use case for ranking daily aggregates."""

import logging
from typing import List, Optional
import pandas as pd
from ..entities.daily_aggregate import DailyAggregate
from .aggregate_daily import AggregateDailyUseCase

logger = logging.getLogger(__name__)

RANK_KEYS = {
    "temperature": "avg_temperature",
    "humidity": "avg_humidity",
    "mold_risk": "mold_risk",
}


class RankDailyAggregatesUseCase:
    """Use case to list the days with the highest mean for one metric."""

    def __init__(self, aggregate_use_case: AggregateDailyUseCase, limit: int = 10):
        """
        Initialize use case.

        Args:
            aggregate_use_case: Source of daily aggregates
            limit: Default number of days returned
        """
        self.aggregate_use_case = aggregate_use_case
        self.limit = limit

    def execute(
        self, location: str, key: str, limit: Optional[int] = None
    ) -> List[DailyAggregate]:
        """
        Execute the ranking.

        Days where the metric is missing are ranked last.

        Args:
            location: Canonical location label
            key: One of 'temperature', 'humidity', 'mold_risk'
            limit: Maximum number of days (defaults to the use case limit)

        Returns:
            DailyAggregate entities, highest value first
        """
        if key not in RANK_KEYS:
            raise ValueError(
                f"Unknown ranking key '{key}'. Expected one of: {', '.join(RANK_KEYS)}"
            )
        limit = self.limit if limit is None else limit

        aggregates = self.aggregate_use_case.execute(location)
        if not aggregates:
            return []

        attribute = RANK_KEYS[key]
        values = pd.Series([getattr(a, attribute) for a in aggregates], dtype="float64")
        order = values.sort_values(ascending=False, na_position="last", kind="stable").index

        ranked = [aggregates[i] for i in order[:limit]]
        logger.info(f"Ranked {len(ranked)} days by {key} for {location}")
        return ranked
