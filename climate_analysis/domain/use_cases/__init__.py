"""Use cases - core business operations."""

from .normalize_number import normalize_number_string
from .mold_risk import calculate_mold_risk, get_mold_risk_level
from .parse_observation import ParseObservationUseCase
from .ingest_observations import IngestObservationsUseCase
from .aggregate_daily import AggregateDailyUseCase, aggregate
from .rank_daily_aggregates import RankDailyAggregatesUseCase
from .detect_seasons import DetectSeasonsUseCase, find_season_start

__all__ = [
    "normalize_number_string",
    "calculate_mold_risk",
    "get_mold_risk_level",
    "ParseObservationUseCase",
    "IngestObservationsUseCase",
    "AggregateDailyUseCase",
    "aggregate",
    "RankDailyAggregatesUseCase",
    "DetectSeasonsUseCase",
    "find_season_start",
]
