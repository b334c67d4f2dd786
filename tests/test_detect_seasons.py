"""Tests for season transition detection."""

import pytest
from datetime import date, timedelta
from climate_analysis.domain.entities.daily_aggregate import DailyAggregate
from climate_analysis.domain.entities.season_criteria import SeasonCriteria
from climate_analysis.domain.use_cases.aggregate_daily import AggregateDailyUseCase
from climate_analysis.domain.use_cases.detect_seasons import (
    DetectSeasonsUseCase,
    find_season_start,
)
from climate_analysis.infrastructure.repositories.in_memory_observation_repository import (
    InMemoryObservationRepository,
)

START = date(2024, 10, 1)

CRITERIA = {
    "autumn": SeasonCriteria("autumn", threshold=10.0, consecutive_days=5),
    "winter": SeasonCriteria("winter", threshold=0.0, consecutive_days=5),
}


def days(temperatures, start=START):
    return [
        DailyAggregate(date=start + timedelta(days=i), location="Outdoor", avg_temperature=t)
        for i, t in enumerate(temperatures)
    ]


def detector():
    return DetectSeasonsUseCase(AggregateDailyUseCase(InMemoryObservationRepository()), CRITERIA)


def test_first_window_after_warm_days():
    """Test the run starting at index 2 is found, not index 0 or 1."""
    aggregates = days([12, 11, 9, 8, 7, 6, 11])
    assert find_season_start(aggregates, 10.0, 5) is None
    aggregates = days([12, 11, 9, 8, 7, 6, 5])
    assert find_season_start(aggregates, 10.0, 5) == START + timedelta(days=2)


def test_window_uses_next_index_after_failure():
    """Test a broken window resumes at i + 1, not i + run."""
    aggregates = days([9, 12, 9, 8, 7, 6, 5, 4])
    assert find_season_start(aggregates, 10.0, 5) == START + timedelta(days=2)


def test_threshold_is_strict():
    """Test a day exactly at the threshold does not qualify."""
    aggregates = days([9, 9, 10, 9, 9])
    assert find_season_start(aggregates, 10.0, 5) is None


def test_missing_temperature_breaks_window():
    """Test a day without a mean disqualifies windows containing it."""
    aggregates = days([5, 5, None, 5, 5, 5, 5, 5])
    assert find_season_start(aggregates, 10.0, 5) == START + timedelta(days=3)


def test_earliest_match_wins():
    """Test first-match rather than coldest-match semantics."""
    aggregates = days([9, 9, 9, 9, 9, -5, -5, -5, -5, -5])
    assert find_season_start(aggregates, 10.0, 5) == START


def test_no_match():
    """Test no run of the required length."""
    aggregates = days([12, 8, 8, 8, 8, 12, 8])
    assert find_season_start(aggregates, 10.0, 5) is None


def test_empty_and_short_input():
    """Test inputs shorter than the run length."""
    assert find_season_start([], 10.0, 5) is None
    assert find_season_start(days([1, 1, 1]), 10.0, 5) is None


def test_invalid_run_length():
    """Test the run length must be positive."""
    with pytest.raises(ValueError):
        find_season_start(days([1]), 10.0, 0)


def test_detect_clear_match():
    """Test autumn and winter are found independently."""
    temperatures = [14, 13, 9, 8, 7, 6, 5, -1, -2, -3, -4, -5]
    result = detector().detect(days(temperatures), "Outdoor")
    assert result.autumn_start == START + timedelta(days=2)
    assert result.winter_start == START + timedelta(days=7)
    assert "Outdoor" in result.message
    assert "2024-10-01" in result.message
    assert "2024-10-12" in result.message


def test_detect_no_match():
    """Test a warm dataset has no season starts."""
    result = detector().detect(days([15] * 10), "Indoor")
    assert result.autumn_start is None
    assert result.winter_start is None
    assert "2024-10-10" in result.message


def test_detect_winter_without_autumn_order():
    """Test winter is not required to follow autumn."""
    temperatures = [-1, -1, -1, -1, -1]
    result = detector().detect(days(temperatures), "Outdoor")
    assert result.autumn_start == START
    assert result.winter_start == START


def test_detect_sorts_input():
    """Test unsorted aggregates are ordered by date before scanning."""
    aggregates = days([12, 11, 9, 8, 7, 6, 5])
    result = detector().detect(list(reversed(aggregates)), "Outdoor")
    assert result.autumn_start == START + timedelta(days=2)


def test_detect_empty_input():
    """Test no data gives no dates and a no-data message."""
    result = detector().detect([], "Outdoor")
    assert result.autumn_start is None
    assert result.winter_start is None
    assert "No data" in result.message


def test_missing_criteria():
    """Test both autumn and winter criteria are required."""
    with pytest.raises(ValueError):
        DetectSeasonsUseCase(
            AggregateDailyUseCase(InMemoryObservationRepository()),
            {"autumn": CRITERIA["autumn"]},
        )
