"""Tests for daily aggregation and ranking."""

import pytest
from datetime import date, datetime
from climate_analysis.domain.entities.row_error_kind import RowErrorKind
from climate_analysis.domain.entities.weather_observation import WeatherObservation
from climate_analysis.domain.use_cases.aggregate_daily import AggregateDailyUseCase, aggregate
from climate_analysis.domain.use_cases.rank_daily_aggregates import RankDailyAggregatesUseCase
from climate_analysis.infrastructure.repositories.in_memory_observation_repository import (
    InMemoryObservationRepository,
)


def obs(day, hour, location, temperature, humidity):
    return WeatherObservation(
        timestamp=datetime(2024, 1, day, hour),
        location=location,
        temperature=temperature,
        humidity=humidity,
    )


@pytest.fixture
def repository():
    repo = InMemoryObservationRepository()
    repo.add_batch(
        [
            obs(1, 8, "Outdoor", 10.0, 70.0),
            obs(1, 20, "Outdoor", 20.0, 90.0),
            obs(1, 12, "Indoor", 22.0, 40.0),
            obs(2, 12, "Outdoor", 25.0, 95.0),
            obs(3, 12, "Outdoor", 5.0, 82.0),
            obs(4, 12, "Outdoor", 30.0, 60.0),
        ]
    )
    return repo


def test_average_of_two_observations():
    """Test two readings on one date average to their mean."""
    result = aggregate([obs(1, 8, "Outdoor", 10.0, 50.0), obs(1, 20, "Outdoor", 20.0, 70.0)])
    assert len(result) == 1
    assert result[0].date == date(2024, 1, 1)
    assert result[0].avg_temperature == pytest.approx(15.0)
    assert result[0].avg_humidity == pytest.approx(60.0)
    assert result[0].mold_risk == 0.0


def test_locations_are_not_mixed():
    """Test grouping key is (date, location)."""
    result = aggregate([obs(1, 8, "Outdoor", 10.0, 50.0), obs(1, 9, "Indoor", 20.0, 50.0)])
    by_location = {a.location: a for a in result}
    assert by_location["Outdoor"].avg_temperature == 10.0
    assert by_location["Indoor"].avg_temperature == 20.0


def test_invalid_observations_are_ignored():
    """Test only valid observations contribute."""
    invalid = WeatherObservation.invalid(RowErrorKind.OUT_OF_RANGE_VALUE, "bad")
    result = aggregate([obs(1, 8, "Outdoor", 10.0, 50.0), invalid])
    assert len(result) == 1
    assert result[0].avg_temperature == 10.0


def test_fields_are_averaged_independently():
    """Test a missing humidity only drops out of the humidity mean."""
    result = aggregate([obs(1, 8, "Outdoor", 10.0, None), obs(1, 9, "Outdoor", 20.0, 90.0)])
    assert result[0].avg_temperature == pytest.approx(15.0)
    assert result[0].avg_humidity == pytest.approx(90.0)
    assert result[0].mold_risk == pytest.approx(10 * 15 / 15)


def test_missing_field_yields_none_not_zero():
    """Test a group without humidity values has no mean and no mold risk."""
    result = aggregate([obs(1, 8, "Outdoor", 10.0, None)])
    assert result[0].avg_temperature == 10.0
    assert result[0].avg_humidity is None
    assert result[0].mold_risk is None


def test_empty_input():
    """Test no observations yield no aggregates."""
    assert aggregate([]) == []


def test_execute_sorted_by_date(repository):
    """Test aggregates for one location come back in date order."""
    result = AggregateDailyUseCase(repository).execute("Outdoor")
    assert [a.date.day for a in result] == [1, 2, 3, 4]
    assert result[0].avg_temperature == pytest.approx(15.0)
    assert result[0].avg_humidity == pytest.approx(80.0)
    assert result[0].mold_risk == 0.0
    assert result[1].mold_risk == pytest.approx(25.0)


def test_execute_date_range(repository):
    """Test inclusive date range filtering."""
    result = AggregateDailyUseCase(repository).execute(
        "Outdoor", start_date=date(2024, 1, 2), end_date=date(2024, 1, 3)
    )
    assert [a.date.day for a in result] == [2, 3]


def test_for_date(repository):
    """Test the single-date aggregate includes late evening readings."""
    result = AggregateDailyUseCase(repository).for_date(date(2024, 1, 1), "Outdoor")
    assert len(result) == 1
    assert result[0].avg_temperature == pytest.approx(15.0)


def test_unknown_location(repository):
    """Test a location without data."""
    assert AggregateDailyUseCase(repository).execute("garage") == []


def test_rank_by_temperature(repository):
    """Test warmest days first."""
    ranking = RankDailyAggregatesUseCase(AggregateDailyUseCase(repository))
    result = ranking.execute("Outdoor", "temperature")
    assert [a.avg_temperature for a in result] == [30.0, 25.0, 15.0, 5.0]


def test_rank_by_humidity_with_limit(repository):
    """Test the result is capped."""
    ranking = RankDailyAggregatesUseCase(AggregateDailyUseCase(repository), limit=2)
    result = ranking.execute("Outdoor", "humidity")
    assert [a.avg_humidity for a in result] == [95.0, 82.0]


def test_rank_by_mold_risk(repository):
    """Test highest mold risk first."""
    ranking = RankDailyAggregatesUseCase(AggregateDailyUseCase(repository))
    result = ranking.execute("Outdoor", "mold_risk", limit=2)
    assert result[0].date == date(2024, 1, 2)
    assert result[1].date == date(2024, 1, 3)


def test_rank_missing_values_last():
    """Test days without a value are ranked after all others."""
    repo = InMemoryObservationRepository()
    repo.add_batch([obs(1, 8, "Outdoor", 10.0, None), obs(2, 8, "Outdoor", 5.0, 90.0)])
    ranking = RankDailyAggregatesUseCase(AggregateDailyUseCase(repo))
    result = ranking.execute("Outdoor", "mold_risk")
    assert result[0].date == date(2024, 1, 2)
    assert result[1].mold_risk is None


def test_rank_unknown_key(repository):
    """Test an unsupported ranking key."""
    ranking = RankDailyAggregatesUseCase(AggregateDailyUseCase(repository))
    with pytest.raises(ValueError):
        ranking.execute("Outdoor", "pressure")


def test_rank_default_limit_caps_at_ten():
    """Test the default ranking returns the ten highest of more than ten days."""
    repo = InMemoryObservationRepository()
    repo.add_batch([obs(day, 12, "Outdoor", float(day), 50.0) for day in range(1, 15)])
    ranking = RankDailyAggregatesUseCase(AggregateDailyUseCase(repo))

    result = ranking.execute("Outdoor", "temperature")
    assert len(result) == 10
    assert [a.avg_temperature for a in result] == [float(t) for t in range(14, 4, -1)]
