"""CLI interface for sensor climate analysis."""

import argparse
import logging
import sys
from datetime import date
from typing import List

from ...application.services.climate_analysis_service import ClimateAnalysisService
from ...domain.entities.daily_aggregate import DailyAggregate
from ...domain.entities.location import Location
from ...domain.use_cases.mold_risk import get_mold_risk_level
from ...infrastructure.repositories.csv_observation_repository import (
    CsvObservationRepository,
)

from config.settings import (
    CSV_DATA_FILE,
    CSV_DELIMITER,
    CSV_ENCODING,
    STORE_FILE,
    INGESTION_SETTINGS,
    TEMPERATURE_RANGE,
    HUMIDITY_RANGE,
    SEASON_CRITERIA,
    TOP_N,
    RAW_LIMIT,
    LOG_LEVEL,
    LOG_FORMAT,
)

logger = logging.getLogger(__name__)

TITLES = {
    "temperature": "WARMEST DAYS",
    "humidity": "MOST HUMID DAYS",
    "mold_risk": "HIGHEST MOLD RISK",
}


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def _format_value(value, unit: str) -> str:
    if value is None:
        return "n/a"
    return f"{value:.1f}{unit}"


def format_aggregate(day: DailyAggregate) -> str:
    """One display line for a daily aggregate."""
    line = (
        f"{day.date:%Y-%m-%d}  "
        f"{_format_value(day.avg_temperature, '°C'):>8}  "
        f"{_format_value(day.avg_humidity, '%'):>7}"
    )
    if day.mold_risk is not None:
        level = get_mold_risk_level(day.mold_risk)
        line += f"  mold risk {day.mold_risk:5.1f} ({level.value})"
    return line


def print_aggregates(title: str, aggregates: List[DailyAggregate]) -> None:
    print("\n" + "=" * 60)
    print(f" {title} ")
    print("=" * 60)
    if not aggregates:
        print(" No data found.")
    for day in aggregates:
        print(f" {format_aggregate(day)}")
    print("=" * 60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sensor Climate Analysis")
    parser.add_argument(
        "--store", type=str, default=str(STORE_FILE), help="CSV file used as observation store"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === load: validate a raw export and replace the store ===
    load_parser = subparsers.add_parser(
        "load", help="Validate a sensor export and replace all stored observations"
    )
    load_parser.add_argument("--file", type=str, default=str(CSV_DATA_FILE), help="Input file")
    load_parser.add_argument(
        "--delimiter", type=str, default=CSV_DELIMITER, help="Field delimiter"
    )

    # === daily: aggregate for one date ===
    daily_parser = subparsers.add_parser("daily", help="Daily mean for one date and location")
    daily_parser.add_argument("--location", type=str, required=True, help="e.g. 'ute' or 'Indoor'")
    daily_parser.add_argument("--date", type=_parse_date, required=True, help="YYYY-MM-DD")

    # === top: ranked days ===
    top_parser = subparsers.add_parser("top", help="Days ranked by a daily mean")
    top_parser.add_argument("--location", type=str, required=True, help="e.g. 'ute' or 'Indoor'")
    top_parser.add_argument(
        "--by", type=str, required=True, choices=list(TITLES), help="Ranking metric"
    )
    top_parser.add_argument("--limit", type=int, default=TOP_N, help="Number of days")

    # === seasons: autumn / winter start ===
    seasons_parser = subparsers.add_parser("seasons", help="Meteorological autumn and winter start")
    seasons_parser.add_argument(
        "--location", type=str, required=True, help="e.g. 'ute' or 'Indoor'"
    )

    # === raw: stored observations ===
    raw_parser = subparsers.add_parser("raw", help="List stored observations")
    raw_parser.add_argument("--start", type=_parse_date, default=None, help="YYYY-MM-DD")
    raw_parser.add_argument("--end", type=_parse_date, default=None, help="YYYY-MM-DD")
    raw_parser.add_argument("--limit", type=int, default=RAW_LIMIT, help="Number of rows")

    return parser


def main(argv=None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    args = build_parser().parse_args(argv)

    # === Initialize repository and service ===
    repository = CsvObservationRepository(args.store)
    service = ClimateAnalysisService(
        repository=repository,
        season_criteria=SEASON_CRITERIA,
        delimiter=getattr(args, "delimiter", CSV_DELIMITER),
        temperature_range=TEMPERATURE_RANGE,
        humidity_range=HUMIDITY_RANGE,
        ingestion_settings=INGESTION_SETTINGS,
        top_n=TOP_N,
        raw_limit=RAW_LIMIT,
    )

    # === Command: load ===
    if args.command == "load":
        report = service.load_observations(args.file, encoding=CSV_ENCODING)
        if not report.succeeded:
            print(f"\nLoad failed: {report.failure}")
            return 1

        for message in report.errors:
            print(f" ! {message}")
        print("\n" + "=" * 60)
        print(" LOAD COMPLETED ")
        print("=" * 60)
        print(f" Valid rows:    {report.valid_rows}")
        print(f" Invalid rows:  {report.invalid_rows}")
        print(f" Stored rows:   {report.stored_rows}")
        print(f" Store:         {repository.data_file}")
        print("=" * 60)
        return 0

    # === Command: raw ===
    if args.command == "raw":
        observations = service.raw_observations(args.start, args.end, args.limit)
        if not observations:
            print("No data found.")
        for observation in observations:
            print(str(observation))
        return 0

    location = Location.resolve(args.location)

    # === Command: daily ===
    if args.command == "daily":
        aggregates = service.daily_aggregate_for(args.date, location)
        print_aggregates(f"DAILY MEAN {location.upper()} {args.date:%Y-%m-%d}", aggregates)

    # === Command: top ===
    elif args.command == "top":
        aggregates = service.top_days(location, args.by, args.limit)
        print_aggregates(f"{TITLES[args.by]} ({location})", aggregates)

    # === Command: seasons ===
    elif args.command == "seasons":
        result = service.seasons(location)
        print("\n" + "=" * 60)
        print(" METEOROLOGICAL SEASONS ")
        print("=" * 60)
        print(f" {result.message}")
        print(f" Autumn start: {result.autumn_start or 'not found'}")
        print(f" Winter start: {result.winter_start or 'not found'}")
        print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
