"""Use case for parsing and validating one raw sensor line."""

import csv
import logging
import math
from datetime import datetime
from typing import List, Optional, Tuple
from dateutil import parser as date_parser
from ..entities.location import Location
from ..entities.row_error_kind import RowErrorKind
from ..entities.weather_observation import WeatherObservation
from .normalize_number import normalize_number_string

logger = logging.getLogger(__name__)

EXPECTED_FIELDS = 4

# Span representable by a nanosecond pandas Timestamp
MIN_TIMESTAMP = datetime(1677, 9, 22)
MAX_TIMESTAMP = datetime(2262, 4, 11)


class ParseObservationUseCase:
    """Turn one delimited text line into a valid or rejected observation."""

    def __init__(
        self,
        delimiter: str = ",",
        temperature_range: Tuple[float, float] = (-50.0, 50.0),
        humidity_range: Tuple[float, float] = (0.0, 100.0),
    ):
        """
        Initialize use case.

        Args:
            delimiter: Field delimiter of the input file
            temperature_range: Inclusive (min, max) temperature in Celsius
            humidity_range: Inclusive (min, max) relative humidity in percent
        """
        self.delimiter = delimiter
        self.temperature_range = temperature_range
        self.humidity_range = humidity_range

    def _split_fields(self, line: str) -> List[str]:
        """Split a line on the delimiter, honouring CSV quoting."""
        return next(csv.reader([line], delimiter=self.delimiter), [])

    @staticmethod
    def _parse_timestamp(text: str) -> Optional[datetime]:
        """
        Parse a day-before-month, 24-hour timestamp.

        ISO 'YYYY-MM-DD[ HH:MM[:SS]]' is tried first, since dateutil with
        dayfirst=True reads '2024-01-05' as 1 May. A timezone offset in the
        text is dropped without converting the wall-clock time. Dates
        outside the pandas Timestamp range are rejected.
        """
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            try:
                parsed = date_parser.parse(text, dayfirst=True)
            except (ValueError, OverflowError):
                return None
        if parsed.tzinfo is not None:
            parsed = parsed.replace(tzinfo=None)
        if parsed < MIN_TIMESTAMP or parsed > MAX_TIMESTAMP:
            return None
        return parsed

    @staticmethod
    def _parse_number(text: str) -> Optional[float]:
        """Parse an already normalized number with '.' as decimal point."""
        try:
            value = float(text)
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        return value

    def execute(self, line: str, line_number: int = 0) -> WeatherObservation:
        """
        Execute parsing and validation.

        Never raises: every failure is returned as an invalid observation
        tagged with a RowErrorKind.

        Args:
            line: Raw text line (without trailing newline)
            line_number: 1-based position in the source, for error reporting

        Returns:
            WeatherObservation entity
        """
        try:
            return self._parse(line, line_number)
        except Exception as e:
            logger.debug(f"Unexpected failure on line {line_number}: {e!r}")
            return WeatherObservation.invalid(
                RowErrorKind.UNEXPECTED_PARSE_FAILURE,
                f"Parse error: {e}",
                line_number,
            )

    def _parse(self, line: str, line_number: int) -> WeatherObservation:
        fields = self._split_fields(line)
        if len(fields) < EXPECTED_FIELDS:
            return WeatherObservation.invalid(
                RowErrorKind.MALFORMED_ROW,
                f"Too few fields: {len(fields)}. Expected {EXPECTED_FIELDS} fields.",
                line_number,
            )

        date_text = fields[0].strip()
        timestamp = self._parse_timestamp(date_text)
        if timestamp is None:
            return WeatherObservation.invalid(
                RowErrorKind.INVALID_TIMESTAMP,
                f"Invalid datetime format: '{date_text}'",
                line_number,
            )

        location = Location.from_code(fields[1])
        if location not in (Location.OUTDOOR.value, Location.INDOOR.value):
            logger.debug(f"Line {line_number}: unmapped location code '{location}'")

        temp_text = normalize_number_string(fields[2].strip())
        temperature = self._parse_number(temp_text)
        if temperature is None:
            return WeatherObservation.invalid(
                RowErrorKind.INVALID_NUMERIC_FIELD,
                f"Invalid temperature value: '{fields[2]}' (normalized: '{temp_text}')",
                line_number,
            )

        humidity_text = normalize_number_string(fields[3].strip())
        humidity = self._parse_number(humidity_text)
        if humidity is None:
            return WeatherObservation.invalid(
                RowErrorKind.INVALID_NUMERIC_FIELD,
                f"Invalid humidity value: '{fields[3]}' (normalized: '{humidity_text}')",
                line_number,
            )

        t_min, t_max = self.temperature_range
        if temperature < t_min or temperature > t_max:
            return WeatherObservation.invalid(
                RowErrorKind.OUT_OF_RANGE_VALUE,
                f"Temperature outside plausible range: {temperature}",
                line_number,
            )

        h_min, h_max = self.humidity_range
        if humidity < h_min or humidity > h_max:
            return WeatherObservation.invalid(
                RowErrorKind.OUT_OF_RANGE_VALUE,
                f"Humidity outside plausible range: {humidity}",
                line_number,
            )

        return WeatherObservation(
            timestamp=timestamp,
            location=location,
            temperature=temperature,
            humidity=humidity,
            line_number=line_number,
        )
