"""Use case for loading raw sensor lines into the observation store."""

import logging
from pathlib import Path
from typing import Iterable, List
from ..entities.ingestion_report import IngestionReport
from ..entities.weather_observation import WeatherObservation
from ..exceptions import SourceUnavailableError, StorageError
from ..repositories.observation_repository import ObservationRepository
from .parse_observation import ParseObservationUseCase

logger = logging.getLogger(__name__)


class IngestObservationsUseCase:
    """Use case to validate raw lines and replace the stored observations."""

    def __init__(
        self,
        repository: ObservationRepository,
        parser: ParseObservationUseCase,
        batch_size: int = 1000,
        max_reported_errors: int = 5,
        progress_interval: int = 10000,
    ):
        """
        Initialize use case.

        Args:
            repository: Store receiving the validated observations
            parser: Row parser/validator
            batch_size: Observations per add_batch call
            max_reported_errors: Number of early error messages kept
            progress_interval: Log progress every N lines
        """
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self.repository = repository
        self.parser = parser
        self.batch_size = batch_size
        self.max_reported_errors = max_reported_errors
        self.progress_interval = progress_interval

    def validate(self, lines: Iterable[str]) -> IngestionReport:
        """
        Parse every data line without touching the store.

        The first line is a header and is skipped. Blank lines are skipped
        and not counted.

        Args:
            lines: Raw text lines, header first

        Returns:
            IngestionReport with counts, early errors and valid observations
        """
        report = IngestionReport()
        for index, line in enumerate(lines):
            if index == 0:
                continue
            line = line.rstrip("\r\n")
            if not line.strip():
                continue

            line_number = index + 1
            observation = self.parser.execute(line, line_number)
            if observation.is_valid:
                report.observations.append(observation)
                report.valid_rows += 1
            else:
                report.invalid_rows += 1
                if len(report.errors) < self.max_reported_errors:
                    report.errors.append(
                        f"Line {line_number}: {observation.error_message}"
                    )
                else:
                    logger.debug(f"Line {line_number}: {observation.error_message}")

            if line_number % self.progress_interval == 0:
                logger.info(f"Processed {line_number} lines...")

        logger.info(
            f"Validated {report.total_rows} rows: "
            f"{report.valid_rows} valid, {report.invalid_rows} invalid"
        )
        return report

    def store(self, observations: List[WeatherObservation]) -> int:
        """
        Replace the stored observations with the given list.

        The store is cleared first, then the list is written in batches of
        batch_size, strictly in order.

        Returns:
            Number of observations written

        Raises:
            StorageError: If the store rejects the clear or a batch
        """
        try:
            self.repository.clear()
        except Exception as e:
            raise StorageError(f"Failed to clear observation store: {e}") from e

        total = len(observations)
        stored = 0
        for start in range(0, total, self.batch_size):
            batch = observations[start : start + self.batch_size]
            try:
                self.repository.add_batch(batch)
            except Exception as e:
                raise StorageError(
                    f"Failed to store batch at record {start}: {e}"
                ) from e
            stored += len(batch)
            logger.info(f"Batch saved: {stored} / {total}")
        return stored

    def execute(self, lines: Iterable[str]) -> IngestionReport:
        """
        Execute ingestion of raw lines.

        Args:
            lines: Raw text lines, header first

        Returns:
            IngestionReport entity

        Raises:
            StorageError: If writing to the store fails
        """
        report = self.validate(lines)
        report.stored_rows = self.store(report.observations)
        logger.info(f"Stored {report.stored_rows} observations")
        return report

    def execute_file(self, path: str, encoding: str = "utf-8") -> IngestionReport:
        """
        Execute ingestion of a delimited text file.

        Args:
            path: Path to the input file
            encoding: Text encoding of the file

        Returns:
            IngestionReport entity

        Raises:
            SourceUnavailableError: If the file is missing or unreadable
            StorageError: If writing to the store fails
        """
        source = Path(path)
        logger.info(f"Loading observations from {source}")
        try:
            with open(source, "r", encoding=encoding, newline="") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading input file: {e}")
            raise SourceUnavailableError(f"Cannot read {source}: {e}") from e

        logger.info(f"Read {len(lines)} lines from {source}")
        report = self.execute(lines)
        report.source = str(source)
        return report
