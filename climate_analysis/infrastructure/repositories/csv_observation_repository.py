"""CSV file observation repository implementation."""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional
import pandas as pd
from ...domain.entities.weather_observation import WeatherObservation
from ...domain.repositories.observation_repository import ObservationRepository

logger = logging.getLogger(__name__)

COLUMNS = ["timestamp", "location", "temperature", "humidity", "is_valid", "error_message"]
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


class CsvObservationRepository(ObservationRepository):
    """Repository persisting observations to a single CSV file."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to the CSV store file (created on first write)
        """
        self.data_file = Path(data_file)
        self.data_file.parent.mkdir(parents=True, exist_ok=True)

    def clear(self) -> None:
        """Truncate the store to a header-only file."""
        logger.info(f"Clearing observation store {self.data_file}")
        pd.DataFrame(columns=COLUMNS).to_csv(self.data_file, index=False)

    def add_batch(self, batch: List[WeatherObservation]) -> None:
        """Append a batch of observations to the CSV file."""
        if not batch:
            return

        records = []
        for o in batch:
            record = o.to_dict()
            record["timestamp"] = (
                o.timestamp.strftime(TIMESTAMP_FORMAT) if o.timestamp else None
            )
            records.append(record)

        df = pd.DataFrame(records, columns=COLUMNS)
        write_header = not self.data_file.exists()
        df.to_csv(self.data_file, mode="a", header=write_header, index=False)
        logger.debug(f"Appended {len(batch)} observations to {self.data_file}")

    def _load(self) -> pd.DataFrame:
        """Read the whole store into a DataFrame."""
        if not self.data_file.exists():
            return pd.DataFrame(columns=COLUMNS)

        try:
            df = pd.read_csv(
                self.data_file,
                dtype={"location": str, "error_message": str},
                keep_default_na=False,
                na_values={"timestamp": [""], "temperature": [""], "humidity": [""]},
            )
        except Exception as e:
            logger.error(f"Error reading observation store: {e}")
            raise

        df["timestamp"] = pd.to_datetime(df["timestamp"], format=TIMESTAMP_FORMAT)
        df["is_valid"] = df["is_valid"].astype(bool)
        df["location"] = df["location"].fillna("")
        df["error_message"] = df["error_message"].fillna("")
        return df

    def query(
        self,
        location: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        valid_only: bool = True,
    ) -> List[WeatherObservation]:
        """Retrieve observations from the CSV file."""
        df = self._load()

        # Apply filters
        if valid_only:
            df = df[df["is_valid"]]
        if location is not None:
            df = df[df["location"] == location]
        if start is not None:
            df = df[df["timestamp"] >= pd.Timestamp(start)]
        if end is not None:
            df = df[df["timestamp"] <= pd.Timestamp(end)]

        df = df.sort_values("timestamp", kind="stable", na_position="last")

        # Convert to entities
        result = []
        for _, row in df.iterrows():
            observation = WeatherObservation(
                timestamp=(
                    row["timestamp"].to_pydatetime()
                    if pd.notna(row["timestamp"])
                    else None
                ),
                location=row["location"],
                temperature=(
                    float(row["temperature"]) if pd.notna(row["temperature"]) else None
                ),
                humidity=float(row["humidity"]) if pd.notna(row["humidity"]) else None,
                is_valid=bool(row["is_valid"]),
                error_message=row["error_message"],
            )
            result.append(observation)

        logger.info(f"Loaded {len(result)} observations from {self.data_file}")
        return result

    def count(self) -> int:
        """Number of stored observations."""
        return len(self._load())
