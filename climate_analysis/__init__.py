"""Sensor climate analysis: ingestion, daily aggregation, mold risk and seasons."""

__version__ = "1.0.0"
