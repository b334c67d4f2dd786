"""Domain exceptions for batch-level ingestion failures."""


class IngestionError(Exception):
    """Base class for failures that abort one load operation."""


class SourceUnavailableError(IngestionError):
    """The raw input source could not be read."""


class StorageError(IngestionError):
    """The observation store rejected a clear or batch write."""
