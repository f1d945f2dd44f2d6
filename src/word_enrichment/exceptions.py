"""Exceptions for the word enrichment pipeline."""


class WordEnrichmentError(Exception):
    """Base exception for word enrichment errors."""

    pass


class DatasetReadError(WordEnrichmentError):
    """Raised when the source dataset cannot be read or parsed."""

    pass


class DatasetPathError(WordEnrichmentError):
    """Raised when an output artifact path would overwrite the source dataset."""

    pass


class DatasetWriteError(WordEnrichmentError):
    """Raised when the improved dataset cannot be written."""

    pass


class BackupWriteError(DatasetWriteError):
    """Raised when the backup copy of the source dataset cannot be written."""

    pass
