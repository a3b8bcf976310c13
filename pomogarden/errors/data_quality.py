"""
Data quality error classifications for persisted garden data.

These exceptions describe why a stored garden string could not be decoded.
They are always recoverable: the garden store falls back to a fresh garden.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """No persisted data exists for the requested key."""

    def __init__(self, message: str, storage_key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.storage_key = storage_key


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
