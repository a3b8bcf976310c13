"""
Error classification for the pomodoro core.

Data quality errors are recovered locally (a malformed garden falls back to
the default garden); system failures are either logged and swallowed
(persistence) or propagated to the caller (configuration).
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    PersistenceError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "PersistenceError",
    "ConfigurationError",
]
