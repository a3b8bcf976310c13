"""
System failure error classifications.

Persistence failures are treated as best-effort by the garden store; an
invalid configuration stops the application from starting.
"""

from typing import Optional, Dict, Any, List


class SystemFailureError(Exception):
    """Base class for system-level failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class PersistenceError(SystemFailureError):
    """Durable key-value store read or write failure."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target


class ConfigurationError(SystemFailureError):
    """Configuration failed validation or references an unknown profile."""

    def __init__(self, message: str, profile: Optional[str] = None,
                 errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.profile = profile
        self.errors = errors or []
