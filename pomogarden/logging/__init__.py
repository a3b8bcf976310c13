"""
Logging configuration and utilities for the pomodoro core.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
