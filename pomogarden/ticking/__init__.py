"""Tick sources that drive the session clock once per elapsed second."""

from .base import ManualTickSource, TickCallback, TickSource
from .threaded import ThreadedTickSource

__all__ = ["TickSource", "TickCallback", "ManualTickSource", "ThreadedTickSource"]
