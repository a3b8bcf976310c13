"""Base classes for tick delivery."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

import structlog

TickCallback = Callable[[], None]


class TickSource(ABC):
    """
    Periodic source of ticks for a single subscriber.

    Ticks are delivered serially and never overlap. Subscribing replaces
    any previous subscriber; cancelling stops delivery and may be called
    from inside the callback.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"ticking.{name}")
        self._callback: Optional[TickCallback] = None
        self._tick_count = 0

    @property
    def active(self) -> bool:
        """Whether a subscriber is currently receiving ticks."""
        return self._callback is not None

    @abstractmethod
    def subscribe(self, callback: TickCallback) -> None:
        """Begin delivering ticks to ``callback``."""
        pass

    @abstractmethod
    def cancel(self) -> None:
        """Stop delivering ticks. Idempotent."""
        pass

    def _deliver(self) -> None:
        callback = self._callback
        if callback is None:
            return
        self._tick_count += 1
        callback()

    def get_stats(self) -> dict:
        """Get tick delivery statistics."""
        return {
            "name": self.name,
            "active": self.active,
            "tick_count": self._tick_count,
        }


class ManualTickSource(TickSource):
    """Tick source advanced explicitly, for deterministic tests and demos."""

    def __init__(self, name: str = "manual"):
        super().__init__(name)

    def subscribe(self, callback: TickCallback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def advance(self, ticks: int = 1) -> int:
        """
        Deliver up to ``ticks`` ticks.

        Delivery stops early once the subscriber cancels.

        Returns:
            Number of ticks actually delivered
        """
        delivered = 0
        for _ in range(ticks):
            if not self.active:
                break
            self._deliver()
            delivered += 1
        return delivered
