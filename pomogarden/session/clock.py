"""
Session clock driven by an injected tick source.

SessionClock owns the current ClockState, applies the pure transitions from
``machine`` and hands completed work sessions to a growth sink.
"""

import threading
from typing import Callable, Optional

import structlog

from ..ticking.base import TickSource
from ..utils.time import format_countdown
from .machine import pause_clock, reset_clock, start_clock, tick_clock
from .models import ClockState, SessionDurations, SessionTransition, SessionType

logger = structlog.get_logger(__name__)

GrowthSink = Callable[[], object]
StateListener = Callable[[ClockState], None]


class SessionClock:
    """Work/break countdown with start, pause, reset and tick controls."""

    def __init__(
        self,
        durations: SessionDurations,
        tick_source: TickSource,
        on_work_completed: Optional[GrowthSink] = None,
    ):
        self.durations = durations
        self.tick_source = tick_source
        self._on_work_completed = on_work_completed
        self._state = ClockState.initial(durations)
        self._listeners: list[StateListener] = []
        self._lock = threading.RLock()
        self.logger = logger

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def session_type(self) -> SessionType:
        return self._state.session_type

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def formatted_remaining(self) -> str:
        return format_countdown(self._state.remaining_seconds)

    @property
    def session_label(self) -> str:
        return self._state.session_type.label

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with every new ClockState.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        """Start counting down. No effect while already running."""
        with self._lock:
            if self._state.running:
                return
            self._set_state(start_clock(self._state))
            self.tick_source.subscribe(self.tick)
            self.logger.info(
                "Clock started",
                session_type=self._state.session_type.value,
                remaining_seconds=self._state.remaining_seconds,
            )

    def pause(self) -> None:
        """Stop counting down, keeping the remaining time."""
        with self._lock:
            was_running = self._state.running
            if was_running:
                self._set_state(pause_clock(self._state))
        # Cancel outside the lock: a threaded source joins its worker, which
        # may be blocked on the lock delivering a tick.
        self.tick_source.cancel()
        if was_running:
            self.logger.info("Clock paused", remaining_seconds=self._state.remaining_seconds)

    def reset(self) -> None:
        """Discard the current session and load a stopped, full-length work session."""
        with self._lock:
            new_state = reset_clock(self._state, self.durations)
            changed = new_state != self._state
            if changed:
                self._set_state(new_state)
        self.tick_source.cancel()
        if changed:
            self.logger.info("Clock reset", remaining_seconds=new_state.remaining_seconds)

    def tick(self) -> Optional[SessionTransition]:
        """
        Advance by one elapsed second.

        Returns:
            The SessionTransition when a session completed on this tick
        """
        with self._lock:
            if not self._state.running:
                return None

            new_state, transition = tick_clock(self._state, self.durations)
            if transition is not None:
                self.tick_source.cancel()

            # The transition is applied before the growth sink runs so a failing
            # sink cannot leave the clock running at zero with ticks cancelled.
            self._set_state(new_state)

            if transition is not None and transition.grows_garden and self._on_work_completed is not None:
                try:
                    self._on_work_completed()
                except Exception:
                    self.logger.exception("Growth sink failed", completed=transition.completed.value)
            return transition

    def _set_state(self, new_state: ClockState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
