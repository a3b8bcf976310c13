"""
Session clock data models.

This module defines immutable data structures for the countdown state,
session durations and completion transitions.
"""

from dataclasses import dataclass, replace
from enum import Enum


class SessionType(str, Enum):
    """Kind of interval currently loaded on the clock."""
    WORK = "work"
    BREAK = "break"

    @property
    def label(self) -> str:
        """Human-readable label shown above the countdown."""
        return "Work Session" if self is SessionType.WORK else "Break"


@dataclass(frozen=True)
class SessionDurations:
    """Length of each session type in seconds."""

    work_seconds: int
    break_seconds: int

    def __post_init__(self) -> None:
        if self.work_seconds <= 0 or self.break_seconds <= 0:
            raise ValueError(
                f"Session durations must be positive: work={self.work_seconds}, "
                f"break={self.break_seconds}"
            )

    def for_session(self, session_type: SessionType) -> int:
        """Duration of the given session type."""
        if session_type is SessionType.WORK:
            return self.work_seconds
        return self.break_seconds


@dataclass(frozen=True)
class ClockState:
    """Countdown state of the session clock. Never persisted."""

    remaining_seconds: int
    running: bool = False
    session_type: SessionType = SessionType.WORK
    completed_work_sessions: int = 0

    def __post_init__(self) -> None:
        if self.remaining_seconds < 0:
            raise ValueError(f"remaining_seconds cannot be negative: {self.remaining_seconds}")

    @classmethod
    def initial(cls, durations: SessionDurations) -> 'ClockState':
        """State at application start: stopped at the top of a work session."""
        return cls(remaining_seconds=durations.work_seconds)

    def with_running(self, running: bool) -> 'ClockState':
        return replace(self, running=running)

    def with_remaining(self, remaining_seconds: int) -> 'ClockState':
        return replace(self, remaining_seconds=remaining_seconds)

    def with_session(self, session_type: SessionType, remaining_seconds: int) -> 'ClockState':
        """Load a new session; the clock is stopped."""
        completed = self.completed_work_sessions
        if self.session_type is SessionType.WORK and session_type is SessionType.BREAK:
            completed += 1
        return replace(
            self,
            running=False,
            session_type=session_type,
            remaining_seconds=remaining_seconds,
            completed_work_sessions=completed,
        )


@dataclass(frozen=True)
class SessionTransition:
    """Result of a countdown reaching zero."""

    completed: SessionType
    next_session: SessionType
    next_remaining_seconds: int

    @property
    def grows_garden(self) -> bool:
        """Only a completed work session records growth."""
        return self.completed is SessionType.WORK
