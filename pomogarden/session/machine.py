"""
Core session clock transition logic.

Every operation is a pure function taking the current ClockState and
returning the next one. Nothing here schedules ticks or touches the garden;
SessionClock applies the results.
"""

from typing import Optional

from ..logging.config import get_session_logger, log_session_transition
from .models import ClockState, SessionDurations, SessionTransition, SessionType

session_logger = get_session_logger(__name__)


def start_clock(state: ClockState) -> ClockState:
    """Mark the clock as running. Starting a running clock changes nothing."""
    if state.running:
        return state
    return state.with_running(True)


def pause_clock(state: ClockState) -> ClockState:
    """Stop the clock, keeping the countdown where it is."""
    if not state.running:
        return state
    return state.with_running(False)


def reset_clock(state: ClockState, durations: SessionDurations) -> ClockState:
    """
    Return to a stopped work session at full length.

    In-flight progress is discarded; only completed work sessions count.
    """
    return ClockState(
        remaining_seconds=durations.work_seconds,
        running=False,
        session_type=SessionType.WORK,
        completed_work_sessions=state.completed_work_sessions,
    )


def next_session(session_type: SessionType) -> SessionType:
    """The session that follows the given one."""
    if session_type is SessionType.WORK:
        return SessionType.BREAK
    return SessionType.WORK


def tick_clock(
    state: ClockState,
    durations: SessionDurations
) -> tuple[ClockState, Optional[SessionTransition]]:
    """
    Advance the clock by one elapsed second.

    Args:
        state: Current clock state
        durations: Session lengths used when loading the next session

    Returns:
        The new state, plus a SessionTransition when the countdown was
        already at zero and the session completed
    """
    if not state.running:
        return state, None

    if state.remaining_seconds > 0:
        return state.with_remaining(state.remaining_seconds - 1), None

    upcoming = next_session(state.session_type)
    transition = SessionTransition(
        completed=state.session_type,
        next_session=upcoming,
        next_remaining_seconds=durations.for_session(upcoming),
    )
    new_state = state.with_session(upcoming, transition.next_remaining_seconds)

    log_session_transition(
        session_logger,
        from_session=state.session_type.value,
        to_session=upcoming.value,
        remaining_seconds=transition.next_remaining_seconds,
        grows_garden=transition.grows_garden,
        context={"completed_work_sessions": new_state.completed_work_sessions},
    )

    return new_state, transition
