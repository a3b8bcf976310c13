"""Tests for session clock data models."""

import pytest

from pomogarden.session.models import (
    ClockState, SessionDurations, SessionTransition, SessionType
)


class TestSessionType:
    """Test SessionType enum."""

    def test_values(self):
        assert SessionType.WORK.value == "work"
        assert SessionType.BREAK.value == "break"
        assert SessionType("break") is SessionType.BREAK

    def test_labels(self):
        assert SessionType.WORK.label == "Work Session"
        assert SessionType.BREAK.label == "Break"


class TestSessionDurations:
    """Test SessionDurations validation and lookup."""

    def test_for_session(self):
        durations = SessionDurations(work_seconds=1500, break_seconds=300)
        assert durations.for_session(SessionType.WORK) == 1500
        assert durations.for_session(SessionType.BREAK) == 300

    @pytest.mark.parametrize("work,brk", [(0, 300), (1500, 0), (-1, 5)])
    def test_rejects_non_positive(self, work, brk):
        with pytest.raises(ValueError):
            SessionDurations(work_seconds=work, break_seconds=brk)


class TestClockState:
    """Test ClockState creation and immutable updates."""

    def test_initial_state(self):
        state = ClockState.initial(SessionDurations(work_seconds=1500, break_seconds=300))
        assert state.remaining_seconds == 1500
        assert state.running is False
        assert state.session_type is SessionType.WORK
        assert state.completed_work_sessions == 0

    def test_negative_remaining_rejected(self):
        with pytest.raises(ValueError):
            ClockState(remaining_seconds=-1)

    def test_with_running_returns_new_instance(self):
        state = ClockState(remaining_seconds=10)
        running = state.with_running(True)
        assert running.running is True
        assert state.running is False

    def test_with_session_work_to_break_counts_completion(self):
        state = ClockState(remaining_seconds=0, running=True)
        new_state = state.with_session(SessionType.BREAK, 300)
        assert new_state.session_type is SessionType.BREAK
        assert new_state.remaining_seconds == 300
        assert new_state.running is False
        assert new_state.completed_work_sessions == 1

    def test_with_session_break_to_work_keeps_count(self):
        state = ClockState(
            remaining_seconds=0, running=True,
            session_type=SessionType.BREAK, completed_work_sessions=2
        )
        new_state = state.with_session(SessionType.WORK, 1500)
        assert new_state.completed_work_sessions == 2


class TestSessionTransition:
    """Test SessionTransition growth flag."""

    def test_work_completion_grows(self):
        transition = SessionTransition(SessionType.WORK, SessionType.BREAK, 300)
        assert transition.grows_garden is True

    def test_break_completion_does_not_grow(self):
        transition = SessionTransition(SessionType.BREAK, SessionType.WORK, 1500)
        assert transition.grows_garden is False
