"""
Session clock module.

Manages the work/break countdown state machine. Transitions are pure
functions over an immutable ClockState; SessionClock owns the current
state, drives it from a tick source and notifies observers.
"""
