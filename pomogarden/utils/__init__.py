"""Utility functions for the pomodoro core."""
