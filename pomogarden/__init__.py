"""
Pomogarden - Pomodoro Timer with a Growing Garden

A work/break countdown state machine that grows a small persisted garden
every time a work session completes. The garden is either a staged
multi-plot farm or a flat plant count, selected by configuration profile.
"""

__version__ = "0.1.0"
__author__ = "Pomogarden Team"
