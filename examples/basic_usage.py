#!/usr/bin/env python3
"""
Basic Usage Example - Pomogarden

This script runs the ``demo`` profile (5 second work sessions, 2 second
breaks) against an in-memory store with a manual tick source, so a full
day of pomodoros plays out instantly. It shows how to:
- Create the app from a profile
- Drive the Start/Pause and Reset controls
- Watch the garden grow after each completed work session

Run: python examples/basic_usage.py
"""

from pomogarden.app import PomodoroApp
from pomogarden.persistence import InMemoryKeyValueStore
from pomogarden.ticking import ManualTickSource

QUIET = {"logging": {"level": "WARNING"}}


def print_snapshot(app: PomodoroApp) -> None:
    view = app.snapshot()
    garden = view.get("plots", view.get("plant_count"))
    print(f"  {view['session_label']:<13} {view['display_time']}  [{view['button_label']}]  garden: {garden}")


def run_cycle(app: PomodoroApp, ticks: ManualTickSource) -> None:
    """Run one work session and the break after it."""
    for _ in range(2):
        app.toggle()
        # One extra tick processes the transition at 00:00
        ticks.advance(app.clock.remaining_seconds + 1)
        print_snapshot(app)


def main() -> None:
    store = InMemoryKeyValueStore()
    ticks = ManualTickSource()
    app = PomodoroApp.create(profile="demo", overrides=QUIET, store=store, tick_source=ticks)

    print("🌱 Starting garden")
    print_snapshot(app)

    for cycle in range(1, 5):
        print(f"\n🍅 Pomodoro {cycle}")
        run_cycle(app, ticks)

    print("\n⏸  Abandoning a work session halfway")
    app.toggle()
    ticks.advance(3)
    print_snapshot(app)
    app.reset()
    print_snapshot(app)

    print(f"\n💾 Stored garden: {store.get(app.config.garden.storage_key)}")

    reloaded = PomodoroApp.create(
        profile="demo", overrides=QUIET, store=store, tick_source=ManualTickSource()
    )
    print("🔁 Reloaded from store")
    print_snapshot(reloaded)


if __name__ == "__main__":
    main()
