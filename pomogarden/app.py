"""
Pomodoro application coordinator.

Builds the session clock, garden store and tick source from a configuration
profile and exposes the controls and view data a screen needs:
Start/Pause toggle, Reset and a render-ready snapshot.
"""

from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import DEFAULT_PROFILE, AppConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .garden.models import GrowthPolicy
from .logging.config import configure_logging
from .garden.store import GardenStore
from .persistence.kv_store import InMemoryKeyValueStore, KeyValueStore, SqliteKeyValueStore
from .session.clock import SessionClock
from .session.models import SessionDurations
from .ticking.base import TickSource
from .ticking.threaded import ThreadedTickSource

logger = structlog.get_logger(__name__)


def build_store(config: AppConfig) -> KeyValueStore:
    """Create the key-value store selected by the storage parameters."""
    if config.storage.backend == "sqlite":
        return SqliteKeyValueStore(config.storage.db_path)
    return InMemoryKeyValueStore()


class PomodoroApp:
    """
    Wires a SessionClock to a GardenStore.

    Completed work sessions grow the garden; everything else stays in
    memory for the lifetime of the app.
    """

    def __init__(
        self,
        config: AppConfig,
        store: Optional[KeyValueStore] = None,
        tick_source: Optional[TickSource] = None,
    ) -> None:
        self.config = config
        self.logger = logger

        self.garden = GardenStore(
            store=store if store is not None else build_store(config),
            storage_key=config.garden.storage_key,
            policy=GrowthPolicy(config.garden.policy),
            garden_size=config.garden.garden_size,
            max_stage=config.garden.max_stage,
        )
        self.garden.load()

        self.tick_source = tick_source if tick_source is not None else ThreadedTickSource()
        self.clock = SessionClock(
            durations=SessionDurations(
                work_seconds=config.timer.work_duration_sec,
                break_seconds=config.timer.break_duration_sec,
            ),
            tick_source=self.tick_source,
            on_work_completed=self.garden.record_growth,
        )

    @classmethod
    def create(
        cls,
        profile: str = DEFAULT_PROFILE,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        store: Optional[KeyValueStore] = None,
        tick_source: Optional[TickSource] = None,
    ) -> "PomodoroApp":
        """
        Load, validate and build an app for a configuration profile.

        Raises:
            ConfigurationError: If the profile is unknown or fails validation
        """
        loader = ConfigLoader.create(config_dir)
        merged = loader.merge_config(profile, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration for profile {profile}: "
                + "; ".join(f"{e.field}: {e.message}" for e in errors),
                profile=profile,
                errors=errors,
            )

        config = loader.build_config(merged, profile)
        configure_logging(level=config.logging.level, format_json=config.logging.format_json)
        logger.info(
            "Pomodoro app configured",
            profile=profile,
            policy=config.garden.policy,
            work_duration_sec=config.timer.work_duration_sec,
            break_duration_sec=config.timer.break_duration_sec,
        )
        return cls(config, store=store, tick_source=tick_source)

    def toggle(self) -> None:
        """Start/Pause button."""
        if self.clock.running:
            self.clock.pause()
        else:
            self.clock.start()

    def start(self) -> None:
        self.clock.start()

    def pause(self) -> None:
        self.clock.pause()

    def reset(self) -> None:
        self.clock.reset()

    def shutdown(self) -> None:
        """Stop tick delivery when the hosting view goes away."""
        self.clock.pause()

    def snapshot(self) -> dict[str, Any]:
        """View data for the timer screen."""
        state = self.clock.state
        view: dict[str, Any] = {
            "session_type": state.session_type.value,
            "session_label": self.clock.session_label,
            "remaining_seconds": state.remaining_seconds,
            "display_time": self.clock.formatted_remaining,
            "running": state.running,
            "button_label": "Pause" if state.running else "Start",
            "completed_work_sessions": state.completed_work_sessions,
            "garden_policy": self.garden.policy.value,
            "total_growth": self.garden.total_growth,
        }
        if self.garden.policy is GrowthPolicy.STAGED:
            view["plots"] = self.garden.stage_names()
        else:
            view["plant_count"] = self.garden.plant_count()
        return view
