"""Default configuration parameters and built-in profiles."""

from dataclasses import dataclass, replace

DEFAULT_PROFILE = "staged"


@dataclass(frozen=True)
class TimerParams:
    """Session durations."""
    work_duration_sec: int = 25 * 60
    break_duration_sec: int = 5 * 60


@dataclass(frozen=True)
class GardenParams:
    """Garden growth model."""
    policy: str = "staged"              # "staged" (plots) or "unbounded" (flat count)
    garden_size: int = 6                # Number of plots in a staged garden
    max_stage: int = 3                  # soil -> seed -> sprout -> tree
    storage_key: str = "farmData"       # Durable key holding the serialized garden


@dataclass(frozen=True)
class StorageParams:
    """Durable key-value store parameters."""
    backend: str = "sqlite"             # "sqlite", or "memory" for tests and demos
    db_path: str = "pomogarden.db"


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    timer: TimerParams
    garden: GardenParams
    storage: StorageParams
    logging: LoggingParams


def get_default_config() -> AppConfig:
    """Get the default configuration instance."""
    return AppConfig(
        timer=TimerParams(),
        garden=GardenParams(),
        storage=StorageParams(),
        logging=LoggingParams(),
    )


def get_profile_config(profile: str) -> AppConfig:
    """
    Get the built-in configuration for a named profile.

    Raises:
        KeyError: If the profile is not built in
    """
    return BUILTIN_PROFILES[profile]()


def _staged_profile() -> AppConfig:
    return get_default_config()


def _counter_profile() -> AppConfig:
    base = get_default_config()
    return replace(
        base,
        garden=GardenParams(policy="unbounded", garden_size=1, storage_key="plantCount"),
    )


def _demo_profile() -> AppConfig:
    base = get_default_config()
    return replace(base, timer=TimerParams(work_duration_sec=5, break_duration_sec=2))


BUILTIN_PROFILES = {
    "staged": _staged_profile,
    "counter": _counter_profile,
    "demo": _demo_profile,
}
