"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    BUILTIN_PROFILES,
    AppConfig,
    GardenParams,
    LoggingParams,
    StorageParams,
    TimerParams,
    get_profile_config,
)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(config_dir=Path(config_dir))

    def load_profile_overrides(self, profile: str) -> dict[str, Any]:
        """Load profile-specific overrides from ``profiles.yaml``."""
        profiles_file = self.config_dir / "profiles.yaml"

        if not profiles_file.exists():
            return {}

        with open(profiles_file) as f:
            profiles_config = yaml.safe_load(f) or {}

        return profiles_config.get("profiles", {}).get(profile, {}) or {}  # type: ignore[no-any-return]

    def available_profiles(self) -> list[str]:
        """Built-in profiles plus any extra profiles declared in ``profiles.yaml``."""
        names = list(BUILTIN_PROFILES)
        profiles_file = self.config_dir / "profiles.yaml"
        if profiles_file.exists():
            with open(profiles_file) as f:
                declared = (yaml.safe_load(f) or {}).get("profiles", {}) or {}
            names.extend(name for name in declared if name not in names)
        return names

    def merge_config(
        self,
        profile: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. Profile section of profiles.yaml
        3. Built-in profile defaults (lowest priority)

        A profile that only exists in profiles.yaml starts from the
        ``staged`` built-in defaults.
        """
        file_config = self.load_profile_overrides(profile)
        if profile in BUILTIN_PROFILES:
            base = get_profile_config(profile)
        elif file_config:
            base = get_profile_config(file_config.get("extends", "staged"))
        else:
            raise ConfigurationError(f"Unknown profile: {profile}", profile=profile)

        config = self._dataclass_to_dict(base)
        file_config = {k: v for k, v in file_config.items() if k != "extends"}
        config = self._deep_merge(config, file_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        profile: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> AppConfig:
        """Merge configuration for a profile and build the typed config."""
        return self.build_config(self.merge_config(profile, overrides), profile)

    def build_config(self, merged: dict[str, Any], profile: str) -> AppConfig:
        """Build the typed config from an already merged dictionary."""
        try:
            return AppConfig(
                timer=TimerParams(**merged.get("timer", {})),
                garden=GardenParams(**merged.get("garden", {})),
                storage=StorageParams(**merged.get("storage", {})),
                logging=LoggingParams(**merged.get("logging", {})),
            )
        except TypeError as e:
            raise ConfigurationError(
                f"Unknown configuration field in profile {profile}: {e}",
                profile=profile,
            ) from e

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
