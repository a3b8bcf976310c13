#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pomogarden.config.loader import ConfigLoader
from pomogarden.config.validation import ConfigValidator, ValidationError
from pomogarden.errors import ConfigurationError


def validate_profile_config(loader: ConfigLoader, profile: str) -> List[ValidationError]:
    """Validate configuration for a specific profile."""
    config = loader.merge_config(profile)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating pomogarden configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    for profile in loader.available_profiles():
        print(f"\n🌱 Validating {profile}...")

        try:
            errors = validate_profile_config(loader, profile)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
            else:
                config = loader.load(profile)
                print(
                    f"✅ {profile} is valid "
                    f"({config.timer.work_duration_sec}s work / {config.timer.break_duration_sec}s break, "
                    f"{config.garden.policy} garden under '{config.garden.storage_key}')"
                )

        except ConfigurationError as e:
            print(f"❌ Error validating {profile}: {e}")
            all_valid = False

    if all_valid:
        print("\n🎉 All configurations are valid!")
        return 0
    else:
        print("\n💥 Configuration validation failed!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
