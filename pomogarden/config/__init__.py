"""Configuration profiles, loading and validation."""
