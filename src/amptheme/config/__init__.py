"""Configuration — pydantic models, settings, TOML discovery and logging."""
