"""Configuration: pydantic models, TOML discovery, unified settings and logging."""
