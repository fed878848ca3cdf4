"""Configuration management for snowflaker.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GenerationConfig: Iteration count and strategy settings
- ProcessingConfig: Worker pool settings
- LoggingConfig: Logging settings
- SnowflakerSettings: Main application settings
"""

from snowflaker.config.settings import (
    MAX_CLI_ITERATIONS,
    GenerationConfig,
    LoggingConfig,
    ProcessingConfig,
    SnowflakerSettings,
    get_default_settings,
)

__all__ = [
    "MAX_CLI_ITERATIONS",
    "GenerationConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "SnowflakerSettings",
    "get_default_settings",
]
