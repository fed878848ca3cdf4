"""Configuration settings for Snowflaker."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

# A curve holds 3 * 4**n + 1 points: ~50M at 12, ~8.4e14 at 24
MAX_CLI_ITERATIONS = 12


class GenerationConfig(BaseModel):
    """Configuration for snowflake generation.

    The iteration bound here guards callers against runaway point counts
    (the curve grows as 3 * 4**n + 1). The generator itself enforces none.
    """

    iterations: int = Field(
        default=5,
        ge=0,
        le=MAX_CLI_ITERATIONS,
        description="Number of subdivision passes",
    )
    parallel: bool = Field(
        default=True,
        description="Subdivide segments on a thread pool instead of sequentially",
    )
    tolerance: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Coordinate tolerance when comparing strategy outputs",
    )


class ProcessingConfig(BaseModel):
    """Configuration for parallel processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker threads (None = auto)",
    )

    def resolved_workers(self) -> int:
        """Get the worker count, falling back to the CPU count."""
        if self.max_workers is not None:
            return self.max_workers
        return os.cpu_count() or 1


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SnowflakerSettings(BaseModel):
    """Main application settings."""

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SnowflakerSettings:
    """Get default application settings."""
    return SnowflakerSettings()
