"""Logging utilities for Snowflaker."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_TAG = "_snowflaker_handler"


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    iterations: int = 0
    parallel: bool = False
    workers: int = 1
    point_count: int = 0
    completed_iterations: int = 0
    iteration_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def strategy(self) -> str:
        return "parallel" if self.parallel else "sequential"

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0

    @property
    def duration_ms(self) -> float:
        return self.duration_seconds * 1000

    @property
    def slowest_iteration_ms(self) -> float | None:
        """Get the longest single iteration, if any ran."""
        if not self.iteration_timings_ms:
            return None
        return max(self.iteration_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and, optionally, a file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("snowflaker")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking generation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, stats: GenerationStats) -> None:
        self._logger = logger
        self._stats = stats

    def log_generation_start(self) -> None:
        """Log start of a generation run."""
        self._logger.info(
            "Starting snowflake generation",
            iterations=self._stats.iterations,
            strategy=self._stats.strategy,
            workers=self._stats.workers,
        )

    def log_iteration_complete(
        self,
        iteration: int,
        segment_count: int,
        point_count: int,
        duration_ms: float,
    ) -> None:
        """Log a finished subdivision pass."""
        self._logger.debug(
            "Iteration complete",
            iteration=iteration,
            segments=segment_count,
            points=point_count,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.completed_iterations = iteration
        self._stats.point_count = point_count
        self._stats.iteration_timings_ms.append(duration_ms)

    def log_generation_complete(self) -> None:
        """Log successful generation."""
        self._logger.info(
            "Generation complete",
            iterations=self._stats.iterations,
            strategy=self._stats.strategy,
            points=self._stats.point_count,
            duration_ms=round(self._stats.duration_ms, 2),
        )

    def log_generation_error(self, error: Exception) -> None:
        """Log failed generation."""
        self._logger.error(
            "Generation failed",
            iterations=self._stats.iterations,
            strategy=self._stats.strategy,
            completed_iterations=self._stats.completed_iterations,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
