"""Iteration orchestration for Koch snowflake generation.

This module drives the full generation loop: build the seed triangle, then
repeatedly split the current curve into segments, subdivide them with the
chosen strategy, and close the new curve with the carried-forward final
point.

Key components:
- GenerationResult: A finished curve together with its statistics
- SnowflakeGenerator: Main orchestrator class
- generate: Convenience entry point returning the ordered point list
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import chain

import structlog

from snowflaker.config import SnowflakerSettings
from snowflaker.core.dispatch import subdivide_parallel, subdivide_sequential
from snowflaker.core.geometry import next_point_count, seed_curve
from snowflaker.domain import Curve, Point
from snowflaker.exceptions import (
    GenerationError,
    InvalidIterationsError,
    InvalidWorkersError,
    ResourceExhaustionError,
)
from snowflaker.utils import GenerationLogger, GenerationStats


@dataclass(frozen=True)
class GenerationResult:
    """A generated curve and the statistics of the run that built it."""

    curve: Curve
    stats: GenerationStats


def validate_iterations(iterations: object) -> int:
    """Check that iterations is a non-negative integer.

    Args:
        iterations: Requested number of subdivision passes

    Returns:
        The validated iteration count

    Raises:
        InvalidIterationsError: If iterations is negative, a bool, or not an int
    """
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidIterationsError(iterations)
    if iterations < 0:
        raise InvalidIterationsError(iterations)
    return iterations


def validate_workers(max_workers: object) -> int:
    """Check that a worker count is a positive integer.

    Raises:
        InvalidWorkersError: If max_workers is below 1, a bool, or not an int
    """
    if isinstance(max_workers, bool) or not isinstance(max_workers, int):
        raise InvalidWorkersError(max_workers)
    if max_workers < 1:
        raise InvalidWorkersError(max_workers)
    return max_workers


class SnowflakeGenerator:
    """Orchestrates snowflake generation.

    Manages the complete workflow:
    1. Validate the iteration count
    2. Build the seed triangle
    3. For each iteration, subdivide all segments (sequentially or on a
       thread pool) and close the replacement curve
    4. Return the final curve with timing statistics

    Any failure aborts the whole run; a partially iterated curve is never
    returned.

    Example:
        generator = SnowflakeGenerator()
        result = generator.run(iterations=5, parallel=True)
        print(result.curve.point_count, result.stats.duration_ms)
    """

    def __init__(
        self,
        settings: SnowflakerSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize generator with configuration.

        Args:
            settings: Snowflaker settings (defaults if None)
            logger: Structured logger (stdlib "snowflaker" logger if None)
        """
        self.settings = settings if settings is not None else SnowflakerSettings()
        if logger is None:
            # Honour stdlib levels and handlers; silent until configured
            logger = structlog.wrap_logger(
                logging.getLogger("snowflaker"),
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        self.logger = logger

    def run(
        self,
        iterations: int,
        parallel: bool = True,
        max_workers: int | None = None,
    ) -> GenerationResult:
        """Generate a snowflake curve and collect statistics.

        Args:
            iterations: Number of subdivision passes (0 returns the seed)
            parallel: Subdivide segments on a thread pool
            max_workers: Worker threads (None = from settings, then CPU count)

        Returns:
            GenerationResult with the closed curve and run statistics

        Raises:
            InvalidIterationsError: If iterations is not a non-negative int
            InvalidWorkersError: If max_workers is given and is not a positive int
            ResourceExhaustionError: If memory or worker threads run out
            GenerationError: If subdivision fails for any other reason
        """
        iterations = validate_iterations(iterations)

        if max_workers is None:
            workers = self.settings.processing.resolved_workers()
        else:
            workers = validate_workers(max_workers)

        stats = GenerationStats(
            iterations=iterations,
            parallel=parallel,
            workers=workers if parallel else 1,
        )
        generation_logger = GenerationLogger(self.logger, stats)

        stats.start_time = time.perf_counter()
        generation_logger.log_generation_start()

        curve = seed_curve()
        stats.point_count = curve.point_count

        if iterations > 0:
            executor = (
                ThreadPoolExecutor(max_workers=workers, thread_name_prefix="snowflaker")
                if parallel
                else None
            )
            try:
                curve = self._iterate(curve, iterations, executor, workers, generation_logger)
            except MemoryError as e:
                generation_logger.log_generation_error(e)
                raise ResourceExhaustionError(
                    iterations,
                    parallel,
                    "out of memory",
                    completed_iterations=stats.completed_iterations,
                ) from e
            except RuntimeError as e:
                generation_logger.log_generation_error(e)
                if parallel:
                    raise ResourceExhaustionError(
                        iterations,
                        parallel,
                        f"worker pool unavailable: {e}",
                        completed_iterations=stats.completed_iterations,
                    ) from e
                raise GenerationError(iterations, parallel, str(e)) from e
            except GenerationError as e:
                generation_logger.log_generation_error(e)
                raise
            except Exception as e:
                generation_logger.log_generation_error(e)
                raise GenerationError(iterations, parallel, str(e)) from e
            finally:
                if executor is not None:
                    executor.shutdown(wait=True, cancel_futures=True)

        stats.end_time = time.perf_counter()
        generation_logger.log_generation_complete()

        return GenerationResult(curve=curve, stats=stats)

    def _iterate(
        self,
        curve: Curve,
        iterations: int,
        executor: ThreadPoolExecutor | None,
        workers: int,
        generation_logger: GenerationLogger,
    ) -> Curve:
        """Run the subdivision passes, replacing the curve each time."""
        for iteration in range(1, iterations + 1):
            started = time.perf_counter()

            segments = curve.segments()
            if executor is not None:
                runs = subdivide_parallel(segments, executor, workers)
            else:
                runs = subdivide_sequential(segments)

            # Closing point is carried forward, not recomputed
            closing = segments[-1].p2
            curve = Curve.iterated(tuple(chain(runs, (closing,))), iteration)

            if curve.point_count != next_point_count(len(segments) + 1):
                raise GenerationError(
                    iterations,
                    executor is not None,
                    f"iteration {iteration} produced {curve.point_count} points",
                )

            generation_logger.log_iteration_complete(
                iteration=iteration,
                segment_count=len(segments),
                point_count=curve.point_count,
                duration_ms=(time.perf_counter() - started) * 1000,
            )

        return curve

    def generate_curve(self, iterations: int, parallel: bool = True) -> Curve:
        """Generate the snowflake and return it as a tagged Curve."""
        return self.run(iterations, parallel).curve

    def generate(self, iterations: int, parallel: bool = True) -> list[Point]:
        """Generate the snowflake and return its ordered point list."""
        return list(self.generate_curve(iterations, parallel).points)


def generate(iterations: int, parallel: bool = True) -> list[Point]:
    """Generate the vertices of a Koch snowflake.

    Args:
        iterations: Number of subdivision passes (0 returns the seed triangle)
        parallel: Subdivide segments on a thread pool

    Returns:
        Ordered points of the closed polyline, first point equal to last

    Raises:
        InvalidIterationsError: If iterations is not a non-negative int
        ResourceExhaustionError: If memory or worker threads run out
        GenerationError: If subdivision fails for any other reason
    """
    return SnowflakeGenerator().generate(iterations, parallel)
