"""Tests for generation orchestration."""

import logging
import math
from unittest.mock import patch

import pytest

from snowflaker import generate
from snowflaker.config import ProcessingConfig, SnowflakerSettings
from snowflaker.core.generator import (
    GenerationResult,
    SnowflakeGenerator,
    validate_iterations,
    validate_workers,
)
from snowflaker.core.geometry import expected_point_count, seed_curve
from snowflaker.domain import CurvePhase, Point
from snowflaker.exceptions import (
    GenerationError,
    InvalidIterationsError,
    InvalidWorkersError,
    ResourceExhaustionError,
    SnowflakerError,
)


@pytest.fixture
def settings() -> SnowflakerSettings:
    """Create test settings with a fixed worker count."""
    return SnowflakerSettings(processing=ProcessingConfig(max_workers=4))


@pytest.fixture
def generator(settings: SnowflakerSettings) -> SnowflakeGenerator:
    """Create a generator with test settings."""
    return SnowflakeGenerator(settings)


class TestValidateIterations:
    """Tests for validate_iterations."""

    @pytest.mark.parametrize("iterations", [0, 1, 7, 100])
    def test_accepts_non_negative_int(self, iterations: int):
        """Test valid counts pass through."""
        assert validate_iterations(iterations) == iterations

    @pytest.mark.parametrize("iterations", [-1, 1.0, "3", None, True])
    def test_rejects_invalid(self, iterations: object):
        """Test invalid counts raise InvalidIterationsError."""
        with pytest.raises(InvalidIterationsError) as exc_info:
            validate_iterations(iterations)
        assert exc_info.value.iterations == iterations

    def test_invalid_iterations_is_value_error(self):
        """Test the error is also a ValueError."""
        with pytest.raises(ValueError):
            validate_iterations(-3)


class TestValidateWorkers:
    """Tests for validate_workers."""

    @pytest.mark.parametrize("max_workers", [1, 4, 64])
    def test_accepts_positive_int(self, max_workers: int):
        """Test positive worker counts pass through."""
        assert validate_workers(max_workers) == max_workers

    @pytest.mark.parametrize("max_workers", [0, -3, True, 2.0, "4"])
    def test_rejects_invalid(self, max_workers: object):
        """Test zero, negative, bool and non-int worker counts."""
        with pytest.raises(InvalidWorkersError):
            validate_workers(max_workers)


class TestZeroIterations:
    """Tests for the zero-iteration case."""

    @pytest.mark.parametrize("parallel", [False, True])
    def test_returns_seed(self, parallel: bool):
        """Test zero iterations returns the seed triangle unchanged."""
        points = generate(0, parallel)

        assert points == list(seed_curve().points)
        assert points[0] == Point(0.0, 1.0)
        assert points[1].x == pytest.approx(math.cos(math.radians(120)))
        assert points[1].y == pytest.approx(math.sin(math.radians(120)))
        assert points[2].x == pytest.approx(math.cos(math.radians(240)))
        assert points[2].y == pytest.approx(math.sin(math.radians(240)))
        assert points[3] == Point(0.0, 1.0)

    def test_seed_phase_tag(self, generator: SnowflakeGenerator):
        """Test zero iterations returns a SEED-tagged curve."""
        curve = generator.generate_curve(0, parallel=True)
        assert curve.phase is CurvePhase.SEED

    def test_no_pool_created(self, generator: SnowflakeGenerator):
        """Test zero iterations never starts a thread pool."""
        with patch("snowflaker.core.generator.ThreadPoolExecutor") as pool:
            generator.run(0, parallel=True)
        pool.assert_not_called()


class TestGeneration:
    """Tests for SnowflakeGenerator."""

    def test_one_iteration_has_thirteen_points(self):
        """Test one sequential pass yields 13 points."""
        assert len(generate(1, False)) == 13

    @pytest.mark.parametrize("parallel", [False, True])
    def test_growth_law(self, generator: SnowflakeGenerator, parallel: bool):
        """Test N(k+1) = 4 * (N(k) - 1) + 1 starting from 4."""
        previous = 4
        for iterations in range(1, 7):
            count = len(generator.generate(iterations, parallel))
            assert count == 4 * (previous - 1) + 1
            assert count == expected_point_count(iterations)
            previous = count

    @pytest.mark.parametrize("parallel", [False, True])
    @pytest.mark.parametrize("iterations", range(7))
    def test_closure(self, generator: SnowflakeGenerator, iterations: int, parallel: bool):
        """Test first and last points coincide."""
        points = generator.generate(iterations, parallel)
        assert points[0] == points[-1]

    def test_closing_point_is_carried_forward(self, generator: SnowflakeGenerator):
        """Test the closing point is exactly the seed's top vertex."""
        for iterations in range(1, 5):
            curve = generator.generate_curve(iterations, parallel=False)
            assert curve.last == Point(0.0, 1.0)
            assert curve.is_closed()

    @pytest.mark.parametrize("iterations", range(7))
    def test_strategy_equivalence(self, generator: SnowflakeGenerator, iterations: int):
        """Test sequential and parallel output agree point by point."""
        sequential = generator.generate(iterations, parallel=False)
        parallel = generator.generate(iterations, parallel=True)

        assert len(sequential) == len(parallel)
        for s, p in zip(sequential, parallel):
            assert s.is_close(p, tolerance=1e-9)

    @pytest.mark.parametrize("workers", [1, 2, 3, 7, 64])
    def test_strategy_equivalence_any_worker_count(self, workers: int):
        """Test parallel output does not depend on the worker count."""
        generator = SnowflakeGenerator(
            SnowflakerSettings(processing=ProcessingConfig(max_workers=workers))
        )
        assert generator.generate(4, parallel=True) == generator.generate(4, parallel=False)

    @pytest.mark.parametrize("parallel", [False, True])
    def test_determinism(self, generator: SnowflakeGenerator, parallel: bool):
        """Test repeated calls produce identical output."""
        assert generator.generate(5, parallel) == generator.generate(5, parallel)

    def test_first_iteration_structure(self, generator: SnowflakeGenerator):
        """Test the first pass keeps the seed vertices every fourth point."""
        seed = seed_curve().points
        points = generator.generate(1, parallel=False)

        assert points[0] == seed[0]
        assert points[4] == seed[1]
        assert points[8] == seed[2]
        assert points[12] == seed[3]

    def test_iterated_phase_tag(self, generator: SnowflakeGenerator):
        """Test iterated curves are tagged with their iteration number."""
        curve = generator.generate_curve(3, parallel=True)
        assert curve.phase is CurvePhase.ITERATED
        assert curve.iteration == 3

    def test_max_workers_override(self, generator: SnowflakeGenerator):
        """Test run() accepts a per-call worker count."""
        result = generator.run(2, parallel=True, max_workers=2)
        assert result.stats.workers == 2

    def test_default_logger_keeps_stdout_clean(self, capsys):
        """Test library use without configure_logging prints nothing to stdout."""
        points = generate(2, True)

        assert len(points) == expected_point_count(2)
        assert capsys.readouterr().out == ""

    def test_default_logger_is_stdlib_backed(self, caplog):
        """Test the default logger routes through the stdlib "snowflaker" logger."""
        with caplog.at_level(logging.DEBUG, logger="snowflaker"):
            SnowflakeGenerator().run(1, parallel=False)

        assert any(record.name == "snowflaker" for record in caplog.records)


class TestGenerationStats:
    """Tests for statistics collected during a run."""

    def test_stats_recorded(self, generator: SnowflakeGenerator):
        """Test a run records counts and timings."""
        result = generator.run(3, parallel=True)

        assert isinstance(result, GenerationResult)
        assert result.stats.iterations == 3
        assert result.stats.completed_iterations == 3
        assert result.stats.point_count == result.curve.point_count
        assert result.stats.workers == 4
        assert result.stats.strategy == "parallel"
        assert len(result.stats.iteration_timings_ms) == 3
        assert result.stats.duration_ms >= 0.0

    def test_sequential_reports_one_worker(self, generator: SnowflakeGenerator):
        """Test the sequential strategy reports a single worker."""
        result = generator.run(2, parallel=False)
        assert result.stats.workers == 1
        assert result.stats.strategy == "sequential"

    def test_zero_iteration_stats(self, generator: SnowflakeGenerator):
        """Test stats for the seed-only case."""
        result = generator.run(0, parallel=False)
        assert result.stats.point_count == 4
        assert result.stats.completed_iterations == 0
        assert result.stats.iteration_timings_ms == []


class TestErrorHandling:
    """Tests for failure translation."""

    @pytest.mark.parametrize("max_workers", [0, -1])
    def test_invalid_workers(self, generator: SnowflakeGenerator, max_workers: int):
        """Test non-positive worker counts are rejected before any pool is built."""
        with patch("snowflaker.core.generator.ThreadPoolExecutor") as pool:
            with pytest.raises(InvalidWorkersError) as exc_info:
                generator.run(2, parallel=True, max_workers=max_workers)

        assert exc_info.value.max_workers == max_workers
        pool.assert_not_called()

    def test_invalid_workers_is_snowflaker_error(self, generator: SnowflakeGenerator):
        """Test callers catching SnowflakerError also catch bad worker counts."""
        with pytest.raises(SnowflakerError, match="positive integer"):
            generator.run(1, parallel=False, max_workers=0)

    def test_invalid_iterations(self, generator: SnowflakeGenerator):
        """Test negative iterations are rejected."""
        with pytest.raises(InvalidIterationsError):
            generator.generate(-1)

    def test_memory_error_becomes_resource_exhaustion(self, generator: SnowflakeGenerator):
        """Test MemoryError surfaces as ResourceExhaustionError."""
        with patch(
            "snowflaker.core.generator.subdivide_sequential",
            side_effect=MemoryError(),
        ):
            with pytest.raises(ResourceExhaustionError) as exc_info:
                generator.generate(3, parallel=False)

        error = exc_info.value
        assert error.completed_iterations == 0
        assert error.parallel is False
        assert isinstance(error.__cause__, MemoryError)

    def test_thread_start_failure_becomes_resource_exhaustion(
        self, generator: SnowflakeGenerator
    ):
        """Test a worker pool RuntimeError surfaces as ResourceExhaustionError."""
        with patch(
            "snowflaker.core.generator.subdivide_parallel",
            side_effect=RuntimeError("can't start new thread"),
        ):
            with pytest.raises(ResourceExhaustionError, match="worker pool unavailable"):
                generator.generate(2, parallel=True)

    def test_failure_after_some_iterations(self, generator: SnowflakeGenerator):
        """Test completed_iterations reflects passes that finished."""
        from snowflaker.core import dispatch

        calls = {"count": 0}
        original = dispatch.subdivide_sequential

        def flaky(segments):
            calls["count"] += 1
            if calls["count"] == 3:
                raise MemoryError()
            return original(segments)

        with patch("snowflaker.core.generator.subdivide_sequential", side_effect=flaky):
            with pytest.raises(ResourceExhaustionError) as exc_info:
                generator.generate(5, parallel=False)

        assert exc_info.value.completed_iterations == 2

    def test_unexpected_error_becomes_generation_error(self, generator: SnowflakeGenerator):
        """Test other errors are wrapped, not returned as partial output."""
        with patch(
            "snowflaker.core.generator.subdivide_parallel",
            side_effect=ArithmeticError("boom"),
        ):
            with pytest.raises(GenerationError) as exc_info:
                generator.generate(2, parallel=True)

        assert not isinstance(exc_info.value, ResourceExhaustionError)
        assert isinstance(exc_info.value.__cause__, ArithmeticError)
        assert "boom" in exc_info.value.reason

    def test_sequential_runtime_error_is_generation_error(
        self, generator: SnowflakeGenerator
    ):
        """Test RuntimeError without a pool is not reported as exhaustion."""
        with patch(
            "snowflaker.core.generator.subdivide_sequential",
            side_effect=RuntimeError("boom"),
        ):
            with pytest.raises(GenerationError) as exc_info:
                generator.generate(1, parallel=False)

        assert not isinstance(exc_info.value, ResourceExhaustionError)

    def test_truncated_run_is_rejected(self, generator: SnowflakeGenerator):
        """Test a run with missing points raises instead of returning."""
        with patch(
            "snowflaker.core.generator.subdivide_sequential",
            side_effect=lambda segments: [],
        ):
            with pytest.raises(GenerationError, match="produced 1 points"):
                generator.generate(1, parallel=False)

    def test_all_errors_share_base(self):
        """Test the hierarchy roots at SnowflakerError."""
        assert issubclass(ResourceExhaustionError, GenerationError)
        assert issubclass(GenerationError, SnowflakerError)
        assert issubclass(InvalidIterationsError, SnowflakerError)
        assert issubclass(InvalidWorkersError, SnowflakerError)
        assert issubclass(InvalidWorkersError, ValueError)
