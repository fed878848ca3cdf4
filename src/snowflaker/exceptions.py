"""Exception hierarchy for Snowflaker."""


class SnowflakerError(Exception):
    """Base exception for all Snowflaker errors."""

    pass


class InvalidIterationsError(SnowflakerError, ValueError):
    """Iteration count is not a non-negative integer."""

    def __init__(self, iterations: object) -> None:
        self.iterations = iterations
        super().__init__(
            f"Iterations must be a non-negative integer, got {iterations!r}"
        )


class GenerationError(SnowflakerError):
    """Snowflake generation failed as a whole."""

    def __init__(self, iterations: int, parallel: bool, reason: str) -> None:
        self.iterations = iterations
        self.parallel = parallel
        self.reason = reason
        strategy = "parallel" if parallel else "sequential"
        super().__init__(
            f"Failed to generate snowflake ({iterations} iterations, {strategy}): {reason}"
        )


class ResourceExhaustionError(GenerationError):
    """Memory or worker threads ran out during generation."""

    def __init__(
        self,
        iterations: int,
        parallel: bool,
        reason: str,
        completed_iterations: int,
    ) -> None:
        self.completed_iterations = completed_iterations
        super().__init__(iterations, parallel, reason)


class InvalidWorkersError(SnowflakerError, ValueError):
    """Worker count is not a positive integer."""

    def __init__(self, max_workers: object) -> None:
        self.max_workers = max_workers
        super().__init__(f"Worker count must be a positive integer, got {max_workers!r}")
