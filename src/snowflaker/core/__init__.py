"""Core generation algorithms for snowflaker.

This module contains the core algorithms for:

- Geometry (seed triangle, Koch segment subdivision, point-count law)
- Dispatch (sequential and thread-pool subdivision strategies)
- Orchestration (the iteration loop and its error handling)

The geometry and dispatch functions are:
- Stateless (safe for use in worker threads)
- Pure (no side effects)

Key functions:
- seed_curve: Build the closed seed triangle
- subdivide_segment: Split one segment into its four-point Koch run
- expected_point_count: Closed-form point count for an iteration depth
- subdivide_sequential: Subdivide all segments on the calling thread
- subdivide_parallel: Subdivide all segments on a thread pool
- generate: Single entry point returning the ordered point list

Key classes:
- SnowflakeGenerator: Runs the iteration loop with configurable strategy
- GenerationResult: A finished curve with its statistics
"""

from snowflaker.core.dispatch import (
    partition_ranges,
    subdivide_parallel,
    subdivide_partition,
    subdivide_sequential,
)
from snowflaker.core.generator import (
    GenerationResult,
    SnowflakeGenerator,
    generate,
    validate_iterations,
)
from snowflaker.core.geometry import (
    APEX_FACTOR,
    expected_point_count,
    next_point_count,
    seed_curve,
    subdivide_segment,
)

__all__ = [
    # Geometry
    "APEX_FACTOR",
    # Generator classes
    "GenerationResult",
    "SnowflakeGenerator",
    "expected_point_count",
    "generate",
    "next_point_count",
    # Dispatch
    "partition_ranges",
    "seed_curve",
    "subdivide_parallel",
    "subdivide_partition",
    "subdivide_segment",
    "subdivide_sequential",
    "validate_iterations",
]
