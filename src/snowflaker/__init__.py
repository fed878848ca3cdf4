"""Snowflaker - Generate Koch snowflake vertices.

Snowflaker builds the closed polyline of a Koch snowflake by repeatedly
subdividing every edge of a triangle. Each pass can run
sequentially or spread its segments over a thread pool; both strategies
produce the same points in the same order.

Example:
    >>> from snowflaker import generate
    >>> len(generate(1, parallel=False))
    13

Or from the command line:
    $ snowflaker -n 6 --compare
"""

from snowflaker.core.generator import SnowflakeGenerator, generate
from snowflaker.domain import Curve, CurvePhase, Point

__version__ = "0.1.0"

__all__ = [
    "Curve",
    "CurvePhase",
    "Point",
    "SnowflakeGenerator",
    "__version__",
    "generate",
]
