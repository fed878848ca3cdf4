"""Domain models for snowflaker.

This module contains the value types the generator works on. All models are:

- Immutable (frozen dataclasses and named tuples)
- Free of shared mutable state, so worker threads can read them freely

Key classes:
- Point: A 2D point
- Segment: An edge between two consecutive curve points
- Curve: A closed polyline tagged with its construction phase
"""

from snowflaker.domain.curve import Curve, CurvePhase
from snowflaker.domain.point import DEFAULT_TOLERANCE, Point, Segment

__all__: list[str] = [
    "DEFAULT_TOLERANCE",
    # Enums
    "CurvePhase",
    # Core types
    "Point",
    "Segment",
    "Curve",
]
