"""Point and segment types for curve representation.

This module defines the smallest geometric values used by the generator:
- Point: An immutable 2D point
- Segment: A pair of consecutive curve points
"""

import math
from dataclasses import dataclass
from typing import Any, NamedTuple

DEFAULT_TOLERANCE = 1e-9


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Uses slots since a deep curve holds
    millions of these.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def is_close(self, other: "Point", tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Compare coordinates within an absolute tolerance.

        Args:
            other: Point to compare against
            tolerance: Maximum allowed absolute difference per coordinate

        Returns:
            True if both coordinates differ by at most tolerance
        """
        return math.isclose(self.x, other.x, rel_tol=0.0, abs_tol=tolerance) and math.isclose(
            self.y, other.y, rel_tol=0.0, abs_tol=tolerance
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}


class Segment(NamedTuple):
    """A straight edge between two consecutive curve points."""

    p1: Point
    p2: Point
