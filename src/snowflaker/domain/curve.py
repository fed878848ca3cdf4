"""Closed polyline representation.

A Curve is the unit of work passed between iterations: the seed triangle
first, then each subdivided replacement. Curves are never mutated; every
iteration builds a new one.
"""

from dataclasses import dataclass
from enum import Enum, auto

from snowflaker.domain.point import DEFAULT_TOLERANCE, Point, Segment


class CurvePhase(Enum):
    """Which stage of the construction a curve belongs to.

    - SEED: The initial triangle, before any subdivision
    - ITERATED: The result of one or more subdivision passes
    """

    SEED = auto()
    ITERATED = auto()


@dataclass(frozen=True)
class Curve:
    """An ordered, closed sequence of points.

    The last point equals the first point. Segments are derived on demand
    from consecutive point pairs and are never stored.

    Attributes:
        points: Ordered points, first repeated as last
        phase: SEED or ITERATED
        iteration: Number of completed subdivision passes (0 for SEED)
    """

    points: tuple[Point, ...]
    phase: CurvePhase = CurvePhase.SEED
    iteration: int = 0

    def __post_init__(self) -> None:
        if self.phase is CurvePhase.SEED and self.iteration != 0:
            raise ValueError("Seed curve must have iteration 0")
        if self.phase is CurvePhase.ITERATED and self.iteration < 1:
            raise ValueError("Iterated curve must have iteration >= 1")

    @classmethod
    def seed(cls, points: tuple[Point, ...]) -> "Curve":
        """Create the initial curve."""
        return cls(points=points, phase=CurvePhase.SEED, iteration=0)

    @classmethod
    def iterated(cls, points: tuple[Point, ...], iteration: int) -> "Curve":
        """Create the curve produced by subdivision pass number iteration."""
        return cls(points=points, phase=CurvePhase.ITERATED, iteration=iteration)

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def segment_count(self) -> int:
        return max(len(self.points) - 1, 0)

    @property
    def first(self) -> Point:
        return self.points[0]

    @property
    def last(self) -> Point:
        return self.points[-1]

    def is_closed(self) -> bool:
        """Check whether the first and last points coincide."""
        return bool(self.points) and self.points[0] == self.points[-1]

    def segments(self) -> list[Segment]:
        """Derive segments from consecutive point pairs.

        Returns:
            N-1 segments for a curve of N points, in path order
        """
        points = self.points
        return [Segment(points[i], points[i + 1]) for i in range(len(points) - 1)]

    def is_equivalent(self, other: "Curve", tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Compare point-by-point, in order, within tolerance.

        Args:
            other: Curve to compare against
            tolerance: Absolute coordinate tolerance

        Returns:
            True if both curves have the same length and every pair of
            corresponding points is close
        """
        if len(self.points) != len(other.points):
            return False
        return all(a.is_close(b, tolerance) for a, b in zip(self.points, other.points))

    def to_list(self) -> list[dict[str, float]]:
        """Serialize points as a list of {"x", "y"} dictionaries."""
        return [p.to_dict() for p in self.points]
