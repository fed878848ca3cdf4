"""Geometric operations for Koch snowflake construction.

This module provides the mathematical building blocks of the generator:
- Seed triangle construction
- Segment subdivision into the four-point Koch run
- Closed-form point count for a given iteration depth

All functions are pure, stateless, and safe to call from worker threads.
"""

import math

from snowflaker.domain import Curve, Point

# Perpendicular offset of the apex, as a fraction of the segment vector.
# One third of the segment length times sin(60 degrees).
APEX_FACTOR = math.sqrt(3.0) / 6.0

SEED_POINT_COUNT = 4


def seed_curve() -> Curve:
    """Build the seed triangle inscribed in the unit circle.

    The vertices are the top of the circle, (0, 1), followed by the points
    at angles 2*pi/3 and 4*pi/3, i.e. (cos 120, sin 120) and
    (cos 240, sin 240). The first vertex is repeated at the end to close
    the loop.

    Returns:
        Seed curve of 4 points

    Examples:
        >>> curve = seed_curve()
        >>> curve.point_count
        4
        >>> curve.first
        Point(x=0.0, y=1.0)
    """
    top = Point(0.0, 1.0)
    left = Point(math.cos(2.0 * math.pi / 3.0), math.sin(2.0 * math.pi / 3.0))
    right = Point(math.cos(4.0 * math.pi / 3.0), math.sin(4.0 * math.pi / 3.0))
    return Curve.seed((top, left, right, top))


def subdivide_segment(p1: Point, p2: Point) -> tuple[Point, Point, Point, Point]:
    """Replace a segment with the first four points of its Koch run.

    The run is [p1, A, B, C] where A and C are the one-third and two-thirds
    points and B is the apex, the midpoint pushed out along the segment
    vector rotated by -90 degrees. For a left-to-right segment the apex lies
    above it. p2 is not included; it starts the next segment's run.

    Zero-length segments yield four coincident points. Non-finite
    coordinates propagate unchanged.

    Args:
        p1: Segment start
        p2: Segment end

    Returns:
        Tuple of (p1, A, B, C)

    Examples:
        >>> run = subdivide_segment(Point(0.0, 0.0), Point(3.0, 0.0))
        >>> run[1], run[3]
        (Point(x=1.0, y=0.0), Point(x=2.0, y=0.0))
        >>> round(run[2].y, 6)
        0.866025
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y

    a = Point(p1.x + dx / 3.0, p1.y + dy / 3.0)
    b = Point(
        p1.x + dx / 2.0 - dy * APEX_FACTOR,
        p1.y + dy / 2.0 + dx * APEX_FACTOR,
    )
    c = Point(p1.x + 2.0 * dx / 3.0, p1.y + 2.0 * dy / 3.0)

    return (p1, a, b, c)


def next_point_count(point_count: int) -> int:
    """Point count after one subdivision pass of a curve with point_count points."""
    return 4 * (point_count - 1) + 1


def expected_point_count(iterations: int) -> int:
    """Calculate the number of points after the given number of passes.

    Closed form of N(k+1) = 4 * (N(k) - 1) + 1 with N(0) = 4.

    Args:
        iterations: Number of subdivision passes

    Returns:
        3 * 4**iterations + 1

    Examples:
        >>> expected_point_count(0)
        4
        >>> expected_point_count(1)
        13
    """
    return (SEED_POINT_COUNT - 1) * 4**iterations + 1
