"""Sequential and parallel segment subdivision strategies.

Both strategies take the ordered segment list of one iteration and return
the flat, ordered sequence of Koch runs (four points per segment). They differ
only in how the work is scheduled; the output is identical.

Key functions:
- subdivide_sequential: Processes segments one at a time, in order
- partition_ranges: Splits a segment list into contiguous index ranges
- subdivide_partition: Top-level worker function for one index range
- subdivide_parallel: Fans partitions out to a thread pool and gathers
  their results back in partition order
"""

from collections.abc import Iterator, Sequence
from concurrent.futures import Executor, Future, as_completed
from itertools import chain

from snowflaker.core.geometry import subdivide_segment
from snowflaker.domain import Point, Segment


def subdivide_sequential(segments: Sequence[Segment]) -> Iterator[Point]:
    """Subdivide every segment in order on the calling thread.

    Runs are produced lazily, so the caller builds the next curve without an
    intermediate list.

    Args:
        segments: Ordered segments of the current curve

    Returns:
        Iterator over the concatenated four-point runs in segment order
    """
    return chain.from_iterable(subdivide_segment(p1, p2) for p1, p2 in segments)


def partition_ranges(total: int, partitions: int) -> list[tuple[int, int]]:
    """Split range(total) into contiguous, near-equal (start, stop) ranges.

    Never returns more ranges than items, and never returns an empty range.
    Earlier ranges take the remainder, one extra item each.

    Args:
        total: Number of items to split
        partitions: Desired number of ranges

    Returns:
        List of (start, stop) pairs covering range(total) in order

    Examples:
        >>> partition_ranges(10, 3)
        [(0, 4), (4, 7), (7, 10)]
        >>> partition_ranges(2, 8)
        [(0, 1), (1, 2)]
    """
    if total <= 0:
        return []

    partitions = max(1, min(partitions, total))
    size, remainder = divmod(total, partitions)

    ranges: list[tuple[int, int]] = []
    start = 0
    for index in range(partitions):
        stop = start + size + (1 if index < remainder else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def subdivide_partition(segments: Sequence[Segment], start: int, stop: int) -> list[Point]:
    """Subdivide segments[start:stop].

    Worker entry point. Reads only its own slice of the immutable segment
    list and returns a freshly built list of points.
    """
    points: list[Point] = []
    for index in range(start, stop):
        p1, p2 = segments[index]
        points.extend(subdivide_segment(p1, p2))
    return points


def subdivide_parallel(
    segments: Sequence[Segment],
    executor: Executor,
    workers: int,
) -> Iterator[Point]:
    """Subdivide segments across a pool of workers.

    The segment list is split into one contiguous index range per worker.
    Each finished partition is written into a pre-sized buffer at its own
    partition index, so the final concatenation follows segment order no
    matter which worker completes first.

    If any partition raises, the exception propagates and no partial result
    is returned.

    Args:
        segments: Ordered segments of the current curve
        executor: Pool to run partitions on
        workers: Number of partitions to create

    Returns:
        Iterator over the concatenated four-point runs in segment order
    """
    ranges = partition_ranges(len(segments), workers)

    pending: dict[Future[list[Point]], int] = {
        executor.submit(subdivide_partition, segments, start, stop): index
        for index, (start, stop) in enumerate(ranges)
    }

    runs: list[list[Point]] = [[] for _ in ranges]
    try:
        for future in as_completed(pending):
            runs[pending[future]] = future.result()
    except BaseException:
        for future in pending:
            future.cancel()
        raise

    return chain.from_iterable(runs)
