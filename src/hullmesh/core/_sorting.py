"""Index-permutation sorts over flat coordinate buffers.

Rather than moving coordinate pairs and a parallel index array in lockstep,
these helpers sort an index array with a key over the buffer and then gather
the sorted copy in one pass. ``sorted`` is stable, so ties keep their original
relative order.
"""

from collections.abc import Sequence


def lexicographic_order(points: Sequence[float]) -> list[int]:
    """Point indices ordered by x, then by y."""
    return sorted(range(len(points) // 2), key=lambda i: (points[2 * i], points[2 * i + 1]))


def x_order(points: Sequence[float]) -> list[int]:
    """Point indices ordered by x only, ties kept in input order."""
    return sorted(range(len(points) // 2), key=lambda i: points[2 * i])


def gather(points: Sequence[float], order: Sequence[int], out: list[float]) -> list[float]:
    """Fill ``out`` with the coordinate pairs of ``points`` in ``order``.

    Args:
        points: Source flat buffer
        order: Point indices to copy, in output order
        out: Scratch list to overwrite

    Returns:
        ``out``, cleared and refilled
    """
    out.clear()
    for i in order:
        out.append(points[2 * i])
        out.append(points[2 * i + 1])
    return out
