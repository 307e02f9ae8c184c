"""Counting segments that lie inside other segments."""

from __future__ import annotations

from collections.abc import Iterable

from sortedcontainers import SortedList


def count_nested_segments(segments: Iterable[tuple[int, int]]) -> int:
    """Number of pairs in which one segment ``(left, right)`` lies inside another."""
    ordered = []
    for left, right in segments:
        if left > right:
            raise ValueError(f"segment ({left}, {right}) has left end after right end")
        ordered.append((right, left))
    ordered.sort()

    lefts = SortedList()
    total = 0
    for _, left in ordered:
        total += len(lefts) - lefts.bisect_left(left)
        lefts.add(left)
    return total