"""Algorithms over sequences of numbers."""

from collections.abc import Sequence


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two indices in an ascending sequence whose values add up to target.

    Uses the two-pointer technique, so ``values`` must be sorted in
    ascending order. Returns ``(i, j)`` with ``i < j``, or ``None`` when no
    such pair exists.
    """
    start, end = 0, len(values) - 1
    while start < end:
        total = values[start] + values[end]
        if total < target:
            start += 1
        elif total > target:
            end -= 1
        else:
            return start, end
    return None


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    if not values:
        raise ValueError("max_subarray_sum() arg is an empty sequence")
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best