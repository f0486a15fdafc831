"""Problems on arrays and strings: subarrays, pairs, subsets and segments."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum needs at least one value")
    return best


def trapped_water(heights: Sequence[int]) -> int:
    """Units of water held between bars of the given heights."""
    if not heights:
        return 0
    left_max, right_max = heights[0], heights[-1]
    left, right = 1, len(heights) - 2
    water = 0
    while left <= right:
        if heights[left] >= left_max:
            left_max = heights[left]
            left += 1
        elif heights[right] >= right_max:
            right_max = heights[right]
            right -= 1
        elif left_max <= right_max:
            water += left_max - heights[left]
            left += 1
        else:
            water += right_max - heights[right]
            right -= 1
    return water


def can_jump(steps: Iterable[int]) -> bool:
    """Tell whether the last index is reachable when each item is a maximum jump."""
    reach = 0
    for index, step in enumerate(steps):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def count_good_pairs(values: Iterable[int]) -> int:
    """Number of index pairs i < j holding equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(values).values())


def subset_sum_exists(values: Iterable[int], total: int) -> bool:
    """Tell whether some subset of non-negative *values* adds up to *total*."""
    items = list(values)
    if total < 0 or any(value < 0 for value in items):
        raise ValueError("subset sum works on non-negative numbers")
    reachable = {0}
    for value in items:
        reachable |= {r + value for r in reachable if r + value <= total}
        if total in reachable:
            return True
    return total in reachable


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def largest_partial_union(sets: Iterable[Iterable[int]]) -> int:
    """Size of the largest union of some of *sets* that is not the full union."""
    groups = [set(group) for group in sets]
    everything = set().union(*groups)
    best = 0
    for value in everything:
        partial = set().union(*(group for group in groups if value not in group))
        if len(partial) != len(everything):
            best = max(best, len(partial))
    return best


def reverse_madness(
    text: str,
    lefts: Sequence[int],
    rights: Sequence[int],
    queries: Iterable[int],
) -> str:
    """Apply segment-mirrored reversals to *text*.

    *lefts* and *rights* are 1-based inclusive segment bounds; each query is a
    1-based position x that reverses the part of its segment between x and its
    mirror.
    """
    if len(lefts) != len(rights):
        raise ValueError("lefts and rights must have the same length")
    counts = [0] * (len(text) + 1)
    for position in queries:
        if not 1 <= position <= len(text):
            raise IndexError(f"query position {position} out of range")
        counts[position - 1] += 1

    pieces = []
    for left, right in zip(lefts, rights):
        low, high = left - 1, right - 1
        segment = list(text[low : high + 1])
        parity = 0
        for j in range(low, (low + high) // 2 + 1):
            parity += counts[j] + counts[high - j + low]
            if parity % 2:
                segment[j - low], segment[high - j] = segment[high - j], segment[j - low]
        pieces.append("".join(segment))
    return "".join(pieces)