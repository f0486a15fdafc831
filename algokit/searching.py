"""Searching in sequences, plus the book allocation search.

The search functions return the index of a match, or ``None`` when the
target is absent.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def linear_search(values: Sequence[T], target: T) -> int | None:
    """Return the index of the first item equal to *target*."""
    return next((index for index, value in enumerate(values) if value == target), None)


def binary_search(values: Sequence[T], target: T) -> int | None:
    """Iterative binary search over an ascending sequence."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(values: Sequence[T], target: T) -> int | None:
    """Recursive binary search over an ascending sequence."""

    def search(low: int, high: int) -> int | None:
        if low > high:
            return None
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(values) - 1)


def jump_search(values: Sequence[T], target: T) -> int | None:
    """Jump ahead in blocks of about sqrt(n), then scan the block linearly."""
    n = len(values)
    if n == 0:
        return None
    root = math.sqrt(n)
    step = int(root)
    prev = 0
    while values[min(step, n) - 1] < target:
        prev = step
        step = int(step + root)
        if prev >= n:
            return None
    while values[prev] < target:
        prev += 1
        if prev == min(step, n):
            return None
    return prev if values[prev] == target else None


def search_rotated(values: Sequence[T], target: T) -> int | None:
    """Search an ascending sequence of distinct items rotated at some pivot."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target <= values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] <= target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def is_feasible(times: Sequence[int], readers: int, limit: int) -> bool:
    """Tell whether *times* splits into at most *readers* runs of sum <= *limit*."""
    required, running = 1, 0
    for time in times:
        if time > limit:
            return False
        if running + time > limit:
            required += 1
            running = time
        else:
            running += time
    return required <= readers


def allocate_books(readers: int, times: Sequence[int]) -> int:
    """Smallest possible maximum load when contiguous chapters go to *readers* days."""
    if readers < 1:
        raise ValueError("at least one reader is needed")
    if not times:
        return 0
    low, high = max(times), sum(times)
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if is_feasible(times, readers, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best