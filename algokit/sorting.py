"""Classic comparison and distribution sorts.

Every function takes an iterable and returns a new list; the input is never
modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the already sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_sorted(left: Iterable[T], right: Iterable[T]) -> list[T]:
    """Merge two sorted sequences into one sorted list, keeping ties stable."""
    first = list(left)
    second = list(right)
    merged: list[T] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[T], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def _sift_down(heap: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heapify(values: Iterable[T]) -> list[T]:
    """Arrange the items as a max-heap stored in a list (0-based)."""
    heap = list(values)
    size = len(heap)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(heap, size, root)
    return heap


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    heap = heapify(values)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def radix_sort(values: Iterable[int]) -> list[int]:
    """LSD radix sort on decimal digits; only non-negative integers."""
    items = list(values)
    if not items:
        return items
    if any(v < 0 for v in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Bucket sort for numbers in the half-open range [0, 1)."""
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def shell_sort(values: Iterable[T]) -> list[T]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items