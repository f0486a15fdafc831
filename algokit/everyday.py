"""Small everyday calculations: gifts, triangles, letters, ages and more."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import NamedTuple, TypeVar

T = TypeVar("T")

PI = 3.14

_GIFT_BANDS = (
    (2000, "Calculator", 5),
    (5000, "School Bag", 10),
    (10000, "Wall Clock", 15),
)
_TOP_GIFT = ("Wrist Watch", 20)


class Gift(NamedTuple):
    """The gift for a purchase and the total after discount."""

    item: str
    total: int


class CircleMeasures(NamedTuple):
    """Diameter, circumference and area of a circle."""

    diameter: float
    circumference: float
    area: float


def gift_for(amount: int) -> Gift:
    """Gift and discounted total for a purchase amount."""
    item, percent = _TOP_GIFT
    if amount > 0:
        for ceiling, band_item, band_percent in _GIFT_BANDS:
            if amount <= ceiling:
                item, percent = band_item, band_percent
                break
    cut = abs(amount) * percent // 100
    if amount < 0:
        cut = -cut
    return Gift(item, amount - cut)


def classify_triangle(first: int, second: int, third: int) -> str:
    """'equilateral', 'isosceles' or 'scalene' by how many sides are equal."""
    if first == second == third:
        return "equilateral"
    if first == second or second == third or third == first:
        return "isosceles"
    return "scalene"


def is_vowel(letter: str) -> bool:
    """Tell whether a single character is one of the lower-case vowels."""
    if len(letter) != 1:
        raise ValueError("expected a single character")
    return letter in "aeiou"


def is_teen(age: int) -> bool:
    """Tell whether *age* is from 13 to 19."""
    return 12 < age < 20


def vessel_moves(first: float, second: float, capacity: float) -> int:
    """Pourings of up to *capacity* needed to make two vessels hold the same."""
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return math.ceil(abs(first - second) / (2 * capacity))


def who_first(first: int, second: int) -> str:
    """'First', 'Second' or 'Any': which of two values is smaller."""
    if first < second:
        return "First"
    if first > second:
        return "Second"
    return "Any"


def circle_measures(radius: float) -> CircleMeasures:
    """Diameter, circumference and area for *radius*, with pi taken as 3.14."""
    return CircleMeasures(2 * radius, 2 * PI * radius, PI * radius * radius)


def extremes(values: Iterable[T]) -> tuple[T, T]:
    """(smallest, biggest) of the values."""
    items = list(values)
    if not items:
        raise ValueError("extremes of an empty collection")
    return min(items), max(items)