import pytest

from algokit.everyday import (
    PI,
    Gift,
    circle_measures,
    classify_triangle,
    extremes,
    gift_for,
    is_teen,
    is_vowel,
    vessel_moves,
    who_first,
)


@pytest.mark.parametrize(
    "amount, item",
    [
        (1, "Calculator"),
        (2000, "Calculator"),
        (2001, "School Bag"),
        (5000, "School Bag"),
        (5001, "Wall Clock"),
        (10000, "Wall Clock"),
        (10001, "Wrist Watch"),
        (0, "Wrist Watch"),
    ],
)
def test_gift_bands(amount, item):
    assert gift_for(amount).item == item


def test_gift_discount_value():
    assert gift_for(100) == Gift("Calculator", 95)


@pytest.mark.parametrize("amount", [1, 1999, 4500, 9999, 25000])
def test_gift_total_never_exceeds_amount(amount):
    total = gift_for(amount).total
    assert 0 < total <= amount


@pytest.mark.parametrize(
    "sides, kind",
    [
        ((3, 3, 3), "equilateral"),
        ((3, 3, 4), "isosceles"),
        ((4, 3, 3), "isosceles"),
        ((3, 4, 3), "isosceles"),
        ((3, 4, 5), "scalene"),
    ],
)
def test_classify_triangle(sides, kind):
    assert classify_triangle(*sides) == kind


@pytest.mark.parametrize("letter", list("aeiou"))
def test_vowels(letter):
    assert is_vowel(letter) is True


@pytest.mark.parametrize("letter", ["b", "z", "A", "E"])
def test_not_vowels(letter):
    assert is_vowel(letter) is False


def test_is_vowel_needs_one_character():
    with pytest.raises(ValueError):
        is_vowel("ab")


@pytest.mark.parametrize("age, teen", [(12, False), (13, True), (19, True), (20, False)])
def test_is_teen(age, teen):
    assert is_teen(age) is teen


def test_vessel_moves_symmetric():
    assert vessel_moves(3, 17, 2) == vessel_moves(17, 3, 2)


def test_vessel_moves_equal_vessels():
    assert vessel_moves(5, 5, 1) == 0


def test_vessel_moves_single_pour_enough():
    assert vessel_moves(1, 3, 1) == 1


def test_vessel_moves_bad_capacity():
    with pytest.raises(ValueError):
        vessel_moves(1, 2, 0)


@pytest.mark.parametrize("x, y, answer", [(1, 2, "First"), (2, 1, "Second"), (4, 4, "Any")])
def test_who_first(x, y, answer):
    assert who_first(x, y) == answer


def test_circle_unit_area():
    assert circle_measures(1).area == pytest.approx(PI)


def test_circle_scaling():
    small = circle_measures(1.5)
    large = circle_measures(3.0)
    assert large.area == pytest.approx(4 * small.area)
    assert large.circumference == pytest.approx(2 * small.circumference)
    assert large.diameter == pytest.approx(2 * small.diameter)


def test_extremes():
    values = [5, 11, 12, 13, 14, 55, 56, 78, 85, 98, 21]
    assert extremes(values) == (5, 98)


def test_extremes_empty():
    with pytest.raises(ValueError):
        extremes([])