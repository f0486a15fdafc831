import pytest

from algokit.searching import (
    allocate_books,
    binary_search,
    binary_search_recursive,
    is_feasible,
    jump_search,
    linear_search,
    search_rotated,
)

SORTED = [2, 3, 5, 8, 10, 12, 18, 20, 23, 27, 30, 35, 40]


def test_every_element_is_found():
    for value in SORTED:
        assert SORTED[linear_search(SORTED, value)] == value
        assert SORTED[binary_search(SORTED, value)] == value
        assert SORTED[binary_search_recursive(SORTED, value)] == value
        assert SORTED[jump_search(SORTED, value)] == value


@pytest.mark.parametrize("missing", [1, 4, 19, 41, 100])
def test_missing_targets_give_none(missing):
    assert linear_search(SORTED, missing) is None
    assert binary_search(SORTED, missing) is None
    assert binary_search_recursive(SORTED, missing) is None
    assert jump_search(SORTED, missing) is None


def test_small_array_without_target():
    small = [2, 3, 4, 10, 40]
    assert linear_search(small, 1) is None
    assert binary_search(small, 1) is None
    assert binary_search_recursive(small, 1) is None
    assert jump_search(small, 1) is None


def test_empty_sequence():
    assert linear_search([], 5) is None
    assert binary_search([], 5) is None
    assert binary_search_recursive([], 5) is None
    assert jump_search([], 5) is None


def test_all_searches_agree_on_distinct_values():
    for value in SORTED:
        results = {
            linear_search(SORTED, value),
            binary_search(SORTED, value),
            binary_search_recursive(SORTED, value),
            jump_search(SORTED, value),
        }
        assert results == {SORTED.index(value)}


def test_linear_search_returns_first_match():
    assert linear_search([7, 1, 7, 7], 7) == 0


def test_search_rotated_finds_every_element():
    rotated = [7, 8, 9, 1, 2, 3, 4, 5, 6]
    for value in rotated:
        assert rotated[search_rotated(rotated, value)] == value


def test_search_rotated_missing():
    assert search_rotated([7, 8, 9, 1, 2, 3, 4, 5, 6], 10) is None
    assert search_rotated([], 1) is None


@pytest.mark.parametrize("shift", range(9))
def test_search_rotated_any_pivot(shift):
    base = list(range(10, 19))
    rotated = base[shift:] + base[:shift]
    for value in base:
        assert rotated[search_rotated(rotated, value)] == value


def test_allocate_books_worked_example():
    assert allocate_books(2, [10, 20, 10, 30]) == 40


def test_feasibility_from_worked_example():
    assert not is_feasible([10, 20, 10, 30], 2, 39)
    assert is_feasible([10, 20, 10, 30], 2, 40)
    assert is_feasible([10, 20, 10, 30], 2, 50)


def test_limit_below_largest_chapter_is_infeasible():
    assert not is_feasible([10, 20, 10, 30], 10, 29)


@pytest.mark.parametrize(
    "readers, times",
    [(1, [5, 9, 2]), (3, [12, 34, 67, 90]), (2, [1, 1, 1, 1, 1]), (4, [7, 2, 5, 10, 8])],
)
def test_allocate_books_is_tight(readers, times):
    best = allocate_books(readers, times)
    assert is_feasible(times, readers, best)
    assert not is_feasible(times, readers, best - 1)


def test_single_reader_reads_everything():
    times = [12, 34, 67, 90]
    assert allocate_books(1, times) == sum(times)


def test_many_readers_bounded_by_largest_chapter():
    times = [12, 34, 67, 90]
    assert allocate_books(len(times), times) == max(times)


def test_allocate_books_needs_a_reader():
    with pytest.raises(ValueError):
        allocate_books(0, [1, 2])