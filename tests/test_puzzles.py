from itertools import permutations as orderings

import pytest

from algokit.puzzles import (
    count_queen_placements,
    count_with_consecutive_ones,
    expand_wildcards,
    gray_code,
    hanoi_disk_moves,
    hanoi_moves,
    is_valid_sudoku,
    knight_tour,
    permutations,
    solve_n_queens,
)


def test_eight_queens_on_empty_board():
    assert count_queen_placements(["." * 8] * 8) == 92


def test_reserved_squares_reduce_placements():
    free = count_queen_placements(["." * 8] * 8)
    blocked = ["*" + "." * 7] + ["." * 8] * 7
    assert count_queen_placements(blocked) < free


def test_fully_blocked_row_has_no_placements():
    assert count_queen_placements(["*" * 8] + ["." * 8] * 7) == 0


def test_queen_board_must_be_square():
    with pytest.raises(ValueError):
        count_queen_placements(["..", "."])


def _assert_valid_queens(board, size):
    positions = [(r, c) for r in range(size) for c in range(size) if board[r][c] == 1]
    assert len(positions) == size
    assert len({r for r, _ in positions}) == size
    assert len({c for _, c in positions}) == size
    assert len({r + c for r, c in positions}) == size
    assert len({r - c for r, c in positions}) == size


@pytest.mark.parametrize("size", [1, 4, 5, 6, 8])
def test_n_queens_solution_valid(size):
    _assert_valid_queens(solve_n_queens(size), size)


@pytest.mark.parametrize("size", [2, 3])
def test_n_queens_without_solution(size):
    assert solve_n_queens(size) is None


def _assert_tour(board, size):
    where = {board[r][c]: (r, c) for r in range(size) for c in range(size)}
    assert sorted(where) == list(range(1, size * size + 1))
    assert where[1] == (0, 0)
    for number in range(1, size * size):
        (r1, c1), (r2, c2) = where[number], where[number + 1]
        assert sorted((abs(r1 - r2), abs(c1 - c2))) == [1, 2]


def test_knight_tour_five_by_five():
    _assert_tour(knight_tour(5), 5)


def test_knight_tour_trivial_board():
    assert knight_tour(1) == [[1]]


@pytest.mark.parametrize("size", [2, 3, 4])
def test_knight_tour_impossible(size):
    assert knight_tour(size) is None


def _play(moves, disks):
    rods = {1: list(range(disks, 0, -1)), 2: [], 3: []}
    for start, end in moves:
        disk = rods[start].pop()
        assert not rods[end] or rods[end][-1] > disk
        rods[end].append(disk)
    return rods


@pytest.mark.parametrize("disks", [1, 2, 3, 5])
def test_hanoi_moves_legal_and_minimal(disks):
    moves = hanoi_moves(disks)
    assert len(moves) == 2**disks - 1
    rods = _play(moves, disks)
    assert rods[3] == list(range(disks, 0, -1))


def test_hanoi_negative():
    with pytest.raises(ValueError):
        hanoi_moves(-1)


def test_hanoi_disk_moves_agree_with_rod_moves():
    labelled = hanoi_disk_moves(3)
    plain = hanoi_moves(3, "A", "B", "C")
    assert [(a, b) for _, a, b in labelled] == plain
    assert labelled[0][0] == 1
    assert max(disk for disk, _, _ in labelled) == 3


def test_permutations_are_all_arrangements():
    result = permutations("abcd")
    assert result[0] == "abcd"
    assert len(result) == 24
    assert sorted(result) == sorted("".join(p) for p in orderings("abcd"))


def test_gray_code_one_bit():
    assert gray_code(1) == ["0", "1"]


def test_gray_code_two_bits():
    assert gray_code(2) == ["00", "01", "11", "10"]


@pytest.mark.parametrize("bits", [3, 4, 6])
def test_gray_code_neighbours_differ_by_one_bit(bits):
    codes = gray_code(bits)
    assert len(set(codes)) == 2**bits
    for a, b in zip(codes, codes[1:]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_gray_code_rejects_zero():
    with pytest.raises(ValueError):
        gray_code(0)


def _empty_board():
    return [["."] * 9 for _ in range(9)]


def test_empty_sudoku_valid():
    assert is_valid_sudoku(_empty_board()) is True


def test_sudoku_row_conflict():
    board = _empty_board()
    board[0][0] = board[0][8] = "5"
    assert is_valid_sudoku(board) is False


def test_sudoku_column_conflict():
    board = _empty_board()
    board[0][4] = board[8][4] = "7"
    assert is_valid_sudoku(board) is False


def test_sudoku_block_conflict():
    board = _empty_board()
    board[3][3] = board[5][5] = "2"
    assert is_valid_sudoku(board) is False


def test_sudoku_distinct_cells_valid():
    board = _empty_board()
    board[0][0], board[4][4], board[8][8] = "1", "1", "1"
    assert is_valid_sudoku(board) is True


def test_expand_wildcards_source_pattern():
    pattern = "1??0?101"
    results = expand_wildcards(pattern)
    assert len(results) == 8
    assert len(set(results)) == 8
    assert results == sorted(results)
    for text in results:
        assert all(p == "?" or p == t for p, t in zip(pattern, text))
        assert "?" not in text


def test_expand_wildcards_without_wildcards():
    assert expand_wildcards("0110") == ["0110"]


def test_count_consecutive_ones_source_case():
    assert count_with_consecutive_ones(5) == 19


@pytest.mark.parametrize("length", range(0, 12))
def test_count_consecutive_ones_grows(length):
    assert count_with_consecutive_ones(length + 1) >= 2 * count_with_consecutive_ones(length)
    assert count_with_consecutive_ones(length) < 2**length or length == 0


def test_count_consecutive_ones_short_lengths():
    assert count_with_consecutive_ones(0) == 0
    assert count_with_consecutive_ones(1) == 0