"""Backtracking puzzles and combinatorial generators."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations as _orderings
from typing import TypeVar

R = TypeVar("R")

_KNIGHT_STEPS = ((-2, 1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1))


def count_queen_placements(board: Sequence[str]) -> int:
    """Ways to place one queen per row on free ('.') squares with no two attacking."""
    size = len(board)
    if any(len(row) != size for row in board):
        raise ValueError("board must be square")
    count = 0
    for columns in _orderings(range(size)):
        if any(board[row][col] != "." for row, col in enumerate(columns)):
            continue
        if len({row + col for row, col in enumerate(columns)}) != size:
            continue
        if len({row - col for row, col in enumerate(columns)}) != size:
            continue
        count += 1
    return count


def solve_n_queens(size: int) -> list[list[int]] | None:
    """First placement found column by column, as a 0/1 grid; None if none exists."""
    if size < 0:
        raise ValueError("board size cannot be negative")
    board = [[0] * size for _ in range(size)]
    rows: set[int] = set()
    sums: set[int] = set()
    differences: set[int] = set()

    def place(col: int) -> bool:
        if col >= size:
            return True
        for row in range(size):
            if row in rows or row + col in sums or row - col in differences:
                continue
            board[row][col] = 1
            rows.add(row)
            sums.add(row + col)
            differences.add(row - col)
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            sums.discard(row + col)
            differences.discard(row - col)
        return False

    return board if place(0) else None


def knight_tour(size: int) -> list[list[int]] | None:
    """A knight's tour from the top-left corner by plain backtracking.

    Squares hold the move number (1-based); None when no tour exists.
    """
    if size < 1:
        raise ValueError("board size must be positive")
    board = [[0] * size for _ in range(size)]
    last = size * size

    def moves(row: int, col: int) -> list[tuple[int, int]]:
        return [
            (row + dr, col + dc)
            for dr, dc in _KNIGHT_STEPS
            if 0 <= row + dr < size and 0 <= col + dc < size and board[row + dr][col + dc] == 0
        ]

    def visit(row: int, col: int, number: int) -> bool:
        board[row][col] = number
        if number == last:
            return True
        if any(visit(r, c, number + 1) for r, c in moves(row, col)):
            return True
        board[row][col] = 0
        return False

    return board if visit(0, 0, 1) else None


def hanoi_moves(
    disks: int, source: R = 1, auxiliary: R = 2, target: R = 3
) -> list[tuple[R, R]]:
    """(from, to) rod moves that carry *disks* disks from *source* to *target*."""
    if disks < 0:
        raise ValueError("number of disks cannot be negative")
    moves: list[tuple[R, R]] = []

    def solve(n: int, a: R, b: R, c: R) -> None:
        if n == 0:
            return
        solve(n - 1, a, c, b)
        moves.append((a, c))
        solve(n - 1, b, a, c)

    solve(disks, source, auxiliary, target)
    return moves


def hanoi_disk_moves(
    disks: int, from_rod: R = "A", to_rod: R = "C", aux_rod: R = "B"
) -> list[tuple[int, R, R]]:
    """(disk, from, to) moves that carry *disks* disks from *from_rod* to *to_rod*."""
    if disks < 0:
        raise ValueError("number of disks cannot be negative")
    moves: list[tuple[int, R, R]] = []

    def solve(n: int, start: R, end: R, spare: R) -> None:
        if n == 0:
            return
        solve(n - 1, start, spare, end)
        moves.append((n, start, end))
        solve(n - 1, spare, end, start)

    solve(disks, from_rod, to_rod, aux_rod)
    return moves


def permutations(text: str) -> list[str]:
    """All arrangements of *text*'s characters in swap-and-recurse order."""
    chars = list(text)
    result: list[str] = []

    def permute(start: int) -> None:
        if start >= len(chars) - 1:
            result.append("".join(chars))
            return
        for g in range(start, len(chars)):
            chars[start], chars[g] = chars[g], chars[start]
            permute(start + 1)
            chars[start], chars[g] = chars[g], chars[start]

    permute(0)
    return result


def gray_code(bits: int) -> list[str]:
    """The reflected binary Gray code of the given width."""
    if bits < 1:
        raise ValueError("gray code needs at least one bit")
    codes = ["0", "1"]
    for _ in range(bits - 1):
        codes = ["0" + code for code in codes] + ["1" + code for code in reversed(codes)]
    return codes


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether filled cells repeat in no row, column or 3x3 block ('.' is empty)."""
    seen: set[tuple[str, object, str]] = set()
    for i, row in enumerate(board):
        for j, number in enumerate(row):
            if number == ".":
                continue
            keys = [
                ("row", i, number),
                ("column", j, number),
                ("block", (i // 3, j // 3), number),
            ]
            for key in keys:
                if key in seen:
                    return False
                seen.add(key)
    return True


def expand_wildcards(pattern: str) -> list[str]:
    """Every string made by replacing each '?' with '0' or '1', '0' first."""
    results = [""]
    for char in pattern:
        choices = "01" if char == "?" else char
        results = [prefix + choice for prefix in results for choice in choices]
    return results


def count_with_consecutive_ones(length: int) -> int:
    """Number of binary strings of *length* that contain two adjacent 1s."""
    if length < 0:
        raise ValueError("length cannot be negative")
    ending_zero, ending_one = 1, 0
    for _ in range(length):
        ending_zero, ending_one = ending_zero + ending_one, ending_zero
    free = ending_zero + ending_one
    return 2**length - free