"""Binary trees, a treap, Huffman codes, bracket matching and matrix addition."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

S = TypeVar("S", bound=Hashable)


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def flatten(root: TreeNode | None) -> None:
    """Rewire the tree in place into a right-leaning chain in preorder."""
    node = root
    while node is not None:
        if node.left is not None:
            tail = node.left
            while tail.right is not None:
                tail = tail.right
            tail.right = node.right
            node.right = node.left
            node.left = None
        node = node.right


def preorder_right(root: TreeNode | None) -> list[int]:
    """Values met by following right links from *root*."""
    values: list[int] = []
    node = root
    while node is not None:
        values.append(node.val)
        node = node.right
    return values


@dataclass(eq=False)
class TreapNode:
    """A treap node: a search tree on keys, a max-heap on priorities."""

    key: int
    priority: int
    left: TreapNode | None = None
    right: TreapNode | None = None


def _rotate_right(node: TreapNode) -> TreapNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: TreapNode) -> TreapNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


def treap_insert(root: TreapNode | None, key: int, priority: int) -> TreapNode:
    """Insert a key with a priority and return the new root; equal keys go left."""
    if root is None:
        return TreapNode(key, priority)
    if key <= root.key:
        root.left = treap_insert(root.left, key, priority)
        if root.left.priority > root.priority:
            root = _rotate_right(root)
    else:
        root.right = treap_insert(root.right, key, priority)
        if root.right.priority > root.priority:
            root = _rotate_left(root)
    return root


def inorder(root: TreapNode | None) -> list[tuple[int, int]]:
    """(key, priority) pairs in in-order."""
    result: list[tuple[int, int]] = []
    stack: list[TreapNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append((node.key, node.priority))
        node = node.right
    return result


@dataclass(eq=False)
class _HuffmanNode(Generic[S]):
    frequency: int
    symbol: S | None = None
    left: _HuffmanNode[S] | None = None
    right: _HuffmanNode[S] | None = None


def huffman_codes(symbols: Iterable[S], frequencies: Iterable[int]) -> dict[S, str]:
    """Huffman code of each symbol; left branches add '0', right branches '1'.

    A single symbol gets the empty code.
    """
    symbol_list = list(symbols)
    frequency_list = list(frequencies)
    if len(symbol_list) != len(frequency_list):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbol_list:
        raise ValueError("huffman coding needs at least one symbol")
    if len(set(symbol_list)) != len(symbol_list):
        raise ValueError("symbols must be distinct")

    order = itertools.count()
    heap = [
        (frequency, next(order), _HuffmanNode(frequency, symbol))
        for symbol, frequency in zip(symbol_list, frequency_list)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), _HuffmanNode(total, None, left, right)))

    codes: dict[S, str] = {}
    stack: list[tuple[_HuffmanNode[S], str]] = [(heap[0][2], "")]
    while stack:
        node, code = stack.pop()
        if node.left is None and node.right is None:
            codes[node.symbol] = code  # type: ignore[index]
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_balanced(expression: str) -> bool:
    """Tell whether (), [] and {} in *expression* are properly matched."""
    stack: list[str] = []
    for char in expression:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


@dataclass(frozen=True)
class Matrix:
    """An immutable rectangular matrix of numbers."""

    rows: tuple[tuple[int, ...], ...] = field(default=())

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.rows)
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all matrix rows must have the same length")
        object.__setattr__(self, "rows", rows)

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (len(self.rows), len(self.rows[0]) if self.rows else 0)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.rows)

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self.rows)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(f"cannot add matrices of shapes {self.shape} and {other.shape}")
        return Matrix(
            tuple(
                tuple(a + b for a, b in zip(mine, theirs))
                for mine, theirs in zip(self.rows, other.rows)
            )
        )