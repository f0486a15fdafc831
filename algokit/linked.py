"""Linked structures: a bit list, doubly and singly linked lists, a circular playlist."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None
    prev: _Node[T] | None = None


class BitList:
    """A binary number stored most significant bit first."""

    def __init__(self, bits: Iterable[int] = ()) -> None:
        self._bits: list[int] = []
        for bit in bits:
            self.append(bit)

    def append(self, bit: int) -> None:
        """Add a bit at the least significant end."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._bits.append(int(bit))

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __str__(self) -> str:
        return "".join(str(bit) for bit in self._bits)

    def ones_complement(self) -> str:
        """Every bit inverted, as a string of the same width."""
        return "".join("0" if bit else "1" for bit in self._bits)

    def twos_complement(self) -> str:
        """The two's complement at the same width, as a string.

        Trailing zeros and the lowest 1 are kept; every bit above it is inverted.
        """
        lowest_one = next(
            (index for index in range(len(self._bits) - 1, -1, -1) if self._bits[index]),
            None,
        )
        if lowest_one is None:
            return str(self)
        high = "".join("0" if bit else "1" for bit in self._bits[:lowest_one])
        low = "".join(str(bit) for bit in self._bits[lowest_one:])
        return high + low


class DoublyLinkedList(Generic[T]):
    """A doubly linked list with 1-based positional insertion and removal."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for value in values:
            self._append(value)

    def _append(self, value: T) -> None:
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def push_front(self, value: T) -> None:
        """Insert *value* at the beginning."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert(self, value: T, position: int) -> None:
        """Insert so that *value* becomes the item at 1-based *position*.

        Position 0 also inserts at the front; positions above the current
        length are rejected.
        """
        if not 0 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        index = max(position - 1, 0)
        if index == 0:
            self.push_front(value)
            return
        after = self._node_at(index)
        before = after.prev
        assert before is not None
        node = _Node(value, next=after, prev=before)
        before.next = node
        after.prev = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("the list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def remove_at(self, position: int) -> T:
        """Remove and return the item at 1-based *position*."""
        if not 1 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            return self.pop_front()
        node = self._node_at(position - 1)
        assert node.prev is not None
        node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value


class LinkedList(Generic[T]):
    """A singly linked list."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def append(self, value: T) -> None:
        """Add *value* at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: T) -> bool:
        """Remove the first item equal to *value*; tell whether one was found."""
        previous: _Node[T] | None = None
        node = self._head
        while node is not None and node.value != value:
            previous, node = node, node.next
        if node is None:
            return False
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every item."""
        self._head = self._tail = None
        self._size = 0


class Playlist:
    """A circular playlist of song names with a current song.

    Removing a song makes the song after it the start of the playlist.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._songs: list[str] = []
        self._current: int | None = None
        for name in names:
            self.add(name)

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._songs)

    @property
    def current(self) -> str | None:
        """The song now selected, or None when the playlist is empty."""
        return None if self._current is None else self._songs[self._current]

    def add(self, name: str) -> None:
        """Add a song at the end; the first song added becomes current."""
        self._songs.append(name)
        if self._current is None:
            self._current = 0

    def remove(self, name: str) -> None:
        """Remove the first song called *name*."""
        if not self._songs:
            raise LookupError("no song to remove: the playlist is empty")
        try:
            index = self._songs.index(name)
        except ValueError:
            raise KeyError(name) from None
        count = len(self._songs)
        self._songs = self._songs[index + 1 :] + self._songs[:index]
        if not self._songs:
            self._current = None
            return
        assert self._current is not None
        if self._current == index:
            self._current = 0
        elif self._current > index:
            self._current -= index + 1
        else:
            self._current += count - index - 1

    def _step(self, offset: int) -> str:
        if self._current is None:
            raise LookupError("no songs in the playlist")
        self._current = (self._current + offset) % len(self._songs)
        return self._songs[self._current]

    def next(self) -> str:
        """Move to and return the next song, wrapping around."""
        return self._step(1)

    def previous(self) -> str:
        """Move to and return the previous song, wrapping around."""
        return self._step(-1)

    def first(self) -> str:
        """The song at the start of the playlist."""
        if not self._songs:
            raise LookupError("the playlist is empty")
        return self._songs[0]

    def last(self) -> str:
        """The song at the end of the playlist."""
        if not self._songs:
            raise LookupError("the playlist is empty")
        return self._songs[-1]

    def find(self, name: str) -> str:
        """Return the song called *name*."""
        if not self._songs:
            raise LookupError("no song to search: the playlist is empty")
        if name not in self._songs:
            raise KeyError(name)
        return name