from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .node import ListNode

T = TypeVar("T")

DEFAULT_SEPARATOR = ", "


class SinglyLinkedList(Generic[T]):
    """A singly-linked sequence with O(1) push/unshift/shift.

    Implementation notes
    --------------------
    • An empty list has no nodes at all (`head is None`), so ``None`` is a
      normal storable value.
    • Failed lookups and removals return ``None`` instead of raising.
    • Positional operations walk the chain from the head: O(n).
    • Not thread-safe; guard the whole container with one external lock
      if it is shared.
    """

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[ListNode[T]] = None
        self._tail: Optional[ListNode[T]] = None
        self._size = 0

        if it is not None:
            for v in it:
                self.push(v)

    @classmethod
    def of(cls, *items: T) -> "SinglyLinkedList[T]":
        """Build a list from positional arguments: ``SinglyLinkedList.of(1, 2, 3)``."""
        return cls(items)

    # ------------------------------ inspection -------------------------------

    def length(self) -> int:
        """Number of stored elements. O(1)."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield values from head to tail."""
        node = self._head
        while node is not None:
            yield node.get()
            node = node.get_next()

    def for_each(self, fn: Callable[[T, int], Any]) -> None:
        """Call ``fn(value, index)`` for every element in order."""
        for i, v in enumerate(self):
            fn(v, i)

    def to_string(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """Join the values with *separator*; an empty list renders as ``""``."""
        return separator.join(str(v) for v in self)

    def get_first(self) -> Optional[ListNode[T]]:
        return self._head

    def get_last(self) -> Optional[ListNode[T]]:
        return self._tail

    def get_at(self, index: int) -> Optional[ListNode[T]]:
        """Return the node at *index*, or None if the chain is shorter. O(n)."""
        if index < 0 or index >= self._size:
            return None
        node = self._head
        for _ in range(index):
            node = node.get_next()  # type: ignore[union-attr]
        return node

    def find(self, predicate: Callable[[T], bool]) -> Optional[ListNode[T]]:
        """Return the first node whose value satisfies *predicate*, else None."""
        node = self._head
        while node is not None:
            if predicate(node.get()):
                return node
            node = node.get_next()
        return None

    # ------------------------------ head / tail ------------------------------

    def push(self, value: T) -> int:
        """Append *value* at the tail and return the new size. O(1)."""
        node = ListNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.set_next(node)
            self._tail = node
        self._size += 1
        return self._size

    def unshift(self, value: T) -> int:
        """Prepend *value* at the head and return the new size. O(1)."""
        node = ListNode(value, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._size += 1
        return self._size

    def shift(self) -> Optional[ListNode[T]]:
        """Detach and return the head node, or None when empty. O(1)."""
        first = self._head
        if first is None:
            return None
        self._head = first.get_next()
        if self._head is None:
            self._tail = None
        first.set_next(None)
        self._size -= 1
        return first

    def pop(self) -> Optional[ListNode[T]]:
        """Detach and return the tail node, or None when empty. O(n)."""
        if self._size == 0:
            return None
        if self._size == 1:
            last = self._head
            self.clear()
            return last

        before_last = self.get_at(self._size - 2)
        last = before_last.get_next()  # type: ignore[union-attr]
        before_last.set_next(None)  # type: ignore[union-attr]
        self._tail = before_last
        self._size -= 1
        return last

    def clear(self) -> None:
        """Drop every node. O(1)."""
        self._head = self._tail = None
        self._size = 0

    # ------------------------------ positional -------------------------------

    def insert_at(self, index: int, value: T) -> Optional[ListNode[T]]:
        """Insert *value* so it ends up at *index*; return its node.

        Index 0 prepends. Any other index must point at an existing link,
        i.e. ``0 < index < len(self)``; appending at ``len(self)`` is what
        :meth:`push` is for. Returns None when the position is invalid.
        """
        if index < 0:
            return None
        if index == 0:
            self.unshift(value)
            return self._head

        prev = self.get_at(index - 1)
        if prev is None or not prev.has_next():
            return None

        node = ListNode(value, prev.get_next())
        prev.set_next(node)
        self._size += 1
        return node

    def delete_at(self, index: int) -> Optional[int]:
        """Remove the element at *index* and return the new size, or None."""
        if index < 0 or index >= self._size:
            return None
        if index == 0:
            self.shift()
            return self._size
        if index == self._size - 1:
            self.pop()
            return self._size

        prev = self.get_at(index - 1)
        doomed = prev.get_next()  # type: ignore[union-attr]
        prev.set_next(doomed.get_next())  # type: ignore[union-attr]
        doomed.set_next(None)  # type: ignore[union-attr]
        self._size -= 1
        return self._size

    def delete(self, predicate: Callable[[T], bool]) -> int:
        """Remove every value satisfying *predicate*; return the new size.

        Survivors keep their relative order. Builds the result in a
        temporary list, so it needs O(n) extra space.
        """
        if self._size == 0:
            return 0

        kept: SinglyLinkedList[T] = SinglyLinkedList(v for v in self if not predicate(v))

        self._head, self._tail, self._size = kept._head, kept._tail, kept._size
        kept._head = kept._tail = None
        kept._size = 0
        return self._size

    # ------------------------------ conversions ------------------------------

    def __contains__(self, value: object) -> bool:
        """Return True if *value* is present (linear scan)."""
        return self.find(lambda v: v == value) is not None

    def to_py(self) -> List[Any]:
        """Convert to a plain Python ``list``.

        Values that implement ``to_py()`` are converted through it.
        """
        out: List[Any] = []
        for v in self:
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                out.append(v.to_py())  # type: ignore[union-attr]
            else:
                out.append(v)
        return out

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SinglyLinkedList({self.to_py()!r})"
