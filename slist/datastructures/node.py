from __future__ import annotations
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ListNode(Generic[T]):
    """A single storage cell of a singly-linked chain.

    Each node exclusively owns its successor: attaching a node with
    :meth:`set_next` hands the whole subchain over to this node.
    """

    __slots__ = ("_value", "_next")

    def __init__(self, value: T, next: Optional["ListNode[T]"] = None) -> None:
        self._value = value
        self._next = next

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    def get_next(self) -> Optional["ListNode[T]"]:
        return self._next

    def set_next(self, node: Optional["ListNode[T]"]) -> None:
        """Link *node* (and everything after it) as this node's successor."""
        self._next = node

    def has_next(self) -> bool:
        return self._next is not None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ListNode({self._value!r})"
