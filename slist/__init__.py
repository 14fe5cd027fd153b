"""slist: a singly-linked sequential container with O(1) head/tail paths."""

from .datastructures import ListNode, SinglyLinkedList

__all__ = [
    "ListNode",
    "SinglyLinkedList",
]
