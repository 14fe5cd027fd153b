from .node import ListNode
from .singly_linked_list import SinglyLinkedList

__all__ = [
    "ListNode",
    "SinglyLinkedList",
]
