# Container types used standalone and by the graph engines
"""
Generic containers:
- Queue: FIFO work queue (BFS)
- Stack: LIFO work stack (DFS)
- SinglyLinkedList: head/tail linked list
- BinaryTree: binary search tree with string serialization
"""

from src.structures.binary_tree import BinaryTree, TreeNode
from src.structures.exceptions import ListIndexError, StructureError
from src.structures.linked_list import ListNode, SinglyLinkedList
from src.structures.queue import Queue
from src.structures.stack import Stack

__all__ = [
    # Exceptions
    "StructureError",
    "ListIndexError",
    # Containers
    "Queue",
    "Stack",
    "SinglyLinkedList",
    "ListNode",
    "BinaryTree",
    "TreeNode",
]
