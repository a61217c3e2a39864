"""Classic data structures and algorithms: disjoint sets, spanning trees, stacks, queues, linked lists, tries, AVL trees and integer list tasks."""

__version__ = "0.1.0"

__all__ = [
    "dsu",
    "mst",
    "linked_queue",
    "array_stack",
    "linked_list",
    "trie",
    "avl",
    "lab",
]