"""Small data structures: a singly linked list, a binary search tree, a queue and a stack."""

__version__ = "0.1.0"