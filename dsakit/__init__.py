"""Linked lists, a binary search tree and small numeric routines."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "doubly_linked_list", "linked_list", "tree"]