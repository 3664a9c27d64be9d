"""Linear data structures sharing a common sequence interface: fixed and dynamic arrays, a singly linked list and a bounded stack."""

__version__ = "0.1.0"
__all__ = ["sequence", "fixed_array", "dynamic_array", "linked_list", "stack", "tester"]