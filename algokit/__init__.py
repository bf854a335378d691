"""Classic algorithm routines and small data structures: arrays and hashing,
two pointers, sliding windows, stacks, linked lists and binary search."""

__version__ = "0.1.0"