"""Classic data structures and small algorithms: a dynamic array, a linked list, a stack, bracket balancing and matrix combinations."""

__version__ = "1.0.0"