"""Classic array, string, tree, linked-list and dynamic-programming algorithms with small container types."""

__version__ = "0.1.0"