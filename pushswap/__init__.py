"""Two-stack integer sorting, with character, string, output, line-reading and linked-list helpers."""

__version__ = "0.1.0"