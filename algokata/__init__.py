"""Solutions to classic string, integer, sequence, linked-list and stack exercises."""

__version__ = "0.1.0"

__all__ = ["integers", "linked", "sequences", "stack", "text"]