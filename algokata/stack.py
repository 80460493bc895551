"""A last-in, first-out stack of integers."""

from __future__ import annotations

__all__ = ["Stack"]


class Stack:
    """A LIFO stack; popping or peeking an empty stack yields 0."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top value, or 0 when the stack is empty."""
        return self._items.pop() if self._items else 0

    def top(self) -> int:
        """Return the top value without removing it, or 0 when empty."""
        return self._items[-1] if self._items else 0

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)