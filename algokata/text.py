"""Small string algorithms: binary addition, matching, prefixes and checks."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

__all__ = [
    "add_binary",
    "are_almost_equal",
    "find_the_difference",
    "str_str",
    "is_subsequence",
    "is_isomorphic",
    "length_of_last_word",
    "longest_common_prefix",
    "reverse_vowels",
    "is_palindrome",
    "is_valid_parentheses",
]

_VOWELS = frozenset("aeiouAEIOU")
_CLOSING_TO_OPENING = {"}": "{", "]": "[", ")": "("}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def add_binary(a: str, b: str) -> str:
    """Add two binary strings and return their sum as a binary string.

    The result keeps the width of the longer operand (leading zeros are
    preserved) and grows by one digit only on a final carry. Any character
    other than ``'1'`` counts as a zero.
    """
    if not a:
        return b
    if not b:
        return a

    width = max(len(a), len(b))
    digits: list[str] = []
    carry = 0
    for x, y in zip(reversed(a.rjust(width, "0")), reversed(b.rjust(width, "0"))):
        total = (x == "1") + (y == "1") + carry
        carry, bit = divmod(total, 2)
        digits.append("1" if bit else "0")
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def are_almost_equal(s1: str, s2: str) -> bool:
    """Return True if at most one swap of two characters in ``s1`` gives ``s2``."""
    if len(s1) != len(s2):
        return False

    mismatches = [(x, y) for x, y in zip(s1, s2) if x != y]
    if len(mismatches) > 2:
        return False

    left = Counter(x for x, _ in mismatches)
    right = Counter(y for _, y in mismatches)
    return all(count == 1 and right[char] == count for char, count in left.items())


def find_the_difference(s: str, t: str) -> int:
    """Return the byte that ``t`` holds in addition to the bytes of ``s``.

    Both strings are compared as sorted UTF-8 bytes; 0 is returned when no
    extra byte is found.
    """
    left = sorted(s.encode("utf-8"))
    right = sorted(t.encode("utf-8"))
    for position, byte in enumerate(right):
        if position >= len(left) or left[position] != byte:
            return byte
    return 0


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` in ``haystack``.

    Returns -1 when there is none, and also when either string is empty.
    """
    if not haystack or not needle:
        return -1
    return haystack.find(needle)


def is_subsequence(s: str, t: str) -> bool:
    """Return True if ``s`` can be read from ``t`` by dropping characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def is_isomorphic(s: str, t: str) -> bool:
    """Return True if the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False

    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for x, y in zip(s, t):
        known_x = x in forward
        known_y = y in backward
        if not known_x and not known_y:
            forward[x] = y
            backward[y] = x
        elif known_x and known_y:
            if backward[y] != x or forward[x] != y:
                return False
        else:
            return False
    return True


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``, or 0."""
    words = [word for word in s.split(" ") if word]
    return len(words[-1]) if words else 0


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    prefix: list[str] = []
    for column in zip(*strs):
        first = column[0]
        if any(char != first for char in column):
            break
        prefix.append(first)
    return "".join(prefix)


def reverse_vowels(s: str) -> str:
    """Return ``s`` with the order of its vowels reversed."""
    vowels = [char for char in s if char in _VOWELS]
    return "".join(vowels.pop() if char in _VOWELS else char for char in s)


def _is_alphanumeric(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def is_palindrome(s: str) -> bool:
    """Return True if the letters and digits of ``s`` read the same both ways.

    Case is ignored; every other character is skipped.
    """
    kept = [char.lower() for char in s if _is_alphanumeric(char)]
    return kept == kept[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Return True if ``s`` is a balanced string of ``()``, ``[]`` and ``{}``.

    Any other character makes the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif char in _CLOSING_TO_OPENING:
            if not stack or stack.pop() != _CLOSING_TO_OPENING[char]:
                return False
        else:
            return False
    return not stack