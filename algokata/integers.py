"""Small integer and bit-manipulation algorithms."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable

__all__ = [
    "add_digits",
    "is_happy",
    "is_power_of_four",
    "is_power_of_two",
    "my_sqrt",
    "is_ugly",
    "count_bits",
    "hamming_weight",
    "reverse_bits",
    "single_number",
]

_LOW_32 = 0xFFFFFFFF
_EVEN_BITS_32 = 0x55555555
_SQRT_TOLERANCE = 0.1


def _digits(n: int) -> list[int]:
    return [int(char) for char in str(abs(n))] if n else []


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains."""
    value = num
    while value > 9:
        value = sum(_digits(value))
    return value


def is_happy(n: int) -> bool:
    """Return True if summing squared digits repeatedly reaches 1."""
    seen_small: set[int] = set()
    value = n
    while True:
        value = sum(digit * digit for digit in _digits(value))
        if value == 1:
            return True
        if value < 10:
            if value in seen_small:
                return False
            seen_small.add(value)


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is a power of four that fits in 32 bits."""
    if n < 1:
        return False
    return n & (n - 1) == 0 and n & _EVEN_BITS_32 != 0


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def my_sqrt(s: int) -> int:
    """Return the integer square root of ``s`` by Newton's method.

    Zero and negative inputs give 0.
    """
    if s <= 0:
        return 0
    target = float(s)
    x = target
    while abs(x * x - target) > _SQRT_TOLERANCE:
        x = 0.5 * (x + target / x)
    return int(x)


def is_ugly(n: int) -> bool:
    """Return True if ``n`` is positive with no prime factors other than 2, 3, 5."""
    if n < 1:
        return False
    for factor in (2, 3, 5):
        while n % factor == 0:
            n //= factor
    return n == 1


def count_bits(n: int) -> list[int]:
    """Return the number of set low 32 bits of every integer from 0 to ``n``."""
    return [(i & _LOW_32).bit_count() for i in range(n + 1)]


def hamming_weight(n: int) -> int:
    """Return the number of set bits among the low 32 bits of ``n``."""
    return (n & _LOW_32).bit_count()


def reverse_bits(num: int) -> int:
    """Return the 32-bit unsigned integer ``num`` with its bit order reversed."""
    if not 0 <= num <= _LOW_32:
        raise ValueError(f"{num} is not a 32-bit unsigned integer")
    return int(format(num, "032b")[::-1], 2)


def single_number(nums: Iterable[int]) -> int:
    """Return the XOR of all numbers: the one that does not appear twice."""
    return reduce(xor, nums, 0)