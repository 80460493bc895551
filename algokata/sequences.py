"""Array algorithms: duplicates, merging, in-place compaction and searching."""

from __future__ import annotations

import heapq
from itertools import groupby
from typing import Iterable, Sequence

__all__ = [
    "NotFoundError",
    "OutOfRangeError",
    "contains_duplicate",
    "intersection",
    "merge",
    "move_zeroes",
    "plus_one",
    "remove_duplicates",
    "remove_element",
    "search_insert",
    "bsearch",
    "two_sum",
]


class NotFoundError(LookupError):
    """Raised by :func:`bsearch` when the value lies in range but is absent.

    ``index`` is the position where the search stopped.
    """

    def __init__(self, index: int) -> None:
        super().__init__(f"not found (search stopped at index {index})")
        self.index = index


class OutOfRangeError(ValueError):
    """Raised by :func:`bsearch` when the value lies outside the sequence."""

    def __init__(self) -> None:
        super().__init__("value out of range")


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value occurs more than once in ``nums``."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, in ``nums2`` order."""
    candidates = set(nums1)
    found: list[int] = []
    emitted: set[int] = set()
    for value in nums2:
        if value in candidates and value not in emitted:
            found.append(value)
            emitted.add(value)
    return found


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> list[int]:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``.

    ``nums1`` must have room for ``m + n`` items; it is updated in place and
    returned.
    """
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n items and nums2 at least n items")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))
    return nums1


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of ``nums`` in place, keeping the order of the rest."""
    kept = [num for num in nums if num != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the decimal number whose digits are given, most significant first.

    The digits are updated in place; a new list is returned only when the
    number gains a digit.
    """
    if not digits:
        return digits
    carry = 1
    for position in reversed(range(len(digits))):
        carry, digits[position] = divmod(digits[position] + carry, 10)
        if not carry:
            return digits
    return [1, *digits]


def remove_duplicates(nums: list[int]) -> int:
    """Compact consecutive duplicates to the front of ``nums``.

    Returns the number of kept values; items past that count are left as they were.
    """
    kept = [value for value, _ in groupby(nums)]
    nums[: len(kept)] = kept
    return len(kept)


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front of ``nums``.

    Returns how many were kept; items past that count are left as they were.
    """
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    if not nums or target <= nums[0]:
        return 0
    if target > nums[-1]:
        return len(nums)
    try:
        return bsearch(nums, target)
    except NotFoundError as missing:
        return missing.index + 1


def bsearch(a: Sequence[int], val: int) -> int:
    """Return the index of ``val`` in sorted ``a`` by binary search.

    Raises OutOfRangeError when ``val`` is outside the values of ``a`` and
    NotFoundError when it is in range but absent.
    """
    if not a or val < a[0] or val > a[-1]:
        raise OutOfRangeError()
    low, high = 0, len(a) - 1
    while True:
        mid = (low + high) // 2
        if low > high:
            raise NotFoundError(mid)
        if a[mid] == val:
            return mid
        if val < a[mid]:
            high = mid - 1
        else:
            low = mid + 1


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return the indices of the first pair adding up to ``target``, or ``[]``."""
    positions: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = positions.get(target - value)
        if partner is not None:
            return [partner, index]
        positions[value] = index
    return []