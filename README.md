# algokata

A collection of small, focused algorithm solutions with plain Python
interfaces. It needs Python 3.10 or later and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokata.text`

String functions:

- `add_binary(a, b)` – sum of two binary strings; the result keeps the width
  of the longer operand and grows by one digit only on a final carry.
- `are_almost_equal(s1, s2)` – whether at most one swap of two characters
  turns `s1` into `s2`.
- `find_the_difference(s, t)` – the extra byte value that `t` holds beyond
  the UTF-8 bytes of `s`, or `0`.
- `str_str(haystack, needle)` – index of the first occurrence, or `-1`
  (also `-1` when either string is empty).
- `is_subsequence(s, t)`, `is_isomorphic(s, t)`, `length_of_last_word(s)`,
  `longest_common_prefix(strs)`, `reverse_vowels(s)`.
- `is_palindrome(s)` – compares letters and digits only, ignoring case.
- `is_valid_parentheses(s)` – balanced `()`, `[]` and `{}`; any other
  character makes the string invalid.

```python
from algokata.text import add_binary, is_valid_parentheses

add_binary("1010", "1011")      # "10101"
is_valid_parentheses("[{}]")    # True
```

### `algokata.integers`

Number and bit functions: `add_digits`, `is_happy`, `is_power_of_four`,
`is_power_of_two`, `my_sqrt` (Newton's method; `0` for zero or negative
input), `is_ugly`, `count_bits`, `hamming_weight` (low 32 bits),
`reverse_bits` (raises `ValueError` for values outside the 32-bit unsigned
range) and `single_number`.

```python
from algokata.integers import count_bits, reverse_bits

count_bits(5)      # [0, 1, 1, 2, 1, 2]
reverse_bits(3)    # 3221225472
```

### `algokata.sequences`

List functions: `contains_duplicate`, `intersection`, `merge`,
`move_zeroes`, `plus_one`, `remove_duplicates`, `remove_element`,
`search_insert`, `bsearch` and `two_sum`.

`merge`, `move_zeroes`, `plus_one`, `remove_duplicates` and
`remove_element` update the list they are given in place; `merge` raises
`ValueError` when the lists are too short for `m` and `n`.

`bsearch(a, val)` returns the index of `val` in a sorted sequence. It raises
`OutOfRangeError` when `val` lies outside the sequence's values, and
`NotFoundError` when it is in range but absent; the latter carries the
position where the search stopped as `index`.

```python
from algokata.sequences import two_sum, search_insert

two_sum([2, 7, 11, 15], 9)       # [0, 1]
search_insert([1, 3, 5, 6], 2)   # 1
```

### `algokata.linked`

A singly linked `ListNode` (fields `val` and `next`) with the class method
`ListNode.from_values(values)` (returns `None` for no values) and the method
`values()`, plus `has_cycle`, `merge_two_lists` (builds a new list),
`is_palindrome_list`, `delete_duplicates` and `remove_elements` (both unlink
nodes in place).

```python
from algokata.linked import ListNode, remove_elements

head = ListNode.from_values([5, 1, 2, 5, 3])
remove_elements(head, 5).values()   # [1, 2, 3]
```

### `algokata.stack`

A last-in, first-out `Stack` with `push`, `pop`, `top`, `is_empty` and
`len()` support. `pop` and `top` return `0` on an empty stack.

```python
from algokata.stack import Stack

stack = Stack()
stack.push(1)
stack.top()        # 1
stack.pop()        # 1
stack.is_empty()   # True
```

## What it does not do

This is a library only: it installs no command-line program. Use it by
importing the modules above.