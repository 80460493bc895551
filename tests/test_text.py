import pytest

from algokata.text import (
    add_binary,
    are_almost_equal,
    find_the_difference,
    is_isomorphic,
    is_palindrome,
    is_subsequence,
    is_valid_parentheses,
    length_of_last_word,
    longest_common_prefix,
    reverse_vowels,
    str_str,
)


@pytest.mark.parametrize(
    "a, b, want",
    [
        ("11", "1", "100"),
        ("1010", "1011", "10101"),
        ("", "101", "101"),
        ("110", "", "110"),
        ("0", "0", "0"),
    ],
)
def test_add_binary(a, b, want):
    assert add_binary(a, b) == want


def test_add_binary_matches_integer_sum():
    for x in range(40):
        for y in range(40):
            got = add_binary(format(x, "b"), format(y, "b"))
            assert int(got, 2) == x + y


@pytest.mark.parametrize(
    "s1, s2, want",
    [
        ("bank", "kanb", True),
        ("attack", "defend", False),
        ("kelb", "kelb", True),
        ("ab", "abc", False),
        ("aa", "ab", False),
        ("abcd", "badc", False),
    ],
)
def test_are_almost_equal(s1, s2, want):
    assert are_almost_equal(s1, s2) is want


@pytest.mark.parametrize(
    "s, t, want",
    [
        ("", "y", ord("y")),
        ("abcd", "abycd", ord("y")),
        ("abcd", "yabcd", ord("y")),
        ("abc", "abc", 0),
    ],
)
def test_find_the_difference(s, t, want):
    assert find_the_difference(s, t) == want


@pytest.mark.parametrize(
    "haystack, needle, want",
    [
        ("sadbutsad", "sad", 0),
        ("leetcode", "leeto", -1),
        ("", "", -1),
        ("", "vanko", -1),
        ("vanko", "", -1),
        ("hello", "ll", 2),
    ],
)
def test_str_str(haystack, needle, want):
    assert str_str(haystack, needle) == want


@pytest.mark.parametrize(
    "s, t, want",
    [
        ("abc", "ahbgdc", True),
        ("abc", "a", False),
        ("abc", "ahbgdcccc", True),
        ("", "anything", True),
        ("axc", "ahbgdc", False),
    ],
)
def test_is_subsequence(s, t, want):
    assert is_subsequence(s, t) is want


@pytest.mark.parametrize(
    "s, t, want",
    [
        ("egg", "add", True),
        ("foo", "bar", False),
        ("paper", "title", True),
        ("badc", "baba", False),
        ("ab", "abc", False),
    ],
)
def test_is_isomorphic(s, t, want):
    assert is_isomorphic(s, t) is want


@pytest.mark.parametrize(
    "s, want",
    [
        ("Hello World", 5),
        ("   fly me   to   the moon  ", 4),
        ("luffy is still joyboy", 6),
        ("", 0),
        ("    ", 0),
    ],
)
def test_length_of_last_word(s, want):
    assert length_of_last_word(s) == want


@pytest.mark.parametrize(
    "strs, want",
    [
        (["flower", "flow", "flight"], "fl"),
        (["", "", ""], ""),
        (["flower"], "flower"),
        ([], ""),
        (["dog", "racecar", "car"], ""),
    ],
)
def test_longest_common_prefix(strs, want):
    assert longest_common_prefix(strs) == want


@pytest.mark.parametrize(
    "s, want",
    [
        ("abA", "Aba"),
        ("a", "a"),
        ("Abbo", "obbA"),
        ("AAbo", "oAbA"),
        ("oaoa", "aoao"),
        ("", ""),
        ("xyz", "xyz"),
    ],
)
def test_reverse_vowels(s, want):
    assert reverse_vowels(s) == want


@pytest.mark.parametrize(
    "s, want",
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        (" ", True),
        ("0P", False),
        ("No 'x' in Nixon", True),
    ],
)
def test_is_palindrome(s, want):
    assert is_palindrome(s) is want


@pytest.mark.parametrize(
    "s, want",
    [
        ("", True),
        ("[{}]", True),
        ("[{]}", False),
        ("[{}", False),
        ("()[]{}", True),
        (")", False),
        ("(a)", False),
    ],
)
def test_is_valid_parentheses(s, want):
    assert is_valid_parentheses(s) is want