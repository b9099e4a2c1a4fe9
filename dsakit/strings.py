"""Simple string routines working on ASCII letters."""

import string
from itertools import pairwise

_SWAP = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)
_VOWELS = frozenset("aeiou")
_LETTERS = frozenset(string.ascii_letters)


def swap_case(word: str) -> str:
    """Swap upper and lower case of ASCII letters; other characters stay."""
    return word.translate(_SWAP)


def count_words_and_vowels(text: str) -> tuple[int, int]:
    """Return ``(words, vowels)`` for ``text``.

    Words are counted as one plus every space that follows a non-space;
    vowels are the lower-case letters a, e, i, o and u.
    """
    words = 1 + sum(
        1 for previous, current in pairwise(text) if current == " " and previous != " "
    )
    vowels = sum(1 for char in text if char in _VOWELS)
    return words, vowels


def string_length(word: str) -> int:
    """Return the number of characters before the first NUL, or the whole length."""
    end = word.find("\0")
    return len(word) if end == -1 else end


def is_palindrome(word: str) -> bool:
    """Return True if ``word`` reads the same backwards."""
    return word == word[::-1]


def reverse(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    return word[::-1]


def is_alphabetic(word: str) -> bool:
    """Return True if every character of ``word`` is an ASCII letter."""
    return all(char in _LETTERS for char in word)