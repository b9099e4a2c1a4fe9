import pytest

from dsakit.strings import (
    count_words_and_vowels,
    is_alphabetic,
    is_palindrome,
    reverse,
    string_length,
    swap_case,
)


def test_swap_case_example():
    assert swap_case("Hello World") == "hELLO wORLD"


@pytest.mark.parametrize("text", ["", "Hello World", "MiXeD 123 !?", "abcXYZ"])
def test_swap_case_round_trip(text):
    assert swap_case(swap_case(text)) == text


def test_swap_case_leaves_non_ascii_and_digits():
    text = "ñ1é-9"
    assert swap_case(text) == text


def test_count_words_and_vowels_example():
    assert count_words_and_vowels("Hello World") == (2, 3)


def test_count_words_collapses_repeated_spaces():
    single = count_words_and_vowels("one two")
    repeated = count_words_and_vowels("one    two")
    assert single == repeated


def test_count_vowels_only_lower_case():
    assert count_words_and_vowels("AEIOU")[1] == 0
    assert count_words_and_vowels("aeiou")[1] == len("aeiou")


def test_single_word_counts_one():
    assert count_words_and_vowels("word")[0] == 1


@pytest.mark.parametrize("text", ["", "Hello World", "a b c"])
def test_string_length_without_nul(text):
    assert string_length(text) == len(text)


def test_string_length_stops_at_nul():
    head = "abc"
    assert string_length(head + "\0" + "def") == len(head)


@pytest.mark.parametrize("word", ["madam", "", "a", "abba", "racecar"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["Hello", "ab", "Madam"])
def test_non_palindromes(word):
    assert is_palindrome(word) is False


def test_reverse_example():
    assert reverse("Hello") == "olleH"


@pytest.mark.parametrize("word", ["", "x", "Hello World", "12345"])
def test_reverse_round_trip(word):
    assert reverse(reverse(word)) == word
    assert len(reverse(word)) == len(word)


def test_palindrome_equals_its_reverse():
    word = "level"
    assert reverse(word) == word


def test_is_alphabetic():
    assert is_alphabetic("HelloWorld") is True
    assert is_alphabetic("Hello World") is False
    assert is_alphabetic("abc1") is False
    assert is_alphabetic("") is True