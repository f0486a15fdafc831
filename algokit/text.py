"""Small string checks: anagrams, palindromes and reversal."""

from __future__ import annotations


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters in some order."""
    return len(first) == len(second) and sorted(first) == sorted(second)


def is_palindrome_word(word: str) -> bool:
    """Tell whether *word* reads the same backwards, character for character."""
    return word == word[::-1]


def reverse_text(text: str) -> str:
    """The characters of *text* in reverse order."""
    return text[::-1]