"""Small text exercises on words and parentheses."""

from __future__ import annotations


def is_palindrome(word: str) -> bool:
    """Return True if ``word`` reads the same backwards."""
    return word == word[::-1]


def is_balanced(expression: str) -> bool:
    """Return True if the round parentheses in ``expression`` are balanced."""
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def longest_word(sentence: str) -> str:
    """Return the first longest word of ``sentence``, words split on single spaces."""
    return max(sentence.split(" "), key=len)


def reverse_words(sentence: str) -> str:
    """Return ``sentence`` with the order of its space-separated words reversed."""
    return " ".join(reversed(sentence.split(" ")))