from hypothesis import given
from hypothesis import strategies as st

from dsakit.text import is_balanced, is_palindrome, longest_word, reverse_words

sentences = st.text(alphabet="abc ", max_size=30)


def test_is_palindrome():
    assert is_palindrome("racecar")
    assert is_palindrome("")
    assert not is_palindrome("ab")


@given(st.text(alphabet="xyz", max_size=10))
def test_word_plus_reverse_is_palindrome(word):
    assert is_palindrome(word + word[::-1])


def test_is_balanced_cases():
    assert is_balanced("(()())")
    assert is_balanced("a(b)c")
    assert not is_balanced("(()")
    assert not is_balanced(")(")


@given(st.integers(min_value=0, max_value=50))
def test_is_balanced_deep_nesting(depth):
    assert is_balanced("(" * depth + ")" * depth)
    assert not is_balanced("(" * (depth + 1) + ")" * depth)


def test_longest_word_prefers_first_on_tie():
    assert longest_word("hello big world") == "hello"
    assert longest_word("a bb cc") == "bb"
    assert longest_word("") == ""


@given(sentences)
def test_longest_word_is_a_longest_word(sentence):
    words = sentence.split(" ")
    result = longest_word(sentence)
    assert result in words
    assert all(len(word) <= len(result) for word in words)


def test_reverse_words_example():
    assert reverse_words("hello big world") == "world big hello"


@given(sentences)
def test_reverse_words_round_trip(sentence):
    reversed_sentence = reverse_words(sentence)
    assert len(reversed_sentence) == len(sentence)
    assert reverse_words(reversed_sentence) == sentence