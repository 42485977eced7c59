import pytest

from algokit.strings import (
    break_palindrome,
    count_anagram_occurrences,
    insertion_sort_ignore_case,
    longest_common_subsequence,
    longest_palindrome,
    sort_by_alphabet,
    to_24_hour,
)


def _is_palindrome(text):
    return text == text[::-1]


@pytest.mark.parametrize("text", ["abccba", "racecar", "aabaa", "zz", "abba"])
def test_break_palindrome_changes_one_char_and_breaks(text):
    result = break_palindrome(text)
    assert len(result) == len(text)
    assert sum(a != b for a, b in zip(text, result)) == 1
    assert not _is_palindrome(result)
    assert result < text or result[-1] == "b"


def test_break_palindrome_all_a_changes_last():
    result = break_palindrome("aaaaa")
    assert result[:-1] == "aaaa"
    assert result[-1] == "b"


def test_break_palindrome_single_char_is_empty():
    assert break_palindrome("q") == ""


def test_break_palindrome_empty_raises():
    with pytest.raises(ValueError):
        break_palindrome("")


@pytest.mark.parametrize("text", ["babad", "cbbd", "forgeeksskeegfor", "abc", "a", "aaaa"])
def test_longest_palindrome_is_maximal_substring(text):
    result = longest_palindrome(text)
    assert result in text
    assert _is_palindrome(result)
    longest = max(
        len(text[i:j])
        for i in range(len(text))
        for j in range(i + 1, len(text) + 1)
        if _is_palindrome(text[i:j])
    )
    assert len(result) == longest


def test_longest_palindrome_embedded():
    assert longest_palindrome("xracecary") == "racecar"


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


@pytest.mark.parametrize("first,second", [("abcde", "ace"), ("abc", "def"), ("xyz", "xxyyzz")])
def test_lcs_is_symmetric(first, second):
    assert longest_common_subsequence(first, second) == longest_common_subsequence(
        second, first
    )


def test_lcs_of_subsequence_is_its_length():
    assert longest_common_subsequence("ace", "abcde") == len("ace")
    assert longest_common_subsequence("hello", "hello") == len("hello")


def test_lcs_with_empty_or_disjoint():
    assert longest_common_subsequence("abc", "") == 0
    assert longest_common_subsequence("abc", "xyz") == 0


@pytest.mark.parametrize(
    "pattern,text",
    [("for", "forxxorfxdofr"), ("aaba", "aabaabaa"), ("ab", "ababab"), ("z", "abc")],
)
def test_anagram_count_matches_window_check(pattern, text):
    width = len(pattern)
    expected = sum(
        sorted(text[i : i + width]) == sorted(pattern)
        for i in range(len(text) - width + 1)
    )
    assert count_anagram_occurrences(pattern, text) == expected


def test_anagram_pattern_longer_than_text():
    assert count_anagram_occurrences("abcd", "ab") == 0


def test_anagram_pattern_equals_text():
    assert count_anagram_occurrences("listen", "silent") == 1


def test_midnight():
    assert to_24_hour("12:00:00AM") == "00:00:00"


@pytest.mark.parametrize("hour", range(1, 12))
def test_morning_hours_unchanged(hour):
    text = f"{hour:02d}:15:30AM"
    assert to_24_hour(text) == text[:8]


def test_noon_unchanged():
    assert to_24_hour("12:45:54PM") == "12:45:54"


@pytest.mark.parametrize("hour", range(1, 12))
def test_afternoon_adds_twelve(hour):
    text = f"{hour:02d}:05:45PM"
    result = to_24_hour(text)
    assert int(result[:2]) == hour + 12
    assert result[2:] == text[2:8]


@pytest.mark.parametrize("bad", ["7:05:45PM", "07:05:45XM", "13:00:00PM", "00:10:00AM", ""])
def test_bad_times_raise(bad):
    with pytest.raises(ValueError):
        to_24_hour(bad)


def test_sort_by_plain_alphabet_matches_sorted():
    words = ["pear", "apple", "banana", "app", "kiwi"]
    assert sort_by_alphabet("abcdefghijklmnopqrstuvwxyz", words) == sorted(words)


def test_sort_by_reversed_alphabet():
    words = ["cat", "dog", "bird", "emu"]
    alphabet = "zyxwvutsrqponmlkjihgfedcba"
    assert sort_by_alphabet(alphabet, words) == sorted(words, reverse=True)


def test_sort_by_alphabet_prefix_first():
    alphabet = "zyxwvutsrqponmlkjihgfedcba"
    assert sort_by_alphabet(alphabet, ["ab", "a"]) == ["a", "ab"]


def test_insertion_sort_ignore_case():
    words = ["banana", "Apple", "cherry", "apricot", "Banana"]
    assert insertion_sort_ignore_case(words) == sorted(words, key=str.lower)


def test_insertion_sort_keeps_input():
    words = ["b", "A"]
    result = insertion_sort_ignore_case(words)
    assert result == ["A", "b"]
    assert words == ["b", "A"]