"""String algorithms: palindromes, subsequences, anagrams, times and orderings."""

from __future__ import annotations

import bisect
import re
from collections import Counter
from typing import Iterable

_TIME_12H = re.compile(r"(\d{2}):(\d{2}):(\d{2})([AP])M")


def break_palindrome(text: str) -> str:
    """Change one character of a palindrome so it is no longer one.

    The first character in the first half that is not "a" becomes "a";
    if there is none, the last character becomes "b". A single character
    cannot be broken and gives the empty string.
    """
    if not text:
        raise ValueError("cannot break an empty palindrome")
    if len(text) == 1:
        return ""
    for position, char in enumerate(text[: len(text) // 2]):
        if char != "a":
            return text[:position] + "a" + text[position + 1 :]
    return text[:-1] + "b"


def longest_palindrome(text: str) -> str:
    """Longest palindromic substring; the earliest one wins a tie."""
    best = text[:1]
    size = len(text)
    for centre in range(size):
        for low, high in ((centre, centre + 1), (centre - 1, centre + 1)):
            while low >= 0 and high < size and text[low] == text[high]:
                low -= 1
                high += 1
            if high - low - 1 > len(best):
                best = text[low + 1 : high]
    return best


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest subsequence common to both strings."""
    short, long = (first, second) if len(first) <= len(second) else (second, first)
    previous = [0] * (len(short) + 1)
    for char in long:
        current = [0]
        for j, other in enumerate(short):
            if char == other:
                current.append(previous[j] + 1)
            else:
                current.append(max(current[j], previous[j + 1]))
        previous = current
    return previous[-1]


def count_anagram_occurrences(pattern: str, text: str) -> int:
    """Number of windows of text that are anagrams of pattern."""
    width = len(pattern)
    if width > len(text):
        return 0
    target = Counter(pattern)
    window = Counter(text[:width])
    count = int(window == target)
    for end in range(width, len(text)):
        window[text[end]] += 1
        leaving = text[end - width]
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        count += window == target
    return count


def to_24_hour(time: str) -> str:
    """Convert "hh:mm:ssAM" or "hh:mm:ssPM" to 24-hour "hh:mm:ss"."""
    match = _TIME_12H.fullmatch(time)
    if match is None:
        raise ValueError(f"not a 12-hour time: {time!r}")
    hour = int(match.group(1))
    if not 1 <= hour <= 12:
        raise ValueError(f"hour out of range: {hour}")
    rest = time[2:8]
    if match.group(4) == "A":
        return "00" + rest if hour == 12 else time[:8]
    return time[:8] if hour == 12 else f"{hour + 12}{rest}"


def sort_by_alphabet(alphabet: str, words: Iterable[str]) -> list[str]:
    """Sort words lexicographically under the letter order given by alphabet.

    A letter listed twice takes its last position; letters not listed rank
    with the first letter. A word sorts before any longer word it begins.
    """
    rank = {char: position for position, char in enumerate(alphabet)}
    return sorted(words, key=lambda word: [rank.get(char, 0) for char in word])


def insertion_sort_ignore_case(words: Iterable[str]) -> list[str]:
    """Insertion sort of words, comparing them without regard to case."""
    result: list[str] = []
    for word in words:
        bisect.insort_right(result, word, key=str.lower)
    return result