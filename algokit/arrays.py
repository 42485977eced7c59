"""Array algorithms: subarray sums, subsequences, sorting and searching."""

from __future__ import annotations

import itertools
from bisect import bisect_left
from itertools import accumulate
from typing import Iterable, NamedTuple, Optional, Sequence


class SubarraySum(NamedTuple):
    """The largest contiguous sum and the inclusive bounds of its run."""

    total: int
    start: int
    end: int


def max_subarray_kadane(values: Iterable[int]) -> SubarraySum:
    """Largest sum of a non-empty contiguous run, with its first and last index."""
    values = list(values)
    if not values:
        raise ValueError("no values given")
    best: Optional[int] = None
    running = 0
    begin = start = end = 0
    for position, value in enumerate(values):
        running += value
        if best is None or running > best:
            best, start, end = running, begin, position
        if running < 0:
            running = 0
            begin = position + 1
    return SubarraySum(best, start, end)


def _crossing_sum(values: Sequence[int], low: int, mid: int, high: int) -> int:
    left = max(accumulate(reversed(values[low : mid + 1])))
    right = max(accumulate(values[mid + 1 : high + 1]))
    return left + right


def max_subarray_divide_conquer(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run, found by halving the range."""
    values = list(values)
    if not values:
        raise ValueError("no values given")

    def best(low: int, high: int) -> int:
        if low == high:
            return values[low]
        mid = (low + high) // 2
        return max(
            best(low, mid),
            best(mid + 1, high),
            _crossing_sum(values, low, mid, high),
        )

    return best(0, len(values) - 1)


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    values = list(values)
    lengths: list[int] = []
    for value in values:
        lengths.append(
            1
            + max(
                (length for prior, length in zip(values, lengths) if prior < value),
                default=0,
            )
        )
    return max(lengths, default=0)


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable sort returning a new list."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    left, right = merge_sort(items[:middle]), merge_sort(items[middle:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def find_pair_with_sum(values: Iterable[int], target: int) -> Optional[tuple[int, int]]:
    """First pair of elements, in index order, adding up to target, or None."""
    return next(
        ((a, b) for a, b in itertools.combinations(values, 2) if a + b == target),
        None,
    )


def bitonic_peak(values: Sequence[int]) -> int:
    """Index of the maximum of a strictly increasing-then-decreasing sequence."""
    if not values:
        raise ValueError("no values given")
    low, high = 0, len(values) - 1
    last = len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        here = values[mid]
        left = values[mid - 1] if mid > 0 else None
        right = values[mid + 1] if mid < last else None
        rises = left is None or here > left
        falls = right is None or here > right
        if rises and falls:
            return mid
        if rises and right > here:
            low = mid + 1
        elif falls and left > here:
            high = mid - 1
        else:
            break
    raise ValueError("values are not strictly bitonic")


def search_bitonic(values: Sequence[int], key: int) -> Optional[int]:
    """Index of key in a bitonic sequence, or None if it is absent."""
    peak = bitonic_peak(values)
    if values[peak] == key:
        return peak
    if values[peak] < key:
        return None
    position = bisect_left(values, key, 0, peak + 1)
    if position <= peak and values[position] == key:
        return position
    position = bisect_left(values, -key, peak, len(values), key=lambda x: -x)
    if position < len(values) and values[position] == key:
        return position
    return None


def smallest_missing(values: Iterable[int]) -> int:
    """Smallest non-negative integer that does not occur in values."""
    present = set(values)
    return next(n for n in itertools.count() if n not in present)


def long_sequence_count(values: Sequence[int], target: int) -> int:
    """Length of the shortest prefix of values repeated forever whose sum exceeds target."""
    total = sum(values)
    if total <= 0:
        raise ValueError("values must have a positive sum")
    full = target // total
    accumulated = full * total
    count = full * len(values)
    for value in values:
        if accumulated >= target:
            break
        accumulated += value
        count += 1
    if accumulated == target:
        count += 1
    return count


def add_matrices(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Element-wise sum of two matrices of the same shape."""
    try:
        return [
            [a + b for a, b in zip(row_a, row_b, strict=True)]
            for row_a, row_b in zip(first, second, strict=True)
        ]
    except ValueError:
        raise ValueError("matrices must have the same shape") from None