"""Dynamic programming over sequences and grids.

Covers stock profit, house robbing, common subarrays, increasing runs and
subsequences, common subsequences and the best path through a grid.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from buying on one day and selling on a later day; 0 if none."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def _checked(nums: Iterable[int]) -> list[int]:
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("amounts must not be negative")
    return values


def rob(nums: Iterable[int]) -> int:
    """Largest sum of non-adjacent amounts in a row of houses."""
    taken, skipped = 0, 0
    for amount in _checked(nums):
        taken, skipped = skipped + amount, max(taken, skipped)
    return max(taken, skipped)


def rob_circular(nums: Iterable[int]) -> int:
    """Largest sum of non-adjacent amounts when the first and last houses touch."""
    values = _checked(nums)
    if len(values) <= 1:
        return rob(values)
    return max(rob(values[:-1]), rob(values[1:]))


def find_length(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Length of the longest subarray that appears in both sequences."""
    best = 0
    previous = [0] * (len(nums2) + 1)
    for left in nums1:
        current = [0]
        for j, right in enumerate(nums2, 1):
            current.append(previous[j - 1] + 1 if left == right else 0)
        best = max(best, max(current))
        previous = current
    return best


def find_length_of_lcis(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing run of consecutive elements."""
    best = 0
    run = 0
    previous: int | None = None
    for value in nums:
        run = run + 1 if previous is not None and value > previous else 1
        best = max(best, run)
        previous = value
    return best


def length_of_lis(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence shared by both strings."""
    previous = [0] * (len(text2) + 1)
    for left in text1:
        current = [0]
        for j, right in enumerate(text2, 1):
            if left == right:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def jewellery_value(frame: Sequence[Sequence[int]]) -> int:
    """Largest total collected walking from the top-left to the bottom-right cell.

    Each move goes one cell right or one cell down.
    """
    if not frame or not frame[0]:
        raise ValueError("frame must have at least one cell")
    width = len(frame[0])
    if any(len(row) != width for row in frame):
        raise ValueError("frame rows must all have the same length")
    best: list[int] = []
    for i, row in enumerate(frame):
        current: list[int] = []
        for j, cell in enumerate(row):
            candidates = []
            if i > 0:
                candidates.append(best[j])
            if j > 0:
                candidates.append(current[j - 1])
            current.append(cell + (max(candidates) if candidates else 0))
        best = current
    return best[-1]