"""Enumeration problems solved by backtracking: combinations, keypad words, partitions."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations, product

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_DIGITS = "0123456789"


def combine(n: int, k: int) -> list[list[int]]:
    """All k-element combinations of 1..n in lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, n + 1), k)]


def combination_sum3(target: int, k: int) -> list[list[int]]:
    """All k distinct digits from 1..9 whose sum equals ``target``."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == target]


def letter_combinations(digits: str) -> list[str]:
    """Every word a phone keypad can spell for ``digits``.

    Digits 0 and 1 carry no letters, so any string holding them yields nothing.
    """
    if not digits:
        return []
    groups = []
    for digit in digits:
        if digit not in _DIGITS:
            raise ValueError(f"not a keypad digit: {digit!r}")
        groups.append(_KEYPAD[int(digit)])
    return ["".join(letters) for letters in product(*groups)]


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Combinations of ``candidates`` (each usable any number of times) summing to ``target``."""
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive integers")
    result: list[list[int]] = []
    path: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining < 0:
            return
        if remaining == 0:
            result.append(path.copy())
            return
        for index, value in enumerate(pool[start:], start):
            path.append(value)
            search(index, remaining - value)
            path.pop()

    search(0, target)
    return result


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Combinations summing to ``target`` using each candidate at most once, without duplicates."""
    pool = sorted(candidates)
    result: list[list[int]] = []
    path: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining < 0:
            return
        if remaining == 0:
            result.append(path.copy())
            return
        for index, value in enumerate(pool[start:], start):
            if index > start and value == pool[index - 1]:
                continue
            path.append(value)
            search(index + 1, remaining - value)
            path.pop()

    search(0, target)
    return result


def partition_palindromes(text: str) -> list[list[str]]:
    """Every way to split ``text`` into palindromic pieces."""
    result: list[list[str]] = []
    path: list[str] = []

    def search(start: int) -> None:
        if start >= len(text):
            result.append(path.copy())
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if piece != piece[::-1]:
                continue
            path.append(piece)
            search(end)
            path.pop()

    search(0)
    return result