"""Enumeration of combinations, permutations and subsets."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import combinations, permutations, product
from operator import xor
from typing import Iterator, Sequence

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad can spell for ``digits``.

    Digits without letters produce no combinations at all.
    """
    if not digits:
        return []
    groups = [_PHONE_LETTERS.get(d, "") for d in digits]
    return ["".join(letters) for letters in product(*groups)]


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Return the sum of the XOR totals of every subset of ``nums``."""
    return sum(
        reduce(xor, subset, 0)
        for size in range(len(nums) + 1)
        for subset in combinations(nums, size)
    )


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the combinations of ``candidates`` (reusable) that sum to ``target``."""

    def walk(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        for j in range(start, len(candidates)):
            value = candidates[j]
            if remaining - value >= 0:
                chosen.append(value)
                yield from walk(j, remaining - value, chosen)
                chosen.pop()

    return list(walk(0, target, []))


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct combinations of ``candidates``, each used once, summing to ``target``."""
    ordered = sorted(candidates)

    def walk(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        for j in range(start, len(ordered)):
            value = ordered[j]
            if j > start and value == ordered[j - 1]:
                continue
            if remaining - value >= 0:
                chosen.append(value)
                yield from walk(j + 1, remaining - value, chosen)
                chosen.pop()

    return list(walk(0, target, []))


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return all orderings of ``nums`` by position."""
    return [list(p) for p in permutations(nums)]


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct orderings of ``nums`` in ascending lexicographic order."""
    counts = Counter(nums)
    values = sorted(counts)
    size = len(nums)

    def walk(chosen: list[int]) -> Iterator[list[int]]:
        if len(chosen) == size:
            yield list(chosen)
            return
        for value in values:
            if counts[value]:
                counts[value] -= 1
                chosen.append(value)
                yield from walk(chosen)
                chosen.pop()
                counts[value] += 1

    return list(walk([]))


def combine(n: int, k: int) -> list[list[int]]:
    """Return every choice of ``k`` numbers from 1..``n`` in ascending order."""
    if k < 0:
        return []
    return [list(c) for c in combinations(range(1, n + 1), k)]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets of ``nums``, ordered by their bitmask of positions."""
    n = len(nums)
    return [
        [value for bit, value in enumerate(nums) if mask & (1 << bit)]
        for mask in range(1 << n)
    ]


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct subsets of ``nums``, each in ascending order."""
    ordered = sorted(nums)

    def walk(start: int, chosen: list[int]) -> Iterator[list[int]]:
        yield list(chosen)
        for j in range(start, len(ordered)):
            if j > start and ordered[j] == ordered[j - 1]:
                continue
            chosen.append(ordered[j])
            yield from walk(j + 1, chosen)
            chosen.pop()

    return list(walk(0, []))