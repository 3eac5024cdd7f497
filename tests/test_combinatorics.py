import math
from collections import Counter

import pytest

from algokit.combinatorics import (
    combination_sum,
    combination_sum2,
    combine,
    letter_combinations,
    permute,
    permute_unique,
    subset_xor_sum,
    subsets,
    subsets_with_dup,
)


def test_letter_combinations_worked_example():
    assert letter_combinations("23") == [
        "ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf",
    ]


def test_letter_combinations_empty_input():
    assert letter_combinations("") == []


def test_letter_combinations_shape():
    result = letter_combinations("79")
    assert len(result) == len(set(result)) == len("pqrs") * len("wxyz")
    assert all(len(word) == 2 for word in result)
    assert all(word[0] in "pqrs" and word[1] in "wxyz" for word in result)
    assert result == sorted(result)


def test_letter_combinations_digit_without_letters():
    assert letter_combinations("21") == []


def test_subset_xor_sum_example():
    assert subset_xor_sum([1, 3]) == 6


@pytest.mark.parametrize("nums", [[5, 1, 6], [3, 4, 5, 6, 7, 8], [1], [2, 2, 2]])
def test_subset_xor_sum_matches_or_identity(nums):
    combined = 0
    for value in nums:
        combined |= value
    assert subset_xor_sum(nums) == combined * 2 ** (len(nums) - 1)


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    target = 8
    result = combination_sum(candidates, target)
    assert result
    assert all(sum(combo) == target for combo in result)
    assert all(combo == sorted(combo) for combo in result)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_zero_target_gives_empty_combo():
    assert combination_sum([2, 3], 0) == [[]]


def test_combination_sum2_invariants_and_no_mutation():
    candidates = [10, 1, 2, 7, 6, 1, 5]
    original = list(candidates)
    target = 8
    result = combination_sum2(candidates, target)
    assert candidates == original
    assert result
    available = Counter(candidates)
    for combo in result:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert not Counter(combo) - available
    assert len({tuple(c) for c in result}) == len(result)
    assert result == sorted(result)


def test_combination_sum2_no_solution():
    assert combination_sum2([3, 5], 4) == []


def test_permute_invariants():
    nums = [1, 2, 3, 4]
    result = permute(nums)
    assert len(result) == math.factorial(len(nums))
    assert len({tuple(p) for p in result}) == len(result)
    assert all(sorted(p) == nums for p in result)
    assert result[0] == nums
    assert result[-1] == nums[::-1]


def test_permute_unique_invariants():
    nums = [2, 1, 1]
    result = permute_unique(nums)
    assert len(result) == math.factorial(3) // math.factorial(2)
    assert len({tuple(p) for p in result}) == len(result)
    assert result == sorted(result)
    assert all(sorted(p) == sorted(nums) for p in result)


def test_permute_unique_all_distinct_matches_permute():
    nums = [1, 2, 3]
    assert permute_unique(nums) == permute(nums)


def test_combine_invariants():
    n, k = 5, 3
    result = combine(n, k)
    assert len(result) == math.comb(n, k)
    assert all(c == sorted(set(c)) and len(c) == k for c in result)
    assert all(1 <= v <= n for c in result for v in c)
    assert result == sorted(result)


def test_combine_edges():
    assert combine(3, 0) == [[]]
    assert combine(2, 3) == []
    assert combine(2, -1) == []


def test_subsets_invariants():
    nums = [1, 2, 3]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert result[0] == []
    assert result[-1] == nums
    assert len({tuple(s) for s in result}) == len(result)
    assert result[1] == nums[:1]


def test_subsets_with_dup_invariants():
    nums = [2, 1, 2]
    result = subsets_with_dup(nums)
    expected_count = math.prod(c + 1 for c in Counter(nums).values())
    assert len(result) == expected_count
    assert len({tuple(s) for s in result}) == len(result)
    assert all(s == sorted(s) for s in result)
    assert result[0] == []
    assert sorted(nums) in result