import pytest

from puzzlekit.combinatorics import (
    combination_sum,
    count_primes,
    min_keyboard_steps,
    nth_ugly_number,
    permutations,
    subsets,
    unique_paths,
)


def _is_prime(x):
    return x >= 2 and all(x % d for d in range(2, x))


def _only_235(x):
    for p in (2, 3, 5):
        while x % p == 0:
            x //= p
    return x == 1


def test_permutations_of_sorted_input_are_lexicographic():
    result = permutations([1, 2, 3, 4])
    assert result == sorted(result)
    assert len({tuple(p) for p in result}) == len(result) == 24


def test_permutations_each_is_rearrangement():
    nums = [3, 1, 2]
    for p in permutations(nums):
        assert sorted(p) == sorted(nums)


def test_permutations_first_is_input():
    nums = [5, 9, 2]
    result = permutations(nums)
    assert result[0] == nums
    assert result[-1] == nums[::-1]


def test_permutations_empty():
    assert permutations([]) == [[]]


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    target = 8
    result = combination_sum(candidates, target)
    assert result
    for combo in result:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert set(combo) <= set(candidates)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_unreachable():
    assert combination_sum([2], 1) == []


def test_combination_sum_zero_target():
    assert combination_sum([4, 5], 0) == [[]]


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_subsets_order():
    assert subsets([1, 2]) == [[], [2], [1], [1, 2]]


def test_subsets_power_set():
    nums = [4, 7, 9, 11]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert len({tuple(s) for s in result}) == len(result)
    for s in result:
        assert [x for x in nums if x in s] == s


def test_subsets_ends():
    nums = [1, 2, 3]
    result = subsets(nums)
    assert result[0] == []
    assert result[-1] == nums


def test_unique_paths_example():
    assert unique_paths(3, 7) == 28


def test_unique_paths_symmetry_and_recurrence():
    for m in range(2, 7):
        for n in range(2, 7):
            assert unique_paths(m, n) == unique_paths(n, m)
            assert unique_paths(m, n) == unique_paths(m - 1, n) + unique_paths(m, n - 1)


def test_unique_paths_single_row():
    assert unique_paths(1, 9) == unique_paths(9, 1) == unique_paths(1, 1)


def test_unique_paths_rejects_zero():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


def test_count_primes_increments():
    for n in range(2, 80):
        assert count_primes(n + 1) - count_primes(n) == int(_is_prime(n))


def test_count_primes_small():
    assert count_primes(0) == count_primes(1) == count_primes(2) == 0


def test_nth_ugly_number_first():
    assert nth_ugly_number(1) == 1


def test_nth_ugly_number_sequence():
    values = [nth_ugly_number(i) for i in range(1, 41)]
    assert values == sorted(set(values))
    assert all(_only_235(v) for v in values)
    assert sum(1 for x in range(1, values[-1] + 1) if _only_235(x)) == len(values)


def test_nth_ugly_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_ugly_number(0)


def test_min_keyboard_steps_one():
    assert min_keyboard_steps(1) == 0


@pytest.mark.parametrize("p", [2, 3, 5, 7, 13, 97])
def test_min_keyboard_steps_prime(p):
    assert min_keyboard_steps(p) == p


@pytest.mark.parametrize("a,b", [(2, 3), (4, 9), (6, 35), (12, 12), (7, 11)])
def test_min_keyboard_steps_additive(a, b):
    assert min_keyboard_steps(a * b) == min_keyboard_steps(a) + min_keyboard_steps(b)


def test_min_keyboard_steps_rejects_zero():
    with pytest.raises(ValueError):
        min_keyboard_steps(0)