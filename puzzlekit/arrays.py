"""Array puzzles: two pointers, prefix sums, binary search and simulation."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate, pairwise


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of a sorted sequence, in ascending order."""
    left, right = 0, len(nums) - 1
    descending: list[int] = []
    while left <= right:
        if abs(nums[left]) >= abs(nums[right]):
            descending.append(nums[left] * nums[left])
            left += 1
        else:
            descending.append(nums[right] * nums[right])
            right -= 1
    descending.reverse()
    return descending


def trap_rainwater(height: Sequence[int]) -> int:
    """Units of water held between the bars of an elevation map."""
    if not height:
        return 0
    suffix_max = list(accumulate(reversed(height), max))[::-1]
    prefix_max = accumulate(height, max)
    return sum(
        min(left, right) - h
        for h, left, right in zip(height, prefix_max, suffix_max)
        if h < left and h < right
    )


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so its first k items are unique; return k."""
    if not nums:
        return 0
    original = list(nums)
    unique = [original[0]]
    unique.extend(cur for prev, cur in pairwise(original) if cur != prev)
    nums[: len(unique)] = unique
    return len(unique)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one element of a sorted sequence of pairs that appears only once."""
    n = len(nums)
    lo, hi = 0, n - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        differs_left = mid == 0 or nums[mid] != nums[mid - 1]
        differs_right = mid == n - 1 or nums[mid] != nums[mid + 1]
        if differs_left and differs_right:
            return nums[mid]
        if (mid % 2 == 0 and not differs_left) or (mid % 2 == 1 and not differs_right):
            hi = mid - 1
        else:
            lo = mid + 1
    raise ValueError("no element appears exactly once")


def is_array_special(nums: Sequence[int]) -> bool:
    """True when every pair of neighbours has different parity."""
    return all((a - b) % 2 != 0 for a, b in pairwise(nums))


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """True when the sequence is a rotation of a non-decreasing sequence."""
    drops = sum(1 for a, b in pairwise(nums) if a > b)
    return drops == 0 or (drops == 1 and nums[0] >= nums[-1])


def next_permutation(nums: list[int]) -> None:
    """Rearrange to the next lexicographic permutation in place, wrapping around."""
    pivot = next((i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    swap = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run, by divide and conquer."""
    values = list(nums)
    if not values:
        raise ValueError("max_subarray() needs at least one number")

    def best(lo: int, hi: int) -> int:
        if lo == hi:
            return values[lo]
        mid = (lo + hi) // 2
        left_cross = max(accumulate(reversed(values[lo : mid + 1])))
        right_cross = max(accumulate(values[mid + 1 : hi + 1]))
        return max(best(lo, mid), best(mid + 1, hi), left_cross + right_cross)

    return best(0, len(values) - 1)


def max_card_score(card_points: Sequence[int], k: int) -> int:
    """Best total from taking ``k`` cards off either end of the row."""
    n = len(card_points)
    if not 0 <= k <= n:
        raise ValueError(f"k must be between 0 and {n}")
    current = best = sum(card_points[:k])
    for dropped, taken in zip(reversed(card_points[:k]), reversed(card_points[n - k :])):
        current += taken - dropped
        best = max(best, current)
    return best


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Index of the student who runs out of chalk first."""
    total = sum(chalk)
    if total <= 0:
        raise ValueError("total chalk use must be positive")
    remaining = k % total
    for index, need in enumerate(chalk):
        if remaining < need:
            return index
        remaining -= need
    raise ValueError("chalk counts must be non-negative")


def average_waiting_time(customers: Sequence[Sequence[int]]) -> float:
    """Mean wait of customers served in order by a single chef."""
    if not customers:
        raise ValueError("no customers")
    clock = 0
    total_wait = 0
    for arrival, duration in customers:
        clock = max(clock, arrival) + duration
        total_wait += clock - arrival
    return total_wait / len(customers)


def grid_game(grid: Sequence[Sequence[int]]) -> int:
    """Points left for the second robot when the first plays to minimise them."""
    if len(grid) != 2:
        raise ValueError("grid must have exactly two rows")
    top, bottom = grid
    if not top:
        raise ValueError("grid must have at least one column")

    def outcomes():
        top_rest = sum(top)
        bottom_sum = 0
        for t, b in zip(top, bottom):
            top_rest -= t
            yield max(top_rest, bottom_sum)
            bottom_sum += b

    return min(outcomes())


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """True when ``target`` appears in a matrix whose rows are sorted."""

    def in_row(row: Sequence[int]) -> bool:
        i = bisect_left(row, target)
        return i < len(row) and row[i] == target

    return any(in_row(row) for row in matrix)