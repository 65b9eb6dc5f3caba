"""Counting and enumeration puzzles: permutations, subsets, primes, ugly numbers."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``nums``, ordered by the positions chosen first."""
    return [list(p) for p in itertools.permutations(nums)]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """All combinations of candidates, each usable repeatedly, that sum to ``target``."""
    pool = list(candidates)
    if any(c <= 0 for c in pool):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    path: list[int] = []

    def search(remaining: int, start: int) -> None:
        if remaining == 0:
            found.append(path.copy())
            return
        for index, value in enumerate(pool[start:], start):
            if value > remaining:
                continue
            path.append(value)
            search(remaining - value, index)
            path.pop()

    search(target, 0)
    return found


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """The power set of ``nums``; each element is first left out, then taken."""
    items = list(nums)

    def build(index: int, chosen: list[int]) -> Iterator[list[int]]:
        if index >= len(items):
            yield chosen
            return
        yield from build(index + 1, chosen)
        yield from build(index + 1, [*chosen, items[index]])

    return list(build(0, []))


def unique_paths(m: int, n: int) -> int:
    """Right/down paths from the top-left to the bottom-right of an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def count_primes(n: int) -> int:
    """Number of primes strictly less than ``n``."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def nth_ugly_number(n: int) -> int:
    """The ``n``-th positive number whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    primes = (2, 3, 5)
    ugly = [1]
    indices = [0, 0, 0]
    while len(ugly) < n:
        nexts = [ugly[i] * p for i, p in zip(indices, primes)]
        smallest = min(nexts)
        ugly.append(smallest)
        indices = [i + (value == smallest) for i, value in zip(indices, nexts)]
    return ugly[n - 1]


def min_keyboard_steps(n: int) -> int:
    """Fewest copy-all/paste operations to get ``n`` characters from one."""
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = 0
    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            steps += factor
            n //= factor
        factor += 1
    if n > 1:
        steps += n
    return steps