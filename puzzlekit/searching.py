"""Binary search on the answer: eating speed and bouquet days."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Smallest bananas-per-hour speed that eats every pile within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    if h < len(piles):
        raise ValueError("h is smaller than the number of piles")
    speeds = range(1, max(piles) + 1)
    return speeds[bisect_left(speeds, True, key=lambda s: _hours_needed(piles, s) <= h)]


def _bouquets_by(bloom_day: Sequence[int], day: int, k: int) -> int:
    bouquets = 0
    run = 0
    for bloom in bloom_day:
        if bloom <= day:
            run += 1
        else:
            bouquets += run // k
            run = 0
    return bouquets + run // k


def min_bouquet_days(bloom_day: Sequence[int], m: int, k: int) -> int | None:
    """Fewest days until ``m`` bouquets of ``k`` adjacent flowers can be made.

    Returns ``None`` when there are too few flowers.
    """
    if m < 1 or k < 1:
        raise ValueError("m and k must be positive")
    if len(bloom_day) < m * k:
        return None
    days = range(min(bloom_day), max(bloom_day) + 1)
    return days[bisect_left(days, True, key=lambda d: _bouquets_by(bloom_day, d, k) >= m)]