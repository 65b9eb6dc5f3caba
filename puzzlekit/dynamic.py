"""Dynamic programming puzzles: subset sums, grid walks and take-away games."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def can_partition(nums: Sequence[int]) -> bool:
    """True when ``nums`` splits into two parts with equal sums."""
    values = list(nums)
    if any(v < 0 for v in values):
        raise ValueError("numbers must not be negative")
    total = sum(values)
    if total % 2:
        return False
    target = total // 2
    reachable = {0}
    for value in values:
        if target in reachable:
            return True
        reachable |= {s + value for s in reachable if s + value <= target}
    return target in reachable


def _pair_gain(row: Sequence[int], a: int, b: int) -> int:
    return row[a] if a == b else row[a] + row[b]


def cherry_pickup(grid: Sequence[Sequence[int]]) -> int:
    """Most cherries two robots collect walking down from the two top corners."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    def neighbours(col: int) -> range:
        return range(max(col - 1, 0), min(col + 2, width))

    last = rows[-1]
    best = [[_pair_gain(last, a, b) for b in range(width)] for a in range(width)]
    for row in reversed(rows[:-1]):
        best = [
            [
                _pair_gain(row, a, b)
                + max(best[x][y] for x in neighbours(a) for y in neighbours(b))
                for b in range(width)
            ]
            for a in range(width)
        ]
    return best[0][width - 1]


def stone_game_ii(piles: Sequence[int]) -> int:
    """Most stones the first player can secure in Stone Game II."""
    values = list(piles)
    n = len(values)
    if n == 0:
        return 0
    suffix = list(accumulate(reversed(values)))[::-1]
    best = [[0] * (n + 1) for _ in range(n)]
    for i in reversed(range(n)):
        for m in range(1, n + 1):
            if i + 2 * m >= n:
                best[i][m] = suffix[i]
            else:
                best[i][m] = max(
                    0,
                    max(suffix[i] - best[i + x][max(m, x)] for x in range(1, 2 * m + 1)),
                )
    return best[0][1]


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Best score picking one cell per row, paying the column distance between rows."""
    rows = [list(row) for row in points]
    if not rows or not rows[0]:
        raise ValueError("points must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("rows must all have the same length")
    scores = rows[0]
    for row in rows[1:]:
        left = list(accumulate((v + i for i, v in enumerate(scores)), max))
        right = list(accumulate((scores[i] - i for i in reversed(range(width))), max))[::-1]
        scores = [
            max(l - i, r + i) + p
            for i, (l, r, p) in enumerate(zip(left, right, row))
        ]
    return max(scores)