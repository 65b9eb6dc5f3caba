"""String puzzles: sliding windows, letter counting, parsing and palindromes."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from fractions import Fraction

_FRACTION_EXPRESSION = re.compile(r"(?:[+-]?\d+/\d+(?:[+-]\d+/\d+)*)?")
_FRACTION_TERM = re.compile(r"([+-]?)(\d+)/(\d+)")
_POSITIVE_DECIMAL = re.compile(r"[0-9]+")
_LOWERCASE = re.compile(r"[a-z]*")


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, ch in enumerate(s):
        if ch in last_seen:
            # The previous occurrence may already lie left of the window.
            left = max(left, last_seen[ch] + 1)
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def bulls_and_cows(secret: str, guess: str) -> str:
    """Return the hint ``"<bulls>A<cows>B"`` for a guess against a secret."""
    if len(secret) != len(guess):
        raise ValueError("secret and guess must have the same length")
    bulls = 0
    secret_rest: Counter[str] = Counter()
    guess_rest: Counter[str] = Counter()
    for s, g in zip(secret, guess):
        if s == g:
            bulls += 1
        else:
            secret_rest[s] += 1
            guess_rest[g] += 1
    cows = sum((secret_rest & guess_rest).values())
    return f"{bulls}A{cows}B"


def word_subsets(words1: Iterable[str], words2: Iterable[str]) -> list[str]:
    """Words of ``words1`` that contain every word of ``words2`` as a multiset."""
    required: Counter[str] = Counter()
    for word in words2:
        required |= Counter(word)
    return [word for word in words1 if not required - Counter(word)]


def reverse_parentheses(s: str) -> str:
    """Reverse the text inside each pair of parentheses, innermost first."""
    starts: list[int] = []
    out: list[str] = []
    for ch in s:
        if ch == "(":
            starts.append(len(out))
        elif ch == ")":
            if not starts:
                raise ValueError("unmatched closing parenthesis")
            start = starts.pop()
            out[start:] = out[start:][::-1]
        else:
            out.append(ch)
    return "".join(out)


def _mirror(prefix: int, even: bool) -> int:
    head = str(prefix)
    tail = head if even else head[:-1]
    return int(head + tail[::-1])


def nearest_palindrome(n: str) -> str:
    """Closest palindrome to the decimal ``n``, other than ``n``; ties go to the smaller."""
    if not _POSITIVE_DECIMAL.fullmatch(n) or int(n) < 1:
        raise ValueError(f"not a positive decimal integer: {n!r}")
    if n == "1":
        return "0"
    num = int(n)
    length = len(n)
    even = length % 2 == 0
    prefix = int(n[: (length + 1) // 2])
    candidates = {
        10 ** (length - 1) - 1,
        10**length + 1,
        _mirror(prefix - 1, even),
        _mirror(prefix, even),
        _mirror(prefix + 1, even),
    }
    candidates.discard(num)
    return str(min(candidates, key=lambda c: (abs(c - num), c)))


def fraction_addition(expression: str) -> str:
    """Evaluate a sum of signed fractions and return it reduced as ``"p/q"``."""
    if not _FRACTION_EXPRESSION.fullmatch(expression):
        raise ValueError(f"malformed fraction expression: {expression!r}")
    total = sum(
        (
            Fraction(-int(num) if sign == "-" else int(num), int(den))
            for sign, num, den in _FRACTION_TERM.findall(expression)
        ),
        Fraction(0),
    )
    return f"{total.numerator}/{total.denominator}"


def digit_sum_after_convert(s: str, k: int) -> int:
    """Map letters to 1..26, concatenate, then take the digit sum ``k`` times."""
    if not _LOWERCASE.fullmatch(s):
        raise ValueError("only lowercase ASCII letters are allowed")
    digits = "".join(str(ord(ch) - ord("a") + 1) for ch in s)
    total = 0
    for _ in range(k):
        total = sum(map(int, digits))
        digits = str(total)
    return total


def reverse_string(chars: list[str]) -> None:
    """Reverse the list of characters in place."""
    chars.reverse()


def crawler_min_operations(logs: Sequence[str]) -> int:
    """Number of ``../`` steps needed to get back to the main folder."""
    depth = 0
    for op in logs:
        if op == "../":
            depth = max(depth - 1, 0)
        elif op == "./":
            continue
        else:
            depth += 1
    return depth


def main(argv: Sequence[str] | None = None) -> int:
    """Print the longest unique-character substring length of a word."""
    parser = argparse.ArgumentParser(
        prog="puzzlekit",
        description="Length of the longest substring without repeating characters.",
    )
    parser.add_argument("text", nargs="?", help="word to inspect (read from stdin if omitted)")
    args = parser.parse_args(argv)
    text = args.text
    if text is None:
        tokens = sys.stdin.read().split()
        text = tokens[0] if tokens else ""
    print(longest_unique_substring(text))
    return 0