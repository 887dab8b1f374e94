"""Sequence construction and scanning problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby
from string import ascii_uppercase


class NoSolution(ValueError):
    """Raised when a problem instance has no valid answer."""

    def __init__(self, message: str = "NO SOLUTION") -> None:
        super().__init__(message)


def weird_algorithm(n: int) -> list[int]:
    """Return the sequence from ``n`` down to 1 under the halve / 3n+1 rule."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the one number of 1..n that is absent from ``numbers``."""
    values = list(numbers)
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(values)}")
    result = n
    for expected, seen in zip(range(1, n), values):
        result ^= expected ^ seen
    return result


def increasing_array(values: Iterable[int]) -> int:
    """Minimum total increments that make ``values`` non-decreasing."""
    moves = 0
    current = None
    for value in values:
        if current is None or value >= current:
            current = value
        else:
            moves += current - value
    return moves


def repetitions(s: str) -> int:
    """Length of the longest run of one repeated character (1 for an empty string)."""
    return max((sum(1 for _ in run) for _, run in groupby(s)), default=1)


def beautiful_permutation(n: int) -> list[int]:
    """A permutation of 1..n in which no neighbours differ by exactly 1."""
    if n == 1:
        return [1]
    if n < 4:
        raise NoSolution()
    if n == 4:
        return [2, 4, 1, 3]
    half = n // 2
    offset = half + 1 if n % 2 else half
    result: list[int] = []
    for i in range(1, half + 1):
        result.extend((i, i + offset))
    if n % 2:
        result.append(half + 1)
    return result


def palindrome_reorder(s: str) -> str:
    """Rearrange the capital letters of ``s`` into a palindrome."""
    if any(ch not in ascii_uppercase for ch in s):
        raise ValueError("only the letters A-Z are allowed")
    counts = Counter(s)
    odd = [letter for letter in ascii_uppercase if counts[letter] % 2]
    if len(odd) > 1:
        raise NoSolution()
    half = "".join(letter * (counts[letter] // 2) for letter in ascii_uppercase)
    middle = odd[-1] if odd else ""
    return half + middle + half[::-1]


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets with equal sums."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    total = n * (n + 1) // 2
    if total % 2:
        raise NoSolution("NO")
    remaining = total // 2
    split = n
    while split > 0 and remaining > split:
        remaining -= split
        split -= 1
    first = [remaining, *range(split + 1, n + 1)]
    second = [j for j in range(1, split + 1) if j != remaining]
    return first, second


def gray_code(n: int) -> list[str]:
    """The reflected Gray code of ``n`` bits, as bit strings."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]