"""Counting and closed-form answers to introductory problems."""

from __future__ import annotations

from collections import deque

MOD = 1_000_000_007

_SMALL_KNIGHT_ANSWERS = (0, 6, 28)


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def dice_combinations(n: int) -> int:
    """Count ordered sequences of die throws (1..6) summing to ``n``, modulo MOD."""
    _require_non_negative("n", n)
    window: deque[int] = deque([1], maxlen=6)
    for _ in range(n):
        window.append(sum(window) % MOD)
    return window[-1]


def bit_strings(n: int) -> int:
    """Count bit strings of length ``n``, modulo MOD."""
    _require_non_negative("n", n)
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Count the trailing zeros of ``n!``."""
    _require_non_negative("n", n)
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def _non_attacking_knight_pairs(size: int) -> int:
    if size <= len(_SMALL_KNIGHT_ANSWERS):
        return _SMALL_KNIGHT_ANSWERS[size - 1]
    cells = size * size
    ordered = cells * (cells - 1)
    # Subtract ordered attacking placements, grouped by how many moves a cell has.
    ordered -= max((size - 4) * (size - 4) * 8, 0)
    ordered -= max((size - 4) * 4 * 6, 0)
    ordered -= max((size - 3) * 4 * 4, 0)
    ordered -= 8 * 3
    ordered -= 8
    return ordered // 2


def two_knights(n: int) -> list[int]:
    """For every board size 1..n, count placements of two non-attacking knights."""
    _require_non_negative("n", n)
    return [_non_attacking_knight_pairs(size) for size in range(1, n + 1)]


def _spiral_value(row: int, col: int) -> int:
    layer = max(row, col)
    base = layer * layer + 1
    if row == col:
        return base + layer
    if row > col:
        return base + col
    return base + 2 * layer - row


def number_spiral(row: int, col: int) -> int:
    """Return the number at (row, col), both 1-based, of the number spiral."""
    if row < 1 or col < 1:
        raise ValueError("row and col must be at least 1")
    layer = max(row - 1, col - 1) - 1
    if layer % 2 == 1:
        return _spiral_value(row - 1, col - 1)
    return _spiral_value(col - 1, row - 1)


def _smallest_with_digits(digits: int) -> int:
    return 10 ** (digits - 1) if digits > 0 else 0


def _largest_with_digits(digits: int) -> int:
    return 10**digits - 1


def digit_query(k: int) -> int:
    """Answer a digit query for position ``k`` using digit-block arithmetic."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    width = 1
    bound = 10
    previous = 0
    while k > bound:
        width += 1
        previous = bound
        bound += (_largest_with_digits(width) - _smallest_with_digits(width)) * width
    k -= previous
    if width == 1:
        return k
    divisor = width * _smallest_with_digits(width - k % width)
    if k % width == 0:
        return k // divisor + 1
    return k // divisor


def coin_piles(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by taking 2+1 or 1+2 coins per move."""
    if a % 2 == 1:
        a -= 1
        b -= 2
    if a == 0 and b == 0:
        return True
    if b > 2 * a or b < a // 2 or a <= 0 or b <= 0:
        return False
    return (b - a // 2) % 3 == 0