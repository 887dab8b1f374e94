"""Exhaustive-search problems: subsets, placements, permutations and paths."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from math import factorial
from string import ascii_lowercase

_BOARD_SIZE = 8
_BLOCKED = "*"

_GRID_SIZE = 7
_GRID_STEPS = _GRID_SIZE * _GRID_SIZE - 1
_GRID_TARGET = (_GRID_SIZE - 1, 0)
_GRID_MOVES = {"D": (1, 0), "U": (-1, 0), "R": (0, 1), "L": (0, -1)}
_GRID_WILDCARD = "?"


def apple_division(weights: Iterable[int]) -> int:
    """Smallest possible difference between the weights of two groups of apples."""
    values = list(weights)
    total = sum(values)
    subset_sums = [0]
    for weight in values:
        subset_sums += [partial + weight for partial in subset_sums]
    return min(abs(abs(total - partial) - partial) for partial in subset_sums)


def count_queen_placements(board: Sequence[str]) -> int:
    """Count ways to place eight non-attacking queens, avoiding '*' cells."""
    rows = list(board)
    if len(rows) != _BOARD_SIZE or any(len(row) != _BOARD_SIZE for row in rows):
        raise ValueError(f"board must be {_BOARD_SIZE} rows of {_BOARD_SIZE} cells")

    def place(row: int, columns: frozenset, diagonals: frozenset, anti: frozenset) -> int:
        if row == _BOARD_SIZE:
            return 1
        ways = 0
        for col, cell in enumerate(rows[row]):
            if (
                cell == _BLOCKED
                or col in columns
                or row - col in diagonals
                or row + col in anti
            ):
                continue
            ways += place(
                row + 1,
                columns | {col},
                diagonals | {row - col},
                anti | {row + col},
            )
        return ways

    return place(0, frozenset(), frozenset(), frozenset())


def _letter_counts(s: str) -> Counter:
    if not s:
        raise ValueError("string must not be empty")
    if any(ch not in ascii_lowercase for ch in s):
        raise ValueError("only the letters a-z are allowed")
    return Counter(s)


def count_distinct_strings(s: str) -> int:
    """Number of distinct strings that can be made from the letters of ``s``."""
    counts = _letter_counts(s)
    result = factorial(len(s))
    for count in counts.values():
        result //= factorial(count)
    return result


def distinct_strings(s: str) -> Iterator[str]:
    """Yield every distinct rearrangement of ``s`` in alphabetical order."""
    counts = _letter_counts(s)
    letters = sorted(counts)
    length = len(s)
    built: list[str] = []

    def extend() -> Iterator[str]:
        if len(built) == length:
            yield "".join(built)
            return
        for letter in letters:
            if counts[letter]:
                counts[letter] -= 1
                built.append(letter)
                yield from extend()
                built.pop()
                counts[letter] += 1

    return extend()


def count_grid_paths(path: str) -> int:
    """Count 48-move paths through a 7x7 grid from the top-left to the bottom-left corner.

    Each character of ``path`` fixes a move (D, U, R, L) or leaves it free (?).
    """
    if len(path) != _GRID_STEPS:
        raise ValueError(f"path must have exactly {_GRID_STEPS} characters")
    allowed = set(_GRID_MOVES) | {_GRID_WILDCARD}
    if any(ch not in allowed for ch in path):
        raise ValueError("path may only contain D, U, R, L and ?")

    visited = [[False] * _GRID_SIZE for _ in range(_GRID_SIZE)]
    last = _GRID_SIZE - 1

    def free(x: int, y: int) -> bool:
        return 0 <= x < _GRID_SIZE and 0 <= y < _GRID_SIZE and not visited[x][y]

    def walk(x: int, y: int, step: int) -> int:
        if step >= _GRID_STEPS:
            return 1 if (x, y) == _GRID_TARGET else 0
        if (x, y) == _GRID_TARGET:
            return 0
        # The walk would split the unvisited cells into two unreachable parts.
        if y in (0, last) and 0 < x < last and free(x + 1, y) and free(x - 1, y):
            return 0
        if x in (0, last) and 0 < y < last and free(x, y + 1) and free(x, y - 1):
            return 0
        if 0 < x < last and 0 < y < last:
            vertical = free(x + 1, y), free(x - 1, y)
            horizontal = free(x, y + 1), free(x, y - 1)
            if (not any(vertical) and all(horizontal)) or (
                all(vertical) and not any(horizontal)
            ):
                return 0

        visited[x][y] = True
        wanted = path[step]
        total = 0
        for direction, (dx, dy) in _GRID_MOVES.items():
            if wanted in (_GRID_WILDCARD, direction) and free(x + dx, y + dy):
                total += walk(x + dx, y + dy, step + 1)
        visited[x][y] = False
        return total

    return walk(0, 0, 0)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Moves (from peg, to peg) that carry ``n`` disks from peg 1 to peg 3."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    moves: list[tuple[int, int]] = []

    def transfer(disks: int, source: int, target: int, spare: int) -> None:
        if disks == 1:
            moves.append((source, target))
            return
        transfer(disks - 1, source, spare, target)
        moves.append((source, target))
        transfer(disks - 1, spare, target, source)

    transfer(n, 1, 3, 2)
    return moves