"""Backtracking searches: partitions, word breaks, queens and grid words."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic pieces."""

    def walk(start: int, parts: list[str]) -> Iterator[list[str]]:
        if start == len(s):
            yield list(parts)
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                parts.append(piece)
                yield from walk(end, parts)
                parts.pop()

    return list(walk(0, []))


def word_break(s: str, word_dict: Iterable[str]) -> list[str]:
    """Return every sentence, words joined by spaces, that spells ``s`` from ``word_dict``."""
    words = set(word_dict)

    def walk(start: int, chosen: list[str]) -> Iterator[str]:
        if start == len(s):
            yield " ".join(chosen)
            return
        for end in range(start + 1, len(s) + 1):
            word = s[start:end]
            if word in words:
                chosen.append(word)
                yield from walk(end, chosen)
                chosen.pop()

    return list(walk(0, []))


def makesquare(matchsticks: Sequence[int]) -> bool:
    """Tell whether all ``matchsticks`` together form the four sides of a square."""
    sides_count = 4
    if not matchsticks:
        return False
    perimeter = sum(matchsticks)
    length, rest = divmod(perimeter, sides_count)
    if rest:
        return False
    sticks = sorted(matchsticks, reverse=True)
    if sticks[0] > length:
        return False
    sides = [0] * sides_count

    def place(i: int) -> bool:
        if i == len(sticks):
            return True
        stick = sticks[i]
        for j in range(sides_count):
            if sides[j] + stick > length:
                continue
            sides[j] += stick
            if place(i + 1):
                return True
            sides[j] -= stick
            if sides[j] == 0:
                break
        return False

    return place(0)


def _queen_placements(n: int) -> Iterator[list[int]]:
    """Yield, for each solution, the queen's column in every row."""
    columns: list[int] = []

    def walk(row: int, cols: int, pos_diag: int, neg_diag: int) -> Iterator[list[int]]:
        if row == n:
            yield list(columns)
            return
        for c in range(n):
            c_bit = 1 << c
            p_bit = 1 << (row + c)
            n_bit = 1 << (row - c + n - 1)
            if c_bit & cols or p_bit & pos_diag or n_bit & neg_diag:
                continue
            columns.append(c)
            yield from walk(row + 1, cols | c_bit, pos_diag | p_bit, neg_diag | n_bit)
            columns.pop()

    return walk(0, 0, 0, 0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every board of ``n`` non-attacking queens, rows drawn with 'Q' and '.'."""
    return [
        ["." * c + "Q" + "." * (n - c - 1) for c in placement]
        for placement in _queen_placements(n)
    ]


def total_n_queens(n: int) -> int:
    """Return how many ways ``n`` queens can be placed without attacking each other."""
    return sum(1 for _ in _queen_placements(n))


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Tell whether ``nums`` splits into ``k`` groups of equal sum."""
    if k <= 0:
        raise ValueError("k must be positive")
    total = sum(nums)
    part, rest = divmod(total, k)
    if rest:
        return False
    ordered = sorted(nums, reverse=True)
    if ordered and ordered[0] > part:
        return False
    memo: dict[int, bool] = {}

    def fill(groups: int, current: int, mask: int) -> bool:
        if groups == 1:
            return True
        if mask in memo:
            return memo[mask]
        if current == part:
            return fill(groups - 1, 0, mask)
        for i, value in enumerate(ordered):
            if not mask & (1 << i) or current + value > part:
                continue
            if fill(groups, current + value, mask ^ (1 << i)):
                memo[mask] = True
                return True
            if current == 0:
                memo[mask] = False
                return False
        memo[mask] = False
        return False

    return fill(k, 0, (1 << len(ordered)) - 1)


_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def word_search(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells of ``board``, each used once."""
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(r: int, c: int, i: int) -> bool:
        if board[r][c] != word[i]:
            return False
        if i == len(word) - 1:
            return True
        visited.add((r, c))
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in visited:
                if trace(nr, nc, i + 1):
                    return True
        visited.discard((r, c))
        return False

    return any(trace(r, c, 0) for r in range(rows) for c in range(cols))