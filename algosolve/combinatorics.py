"""Combinations, subsets and Pascal's triangle."""

from __future__ import annotations

from itertools import combinations, compress


def combine(n: int, k: int) -> list[list[int]]:
    """List every ``k``-element combination of ``1..n`` in lexicographic order."""
    return [list(combo) for combo in combinations(range(1, n + 1), k)]


def subsets(nums: list[int]) -> list[list[int]]:
    """List every subset of ``nums``, ordered by the bit mask that selects it."""
    size = len(nums)
    return [
        list(compress(nums, ((mask >> bit) & 1 for bit in range(size))))
        for mask in range(1 << size)
    ]


def _next_row(row: list[int]) -> list[int]:
    return [1] + [a + b for a, b in zip(row, row[1:])] + [1]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    row = [1]
    for _ in range(num_rows):
        rows.append(row)
        row = _next_row(row)
    return rows


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` of Pascal's triangle, counting from 0."""
    if row_index < 0:
        raise ValueError("row index must be non-negative")
    row = [1]
    for _ in range(row_index):
        row = _next_row(row)
    return row