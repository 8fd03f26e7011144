"""Grid puzzles: Sudoku checking, rotation, spiral walks, interval merging and sorted search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator

_EMPTY = "."
_SUDOKU_SIZE = 9
_BOX_SIZE = 3


def _no_repeats(cells: Iterable[str]) -> bool:
    seen: set[str] = set()
    for cell in cells:
        if cell == _EMPTY:
            continue
        if cell in seen:
            return False
        seen.add(cell)
    return True


def _boxes(board: list[list[str]]) -> Iterator[list[str]]:
    for top in range(0, _SUDOKU_SIZE, _BOX_SIZE):
        for left in range(0, _SUDOKU_SIZE, _BOX_SIZE):
            yield [
                cell
                for row in board[top : top + _BOX_SIZE]
                for cell in row[left : left + _BOX_SIZE]
            ]


def is_valid_sudoku(board: list[list[str]]) -> bool:
    """Tell whether no row, column or 3x3 box of a 9x9 board repeats a digit.

    Empty cells are written as '.'; the board need not be solvable.
    """
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("a Sudoku board must be 9 rows of 9 cells")
    rows_ok = all(_no_repeats(row) for row in board)
    columns_ok = all(_no_repeats(column) for column in zip(*board))
    return rows_ok and columns_ok and all(_no_repeats(box) for box in _boxes(board))


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("only a square matrix can be rotated in place")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def spiral_order(matrix: list[list[int]]) -> list[int]:
    """Return the entries of ``matrix`` walking clockwise inward from the top left."""
    if not matrix:
        return []
    result: list[int] = []
    row_min, row_max = 0, len(matrix) - 1
    col_min, col_max = 0, len(matrix[0]) - 1
    while row_min <= row_max and col_min <= col_max:
        if row_min == row_max:
            result.extend(matrix[row_min][col_min : col_max + 1])
        elif col_min == col_max:
            result.extend(matrix[row][col_min] for row in range(row_min, row_max + 1))
        else:
            result.extend(matrix[row_min][col_min : col_max + 1])
            result.extend(matrix[row][col_max] for row in range(row_min + 1, row_max + 1))
            result.extend(reversed(matrix[row_max][col_min:col_max]))
            result.extend(matrix[row][col_min] for row in range(row_max - 1, row_min, -1))
        row_min += 1
        row_max -= 1
        col_min += 1
        col_max -= 1
    return result


def merge_intervals(intervals: list[list[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals.

    The input list is sorted in place by start; the result holds new lists.
    """
    intervals.sort(key=lambda interval: interval[0])
    merged: list[list[int]] = []
    for start, end in intervals:
        if merged and end <= merged[-1][1]:
            continue
        if merged and start <= merged[-1][1]:
            merged[-1][1] = end
        else:
            merged.append([start, end])
    return merged


def search_matrix(matrix: list[list[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    firsts = [row[0] for row in matrix]
    row_index = bisect_right(firsts, target) - 1
    if row_index < 0:
        return False
    row = matrix[row_index]
    position = bisect_left(row, target)
    return position < len(row) and row[position] == target