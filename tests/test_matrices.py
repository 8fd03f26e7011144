import copy

import pytest

from algosolve.matrices import (
    is_valid_sudoku,
    merge_intervals,
    rotate,
    search_matrix,
    spiral_order,
)

VALID_BOARD = [
    ["5", "3", ".", ".", "7", ".", ".", ".", "."],
    ["6", ".", ".", "1", "9", "5", ".", ".", "."],
    [".", "9", "8", ".", ".", ".", ".", "6", "."],
    ["8", ".", ".", ".", "6", ".", ".", ".", "3"],
    ["4", ".", ".", "8", ".", "3", ".", ".", "1"],
    ["7", ".", ".", ".", "2", ".", ".", ".", "6"],
    [".", "6", ".", ".", ".", ".", "2", "8", "."],
    [".", ".", ".", "4", "1", "9", ".", ".", "5"],
    [".", ".", ".", ".", "8", ".", ".", "7", "9"],
]


def test_valid_sudoku_example():
    assert is_valid_sudoku(VALID_BOARD) is True


def test_invalid_sudoku_example():
    board = copy.deepcopy(VALID_BOARD)
    board[0][0] = "8"
    assert is_valid_sudoku(board) is False


def test_empty_board_is_valid():
    assert is_valid_sudoku([["."] * 9 for _ in range(9)]) is True


def test_duplicate_in_box_only_is_invalid():
    board = [["."] * 9 for _ in range(9)]
    board[0][0] = "1"
    board[1][1] = "1"
    assert is_valid_sudoku(board) is False


def test_sudoku_wrong_shape_raises():
    with pytest.raises(ValueError):
        is_valid_sudoku([["."] * 9 for _ in range(8)])


def test_rotate_three_by_three():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotate(matrix)
    assert matrix == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_four_by_four():
    matrix = [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]
    rotate(matrix)
    assert matrix == [[15, 13, 2, 5], [14, 3, 4, 1], [12, 6, 8, 9], [16, 7, 10, 11]]


def test_rotate_four_times_is_identity():
    original = [[r * 5 + c for c in range(5)] for r in range(5)]
    matrix = copy.deepcopy(original)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_rotate_keeps_row_objects():
    matrix = [[1, 2], [3, 4]]
    first_row = matrix[0]
    rotate(matrix)
    assert matrix[0] is first_row
    assert first_row == [3, 1]


def test_rotate_non_square_raises():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])


def test_spiral_examples():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]
    assert spiral_order([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]) == [
        1, 2, 3, 4, 8, 12, 11, 10, 9, 5, 6, 7,
    ]


def test_spiral_empty():
    assert spiral_order([]) == []


@pytest.mark.parametrize("rows,cols", [(1, 4), (4, 1), (3, 5), (5, 3), (6, 6)])
def test_spiral_visits_each_entry_once(rows, cols):
    matrix = [[r * cols + c for c in range(cols)] for r in range(rows)]
    order = spiral_order(matrix)
    assert sorted(order) == list(range(rows * cols))
    assert order[:cols] == matrix[0]


def test_merge_examples():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [[1, 6], [8, 10], [15, 18]]
    assert merge_intervals([[1, 4], [4, 5]]) == [[1, 5]]


def test_merge_empty():
    assert merge_intervals([]) == []


def test_merge_unsorted_and_contained():
    intervals = [[8, 10], [1, 6], [2, 3]]
    assert merge_intervals(intervals) == [[1, 6], [8, 10]]
    assert intervals[0] == [1, 6]


def test_merge_does_not_alias_input():
    intervals = [[1, 3], [2, 6]]
    merged = merge_intervals(intervals)
    assert intervals == [[1, 3], [2, 6]]
    assert merged == [[1, 6]]


def test_search_matrix_examples():
    matrix = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 50]]
    assert search_matrix(matrix, 3) is True
    assert search_matrix(matrix, 13) is False


def test_search_matrix_empty():
    assert search_matrix([], 0) is False
    assert search_matrix([[]], 1) is False


def test_search_matrix_finds_every_entry():
    matrix = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 50]]
    present = {value for row in matrix for value in row}
    for value in range(-2, 55):
        assert search_matrix(matrix, value) is (value in present)