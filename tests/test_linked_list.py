import pytest

from algosolve.linked_list import (
    ListNode,
    add_two_numbers,
    delete_all_duplicates,
    delete_duplicates,
    from_values,
    merge_two_lists,
    partition,
    remove_elements,
    remove_nth_from_end,
    reverse_list,
    swap_pairs,
    to_values,
)


def _as_int(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], [3, 3, 3]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_empty_list_is_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_node_iterates_values():
    head = ListNode(1, ListNode(2))
    assert list(head) == [1, 2]


def test_add_two_numbers_example():
    result = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
    assert to_values(result) == [7, 0, 8]


@pytest.mark.parametrize("a, b", [([9, 9, 9], [1]), ([0], [0]), ([5], [5]), ([1, 8], [9, 9, 9, 9])])
def test_add_two_numbers_matches_integer_sum(a, b):
    result = to_values(add_two_numbers(from_values(a), from_values(b)))
    assert _as_int(result) == _as_int(a) + _as_int(b)
    assert result[-1] != 0 or result == [0]


def test_add_two_numbers_both_empty():
    assert add_two_numbers(None, None) is None


def test_remove_nth_from_end_example():
    result = remove_nth_from_end(from_values([1, 2, 3, 4, 5]), 2)
    assert to_values(result) == [1, 2, 3, 5]


def test_remove_nth_from_end_head():
    assert to_values(remove_nth_from_end(from_values([1, 2, 3]), 3)) == [2, 3]


def test_remove_nth_from_end_single():
    assert remove_nth_from_end(from_values([7]), 1) is None


@pytest.mark.parametrize("n", [0, 4, -1])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(from_values([1, 2, 3]), n)


def test_merge_two_lists_example():
    result = merge_two_lists(from_values([1, 2, 4]), from_values([1, 3, 4]))
    assert to_values(result) == [1, 1, 2, 3, 4, 4]


def test_merge_with_empty():
    assert to_values(merge_two_lists(None, from_values([1, 2]))) == [1, 2]
    assert to_values(merge_two_lists(from_values([1, 2]), None)) == [1, 2]


def test_merge_is_sorted_union():
    a, b = [0, 2, 2, 9], [1, 2, 5]
    assert to_values(merge_two_lists(from_values(a), from_values(b))) == sorted(a + b)


def test_swap_pairs_example():
    assert to_values(swap_pairs(from_values([1, 2, 3, 4]))) == [2, 1, 4, 3]


def test_swap_pairs_odd_and_short():
    assert to_values(swap_pairs(from_values([1, 2, 3]))) == [2, 1, 3]
    assert to_values(swap_pairs(from_values([1]))) == [1]
    assert swap_pairs(None) is None


def test_swap_pairs_twice_is_identity():
    values = [4, 8, 15, 16, 23, 42]
    assert to_values(swap_pairs(swap_pairs(from_values(values)))) == values


def test_delete_all_duplicates_examples():
    assert to_values(delete_all_duplicates(from_values([1, 2, 3, 3, 4, 4, 5]))) == [1, 2, 5]
    assert to_values(delete_all_duplicates(from_values([1, 1, 1, 2, 3]))) == [2, 3]
    assert delete_all_duplicates(from_values([1, 1])) is None


def test_delete_duplicates_examples():
    assert to_values(delete_duplicates(from_values([1, 1, 2]))) == [1, 2]
    assert to_values(delete_duplicates(from_values([1, 1, 2, 3, 3]))) == [1, 2, 3]
    assert delete_duplicates(None) is None


def test_partition_example():
    result = partition(from_values([1, 4, 3, 2, 5, 2]), 3)
    assert to_values(result) == [1, 2, 2, 4, 3, 5]


def test_partition_invariant():
    values = [9, 1, 7, 3, 3, 0, 8]
    result = to_values(partition(from_values(values), 4))
    assert result == [v for v in values if v < 4] + [v for v in values if v >= 4]


def test_remove_elements_example():
    result = remove_elements(from_values([1, 2, 6, 3, 4, 5, 6]), 6)
    assert to_values(result) == [1, 2, 3, 4, 5]


def test_remove_elements_all():
    assert remove_elements(from_values([7, 7, 7]), 7) is None


def test_reverse_list_example():
    assert to_values(reverse_list(from_values([1, 2, 3, 4, 5]))) == [5, 4, 3, 2, 1]


def test_reverse_list_empty():
    assert reverse_list(None) is None