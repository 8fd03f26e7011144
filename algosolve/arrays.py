"""Array puzzles: pair and triple sums, in-place compaction, searching and counting."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from itertools import count, groupby, islice


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the indices of two entries adding up to ``target``, or [] if none do.

    The index of the smaller value comes first.
    """
    order = sorted(range(len(nums)), key=nums.__getitem__)
    left, right = 0, len(order) - 1
    while left < right:
        total = nums[order[left]] + nums[order[right]]
        if total == target:
            return [order[left], order[right]]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def _next_distinct(values: list[int], index: int) -> int:
    current = values[index]
    index += 1
    while index < len(values) and values[index] == current:
        index += 1
    return index


def three_sum(nums: list[int]) -> list[list[int]]:
    """List every distinct ascending triple of entries that sums to zero."""
    values = sorted(nums)
    triples: list[list[int]] = []
    first = 0
    while first + 2 < len(values) and values[first] <= 0:
        a = values[first]
        second, third = first + 1, len(values) - 1
        while second < third:
            b, c = values[second], values[third]
            total = a + b + c
            if total == 0:
                triples.append([a, b, c])
                second = _next_distinct(values, second)
            elif total < 0:
                second = _next_distinct(values, second)
            else:
                third -= 1
        first = _next_distinct(values, first)
    return triples


def _compact(nums: list[int], kept: list[int]) -> int:
    nums[: len(kept)] = kept
    return len(kept)


def remove_duplicates(nums: list[int]) -> int:
    """Move one copy of each value of a sorted list to its front and return their count.

    Entries past the returned length are left as they were.
    """
    return _compact(nums, [value for value, _ in groupby(nums)])


def remove_element(nums: list[int], val: int) -> int:
    """Move the entries not equal to ``val`` to the front, in order, and return their count."""
    return _compact(nums, [value for value in nums if value != val])


def search_insert(nums: list[int], target: int) -> int:
    """Return the index of ``target`` in a sorted list of distinct values, or where it would go."""
    return bisect_left(nums, target)


def first_missing_positive(nums: list[int]) -> int:
    """Return the smallest positive integer absent from ``nums``."""
    present = {value for value in nums if value > 0}
    return next(candidate for candidate in count(1) if candidate not in present)


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the decimal number held as a digit list, in place, and return the list."""
    for position in reversed(range(len(digits))):
        carry, digits[position] = divmod(digits[position] + 1, 10)
        if not carry:
            return digits
    digits.insert(0, 1)
    return digits


def remove_duplicates_keep_two(nums: list[int]) -> int:
    """Keep at most two copies of each value of a sorted list at its front; return their count."""
    kept = [value for _, run in groupby(nums) for value in islice(run, 2)]
    return _compact(nums, kept)


def missing_number(nums: list[int]) -> int:
    """Return the one number of ``0..len(nums)`` that ``nums`` lacks."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other entries."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz words for 1 to ``n``."""

    def word(number: int) -> str:
        if number % 15 == 0:
            return "FizzBuzz"
        if number % 3 == 0:
            return "Fizz"
        if number % 5 == 0:
            return "Buzz"
        return str(number)

    return [word(number) for number in range(1, n + 1)]


def third_max(nums: list[int]) -> int:
    """Return the third largest distinct value, or the largest if there are fewer than three."""
    if not nums:
        raise ValueError("third_max() of an empty list")
    top = heapq.nlargest(3, set(nums))
    return top[2] if len(top) == 3 else top[0]


def is_one_bit_character(bits: list[int]) -> bool:
    """Tell whether the final 0 of a 0/10/11 bit code stands alone as a one-bit character."""
    if not bits:
        raise ValueError("the bit list must not be empty")
    ones = 0
    for bit in reversed(bits[:-1]):
        if bit != 1:
            break
        ones += 1
    return ones % 2 == 0