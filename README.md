# algosolve

A library of small, self-contained algorithm solutions. Each function takes and
returns plain Python values (lists, strings, integers) or a simple singly linked
`ListNode`. There are no dependencies outside the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

- `algosolve.linked_list`: the `ListNode` dataclass (iterable over its values),
  `from_values` / `to_values` to convert to and from Python lists, and the list
  operations `add_two_numbers`, `remove_nth_from_end`, `merge_two_lists`,
  `swap_pairs`, `delete_duplicates`, `delete_all_duplicates`, `partition`,
  `remove_elements` and `reverse_list`.
- `algosolve.number_strings`: arithmetic on non-negative digit strings:
  `multiply`, `add_strings`, `add_binary`.
- `algosolve.integers`: `reverse_integer`, `string_to_integer`,
  `is_palindrome_number`, `divide`, `power`, `int_sqrt`, `climb_stairs`,
  `range_bitwise_and`, `is_happy`, `count_primes`, `is_power_of_two`, `is_ugly`,
  `first_bad_version` (takes the version check as a callable) and `to_base7`.
  Functions that mimic 32-bit integers (`reverse_integer`, `string_to_integer`,
  `divide`) return 0 or clamp when a result leaves that range.
- `algosolve.numerals`: `int_to_roman`, `roman_to_int`, `number_to_words`.
- `algosolve.strings`: `longest_common_prefix`, `letter_combinations`,
  `is_valid_parentheses`, `find_substring`, `count_and_say`,
  `length_of_last_word`, `restore_ip_addresses`, `is_isomorphic`,
  `reverse_string`, `reverse_vowels`, `compress`, `decrypt_alphabet`.
- `algosolve.arrays`: `two_sum`, `three_sum`, `remove_duplicates`,
  `remove_duplicates_keep_two`, `remove_element`, `search_insert`,
  `first_missing_positive`, `plus_one`, `missing_number`, `move_zeroes`,
  `fizz_buzz`, `third_max`, `is_one_bit_character`.
- `algosolve.combinatorics`: `combine`, `subsets`, `pascal_triangle`, `pascal_row`.
- `algosolve.matrices`: `is_valid_sudoku`, `rotate`, `spiral_order`,
  `merge_intervals`, `search_matrix`.
- `algosolve.validation`: `is_number`, `valid_utf8`.
- `algosolve.expressions`: `eval_rpn`, `calculate` (`+`, `-` and parentheses),
  `calculate_arithmetic` (`+ - * /` with precedence, division truncating toward
  zero) and the `MinStack` class with `push`, `pop`, `top` and `get_min`.

## Examples

```python
from algosolve.linked_list import from_values, to_values, add_two_numbers
from algosolve.numerals import int_to_roman, number_to_words
from algosolve.expressions import calculate, MinStack

to_values(add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4])))  # [7, 0, 8]
int_to_roman(1994)        # 'MCMXCIV'
number_to_words(12345)    # 'Twelve Thousand Three Hundred Forty Five'
calculate("(1+(4+5+2)-3)+(6+8)")  # 23

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()  # -3
```

## In-place changes and errors

Several functions change the list they are given: `rotate`, `move_zeroes`,
`reverse_string`, `plus_one`, `compress`, `remove_duplicates`,
`remove_duplicates_keep_two`, `remove_element` and `merge_intervals` (which sorts
its input by start). The linked-list operations relink the nodes they receive.

Input that a function cannot handle raises an exception rather than returning a
marker value: for example `ValueError` for an unknown Roman symbol, a malformed
expression or a non-square matrix, `ZeroDivisionError` for division by zero, and
`IndexError` for reading from an empty `MinStack`.

## What it does not do

This is a library only: it has no command-line tool and reads no files.

## Running the tests

```
pip install ".[test]"
pytest
```