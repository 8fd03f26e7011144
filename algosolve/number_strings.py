"""Arithmetic on non-negative integers written as digit strings."""

from __future__ import annotations

from itertools import zip_longest

_DIGITS = "0123456789"


def multiply(num1: str, num2: str) -> str:
    """Multiply two non-negative decimal strings."""
    longer, shorter = (num1, num2) if len(num1) >= len(num2) else (num2, num1)
    if longer == "0" or shorter == "0":
        return "0"
    if longer == "1":
        return shorter
    if shorter == "1":
        return longer
    product = [0] * (len(longer) + len(shorter))
    for i, a in enumerate(reversed(shorter)):
        for j, b in enumerate(reversed(longer)):
            product[i + j] += int(a) * int(b)
    carry = 0
    for position, value in enumerate(product):
        carry, product[position] = divmod(value + carry, 10)
    while len(product) > 1 and product[-1] == 0:
        product.pop()
    return "".join(_DIGITS[d] for d in reversed(product))


def _add(a: str, b: str, base: int) -> str:
    result = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, base)
        result.append(_DIGITS[digit])
    if carry:
        result.append("1")
    return "".join(reversed(result))


def add_binary(a: str, b: str) -> str:
    """Add two binary strings."""
    return _add(a, b, 2)


def add_strings(a: str, b: str) -> str:
    """Add two non-negative decimal strings."""
    return _add(a, b, 10)