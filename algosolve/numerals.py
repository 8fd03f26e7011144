"""Conversions between integers, Roman numerals and English words."""

from __future__ import annotations

_ROMAN_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_ROMAN_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ROMAN_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_ONES = ("", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine")
_TEENS = (
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
)
_TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")
_SCALES = ("", "Thousand", "Million", "Billion")


def int_to_roman(num: int) -> str:
    """Write a non-negative integer as a Roman numeral; each thousand is an ``M``."""
    if num < 0:
        raise ValueError("Roman numerals have no negative values")
    thousands, rest = divmod(num, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)
    return "M" * thousands + _ROMAN_HUNDREDS[hundreds] + _ROMAN_TENS[tens] + _ROMAN_ONES[ones]


def roman_to_int(s: str) -> int:
    """Read a Roman numeral; a symbol before a larger one is subtracted."""
    try:
        values = [_ROMAN_VALUES[symbol] for symbol in s]
    except KeyError as error:
        raise ValueError(f"not a Roman numeral symbol: {error.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def _below_hundred(num: int) -> list[str]:
    if num == 0:
        return []
    if num < 10:
        return [_ONES[num]]
    if num < 20:
        return [_TEENS[num - 10]]
    tens, ones = divmod(num, 10)
    return [_TENS[tens]] + ([_ONES[ones]] if ones else [])


def _below_thousand(num: int) -> list[str]:
    hundreds, rest = divmod(num, 100)
    words = [_ONES[hundreds], "Hundred"] if hundreds else []
    return words + _below_hundred(rest)


def number_to_words(num: int) -> str:
    """Spell a non-negative integer below one trillion in English words."""
    if num < 0:
        raise ValueError("only non-negative numbers can be spelled")
    if num >= 1000 ** len(_SCALES):
        raise ValueError("number too large to spell")
    if num == 0:
        return "Zero"
    groups: list[list[str]] = []
    for scale in _SCALES:
        if num == 0:
            break
        num, chunk = divmod(num, 1000)
        words = _below_thousand(chunk)
        if words:
            groups.append(words + ([scale] if scale else []))
    return " ".join(word for group in reversed(groups) for word in group)