"""Validators for decimal number literals and UTF-8 byte sequences."""

from __future__ import annotations

import re

_NUMBER = re.compile(r" *[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)? *")


def is_number(s: str) -> bool:
    """Tell whether ``s`` is a decimal number, optionally with a lower-case exponent.

    Spaces may surround the number; a sign may lead the mantissa and the exponent,
    and the mantissa needs at least one digit on either side of its point.
    """
    return _NUMBER.fullmatch(s) is not None


def _sequence_length(first: int) -> int:
    if first & 0b1000_0000 == 0:
        return 1
    if first & 0b1110_0000 == 0b1100_0000:
        return 2
    if first & 0b1111_0000 == 0b1110_0000:
        return 3
    if first & 0b1111_1000 == 0b1111_0000:
        return 4
    return 0


def valid_utf8(data: list[int]) -> bool:
    """Tell whether ``data``, one octet per integer, forms well-shaped UTF-8 sequences."""
    start = 0
    while start < len(data):
        length = _sequence_length(data[start])
        if length == 0 or start + length > len(data):
            return False
        if any(octet & 0b1100_0000 != 0b1000_0000 for octet in data[start + 1 : start + length]):
            return False
        start += length
    return True