"""String puzzles: prefixes, brackets, run-length coding, IP splitting and more."""

from __future__ import annotations

import re
from itertools import groupby, product

_PHONE_LETTERS = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_BRACKET_PAIRS = {"(": ")", "[": "]", "{": "}"}
_VOWELS = frozenset("aeiouAEIOU")
_ALPHABET_CODE = re.compile(r"(\d\d)#|(\d)")
_MAX_OCTET = 255


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest prefix shared by every string; empty input gives ''."""
    if not strs:
        return ""
    prefix = []
    for chars in zip(*strs):
        first = chars[0]
        if first == "\0" or any(char != first for char in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def letter_combinations(digits: str) -> list[str]:
    """List every letter string a phone keypad can spell for ``digits``.

    Digits 0 and 1 carry no letters, so any digit string holding them spells nothing.
    """
    if not digits:
        return []
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"not a digit string: {digits!r}")
    letter_sets = [_PHONE_LETTERS[int(digit)] for digit in digits]
    return ["".join(letters) for letters in product(*letter_sets)]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether the brackets in ``s`` open and close in properly nested pairs."""
    expected_closers: list[str] = []
    for char in s:
        if char in _BRACKET_PAIRS:
            expected_closers.append(_BRACKET_PAIRS[char])
        elif not expected_closers or expected_closers.pop() != char:
            return False
    return not expected_closers


def find_substring(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1; an empty needle is at 0."""
    return haystack.find(needle)


def count_and_say(n: int) -> str:
    """Return the ``n``-th term of the count-and-say sequence, starting from '1'."""
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word, or 0 if there is none."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def _is_octet(part: str) -> bool:
    if len(part) > 1 and part[0] == "0":
        return False
    return part.isdigit() and int(part) <= _MAX_OCTET


def restore_ip_addresses(s: str) -> list[str]:
    """List every dotted IPv4 address that can be made by splitting the digits of ``s``."""
    addresses = []
    for sizes in product((1, 2, 3), repeat=3):
        first_end = sizes[0]
        second_end = first_end + sizes[1]
        third_end = second_end + sizes[2]
        last_size = len(s) - third_end
        if not 1 <= last_size <= 3:
            continue
        parts = [s[:first_end], s[first_end:second_end], s[second_end:third_end], s[third_end:]]
        if all(_is_octet(part) for part in parts):
            addresses.append(".".join(parts))
    return addresses


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def reverse_string(chars: list[str]) -> None:
    """Reverse the list of characters in place."""
    chars.reverse()


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    vowels = [char for char in s if char in _VOWELS]
    return "".join(vowels.pop() if char in _VOWELS else char for char in s)


def compress(chars: list[str]) -> int:
    """Run-length encode ``chars`` in place and return the encoded length.

    Each run becomes its character followed by its count when the count exceeds one.
    Entries past the returned length are left as they were.
    """
    encoded: list[str] = []
    for char, run in groupby(chars):
        count = sum(1 for _ in run)
        encoded.append(char)
        if count > 1:
            encoded.extend(str(count))
    chars[: len(encoded)] = encoded
    return len(encoded)


def decrypt_alphabet(s: str) -> str:
    """Decode '1'..'9' as 'a'..'i' and '10#'..'26#' as 'j'..'z'."""
    letters = []
    position = 0
    for match in _ALPHABET_CODE.finditer(s):
        if match.start() != position:
            break
        code = int(match.group(1) or match.group(2))
        letters.append(chr(ord("a") + code - 1))
        position = match.end()
    if position != len(s):
        raise ValueError(f"cannot decode {s!r} at position {position}")
    return "".join(letters)