"""Integer arithmetic and number-theory routines working within 32-bit bounds."""

from __future__ import annotations

import math
from collections.abc import Callable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_BASE7_DIGITS = "0123456"


def _fits_int32(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 if the result leaves 32-bit range."""
    if x == 0:
        return 0
    magnitude = int(str(abs(x))[::-1])
    result = -magnitude if x < 0 else magnitude
    return result if _fits_int32(result) else 0


def string_to_integer(text: str) -> int:
    """Parse a leading integer like C ``atoi``, clamping to the 32-bit range.

    Leading spaces are skipped, one optional sign is read, then digits until
    the first non-digit. Text with no digits gives 0.
    """
    stripped = text.lstrip(" ")
    positive = True
    if stripped[:1] in ("+", "-"):
        positive = stripped[0] == "+"
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        result = 10 * result + (ord(char) - ord("0"))
        if positive and result > INT_MAX:
            return INT_MAX
        if not positive and -result < INT_MIN:
            return INT_MIN
    return result if positive else -result


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal form of ``x`` reads the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def divide(dividend: int, divisor: int) -> int:
    """Divide truncating toward zero using shifts and subtraction only.

    A result above the 32-bit maximum is clamped to it.
    """
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    negative = (dividend < 0) != (divisor < 0)
    numerator = abs(dividend)
    denominator = abs(divisor)
    quotient = 0
    remainder = 0
    for bit in range(numerator.bit_length() - 1, -1, -1):
        remainder = (remainder << 1) | ((numerator >> bit) & 1)
        if remainder >= denominator:
            remainder -= denominator
            quotient |= 1 << bit
    result = -quotient if negative else quotient
    return min(max(result, INT_MIN), INT_MAX)


def _half_toward_zero(n: int) -> int:
    return n // 2 if n >= 0 else -((-n) // 2)


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    if n == 0:
        return 1.0
    if n == 1:
        return x
    if n == 2:
        return x * x
    if n == -1:
        return 1 / x
    if n == -2:
        return 1 / (x * x)
    half = power(x, _half_toward_zero(n))
    result = half * half
    if n % 2 == 0:
        return result
    return x * result if n > 0 else result / x


def int_sqrt(x: int) -> int:
    """Return the integer part of the square root of a non-negative ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n < 1:
        raise ValueError("the number of steps must be positive")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def range_bitwise_and(m: int, n: int) -> int:
    """Bitwise AND of every integer in ``[m, n]``: the common high-bit prefix."""
    if m < 0 or n < m:
        raise ValueError("expected 0 <= m <= n")
    shift = 0
    while m != n:
        m >>= 1
        n >>= 1
        shift += 1
    return m << shift


def _digit_square_sum(n: int) -> int:
    return sum(int(d) ** 2 for d in str(n))


def is_happy(n: int) -> bool:
    """Tell whether iterating the sum of squared digits from ``n`` reaches 1."""
    seen: set[int] = set()
    value = n
    while value != 1:
        value = _digit_square_sum(value)
        if value in seen:
            return False
        seen.add(value)
    return True


def count_primes(n: int) -> int:
    """Count the primes strictly below ``n`` with a sieve over odd numbers."""
    if n <= 2:
        return 0
    # index i stands for the odd number 2 * i + 3
    sieve = bytearray([1]) * max(n // 2 - 1, 0)
    count = 1  # the prime 2
    for number in range(3, n, 2):
        if sieve[(number - 3) // 2]:
            count += 1
            for multiple in range(number * number, n, 2 * number):
                sieve[(multiple - 3) // 2] = 0
    return count


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two that fits in a signed 32-bit integer."""
    return 0 < n <= 1 << 30 and n & (n - 1) == 0


def is_ugly(num: int) -> bool:
    """Tell whether ``num`` is positive with no prime factors besides 2, 3 and 5."""
    if num <= 0:
        return False
    for factor in (2, 3, 5):
        while num % factor == 0:
            num //= factor
    return num == 1


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """Binary-search versions ``1..n`` for the first one ``is_bad_version`` reports bad."""
    if is_bad_version(1):
        return 1
    left, right = 1, n
    while right - left > 1:
        middle = (left + right) // 2
        if is_bad_version(middle):
            right = middle
        else:
            left = middle
    return right


def to_base7(num: int) -> str:
    """Write ``num`` in base 7, with a leading minus sign when negative."""
    magnitude = abs(num)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 7)
        digits.append(_BASE7_DIGITS[digit])
        if magnitude == 0:
            break
    if num < 0:
        digits.append("-")
    return "".join(reversed(digits))