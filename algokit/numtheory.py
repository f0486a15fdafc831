"""Primes, digits, number bases and small numeric series."""

from __future__ import annotations

import math
import struct

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_MAGIC = 0x5F3759DF


def sieve(limit: int) -> list[int]:
    """All primes less than or equal to *limit* (Sieve of Eratosthenes)."""
    if limit < 2:
        return []
    prime = [True] * (limit + 1)
    prime[0] = prime[1] = False
    p = 2
    while p * p <= limit:
        if prime[p]:
            prime[p * p :: p] = [False] * len(range(p * p, limit + 1, p))
        p += 1
    return [number for number, flag in enumerate(prime) if flag]


def decimal_to_octal(number: int) -> int:
    """The octal digits of *number* read as a decimal integer; the sign is kept."""
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    result, place = 0, 1
    while remaining:
        remaining, digit = divmod(remaining, 8)
        result += digit * place
        place *= 10
    return sign * result


def compare(first: float, second: float) -> str:
    """'GREATER', 'LESS' or 'EQUAL', telling how *first* stands to *second*."""
    if first > second:
        return "GREATER"
    if second > first:
        return "LESS"
    if first == second:
        return "EQUAL"
    raise ValueError(f"{first!r} and {second!r} cannot be ordered")


def is_prime(number: int) -> bool:
    """Tell whether *number* is prime; numbers below 2 are not."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def armstrong_numbers(count: int) -> list[int]:
    """The first *count* numbers equal to the sum of their digits each raised to the digit count."""
    found: list[int] = []
    candidate = 1
    while len(found) < count:
        digits = str(candidate)
        if sum(int(d) ** len(digits) for d in digits) == candidate:
            found.append(candidate)
        candidate += 1
    return found


def count_set_bits(number: int) -> int:
    """Number of 1 bits in the binary form of a non-negative integer."""
    if number < 0:
        raise ValueError("set bits are counted for non-negative integers only")
    count = 0
    while number:
        number &= number - 1
        count += 1
    return count


def is_power_of_two(number: int) -> bool:
    """Tell whether *number* is a positive power of two."""
    return number > 0 and not number & (number - 1)


def integer_to_roman(number: int) -> str:
    """Roman numeral for *number*, built greedily; zero gives the empty string."""
    if number < 0:
        raise ValueError("roman numerals need a non-negative number")
    parts: list[str] = []
    for value, symbol in _ROMAN:
        times, number = divmod(number, value)
        parts.append(symbol * times)
    return "".join(parts)


def binary_to_decimal(digits: str | int) -> int:
    """Value of a binary number written with the digits 0 and 1."""
    text = str(digits)
    if not text or any(char not in "01" for char in text):
        raise ValueError(f"not a binary number: {digits!r}")
    value = 0
    for char in text:
        value = value * 2 + (char == "1")
    return value


def decimal_to_binary(number: int) -> str:
    """Binary digits of a non-negative integer."""
    if number < 0:
        raise ValueError("binary form is given for non-negative integers only")
    if number == 0:
        return "0"
    bits: list[str] = []
    while number:
        bits.append("1" if number & 1 else "0")
        number >>= 1
    return "".join(reversed(bits))


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def fast_inverse_sqrt(number: float) -> float:
    """Approximate 1/sqrt(number) by the single-precision bit trick and one Newton step."""
    x2 = _f32(number * 0.5)
    bits = struct.unpack("<i", struct.pack("<f", number))[0]
    bits = (_MAGIC - (bits >> 1)) & 0xFFFFFFFF
    y = struct.unpack("<f", struct.pack("<I", bits))[0]
    return _f32(y * _f32(1.5 - _f32(x2 * _f32(y * y))))


def factorial(number: int) -> int:
    """n! for a non-negative integer."""
    if number < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, number + 1):
        result *= factor
    return result


def fibonacci(count: int) -> list[int]:
    """The first *count* Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        terms.append(current)
        current, following = following, current + following
    return terms


def is_palindrome_number(number: int) -> bool:
    """Tell whether a non-negative integer reads the same reversed; negatives never do."""
    if number < 0:
        return False
    digits = str(number)
    return digits == digits[::-1]


def digit_sum(number: int) -> int:
    """Sum of the decimal digits; a negative number gives a negative sum."""
    total = sum(int(d) for d in str(abs(number)))
    return -total if number < 0 else total


def series_sum(terms: int) -> float:
    """Sum of i / i! for i = 1 .. terms."""
    total = 0.0
    factorial_so_far = 1.0
    for i in range(1, terms + 1):
        factorial_so_far *= i
        total += i / factorial_so_far
    return total