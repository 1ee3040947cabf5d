"""Recursive and numeric exercises: counting, digits, factorials and more."""

from __future__ import annotations

DIGIT_NAMES = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)


def _non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def count_up(start: int, end: int) -> list[int]:
    """The numbers from ``start`` to ``end`` inclusive."""
    if start > end:
        raise ValueError("start must not be greater than end")
    if start == end:
        return [end]
    return [start, *count_up(start + 1, end)]


def count_to(n: int) -> list[int]:
    """The numbers 1 to ``n``; empty for 0."""
    _non_negative(n, "n")
    if n == 0:
        return []
    return [*count_to(n - 1), n]


def spell_digits(n: int) -> list[str]:
    """The English names of the digits of ``n``, most significant first.

    Zero has no digits to say and gives an empty list.
    """
    _non_negative(n, "n")
    if n == 0:
        return []
    rest, digit = divmod(n, 10)
    return [*spell_digits(rest), DIGIT_NAMES[digit]]


def factorial(n: int) -> int:
    """n! for a non-negative ``n``."""
    _non_negative(n, "n")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _non_negative(n, "n")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def power_of_two(n: int) -> int:
    """2 raised to a non-negative ``n``."""
    _non_negative(n, "n")
    if n == 0:
        return 1
    return 2 * power_of_two(n - 1)


def reach_home(src: int, dst: int) -> list[int]:
    """Every position walked through, one step at a time, from ``src`` to ``dst``."""
    if src > dst:
        raise ValueError("home must not lie behind the start")
    return list(range(src, dst + 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    _non_negative(a, "a")
    _non_negative(b, "b")
    while b:
        a, b = b, a % b
    return a


def is_prime(n: int) -> bool:
    """Whether ``n`` is a prime number."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True