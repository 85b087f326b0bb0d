"""Small numeric and string helpers: squares, Fibonacci, reversal and 16-bit bit operations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

INT16_MIN = -(1 << 15)
INT16_MAX = (1 << 15) - 1


def square(a: int) -> int:
    """Return ``a`` squared."""
    return a * a


def implement_budget_cut(salary: int, cut: int) -> int:
    """Return the salary left after the cut."""
    return salary - cut


def compare(a: Any, b: Any) -> bool:
    """Return False when ``b`` exceeds ``a``, True otherwise."""
    return not b > a


def int_from_digits(digits: Iterable[int]) -> int:
    """Build an integer from its digits, most significant first."""
    number = 0
    for digit in digits:
        number = number * 10 + digit
    return number


def _check_fib_argument(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, computed iteratively."""
    _check_fib_argument(n)
    first, second = 0, 1
    for _ in range(n):
        first, second = second, first + second
    return first


def fib_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by direct recursion."""
    _check_fib_argument(n)
    if n < 2:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def reverse_word(word: str) -> str:
    """Return the word with its characters in reverse order."""
    return word[::-1]


def square_all(values: Iterable[int]) -> list[int]:
    """Return the squares of the given values, in order."""
    return [square(value) for value in values]


def get_max(first: T, second: T) -> T:
    """Return the larger of two comparable values, preferring ``first`` on ties."""
    return second if first < second else first


def _to_int16(value: int) -> int:
    return ((value - INT16_MIN) & 0xFFFF) + INT16_MIN


@dataclass(frozen=True)
class BitwiseResult:
    """The results of the bitwise operators applied to two 16-bit integers."""

    and_: int
    or_: int
    xor: int
    not_a: int
    not_b: int
    left_shift: int
    right_shift: int


def bitwise_ops(a: int, b: int) -> BitwiseResult:
    """Apply and, or, xor, negation and shifts to two signed 16-bit integers.

    Results are wrapped to the signed 16-bit range; the shift amount is ``b``.
    """
    for name, value in (("a", a), ("b", b)):
        if not INT16_MIN <= value <= INT16_MAX:
            raise ValueError(f"{name}={value} is not a signed 16-bit integer")
    if b < 0:
        raise ValueError(f"shift amount must be non-negative, got {b}")
    return BitwiseResult(
        and_=_to_int16(a & b),
        or_=_to_int16(a | b),
        xor=_to_int16(a ^ b),
        not_a=_to_int16(~a),
        not_b=~b,
        left_shift=_to_int16(a << b),
        right_shift=_to_int16(a >> b),
    )