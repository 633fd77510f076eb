"""Small numeric routines: array summary, palindromes, sums, primes, interest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

MAX_ELEMENTS = 50


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division rounding toward zero, with the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


@dataclass(frozen=True)
class ArraySummary:
    """Sorted values with their largest, smallest and second largest."""

    ordered: tuple[int, ...]
    maximum: int
    minimum: int
    second_largest: int


def summarize(values: Iterable[int]) -> ArraySummary:
    """Sort between 2 and 50 values and report their extremes.

    The second largest is the next-to-last sorted value, so it equals the
    maximum when the maximum occurs twice.
    """
    ordered = tuple(sorted(values))
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    if len(ordered) > MAX_ELEMENTS:
        raise ValueError(f"at most {MAX_ELEMENTS} values are allowed")
    return ArraySummary(ordered, ordered[-1], ordered[0], ordered[-2])


def is_three_digit_palindrome(number: int) -> bool:
    """Whether reversing the last three decimal digits gives ``number`` back."""
    rest, units = _trunc_divmod(number, 10)
    hundreds, tens = _trunc_divmod(rest, 10)
    return units * 100 + tens * 10 + hundreds == number


def power_sum(n: int) -> int:
    """Sum of i**i for i from 1 to n; 0 when n is below 1."""
    return sum(i**i for i in range(1, n + 1))


def is_prime(number: int) -> bool:
    """Whether no integer from 2 to number - 1 divides ``number``.

    Numbers below 2 have no such divisor and therefore pass.
    """
    return not any(number % d == 0 for d in range(2, number))


def simple_interest(principal: int, rate: int, time: int) -> float:
    """Simple interest principal * rate * time / 100, in whole units."""
    quotient, _ = _trunc_divmod(principal * rate * time, 100)
    return float(quotient)


def compound_amount(principal: int, rate: int, time: int, periods: int) -> float:
    """Principal grown over ``periods * time`` steps.

    The growth factor per step is 1 + rate // periods in whole numbers,
    rounded toward zero; ``periods`` of 0 raises ZeroDivisionError.
    """
    if periods == 0:
        raise ZeroDivisionError("periods must not be zero")
    step, _ = _trunc_divmod(rate, periods)
    return principal * float(1 + step) ** (periods * time)