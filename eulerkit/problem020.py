"""Digit sum of a factorial."""

from math import factorial


def factorial_digit_sum(n=100):
    """Sum of the decimal digits of ``n!``."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    return sum(int(digit) for digit in str(factorial(n)))