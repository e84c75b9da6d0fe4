"""Digit sum of a power of two."""


def power_digit_sum(exponent=1000):
    """Sum of the decimal digits of ``2 ** exponent``."""
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    return sum(int(digit) for digit in str(2**exponent))