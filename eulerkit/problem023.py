"""Sum of the numbers that are not the sum of two abundant numbers."""

from itertools import takewhile
from math import isqrt

DEFAULT_LIMIT = 28123

__all__ = [
    "sum_proper_divisors",
    "abundant_numbers",
    "constructible",
    "non_abundant_sum",
]


def sum_proper_divisors(x):
    """Sum of the divisors of ``x`` smaller than ``x``; 0 for ``x`` below 2."""
    if x < 2:
        return 0
    total = 1
    for i in range(2, isqrt(x) + 1):
        if x % i == 0:
            total += i
            other = x // i
            if other != i:
                total += other
    return total


def abundant_numbers(limit=DEFAULT_LIMIT):
    """Abundant numbers below ``limit``, in increasing order."""
    return [i for i in range(1, limit) if sum_proper_divisors(i) > i]


def constructible(abundant, limit=DEFAULT_LIMIT):
    """Numbers below ``limit`` that are the sum of two of the given abundant numbers."""
    ordered = sorted(abundant)
    members = set(ordered)
    return frozenset(
        n
        for n in range(1, limit)
        if any(n - a in members for a in takewhile(lambda a: 2 * a <= n, ordered))
    )


def non_abundant_sum(limit=DEFAULT_LIMIT):
    """Sum of the positive integers below ``limit`` not written as two abundant numbers."""
    sums = constructible(abundant_numbers(limit), limit)
    return sum(i for i in range(1, limit) if i not in sums)