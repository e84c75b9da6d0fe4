"""Sum of amicable numbers below a limit."""

from math import isqrt


def sum_proper_divisors(x):
    """Sum of the divisors of ``x`` smaller than ``x``; 0 for ``x`` below 2."""
    if x < 2:
        return 0
    total = 1
    for i in range(2, isqrt(x) + 1):
        if x % i == 0:
            total += i
            partner = x // i
            if partner != i:
                total += partner
    return total


def amicable_sum(limit=10000):
    """Sum of every number below ``limit`` that belongs to an amicable pair."""
    total = 0
    for i in range(2, limit):
        partner = sum_proper_divisors(i)
        if partner != i and sum_proper_divisors(partner) == i:
            total += i
    return total