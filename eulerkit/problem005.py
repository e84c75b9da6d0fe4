"""Smallest number evenly divisible by every number from 1 to ``x``."""

from collections import Counter
from math import prod


def first_factor(x):
    """Smallest divisor of ``x`` in ``[2, x // 2)``, otherwise ``x`` itself."""
    return next((i for i in range(2, x // 2) if x % i == 0), x)


def factor_counts(n):
    """Count the factors found by repeatedly dividing ``n`` by its first factor."""
    if n < 1:
        raise ValueError(f"number must be positive, got {n}")
    counts = Counter()
    while n != 1:
        factor = first_factor(n)
        counts[factor] += 1
        n //= factor
    return counts


def smallest_multiple(x=20):
    """Multiply together the highest factor counts seen among 1..x."""
    highest = Counter()
    for n in range(1, x + 1):
        highest |= factor_counts(n)
    return prod(factor**count for factor, count in highest.items())