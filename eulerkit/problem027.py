"""Quadratic formula producing the most consecutive primes."""

from itertools import count
from math import isqrt


def is_prime(x):
    """True for primes; numbers below 2 are not prime."""
    if x < 2 or (x % 2 == 0 and x != 2):
        return False
    return all(x % i != 0 for i in range(3, isqrt(x) + 1, 2))


def primes():
    """Yield the primes in increasing order, without end."""
    return (candidate for candidate in count(2) if is_prime(candidate))


def consecutive_primes(a, b):
    """Count of ``n`` from 0 for which ``n*n + a*n + b`` is prime.

    ``n = 0`` is always counted, since ``b`` is taken to be prime.
    """
    total = 1
    n = 1
    value = a + b + 1
    while is_prime(value):
        n += 1
        total += 1
        value = n * n + a * n + b
    return total


def quadratic_primes_product(limit=1000):
    """Product ``a * b`` of the coefficients giving the longest run of primes.

    ``b`` ranges over primes below ``limit`` and ``a`` over ``-b .. limit - 1``.
    """
    best_count = consecutive_primes(-2, 2)
    best = -2 * 2
    for b in primes():
        if b >= limit:
            break
        for a in range(-b, limit):
            run = consecutive_primes(a, b)
            if run > best_count:
                best_count = run
                best = a * b
    return best