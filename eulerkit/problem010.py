"""Sum of all primes below a limit."""

from math import isqrt


def is_prime(x):
    """Trial division by every number from 3 below ``x // 2``.

    1 is reported as prime by this check.
    """
    if x % 2 == 0 and x != 2:
        return False
    return all(x % i != 0 for i in range(3, x // 2))


def sum_of_primes(n=2_000_000):
    """Return 2 plus the sum of the odd primes below ``n``.

    The count always starts from 2, so limits of 2 or less still give 2.
    """
    total = 2
    if n <= 3:
        return total
    sieve = bytearray([1]) * n
    for i in range(3, isqrt(n - 1) + 1, 2):
        if sieve[i]:
            sieve[i * i :: 2 * i] = bytes(len(range(i * i, n, 2 * i)))
    return total + sum(i for i in range(3, n, 2) if sieve[i])