"""The n-th prime number."""

from math import isqrt


def is_prime(x):
    """Trial division by odd numbers up to the square root.

    1 is reported as prime by this check.
    """
    if x % 2 == 0 and x != 2:
        return False
    return all(x % i != 0 for i in range(3, isqrt(x) + 1, 2))


def nth_prime(x=10001):
    """Return the ``x``-th prime, counting 2 as the first.

    For ``x`` of 1 or less the search never starts and 1 is returned.
    """
    counter = 1
    number = 3
    while counter < x:
        if is_prime(number):
            counter += 1
        number += 2
    return number - 2