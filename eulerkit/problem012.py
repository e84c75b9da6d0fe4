"""First triangle number with a given number of divisors."""


def count_divisors(x):
    """Number of positive divisors of ``x``."""
    if x < 1:
        raise ValueError(f"number must be positive, got {x}")
    count = 1
    p = 2
    while p * p <= x:
        exponent = 0
        while x % p == 0:
            x //= p
            exponent += 1
        count *= exponent + 1
        p += 1 if p == 2 else 2
    if x > 1:
        count *= 2
    return count


def first_triangle_with_divisors(number=500):
    """First triangle number with at least ``number`` divisors.

    Returns 0 when ``number`` is not positive, since no search is needed.
    """
    divisors = 0
    i = 0
    triangle = 0
    while divisors < number:
        i += 1
        triangle += i
        divisors = count_divisors(triangle)
    return triangle