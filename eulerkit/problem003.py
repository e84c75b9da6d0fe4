"""Largest prime factor of a number."""


def is_prime(n):
    """Trial-division primality test over odd divisors below ``n // 2``.

    1 is reported as prime by this check.
    """
    if n % 2 == 0 and n != 2:
        return False
    return all(n % i != 0 for i in range(3, n // 2, 2))


def _require_positive(x):
    if x < 1:
        raise ValueError(f"number must be positive, got {x}")


def largest_prime_factor_descending(x):
    """Search odd candidates downward from ``x // 2`` for a prime divisor."""
    _require_positive(x)
    start = x // 2
    if start % 2 == 0:
        start += 1
    for candidate in range(start, 1, -2):
        if x % candidate == 0 and is_prime(candidate):
            return candidate
    if x % 2 == 0:
        return 2
    return x


def first_factor(x):
    """Return the smallest factor of ``x`` above 1, or 1 when ``x`` is an odd prime."""
    if x % 2 == 0:
        return 2
    return next((i for i in range(3, x, 2) if x % i == 0), 1)


def largest_prime_factor(x):
    """Divide out smallest factors until only the largest prime remains."""
    _require_positive(x)
    factor = 0
    remaining = x
    while factor != 1 and remaining != 2:
        factor = first_factor(remaining)
        remaining //= factor
    return remaining