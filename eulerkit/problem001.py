"""Sum of all multiples of 3 or 5 below a limit."""

DEFAULT_LIMIT = 1000


def sum_multiples_loop(limit=DEFAULT_LIMIT):
    """Sum the multiples of 3 or 5 below ``limit`` by checking every number."""
    return sum(i for i in range(1, limit) if i % 3 == 0 or i % 5 == 0)


def sum_divisible_by(n, limit=DEFAULT_LIMIT):
    """Sum the positive multiples of ``n`` below ``limit``."""
    if n <= 0:
        raise ValueError(f"step must be positive, got {n}")
    return sum(range(n, limit, n))


def sum_multiples(limit=DEFAULT_LIMIT):
    """Sum the multiples of 3 or 5 below ``limit`` by inclusion-exclusion."""
    return (
        sum_divisible_by(3, limit)
        + sum_divisible_by(5, limit)
        - sum_divisible_by(15, limit)
    )