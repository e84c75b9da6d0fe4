"""Sum of the even Fibonacci numbers below a limit."""

DEFAULT_LIMIT = 4_000_000


def even_fibonacci_sum(limit=DEFAULT_LIMIT):
    """Walk the sequence term by term, adding each even term reached.

    The term that first reaches ``limit`` is still added if it is even.
    """
    last, new = 1, 1
    result = 0
    while new < limit:
        last, new = new, new + last
        if new % 2 == 0:
            result += new
    return result


def even_fibonacci_sum_stepped(limit=DEFAULT_LIMIT):
    """Jump from even term to even term; every third Fibonacci number is even."""
    last, new = 1, 2
    result = 0
    while new < limit:
        result += new
        for _ in range(3):
            last, new = new, new + last
    return result