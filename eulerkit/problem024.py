"""Lexicographic permutations of a set of digits."""

from itertools import permutations
from math import factorial

DIGITS = tuple(range(10))


def permutations_in_order(digits=DIGITS):
    """Yield every arrangement of ``digits`` as a string, following the input order."""
    for arrangement in permutations(digits):
        yield "".join(str(digit) for digit in arrangement)


def nth_permutation(digits=DIGITS, n=1_000_000):
    """The ``n``-th (1-based) arrangement yielded by :func:`permutations_in_order`."""
    pool = list(digits)
    total = factorial(len(pool))
    if not 1 <= n <= total:
        raise ValueError(f"n must be between 1 and {total}, got {n}")
    index = n - 1
    chosen = []
    for size in range(len(pool), 0, -1):
        position, index = divmod(index, factorial(size - 1))
        chosen.append(str(pool.pop(position)))
    return "".join(chosen)