"""Denominator whose unit fraction has the longest run of decimal digits."""


def cycle_length(x):
    """Digits produced by long division of ``1 / x`` before a remainder repeats.

    Division stops early when it ends exactly; for fractions with a pure
    recurring part the count is the length of the recurring cycle.
    """
    if x < 1:
        raise ValueError(f"denominator must be positive, got {x}")
    seen = set()
    skipped = 0
    remainder = 1
    while remainder != 0 and remainder not in seen:
        seen.add(remainder)
        remainder *= 10
        while remainder < x:
            remainder *= 10
            skipped += 1
        remainder %= x
    return len(seen) + skipped


def longest_cycle_denominator(limit=1000):
    """Denominator below ``limit`` with the greatest :func:`cycle_length`; first wins ties."""
    if limit < 2:
        raise ValueError(f"limit must be at least 2, got {limit}")
    best_length = 0
    best = 1
    for denominator in range(1, limit):
        length = cycle_length(denominator)
        if length > best_length:
            best_length = length
            best = denominator
    return best