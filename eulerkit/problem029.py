"""Distinct terms of ``a ** b`` over a square range of bases and exponents."""


def distinct_powers(low=2, high=100):
    """Number of distinct ``a ** b`` with ``a`` and ``b`` both in ``low .. high``."""
    values = range(low, high + 1)
    return len({a**b for a in values for b in values})