"""Sundays that fell on the first of a month."""

from datetime import date

_SUNDAY = 6


def count_sundays(first_year=1901, last_year=2000):
    """Count months from ``first_year`` through ``last_year`` that began on a Sunday."""
    return sum(
        1
        for year in range(first_year, last_year + 1)
        for month in range(1, 13)
        if date(year, month, 1).weekday() == _SUNDAY
    )