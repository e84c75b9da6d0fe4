"""Letters used when writing out the numbers 1 to 1000 in words."""

# Letter counts indexed by digit.  TENS[1] is unused: ten to nineteen
# come from SPECIAL.  HUNDREDS includes "hundredand".
UNITS = (0, 3, 3, 5, 4, 4, 3, 5, 5, 4)
TENS = (0, -1, 6, 6, 5, 5, 5, 7, 6, 6)
HUNDREDS = (0, 13, 13, 15, 14, 14, 13, 15, 15, 14)
SPECIAL = (3, 6, 6, 8, 8, 7, 7, 9, 8, 8)

_HUNDRED_WITHOUT_AND = 3
_ONE_THOUSAND = 11


def number_letter_count(units=UNITS, tens=TENS, hundreds=HUNDREDS, special=SPECIAL):
    """Total letters for 1..1000 built from per-digit letter counts."""
    for name, table in (
        ("units", units),
        ("tens", tens),
        ("hundreds", hundreds),
        ("special", special),
    ):
        if len(table) != 10:
            raise ValueError(f"{name} must have 10 entries, got {len(table)}")

    unit_total = sum(units)
    total = unit_total
    for digit in range(1, 10):
        if digit == 1:
            total += sum(special)
        else:
            total += 10 * tens[digit] + unit_total

    below_hundred = total
    for digit in range(1, 10):
        total += 100 * hundreds[digit] + below_hundred - _HUNDRED_WITHOUT_AND
    return total + _ONE_THOUSAND