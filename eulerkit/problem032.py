"""Products whose multiplicand, multiplier and product are 1-9 pandigital."""

_ALL_DIGITS = sorted("123456789")


def _digits(x):
    return str(x) if x else ""


def is_pandigital_product(a, b, p):
    """True if the digits of ``a``, ``b`` and ``p`` use 1 to 9 exactly once each."""
    digits = _digits(a) + _digits(b) + _digits(p)
    return len(digits) == 9 and sorted(digits) == _ALL_DIGITS


def pandigital_products_sum():
    """Sum of every distinct pandigital product with a two-digit-or-less multiplicand."""
    products = {
        a * b
        for a in range(100)
        for b in range(10000)
        if is_pandigital_product(a, b, a * b)
    }
    return sum(products)