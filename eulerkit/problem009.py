"""Pythagorean triplet whose members add up to a given total."""


def pythagorean_triplet(total=1000):
    """First ``(a, b, c)`` with ``a < b < c``, ``a*a + b*b == c*c`` and sum ``total``.

    Returns None when no such triplet exists.
    """
    for a in range(3, total):
        for b in range(a + 1, total - a):
            c = total - a - b
            if c > b and a * a + b * b == c * c:
                return a, b, c
    return None


def triplet_product(total=1000):
    """Product ``a * b * c`` of the triplet, or 0 when there is none."""
    triplet = pythagorean_triplet(total)
    if triplet is None:
        return 0
    a, b, c = triplet
    return a * b * c