import pytest

from eulerkit.problem009 import pythagorean_triplet, triplet_product


def test_smallest_triplet():
    assert pythagorean_triplet(12) == (3, 4, 5)


def test_default_product():
    assert triplet_product() == 31875000


@pytest.mark.parametrize("total", [12, 24, 30, 56, 1000])
def test_triplet_properties(total):
    a, b, c = pythagorean_triplet(total)
    assert a < b < c
    assert a + b + c == total
    assert a * a + b * b == c * c
    assert triplet_product(total) == a * b * c


@pytest.mark.parametrize("total", [0, 7, 11, 13])
def test_no_triplet(total):
    assert pythagorean_triplet(total) is None
    assert triplet_product(total) == 0


def test_scaled_triplet_exists():
    a, b, c = pythagorean_triplet(12)
    assert pythagorean_triplet(12 * 10) is not None
    assert triplet_product(12) == a * b * c