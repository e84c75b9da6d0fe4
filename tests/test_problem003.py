import pytest

from eulerkit.problem003 import (
    first_factor,
    is_prime,
    largest_prime_factor,
    largest_prime_factor_descending,
)


def test_worked_example():
    assert largest_prime_factor(13195) == 29
    assert largest_prime_factor_descending(13195) == 29


def test_large_input():
    assert largest_prime_factor(600851475143) == 6857


@pytest.mark.parametrize("x", range(2, 300))
def test_methods_agree(x):
    assert largest_prime_factor(x) == largest_prime_factor_descending(x)


@pytest.mark.parametrize("x", range(2, 300))
def test_result_is_prime_divisor(x):
    p = largest_prime_factor(x)
    assert x % p == 0
    assert is_prime(p)


@pytest.mark.parametrize("p,q", [(3, 3), (3, 5), (5, 7), (7, 11), (11, 13)])
def test_odd_composites_not_prime(p, q):
    assert not is_prime(p * q)


def test_two_is_prime_and_evens_are_not():
    assert is_prime(2)
    assert not any(is_prime(n) for n in range(4, 100, 2))


@pytest.mark.parametrize("p", [3, 5, 7, 13, 29])
def test_first_factor_of_odd_prime_is_one(p):
    assert first_factor(p) == 1


@pytest.mark.parametrize("n", [2, 4, 10, 1000])
def test_first_factor_of_even_is_two(n):
    assert first_factor(n) == 2


@pytest.mark.parametrize("x", [0, -5])
def test_non_positive_rejected(x):
    with pytest.raises(ValueError):
        largest_prime_factor(x)
    with pytest.raises(ValueError):
        largest_prime_factor_descending(x)