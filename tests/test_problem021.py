import pytest

from eulerkit.problem021 import amicable_sum, sum_proper_divisors


def test_amicable_pair():
    assert sum_proper_divisors(220) == 284
    assert sum_proper_divisors(284) == 220


@pytest.mark.parametrize("p", [2, 3, 13, 97, 7919])
def test_prime_has_only_one(p):
    assert sum_proper_divisors(p) == 1


@pytest.mark.parametrize("n", [6, 28, 496, 8128])
def test_perfect_numbers(n):
    assert sum_proper_divisors(n) == n


def test_small_inputs():
    assert sum_proper_divisors(1) == sum_proper_divisors(0) == amicable_sum(2)


def test_default_limit():
    assert amicable_sum() == 31626


def test_first_pair_only():
    assert amicable_sum(285) == 220 + 284


def test_perfect_numbers_excluded():
    assert amicable_sum(220) == amicable_sum(2)