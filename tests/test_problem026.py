import pytest

from eulerkit.problem026 import cycle_length, longest_cycle_denominator


def test_one_seventh():
    assert cycle_length(7) == 6


@pytest.mark.parametrize("prime", [7, 11, 13, 17, 19, 23, 29, 31, 37])
def test_prime_cycle_divides_prime_minus_one(prime):
    assert (prime - 1) % cycle_length(prime) == 0


def test_cycle_length_rejects_zero():
    with pytest.raises(ValueError):
        cycle_length(0)


def test_worked_example_below_ten():
    assert longest_cycle_denominator(10) == 7


def test_result_has_the_longest_cycle():
    best = longest_cycle_denominator(60)
    assert best < 60
    assert all(cycle_length(best) >= cycle_length(d) for d in range(1, 60))


def test_default():
    assert longest_cycle_denominator() == 983


def test_limit_too_small():
    with pytest.raises(ValueError):
        longest_cycle_denominator(1)