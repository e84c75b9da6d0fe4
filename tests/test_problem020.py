import pytest

from eulerkit.problem020 import factorial_digit_sum


def test_example():
    assert factorial_digit_sum(10) == 27


def test_default():
    assert factorial_digit_sum() == 648


@pytest.mark.parametrize("n", range(6, 60))
def test_divisible_by_nine(n):
    assert factorial_digit_sum(n) % 9 == 0


def test_negative_rejected():
    with pytest.raises(ValueError):
        factorial_digit_sum(-3)