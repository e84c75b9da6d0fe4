import pytest

from eulerkit.problem006 import (
    square_of_sum,
    sum_of_squares,
    sum_square_difference,
    sum_square_difference_single_pass,
)


def test_worked_example():
    assert sum_square_difference(10) == 2640


def test_default():
    assert sum_square_difference() == 25164150
    assert sum_square_difference_single_pass() == sum_square_difference()


@pytest.mark.parametrize("x", range(0, 150))
def test_methods_agree(x):
    assert sum_square_difference(x) == sum_square_difference_single_pass(x)


@pytest.mark.parametrize("x", range(0, 50))
def test_parts_are_consistent(x):
    assert square_of_sum(x) - sum_of_squares(x) == sum_square_difference(x)
    assert square_of_sum(x) >= sum_of_squares(x)


def test_single_term():
    assert sum_of_squares(1) == 1
    assert square_of_sum(1) == 1
    assert sum_square_difference(1) == 0