import pytest

from eulerkit.problem001 import sum_divisible_by, sum_multiples, sum_multiples_loop


def test_worked_example():
    assert sum_multiples_loop(10) == 23
    assert sum_multiples(10) == 23


def test_default_limit():
    assert sum_multiples() == 233168
    assert sum_multiples_loop() == sum_multiples()


@pytest.mark.parametrize("limit", range(0, 200))
def test_loop_and_formula_agree(limit):
    assert sum_multiples_loop(limit) == sum_multiples(limit)


@pytest.mark.parametrize("n", [1, 3, 5, 15, 42])
def test_divisible_by_edges(n):
    assert sum_divisible_by(n, n) == 0
    assert sum_divisible_by(n, n + 1) == n


def test_step_one_matches_range_sum():
    assert sum_divisible_by(1, 50) == sum(range(50))


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_step_rejected(n):
    with pytest.raises(ValueError):
        sum_divisible_by(n, 10)