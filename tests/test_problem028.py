import pytest

from eulerkit.problem028 import spiral_diagonal_sum


def test_centre_only():
    assert spiral_diagonal_sum(0) == 1


def test_worked_example_five_by_five():
    assert spiral_diagonal_sum(2) == 101


def test_default():
    assert spiral_diagonal_sum() == 669171001


def test_outer_ring_corner_is_square_of_side():
    # The largest corner added by layer k is (2k + 1) ** 2.
    for layers in range(1, 10):
        added = spiral_diagonal_sum(layers) - spiral_diagonal_sum(layers - 1)
        side = 2 * layers + 1
        assert added == 4 * side * side - 6 * (side - 1)


def test_negative_layers():
    with pytest.raises(ValueError):
        spiral_diagonal_sum(-1)