"""Difference between the square of the sum and the sum of the squares."""


def sum_of_squares(x):
    """Sum of ``i * i`` for ``i`` in 1..x."""
    return sum(i * i for i in range(1, x + 1))


def square_of_sum(x):
    """Square of the sum of 1..x."""
    return sum(range(1, x + 1)) ** 2


def sum_square_difference(x=100):
    """Square of the sum minus the sum of the squares for 1..x."""
    return square_of_sum(x) - sum_of_squares(x)


def sum_square_difference_single_pass(x=100):
    """Same as :func:`sum_square_difference`, accumulating both sums at once."""
    total = squares = 0
    for i in range(1, x + 1):
        total += i
        squares += i * i
    return total * total - squares