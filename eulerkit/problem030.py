"""Numbers equal to the sum of a power of their digits."""


def digit_power_sum(x, power=5):
    """Sum of each decimal digit of ``x`` raised to ``power``; 0 for ``x`` of 0."""
    if x < 0:
        raise ValueError(f"number must not be negative, got {x}")
    if x == 0:
        return 0
    return sum(int(digit) ** power for digit in str(x))


def digit_power_numbers_sum(power=5, limit=1_000_000):
    """Sum of the numbers from 2 below ``limit`` equal to their digit power sum."""
    table = {str(digit): digit**power for digit in range(10)}
    return sum(
        i for i in range(2, limit) if i == sum(map(table.__getitem__, str(i)))
    )