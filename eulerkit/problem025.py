"""Index of the first Fibonacci term with a given number of digits."""


def first_fibonacci_with_digits(digits=1000):
    """Index of the first Fibonacci term with at least ``digits`` digits.

    The search starts at the second term, so 2 is returned for one digit or fewer.
    """
    if digits <= 1:
        return 2
    threshold = 10 ** (digits - 1)
    index = 2
    previous, current = 1, 1
    while current < threshold:
        index += 1
        previous, current = current, current + previous
    return index