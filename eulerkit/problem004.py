"""Largest palindrome made from the product of two numbers in a range."""


def is_palindrome(x):
    """Return True if the decimal form of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]


def largest_palindrome_product(low=100, high=1000):
    """Largest palindromic product ``i * j`` with ``low <= j <= i < high``, or 0."""
    best = 0
    for i in range(low, high):
        for j in range(low, i + 1):
            number = i * j
            if number > best and is_palindrome(number):
                best = number
    return best