from eulerkit.problem025 import first_fibonacci_with_digits


def test_worked_example():
    assert first_fibonacci_with_digits(3) == 12


def test_single_digit_starts_at_second_term():
    assert first_fibonacci_with_digits(1) == 2
    assert first_fibonacci_with_digits(0) == first_fibonacci_with_digits(1)


def test_default():
    assert first_fibonacci_with_digits() == 4782


def test_index_grows_steadily():
    indices = [first_fibonacci_with_digits(d) for d in range(2, 60)]
    for smaller, larger in zip(indices, indices[1:]):
        assert smaller < larger <= smaller + 5