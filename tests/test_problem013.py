import pytest

from eulerkit.problem013 import NUMBERS, leading_sum


def test_full_width_sum_matches_integer_sum():
    assert len(NUMBERS) == 100
    assert leading_sum(NUMBERS, 50) == sum(int(n) for n in NUMBERS)


def test_first_ten_digits():
    assert str(leading_sum())[:10] == "5537376230"


def test_leading_digits_match_full_sum():
    full = sum(int(n) for n in NUMBERS)
    assert str(leading_sum(NUMBERS, 15))[:10] == str(full)[:10]


def test_truncates_to_width():
    assert leading_sum(["12345"], 3) == 123


def test_additive_over_concatenation():
    first, second = NUMBERS[:40], NUMBERS[40:]
    assert leading_sum(first) + leading_sum(second) == leading_sum(NUMBERS)


def test_empty_input():
    assert leading_sum([], 5) == 0


def test_width_longer_than_number():
    assert leading_sum(["42"], 11) == 42


@pytest.mark.parametrize("width", [0, -1])
def test_bad_width(width):
    with pytest.raises(ValueError):
        leading_sum(NUMBERS, width)


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        leading_sum(["12x45"], 5)