import pytest

from eulerkit.problem018 import format_pyramid, max_path_sum, read_pyramid, solve

EXAMPLE = [[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]]


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "pyramid.txt"
    path.write_text("4\n3\n7 4\n2 4 6\n8 5 9 3\n")
    return path


def test_read_pyramid(example_file):
    assert read_pyramid(example_file) == EXAMPLE


def test_example_path_sum():
    assert max_path_sum(EXAMPLE) == 23


def test_input_not_modified():
    rows = [list(r) for r in EXAMPLE]
    max_path_sum(rows)
    assert rows == EXAMPLE


def test_single_row():
    assert max_path_sum([[42]]) == 42


def test_empty_and_negative_floor_at_zero():
    assert max_path_sum([]) == 0
    assert max_path_sum([[-5]]) == 0


def test_format_pyramid_layout():
    text = format_pyramid([[1], [2, 3]])
    assert text == " " * 16 + " 01\n" + " " * 15 + " 02 03\n"


def test_solve_prints_and_returns(example_file, capsys):
    assert solve(example_file) == max_path_sum(EXAMPLE)
    out = capsys.readouterr().out
    assert "Pyramid:" in out
    assert "Cumulative pyramid:" in out
    assert format_pyramid(EXAMPLE) in out


def test_truncated_file_rejected(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("3\n1\n2 3\n")
    with pytest.raises(ValueError):
        read_pyramid(path)


def test_empty_file_rejected(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    with pytest.raises(ValueError):
        read_pyramid(path)