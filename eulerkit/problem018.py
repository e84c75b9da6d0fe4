"""Maximum top-to-bottom path sum through a number pyramid."""

from pathlib import Path

_INITIAL_PAD = 16


def read_pyramid(path):
    """Read a pyramid file: a row count followed by the rows' numbers."""
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError(f"{path}: empty pyramid file")
    values = [int(token) for token in tokens]
    count, numbers = values[0], values[1:]
    if count < 0:
        raise ValueError(f"{path}: negative row count {count}")
    needed = count * (count + 1) // 2
    if len(numbers) < needed:
        raise ValueError(
            f"{path}: expected {needed} numbers for {count} rows, got {len(numbers)}"
        )
    rows = []
    position = 0
    for width in range(1, count + 1):
        rows.append(numbers[position : position + width])
        position += width
    return rows


def format_pyramid(rows):
    """Render rows as an indented pyramid, one line per row."""
    lines = []
    for depth, row in enumerate(rows):
        pad = " " * max(_INITIAL_PAD - depth, 1)
        lines.append(pad + "".join(f" {value:02d}" for value in row))
    return "".join(line + "\n" for line in lines)


def _cumulative(rows):
    """Best path sum reaching each cell, row by row."""
    result = []
    for row in rows:
        if not result:
            result.append(list(row))
            continue
        above = result[-1]
        last = len(row) - 1
        sums = []
        for j, value in enumerate(row):
            if j == 0:
                sums.append(value + above[0])
            elif j == last:
                sums.append(value + above[j - 1])
            else:
                sums.append(value + max(above[j - 1], above[j]))
        result.append(sums)
    return result


def max_path_sum(rows):
    """Largest sum from apex to base; never below 0."""
    cumulative = _cumulative(rows)
    if not cumulative:
        return 0
    return max(0, *cumulative[-1])


def solve(path):
    """Read the pyramid at ``path``, print it and its sums, return the best sum."""
    rows = read_pyramid(path)
    print("Pyramid:")
    print(format_pyramid(rows), end="")
    print()
    print("Cumulative pyramid:")
    print(format_pyramid(_cumulative(rows)), end="")
    return max_path_sum(rows)