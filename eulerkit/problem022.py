"""Alphabetical name scores for a list of names."""

from pathlib import Path


def read_names(path):
    """Read a names file: a count followed by whitespace-separated names.

    Only the first ``count`` names are returned.
    """
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError(f"{path}: empty names file")
    count = int(tokens[0])
    if count < 0:
        raise ValueError(f"{path}: negative name count {count}")
    names = tokens[1 : 1 + count]
    if len(names) < count:
        raise ValueError(f"{path}: expected {count} names, got {len(names)}")
    return names


def name_worth(name):
    """Sum of the alphabetical positions of the letters of ``name``."""
    return sum(ord(letter) - ord("A") + 1 for letter in name)


def total_score(names):
    """Sum of each name's worth times its 1-based position, in the given order."""
    return sum(name_worth(name) * position for position, name in enumerate(names, 1))


def solve(path):
    """Read the names at ``path``, sort them and return their total score."""
    return total_score(sorted(read_names(path)))