"""Number of lattice paths through a square grid moving only right and down."""

from functools import lru_cache
from itertools import accumulate


def _check(grid_size):
    if grid_size < 0:
        raise ValueError(f"grid size must not be negative, got {grid_size}")


def count_paths_recursive(grid_size):
    """Count paths by walking every route; practical only for small grids."""
    _check(grid_size)

    def walk(x, y):
        if x == grid_size and y == grid_size:
            return 1
        total = 0
        if x + 1 <= grid_size:
            total += walk(x + 1, y)
        if y + 1 <= grid_size:
            total += walk(x, y + 1)
        return total

    return walk(0, 0)


@lru_cache(maxsize=None)
def count_paths(grid_size=20):
    """Count paths by filling a table of routes from each corner point."""
    _check(grid_size)
    row = [1] * (grid_size + 1)
    for _ in range(grid_size):
        row = list(accumulate(row))
    return row[-1]