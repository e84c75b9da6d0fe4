"""Sum of the diagonals of a number spiral."""


def spiral_diagonal_sum(layers=500):
    """Diagonal sum of a spiral with ``layers`` rings around the centre 1.

    A spiral of side ``n`` has ``(n - 1) // 2`` layers.
    """
    if layers < 0:
        raise ValueError(f"layer count must not be negative, got {layers}")
    return 1 + sum(
        (2 * i - 1) ** 2 + 2 * i * j for i in range(1, layers + 1) for j in range(1, 5)
    )