"""Starting number below a limit that produces the longest Collatz chain."""


def longest_collatz_start(limit=1_000_000):
    """Start value below ``limit`` with the most chain terms; first one wins ties.

    Returns 0 when there is no start value to consider.
    """
    lengths = {1: 1}
    best_length = 0
    best_start = 0
    for start in range(2, limit):
        value = start
        steps = 0
        while True:
            value = value // 2 if value % 2 == 0 else 3 * value + 1
            steps += 1
            if value in lengths:
                break
        length = lengths[value] + steps
        lengths[start] = length
        if length > best_length:
            best_length = length
            best_start = start
    return best_start