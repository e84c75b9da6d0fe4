"""Number of ways to make an amount from a set of coins."""

COINS = (200, 100, 50, 20, 10, 5, 2, 1)


def count_coin_combinations(coins=COINS, target=1000):
    """Number of multisets of ``coins`` adding up to ``target``."""
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]