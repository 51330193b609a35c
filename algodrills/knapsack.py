"""Dynamic programming over one- and two-dimensional knapsack tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` stairs taking one or two steps; 0, 1 and 2 map to themselves."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


def stairs_ways(n: int, m: int) -> int:
    """Ways to climb ``n`` stairs taking between 1 and ``m`` steps at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    dp = [1] + [0] * n
    for i in range(1, n + 1):
        dp[i] = sum(dp[max(0, i - m):i])
    return dp[n]


def get_way(n: int, m: int) -> int:
    """Stair count seeded with one way at step 1 and two at step 2.

    Returns 0 when ``m`` exceeds ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if m > n:
        return 0
    dp = [0] * (max(n, 2) + 1)
    dp[1] = 1
    dp[2] = 2
    for i in range(2, n + 1):
        dp[i] += sum(dp[i - j] for j in range(1, m + 1) if i - j > 0)
    return dp[n]


def _items(weights: Sequence[int], values: Sequence[int], capacity: int) -> list[tuple[int, int]]:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = list(zip(weights, values, strict=True))
    if any(weight < 0 for weight, _ in items):
        raise ValueError("weights must not be negative")
    return items


def complete_knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> list[int]:
    """Best value for every capacity 0..capacity when items may be reused."""
    dp = [0] * (capacity + 1) if capacity >= 0 else []
    for weight, value in _items(weights, values, capacity):
        for j in range(weight, capacity + 1):
            dp[j] = max(dp[j], dp[j - weight] + value)
    return dp


def zero_one_knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> list[int]:
    """Best value for every capacity 0..capacity when each item is used at most once."""
    dp = [0] * (capacity + 1) if capacity >= 0 else []
    for weight, value in _items(weights, values, capacity):
        for j in range(capacity, weight - 1, -1):
            dp[j] = max(dp[j], dp[j - weight] + value)
    return dp


def _best_fill(nums: list[int], limit: int) -> int:
    dp = [0] * (limit + 1)
    for num in nums:
        for j in range(limit, num - 1, -1):
            dp[j] = max(dp[j], dp[j - num] + num)
    return dp[limit]


def can_partition(nums: Iterable[int]) -> bool:
    """Whether ``nums`` splits into two subsets of equal sum."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("numbers must not be negative")
    total = sum(values)
    if total % 2:
        return False
    half = total // 2
    return _best_fill(values, half) == half


def change(amount: int, coins: Iterable[int]) -> int:
    """Number of coin combinations that make up ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    dp = [1] + [0] * amount
    for coin in denominations:
        for j in range(coin, amount + 1):
            dp[j] += dp[j - coin]
    return dp[amount]


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smallest possible weight left after smashing stones together pairwise."""
    weights = list(stones)
    if any(weight < 0 for weight in weights):
        raise ValueError("stone weights must not be negative")
    total = sum(weights)
    best = _best_fill(weights, total // 2)
    return total - 2 * best


def find_max_form(strs: Iterable[str], m: int, n: int) -> int:
    """Largest number of binary strings using at most ``m`` zeros and ``n`` ones."""
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for text in strs:
        zeros = text.count("0")
        ones = len(text) - zeros
        for i in range(m, zeros - 1, -1):
            row, source = dp[i], dp[i - zeros]
            for j in range(n, ones - 1, -1):
                row[j] = max(row[j], source[j - ones] + 1)
    return dp[m][n]


def find_target_sum_ways(nums: Iterable[int], target: int) -> int:
    """Ways to assign + or - to each number so that the total equals ``target``."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("numbers must not be negative")
    total = sum(values)
    if abs(target) > total or (target + total) % 2:
        return 0
    bag = (target + total) // 2
    dp = [1] + [0] * bag
    for value in values:
        for j in range(bag, value - 1, -1):
            dp[j] += dp[j - value]
    return dp[bag]


def find_sum_ways(nums: Iterable[int], target: int) -> int:
    """Number of multisets drawn from ``nums`` (with repetition) that sum to ``target``."""
    if target < 0:
        raise ValueError("target must not be negative")
    values = list(nums)
    if any(value <= 0 for value in values):
        raise ValueError("numbers must be positive")
    dp = [1] + [0] * target
    for value in values:
        for j in range(value, target + 1):
            dp[j] += dp[j - value]
    return dp[target]