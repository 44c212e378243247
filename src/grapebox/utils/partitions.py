"""Feasibility checks for splitting a run of cells into target-sum partitions."""
from __future__ import annotations


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def can_pack(cells: int, target_sum: int, max_value: int) -> bool:
    """True when ``cells`` values in [1, max_value] can form whole partitions.

    Each partition holds between ceil(target / max_value) and target cells, so
    k partitions cover n cells iff k * shortest <= n <= k * target.
    """
    if cells == 0:
        return True
    shortest = _ceil_div(target_sum, max_value)
    return _ceil_div(cells, target_sum) <= cells // shortest


def can_complete(remaining: int, cells: int, target_sum: int, max_value: int) -> bool:
    """True when ``cells`` more values can close the open partition and fill whole ones.

    ``remaining`` is the open partition's budget; ``remaining == target_sum``
    means no partition is open.
    """
    if remaining == target_sum:
        return can_pack(cells, target_sum, max_value)
    shortest = _ceil_div(remaining, max_value)
    for length in range(shortest, min(remaining, cells) + 1):
        if can_pack(cells - length, target_sum, max_value):
            return True
    return False
