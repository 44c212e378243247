"""Initial board generation.

Values are drawn partition by partition: each partition is a run of values
that adds up to the target sum, so the whole board is always clearable in
principle. The result is shuffled so partitions are not laid out side by side.
"""
from __future__ import annotations

import random
from typing import List, MutableSequence, Sequence

from grapebox.utils.partitions import can_complete


def shuffle_values(values: MutableSequence[int], rng: random.Random) -> MutableSequence[int]:
    """In-place Fisher-Yates shuffle; returns ``values`` for chaining."""
    for i in range(len(values) - 1, 0, -1):
        j = rng.randint(0, i)
        values[i], values[j] = values[j], values[i]
    return values


def generate_valid_board(
    total_cells: int,
    target_sum: int,
    max_value: int,
    rng: random.Random | None = None,
) -> List[int]:
    """Return ``total_cells`` values whose sum is a multiple of ``target_sum``.

    Each value is drawn uniformly from the values in [1, min(budget, max_value)]
    that still let the remaining cells close every partition exactly, so the
    last partition is never left short.
    """
    if total_cells < 1 or target_sum < 1 or max_value < 1:
        raise ValueError("total_cells, target_sum and max_value must be positive")
    if not can_complete(target_sum, total_cells, target_sum, max_value):
        raise ValueError(
            f"cannot fill {total_cells} cells with partitions summing to {target_sum}"
        )
    rng = rng or random.Random()
    board: List[int] = []
    remaining = target_sum
    while len(board) < total_cells:
        cells_after = total_cells - len(board) - 1
        candidates = []
        for value in range(1, min(remaining, max_value) + 1):
            budget = remaining - value
            if budget == 0:
                budget = target_sum
            if can_complete(budget, cells_after, target_sum, max_value):
                candidates.append(value)
        value = rng.choice(candidates)
        board.append(value)
        remaining -= value
        if remaining == 0:
            remaining = target_sum
    return list(shuffle_values(board, rng))


def partition_count(values: Sequence[int], target_sum: int) -> int:
    """Number of complete partitions a generated board was built from."""
    total = sum(values)
    if total % target_sum:
        raise ValueError(f"board sum {total} is not a multiple of {target_sum}")
    return total // target_sum
