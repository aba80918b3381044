from __future__ import annotations

from typing import NamedTuple, Sequence

import jax
from jax import jit, lax
import jax.numpy as jnp

from snail_core.host import _host_int_value
from snail_vm.config import DEFAULT_PAIR_SEARCH_CONFIG, PairSearchConfig
from snail_vm.guards import require_operand_capacity
from snail_vm.kernels import add_kernel, magnitude
from snail_vm.literal import parse_numbers
from snail_vm.structures import (
    SnailfishNumber,
    batch_size,
    stack_numbers,
    take_number,
)


class HomeworkResult(NamedTuple):
    count: int
    sum_magnitude: int | None
    best_pair_magnitude: int | None


@jit
def _fold_sum(stacked):
    first = take_number(stacked, 0)
    rest = jax.tree_util.tree_map(lambda a: a[1:], stacked)

    def step(acc, item):
        return add_kernel(acc, item), None

    total, _ = lax.scan(step, first, rest)
    return total


@jit
def _pair_magnitudes(stacked, lhs_idx, rhs_idx):
    def one(i, j):
        return magnitude(add_kernel(take_number(stacked, i), take_number(stacked, j)))

    return jax.vmap(one)(lhs_idx, rhs_idx)


def _as_stacked(numbers) -> SnailfishNumber:
    if isinstance(numbers, SnailfishNumber):
        return numbers
    return stack_numbers(list(numbers))


def sum_numbers(numbers: Sequence[SnailfishNumber] | SnailfishNumber) -> SnailfishNumber | None:
    """Left fold of snailfish addition over the batch."""
    if not isinstance(numbers, SnailfishNumber) and len(numbers) == 0:
        return None
    stacked = require_operand_capacity(_as_stacked(numbers), "sum_numbers")
    return _fold_sum(stacked)


def sum_magnitude(numbers: Sequence[SnailfishNumber] | SnailfishNumber) -> int | None:
    total = sum_numbers(numbers)
    if total is None:
        return None
    return _host_int_value(magnitude(total))


def ordered_pairs(count: int) -> list[tuple[int, int]]:
    return [(a, b) for a in range(count) for b in range(count) if a != b]


def best_pair_magnitude(
    numbers: Sequence[SnailfishNumber] | SnailfishNumber,
    cfg: PairSearchConfig = DEFAULT_PAIR_SEARCH_CONFIG,
) -> int | None:
    """Largest magnitude of ``a + b`` over ordered pairs of distinct entries."""
    if not isinstance(numbers, SnailfishNumber) and len(numbers) < 2:
        return None
    stacked = require_operand_capacity(_as_stacked(numbers), "best_pair_magnitude")
    pairs = ordered_pairs(batch_size(stacked))
    if not pairs:
        return None
    chunk = min(cfg.chunk_size, len(pairs))
    best = None
    for start in range(0, len(pairs), chunk):
        block = pairs[start : start + chunk]
        # Pad with a real pair so the max is unaffected.
        block = block + [pairs[0]] * (chunk - len(block))
        lhs_idx = jnp.array([a for a, _ in block], dtype=jnp.int32)
        rhs_idx = jnp.array([b for _, b in block], dtype=jnp.int32)
        mags = _pair_magnitudes(stacked, lhs_idx, rhs_idx)
        value = _host_int_value(jnp.max(mags))
        best = value if best is None else max(best, value)
    return best


def solve_numbers(
    numbers: Sequence[SnailfishNumber],
    cfg: PairSearchConfig = DEFAULT_PAIR_SEARCH_CONFIG,
) -> HomeworkResult:
    if not numbers:
        return HomeworkResult(count=0, sum_magnitude=None, best_pair_magnitude=None)
    stacked = stack_numbers(list(numbers))
    return HomeworkResult(
        count=len(numbers),
        sum_magnitude=sum_magnitude(stacked),
        best_pair_magnitude=best_pair_magnitude(stacked, cfg),
    )


def solve_text(
    text: str, cfg: PairSearchConfig = DEFAULT_PAIR_SEARCH_CONFIG
) -> HomeworkResult:
    return solve_numbers(parse_numbers(text), cfg)


__all__ = [
    "HomeworkResult",
    "sum_numbers",
    "sum_magnitude",
    "ordered_pairs",
    "best_pair_magnitude",
    "solve_numbers",
    "solve_text",
]
