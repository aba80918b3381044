from __future__ import annotations

from typing import NamedTuple, Sequence

import jax
import jax.numpy as jnp

from snail_core.host import _host_bool_value, _host_list
from snail_vm.ontology import (
    NODE_BRANCH,
    NODE_LEAF,
    NODE_UNUSED,
    SNAIL_SIZE,
    Branch,
    Leaf,
    Slot,
    Unused,
)


class SnailfishNumber(NamedTuple):
    # tag: int8 array [63] (or [N,63] when stacked); NODE_* per slot
    # value: int32 array, same shape; zero wherever tag != NODE_LEAF
    tag: jnp.ndarray
    value: jnp.ndarray


def init_number() -> SnailfishNumber:
    return SnailfishNumber(
        tag=jnp.full(SNAIL_SIZE, NODE_UNUSED, dtype=jnp.int8),
        value=jnp.zeros(SNAIL_SIZE, dtype=jnp.int32),
    )


def number_from_slots(tags: Sequence[int], values: Sequence[int]) -> SnailfishNumber:
    if len(tags) != SNAIL_SIZE or len(values) != SNAIL_SIZE:
        raise ValueError(
            f"expected {SNAIL_SIZE} slots, got tags={len(tags)} values={len(values)}"
        )
    return SnailfishNumber(
        tag=jnp.asarray(tags, dtype=jnp.int8),
        value=jnp.asarray(values, dtype=jnp.int32),
    )


def stack_numbers(numbers: Sequence[SnailfishNumber]) -> SnailfishNumber:
    """Stack single trees into one batched tree with ``[N, 63]`` arrays."""
    if not numbers:
        raise ValueError("stack_numbers requires at least one number")
    return SnailfishNumber(
        tag=jnp.stack([n.tag for n in numbers]),
        value=jnp.stack([n.value for n in numbers]),
    )


def take_number(stacked: SnailfishNumber, index) -> SnailfishNumber:
    return jax.tree_util.tree_map(lambda a: a[index], stacked)


def batch_size(stacked: SnailfishNumber) -> int:
    if stacked.tag.ndim != 2:
        raise ValueError("expected a stacked number batch")
    return int(stacked.tag.shape[0])


def decode_slots(number: SnailfishNumber) -> list[Slot]:
    tags = _host_list(number.tag)
    values = _host_list(number.value)
    slots: list[Slot] = []
    for tag, value in zip(tags, values):
        if tag == NODE_LEAF:
            slots.append(Leaf(int(value)))
        elif tag == NODE_BRANCH:
            slots.append(Branch())
        else:
            slots.append(Unused())
    return slots


def slot(number: SnailfishNumber, position: int) -> Slot:
    return decode_slots(number)[position]


def numbers_equal(a: SnailfishNumber, b: SnailfishNumber) -> bool:
    same_tag = jnp.array_equal(a.tag, b.tag)
    same_value = jnp.array_equal(a.value, b.value)
    return _host_bool_value(same_tag & same_value)


__all__ = [
    "SnailfishNumber",
    "init_number",
    "number_from_slots",
    "stack_numbers",
    "take_number",
    "batch_size",
    "decode_slots",
    "slot",
    "numbers_equal",
]
