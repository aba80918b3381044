"""Static slot orderings for the 63-slot tree.

``DOCUMENT_ORDER`` lists slots in pre-order (node, left subtree, right
subtree). Restricted to leaves this is the left-to-right order in which the
numbers appear in the bracket literal, which is what neighbor lookup needs.
"""

from __future__ import annotations

from functools import partial

import jax
import jax.numpy as jnp

from snail_core.host import _host_bool_value, _host_int_value
from snail_vm.ontology import (
    NODE_LEAF,
    OPERAND_SIZE,
    SNAIL_SIZE,
    left_child,
    right_child,
)
from snail_vm.structures import SnailfishNumber


def _preorder(position: int = 0) -> list[int]:
    if position >= SNAIL_SIZE:
        return []
    return (
        [position]
        + _preorder(left_child(position))
        + _preorder(right_child(position))
    )


def _embedding(source: int, target: int, out: dict[int, int]) -> None:
    # Same walk as a recursive subtree copy: source child -> target child.
    if source >= OPERAND_SIZE:
        return
    out[source] = target
    _embedding(left_child(source), left_child(target), out)
    _embedding(right_child(source), right_child(target), out)


def _embed_table(target_root: int) -> list[int]:
    out: dict[int, int] = {}
    _embedding(0, target_root, out)
    return [out[i] for i in range(OPERAND_SIZE)]


DOCUMENT_ORDER_HOST = tuple(_preorder())
DOCUMENT_RANK_HOST = tuple(
    rank for _, rank in sorted((slot, rank) for rank, slot in enumerate(DOCUMENT_ORDER_HOST))
)
LEFT_EMBED_HOST = tuple(_embed_table(1))
RIGHT_EMBED_HOST = tuple(_embed_table(2))

DOCUMENT_ORDER = jnp.array(DOCUMENT_ORDER_HOST, dtype=jnp.int32)
DOCUMENT_RANK = jnp.array(DOCUMENT_RANK_HOST, dtype=jnp.int32)
LEFT_EMBED = jnp.array(LEFT_EMBED_HOST, dtype=jnp.int32)
RIGHT_EMBED = jnp.array(RIGHT_EMBED_HOST, dtype=jnp.int32)


def leaf_neighbor(number: SnailfishNumber, position, step: int):
    """Nearest leaf before (step=-1) or after (step=+1) ``position``.

    ``position`` must be a leaf slot. Returns ``(found, slot)``; ``slot`` is
    0 when nothing was found.
    """
    is_leaf = number.tag[DOCUMENT_ORDER] == NODE_LEAF
    ranks = jnp.arange(SNAIL_SIZE, dtype=jnp.int32)
    rank = DOCUMENT_RANK[position]
    if step < 0:
        candidates = is_leaf & (ranks < rank)
        best = jnp.max(jnp.where(candidates, ranks, jnp.int32(-1)))
    else:
        candidates = is_leaf & (ranks > rank)
        best = jnp.min(jnp.where(candidates, ranks, jnp.int32(SNAIL_SIZE)))
    found = jnp.any(candidates)
    safe_rank = jnp.where(found, best, jnp.int32(0))
    return found, jnp.where(found, DOCUMENT_ORDER[safe_rank], jnp.int32(0))


@partial(jax.jit, static_argnums=(2,))
def _leaf_neighbor_jit(number, position, step):
    found, where = leaf_neighbor(number, position, step)
    return found, where, number.value[where]


def _leaf_neighbor_host(number: SnailfishNumber, position: int, step: int):
    # Only a leaf has a place in the left-to-right sequence of leaves.
    if not _host_bool_value(number.tag[position] == NODE_LEAF):
        return None
    found, where, value = _leaf_neighbor_jit(
        number, jnp.int32(position), step
    )
    if not _host_bool_value(found):
        return None
    return _host_int_value(where), _host_int_value(value)


def leaf_left_of(number: SnailfishNumber, position: int) -> tuple[int, int] | None:
    """``(slot, value)`` of the nearest leaf left of leaf ``position``.

    ``None`` when ``position`` is not a leaf or is the leftmost one.
    """
    return _leaf_neighbor_host(number, position, -1)


def leaf_right_of(number: SnailfishNumber, position: int) -> tuple[int, int] | None:
    """``(slot, value)`` of the nearest leaf right of leaf ``position``, if any."""
    return _leaf_neighbor_host(number, position, 1)


__all__ = [
    "DOCUMENT_ORDER",
    "DOCUMENT_RANK",
    "DOCUMENT_ORDER_HOST",
    "DOCUMENT_RANK_HOST",
    "LEFT_EMBED",
    "RIGHT_EMBED",
    "LEFT_EMBED_HOST",
    "RIGHT_EMBED_HOST",
    "leaf_neighbor",
    "leaf_left_of",
    "leaf_right_of",
]
