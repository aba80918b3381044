from jax import jit, lax
import jax.numpy as jnp

from snail_vm.ontology import (
    EXPLODE_START,
    EXPLODE_STOP,
    LEFT_WEIGHT,
    NODE_BRANCH,
    NODE_LEAF,
    NODE_UNUSED,
    OPERAND_SIZE,
    RIGHT_WEIGHT,
    SNAIL_LEVELS,
    SNAIL_SIZE,
    SPLIT_THRESHOLD,
    level_slice,
)
from snail_vm.structures import SnailfishNumber
from snail_vm.traversal import DOCUMENT_ORDER, LEFT_EMBED, RIGHT_EMBED, leaf_neighbor


def _explode_site(number):
    # Slots 15..30 hold depth-4 pairs; index order is left-to-right there.
    deep = number.tag[EXPLODE_START:EXPLODE_STOP] == NODE_BRANCH
    found = jnp.any(deep)
    position = jnp.int32(EXPLODE_START) + jnp.argmax(deep.astype(jnp.int32))
    return found, position.astype(jnp.int32)


def _split_site(number):
    tags = number.tag[DOCUMENT_ORDER]
    values = number.value[DOCUMENT_ORDER]
    big = (tags == NODE_LEAF) & (values >= SPLIT_THRESHOLD)
    found = jnp.any(big)
    position = DOCUMENT_ORDER[jnp.argmax(big.astype(jnp.int32))]
    return found, position


def explode_at(number, position):
    """Collapse the depth-4 pair at ``position`` into ``Leaf(0)``.

    Its left value is added to the nearest leaf on the left and its right
    value to the nearest leaf on the right; missing neighbors absorb nothing.
    """
    tag, value = number.tag, number.value
    left = (position * 2) + 1
    right = (position * 2) + 2
    left_value = value[left]
    right_value = value[right]
    found_l, next_left = leaf_neighbor(number, left, -1)
    found_r, next_right = leaf_neighbor(number, right, 1)
    value = value.at[next_left].add(jnp.where(found_l, left_value, 0))
    value = value.at[next_right].add(jnp.where(found_r, right_value, 0))
    value = value.at[position].set(0).at[left].set(0).at[right].set(0)
    tag = (
        tag.at[position]
        .set(NODE_LEAF)
        .at[left]
        .set(NODE_UNUSED)
        .at[right]
        .set(NODE_UNUSED)
    )
    return SnailfishNumber(tag=tag, value=value)


def split_at(number, position):
    tag, value = number.tag, number.value
    current = value[position]
    half = current // 2
    left = (position * 2) + 1
    right = (position * 2) + 2
    tag = tag.at[position].set(NODE_BRANCH).at[left].set(NODE_LEAF).at[right].set(NODE_LEAF)
    value = value.at[position].set(0).at[left].set(half).at[right].set(current - half)
    return SnailfishNumber(tag=tag, value=value)


@jit
def reduce_step(number):
    """Apply one rewrite: the first explode, else the first split.

    Returns ``(number, changed)``.
    """
    do_explode, explode_pos = _explode_site(number)
    do_split, split_pos = _split_site(number)

    def explode(n):
        return explode_at(n, explode_pos)

    def split_or_keep(n):
        return lax.cond(do_split, lambda m: split_at(m, split_pos), lambda m: m, n)

    out = lax.cond(do_explode, explode, split_or_keep, number)
    return out, do_explode | do_split


@jit
def reduce_number(number):
    def cond(v):
        return v[1]

    def body(v):
        return reduce_step(v[0])

    final, _ = lax.while_loop(cond, body, (number, jnp.array(True)))
    return final


@jit
def add_kernel(lhs, rhs):
    tag = jnp.zeros(SNAIL_SIZE, dtype=jnp.int8).at[0].set(NODE_BRANCH)
    value = jnp.zeros(SNAIL_SIZE, dtype=jnp.int32)
    tag = tag.at[LEFT_EMBED].set(lhs.tag[:OPERAND_SIZE])
    tag = tag.at[RIGHT_EMBED].set(rhs.tag[:OPERAND_SIZE])
    value = value.at[LEFT_EMBED].set(lhs.value[:OPERAND_SIZE])
    value = value.at[RIGHT_EMBED].set(rhs.value[:OPERAND_SIZE])
    return reduce_number(SnailfishNumber(tag=tag, value=value))


@jit
def magnitude_table(number):
    """Magnitude of the subtree rooted at every slot, evaluated bottom-up."""
    tag = number.tag
    mags = jnp.where(tag == NODE_LEAF, number.value, 0).astype(jnp.int32)
    for depth in reversed(range(SNAIL_LEVELS - 1)):
        start, stop = level_slice(depth)
        idx = jnp.arange(start, stop, dtype=jnp.int32)
        combined = (LEFT_WEIGHT * mags[(idx * 2) + 1]) + (
            RIGHT_WEIGHT * mags[(idx * 2) + 2]
        )
        mags = mags.at[idx].set(jnp.where(tag[idx] == NODE_BRANCH, combined, mags[idx]))
    return mags


@jit
def magnitude(number, position=0):
    return magnitude_table(number)[position]


__all__ = [
    "explode_at",
    "split_at",
    "reduce_step",
    "reduce_number",
    "add_kernel",
    "magnitude_table",
    "magnitude",
]
