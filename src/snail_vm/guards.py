from __future__ import annotations

import jax.numpy as jnp

from snail_core.errors import SnailfishCapacityError
from snail_core.host import _host_bool_value, _host_int_value
from snail_vm.ontology import NODE_UNUSED, OPERAND_SIZE
from snail_vm.structures import SnailfishNumber


def require_operand_capacity(number: SnailfishNumber, label: str) -> SnailfishNumber:
    """Reject operands that reach the last tree level.

    Such operands (nesting deeper than four pairs) cannot be moved one level
    down by an addition; the kernel would drop those slots. Always on.
    Works for single and stacked numbers.
    """
    tail = number.tag[..., OPERAND_SIZE:] != NODE_UNUSED
    # SYNC: host check before handing operands to compiled kernels.
    if _host_bool_value(jnp.any(tail)):
        flat = jnp.any(tail.reshape(-1, tail.shape[-1]), axis=0)
        slot = OPERAND_SIZE + _host_int_value(jnp.argmax(flat.astype(jnp.int32)))
        raise SnailfishCapacityError(label=label, slot=slot, capacity=OPERAND_SIZE)
    return number


__all__ = ["require_operand_capacity"]
