"""Host entrypoints: guard, call the compiled kernel, sync scalars back."""

from __future__ import annotations

from snail_core.host import _host_int_value
from snail_vm.guards import require_operand_capacity
from snail_vm.kernels import add_kernel, magnitude, reduce_number
from snail_vm.structures import SnailfishNumber


def add(lhs: SnailfishNumber, rhs: SnailfishNumber) -> SnailfishNumber:
    """Snailfish addition: join both operands under a new root, then reduce."""
    require_operand_capacity(lhs, "add lhs")
    require_operand_capacity(rhs, "add rhs")
    return add_kernel(lhs, rhs)


def reduce(number: SnailfishNumber) -> SnailfishNumber:
    return reduce_number(number)


def magnitude_of(number: SnailfishNumber, position: int = 0) -> int:
    return _host_int_value(magnitude(number, position))


__all__ = ["add", "reduce", "magnitude_of"]
