"""Snailfish arithmetic on array-encoded trees.

Public surface re-exported from the ``snail_*`` packages so callers and tests
can ``import snailfish as sf``.
"""

from snail_core.errors import (
    PairSearchConfigError,
    ParseError,
    SnailfishCapacityError,
)
from snail_vm.config import DEFAULT_PAIR_SEARCH_CONFIG, PairSearchConfig
from snail_vm.facade import add, magnitude_of, reduce
from snail_vm.guards import require_operand_capacity
from snail_vm.homework import (
    HomeworkResult,
    best_pair_magnitude,
    ordered_pairs,
    solve_numbers,
    solve_text,
    sum_magnitude,
    sum_numbers,
)
from snail_vm.kernels import (
    add_kernel,
    explode_at,
    magnitude,
    magnitude_table,
    reduce_number,
    reduce_step,
    split_at,
)
from snail_vm.literal import format_number, parse_number, parse_numbers
from snail_vm.ontology import (
    EXPLODE_START,
    EXPLODE_STOP,
    NODE_BRANCH,
    NODE_LEAF,
    NODE_UNUSED,
    OPERAND_SIZE,
    SNAIL_SIZE,
    SPLIT_THRESHOLD,
    Branch,
    Leaf,
    Unused,
)
from snail_vm.structures import (
    SnailfishNumber,
    decode_slots,
    init_number,
    number_from_slots,
    numbers_equal,
    slot,
    stack_numbers,
    take_number,
)
from snail_vm.traversal import (
    DOCUMENT_ORDER,
    DOCUMENT_ORDER_HOST,
    DOCUMENT_RANK,
    leaf_left_of,
    leaf_right_of,
)

__all__ = [
    "PairSearchConfigError",
    "ParseError",
    "SnailfishCapacityError",
    "DEFAULT_PAIR_SEARCH_CONFIG",
    "PairSearchConfig",
    "add",
    "magnitude_of",
    "reduce",
    "require_operand_capacity",
    "HomeworkResult",
    "best_pair_magnitude",
    "ordered_pairs",
    "solve_numbers",
    "solve_text",
    "sum_magnitude",
    "sum_numbers",
    "add_kernel",
    "explode_at",
    "magnitude",
    "magnitude_table",
    "reduce_number",
    "reduce_step",
    "split_at",
    "format_number",
    "parse_number",
    "parse_numbers",
    "EXPLODE_START",
    "EXPLODE_STOP",
    "NODE_BRANCH",
    "NODE_LEAF",
    "NODE_UNUSED",
    "OPERAND_SIZE",
    "SNAIL_SIZE",
    "SPLIT_THRESHOLD",
    "Branch",
    "Leaf",
    "Unused",
    "SnailfishNumber",
    "decode_slots",
    "init_number",
    "number_from_slots",
    "numbers_equal",
    "slot",
    "stack_numbers",
    "take_number",
    "DOCUMENT_ORDER",
    "DOCUMENT_ORDER_HOST",
    "DOCUMENT_RANK",
    "leaf_left_of",
    "leaf_right_of",
]
