from __future__ import annotations

from dataclasses import dataclass

# --- 1. Ontology (Node tags) ---
# The tag array is the only discriminant; 0 is a legal leaf value.
NODE_UNUSED = 0
NODE_BRANCH = 1
NODE_LEAF = 2


# --- 2. Geometry ---
# Complete binary tree, root at depth 0, deepest slots at depth 5.
SNAIL_LEVELS = 6
SNAIL_SIZE = (1 << SNAIL_LEVELS) - 1  # 63
EXPLODE_DEPTH = 4
EXPLODE_START = (1 << EXPLODE_DEPTH) - 1  # 15
EXPLODE_STOP = (1 << (EXPLODE_DEPTH + 1)) - 1  # 31
# Operands of an addition move one level down; only slots above the last
# level fit.
OPERAND_SIZE = EXPLODE_STOP
SPLIT_THRESHOLD = 10
# Leaf values are stored as int32.
VALUE_MAX = (1 << 31) - 1

LEFT_WEIGHT = 3
RIGHT_WEIGHT = 2


def left_child(position: int) -> int:
    return (position * 2) + 1


def right_child(position: int) -> int:
    return (position * 2) + 2


def parent(position: int) -> int:
    return (position - 1) // 2


def level_slice(depth: int) -> tuple[int, int]:
    """Half-open slot range covering every slot at ``depth``."""
    return (1 << depth) - 1, (1 << (depth + 1)) - 1


# Host-side slot views (decoded from the tag/value arrays).
@dataclass(frozen=True)
class Unused:
    pass


@dataclass(frozen=True)
class Branch:
    pass


@dataclass(frozen=True)
class Leaf:
    value: int


Slot = Unused | Branch | Leaf


__all__ = [
    "NODE_UNUSED",
    "NODE_BRANCH",
    "NODE_LEAF",
    "SNAIL_LEVELS",
    "SNAIL_SIZE",
    "EXPLODE_DEPTH",
    "EXPLODE_START",
    "EXPLODE_STOP",
    "OPERAND_SIZE",
    "SPLIT_THRESHOLD",
    "VALUE_MAX",
    "LEFT_WEIGHT",
    "RIGHT_WEIGHT",
    "left_child",
    "right_child",
    "parent",
    "level_slice",
    "Unused",
    "Branch",
    "Leaf",
    "Slot",
]
