from __future__ import annotations

from typing import Iterable

from snail_core.errors import ParseError
from snail_core.host import _host_list
from snail_vm.ontology import (
    NODE_BRANCH,
    NODE_LEAF,
    NODE_UNUSED,
    SNAIL_SIZE,
    VALUE_MAX,
    left_child,
    parent,
    right_child,
)
from snail_vm.structures import SnailfishNumber, number_from_slots

_DIGITS = "0123456789"


def parse_number(text: str, *, line: int | None = None) -> SnailfishNumber:
    """Parse one bracket literal such as ``[[1,2],3]`` into a tree.

    The cursor walks tree positions: ``[`` opens a branch and descends left,
    ``,`` steps to the right sibling, ``]`` climbs to the parent. A pending
    digit run is written as a leaf when the next delimiter closes it.
    """
    literal = text.strip()

    def fail(column: int, reason: str) -> ParseError:
        return ParseError(text=literal, column=column, reason=reason, line=line)

    if not literal:
        raise fail(0, "empty literal")
    tags = [NODE_UNUSED] * SNAIL_SIZE
    values = [0] * SNAIL_SIZE
    position = 0
    pending: int | None = None
    depth = 0
    closed = False

    def close_value(column: int) -> None:
        if pending is None:
            # Only a just-closed nested pair may stand in for a number.
            if tags[position] != NODE_BRANCH:
                raise fail(column, "expected a number or a pair")
            return
        if tags[position] != NODE_UNUSED:
            raise fail(column, "number follows a pair without ','")
        tags[position] = NODE_LEAF
        values[position] = pending

    for column, ch in enumerate(literal):
        if closed:
            raise fail(column, "trailing input after literal")
        if ch in _DIGITS:
            if depth == 0:
                raise fail(column, "number outside of a pair")
            pending = (0 if pending is None else pending * 10) + int(ch)
            if pending > VALUE_MAX:
                raise fail(column, "value out of range")
            continue
        if ch == "[":
            if pending is not None or tags[position] != NODE_UNUSED:
                raise fail(column, "unexpected '['")
            if right_child(position) >= SNAIL_SIZE:
                raise fail(column, f"nesting exceeds {SNAIL_SIZE}-slot capacity")
            tags[position] = NODE_BRANCH
            position = left_child(position)
            depth += 1
        elif ch == ",":
            # Left children sit at odd positions.
            if position % 2 == 0:
                raise fail(column, "unexpected ','")
            close_value(column)
            pending = None
            position += 1
        elif ch == "]":
            if position == 0:
                raise fail(column, "unbalanced ']'")
            if position % 2 == 1:
                raise fail(column, "pair is missing ','")
            close_value(column)
            pending = None
            position = parent(position)
            depth -= 1
            closed = depth == 0
        else:
            raise fail(column, f"unexpected character {ch!r}")
    if not closed:
        raise fail(len(literal), "unterminated literal")
    return number_from_slots(tags, values)


def parse_numbers(text: str | Iterable[str]) -> list[SnailfishNumber]:
    """Parse newline-separated literals, skipping blank lines.

    Aborts on the first malformed line; the error carries its line number.
    """
    lines = text.splitlines() if isinstance(text, str) else list(text)
    numbers = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        numbers.append(parse_number(line, line=line_no))
    return numbers


def format_number(number: SnailfishNumber, position: int = 0) -> str:
    tags = _host_list(number.tag)
    values = _host_list(number.value)

    def render(pos: int) -> str:
        tag = tags[pos]
        if tag == NODE_LEAF:
            return str(values[pos])
        if tag == NODE_BRANCH:
            return f"[{render(left_child(pos))},{render(right_child(pos))}]"
        return "_"

    return render(position)


__all__ = ["parse_number", "parse_numbers", "format_number"]
