from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseError(ValueError):
    text: str
    column: int
    reason: str
    line: int | None = None

    def __str__(self) -> str:
        where = f"column {self.column}"
        if self.line is not None:
            where = f"line {self.line}, {where}"
        return f"invalid snailfish literal {self.text!r} ({where}): {self.reason}"


@dataclass(frozen=True)
class SnailfishCapacityError(RuntimeError):
    label: str
    slot: int
    capacity: int

    def __str__(self) -> str:
        return (
            f"snailfish capacity exceeded in {self.label} "
            f"(slot={self.slot}, operand capacity={self.capacity})"
        )


@dataclass(frozen=True)
class PairSearchConfigError(ValueError):
    message: str
    context: str | None = None

    def __str__(self) -> str:
        return self.message


__all__ = [
    "ParseError",
    "SnailfishCapacityError",
    "PairSearchConfigError",
]
