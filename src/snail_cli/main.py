from __future__ import annotations

import sys
import time

from snail_core.errors import ParseError, SnailfishCapacityError
from snail_vm.config import DEFAULT_PAIR_SEARCH_CONFIG, PairSearchConfig
from snail_vm.homework import HomeworkResult, best_pair_magnitude, sum_magnitude
from snail_vm.literal import parse_numbers
from snail_vm.structures import stack_numbers

USAGE = "usage: snailfish [--part 1|2] [--chunk-size N] PATH|-"


def _fmt(value) -> str:
    return "n/a" if value is None else str(value)


def run_homework_lines(
    lines,
    *,
    part: int | None = None,
    cfg: PairSearchConfig = DEFAULT_PAIR_SEARCH_CONFIG,
    out=None,
) -> HomeworkResult:
    out = sys.stdout if out is None else out
    t0 = time.perf_counter()
    numbers = parse_numbers(list(lines))
    parse_ms = (time.perf_counter() - t0) * 1000
    print(f"⚡ Snailfish: {len(numbers)} numbers", file=out)
    total = None
    best = None
    stacked = stack_numbers(numbers) if numbers else None
    rows = [("Parse", f"{parse_ms:.2f}ms")]
    if part in (None, 1):
        t0 = time.perf_counter()
        total = sum_magnitude(stacked) if stacked is not None else None
        rows.append(("Sum", f"{_fmt(total)} ({(time.perf_counter() - t0) * 1000:.2f}ms)"))
    if part in (None, 2):
        t0 = time.perf_counter()
        best = best_pair_magnitude(stacked, cfg) if stacked is not None else None
        rows.append(("Best", f"{_fmt(best)} ({(time.perf_counter() - t0) * 1000:.2f}ms)"))
    for i, (label, text) in enumerate(rows):
        branch = "└─" if i == len(rows) - 1 else "├─"
        print(f"   {branch} {label:<8}: {text}", file=out)
    return HomeworkResult(
        count=len(numbers), sum_magnitude=total, best_pair_magnitude=best
    )


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    part = None
    chunk_size = DEFAULT_PAIR_SEARCH_CONFIG.chunk_size
    path = None
    i = 0
    try:
        while i < len(args):
            arg = args[i]
            if arg == "--part" and i + 1 < len(args):
                part = int(args[i + 1])
                i += 2
                continue
            if arg.startswith("--part="):
                part = int(arg.split("=", 1)[1])
                i += 1
                continue
            if arg == "--chunk-size" and i + 1 < len(args):
                chunk_size = int(args[i + 1])
                i += 2
                continue
            if arg.startswith("--chunk-size="):
                chunk_size = int(arg.split("=", 1)[1])
                i += 1
                continue
            if arg in ("-h", "--help"):
                print(USAGE)
                return 0
            if path is None:
                path = arg
                i += 1
                continue
            print(f"   ERROR: unexpected argument {arg!r}", file=sys.stderr)
            return 2
        if path is None or part not in (None, 1, 2):
            print(USAGE, file=sys.stderr)
            return 2
        cfg = PairSearchConfig(chunk_size=chunk_size)
    except ValueError as e:
        print(f"   ERROR: {e}", file=sys.stderr)
        return 2
    try:
        if path == "-":
            lines = sys.stdin.read().splitlines()
        else:
            with open(path) as f:
                lines = f.read().splitlines()
        run_homework_lines(lines, part=part, cfg=cfg)
    except (OSError, ParseError, SnailfishCapacityError) as e:
        print(f"   ERROR: {e}", file=sys.stderr)
        return 1
    return 0


__all__ = ["USAGE", "run_homework_lines", "main"]
