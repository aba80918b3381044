"""Command-line entrypoint for the snailfish homework solver."""

from snail_cli.main import USAGE, main, run_homework_lines

__all__ = ["USAGE", "main", "run_homework_lines"]
