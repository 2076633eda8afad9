"""Command line entry point: report whether expressions are balanced."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from datastructs.expression import is_balanced

DEFAULT_EXPRESSION = "((2+3) [])"


def main(argv: Sequence[str] | None = None) -> int:
    """Print 1 for each balanced expression and 0 for each unbalanced one."""
    parser = argparse.ArgumentParser(
        prog="datastructs",
        description="Check whether the brackets in expressions are balanced.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help=f"expressions to check (default: {DEFAULT_EXPRESSION!r})",
    )
    args = parser.parse_args(argv)
    for expression in args.expressions or [DEFAULT_EXPRESSION]:
        print(int(is_balanced(expression)))
    return 0