"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import sort_stacks
from pushswap.stacks import Stacks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the integers given as arguments, printing one operation per line.

    Prints "Error" and returns 1 for invalid input; returns 0 otherwise.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    stacks = Stacks.from_values(values, output=sys.stdout)
    sort_stacks(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())