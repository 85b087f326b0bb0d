"""A command that lists its arguments and adds two numbers given as ``A <num1> <num2>``."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

USAGE = "Usage: commandline A <num1> <num2>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _operands(args: Sequence[str]) -> tuple[int, int]:
    if len(args) != 3 or args[0] != "A":
        raise ValueError(USAGE)
    return _atoi(args[1]), _atoi(args[2])


def add_arguments(args: Sequence[str]) -> int:
    """Return the sum of the two numbers in ``["A", num1, num2]``.

    Numbers are read like C's atoi: leading digits count, anything else gives 0.
    """
    first, second = _operands(args)
    return first + second


def main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments, then the sum they describe; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = sys.argv[0] if sys.argv and sys.argv[0] else "commandline"
    parameters = [program, *args]

    print(f"Number of parameters: {len(parameters)}")
    print("Parameters:")
    for parameter in parameters:
        print(parameter)
    print()

    try:
        first, second = _operands(args)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"{first} + {second} = {first + second}")
    return 0


if __name__ == "__main__":
    sys.exit(main())