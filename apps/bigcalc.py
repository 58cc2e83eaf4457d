#!/usr/bin/env python3
"""Command-line calculator over decint.BigInteger."""

from __future__ import annotations

import argparse
import sys

from decint import BigInteger, BigIntegerError


OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "%": lambda a, b: a % b,
    "**": lambda a, b: a.power(b),
    "<<": lambda a, b: a << b,
    ">>": lambda a, b: a >> b,
    "cmp": lambda a, b: BigInteger(a.compare(b)),
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate LHS OP RHS on arbitrary-precision integers.")
    parser.add_argument("lhs", nargs="?", help="Left operand (decimal or scientific notation)")
    parser.add_argument("op", nargs="?", choices=sorted(OPERATORS.keys()), help="Operator")
    parser.add_argument("rhs", nargs="?", help="Right operand")
    parser.add_argument("--sep", default="", help="Single character written after the result")
    parser.add_argument("--digits", metavar="VALUE", default=None, help="Print the decimal digit count of VALUE")
    args = parser.parse_args(argv)
    if args.digits is None and (args.lhs is None or args.op is None or args.rhs is None):
        parser.error("LHS OP RHS are required unless --digits is given")
    if len(args.sep) > 1:
        parser.error("--sep takes a single character")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        if args.digits is not None:
            print(BigInteger(args.digits).digits())
            return 0
        result = OPERATORS[args.op](BigInteger(args.lhs), BigInteger(args.rhs))
    except BigIntegerError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    result.print(args.sep)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
