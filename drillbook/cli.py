"""Command-line entry point for the constructive drill problems."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from drillbook.counting import coin_piles
from drillbook.search import tower_of_hanoi
from drillbook.sequences import NoSolution, beautiful_permutation, two_sets


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _run_permutation(args: argparse.Namespace, out: TextIO) -> None:
    print(_join(beautiful_permutation(args.n)), file=out)


def _run_two_sets(args: argparse.Namespace, out: TextIO) -> None:
    first, second = two_sets(args.n)
    print("YES", file=out)
    for group in (first, second):
        print(len(group), file=out)
        print(_join(group), file=out)


def _run_hanoi(args: argparse.Namespace, out: TextIO) -> None:
    moves = tower_of_hanoi(args.n)
    print(len(moves), file=out)
    for source, target in moves:
        print(source, target, file=out)


def _run_coin_piles(args: argparse.Namespace, out: TextIO) -> None:
    values = args.values
    for a, b in zip(values[::2], values[1::2]):
        print("YES" if coin_piles(a, b) else "NO", file=out)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillbook",
        description="Solve constructive drill problems and print the answers.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    permutation = commands.add_parser(
        "permutation", help="a permutation of 1..n with no adjacent neighbours"
    )
    permutation.add_argument("n", type=int)
    permutation.set_defaults(handler=_run_permutation)

    sets = commands.add_parser("two-sets", help="split 1..n into two equal-sum sets")
    sets.add_argument("n", type=int)
    sets.set_defaults(handler=_run_two_sets)

    hanoi = commands.add_parser("hanoi", help="moves that solve the tower of Hanoi")
    hanoi.add_argument("n", type=int)
    hanoi.set_defaults(handler=_run_hanoi)

    coins = commands.add_parser(
        "coin-piles", help="tell whether pairs of coin piles can be emptied"
    )
    coins.add_argument("values", type=int, nargs="+", metavar="A B")
    coins.set_defaults(handler=_run_coin_piles)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "coin-piles" and len(args.values) % 2:
        parser.error("coin-piles needs an even number of values (pairs A B)")
    out = sys.stdout
    try:
        args.handler(args, out)
    except NoSolution as exc:
        print(str(exc), file=out)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())