"""Command line: linear search and timed maximum subarray sum."""

import argparse
import sys
import time

from arraydrills.search import linear_search
from arraydrills.subarrays import max_subarray_sum

_SENTINEL = -1


def _stdin_ints(parser):
    try:
        return [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must be whitespace-separated integers")


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="arraydrills", description="Array drills from the command line."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser(
        "search",
        help="find the index of a value",
        description=(
            "Find the first index of TARGET among VALUES. Without VALUES, integers "
            "are read from standard input up to -1, followed by the target."
        ),
    )
    search.add_argument("values", nargs="*", type=int)
    search.add_argument("-t", "--target", type=int)

    kadane = commands.add_parser(
        "max-subarray",
        help="largest contiguous subarray sum, timed",
        description=(
            "Print the maximum subarray sum of VALUES and the time taken. Without "
            "VALUES, standard input gives a count followed by that many integers."
        ),
    )
    kadane.add_argument("values", nargs="*", type=int)
    return parser, search, kadane


def _run_search(parser, args):
    values, target = args.values, args.target
    if not values:
        tokens = _stdin_ints(parser)
        if _SENTINEL not in tokens:
            parser.error("values must end with -1")
        cut = tokens.index(_SENTINEL)
        values, rest = tokens[:cut], tokens[cut + 1:]
        if target is None:
            if not rest:
                parser.error("no target given")
            target = rest[0]
    elif target is None:
        parser.error("--target is required when values are given")
    print(f"Element is present at the index {linear_search(values, target)}")


def _run_kadane(parser, args):
    values = args.values
    if not values:
        tokens = _stdin_ints(parser)
        if not tokens:
            parser.error("no input given")
        count, rest = tokens[0], tokens[1:]
        if count < 1 or len(rest) < count:
            parser.error("count does not match the values given")
        values = rest[:count]
    start = time.perf_counter()
    result = max_subarray_sum(values)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    print(f"Maximum subarray sum = {result}")
    print(f"Time taken by Kadane's Algorithm: {elapsed_ms} ms")


def main(argv=None):
    """Run the command line and return the exit status."""
    parser, search, kadane = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "search":
        _run_search(search, args)
    else:
        _run_kadane(kadane, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())