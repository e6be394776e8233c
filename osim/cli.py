"""Command that adds up the numbers 1 to N."""

from __future__ import annotations

import argparse
import sys


def sum_to(n: int) -> int:
    """Sum of 1..n; zero when n is not positive."""
    return sum(range(1, n + 1))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osim-sum", description="Add up the numbers from 1 to N."
    )
    parser.add_argument("limit", nargs="?", type=int, help="the limit N")
    args = parser.parse_args(argv)

    limit = args.limit
    if limit is None:
        print("Enter the limit (N):")
        try:
            limit = int(input().strip())
        except (ValueError, EOFError):
            print("error: the limit must be an integer", file=sys.stderr)
            return 1
    print(f"Sum = {sum_to(limit)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())