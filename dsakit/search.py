"""Linear search for one or every occurrence of a key."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from dsakit.sorting import read_numbers


def linear_search(values: Sequence[int], key: int, start: int = 0) -> int:
    """Return the first index at or after ``start`` holding ``key``.

    Raises ValueError when there is none.
    """
    for position in range(max(start, 0), len(values)):
        if values[position] == key:
            return position
    raise ValueError(f"{key!r} not found")


def find_all(values: Sequence[int], key: int) -> list[int]:
    """Return every index holding ``key``, in ascending order."""
    positions: list[int] = []
    start = 0
    while start < len(values):
        try:
            found = linear_search(values, key, start)
        except ValueError:
            break
        positions.append(found)
        start = found + 1
    return positions


def main(argv: list[str] | None = None) -> int:
    """Print every position of a key in a file of integers."""
    parser = argparse.ArgumentParser(description="Find every position of a value.")
    parser.add_argument("path", help="file of whitespace-separated integers")
    parser.add_argument("key", type=int, nargs="?", help="value to look for")
    args = parser.parse_args(argv)
    try:
        numbers = read_numbers(args.path)
    except OSError:
        print("Cannot open file!", file=sys.stderr)
        return 1
    key = args.key if args.key is not None else int(input("Value to find: "))
    positions = find_all(numbers, key)
    line = f"Positions of {key} in data: " + " ".join(str(p) for p in positions)
    if not positions:
        line += f"Value {key} not found in data."
    print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())