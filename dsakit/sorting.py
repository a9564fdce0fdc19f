"""Classic comparison and distribution sorts over lists of integers."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

_INT_PREFIX = re.compile(r"[+-]?\d+")


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in descending order, bubbling the largest to the front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(n - 1, i, -1):
            if items[j] > items[j - 1]:
                items[j], items[j - 1] = items[j - 1], items[j]
    return items


def interchange_sort(values: Iterable[int]) -> list[int]:
    """Return the values ascending, swapping every out-of-order pair."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for j in range(i + 1, n):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values ascending, selecting the minimum of each suffix."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if items[i] != items[smallest]:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _sift_down(items: list[int], start: int, end: int) -> None:
    """Restore the max-heap property for the subtree at ``start`` within ``[0, end]``."""
    parent = start
    while True:
        child = 2 * parent + 1
        if child > end:
            return
        if child + 1 <= end and items[child] < items[child + 1]:
            child += 1
        if items[parent] >= items[child]:
            return
        items[parent], items[child] = items[child], items[parent]
        parent = child


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values ascending using an in-place max-heap."""
    items = list(values)
    n = len(items)
    for k in range((n - 1) // 2, -1, -1):
        _sift_down(items, k, n - 1)
    for k in range(n - 1, 0, -1):
        items[0], items[k] = items[k], items[0]
        _sift_down(items, 0, k - 1)
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values ascending by top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values ascending by quicksort with a middle pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        pivot = items[(lo + hi) // 2]
        i, j = lo, hi
        while i <= j:
            while items[i] < pivot:
                i += 1
            while items[j] > pivot:
                j -= 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        if lo < j:
            pending.append((lo, j))
        if i < hi:
            pending.append((i, hi))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative values ascending by least-significant-digit radix sort.

    Raises ValueError for negative input.
    """
    items = list(values)
    if not items:
        return items
    if min(items) < 0:
        raise ValueError("radix sort only handles non-negative numbers")
    largest = max(items)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // place) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        place *= 10
    return items


def read_numbers(path: str | Path) -> list[int]:
    """Read whitespace-separated integers, stopping at the first token that is not one."""
    numbers: list[int] = []
    with open(path, encoding="utf-8") as handle:
        for token in handle.read().split():
            match = _INT_PREFIX.match(token)
            if match is None:
                break
            numbers.append(int(match.group()))
            if match.end() != len(token):
                break
    return numbers


ALGORITHMS: dict[str, Callable[[Iterable[int]], list[int]]] = {
    "bubble": bubble_sort,
    "interchange": interchange_sort,
    "selection": selection_sort,
    "heap": heap_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "radix": radix_sort,
}


def main(argv: list[str] | None = None) -> int:
    """Sort the integers in a file and print them on one line."""
    parser = argparse.ArgumentParser(description="Sort integers read from a file.")
    parser.add_argument("path", help="file of whitespace-separated integers")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(ALGORITHMS), default="quick"
    )
    args = parser.parse_args(argv)
    try:
        numbers = read_numbers(args.path)
    except OSError:
        print("Cannot open file", file=sys.stderr)
        return 1
    try:
        result = ALGORITHMS[args.algorithm](numbers)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(" ".join(str(value) for value in result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())