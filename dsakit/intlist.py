"""Integer list with number-theory queries and a signed sort."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n == 2:
        return True
    if n < 2 or n % 2 == 0:
        return False
    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))


def is_palindrome(n: int) -> bool:
    """Return True when the decimal digits of ``n`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


class IntList:
    """List of integers where new values go to the front."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque()
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        self._items.appendleft(value)

    def count_primes(self) -> int:
        return sum(1 for value in self._items if is_prime(value))

    def sum_odd(self) -> int:
        return sum(value for value in self._items if value % 2 != 0)

    def average_palindromes(self) -> float:
        """Mean of the palindromic values, or 0.0 when there are none."""
        picked = [value for value in self._items if is_palindrome(value)]
        return sum(picked) / len(picked) if picked else 0.0

    def count_negative_div_by_5(self) -> int:
        return sum(1 for value in self._items if value < 0 and value % 5 == 0)

    def sort_signed(self) -> None:
        """Order negatives descending, followed by the rest ascending."""
        negatives = sorted((v for v in self._items if v < 0), reverse=True)
        others = sorted(v for v in self._items if v >= 0)
        self._items = deque(negatives + others)

    def display(self) -> str:
        """Render the list as ``a -> b -> NULL``."""
        return "".join(f"{value} -> " for value in self._items) + "NULL"

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def main(argv: list[str] | None = None) -> int:
    """Run the integer-list demonstration."""
    items = IntList([19, 7, 4, -10, -5, -101])
    print(f"Original list: {items.display()}")
    print(f"Prime numbers count: {items.count_primes()}")
    print(f"Sum of odd numbers: {items.sum_odd()}")
    print(f"Average of palindromic numbers: {items.average_palindromes():g}")
    print(f"Negative numbers divisible by 5: {items.count_negative_div_by_5()}")
    items.sort_signed()
    print(f"Sorted list: {items.display()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())