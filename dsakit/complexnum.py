"""Gaussian-integer complex numbers and a list of them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dsakit.intlist import is_prime


@dataclass(frozen=True)
class Complex:
    """Complex number with integer real and imaginary parts."""

    real: int
    imag: int

    def __add__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __mul__(self, other: object) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + other.real * self.imag,
        )

    def __str__(self) -> str:
        return f"{self.real} + {self.imag}i"


class ComplexList:
    """Ordered collection of complex numbers."""

    def __init__(self) -> None:
        self._items: list[Complex] = []

    def append(self, real: int, imag: int) -> Complex:
        """Add a number to the end and return it."""
        number = Complex(real, imag)
        self._items.append(number)
        return number

    def average_imag_of_prime_real(self) -> int:
        """Integer mean (truncated toward zero) of imaginary parts whose real part is prime.

        Returns 0 when no real part is prime.
        """
        picked = [c.imag for c in self._items if is_prime(c.real)]
        if not picked:
            return 0
        total = sum(picked)
        quotient = abs(total) // len(picked)
        return quotient if total >= 0 else -quotient

    def count_sum_divisible_by_3(self) -> int:
        """Count numbers whose real plus imaginary part is a multiple of 3."""
        return sum(1 for c in self._items if (c.real + c.imag) % 3 == 0)

    def __iter__(self) -> Iterator[Complex]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def main(argv: list[str] | None = None) -> int:
    """Run the complex-number demonstration."""
    c1 = Complex(3, 4)
    c2 = Complex(1, -2)
    print(f"Complex 1: {c1}")
    print(f"Complex 2: {c2}")
    print(f"Sum: {c1 + c2}")
    print(f"Product: {c1 * c2}")

    numbers = ComplexList()
    numbers.append(5, 2)
    numbers.append(4, 11)
    numbers.append(7, 6)
    print(
        "Average imaginary part where the real part is prime: "
        f"{numbers.average_imag_of_prime_real()}"
    )
    print(
        "Numbers whose real + imaginary part is divisible by 3: "
        f"{numbers.count_sum_divisible_by_3()}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())