import pytest

from dsakit.complexnum import Complex, ComplexList, main


def _as_builtin(c):
    return complex(c.real, c.imag)


@pytest.mark.parametrize(
    "a, b",
    [((3, 4), (1, -2)), ((0, 0), (5, 7)), ((-3, 2), (-1, -9)), ((12, 0), (0, 12))],
)
def test_arithmetic_matches_builtin_complex(a, b):
    x, y = Complex(*a), Complex(*b)
    assert _as_builtin(x + y) == _as_builtin(x) + _as_builtin(y)
    assert _as_builtin(x * y) == _as_builtin(x) * _as_builtin(y)


def test_identities():
    z = Complex(3, 4)
    assert z + Complex(0, 0) == z
    assert z * Complex(1, 0) == z
    assert Complex(0, 1) * Complex(0, 1) == Complex(-1, 0)


def test_commutative():
    a, b = Complex(3, 4), Complex(1, -2)
    assert a + b == b + a
    assert a * b == b * a


def test_add_with_other_type_rejected():
    with pytest.raises(TypeError):
        Complex(1, 1) + 1


def test_str():
    assert str(Complex(3, 4)) == "3 + 4i"
    assert str(Complex(1, -2)) == "1 + -2i"


def test_list_append_and_iter():
    numbers = ComplexList()
    numbers.append(5, 2)
    numbers.append(4, 11)
    assert list(numbers) == [Complex(5, 2), Complex(4, 11)]
    assert len(numbers) == 2


def test_average_without_primes_is_zero():
    numbers = ComplexList()
    numbers.append(4, 11)
    numbers.append(1, 3)
    assert numbers.average_imag_of_prime_real() == 0


def test_average_imag_of_prime_real():
    numbers = ComplexList()
    numbers.append(5, 2)
    numbers.append(4, 11)
    numbers.append(7, 2)
    assert numbers.average_imag_of_prime_real() == 2


def test_average_truncates_toward_zero():
    numbers = ComplexList()
    numbers.append(2, -1)
    numbers.append(3, -2)
    assert numbers.average_imag_of_prime_real() == -1


def test_count_sum_divisible_by_3():
    divisible = [(1, 2), (4, 11), (-3, 0)]
    numbers = ComplexList()
    for real, imag in divisible + [(1, 1), (2, 3)]:
        numbers.append(real, imag)
    assert numbers.count_sum_divisible_by_3() == len(divisible)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Complex 1: 3 + 4i" in out
    assert "Complex 2: 1 + -2i" in out