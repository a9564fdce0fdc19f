import pytest

from dsakit.intlist import IntList, is_palindrome, is_prime, main


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 19, 97, 7919])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 15, 25, 49, 100, 7917])
def test_non_primes(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", [0, 7, 121, 1221, 12321])
def test_palindromes(n):
    assert is_palindrome(n) is True


@pytest.mark.parametrize("n", [10, 123, -121, -5])
def test_non_palindromes(n):
    assert is_palindrome(n) is False


def test_insert_prepends():
    values = [19, 7, 4, -10, -5, -101]
    items = IntList(values)
    assert list(items) == values[::-1]
    items.insert(42)
    assert list(items)[0] == 42


def test_count_primes_ignores_non_primes():
    primes = [2, 3, 5, 7, 11]
    items = IntList(primes + [1, 4, -3, 9, 0])
    assert items.count_primes() == len(primes)


def test_sum_odd():
    assert IntList([2, 4, -6]).sum_odd() == 0
    assert IntList([4, -5, 6]).sum_odd() == -5


def test_average_palindromes():
    assert IntList([10, 12, -3]).average_palindromes() == 0.0
    assert IntList([121, 10]).average_palindromes() == 121.0
    assert IntList([4, 7, 19]).average_palindromes() == 5.5


def test_count_negative_div_by_5():
    assert IntList([-5, -10, -101, 4, 5]).count_negative_div_by_5() == 2
    assert IntList([5, 10, -3]).count_negative_div_by_5() == 0


def test_sort_signed_demo():
    items = IntList([19, 7, 4, -10, -5, -101])
    items.sort_signed()
    assert list(items) == [-5, -10, -101, 4, 7, 19]


def test_sort_signed_invariants():
    values = [3, -1, 0, -7, 8, -1, 2, -20, 0]
    items = IntList(values)
    items.sort_signed()
    result = list(items)
    assert sorted(result) == sorted(values)
    negatives = [v for v in result if v < 0]
    rest = [v for v in result if v >= 0]
    assert result == negatives + rest
    assert negatives == sorted(negatives, reverse=True)
    assert rest == sorted(rest)


def test_display():
    assert IntList().display() == "NULL"
    items = IntList([1, 2])
    assert items.display() == "2 -> 1 -> NULL"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Sorted list: -5 -> -10 -> -101 -> 4 -> 7 -> 19 -> NULL" in out