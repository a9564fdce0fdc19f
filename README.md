# dsakit

Plain, readable implementations of classic data structures and algorithms,
each with a small command that demonstrates it.

- `dsakit.bst` – `BinarySearchTree` of integers built from `Node` objects.
  `insert` and `delete` return `True` or `False` depending on whether the tree
  changed; `preorder`, `inorder` and `postorder` are generators; there is also
  `count_leaves`, `clear` and `in` membership. Duplicate values are ignored.
- `dsakit.linkedlist` – `LinkedList` of `ListNode` links with head and tail:
  `push_front`, `push_back`, `insert_after`, `pop_front`, `pop_back`,
  `remove`, `find`, `index`, `extend`, `greater_than`, iteration and `len`.
  Popping from an empty list raises `IndexError`; `remove` and `index` raise
  `ValueError` when the value is absent.
- `dsakit.intlist` – `IntList`, where `insert` puts values at the front, with
  `count_primes`, `sum_odd`, `average_palindromes`,
  `count_negative_div_by_5`, `sort_signed` (negatives descending, then the
  rest ascending) and `display` (`a -> b -> NULL`). The helpers `is_prime` and
  `is_palindrome` are exported too; negative numbers are never palindromes.
- `dsakit.complexnum` – immutable `Complex(real, imag)` with integer parts,
  supporting `+` and `*`, and `ComplexList` with
  `average_imag_of_prime_real` (integer mean, truncated toward zero) and
  `count_sum_divisible_by_3`.
- `dsakit.sorting` – `bubble_sort`, `interchange_sort`, `selection_sort`,
  `heap_sort`, `merge_sort`, `quick_sort` and `radix_sort`. Each takes any
  iterable of integers and returns a new list. Note that `bubble_sort` returns
  **descending** order, and `radix_sort` accepts only non-negative values
  (it raises `ValueError` otherwise). `read_numbers(path)` reads
  whitespace-separated integers from a file, stopping at the first token that
  is not an integer.
- `dsakit.search` – `linear_search(values, key, start=0)` returns the first
  index at or after `start` (raising `ValueError` if there is none), and
  `find_all(values, key)` returns every index of `key`.
- `dsakit.datagen` – `generate_files(output_dir, num_files=100,
  num_elements=1000000, min_val=-200, max_val=200, seed=None)` writes
  `inputdata_type5_001.dat`, `inputdata_type5_002.dat`, … each holding random
  integers separated by spaces, and returns the paths written.

## Installation

```
pip install .
```

Install the test tools with `pip install .[test]`.

## Using the library

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([10, 5, 3, 15, 13, 12])
print(list(tree.inorder()))   # [3, 5, 10, 12, 13, 15]
print(tree.count_leaves())    # 2
print(13 in tree)             # True

tree.delete(13)
print(13 in tree)             # False
```

```python
from dsakit.linkedlist import LinkedList

items = LinkedList()
items.push_front(10)
items.push_front(20)
items.push_back(5)

print(list(items))            # [20, 10, 5]
print(items.index(5))         # 2
print(len(items))             # 3
```

```python
from dsakit.complexnum import Complex

a = Complex(3, 4)
b = Complex(1, -2)
print(a + b)                  # 4 + 2i
print(a * b)                  # 11 + -2i
```

```python
from dsakit.sorting import quick_sort, bubble_sort
from dsakit.search import find_all

print(quick_sort([5, 1, 4, 1]))   # [1, 1, 4, 5]
print(bubble_sort([5, 1, 4, 1]))  # [5, 4, 1, 1]
print(find_all([5, 1, 4, 1], 1))  # [1, 3]
```

## Commands

| Command             | What it runs                                                      |
|---------------------|-------------------------------------------------------------------|
| `dsakit-bst`        | builds a sample tree, prints its postorder walk and leaf count     |
| `dsakit-linkedlist` | exercises insertion, search and removal on a sample list           |
| `dsakit-intlist`    | prints statistics over a sample integer list, then sorts it        |
| `dsakit-complex`    | complex number arithmetic and list queries                         |
| `dsakit-sort`       | sorts the integers in a file and prints them on one line           |
| `dsakit-search`     | prints every position of a value in a file of integers             |
| `dsakit-gendata`    | writes files of random integers                                    |

`dsakit-sort PATH [-a ALGORITHM]` chooses the algorithm with `-a`/`--algorithm`
(`bubble`, `heap`, `interchange`, `merge`, `quick`, `radix`, `selection`;
default `quick`).

`dsakit-search PATH [KEY]` asks for the value on standard input when `KEY` is
not given.

`dsakit-gendata [OUTPUT_DIR] [--files N] [--elements N] [--min N] [--max N]
[--seed N]` writes into `data` by default, with 100 files of 1,000,000 values
between -200 and 200.

## What it does not do

No data files are shipped; create input for `dsakit-sort` and
`dsakit-search` with `dsakit-gendata` or your own files. The structures live
in memory only and are not saved anywhere.

## Running the tests

```
pytest
```