# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `linear_search`, `binary_search_recursive`, `binary_search_iterative` |
| `dsakit.bounded_array` | `BoundedArray`, a fixed-capacity array with `append`, `insert`, `delete`, `resize`; `ArrayFullError` |
| `dsakit.array_problems` | `is_sorted`, `insert_sorted`, `duplicates_sorted`, `duplicates_hashing`, `duplicates_unsorted`, `min_and_max`, `merge`, `missing_element`, `first_missing_in_sequence`, `missing_elements`, `find_pair_with_sum`, `reverse_range`, `rotate` |
| `dsakit.set_operations` | `union_unsorted`, `union_sorted`, `intersection_unsorted`, `intersection_sorted`, `difference` |
| `dsakit.linked_list` | `LinkedList` with `append`, `insert`, `delete`, `total`, `maximum`, `search`, `binary_search` |
| `dsakit.matrices` | compact `DiagonalMatrix`, `LowerTriangularMatrix`, `UpperTriangularMatrix`, `TridiagonalMatrix`; `StorageOrder` |
| `dsakit.recursion` | `factorial`, `combinations`, `power`, `fibonacci`, `nested`, `sum_natural`, `tower_of_hanoi` yielding `Move` objects, and the traces `mutual_trace`, `descending`, `ascending`, `tree_trace` |
| `dsakit.strings` | `swap_case`, `count_words_and_vowels`, `string_length`, `is_palindrome`, `reverse`, `is_alphabetic` |
| `dsakit.grids` | `sum_first`, `add_matrices`, `format_grid` |

## Examples

```python
from dsakit.searching import binary_search_iterative
from dsakit.bounded_array import BoundedArray
from dsakit.linked_list import LinkedList
from dsakit.matrices import LowerTriangularMatrix, StorageOrder
from dsakit.recursion import tower_of_hanoi

binary_search_iterative([2, 3, 4, 10, 40], 10)   # 3
binary_search_iterative([2, 3, 4, 10, 40], 5)    # None

array = BoundedArray(10, [2, 3, 4, 5, 6])
array.append(10)
array.insert(0, 12)
str(array)                                       # "12 2 3 4 5 6 10"

numbers = LinkedList([1, 2, 3, 4, 5])
numbers.insert(3, 10)                            # zero-based index
str(numbers)                                     # "1 2 3 10 4 5"
numbers.delete(1)                                # one-based position, returns 1

m = LowerTriangularMatrix(4, StorageOrder.COLUMN_MAJOR)
m[2, 1] = 2                                      # indices are 1-based
m[1, 2]                                          # 0, above the diagonal

for move in tower_of_hanoi(2, "A", "C", "B"):
    print(move)                                  # "Move disk 1 from rod A to rod B", ...
```

## Behaviour worth knowing

- Searches return `None` when nothing is found rather than a sentinel index.
- `BoundedArray` raises `ArrayFullError` when an element would exceed its
  capacity and `IndexError` for an out-of-range `insert` or `delete`.
  `resize` pads the array with a fill value (0 by default) up to the new
  capacity.
- `LinkedList.insert` takes a zero-based index; `LinkedList.delete` takes a
  one-based position. Both raise `IndexError` when out of range.
- Matrix indices are 1-based `(row, column)` pairs, as in the usual textbook
  formulas for compact storage. Writes to positions outside a matrix's stored
  band are ignored; reads from them return 0. Indices outside the matrix raise
  `IndexError`.
- `factorial`, `combinations`, `power` and `sum_natural` raise `ValueError`
  on arguments for which they are not defined.

## What it does not do

dsakit is a library only: it has no command-line program and does not read
input interactively. Results are returned as values and strings for the
caller to print.