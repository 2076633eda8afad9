# datastructs

A few classic data structures and small algorithms written in plain Python, with
no dependencies beyond the standard library.

- `DynamicArray` (`datastructs.dynamic_array`): an integer array that tracks a
  capacity. A capacity of zero or less becomes 1. `insert` and `insert_at` double
  the capacity when the array is full. `remove_at` halves it when fewer than half
  of the slots are in use. It also has `index_of` (returns -1 when the value is
  missing), `max`, `reverse`, `intersect` and `print`. Indexing works with
  `arr[i]`, and `len()` and iteration work as usual.
- `LinkedList` (`datastructs.linked_list`): a singly linked list with pointers to
  both its first and last nodes. It has `add_first`, `add_last`, `delete_first`,
  `delete_last`, `index_of`, `in`, `is_empty`, `reverse` (in place),
  `kth_from_end` and `copy`. The constructor accepts an optional iterable of
  items.
- `Stack` (`datastructs.stack`): a stack that starts with a capacity of 5. A push
  onto a full stack doubles the capacity. A pop halves it when fewer than a third
  of the slots remain in use, as long as the capacity is above 5. It has `push`,
  `pop`, `peek`, `is_empty`, `capacity` and `len()`.
- `datastructs.expression`: `is_balanced(text)` checks that the `()`, `[]`, `{}`
  and `<>` brackets in a piece of text are balanced. The helpers `is_open`,
  `is_close` and `matches` are also available.
- `datastructs.combinations`: generators that produce strings picked from the
  rows of a matrix:
  - `combination_lines(rows)` takes one entry or nothing from each row. It keeps
    only the strings whose length equals the number of rows, so with
    single-character entries it gives exactly one entry from every row.
  - `fixed_matrix_lines()` walks a built-in three-row matrix.
  - `odometer_lines(rows)` is an odometer-style walk. It stops only when it
    reaches the last entry of the first row followed by the last entry of the
    final row, so for some inputs it never ends.
  - `print_lines(lines, file=None)` writes the lines out.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Usage

```python
from datastructs.dynamic_array import DynamicArray
from datastructs.linked_list import LinkedList
from datastructs.stack import Stack
from datastructs.expression import is_balanced
from datastructs.combinations import combination_lines, print_lines

arr = DynamicArray(0)
for value in (42, 55, 69):
    arr.insert(value)
arr.insert_at(132, 0)
print(list(arr), arr.capacity, arr.max())   # [132, 42, 55, 69] 4 132

lst = LinkedList([10, 20, 30, 40])
lst.reverse()
print(lst.index_of(40), lst.kth_from_end(0))  # 0 10

stack = Stack()
stack.push(1)
stack.push(15)
print(stack.pop(), len(stack), stack.capacity)  # 15 1 5

print(is_balanced("((2+3) [])"))  # True
print(is_balanced("(<]"))         # False

print_lines(combination_lines([["1", "2"], ["x", "y"]]))  # 1x 1y 2x 2y, one per line
```

## Errors

- Indexing or removing outside a `DynamicArray` raises `IndexError`, and so does
  `insert_at` with a position outside `0..len`. Calling `max()` on an empty array
  raises `ValueError`.
- `delete_first`, `delete_last` and `kth_from_end` on an empty `LinkedList` raise
  `IndexError`. `kth_from_end` with `k` outside `0..len-1` also raises
  `IndexError`.
- `pop` and `peek` on an empty `Stack` raise `IndexError`.
- `odometer_lines` raises `ValueError` when there are no rows, or when the first
  or last row is empty.

## Command line

```
datastructs "((2+3) [])" "(<]"
```

The command prints `1` for each balanced expression and `0` for each unbalanced
one, one result per line. With no arguments it checks the sample expression
`((2+3) [])`. The command covers bracket checking only; the other structures are
available from Python alone.

## Tests

```
pytest
```