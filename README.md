# algolab

Textbook sorting and searching algorithms, plus two small data structures:
a doubly linked list and a stack that grows and shrinks as you use it.

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

- `algolab.sorting`: in-place sorts that return `None`:
  `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` and
  `quick_sort(items, low=0, high=None)`. Helpers: `merge(left, right)`
  returns a new sorted list, `hoare_partition` and `lomuto_partition`
  partition `items[low:high+1]` (raising `IndexError` for a bad range),
  and `find_pairs` yields every `(odd, even)` pair of values.
- `algolab.searching`: `linear_search(items, query)` returns the index of
  the first match, or `None` when the value is not there.
- `algolab.arrays`: `swap`, `format_array` (renders values as
  `{3, 2, 7}`), `random_array(size)` (random values below 10000) and
  `read_array_size(stream)`, which reads a non-negative size from the next
  line of a text stream and raises `ValueError` otherwise.
- `algolab.linked_list`: `LinkedList`, with positional `insert(data, index)`
  and `delete(index)` (both raise `IndexError` for a bad index),
  `search(value)` returning a `SearchResult` with `index` and `found`,
  `len()`, iteration, and `str()` giving each value followed by a tab.
- `algolab.stack`: `Stack(capacity)`, with `push(*values)` (returns the
  index of the new top and grows the capacity when needed), `pop`, `peek`,
  `is_empty`, `capacity()`, `grow`, `shrink` and `len()`. When `pop`
  leaves the stack under half full and the capacity is even, the capacity
  is halved. `pop` and `peek` on an empty stack raise `StackUnderflowError`.

## Examples

```python
from algolab.arrays import format_array
from algolab.searching import linear_search
from algolab.sorting import quick_sort

values = [3, 2, 7, 5, 4]
print(format_array(values))        # {3, 2, 7, 5, 4}
print(linear_search(values, 7))    # 2
print(linear_search(values, 9))    # None

quick_sort(values)
print(values)                      # [2, 3, 4, 5, 7]
```

```python
from algolab.linked_list import LinkedList

items = LinkedList()
items.insert(10, 0)
items.insert(20, 1)
items.insert(5, 0)
print(list(items))                 # [5, 10, 20]

result = items.search(20)
print(result.found, result.index)  # True 2
```

```python
from algolab.stack import Stack

stack = Stack(2)
stack.push(1, 2, 3)                # grows to make room
print(stack.peek(), len(stack))    # 3 3
```

## Command line

Installing the package provides the `algolab` command:

```
algolab [bubble|insertion|selection|merge|quick|search|pairs]
```

With a sorting algorithm (default `quick`), it reads an array size from
standard input, fills an array with random values below 10000, and prints
it before and after sorting. `search` builds the same kind of array, then
reads a non-negative query and reports the index of its first occurrence.
`pairs` sorts the fixed array `{3, 2, 7, 5, 4}` and prints every
`(odd, even)` pair. Invalid input is reported on standard error with exit
status 1.

## What it does not do

There is no binary search, no heap sort and no tree structure; searching
is linear only.