# dsakit

A small collection of classic data structures and numeric helpers, written
in plain Python with no third-party dependencies.

## What is inside

- `dsakit.linked_list.LinkedList`: a singly linked list of integers. It
  supports `append`, `prepend`, `remove` (raises `ValueError` when the value is
  absent), `insert_at` (positions 1 to the current length; raises `IndexError`
  otherwise), in-place `selection_sort` and `bubble_sort`, and in-place
  `reverse`. `len()` and iteration work as usual. `sample_list()` builds the
  list `7, 14, 21, 28, 35, 42`.
- `dsakit.doubly_linked_list.DoublyLinkedList`: a doubly linked list with
  `append`, `prepend`, `insert_before` and `insert_after` a given value,
  `remove`, and iteration in both directions (`iter()` and `reversed()`).
  Looking up a value that is not in the list raises `ValueError`.
- `dsakit.tree.BinarySearchTree`: iterative `insert` (duplicates are ignored)
  and `insert_recursive` (duplicates go to the right), the `inorder`,
  `preorder` and `postorder` traversals as lists, `height`, `minimum` and
  `maximum` (both raise `ValueError` on an empty tree), `parent_of`,
  `common_parent_nodes`, and `left_side_count` / `right_side_count` for the
  sizes of the root's two subtrees.
- `dsakit.arithmetic`:
  - `summarize(values)` sorts 2 to 50 integers and returns an `ArraySummary`
    with `ordered`, `maximum`, `minimum` and `second_largest`.
  - `is_three_digit_palindrome(number)` checks whether reversing the last three
    decimal digits gives the number back.
  - `power_sum(n)` returns the sum of `i ** i` for `i` from 1 to `n`.
  - `is_prime(number)` checks that no integer from 2 to `number - 1` divides
    the number (so values below 2 pass).
  - `simple_interest(principal, rate, time)` and
    `compound_amount(principal, rate, time, periods)` work in whole-number
    steps, rounding toward zero.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from dsakit.linked_list import LinkedList
from dsakit.doubly_linked_list import DoublyLinkedList
from dsakit.tree import BinarySearchTree
from dsakit.arithmetic import summarize, power_sum

items = LinkedList([5, 3, 9])
items.selection_sort()
print(list(items))               # [3, 5, 9]

both_ways = DoublyLinkedList([1, 2, 3])
both_ways.insert_after(2, 7)
print(list(reversed(both_ways))) # [3, 7, 2, 1]

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
print(tree.inorder())            # [20, 30, 40, 50, 70]
print(tree.height())             # 3
print(tree.parent_of(40))        # 30

print(summarize([4, 9, 1]).second_largest)  # 4
print(power_sum(3))              # 32
```

## What it does not do

The package is a library only: it installs no command-line or interactive
menu program. It also has no stack or queue types; use `list` or
`collections.deque` from the standard library for those.