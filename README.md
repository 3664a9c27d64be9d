# lineards

A small collection of linear data structures that share one interface:

- `FixedArray` (in `lineards.fixed_array`): an array bounded by a capacity
  given at creation. It holds at most `capacity - 1` items; a negative
  capacity raises `ValueError`.
- `DynamicArray` (in `lineards.dynamic_array`): an unbounded array.
- `LinkedList` (in `lineards.linked_list`): a singly linked list that can
  also be reversed in place and searched.
- `Stack` (in `lineards.stack`): a bounded container built on `LinkedList`.

Every structure is a `Sequence` (from `lineards.sequence`). It supports
`len()`, iteration, `get`, `set`, `add_first`, `add_last`, `add_at`,
`delete_first`, `delete_last`, `delete_at` and `display`. `LinkedList` is
also a `ListSequence`, which adds `reverse` and `contains`.

## Installation

```
pip install .
```

## Usage

```python
from lineards.dynamic_array import DynamicArray
from lineards.fixed_array import FixedArray
from lineards.linked_list import LinkedList
from lineards.stack import Stack, StackOverflowError, StackUnderflowError

array = DynamicArray()
array.add_last(10)
array.add_first(20)
array.get(0)          # 20
array.get(10)         # None: the index is out of range
array.display()       # prints "20, 10"

small = FixedArray(2)
small.add_last(1)
try:
    small.add_last(2)  # a capacity of 2 holds only one item
except OverflowError:
    pass

items = LinkedList()
items.add_last(1)
items.add_last(2)
items.reverse()
list(items)           # [2, 1]
items.contains(2)     # True
items.display()       # prints "2 1 " (each item followed by a space)

stack = Stack(2)
stack.push("a")
stack.push("b")
try:
    stack.push("c")
except StackOverflowError:
    pass
stack.pop()           # "a"
```

### Errors

`get` returns `None` for an index outside the stored items. The other
operations raise instead of failing quietly:

- `IndexError` for a position outside the items (`set` and `delete_at` take
  `0 <= index < len`, `add_at` takes `0 <= index <= len`), for deleting from
  an empty structure, and for reversing an empty `LinkedList`.
- `OverflowError` when adding to a full `FixedArray`.
- `Stack.push` raises `StackOverflowError` (an `OverflowError`) when the stack
  already holds `capacity` items; `Stack.pop` raises `StackUnderflowError`
  (an `IndexError`) when it is empty.

Note that `Stack.push` appends at the back while `Stack.pop` removes and
returns the front item, so items come out in the order they were pushed.

## Demonstration

A command exercises `FixedArray`, `DynamicArray` and `LinkedList` in turn,
printing `Successfully` or `Error` for each operation, the looked-up values,
the final size and contents, and, for the linked list, the result of
reversing it:

```
lineards-demo
```

## What it does not include

The package provides only the structures listed above. There is no doubly
linked or circular linked list, no queue, and the stack is only the bounded
one in `lineards.stack`; the demonstration command does not exercise the
stack.

## Running the tests

```
pip install .[test]
pytest
```