# structlab

A collection of small, readable data structures and algorithms written in
plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `structlab.dynarray` | `DynamicArray`: a resizable array with `push_back`, `resize`, `insert`, `erase`, `pop_back`, `find` and `copy` |
| `structlab.fixed_array` | `Array`: a fixed-length array with bounds-checked indexing |
| `structlab.linked_list` | `LinkedList` and `ListNode`: a doubly linked list with `insert_front`, `insert_back`, `insert_before`, `remove_front`, `remove_back`, `remove_node`, `find`, `clear` and the `first` / `last` nodes |
| `structlab.hash_table` | `HashTable`: a set of items in chained buckets with `insert`, `remove`, `update`, `items`, `clear`, `max_load` and `bucket_count` |
| `structlab.records` | `StudentRecord` (same `id` means same student), `MonsterRecord` (same `name` means same monster), and `format_student_table` / `format_monster_table` |
| `structlab.quick_select` | `quick_select(values, k)`: the value at index `k` of the sorted values, without a full sort and without changing the input |
| `structlab.counter` | `Counter`: an integer counter clamped to a range, with `increment`, `decrement`, `reset` and a `value` property |
| `structlab.complex_number` | `Complex`: complex numbers supporting `+`, `-`, `*`, `/`, negation, `str()` and `Complex.parse` |
| `structlab.geometry` | `Point2D`: integer points that add component-wise, with `str()` and `Point2D.parse` |
| `structlab.basics` | `square`, `implement_budget_cut`, `compare`, `int_from_digits`, `fib`, `fib_recursive`, `reverse_word`, `square_all`, `get_max`, `bitwise_ops` |
| `structlab.commandline` | `add_arguments` and the `main` function behind the `structlab-add` command |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from structlab.dynarray import DynamicArray
from structlab.linked_list import LinkedList
from structlab.quick_select import quick_select
from structlab.counter import Counter
from structlab.hash_table import HashTable
from structlab.records import StudentRecord, format_student_table

numbers = DynamicArray(3)
numbers[0], numbers[1], numbers[2] = 4, 8, 15
numbers.push_back(16)
print(list(numbers))          # [4, 8, 15, 16]
print(numbers.find(15))       # 2

chain = LinkedList([2, 5, 3])
chain.insert_front(1)
print(list(chain))            # [1, 2, 5, 3]

print(quick_select([9, 1, 7, 3], 1))   # 3

counter = Counter(9, 1, 10)
counter.increment()           # True
counter.increment()           # False: already at the upper bound
print(counter.value)          # 10

table = HashTable(20)
table.insert(StudentRecord("Alexa", 80000, 34))
table.update(StudentRecord("Alexa", 80000, 75))   # replaces the entry with id 80000
print(format_student_table(table))
```

Out-of-range indexes raise `IndexError`, removing from an empty container
raises `IndexError`, removing a missing item from a `HashTable` raises
`KeyError`, and passing a node that belongs to another list raises
`ValueError`.

`bitwise_ops(a, b)` takes two signed 16-bit integers and returns a
`BitwiseResult` whose fields (`and_`, `or_`, `xor`, `not_a`, `not_b`,
`left_shift`, `right_shift`) are wrapped to the signed 16-bit range, except
`not_b`, which is left unwrapped.

## Command line

Installing the package provides `structlab-add`, which prints the number of
parameters and each parameter (its own name first), then adds two integers:

```
structlab-add A 3 4
```

The first argument must be the letter `A`, followed by exactly two numbers.
Numbers are read by their leading digits; text without leading digits counts
as 0. Any other arguments print a usage message to standard error and exit
with status 1.