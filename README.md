# labstructs

Classic data structures written from scratch, each able to keep its contents
in a plain-text file, together with a few small exercises built on top of
them. No third-party libraries are needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Persistent structures

Each structure in this group takes an optional path to a data file. When a
path is given, the file is read on creation (a missing file simply leaves the
structure empty) and rewritten after each change, one element per line.

| Module                          | Class              | File layout                                   |
|---------------------------------|--------------------|-----------------------------------------------|
| `labstructs.array`              | `BoundedArray`     | one element per line, at most `capacity` read |
| `labstructs.linked_list`        | `LinkedList`       | head first; every whitespace-separated word becomes an element on load |
| `labstructs.doubly_linked_list` | `DoublyLinkedList` | head first                                    |
| `labstructs.fifo`               | `Queue`            | front first                                   |
| `labstructs.stack`              | `Stack`            | top first                                     |
| `labstructs.hash_table`         | `HashTable`        | `key:value` lines, bucket by bucket           |
| `labstructs.avl_tree`           | `AVLTree`          | keys in pre-order                             |

The line helpers used for this live in `labstructs.persist`
(`read_lines` and `write_lines`).

```python
from labstructs.linked_list import LinkedList
from labstructs.avl_tree import AVLTree

items = LinkedList("linkedlist.data")
items.push_tail("apple")
items.push_head("pear")
print(list(items), "apple" in items)

tree = AVLTree("AVLtree.data")
for word in ["m", "c", "x", "a"]:
    tree.insert(word)
print(list(tree), tree.preorder(), tree.height())
```

`HashTable` holds at most 500 entries and buckets keys with `hash_key`.
`AVLTree.insert` and `AVLTree.remove` return whether the tree changed.

Operations that cannot be carried out raise exceptions from
`labstructs.errors`, all derived from `StructureError`:
`EmptyStructureError` (also an `IndexError`), `CapacityError` and
`NotFoundError` (also a `LookupError`). Bad indices raise `IndexError`.

## Interactive shell

`labstructs-shell` opens one instance of every persistent structure in a
directory (the current one unless given as an argument) and reads commands
line by line until `exit` or end of input:

```
labstructs-shell
> APUSH hello
> AREAD
> LPUSH_TAIL one
> QPUSH job
> SPUSH plate
> HPUSH colour blue
> HGET colour
> TPUSH k
> TSEARCH k
> PRINT
> exit
```

| Structure          | Commands                                                                 |
|--------------------|--------------------------------------------------------------------------|
| array (capacity 10)| `APUSH v`, `AINSERT i v`, `APOP i`, `AREPLACE i v`, `ALENGTH`, `AGET i`, `AREAD` |
| doubly linked list | `DLPUSH_HEAD v`, `DLPUSH_TAIL v`, `DLPOP_HEAD`, `DLPOP_TAIL`, `DLPOP_VALUE v`, `DLSEARCH v`, `DLREAD` |
| linked list        | `LPUSH_HEAD v`, `LPUSH_TAIL v`, `LPOP_HEAD`, `LPOP_TAIL`, `LPOP_VALUE v`, `LSEARCH v`, `LREAD` |
| queue              | `QPUSH v`, `QPOP`, `QREAD`                                               |
| stack              | `SPUSH v`, `SPOP`, `SREAD`                                               |
| hash table         | `HPUSH k v`, `HPOP k`, `HGET k`                                          |
| AVL tree           | `TPUSH v`, `TPOP v`, `TSEARCH v`, `TREAD`                                |
| everything         | `PRINT`                                                                  |

The same loop is available from Python through `labstructs.shell.Workspace`,
whose `execute` method runs a single query and writes its output to the
stream given as `out` (standard output by default).

## In-memory structures

- `labstructs.fixed_array.FixedArray` – an array with a fixed capacity and an
  in-place Shell sort (`shell_sort`) that orders elements largest first.
- `labstructs.bst.BinarySearchTree` – an unbalanced search tree whose
  `insert` returns the depth at which a new key landed (root is 1), or
  `None` for duplicates and for the key 0, which is never stored.
- `labstructs.value_set.HashSet` – a set of strings on a chained hash table.

## Exercises

```python
from labstructs.roman import int_to_roman
from labstructs.rpn import infix_to_postfix, evaluate_postfix
from labstructs.subarrays import subarrays_with_sum, split_similar

print(int_to_roman(1994))                              # MCMXCIV
print(infix_to_postfix("2*(3+4)"))                     # "2 3 4 + * "
print(evaluate_postfix(infix_to_postfix("2*(3+4)")))   # 14
print(subarrays_with_sum([4, -7, 1, 5, -4, 0, -3, 2, 4, 1], 5))
print(split_similar([5, 8, 1, 14, 7]))
```

`evaluate_postfix` takes the value on top of the stack as the left operand
of each operator, so `"5 3 -"` gives `-2`; division truncates toward zero.
It raises `ValueError` for malformed expressions and `ZeroDivisionError`
for division by zero.

Each exercise also has a command:

| Command               | What it does                                                          |
|-----------------------|-----------------------------------------------------------------------|
| `labstructs-roman`    | prints a number (argument or stdin) in Roman numerals                 |
| `labstructs-rpn`      | evaluates an infix expression (argument or first word on stdin)       |
| `labstructs-bst`      | `TPUSH n` inserts into a search tree and prints the depth; `TEST` inserts a sample set |
| `labstructs-set`      | `SETADD`, `SETDEL` and `SET_AT` on a set of strings                   |
| `labstructs-subarray` | `APUSH`, `TEST` and `subarray` on an integer array; `--target` sets the sum (default 5) |
| `labstructs-similar`  | `SETADD`, `TEST`, `SIMILAR` and `DISPLAY`                             |

The interactive commands stop on `exit` or end of input.

## Limitations

The data files are plain text written without locking, so two processes
working on the same directory will overwrite each other's changes. Elements
cannot contain line breaks, and the shell splits queries on whitespace, so
shell values cannot contain spaces.