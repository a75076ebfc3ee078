# xclkit

A small toolkit of general-purpose building blocks:

- `xclkit.slice_list.SliceList`: a list whose capacity grows in slices of
  `SLICE_CAP` (512) items, with range insert, remove, fill and get.
- `xclkit.vector.Vector`: a growable array with explicit capacity handling
  (`reserve`, `resize`, `capacity`), doubling when it runs out of room.
- `xclkit.int128`: `Int128` and `UInt128` values made of two 64-bit halves,
  with wrap-around addition and subtraction and bit reinterpretation between
  the two.
- `xclkit.sorted_tree.SortedTree`: a red-black tree keeping items ordered by
  a key function and a three-way compare function; duplicates are allowed
  unless `add` is called with `unique=True`. Offers `find`, `lower_bound`,
  `upper_bound`, `equal_range`, `pop`, `copy`, `swap`, `move_from` and
  `verify`.
- `xclkit.thread`: `create_thread` starts a thread and returns a
  `ThreadHandle` that can be joined, joined with a timeout, or detached;
  `current_thread_id` gives the OS thread id.
- `xclkit.system`: clocks (`current_millis`, `nanos`, `gettimeofday`),
  `msleep`, exit handlers (`post_exit`, `run_exit_handlers`, at most 256,
  run at interpreter exit), `page_size` and `alloc_pages`.
- `xclkit.atomic`: `AtomicInt` (8, 16, 32 or 64-bit, wrapping) and
  `AtomicRef`, with load, store, exchange, fetch-add/sub and
  compare-exchange returning a `CasResult`.

## Installation

```
pip install xclkit
```

## Examples

```python
from xclkit.sorted_tree import SortedTree

tree = SortedTree()
for value in (5, 1, 3, 3):
    tree.add(value)
print(list(tree))            # [1, 3, 3, 5]
print(tree.equal_range(3))   # [3, 3]
print(tree.add(5, True))     # False, key already present
print(tree.first(), tree.last())  # 1 5
```

```python
from xclkit.vector import Vector

vec = Vector()
vec.push(1)
vec.insert(0, [0])
print(list(vec), vec.capacity())  # [0, 1] 8
```

```python
from xclkit.int128 import Int128, UInt128

print(int(Int128.from_int(-1).to_unsigned()) == 2**128 - 1)         # True
print(int(UInt128.from_int(0) - UInt128.from_int(1)) == 2**128 - 1)  # True
```

```python
from xclkit.atomic import AtomicInt

counter = AtomicInt(8, 127)
print(counter.fetch_add(1), counter.load())  # 127 -128
result = counter.compare_exchange(-128, 0)
print(bool(result), result.value)            # True -128
```

```python
from xclkit.thread import create_thread
from xclkit.system import post_exit

handle = create_thread(lambda: print("working"))
handle.join()
post_exit(lambda: print("bye"))
```

## What it does not do

The package has no mutable string buffer, no filesystem helpers (directory
iteration, copying, creating directories), no per-thread storage keys, and
no mutex or condition-variable types. Use the standard library's `str`,
`os`/`shutil`/`pathlib`, `threading.local`, `threading.RLock` and
`threading.Condition` for those.

## Running the tests

```
pip install "xclkit[test]"
pytest
```