# boundedkit

Small containers that hold at most a fixed number of items, a bump-style
arena allocator, and an AVL tree with a fixed node budget. A container
raises an error when its capacity runs out instead of growing past the
limit you set.

## Installing

```
pip install boundedkit
```

The tests need pytest:

```
pip install "boundedkit[test]"
pytest
```

## What is in it

| Module | Name | What it does |
| --- | --- | --- |
| `boundedkit.vector` | `Vector` | Fixed-capacity sequence: `add`, `remove`, `at`, indexing, iteration, `copy` |
| `boundedkit.boundedmap` | `Map` | Fixed-capacity map with unique keys kept in insertion order: `add`, `at`, `remove`, `items`, `copy`, `in`, indexing |
| `boundedkit.fifo` | `Queue` | First in, first out: `enqueue`, `dequeue`, `front`, `back` |
| `boundedkit.lifo` | `Stack` | Last in, first out: `push`, `pop`, `top` (newest item), `back` (oldest item) |
| `boundedkit.avltree` | `AVLTree` | Self-balancing binary tree: `insert`, sorted iteration, `height()`, `root()` |
| `boundedkit.arena` | `Allocator`, `LinearPolicy`, `MemPolicy` | A byte arena that hands out regions by bumping an offset |
| `boundedkit.text` | `BoundedString` | A mutable string of at most 24 characters |

## Errors

- `Vector.add`, `Queue.enqueue`, `Stack.push` and `Map.add` on a new key
  raise `OverflowError` when the capacity is full; `BoundedString +=`
  does the same past 24 characters.
- `Vector.remove` and `Vector.at` raise `IndexError` for a bad index;
  `Queue` and `Stack` raise `IndexError` when read or popped while empty.
- `Map[key]` raises `KeyError` for a missing key, while `Map.at(key)`
  returns `None` and `Map.remove(key)` ignores it.
- `AVLTree.insert` raises `MemoryError` once `capacity` nodes are stored.
- `LinearPolicy.alloc` raises `MemoryError` when the request would reach
  the end of the arena (the last byte is never handed out), and
  `Allocator` raises `ValueError` once it has been closed.

## Examples

```python
from boundedkit.vector import Vector
from boundedkit.fifo import Queue
from boundedkit.lifo import Stack
from boundedkit.boundedmap import Map

v = Vector(4)
v.add(1)
v.add(2)
v.remove(0)
print(list(v))        # [2]

q = Queue(8)
q.enqueue("a")
q.enqueue("b")
print(q.dequeue())    # a

s = Stack(8)
s.push(1)
s.push(2)
print(s.pop())        # 2

m = Map(16)
m["x"] = 1
m.add("x", 2)         # keys are unique; the value is replaced
print(m["x"], len(m)) # 2 1
```

An `Allocator` owns a `bytearray` of `capacity` bytes. `alloc(size)`
returns a writable `memoryview` over the next `size` bytes; `free`
releases everything at once, whatever it is given. Closing the allocator
(or leaving its `with` block) zeroes the arena.

```python
from boundedkit.arena import Allocator

with Allocator(1024) as allocator:
    first = allocator.alloc(16)
    first[0] = 255
    second = allocator.alloc(32)
    allocator.free(first)   # resets the whole arena
```

`LinearPolicy(capacity, arena)` can also be used on its own over any
writable buffer at least `capacity` bytes long; its `used` property tells
how many bytes have been handed out since the last reset.

The tree keeps itself balanced as you insert (equal items go to the
right) and iterates in sorted order:

```python
from boundedkit.avltree import AVLTree

tree = AVLTree(64)
for n in range(10, 16):
    tree.insert(n)
print(list(tree), tree.height(), tree.root())
```

## What it does not do

- The arena has only the linear policy: blocks cannot be freed one at a
  time, and there is no free-list or pool allocation.
- `AVLTree` supports insertion and ordered iteration only; it has no
  search, update or removal.