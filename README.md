# dsakit

A small library of classic data structures and algorithms, written in plain
Python with no third-party dependencies.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.singly_linked` | `SinglyLinkedList` |
| `dsakit.doubly_linked` | `DoublyLinkedList` |
| `dsakit.circular` | `CircularList`, `CircularDoublyLinkedList` |
| `dsakit.open_addressing` | `LinearProbingTable`, `TableFullError` |
| `dsakit.chained_hash` | `ChainedHashTable` |
| `dsakit.coalesced_hash` | `CoalescedHashTable`, `CellarHashTable` |
| `dsakit.btree` | `BTree` |
| `dsakit.bst` | `BinarySearchTree`, `BSTNode`, `is_prime`, `parse_values`, `load_tree` |
| `dsakit.graph` | `Edge`, `parse_graph`, `read_graph`, `bellman_ford`, `prim`, `ShortestPaths`, `SpanningTree`, `NegativeCycleError` |

Where an operation cannot be carried out, the library raises an exception:
`IndexError` for positions out of range or pops from an empty list,
`ValueError` for values missing from a list, `KeyError` for keys missing from
a tree or hash table, and `TableFullError` (a subclass of `OverflowError`)
when a fixed-size hash table has no room left.

## Examples

### Linked lists

```python
from dsakit.singly_linked import SinglyLinkedList
from dsakit.doubly_linked import DoublyLinkedList
from dsakit.circular import CircularDoublyLinkedList

items = SinglyLinkedList([1, 2, 3])
items.insert(1, 9)         # [1, 9, 2, 3]
items.replace_all(2, 7)    # returns 1; list is [1, 9, 7, 3]
items.value_at(2)          # 7
items.delete_at(0)         # returns 1

deque = DoublyLinkedList([1, 2, 3])
deque.push_front(0)
deque.pop_back()           # 3
list(reversed(deque))      # [2, 1, 0]

ring = CircularDoublyLinkedList([1, 2, 3, 2])
ring.positions(2)          # [2, 4]  (1-based)
ring.reverse()
list(ring)                 # [2, 3, 2, 1]
```

### Hash tables

```python
from dsakit.open_addressing import LinearProbingTable
from dsakit.chained_hash import ChainedHashTable
from dsakit.coalesced_hash import CoalescedHashTable

probing = LinearProbingTable(10)
for key in (23, 34, 56, 78, 12):
    probing.insert(key)
34 in probing              # True
probing.remove(34)

chained = ChainedHashTable(11)
for value in (27, 5, 16):
    chained.insert(value)
chained.buckets()[5]       # [5, 16, 27], each bucket kept in order

coalesced = CoalescedHashTable(7)
coalesced.insert(10)       # 3, its home slot
coalesced.insert(17)       # 6, the highest free slot
coalesced.find(17)         # 6
```

`CellarHashTable(size, address_size)` hashes into the first `address_size`
slots and places collisions in the slots above them.

### B-tree

```python
from dsakit.btree import BTree

tree = BTree(3)
for key in (10, 20, 5, 6, 12, 30, 7, 17):
    tree.insert(key)
tree.remove(6)
list(tree)                 # [5, 7, 10, 12, 17, 20, 30]
6 in tree                  # False
```

### Binary search tree

```python
from dsakit.bst import BinarySearchTree, load_tree

tree = BinarySearchTree([6, 5, -3, 2, 12, -5, 8, 9, 1, 20])
list(tree)                 # [-5, -3, 1, 2, 5, 6, 8, 9, 12, 20]
tree.preorder()            # [6, 5, -3, -5, 2, 1, 12, 8, 9, 20]
tree.leaves()              # [-5, 1, 9, 20]
tree.minimum(), tree.maximum()   # (-5, 20)
tree.count_primes()        # 2
tree.total()               # 55
```

`load_tree(path)` builds a tree from a file of integers separated by
whitespace, commas or semicolons.

### Graphs

A graph file's first line lists the vertices, separated by single spaces;
the rest holds `u v weight` triples. Vertices are numbered from 1.

```python
from dsakit.graph import parse_graph, bellman_ford, prim

vertex_count, edges = parse_graph("1 2 3\n1 2 4\n2 3 -2\n1 3 5\n")
paths = bellman_ford(vertex_count, 1, edges)
paths.distances            # {1: 0, 2: 4, 3: 2}
paths.paths[3]             # [1, 2, 3]

tree = prim(vertex_count, edges)
tree.edges                 # [(1, 2), (2, 3)]
tree.weight                # 2
```

`read_graph(path)` does the same for a file. `bellman_ford` raises
`NegativeCycleError` when a negative-weight cycle is reachable.

## What this package does not do

- It is a library only: there is no command-line program and no interactive
  menu for building or inspecting the structures.
- It has no sorting routines, stacks or queues; use Python's `sorted`,
  `list` and `collections.deque` for those.
- It offers no further queries on binary search trees beyond those of
  `BinarySearchTree` (no median, nearest common ancestor or
  predecessor/successor lookups).
- Nothing is stored persistently; every structure lives in memory.