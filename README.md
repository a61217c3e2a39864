# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install dsakit
```

## What is inside

| Module                 | Contents                                                              |
|------------------------|-----------------------------------------------------------------------|
| `dsakit.dsu`           | `DisjointSet` (union by size, path compression), `count_components`   |
| `dsakit.mst`           | `kruskal` — minimum spanning tree by Kruskal's algorithm              |
| `dsakit.linked_queue`  | `LinkedQueue` — FIFO queue on singly linked nodes                     |
| `dsakit.array_stack`   | `ArrayStack` — bounded stack; `StackEmptyError`, `StackFullError`     |
| `dsakit.linked_list`   | `LinkedList` and the unbounded `ListStack` built on it                |
| `dsakit.trie`          | `Trie` for words made of the letters `a`–`z`                          |
| `dsakit.avl`           | `AVLTree` — self-balancing binary search tree (a sorted multiset)     |
| `dsakit.lab`           | `counting_sort`, `two_sum_pairs`                                      |

## Examples

### Disjoint sets

```python
from dsakit.dsu import DisjointSet, count_components

ds = DisjointSet(range(1, 6))
ds.union(1, 2)              # True: the sets were separate
ds.union(2, 3)
ds.union(1, 3)              # False: already joined
assert ds.find(1) == ds.find(3)
print(ds.size_of(3))        # 3

print(count_components(5, [(1, 2), (3, 4)]))  # 3
```

`find` and `size_of` raise `KeyError` for an element that was never added with
`make` or the constructor.

### Minimum spanning tree

```python
from dsakit.mst import kruskal

edges, total = kruskal(4, [(1, 2, 1), (2, 3, 2), (1, 3, 5), (3, 4, 3)])
print(edges)   # [(1, 2), (2, 3), (3, 4)]
print(total)   # 6
```

Edges are `(u, v, weight)` over vertices `1..n` and are considered in order of
`(weight, u, v)`.

### Stacks and queues

```python
from dsakit.array_stack import ArrayStack, StackFullError
from dsakit.linked_list import ListStack
from dsakit.linked_queue import LinkedQueue

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackFullError:
    print("full")
print(str(stack))            # "2 1" (top first)
print(stack.top_and_pop())   # 2

unbounded = ListStack()
unbounded.push("a")
unbounded.push("b")
print(str(unbounded))        # "b -> a -> End"

queue = LinkedQueue()
for value in (10, 20, 30):
    queue.push(value)
print(queue.front(), len(queue))   # 10 3
print(queue.pop())                 # 10
```

`pop` on a stack discards the top item; `top_and_pop` removes and returns it.
Reading from an empty stack raises `StackEmptyError` (an `IndexError`); an
empty `LinkedQueue` raises `IndexError`.

### Linked list

```python
from dsakit.linked_list import LinkedList

items = LinkedList()
items.insert_back(1)
items.insert_back(3)
items.insert_after(2, 1)   # insert 2 after the node holding 1
items.update(30, 3)        # replace 3 with 30
print(list(items))         # [1, 2, 30]
items.remove(2)
print(items.remove_end())  # 30
```

Operations that look for a value raise `ValueError` when it is absent;
removing from an empty list raises `IndexError`.

### Trie and AVL tree

```python
from dsakit.trie import Trie
from dsakit.avl import AVLTree

trie = Trie()
trie.insert("apple")
print("apple" in trie, "app" in trie)   # True False
trie.remove("apple")
print(trie.search("apple"))             # False

tree = AVLTree()
for value in (30, 20, 10, 40, 50):
    tree.insert(value)
print(list(tree))       # [10, 20, 30, 40, 50]
print(tree.height())    # 3
tree.delete(20)
print(20 in tree, len(tree))   # False 4
```

Trie words may hold only `a`–`z`; anything else raises `ValueError`.
`AVLTree` keeps duplicates, `delete` removes one occurrence and ignores absent
values, and `preorder()` yields values root first.

### Counting sort and pair search

```python
from dsakit.lab import counting_sort, two_sum_pairs

print(counting_sort([3, 1, 2, 1]))        # [1, 1, 2, 3]
print(two_sum_pairs([2, 7, 11, 15], 9))   # (1, 0, 1)
print(two_sum_pairs([1, 2], 10))          # None
```

`two_sum_pairs` returns `(first, second, count)`: the indices of the last pair
found and the number of pairs, looking up each value's partner at the last
index where that partner occurs.

## Command-line tools

Each tool reads whitespace-separated integers (or words) from standard input.

- `dsakit-components` — reads `n e` followed by `e` edges `u v` over vertices
  `1..n`, and prints the number of connected components.
- `dsakit-mst` — reads `n e` followed by `e` weighted edges `u v w`, prints the
  edges chosen for the minimum spanning tree, one `u v` per line, and then the
  total cost.
- `dsakit-trie` — reads a word count and that many words, then a query count
  and that many queries, printing `FOUND` or `NOT FOUND` for each query (after
  the prompts `ENTER NUMBER OF WORDS` and `ENTER NUMBER OF QUERY`).
- `dsakit-lab sort` — reads `n` and `n` integers and prints them sorted on one
  line.
- `dsakit-lab pairs` — reads `n`, a target and `n` integers; prints the indices
  of the last pair summing to the target and then the pair count, or
  `NO SUCH PAIRS`.

```
printf '4 4\n1 2 1\n2 3 2\n1 3 5\n3 4 3\n' | dsakit-mst
printf '4 9\n2 7 11 15\n' | dsakit-lab pairs
```

## What it does not do

The structures live in memory only; nothing is saved to or loaded from disk,
and none of them is safe to share between threads without your own locking.

## Running the tests

```
pip install dsakit[test]
pytest
```