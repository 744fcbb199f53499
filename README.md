# dsakit

Small, readable implementations of classic data structures and two array
algorithms. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `pair_sum(values, target)` and `max_subarray_sum(values)` |
| `dsakit.stack` | `Stack`, a last-in first-out stack |
| `dsakit.linked_queue` | `LinkedQueue`, a first-in first-out queue built from linked nodes |
| `dsakit.circular_queue` | `CircularQueue`, a fixed-capacity queue on a ring buffer |
| `dsakit.linked_list` | `LinkedList`, a singly linked list |
| `dsakit.doubly_linked_list` | `DoublyLinkedList`, linked in both directions |
| `dsakit.circular_linked_list` | `CircularLinkedList`, whose tail links back to its head |
| `dsakit.binary_tree` | `TreeNode`, `build_tree`, and the `preorder`, `inorder`, `postorder` and `level_order` traversals |
| `dsakit.bst` | Binary search tree functions on `TreeNode` trees: `insert`, `build_bst`, `search`, `inorder_successor`, `delete_node` |
| `dsakit.errors` | `EmptyContainerError` and `FullContainerError`, both subclasses of `IndexError` |

## Array algorithms

- `pair_sum(values, target)` uses the two-pointer technique on a sequence
  sorted in ascending order. It returns a tuple `(i, j)` with `i < j` whose
  values add up to `target`, or `None` when there is no such pair.
- `max_subarray_sum(values)` returns the largest sum of a non-empty contiguous
  run (Kadane's algorithm). It raises `ValueError` for an empty sequence.

```python
from dsakit.arrays import pair_sum, max_subarray_sum

pair_sum([2, 7, 11, 15], 9)        # (0, 1)
pair_sum([2, 7, 11, 15], 100)      # None
max_subarray_sum([1, 2, 3, 4, 5])  # 15
```

## Containers

Reading or removing from an empty container raises `EmptyContainerError`;
pushing onto a full `CircularQueue` raises `FullContainerError`. Removal
methods return the value they removed. Every container supports `len()` and
iteration.

- `Stack`: `push`, `pop`, `top`, `is_empty`. Iteration runs from the top down.
- `LinkedQueue`: `push`, `pop`, `front`, `is_empty`, and `display()`, which
  returns the values front to back separated by spaces, or
  `"Queue is empty Nothing to display"` when empty.
- `CircularQueue(capacity)`: `push`, `pop`, `front`, `is_empty`, the
  `capacity` property, and `slots()`, a copy of the underlying ring including
  slots no longer in use. A capacity below 1 raises `ValueError`.
- `LinkedList`: `append`, `prepend`, `remove(val)` (removes the first match
  and returns whether one was found), and `display()`, which returns
  `"a->b->...->NULL"`.
- `DoublyLinkedList`: `push_front`, `push_back`, `pop_front`, `pop_back`,
  `display_forward()` (`"a->b->NULL"`), `display_backward()`
  (`"b<->a<->NULL"`), and `reversed()` support.
- `CircularLinkedList`: `insert_at_head`, `insert_at_tail`, `delete_at_head`,
  `delete_at_tail`, and `display()`, which returns the values head to tail
  separated by spaces, or `"List is empty"`.

```python
from dsakit.circular_queue import CircularQueue

cq = CircularQueue(3)
cq.push(1)
cq.push(2)
cq.push(3)
cq.pop()                           # 1
cq.push(4)
cq.slots()                         # [4, 2, 3]
list(cq)                           # [2, 3, 4]

from dsakit.linked_list import LinkedList

ll = LinkedList()
ll.append(3)
ll.prepend(2)
ll.prepend(1)
ll.append(7)
ll.remove(7)                       # True
ll.display()                       # '1->2->3->NULL'
```

## Trees

`build_tree` reads a preorder listing in which `-1` marks a missing child.
Values left over once the tree is complete are ignored; a listing that ends
too early raises `ValueError`. The traversals return lists, and
`level_order` returns one list per level.

```python
from dsakit.binary_tree import build_tree, preorder, inorder, postorder, level_order

root = build_tree([1, 2, -1, -1, 3, 4, -1, -1, 5, -1, -1])
preorder(root)                     # [1, 2, 3, 4, 5]
inorder(root)                      # [2, 1, 4, 3, 5]
postorder(root)                    # [2, 4, 5, 3, 1]
level_order(root)                  # [[1], [2, 3], [4, 5]]
```

The search tree functions work on the same `TreeNode` type. `insert` places
equal values to the right. `inorder_successor(node)` returns the leftmost
node of a subtree. `insert` and `delete_node` return the (possibly new) root.

```python
from dsakit.bst import build_bst, search, delete_node
from dsakit.binary_tree import inorder

tree = build_bst([3, 2, 1, 5, 6, 4])
inorder(tree)                      # [1, 2, 3, 4, 5, 6]
search(tree, 6)                    # True
search(tree, 8)                    # False
tree = delete_node(tree, 5)
inorder(tree)                      # [1, 2, 3, 4, 6]
```

## What the package does not do

It is a library only: there is no command-line tool, and nothing prints to
the console. The display methods return strings for the caller to use.

## Running the tests

```
pip install .[test]
pytest
```