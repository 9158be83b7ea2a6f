# dsakit

Small data structures with no dependencies, written to be easy to read:

- `SinglyLinkedList` (`dsakit.linked_list`): insert at either end, get and remove by index.
- `BST` (`dsakit.binary_tree`): an integer binary search tree with insert, contains, remove, min/max, pre-order traversal and rebuilding.
- `Queue` (`dsakit.fifo_queue`): a first-in, first-out queue.
- `Stack` (`dsakit.stack`): a last-in, first-out stack.

This is a library only. It has no command-line tool.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

### Singly linked list

```python
from dsakit.linked_list import SinglyLinkedList

items = SinglyLinkedList()
for n in (5, 10, 15):
    items.insert_end(n)
items.insert_front(1)

len(items)        # 4
items.get(2)      # 10
items.remove(0)
list(items)       # [5, 10, 15]
items.first()     # 5
items.last()      # 15
```

`get` and `remove` raise `IndexError` ("list is empty") on an empty list and
`IndexError` ("index out of range") for an index that is negative or past the
end. `first` and `last` raise `IndexError` on an empty list.

### Binary search tree

```python
from dsakit.binary_tree import BST

tree = BST()
for n in (5, 10, 15, 1):
    tree.insert(n)

tree.contains(10)       # True
tree.get_min()          # 1
tree.get_max()          # 15
list(tree.preorder())   # [5, 1, 10, 15]
tree.remove(10)         # returns the tree
tree.balance()
```

Each `BST` node is the root of its own tree. Equal values go to the right
subtree. A fresh `BST()` holds the value 0; the first non-zero value inserted
into it replaces that 0 as the root.

`remove` deletes one node holding the value and returns the tree. It returns
`None` when the value is not in the tree, and also when the value is held by a
root with no children (the tree is then left unchanged).

`balance` rebuilds the tree: it lists the values in pre-order, makes the
middle entry of that list the new root, and inserts the rest in that order.
It does not guarantee a height-balanced tree.

### Queue

```python
from dsakit.fifo_queue import Queue

q = Queue()
q.enqueue(5)
q.enqueue(10)
q.enqueue(15)

q.peek()        # 5
q.peek_last()   # 15
q.dequeue()     # 5
len(q)          # 2
list(q)         # [10, 15]
q.render()      # "10 -> 15\n"
```

`peek` and `peek_last` return `None` on an empty queue. `dequeue` and `render`
raise `IndexError` on an empty queue.

### Stack

```python
from dsakit.stack import Stack

s = Stack(default=0)
s.push(4)
s.push(5)
s.push(6)

s.peek()     # 6
list(s)      # [6, 5, 4], top to bottom
s.render()   # "6 -> 5 -> 4\n"
s.pop()      # 6
len(s)       # 2
```

`default` (`None` unless given) is what `peek` returns on an empty stack.
`pop` on an empty stack leaves it unchanged and returns the default.
`render` raises `IndexError` on an empty stack.