# algonotes

A collection of small, dependency-free implementations of classic
algorithms, data structures and concurrency patterns, each in its own
module with a plain function or class interface.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.textops` | `reverse_string`, `reverse_chars` (in place), `reverse_words`, `string_length`, `copy_string`, `concat` |
| `algonotes.wordplay` | `fizz_buzz`, `longest_palindrome` (Manacher's algorithm), `length_of_longest_substring` |
| `algonotes.ipaddr` | `is_valid_segment`, `restore_ip_addresses` |
| `algonotes.infix` | `precedence`, `infix_to_postfix`, `evaluate_postfix`, `solve`, `main` |
| `algonotes.lru` | `LRUCache` |
| `algonotes.sequences` | `longest_consecutive`, `bubble_sort`, `insertion_sort`, `drain_max_heap` |
| `algonotes.grids` | `diagonal_order`, `min_cost_connect_points`, `find_cities` |
| `algonotes.linkedlist` | `Node`, `LinkedList`, `from_values`, `read_list`, `format_list`, `iter_nodes`, `find_loop`, `find_middle`, `reverse`, `reverse_between`, `selection_sort_nodes`, `selection_sort_values` |
| `algonotes.tree` | `TreeNode`, `BinaryTree` (in-, pre-, post- and level-order traversals), `BST` |
| `algonotes.containers` | `Stack`, `Queue` |
| `algonotes.allocator` | `Block`, `MemoryPool` – a first-fit allocator over a simulated pool |
| `algonotes.threadpool` | `ThreadPool` |
| `algonotes.boundedqueue` | `RequestManager`, `QueueTimeout` – a bounded queue with timed waits |
| `algonotes.oddeven` | `odd_even` – two threads taking turns |
| `algonotes.accounts` | `Account`, `transfer` – transfers that lock both accounts safely |

Errors are raised as exceptions: popping an empty `Stack` or `Queue`
raises `IndexError`, a malformed expression raises `ValueError`, an
exhausted `MemoryPool` raises `MemoryError`, and a `RequestManager` that
waits too long raises `QueueTimeout`. `LRUCache.get` returns `-1` for a
missing key unless another default is given.

## Examples

```python
from algonotes.wordplay import fizz_buzz, longest_palindrome
from algonotes.ipaddr import restore_ip_addresses
from algonotes.infix import infix_to_postfix, solve
from algonotes.lru import LRUCache

fizz_buzz(5)                              # ['1', '2', 'Fizz', '4', 'Buzz']
longest_palindrome("babad")               # 'bab'
restore_ip_addresses("25525511135")       # ['255.255.11.135', '255.255.111.35']
infix_to_postfix("(3+4)*2")               # '34+2*'
solve("(3+4)*2")                          # 14

cache = LRUCache(2)
cache.put(1, 101)
cache.put(2, 102)
cache.get(1)                              # 101
cache.put(3, 103)                         # evicts key 2, the least recently used
2 in cache                                # False
cache.items()                             # [(3, 103), (1, 101)]
```

Trees and lists:

```python
from algonotes.tree import BST
from algonotes.linkedlist import LinkedList, find_middle, reverse, format_list

tree = BST()
for value in (10, 5, 20, 3, 7):
    tree.insert(value)
tree.inorder()                            # [3, 5, 7, 10, 20]
tree.remove(5)
tree.level_order()                        # [10, 7, 20, 3]

numbers = LinkedList([1, 2, 3])
numbers.append(4)
list(numbers)                             # [1, 2, 3, 4]
find_middle(numbers.head).val             # 3
format_list(reverse(numbers.head))        # '4 -> 3 -> 2 -> 1'
```

The simulated allocator hands out offsets into its pool, each block
behind a 24-byte header, with sizes rounded up to 8:

```python
from algonotes.allocator import MemoryPool

pool = MemoryPool(4096)
first = pool.alloc(1024)                  # 24
second = pool.alloc(1024)                 # 1072
pool.free(first)
pool.free(second)
len(pool.blocks())                        # 1 – free neighbours are merged
```

The thread pool works as a context manager and waits for queued tasks
when it shuts down:

```python
from algonotes.threadpool import ThreadPool

with ThreadPool(4) as pool:
    for n in range(10):
        pool.enqueue(lambda n=n: print(n))
```

## Command line

The infix evaluator can be run directly; it prints the expression, its
postfix form and the result, and defaults to `(3+4)*2` when no
expression is given:

```
algonotes-infix "(3+4)*2"
```

Operands are single digits and the operators are `+`, `-`, `*` and `/`
(division truncates toward zero), with parentheses for grouping. On a
malformed expression it prints an error and exits with status 1.

## What it does not do

`algonotes-infix` is the only command; every other module is used from
Python. The allocator manages a simulated pool and returns integer
offsets, not real memory. There is nothing here for inter-process
communication such as shared memory or message queues.