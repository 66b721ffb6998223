# dsakit

A small, dependency-free collection of classic algorithms and data
structures, meant for learning and for experimenting at the REPL.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.numbers` | `is_armstrong`, `any_base_to_decimal`, `hexadecimal_to_decimal`, `decimal_to_base`, `decimal_to_hexadecimal`, `reverse_number`, `add_binary_numbers`, `fibonacci`, `factorial`, `pascal_triangle`, `is_prime`, `primes_between` |
| `dsakit.searching` | `linear_search`, `binary_search` (both return `-1` when the key is absent), `matrix_contains` for a matrix with sorted rows and columns |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `sort_012`, `sort_binary`, `merge_sorted`, `heap_sort`, `k_sorted_sort` |
| `dsakit.arrays` | `sum_of_digit_arrays`, `rotate_left`, `second_largest`, `matrix_multiply`, `spiral_order` |
| `dsakit.text` | `is_palindrome`, `is_balanced`, `longest_word`, `reverse_words` |
| `dsakit.patterns` | `butterfly`, `number_pyramid`, `diamond`, `lattice`, each a list of lines |
| `dsakit.backtracking` | `n_queens`, `maze_paths`, `solve_sudoku` |
| `dsakit.hashmap` | `OurMap`, a string-keyed separate-chaining hash map that doubles its buckets above a load factor of 0.7; `remove_duplicates` |
| `dsakit.dynamic_array` | `DynamicArray`, a growable array whose capacity starts at 5 and doubles |
| `dsakit.fraction` | `Fraction`, with `add`, `increment`, `simplify`, `+`, `+=`, `*` and `==` |
| `dsakit.polynomial` | `Polynomial`, with `set_coefficient`, `copy`, `+`, `-`, `*` and `==` |
| `dsakit.priority_queue` | `PriorityQueue`, a min-heap; `run_commands` and the `dsakit-pq` command |
| `dsakit.search_tree` | `Node`, `BinarySearchTree`, `RandomBinaryTree` and the `inorder`, `preorder`, `postorder` generators |
| `dsakit.binary_tree` | `BinaryTreeNode`, `build_level_order`, `build_preorder`, `format_level_order`, `format_preorder`, `count_nodes` |
| `dsakit.generic_tree` | `TreeNode`, `build_level_order`, `build_preorder`, `format_level_order`, `format_tree`, `preorder`, `postorder` |

A few behaviours worth knowing:

- The sorting functions return a new list and leave their input alone.
  `heap_sort` and `k_sorted_sort` return their result in **descending** order.
- `OurMap.get` and `OurMap.remove` raise `KeyError` for a missing key;
  `OurMap` also supports `in`, `len`, `m[key]`, `m[key] = value` and `del m[key]`.
- `DynamicArray.get` raises `IndexError` past the end; `set` at an index equal
  to the length appends.
- `Fraction` is not reduced when built, and `==` compares numerator and
  denominator as stored, so `Fraction(3, 6) == Fraction(1, 2)` is `False`.
- `PriorityQueue.get_min` and `remove_min` raise `IndexError` on an empty queue.
- In the tree builders, `-1` marks a missing child of a binary tree; generic
  trees are read as node data followed by a child count. Input that ends too
  early raises `ValueError`.

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
from dsakit.numbers import fibonacci
from dsakit.sorting import bubble_sort, merge_sorted
from dsakit.hashmap import OurMap, remove_duplicates
from dsakit.fraction import Fraction
from dsakit.priority_queue import PriorityQueue

print(fibonacci(5))                   # [0, 1, 1, 2, 3]
print(bubble_sort([3, 1, 2]))         # [1, 2, 3]
print(merge_sorted([1, 4], [2, 3]))   # [1, 2, 3, 4]

print(remove_duplicates([1, 2, 1, 3]))   # [1, 2, 3]

scores = OurMap()
scores.insert("abc", 1)
print(scores.get("abc"), len(scores))    # 1 1

print(Fraction(3, 6) + Fraction(3, 9) == Fraction(5, 6))   # True

pq = PriorityQueue()
for value in (10, 1, 20):
    pq.insert(value)
print(pq.get_min())      # 1
print(pq.remove_min())   # 1
print(len(pq))           # 2
```

## Command line

The `dsakit-pq` command drives a min-priority queue with numeric commands
read from standard input, printing one line per result:

| Command | Effect |
| --- | --- |
| `1 <value>` | insert a value |
| `2` | print the minimum (`0` if the queue is empty) |
| `3` | remove and print the minimum (`0` if the queue is empty) |
| `4` | print the size |
| `5` | print `true` if the queue is empty, otherwise `false` |
| `-1` | stop |

Any other number, or the end of input, also stops.

```
$ echo "1 5 1 2 2 3 4 5 -1" | dsakit-pq
2
2
1
false
```

The same interpreter is available as `dsakit.priority_queue.run_commands`,
which takes the tokens and returns the printed lines as a list.

## What it does not do

Apart from `dsakit-pq`, the package offers no commands: the other
algorithms are library functions. The tree builders take lists of values
rather than prompting for input interactively, and the pattern functions
return lines instead of printing them.