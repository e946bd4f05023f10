# cpsolve

Short, tested solutions to classic competitive-programming exercises. Each
one is an ordinary Python function. It takes input that has already been
parsed and returns the answer. The package also has a few small teaching data
structures.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cpsolve.basics`: implementation exercises such as `presents`,
  `polyhedron_faces`, `arrival_swaps`, `beautiful_matrix_moves`,
  `bit_plus_plus`, `fix_you`, `fox_snake`, `game_23_moves` and
  `rearrange_sum`.
- `cpsolve.constructive`: constructive and string exercises such as
  `longest_increasing_run`, `whiteboard`, `lena_pattern`,
  `decrypt_repeating_cipher`, `string_task`, `round_summands`,
  `pyramid_height`, `invert_digits` and `k_string`.
- `cpsolve.arithmetic`: number puzzles such as `emote_happiness`,
  `balanced_array`, `minimal_square_area`, `can_share_coins`,
  `floor_number`, `lcm_pair`, `can_reach_cell`, `required_remainder`,
  `three_pairwise_maximums` and `fix_caps_lock`.
- `cpsolve.containers`: FIFO queues and LIFO stacks.
  - `ArrayQueue` and `ArrayStack` have a fixed `capacity`, which defaults to
    10. Pushing onto a full one raises `OverflowError`.
  - `LinkedQueue` and `LinkedStack` are unbounded.
  - In all four, `pop` and `peek` raise `IndexError` when the container is
    empty.
- `cpsolve.linked_lists`: `SinglyLinkedList` and `DoublyLinkedList`.
  - Both provide `insert_at` and `delete_at`, with positions counted from 1.
    These methods ignore positions that fall outside the list.
  - `SinglyLinkedList.insert_before` raises `ValueError` when no node holds
    the target value.
  - `DoublyLinkedList` can also be iterated backwards with `reversed()`.

Exercises with no valid answer return `-1` or `None`, as each function's
docstring describes. Input that cannot be processed raises `ValueError`.

## Example

```python
from cpsolve.basics import presents, rearrange_sum
from cpsolve.arithmetic import lcm_pair
from cpsolve.containers import ArrayQueue

presents([2, 3, 4, 1])      # [4, 1, 2, 3]
rearrange_sum("3+2+1")      # "1+2+3"
lcm_pair(1, 1337)           # (1, 2)

queue = ArrayQueue()
queue.push(10)
queue.push(20)
queue.pop()                 # 10
len(queue)                  # 1
```

## What it does not do

The package is a library only. It installs no command-line program, and it
does not read problem input from standard input or print answers in a judge's
output format. Parsing the input and formatting the output are left to the
caller.