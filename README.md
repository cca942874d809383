# pushswap

pushswap sorts a list of distinct integers. It has two stacks, **a** and
**b**, and it may change them only with this fixed set of operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, of b, or of both |
| `pa`, `pb` | move the top of b onto a, or move the top of a onto b |
| `ra`, `rb`, `rr` | rotate up, so the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down, so the bottom element comes to the top |

The program prints each operation it carries out on its own line on standard
output. If you apply those operations to the input in order, stack a ends up
sorted in ascending order and stack b ends up empty. An operation has no
effect when its stacks hold too few elements, and nothing is printed for it.
The operations on both stacks at once (`ss`, `rr`, `rrr`) need at least two
elements in each stack.

## Installation

```
pip install .
```

## Usage

```
push_swap [FLAGS] NUMBERS...
```

You can give the numbers as separate arguments, as strings separated by
spaces, or as a mix of the two:

```
push_swap 3 2 1
push_swap "4 67 3" 87 23
```

You can also run `python -m pushswap.cli` with the same arguments.

Flags go before the numbers. Every argument at the start that begins with
`--` is read as a flag:

- `--simple` moves the minimum to b again and again. This is O(n²).
- `--medium` sorts in chunks of ranks, about O(n√n).
- `--complex` runs a binary radix sort on the ranks, which is O(n log n).
- `--adaptive` is the default. It measures the disorder of the input and
  chooses a strategy from it. Below 0.2 it uses simple. From 0.2 up to but not
  including 0.5 it uses medium. At 0.5 or more it uses complex.
- `--bench` also writes a report to standard error after sorting. The report
  gives the disorder of the input as a percentage, the strategy and its
  complexity class, the total number of operations, and a count for each
  operation.

The disorder is the share of pairs of elements (one above the other) whose
values are in the wrong order. A sorted input has disorder 0.

Inputs of up to five numbers always use small, dedicated routines, whatever
mode you choose. Input that is already sorted produces no operations.

If the program is given no arguments at all, it prints nothing and exits with
status 0. If anything is wrong with the input, it prints `Error` to standard
error and exits with status 1. The input is wrong when:

- a flag is not recognised,
- a token is not an integer made of an optional `+` or `-` and decimal digits,
- a number does not fit in a signed 32-bit integer,
- a number appears more than once,
- no numbers follow the flags.

Only spaces separate numbers inside one argument. Other whitespace is
rejected as part of a token.

## Library use

```python
import sys
from pushswap.parsing import Mode
from pushswap.sorting import sort
from pushswap.stacks import Machine

machine = Machine([5, 1, 4, 2, 3], sys.stdout)
sort(machine, Mode.ADAPTIVE)
print([node.data for node in machine.a])
print(machine.counts.total)
```

Here is what each module provides:

- `pushswap.stacks` has `Machine`. Its `a` and `b` attributes are the two
  stacks. It has one method for each operation, and each method returns
  whether the operation took effect. Its `counts` attribute is an `OpCounts`
  that tallies the operations. The module also has `build_stack`,
  `is_sorted`, `compute_disorder` and `index_stack`.
- `pushswap.sorting` has `sort(machine, mode)` and the individual strategies:
  `sort_3`, `sort_5`, `simple_min_extract`, `chunk_sort`, `radix_sort` and
  `adaptive_sort`.
- `pushswap.parsing` has `Mode`, `Config`, `parse_flags`, `collect_tokens`,
  `atoi_strict`, `validate_and_parse` and `parse_input`. These raise
  `InputError` for bad input.
- `pushswap.bench` has `format_bench` and `print_bench`, which build and write
  the benchmark report.
- `pushswap.cli` has `run(args, out, err)`. It does what the command does and
  returns the exit status.