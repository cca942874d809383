"""Command-line entry point: read numbers, print the operations that sort them."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from pushswap.bench import print_bench
from pushswap.parsing import InputError, Mode, parse_input
from pushswap.sorting import sort
from pushswap.stacks import Machine, compute_disorder, index_stack, is_sorted

_STRATEGY_NAMES = {
    Mode.SIMPLE: "Simple",
    Mode.MEDIUM: "Medium",
    Mode.COMPLEX: "Complex",
    Mode.ADAPTIVE: "Adaptive",
}


def bench_meta(mode: Mode, disorder: float) -> tuple[str, str]:
    """Name of the strategy and its complexity class for the bench report."""
    strategy = _STRATEGY_NAMES.get(mode, "Adaptive")
    adaptive = mode is Mode.ADAPTIVE
    if mode is Mode.SIMPLE:
        complexity = "O(n^2)"
    elif mode is Mode.MEDIUM or (adaptive and 0.2 <= disorder < 0.5):
        complexity = "O(n*sqrt(n))"
    elif adaptive and disorder < 0.2:
        complexity = "O(n)"
    else:
        complexity = "O(n log n)"
    return strategy, complexity


def run(
    args: Sequence[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Sort the numbers in *args*, writing operations to *out*; return the exit code."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    if not args:
        return 0
    try:
        config, values = parse_input(args)
    except InputError:
        err.write("Error\n")
        return 1
    machine = Machine(values, out)
    index_stack(machine.a)
    disorder = compute_disorder(machine.a)
    if not is_sorted(machine.a):
        sort(machine, config.mode)
    if config.bench:
        strategy, complexity = bench_meta(config.mode, disorder)
        print_bench(machine.counts, disorder, strategy, complexity, file=err)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on *argv*, the command-line arguments by default."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())