"""The benchmark report written to standard error."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.stacks import OpCounts


def format_percent(disorder: float) -> str:
    """Render a 0..1 ratio as a percentage with two decimals, rounding half up."""
    scaled = int(disorder * 10000.0 + 0.5)
    return f"{scaled // 100}.{(scaled // 10) % 10}{scaled % 10}"


def format_bench(
    counts: OpCounts, disorder: float, strategy: str, complexity: str
) -> str:
    """Build the full benchmark report, one ``[bench]`` line per item."""
    c = counts
    return (
        f"[bench] disorder: {format_percent(disorder)}%\n"
        f"[bench] strategy: {strategy} / {complexity}\n"
        f"[bench] total_ops: {c.total}\n"
        f"[bench] sa: {c.sa} sb: {c.sb} ss: {c.ss} pa: {c.pa} pb: {c.pb}\n"
        f"[bench] ra: {c.ra} rb: {c.rb} rr: {c.rr} "
        f"rra: {c.rra} rrb: {c.rrb} rrr: {c.rrr}\n"
    )


def print_bench(
    counts: OpCounts,
    disorder: float,
    strategy: str,
    complexity: str,
    file: TextIO | None = None,
) -> None:
    """Write the benchmark report to *file*, standard error by default."""
    target = file if file is not None else sys.stderr
    target.write(format_bench(counts, disorder, strategy, complexity))