import io

import pytest

from pushswap.bench import format_bench, format_percent, print_bench
from pushswap.stacks import OpCounts


def _counts(*names):
    counts = OpCounts()
    for name in names:
        counts.record(name)
    return counts


def test_format_percent_pinned():
    assert format_percent(0.0) == "0.00"
    assert format_percent(1.0) == "100.00"


@pytest.mark.parametrize("ratio", [0.0, 0.1234, 0.2, 0.33333, 0.5, 0.98765, 1.0])
def test_format_percent_is_two_decimal_percentage(ratio):
    text = format_percent(ratio)
    whole, frac = text.split(".")
    assert len(frac) == 2
    assert abs(float(text) - ratio * 100) <= 0.005 + 1e-9


def test_format_percent_rounds_half_up():
    assert format_percent(0.12345) == format_percent(0.1235)


def test_format_bench_lines():
    counts = _counts("sa", "pb", "pb", "ra", "rra", "pa", "pa")
    text = format_bench(counts, 0.0, "Adaptive", "O(n)")
    lines = text.splitlines()
    assert len(lines) == 5
    assert all(line.startswith("[bench] ") for line in lines)
    assert text.endswith("\n")
    assert lines[0] == "[bench] disorder: 0.00%"
    assert lines[1] == "[bench] strategy: Adaptive / O(n)"
    assert lines[2] == f"[bench] total_ops: {counts.total}"
    assert counts.total == 7


def test_format_bench_counts_appear_per_operation():
    counts = _counts("sa", "sa", "pb", "rrr")
    text = format_bench(counts, 0.5, "Simple", "O(n^2)")
    fields = dict(
        zip(text.replace("\n", " ").split()[::1][::2], text.split()[1::2])
    )
    ops_line = text.splitlines()[3].split()[1:]
    parsed = dict(zip(ops_line[::2], map(int, ops_line[1::2])))
    assert parsed == {"sa:": 2, "sb:": 0, "ss:": 0, "pa:": 0, "pb:": 1}
    rot_line = text.splitlines()[4].split()[1:]
    parsed_rot = dict(zip(rot_line[::2], map(int, rot_line[1::2])))
    assert parsed_rot == {
        "ra:": 0, "rb:": 0, "rr:": 0, "rra:": 0, "rrb:": 0, "rrr:": 1,
    }
    assert fields


def test_print_bench_writes_report():
    counts = _counts("pb", "pa")
    buffer = io.StringIO()
    print_bench(counts, 0.25, "Medium", "O(n*sqrt(n))", file=buffer)
    assert buffer.getvalue() == format_bench(
        counts, 0.25, "Medium", "O(n*sqrt(n))"
    )


def test_print_bench_defaults_to_stderr(capsys):
    counts = _counts("ra")
    print_bench(counts, 1.0, "Complex", "O(n log n)")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == format_bench(counts, 1.0, "Complex", "O(n log n)")