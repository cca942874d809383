import io

import pytest

from pushswap.stacks import (
    Machine,
    Node,
    OpCounts,
    build_stack,
    compute_disorder,
    index_stack,
    is_sorted,
)


def values(stack):
    return [node.data for node in stack]


def make(a_values, b_values=()):
    out = io.StringIO()
    machine = Machine(a_values, out)
    for value in reversed(list(b_values)):
        machine.b.appendleft(Node(value))
    return machine, out


def test_build_stack_keeps_order():
    assert values(build_stack([5, -1, 7])) == [5, -1, 7]
    assert values(build_stack([])) == []


def test_is_sorted():
    assert is_sorted(build_stack([1, 2, 3]))
    assert is_sorted(build_stack([]))
    assert is_sorted(build_stack([4]))
    assert not is_sorted(build_stack([2, 1, 3]))


def test_disorder_bounds():
    assert compute_disorder(build_stack([1, 2, 3, 4])) == 0.0
    assert compute_disorder(build_stack([4, 3, 2, 1])) == 1.0
    assert compute_disorder(build_stack([])) == 0.0
    assert compute_disorder(build_stack([9])) == 0.0


def test_disorder_is_between_zero_and_one():
    d = compute_disorder(build_stack([3, 1, 4, 2, 5]))
    assert 0.0 < d < 1.0


def test_index_stack_ranks():
    stack = build_stack([40, -3, 17, 0])
    index_stack(stack)
    assert sorted(node.index for node in stack) == list(range(4))
    by_index = sorted(stack, key=lambda n: n.index)
    assert values(by_index) == sorted(values(stack))


def test_index_stack_duplicates_share_rank():
    stack = build_stack([5, 5, 1])
    index_stack(stack)
    assert stack[0].index == stack[1].index
    assert stack[2].index == 0


def test_opcounts_record():
    counts = OpCounts()
    counts.record("ra")
    counts.record("ra")
    counts.record("pb")
    assert counts.ra == 2
    assert counts.pb == 1
    assert counts.total == 3


def test_opcounts_unknown_name():
    with pytest.raises(ValueError):
        OpCounts().record("xx")


def test_sa_output_and_effect():
    machine, out = make([1, 2, 3])
    assert machine.sa()
    assert values(machine.a) == [2, 1, 3]
    assert out.getvalue() == "sa\n"
    assert machine.counts.sa == 1


def test_ops_on_too_small_stacks_do_nothing():
    machine, out = make([1])
    for op in (machine.sa, machine.sb, machine.ss, machine.pa,
               machine.ra, machine.rb, machine.rr,
               machine.rra, machine.rrb, machine.rrr):
        assert op() is False
    assert values(machine.a) == [1]
    assert out.getvalue() == ""
    assert machine.counts.total == 0


@pytest.mark.parametrize("forward,backward", [
    ("ra", "rra"), ("rb", "rrb"), ("rr", "rrr"),
    ("sa", "sa"), ("sb", "sb"), ("ss", "ss"), ("pb", "pa"),
])
def test_inverse_pairs_restore_state(forward, backward):
    machine, out = make([3, 1, 2], [9, 8, 7])
    before = (values(machine.a), values(machine.b))
    assert getattr(machine, forward)()
    assert getattr(machine, backward)()
    assert (values(machine.a), values(machine.b)) == before
    assert out.getvalue() == f"{forward}\n{backward}\n"
    assert machine.counts.total == 2


def test_rotate_moves_top_to_bottom():
    machine, _ = make([1, 2, 3])
    machine.ra()
    assert values(machine.a) == [2, 3, 1]
    machine.rra()
    machine.rra()
    assert values(machine.a) == [3, 1, 2]


def test_push_moves_between_stacks():
    machine, out = make([1, 2])
    machine.pb()
    machine.pb()
    assert values(machine.a) == []
    assert values(machine.b) == [2, 1]
    assert machine.pb() is False
    assert out.getvalue() == "pb\npb\n"


def test_double_ops_need_both_stacks():
    machine, out = make([1, 2], [5])
    assert machine.ss() is False
    assert machine.rr() is False
    assert machine.rrr() is False
    assert out.getvalue() == ""


def test_counts_match_output_lines():
    machine, out = make([4, 3, 2, 1])
    machine.pb()
    machine.pb()
    machine.rr()
    machine.rrr()
    machine.ss()
    machine.pa()
    lines = out.getvalue().splitlines()
    assert lines == ["pb", "pb", "rr", "rrr", "ss", "pa"]
    assert machine.counts.total == len(lines)
    assert sum(v for k, v in machine.counts.as_dict().items() if k != "total") == len(lines)